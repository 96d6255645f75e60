"""Drawing sprites, animations and rolling dialogue into the frame buffer."""

from __future__ import annotations

import sys
from typing import BinaryIO, Callable, Union

from lockerscene.engine import (
    DIALOGUE_LONG_PAUSE,
    DIALOGUE_MEDIUM_PAUSE,
    DIALOGUE_SHORT_PAUSE,
    NUMBER_OF_PLAYER_CIRCLING_SPRITES,
    ROW_STRIDE,
    SIZE_FRAME,
    TIME_FRAME,
    WIDTH_SCREEN,
    Engine,
    EntityId,
    TextOrientation,
)
from lockerscene.gamelogic import is_even, move_by_keys

Text = Union[bytes, bytearray, memoryview, str]

_SPACE = ord(" ")
_QUOTE = ord('"')
_PAUSES = {
    ord("."): DIALOGUE_LONG_PAUSE,
    ord("!"): DIALOGUE_LONG_PAUSE,
    ord("?"): DIALOGUE_LONG_PAUSE,
    ord(":"): DIALOGUE_MEDIUM_PAUSE,
    ord(";"): DIALOGUE_MEDIUM_PAUSE,
    ord(","): DIALOGUE_SHORT_PAUSE,
    ord("-"): DIALOGUE_SHORT_PAUSE,
}


def _to_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode("latin-1")
    return bytes(text)


def _blit(engine: Engine, row: int, column: int, data: bytes) -> None:
    """Copy ``data`` into the frame at grid position (row, column).

    The grid is addressed as one flat run of rows, so text running past the
    end of a row continues on the next one; anything outside the frame is
    dropped.
    """
    start = 1 + row * ROW_STRIDE + column
    end = start + len(data)
    low = max(start, 0)
    high = min(end, SIZE_FRAME)
    if low < high:
        engine.frame[low:high] = data[low - start : high - start]


def draw_string(engine: Engine, entity: int, text: Text, row: int, column: int) -> None:
    """Copy one sprite row (the entity's width) into the frame."""
    width = engine.entities[entity].width
    _blit(engine, row, column, _to_bytes(text)[:width])


def draw_string_alpha(
    engine: Engine, entity: int, text: Text, row: int, column: int
) -> None:
    """Copy one sprite row into the frame, leaving spaces transparent."""
    width = engine.entities[entity].width
    for offset, byte in enumerate(_to_bytes(text)[:width]):
        if byte != _SPACE:
            _blit(engine, row, column + offset, bytes((byte,)))


def _draw_rows(
    engine: Engine,
    entity: int,
    row: int,
    sprite_sheet: Text,
    draw: Callable[[Engine, int, Text, int, int], None],
) -> None:
    me = engine.entities[entity]
    sheet = _to_bytes(sprite_sheet)
    column = int(me.x - me.width // 2)
    top = int(me.y - me.height // 2)
    for offset, sheet_row in enumerate(range(row, row + me.height)):
        start = me.width * sheet_row
        draw(engine, entity, sheet[start : start + me.width], top + offset, column)


def draw_entity_from_row(
    engine: Engine, entity: int, row: int, sprite_sheet: Text
) -> None:
    """Draw the entity from its sprite sheet, starting at sheet row ``row``."""
    _draw_rows(engine, entity, row, sprite_sheet, draw_string)


def draw_entity_from_row_alpha(
    engine: Engine, entity: int, row: int, sprite_sheet: Text
) -> None:
    """Like :func:`draw_entity_from_row`, but spaces do not overwrite."""
    _draw_rows(engine, entity, row, sprite_sheet, draw_string_alpha)


def draw_and_move(engine: Engine, entity: int, row: int, sprite_sheet: Text) -> None:
    """Move the entity by the keyboard, then draw it."""
    move_by_keys(engine, entity)
    draw_entity_from_row(engine, entity, row, sprite_sheet)


def copy_map_to_frame(engine: Engine) -> None:
    engine.frame[1:] = engine.map


def draw_enemy(engine: Engine) -> None:
    draw_entity_from_row(engine, EntityId.ENEMY, 0, engine.enemy_sprite)


def draw_player(engine: Engine) -> None:
    """Move the player and draw it from the first rows of the enemy sheet."""
    draw_and_move(engine, EntityId.PLAYER, 0, engine.enemy_sprite)


def draw_player_index(engine: Engine, index: int) -> None:
    draw_and_move(engine, EntityId.PLAYER, index, engine.player_sprite)


def write_frame(engine: Engine, stream: BinaryIO | None = None) -> None:
    """Write the whole frame to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout.buffer
    out.write(engine.frame_bytes())
    out.flush()


def _animate(
    engine: Engine,
    entity: int,
    duration: float,
    sprite_count: int,
    sprite_sheet: Text,
    draw: Callable[[Engine, int, int, Text], None],
) -> bool:
    if duration <= 0:
        raise ValueError("animation duration must be positive")
    me = engine.entities[entity]
    time_between_frames = duration / sprite_count
    if me.since_animation_start < 0:
        me.since_animation_start = 0.0
    case = int(me.since_animation_start / time_between_frames)
    if case >= sprite_count:
        case %= sprite_count
    draw(engine, entity, (case + 1) * me.height, sprite_sheet)
    me.since_animation_start += engine.clock.delta
    me.animation = 0 if case == sprite_count - 1 else 1
    return bool(me.animation)


def draw_animation(
    engine: Engine, entity: int, duration: float, sprite_count: int, sprite_sheet: Text
) -> bool:
    """Draw the current animation sprite; False once the last sprite shows.

    The sprites follow the entity's idle sprite in the sheet.
    """
    return _animate(
        engine, entity, duration, sprite_count, sprite_sheet, draw_entity_from_row
    )


def draw_and_move_animation(
    engine: Engine, entity: int, duration: float, sprite_count: int, sprite_sheet: Text
) -> bool:
    """As :func:`draw_animation`, moving the entity by the keyboard first."""
    return _animate(engine, entity, duration, sprite_count, sprite_sheet, draw_and_move)


def draw_centered(engine: Engine, text: Text, row: int) -> None:
    """Draw ``text`` centred on the given screen row."""
    data = _to_bytes(text)
    length = len(data)
    if is_even(WIDTH_SCREEN) and not is_even(length):
        column = WIDTH_SCREEN // 2 - length // 2 - 2 + 3
    else:
        column = WIDTH_SCREEN // 2 - length // 2 - 1 + 3
    _blit(engine, row, column, data)


def _pause_factor(data: bytes, index: int) -> int:
    previous = data[index - 1]
    if previous == _QUOTE:
        return DIALOGUE_LONG_PAUSE if index >= 2 else 1
    factor = _PAUSES.get(previous, 1)
    if factor != 1 and index < len(data) and data[index] == _QUOTE:
        return 1
    return factor


def draw_rolling(
    engine: Engine,
    entity: int,
    text: Text,
    x: int,
    y: int,
    time_between_chars: float,
) -> bool:
    """Reveal ``text`` character by character at (x, y).

    Progress is kept on the entity. Punctuation holds the text for a while.
    Returns True on the frame the whole text has been shown, after which the
    progress starts over.
    """
    data = _to_bytes(text)
    length = len(data)
    padded = data + b"\0"
    me = engine.entities[entity]

    me.dialogue_accumulated_time += engine.clock.delta
    if me.dialogue_accumulated_time >= time_between_chars * (DIALOGUE_LONG_PAUSE + 1):
        me.dialogue_accumulated_time = TIME_FRAME

    index = me.printing_index
    if 0 < index <= length:
        time_between_chars *= _pause_factor(data, index)

    _blit(engine, y, x, padded[:index])

    while me.dialogue_accumulated_time >= time_between_chars and index <= length:
        index += 2 if padded[index] == _SPACE else 1
        _blit(engine, y, x, padded[:index])
        me.dialogue_accumulated_time -= time_between_chars

    if index > length:
        me.printing_index = 0
        return True
    me.printing_index = index
    return False


def draw_player_circling(engine: Engine, duration: float) -> bool:
    """Play the player's circling animation; False once it completes a loop."""
    return draw_and_move_animation(
        engine,
        EntityId.PLAYER,
        duration,
        NUMBER_OF_PLAYER_CIRCLING_SPRITES,
        engine.player_sprite,
    )


def draw_dialogue(
    engine: Engine, entity: int, text: Text, time_between_chars: float
) -> bool:
    """Roll ``text`` out two rows above the entity.

    The line is centred over the entity unless that would leave the screen,
    in which case it is aligned to the entity's left or right edge. Returns
    True when the whole line has been shown.
    """
    data = _to_bytes(text)
    length = len(data)
    half = length // 2
    me = engine.entities[entity]

    top = me.y - me.height // 2 - 2
    if top < 0:
        me.printing_index = 0
        return False

    if me.x - half <= 3:
        orientation = TextOrientation.RIGHT
    elif me.x - half + length >= WIDTH_SCREEN + 1:
        orientation = TextOrientation.LEFT
    else:
        orientation = TextOrientation.CENTER

    if orientation is TextOrientation.LEFT:
        x = me.x + me.width // 2 - length
    elif orientation is TextOrientation.RIGHT:
        x = me.x - me.width // 2
    else:
        x = me.x - half

    return draw_rolling(engine, entity, data, int(x), int(top), time_between_chars)
"""Engine state: screen constants, entities, keyboard, clock and buffers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Protocol

NUMBER_OF_ENTITIES = 3  # slot 0 is NO_ENTITY and stays unused

WIDTH_PLAYER = 6
HEIGHT_PLAYER = 3
HEIGHT_PLAYER_SPRITE_SHEET = 27
PLAYER_SPRITE_SHEET_SIZE = WIDTH_PLAYER * HEIGHT_PLAYER_SPRITE_SHEET
NUMBER_OF_PLAYER_CIRCLING_SPRITES = 8

WIDTH_SCREEN = 98
HEIGHT_SCREEN = 24
ROW_STRIDE = WIDTH_SCREEN + 1
MAP_SIZE = ROW_STRIDE * HEIGHT_SCREEN
SIZE_FRAME = MAP_SIZE + 1

VELOCITY_PLAYER_X = 20
VELOCITY_PLAYER_Y = 10

TIME_FRAME = 1.0 / 60.0

WIDTH_ENEMY = 10
HEIGHT_ENEMY = 5
HEIGHT_ENEMY_SPRITE_SHEET = 15
ENEMY_SPRITE_SHEET_SIZE = WIDTH_ENEMY * HEIGHT_ENEMY_SPRITE_SHEET
POSITION_X_ENEMY = 60
POSITION_Y_ENEMY = 10
NUMBER_OF_ENEMY_BLINKING_SPRITES = 2

POSITION_X_PLAYER = 39
POSITION_Y_PLAYER = 10

DIALOGUE_LONG_PAUSE = 20
DIALOGUE_MEDIUM_PAUSE = 15
DIALOGUE_SHORT_PAUSE = 10


class EntityId(IntEnum):
    NO_ENTITY = 0
    PLAYER = 1
    ENEMY = 2


class ActionId(IntEnum):
    NO_ACTION = 0
    CIRCLING = 1


class TextOrientation(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class _Keyboard(Protocol):
    def is_pressed(self, key: str) -> bool: ...

    def was_pressed(self, key: str) -> bool: ...


class KeyboardState:
    """Key state fed by press/release events.

    ``is_pressed`` reports keys currently held; ``was_pressed`` reports whether
    a key went down since the last time it was asked about.
    """

    def __init__(self) -> None:
        self._held: set[str] = set()
        self._tapped: set[str] = set()

    @staticmethod
    def _normalise(key: str) -> str:
        return key.upper()

    def is_pressed(self, key: str) -> bool:
        return self._normalise(key) in self._held

    def was_pressed(self, key: str) -> bool:
        key = self._normalise(key)
        if key in self._tapped:
            self._tapped.discard(key)
            return True
        return False

    def press(self, key: str) -> None:
        key = self._normalise(key)
        self._held.add(key)
        self._tapped.add(key)

    def release(self, key: str) -> None:
        self._held.discard(self._normalise(key))


class Clock:
    """Measures the time elapsed since the last rendered frame."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self.current = 0.0
        self.last = 0.0
        self.delta = 0.0
        self.frame = TIME_FRAME

    def start(self) -> None:
        self.last = self._timer()

    def update(self) -> float:
        """Read the timer and return the seconds since ``last``."""
        self.current = self._timer()
        self.delta = self.current - self.last
        return self.delta


@dataclass
class _Entity:
    x: float = 0.0
    y: float = 0.0
    x_next: float = 0.0
    y_next: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    hit_width: float = 0.0
    hit_height: float = 0.0
    width: int = 0
    height: int = 0
    sheet_height: int = 0
    action: ActionId = ActionId.NO_ACTION
    animation: int = 0
    printing_index: int = 0
    since_animation_start: float = 0.0
    dialogue_accumulated_time: float = 0.0


def _new_frame() -> bytearray:
    frame = bytearray(SIZE_FRAME)
    frame[0] = ord("\n")
    return frame


@dataclass
class Engine:
    """All mutable game state: entities, timing, input and character buffers.

    ``frame`` starts with a newline followed by ``HEIGHT_SCREEN`` rows of
    ``ROW_STRIDE`` bytes; ``map`` holds the same rows without the newline.
    """

    keyboard: _Keyboard = field(default_factory=KeyboardState)
    clock: Clock = field(default_factory=Clock)
    entities: list[_Entity] = field(
        default_factory=lambda: [_Entity() for _ in range(NUMBER_OF_ENTITIES)]
    )
    map: bytearray = field(default_factory=lambda: bytearray(MAP_SIZE))
    frame: bytearray = field(default_factory=_new_frame)
    player_sprite: bytearray = field(
        default_factory=lambda: bytearray(PLAYER_SPRITE_SHEET_SIZE)
    )
    enemy_sprite: bytearray = field(
        default_factory=lambda: bytearray(ENEMY_SPRITE_SHEET_SIZE)
    )

    def frame_bytes(self) -> bytes:
        """Return the complete frame as it is written to the terminal."""
        return bytes(self.frame)


def create_engine(keyboard: _Keyboard | None = None) -> Engine:
    """Build an engine with the player and the enemy at their start positions."""
    engine = Engine(keyboard=keyboard if keyboard is not None else KeyboardState())

    player = engine.entities[EntityId.PLAYER]
    player.x = float(POSITION_X_PLAYER)
    player.y = float(POSITION_Y_PLAYER)
    player.velocity_x = float(VELOCITY_PLAYER_X)
    player.velocity_y = float(VELOCITY_PLAYER_Y)
    player.hit_width = float(WIDTH_PLAYER)
    player.hit_height = float(HEIGHT_PLAYER)
    player.width = WIDTH_PLAYER
    player.height = HEIGHT_PLAYER
    player.sheet_height = HEIGHT_PLAYER_SPRITE_SHEET

    enemy = engine.entities[EntityId.ENEMY]
    enemy.x = float(POSITION_X_ENEMY)
    enemy.y = float(POSITION_Y_ENEMY)
    enemy.hit_width = float(WIDTH_ENEMY)
    enemy.hit_height = float(HEIGHT_ENEMY)
    enemy.width = WIDTH_ENEMY
    enemy.height = HEIGHT_ENEMY
    enemy.sheet_height = HEIGHT_ENEMY_SPRITE_SHEET

    return engine
"""The locker scene: terminal keyboard, scene logic and the game loop."""

from __future__ import annotations

import argparse
import os
import re
import select
import sys
import time
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator, Optional, TextIO

try:
    import termios
    import tty
except ImportError:  # not available on Windows
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

from lockerscene.engine import (
    NUMBER_OF_ENEMY_BLINKING_SPRITES,
    Engine,
    EntityId,
    create_engine,
)
from lockerscene.graphics import (
    copy_map_to_frame,
    draw_animation,
    draw_centered,
    draw_dialogue,
    draw_player_circling,
    write_frame,
)
from lockerscene.level import AssetError, load_assets

ESCAPE = "ESCAPE"

PLAYER_LINE = b"Hi, I'm Bob!"
ENEMY_LINE = b"Nice to meet ya, I'm Bill!"
TITLE = b"Marco's locker:"
TITLE_ROW = 2
CHAR_DELAY = 0.05
ENEMY_BLINK_DURATION = 8.0
PLAYER_CIRCLING_DURATION = 0.5

_KEY_PATTERN = re.compile(r"\x1b[\[O][0-9;]*[A-Za-z~]|.", re.DOTALL)


def _keys(chunk: str) -> Iterator[str]:
    for match in _KEY_PATTERN.finditer(chunk):
        token = match.group()
        if len(token) != 1:
            continue  # cursor and function keys
        yield ESCAPE if token == "\x1b" else token.upper()


class TerminalKeyboard:
    """Keyboard read from a terminal without waiting for Enter.

    A terminal reports key presses but not releases, so a key counts as held
    for ``hold_time`` seconds after its last press; auto-repeat keeps it held.
    Use as a context manager to put the terminal into character mode.
    """

    def __init__(
        self,
        reader: Optional[Callable[[], str]] = None,
        hold_time: float = 0.15,
        timer: Callable[[], float] = time.monotonic,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._reader = reader if reader is not None else self._read_available
        self._hold_time = hold_time
        self._timer = timer
        self._last_seen: dict[str, float] = {}
        self._tapped: set[str] = set()
        self._saved_mode = None

    def __enter__(self) -> "TerminalKeyboard":
        if termios is not None and self._stream.isatty():
            fd = self._stream.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def _read_available(self) -> str:
        if sys.platform == "win32":
            import msvcrt

            chars = []
            while msvcrt.kbhit():
                chars.append(msvcrt.getwch())
            return "".join(chars)
        fd = self._stream.fileno()
        chunks = []
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 1024)
            if not data:
                break
            chunks.append(data)
        return b"".join(chunks).decode("latin-1")

    def poll(self) -> list[str]:
        """Read pending input and return the keys it held."""
        now = self._timer()
        keys = list(_keys(self._reader()))
        for key in keys:
            self._last_seen[key] = now
            self._tapped.add(key)
        return keys

    def is_pressed(self, key: str) -> bool:
        self.poll()
        seen = self._last_seen.get(key.upper())
        return seen is not None and self._timer() - seen <= self._hold_time

    def was_pressed(self, key: str) -> bool:
        self.poll()
        key = key.upper()
        if key in self._tapped:
            self._tapped.discard(key)
            return True
        return False


@dataclass
class Scene:
    """The two characters greeting each other in turn."""

    engine: Engine
    player_done: bool = False
    enemy_done: bool = True

    def step(self) -> None:
        """Render one frame into the engine's frame buffer."""
        engine = self.engine
        copy_map_to_frame(engine)
        draw_animation(
            engine,
            EntityId.ENEMY,
            ENEMY_BLINK_DURATION,
            NUMBER_OF_ENEMY_BLINKING_SPRITES,
            engine.enemy_sprite,
        )
        draw_player_circling(engine, PLAYER_CIRCLING_DURATION)
        if self.enemy_done:
            self.player_done = draw_dialogue(engine, EntityId.PLAYER, PLAYER_LINE, CHAR_DELAY)
        if self.player_done:
            self.enemy_done = draw_dialogue(engine, EntityId.ENEMY, ENEMY_LINE, CHAR_DELAY)
        draw_centered(engine, TITLE, TITLE_ROW)


def run(engine: Engine, stream: Optional[BinaryIO] = None) -> int:
    """Play the scene until Escape is pressed; return the frames drawn."""
    out = stream if stream is not None else sys.stdout.buffer
    scene = Scene(engine)
    clock = engine.clock
    clock.start()
    frames = 0
    while not engine.keyboard.was_pressed(ESCAPE):
        delta = clock.update()
        if delta < clock.frame:
            time.sleep(clock.frame - delta)
            continue
        clock.last = clock.current
        scene.step()
        write_frame(engine, out)
        frames += 1
    return frames


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lockerscene", description="Play the locker scene in the terminal."
    )
    parser.add_argument(
        "--assets", default="assets", help="directory holding the map and sprites"
    )
    args = parser.parse_args(argv)

    keyboard = TerminalKeyboard()
    engine = create_engine(keyboard)
    try:
        load_assets(engine, args.assets)
    except AssetError as error:
        print(error, file=sys.stderr)
        return 1

    with keyboard:
        run(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Loading the map and sprite sheets from asset files."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Union

from lockerscene.engine import MAP_SIZE, Engine, EntityId

MAP_FILE = "map.bin"
PLAYER_SPRITE_FILE = "sprite_player.bin"
ENEMY_SPRITE_FILE = "sprite_enemy.bin"


class AssetError(Exception):
    """An asset file is missing or holds too little data."""


def read_map(engine: Engine, stream: BinaryIO) -> None:
    """Fill the map buffer with up to one screen of bytes from ``stream``."""
    data = stream.read(MAP_SIZE)
    if not data:
        raise AssetError("map holds no data")
    engine.map[: len(data)] = data


def _read_sprite(
    stream: BinaryIO, sheet: bytearray, width: int, rows: int, name: str
) -> None:
    for row in range(rows):
        start = row * width
        if start + width > len(sheet):
            raise AssetError(f"{name} sprite sheet does not fit its buffer")
        data = stream.read(width)
        if not data:
            raise AssetError(f"{name} sprite sheet ends before row {row}")
        sheet[start : start + len(data)] = data
        stream.read(1)  # line terminator


def read_player_sprite(engine: Engine, stream: BinaryIO) -> None:
    """Read the player's sprite sheet, one line per sprite row."""
    player = engine.entities[EntityId.PLAYER]
    _read_sprite(stream, engine.player_sprite, player.width, player.sheet_height, "player")


def read_enemy_sprite(engine: Engine, stream: BinaryIO) -> None:
    """Read the enemy's sprite sheet, one line per sprite row."""
    enemy = engine.entities[EntityId.ENEMY]
    _read_sprite(stream, engine.enemy_sprite, enemy.width, enemy.sheet_height, "enemy")


def load_assets(engine: Engine, directory: Union[str, Path] = "assets") -> None:
    """Load the map and both sprite sheets from ``directory``.

    Line endings are read as text: CRLF pairs count as a single newline.
    """
    base = Path(directory)
    streams = {}
    for name in (MAP_FILE, PLAYER_SPRITE_FILE, ENEMY_SPRITE_FILE):
        path = base / name
        try:
            raw = path.read_bytes()
        except OSError as error:
            raise AssetError(f"Couldn't open {path}: {error.strerror}") from error
        streams[name] = io.BytesIO(raw.replace(b"\r\n", b"\n"))

    read_map(engine, streams[MAP_FILE])
    read_player_sprite(engine, streams[PLAYER_SPRITE_FILE])
    read_enemy_sprite(engine, streams[ENEMY_SPRITE_FILE])
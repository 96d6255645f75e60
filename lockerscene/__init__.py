"""A terminal scene with animated ASCII sprites and rolling dialogue."""

__version__ = "0.1.0"

__all__ = ["engine", "gamelogic", "graphics", "level", "game"]
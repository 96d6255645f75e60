# lockerscene

A small scene that plays in the terminal. An ASCII map fills a 98 × 24 screen.
The player sprite circles in place. You can move it with the W, A, S and D keys.
An enemy blinks next to it. The two trade lines of dialogue in turn. Each line
rolls out one character at a time and pauses at punctuation. A title,
"Marco's locker:", is drawn centred near the top. Press Escape to quit.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

The scene reads three asset files from a directory, which is `assets` by default:

- `map.bin` is the background. It holds 24 rows of 98 characters, and each row
  ends in a newline.
- `sprite_player.bin` is the player sheet. It holds 27 rows of 6 characters, and
  each row is followed by one separator byte. The first 3 rows are the still
  pose. The next 24 rows are the 8 frames of the circling animation.
- `sprite_enemy.bin` is the enemy sheet. It holds 15 rows of 10 characters, and
  each row is followed by one separator byte. The rows are the still pose
  followed by the 2 blinking frames.

CRLF line endings in these files are read as single newlines.

Start the scene like this:

```
lockerscene
```

To use a different asset directory:

```
lockerscene --assets path/to/assets
```

`python -m lockerscene.game` works the same way.

The command prints an error and exits with status 1 in any of these cases:

- an asset file cannot be opened
- the map file is empty
- a sprite sheet ends before all of its rows have been read

Frames are written to standard output at up to 60 per second.

## Keyboard handling

A terminal reports key presses but not key releases. `TerminalKeyboard`
therefore treats a key as held for a short time after its last press, 0.15
seconds by default. Keyboard auto-repeat keeps a key held for as long as you
hold it down.

On Unix-like systems the terminal is switched to character mode while the scene
runs, and its previous mode is restored afterwards. On Windows, keys are read
through `msvcrt`.

Cursor keys and function keys are ignored.

## Using it as a library

```python
import sys

from lockerscene.engine import KeyboardState, create_engine
from lockerscene.game import Scene
from lockerscene.level import load_assets

keyboard = KeyboardState()
engine = create_engine(keyboard)
load_assets(engine, "assets")

scene = Scene(engine)
engine.clock.start()
keyboard.press("D")          # "D" is held until keyboard.release("D")
engine.clock.update()        # movement uses the time since clock.start()
scene.step()                 # draw one frame into the engine's frame buffer
sys.stdout.buffer.write(engine.frame_bytes())
```

`run(engine, stream)` in `lockerscene.game` plays the scene as the command
does. It drives the clock, writes each frame to `stream`, and returns the number
of frames drawn once the keyboard reports Escape.

The package has these modules:

- `lockerscene.engine` defines the screen and sprite sizes and the `EntityId`
  enum. It also holds the engine's parts:
  - `Engine`, which holds per-entity state, the map, the frame and the sprite
    buffers
  - `KeyboardState`, a keyboard driven by `press` and `release`
  - `Clock`, the frame clock
  - `create_engine`
- `lockerscene.gamelogic` covers movement, screen bounds and hit-box
  collisions: `move_up`, `move_down`, `move_left`, `move_right`,
  `move_by_keys`, `colliding_left` and the rest.
- `lockerscene.graphics` draws into the frame buffer: sprites, animations,
  centred text and rolling dialogue. Its functions include `draw_animation`,
  `draw_player_circling`, `draw_dialogue`, `draw_centered` and `write_frame`.
- `lockerscene.level` reads the map and the sprite sheets with `read_map`,
  `read_player_sprite`, `read_enemy_sprite` and `load_assets`. It raises
  `AssetError` when an asset cannot be read.
- `lockerscene.game` holds `TerminalKeyboard`, `Scene`, `run` and the
  `lockerscene` command.

## What it does not do

This is a single fixed scene, not a full game:

- There are no levels, goals or saved state.
- The dialogue lines and the title are fixed.
- The enemy does not move.
- No asset files are shipped with the package.
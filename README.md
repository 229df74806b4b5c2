# spacerocks

A small arcade game: pilot a triangular ship around a wrapping playfield
while asteroids drift in from the screen edges.

## Installing

```
pip install .
```

The game uses `pygame` for its window, drawing and input.

## Playing

Start the game with:

```
spacerocks
```

It opens a borderless 1280×800 window. The main menu offers **New Game** and
**Quit Game**; click a button with the left mouse button. The HUD shows the
frame rate, a score line, the name of a connected gamepad and the mouse
position.

### Controls

| Action            | Keyboard | Gamepad                         |
|-------------------|----------|---------------------------------|
| Thrust forward    | `W`      | D-pad up / left stick up        |
| Reverse (slower)  | `S`      | D-pad down / left stick down    |
| Turn left         | `A`      | D-pad left / left stick left    |
| Turn right        | `D`      | D-pad right / left stick right  |
| Fire              | `Space`  | Right trigger                   |
| Pause / resume    | `Esc`    | —                               |
| Quit immediately  | `F4`     | —                               |

When a gamepad is connected and any of its controls is in use, the keyboard
is ignored for that frame. Firing has a short cooldown, and each shot carries
a one-second lifetime after which shots are dropped, oldest first. The ship
and the asteroids wrap around the screen edges. New asteroids, in three
sizes, appear from a random edge a little under once a second, up to forty
at a time.

From the pause menu, **Leave Game** returns to the main menu.

### Background image

If a folder named `resources` is found in the working directory, or in the
directory of the running script or up to three levels above it, the game
switches into it and loads `space3.jpg` from there as the background.
Without it the background stays black.

## What the game does not do

Shots and asteroids pass through each other and through the ship: there is
no collision handling, so nothing is destroyed, the ship cannot be hit, and
the score shown in the HUD always stays at 0.

## Using the pieces

The game logic runs without a window, which makes it easy to script or test:

```python
import random
from spacerocks.game import Game, GameState

game = Game((1280, 800), random.Random(1))
game.new_game()
assert game.state is GameState.PLAYING

game.update(1 / 60, keyboard=None, gamepad=None)
game.toggle_pause()
assert game.state is GameState.PAUSED
```

- `spacerocks.asteroid_field.AsteroidField` spawns asteroids on a timer.
- `spacerocks.player.Player` holds the ship and its shots; input is passed
  in as `spacerocks.player.Controls`, and `controls_from_gamepad` turns
  d-pad, stick and trigger readings into one.
- `spacerocks.entity_list.ShotList` and `AsteroidList` keep the live
  entities in insertion order, looked up by id.
- `spacerocks.geometry.wrap_off_screen` moves a position to the opposite
  side of the screen once it has left it.
- `spacerocks.resources.find_resource_dir` and
  `search_and_set_resource_dir` locate the assets folder.

## Running the tests

```
pip install .[test]
pytest
```
# shapecatch

A small arcade game for the terminal. You steer a triangle (`/^\`) along the
bottom of the playing field and catch the shapes that fall from the top.
Each shape is worth a different number of points. A round lasts 120 seconds.

The text on the side panel and on the final screen is in Chinese.

## Installing

```
pip install .
```

## Playing

```
shapecatch
```

Options:

| Option          | Meaning                                         |
|-----------------|-------------------------------------------------|
| `--seed N`      | seed the random generator for a repeatable game |
| `--delay SECS`  | seconds to pause between frames (default 0.05)  |

A negative `--delay` is refused.

Controls:

| Key         | Action          |
|-------------|-----------------|
| Left arrow  | move left       |
| Right arrow | move right      |
| Esc         | end the round   |

Shapes and their points:

| Shape | Points |
|-------|--------|
| `*`   | 10     |
| `#`   | 20     |
| `O`   | 30     |
| `<>`  | 40     |
| `+`   | 50     |

The field is 60 columns by 20 rows, and the round starts with five shapes
already falling. A new shape appears every 20 frames, and at most 20 shapes
fall at the same time. Each shape moves down one row every one, two or three
frames, and vanishes when it reaches the bottom border. A shape counts as
caught when it reaches the player's row within one column of the triangle's
tip.

The panel beside the field shows the time left (green while more than 30
seconds remain, yellow from 30 down to 11, red at 10 or fewer), your score,
the controls and the points table. When time runs out, or you press Esc, the
final score is shown; press any key to leave.

The screen is drawn into a 90 by 25 character buffer, so your terminal should
be at least that size.

## Using the pieces

The game logic does not depend on a terminal. `shapecatch.game.GameState`
takes an optional `random.Random` and an optional clock function returning
seconds, so a round can be driven frame by frame:

```python
import random
from shapecatch.game import GameState
from shapecatch.render import ScreenBuffer, render_game

state = GameState(rng=random.Random(1), clock=lambda: 0.0)
state.update()

screen = ScreenBuffer(90, 25)
render_game(screen, state)
print(screen.row_text(state.player.y))
```

- `shapecatch.character` holds `Shape`, `Player` and `FallingObject`.
- `shapecatch.game.GameState` has `update()`, `check_collisions()`,
  `spawn_new_object()`, `active_objects()` and `reset()`.
- `shapecatch.render.ScreenBuffer` is an off-screen grid of cells with
  `write_char()`, `write_string()`, `cell()`, `row_text()` and `to_ansi()`;
  the `draw_*` functions and `render_game()` paint the game screens into it.
- `shapecatch.input.handle_key()` applies a key name such as `"KEY_LEFT"` to
  a game state; `process_input()` reads one pending key from a `blessed`
  terminal.
- `shapecatch.main.run()` plays one round on a terminal and returns the score.

## What it does not do

There is no high-score table and nothing is saved between rounds; the final
score is only shown on screen.

## Running the tests

```
pip install ".[test]"
pytest
```
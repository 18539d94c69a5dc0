# snakegame

Snake on a 30 × 20 grid of 24-pixel cells. You steer the snake so that it eats
apples. There are four apples on the board. When the snake eats an apple, the
snake grows by one segment, you get 5 points, and the apple moves to a random
cell. The game is over when the snake leaves the board or hits its own body.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

```
snakegame [--font PATH] [--seed N]
```

- `--font PATH` sets the TrueType font for the game-over messages. Without it,
  pygame's built-in font is used.
- `--seed N` seeds the random placement of apples, so a round can be repeated.

| Key         | Action                                          |
|-------------|-------------------------------------------------|
| Arrow keys  | Change direction. You cannot turn straight back |
| `Enter`     | On the game-over screen, start a new round      |

The game runs at 8 frames per second. It accepts at most one change of
direction per frame. The game-over screen shows your final score. Close the
window to quit.

## Using the game logic directly

The rules are kept apart from the display, so you can drive them yourself:

```python
import random

from snakegame.game import Direction, Game

game = Game(random.Random(1))
game.step()                  # move one cell; turning is allowed after a step
game.turn(Direction.UP)      # True if the turn was accepted
game.step()
print(game.score, game.game_over)
```

- `Game.step()` plays one frame. It moves the snake, eats any apple under the
  head, and sets `game_over` on a collision.
- `Game.turn(direction)` refuses a reversal, and it refuses a second turn
  before the next step.
- `Game.reset()` starts a new round.
- `Direction.opposite()` gives the reverse heading.

`snakegame.segments.SegmentList` is the ordered container that holds the
snake's body and the apples. It has the following members:

- `head` and `tail`.
- `push_front` and `push_back`.
- `pop_front` and `pop_back`. These raise `IndexError` when the list is empty.
- `clear`.
- Membership by cell position.
- `lines()`, which yields `"x y"` strings.

`snakegame.app` holds the pygame side of the game:

- `key_to_direction` maps a key to a direction.
- `game_over_layout` places the texts on the game-over screen.
- `draw_board` draws the board.
- `run_game_over` runs the game-over screen.
- `main` runs the game.

## What it does not do

There is no pause. The game does not keep a high-score table. The score
returns to 0 at the start of each round.

## Running the tests

```
pip install ".[test]"
pytest
```
# blockfall

A small falling-block puzzle game that runs in your terminal.

Blocks fall onto a board that is 10 columns wide and 20 rows high. Move
and rotate them to fill complete rows. Each full row is cleared and
scores 100 points times the current level. The game ends when a new
block has no room to appear at the top.

## Installing

```
pip install .
```

The game draws with the standard `curses` module. It needs a terminal
that `curses` supports.

## Playing

```
blockfall
```

The sequence of blocks comes from a seeded random generator. The seed
is 888 unless you give another one:

```
blockfall --seed 42
```

| Key         | Action                                         |
|-------------|------------------------------------------------|
| Left arrow  | move left                                      |
| Right arrow | move right                                     |
| Down arrow  | move down one row (lands the block if blocked) |
| Up arrow    | rotate                                         |
| Space       | drop to the bottom                             |
| `q`         | quit                                           |

The game runs at 20 frames a second. At level 1 a block falls one row
every 10 frames. Full rows are cleared on each of these falling steps.

The sidebar shows the score, the high score, the level and the next
block.

## Using the game logic

The rules are in `blockfall.game` and work without a terminal:

```python
from blockfall.game import Action, Game

game = Game(seed=888)
game.handle_action(Action.LEFT)
game.handle_action(Action.DROP)
game.update()
print(game.score, game.running)
```

`Game` also has `move(dx, dy)`, `rotate()`, `drop_to_bottom()`,
`land()`, `check_lines()` and `spawn_new_block()`. Its state is in plain
attributes: `board`, `block_x`, `block_y`, `current_block`,
`next_tetromino`, `score`, `level`, `high_score` and `running`.
`blockfall.game.is_valid_position(board, x, y, block)` checks whether
a 4x4 block fits on a board at a position.

`blockfall.ui.render(game)` returns the screen as a list of text lines,
which is useful in tests and logs. `blockfall.ui.key_to_action(key)`
maps a curses key code to an `Action`. `blockfall.app.run(screen, game)`
runs the game loop on a curses window.

## What it does not do

- The high score always starts at 2200. It is not saved between games.
- The level stays at 1. The falling speed and the points per row do not
  change during a game.

## Running the tests

```
pip install .[test]
pytest
```
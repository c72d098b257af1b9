# tiles2048

The 2048 puzzle: slide numbered tiles on a 4×4 grid, merge equal neighbours,
and try to build a tile worth 2048.

The package needs nothing beyond the Python standard library (3.10 or later).
The window version uses `tkinter`, which must be available in your Python.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install ".[test]"
pytest
```

## Playing in the terminal

```
tiles2048
```

Use the arrow keys to slide the tiles. When standard input is a terminal it is
switched to unbuffered key reading for the game and restored afterwards; when
it is not a terminal (for example a pipe), keys are read from it as they come,
with arrow keys given as the usual `ESC [ A`–`D` or `ESC O A`–`D` sequences.

After every move that changes the board, the event, the step number and the
grid are printed. The game stops:

- with "You won game!" on standard error and exit status 0 once a 2048 tile
  appears;
- with "You lost." on standard error and exit status 1 when the board is full
  and no move can change it;
- with exit status 1 when a key other than an arrow is pressed: the game
  prints "Please, use only arrows." and then reports the invalid move on
  standard error;
- with exit status 0 when the input runs out, and 130 on Ctrl-C.

## Playing in a window

```
tiles2048-gui
```

A 300×300 window titled "2048 Game" shows the grid with coloured tiles and
four buttons, Up, Down, Left and Right. The arrow keys work as well. A dialog
tells you when you have won or lost. The board is also printed to standard
output after each move that changes it.

## Rules as implemented

- The game starts with up to three tiles, each a 2 or a 4, dropped on random
  cells (a cell picked twice keeps its first tile).
- Each move slides every tile as far as it goes in the chosen direction;
  two equal tiles that meet merge into one tile holding their sum.
- A move that changes nothing does not count: no new tile is added and the
  step counter stays put.
- After a move that changes the board, one new tile — a 2, 4 or 8 — appears on
  a random empty cell.
- The game is won when any tile reaches 2048, and lost when the board is full
  and no direction changes it.

## Using the library

- `tiles2048.board` holds `Board`, `Size` and `InvalidMoveError`.
- `tiles2048.events` holds the `BoardEvent` enum (`LEFT`, `RIGHT`, `UP`,
  `DOWN`, `OTHER`, `INIT`) and `key_to_event()`, which maps the key names
  `"up"`, `"down"`, `"left"` and `"right"` to events.
- `tiles2048.merge` holds `rotate_tiles_to_right()` and `collapse_to_right()`,
  which work on grids given as tuples of tuples of ints.
- `tiles2048.generator` holds `default_tiles_generator()`, which takes an
  optional `random.Random` for reproducible placement.

```python
import io
from tiles2048.board import Board, Size
from tiles2048.events import BoardEvent

board = Board(Size(4, 4), out=io.StringIO())
board.initialize()
changed = board.move(BoardEvent.LEFT)
print(board.step, board.tiles, board.is_won(), board.is_lost())
```

`Board(size, generator, out)` takes a `Size`, an optional tile generator and an
optional text stream for its printout (standard output by default). A
generator is called as `generator(step, tiles, size)` and returns the new grid.
`initialize()` places the first tiles; `move()` slides the board, returns
whether it changed, and raises `InvalidMoveError` for anything that is not one
of the four directions. `step`, `size` and `tiles` are read-only properties,
and `pretty_print(event)` writes the event, the step and the grid.

`tiles2048.loop.play(board, keys)` applies key names to a board and returns
`"won"`, `"lost"`, or `None` if the keys run out first.
`tiles2048.gui.pick_tile_color(value)` gives the RGBA colour of a tile.

## What it does not do

There is no score, no undo, and no saving or loading of a game; a game lasts
only as long as the process that runs it.
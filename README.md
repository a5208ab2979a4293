# minefield

Minesweeper in your terminal. The board is drawn with curses and played with
the mouse: left-click a cell to reveal it, right-click to place or remove a
flag. It needs a terminal with mouse support and the standard-library
`curses` module, so it runs on POSIX systems.

## Installing

```
pip install .
```

## Playing

```
minefield
```

Options take the form `--name=value`:

| Option              | Meaning                                              | Default |
|---------------------|------------------------------------------------------|---------|
| `--matrix_length=N` | number of rows on the board                          | 20      |
| `--matrix_width=N`  | number of columns on the board                       | 20      |
| `--num_mines=N`     | number of mines; must be smaller than the board area | 50      |
| `--help`            | show the help screen, wait for a key, then exit      |         |

Only the digits directly after the `=` are read. A size or mine count of zero,
or one with no digits, falls back to the default. A mine count as large as the
board area or larger falls back to the default as well. Arguments that match
none of the options are ignored.

For example:

```
minefield --matrix_length=10 --matrix_width=16 --num_mines=25
```

## Rules

- The first cell you reveal is always safe and has no mines around it: the
  mines are scattered again until that holds.
- A revealed cell shows how many mines sit in the 3x3 square around it. A cell
  with no mines around it opens all of its neighbours.
- Clicking a revealed cell whose surrounding flags are at least its count
  reveals all of its unflagged neighbours. A wrongly placed flag can make that
  set off a mine.
- Flags become available after your first reveal. The counter at the top shows
  the number of mines minus the number of flags placed. Flags can only be put
  in columns whose index is below the number of rows, so on a board wider
  than it is tall the rightmost columns cannot be flagged.
- The game is won once the revealed safe cells plus the flags placed on mines
  add up to the number of cells on the board. Revealing a mine ends the game.
- Press `q` to quit.

The terminal must have at least 3 more rows than the board and three columns
per board column. If it is smaller, the game leaves curses mode, prints the
size it needs and exits with status 1.

## Using the board from Python

`minefield.matrix.GameMatrix` holds the board and can be used without a
terminal. It takes the length, width, mine count and an optional
`random.Random`; zero means "use the default" once `init()` is called.

```python
import random

from minefield.matrix import GameMatrix, RevealResult

board = GameMatrix(8, 8, 10, random.Random(1))
board.init()
result = board.reveal(0, 0)
assert result is RevealResult.OK
board.place_flag(7, 7)
for row in board.render_rows():
    print(row)
```

`reveal(i, j)` returns `RevealResult.OK`, `RevealResult.BOMB` or
`RevealResult.OUT_OF_BOUNDS`. `render_rows()` gives the board as text, framed
by stars: `F` for a flag, `X` for a revealed mine, the neighbour count for a
revealed cell and a blank for a hidden one. `draw(window)` paints the same
board on a curses window in colour.

The interactive loop is `minefield.interface.UserInterface`, which takes a
curses window and a board; `minefield.cli.build_matrix(argv)` builds a board
from command-line arguments.

## What it does not do

Play is by mouse only: there is no keyboard cursor for choosing cells. There
is no timer, no score keeping and no way to save or resume a game.
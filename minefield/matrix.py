"""The minefield: mine placement, revealing, flagging and drawing."""

from __future__ import annotations

import curses
import random
from enum import Enum

from .cell import GameCell
from .printing import Color, print_color

CELL_SIZE = 3
MATRIX_ROW_START = 3

MATRIX_LENGTH_DEFAULT = 20
MATRIX_WIDTH_DEFAULT = 20
MATRIX_MINES_DEFAULT = 50

_NEIGHBOURS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


class RevealResult(Enum):
    """Outcome of revealing a cell."""

    OK = 0
    OUT_OF_BOUNDS = 1
    BOMB = 2


def _pad(text: str) -> str:
    return text.rjust(CELL_SIZE)


class GameMatrix:
    """A grid of cells with randomly placed mines.

    A length, width or mine count of zero means "use the default" when
    :meth:`init` is called.
    """

    def __init__(
        self,
        length: int = 0,
        width: int = 0,
        num_mines: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        self.length = length
        self.width = width
        self.num_mines = num_mines
        self.num_flags = 0
        self.num_correctly_revealed = 0
        self.first_reveal = True
        self.cells: list[GameCell] = []
        self._rng = rng if rng is not None else random.Random()
        # Writes that fall outside the grid land here and are never shown.
        self._scratch = GameCell()

    def init(self) -> None:
        """Apply defaults, allocate the cells and scatter the mines."""
        self.length = self.length or MATRIX_LENGTH_DEFAULT
        self.width = self.width or MATRIX_WIDTH_DEFAULT
        if self.num_mines == 0 or self.num_mines >= self.length * self.width:
            self.num_mines = MATRIX_MINES_DEFAULT
        self.cells = [GameCell() for _ in range(self.length * self.width)]
        self._init_bombs()

    def _init_bombs(self) -> None:
        pool = list(range(self.length * self.width))
        self._rng.shuffle(pool)
        for bomb_index in pool[: self.num_mines]:
            self.cells[bomb_index].is_bomb = True
            for di, dj in _NEIGHBOURS:
                self.at_index(bomb_index + di * self.width + dj).add_neighbouring_bomb()

    def at_index(self, index: int) -> GameCell:
        """Cell at a flat index; an out-of-range index gives a scratch cell."""
        if index < 0 or index >= len(self.cells):
            return self._scratch
        return self.cells[index]

    def at(self, i: int, j: int) -> GameCell:
        """Cell at row ``i``, column ``j`` addressed through the flat index."""
        if i < 0 or j < 0:
            return self._scratch
        return self.at_index(i * self.width + j)

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.length and 0 <= j < self.width

    def reveal(self, i: int, j: int, check_flags: bool = True) -> RevealResult:
        """Reveal a cell, or its neighbours when it is already revealed."""
        if not self._in_bounds(i, j):
            return RevealResult.OUT_OF_BOUNDS

        cell = self.at(i, j)
        if self.first_reveal:
            while cell.is_bomb or cell.num_surrounding_bombs > 0:
                for each in self.cells:
                    each.clear()
                self._init_bombs()
                cell = self.at(i, j)
            self.first_reveal = False

        if cell.is_flag:
            return RevealResult.OK

        if cell.revealed:
            if check_flags:
                return self._reveal_around(i, j, cell)
            return RevealResult.OK

        return self._open(i, j)

    def _reveal_around(self, i: int, j: int, cell: GameCell) -> RevealResult:
        result = RevealResult.OK
        flags = sum(self.at(i + di, j + dj).is_flag for di, dj in _NEIGHBOURS)
        if flags >= cell.num_surrounding_bombs:
            for di, dj in _NEIGHBOURS:
                if self.at(i + di, j + dj).is_flag:
                    continue
                if self.reveal(i + di, j + dj, False) is RevealResult.BOMB:
                    result = RevealResult.BOMB
        return result

    def _open(self, i: int, j: int) -> RevealResult:
        pending = [(i, j)]
        while pending:
            row, col = pending.pop()
            if not self._in_bounds(row, col):
                continue
            cell = self.at(row, col)
            if cell.is_flag or cell.revealed:
                continue
            cell.revealed = True
            if cell.is_bomb:
                if (row, col) == (i, j):
                    return RevealResult.BOMB
                continue
            if cell.num_surrounding_bombs == 0:
                pending.extend((row + di, col + dj) for di, dj in _NEIGHBOURS)
            self.num_correctly_revealed += 1
        return RevealResult.OK

    def place_flag(self, i: int, j: int) -> None:
        """Toggle a flag on a hidden cell."""
        if not 0 <= i < self.length or not 0 <= j < self.length:
            return
        cell = self.at(i, j)
        if cell.revealed:
            return
        cell.is_flag = not cell.is_flag
        if cell.is_flag:
            self.num_flags += 1
            if cell.is_bomb:
                self.num_correctly_revealed += 1
        else:
            self.num_flags -= 1

    @staticmethod
    def _symbol(cell: GameCell) -> tuple[str, Color | None]:
        if cell.is_flag:
            return "F", Color.BLUE
        if not cell.revealed:
            return " ", None
        if cell.is_bomb:
            return "X", Color.RED
        return str(cell.num_surrounding_bombs), None

    def _border(self) -> str:
        return _pad("*") * (self.length + 2)

    def render_rows(self) -> list[str]:
        """The board as plain text lines, framed by a border of stars."""
        rows = [self._border()]
        for i in range(self.length):
            cells = "".join(
                _pad(self._symbol(self.at(i, j))[0]) for j in range(self.width)
            )
            rows.append(_pad("*") + cells + _pad("*"))
        rows.append(self._border())
        return rows

    def draw(self, window) -> None:
        """Draw the board on a curses window, colouring flags and mines."""
        window.clear()
        window.refresh()
        window.move(MATRIX_ROW_START, 0)
        _write(window, self._border())
        for i in range(self.length):
            _write(window, "\n" + _pad("*"))
            for j in range(self.width):
                symbol, color = self._symbol(self.at(i, j))
                _write(window, _pad(symbol), color)
            _write(window, _pad("*"))
        _write(window, "\n" + self._border())


def _write(window, text: str, color: Color | None = None) -> None:
    if color is not None:
        print_color(window, color, text)
        return
    try:
        window.addstr(text)
    except curses.error:
        pass
"""Curses set-up and the interactive game loop."""

from __future__ import annotations

import curses

from .matrix import CELL_SIZE, MATRIX_ROW_START, GameMatrix, RevealResult
from .printing import Color, print_green, print_red


class TerminalTooSmall(Exception):
    """Raised when the terminal cannot hold the board."""

    def __init__(self, required_rows: int, required_cols: int) -> None:
        super().__init__(
            f"Terminal too small. Need at least {required_rows} rows x "
            f"{required_cols} columns."
        )
        self.required_rows = required_rows
        self.required_cols = required_cols


def _quietly(func, *args):
    """Call a curses function, ignoring a failure the terminal may report."""
    try:
        return func(*args)
    except curses.error:
        return None


def _write(window, text: str) -> None:
    try:
        window.addstr(text)
    except curses.error:
        pass


def init_screen(window) -> None:
    """Set up colours, mouse reporting and input modes for ``window``."""
    _quietly(curses.start_color)
    _quietly(curses.use_default_colors)
    window.keypad(True)
    _quietly(curses.mousemask, curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    _quietly(curses.noecho)
    _quietly(curses.cbreak)
    _quietly(curses.resize_term, 0, 0)
    _quietly(curses.curs_set, 0)
    for color, foreground in (
        (Color.RED, curses.COLOR_RED),
        (Color.BLUE, curses.COLOR_BLUE),
        (Color.GREEN, curses.COLOR_GREEN),
    ):
        _quietly(curses.init_pair, int(color), foreground, -1)


def cleanup(window) -> None:
    """Clear the screen and leave curses mode."""
    window.clear()
    window.refresh()
    _quietly(curses.endwin)


def check_size(window, num_rows: int, num_cols: int) -> tuple[int, int]:
    """Return the (rows, columns) the board needs; raise if the window is smaller."""
    term_rows, term_cols = window.getmaxyx()
    required_rows = MATRIX_ROW_START + num_rows
    required_cols = num_cols * CELL_SIZE
    if term_rows < required_rows or term_cols < required_cols:
        raise TerminalTooSmall(required_rows, required_cols)
    return required_rows, required_cols


class UserInterface:
    """Turns mouse clicks on a curses window into moves on a minefield."""

    def __init__(self, window, matrix: GameMatrix) -> None:
        self.window = window
        self.matrix = matrix
        self.keep_alive = True
        self.matrix_revealed = False
        self.player_won = False

    def _check_winner(self) -> None:
        if self.matrix.num_correctly_revealed == self.matrix.length * self.matrix.width:
            self.player_won = True
            self.keep_alive = False

    def _redraw(self) -> None:
        self.window.clear()
        self.matrix.draw(self.window)
        self.window.refresh()

    def _handle_reveal_result(self, result: RevealResult) -> None:
        if result is RevealResult.OUT_OF_BOUNDS:
            return
        if result is RevealResult.BOMB:
            self.keep_alive = False
        self._redraw()
        self.matrix_revealed = True
        self._check_winner()

    def handle_click(self, y: int, x: int, button: int) -> RevealResult | None:
        """Handle a mouse click at screen position (``y``, ``x``).

        ``button`` is the curses button state. A left click reveals, a right
        click toggles a flag once the board has been revealed. Returns the
        reveal result for a left click and None otherwise.
        """
        row = y - MATRIX_ROW_START - 1
        col = (x + 1) // CELL_SIZE - 2
        result: RevealResult | None = None

        if button & curses.BUTTON1_CLICKED:
            result = self.matrix.reveal(row, col)
            self._handle_reveal_result(result)
        elif button & curses.BUTTON3_CLICKED and self.matrix_revealed:
            self.matrix.place_flag(row, col)
            self._redraw()
            self._check_winner()

        if result is not RevealResult.OUT_OF_BOUNDS:
            self.window.move(0, 0)
            _write(
                self.window,
                f"Mines left: {self.matrix.num_mines - self.matrix.num_flags}",
            )
        return result

    def run(self) -> None:
        """Play until the player wins, explodes or presses ``q``."""
        print_green(self.window, "Click anywhere to start.")
        while self.keep_alive:
            key = self.window.getch()
            if key == curses.KEY_MOUSE:
                try:
                    _, x, y, _, bstate = curses.getmouse()
                except curses.error:
                    continue
                self.handle_click(y, x, bstate)
            elif key == ord("q"):
                break

        self.window.move(0, 0)
        if self.player_won:
            print_green(self.window, "Congratulations! You win!\n")
        else:
            print_red(self.window, "GAME OVER! EXPLODED!!!\n")
        _write(self.window, "Press anything to exit.")
        self.window.refresh()
        self.window.getch()
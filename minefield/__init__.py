"""Terminal minesweeper played with the mouse in a curses window."""

__version__ = "0.1.0"
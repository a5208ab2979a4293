"""Command-line options and the help screen."""

from __future__ import annotations

import curses

from .printing import print_blue, print_green, print_red

_MAX_ARG_LENGTH = 20
_UINT32_MASK = 0xFFFFFFFF

_LENGTH_FLAG = "--matrix_length"
_WIDTH_FLAG = "--matrix_width"
_MINES_FLAG = "--num_mines"
_HELP_FLAG = "--help"


class HelpRequested(Exception):
    """Raised when the help option is given."""


def get_numerical_argument(arg: str, prefix_length: int) -> int:
    """Read the unsigned 32-bit number after ``prefix`` and ``=`` in ``arg``.

    Reading stops at the first non-digit; no digits give 0.
    """
    value = 0
    for char in arg[prefix_length + 1 :]:
        if not "0" <= char <= "9":
            break
        value = (value * 10 + ord(char) - ord("0")) & _UINT32_MASK
    return value


def parse_args(arg: str, matrix) -> None:
    """Apply one command-line argument to ``matrix``.

    Raises HelpRequested for the help option; unknown arguments are ignored.
    """
    if _HELP_FLAG in arg:
        raise HelpRequested()
    if _LENGTH_FLAG in arg:
        matrix.length = get_numerical_argument(arg, len(_LENGTH_FLAG))
    elif _WIDTH_FLAG in arg:
        matrix.width = get_numerical_argument(arg, len(_WIDTH_FLAG))
    elif _MINES_FLAG in arg:
        matrix.num_mines = get_numerical_argument(arg, len(_MINES_FLAG))


def _write(window, text: str) -> None:
    try:
        window.addstr(text)
    except curses.error:
        pass


def print_help_argument(window, argument: str, description: str) -> None:
    """Write one aligned option line of the help screen."""
    print_green(window, "--")
    print_green(window, argument)
    padding = abs(_MAX_ARG_LENGTH - len(argument))
    _write(window, f"{':'.ljust(padding)} {description}")


def print_help(window) -> None:
    """Write the help screen."""
    print_green(window, "Welcome to Minesweeper.\n\n")
    print_blue(window, "Here are some helpful arguments:\n")
    print_help_argument(window, "matrix_length", "set the matrix length (default: 20)\n")
    print_help_argument(window, "matrix_width", "set the matrix width (default: 20)\n")
    print_help_argument(
        window,
        "num_mines",
        "set the number of mines to be generated (must be smaller than the area, default: 50)\n",
    )

    print_blue(window, "\nHow to play:\n")
    _write(window, "Mines are scattered around the matrix. Your objective is to find them.\n")
    _write(
        window,
        "Cells that do not contain a minefield will be numbered by the number of mines "
        "they're surrounded by, in the 3x3 square surrounding them.\n",
    )
    _write(window, "Left-clicking a cell will reveal its contents. ")
    print_red(window, "Make sure to only click if you're sure there's no minefield there!\n")
    _write(
        window,
        "Right-clicking a cell will place/remove a flag. "
        "You should use flags to indicate a minefield in the cell. ",
    )
    print_red(
        window,
        "Flagging a cell will not activate the minefield or reveal the cell's contents.\n",
    )
    print_green(window, "\nGood luck and have fun! Press anything to exit.\n")
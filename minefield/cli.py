"""Command-line entry point of the game."""

from __future__ import annotations

import curses
import signal
import sys

from .arguments import HelpRequested, parse_args, print_help
from .interface import TerminalTooSmall, UserInterface, check_size, cleanup, init_screen
from .matrix import GameMatrix


def build_matrix(argv) -> GameMatrix:
    """Create and initialise a minefield from command-line arguments.

    Raises HelpRequested when the help option is present.
    """
    matrix = GameMatrix()
    for arg in argv:
        parse_args(arg, matrix)
    matrix.init()
    return matrix


def _play(window, args) -> int:
    init_screen(window)
    try:
        matrix = build_matrix(args)
    except HelpRequested:
        print_help(window)
        window.refresh()
        window.getch()
        return 0

    check_size(window, matrix.length, matrix.width)
    window.clear()
    window.refresh()
    UserInterface(window, matrix).run()
    return 0


def main(argv=None) -> int:
    """Run the game in the terminal and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    window = curses.initscr()

    def _on_signal(signum, frame):
        cleanup(window)
        sys.exit(signum)

    previous = {
        sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    message = None
    try:
        status = _play(window, args)
    except TerminalTooSmall as exc:
        message = str(exc)
        status = 1
    finally:
        cleanup(window)
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    if message is not None:
        print(message, file=sys.stderr)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
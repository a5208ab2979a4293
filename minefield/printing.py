"""Coloured text output on a curses window."""

from __future__ import annotations

import curses
from enum import IntEnum


class Color(IntEnum):
    """Colour pair numbers set up by the interface."""

    RED = 1
    BLUE = 2
    GREEN = 3


def print_color(window, color: int, text: str) -> None:
    """Write ``text`` to ``window`` using colour pair ``color``."""
    attr = curses.color_pair(int(color))
    window.attron(attr)
    try:
        window.addstr(text)
    except curses.error:
        pass
    finally:
        window.attroff(attr)


def print_red(window, text: str) -> None:
    """Write ``text`` in red."""
    print_color(window, Color.RED, text)


def print_blue(window, text: str) -> None:
    """Write ``text`` in blue."""
    print_color(window, Color.BLUE, text)


def print_green(window, text: str) -> None:
    """Write ``text`` in green."""
    print_color(window, Color.GREEN, text)
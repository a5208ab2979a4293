import curses
import signal

import pytest

from minefield.arguments import HelpRequested
from minefield.cli import build_matrix, main
from minefield.matrix import (
    MATRIX_LENGTH_DEFAULT,
    MATRIX_MINES_DEFAULT,
    MATRIX_WIDTH_DEFAULT,
)


class FakeWindow:
    def __init__(self, rows=40, cols=120, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.written = []

    def getmaxyx(self):
        return self.rows, self.cols

    def getch(self):
        return self.keys.pop(0) if self.keys else ord("q")

    def addstr(self, text):
        self.written.append(text)

    def attron(self, attr):
        pass

    def attroff(self, attr):
        pass

    def clear(self):
        pass

    def refresh(self):
        pass

    def move(self, y, x):
        pass

    def keypad(self, flag):
        pass

    @property
    def text(self):
        return "".join(self.written)


@pytest.fixture
def fake_curses(monkeypatch):
    state = {"window": FakeWindow(), "ended": 0}

    def endwin():
        state["ended"] += 1

    monkeypatch.setattr(curses, "initscr", lambda: state["window"])
    monkeypatch.setattr(curses, "endwin", endwin)
    for name in ("start_color", "use_default_colors", "noecho", "cbreak"):
        monkeypatch.setattr(curses, name, lambda: None)
    monkeypatch.setattr(curses, "mousemask", lambda mask: (mask, 0))
    monkeypatch.setattr(curses, "resize_term", lambda rows, cols: None)
    monkeypatch.setattr(curses, "curs_set", lambda visibility: 1)
    monkeypatch.setattr(curses, "init_pair", lambda *args: None)
    monkeypatch.setattr(curses, "color_pair", lambda n: n << 8)
    return state


def test_build_matrix_applies_arguments():
    matrix = build_matrix(["--matrix_length=5", "--matrix_width=7", "--num_mines=3"])
    assert (matrix.length, matrix.width, matrix.num_mines) == (5, 7, 3)
    assert len(matrix.cells) == 5 * 7
    assert sum(cell.is_bomb for cell in matrix.cells) == 3


def test_build_matrix_defaults():
    matrix = build_matrix([])
    assert matrix.length == MATRIX_LENGTH_DEFAULT
    assert matrix.width == MATRIX_WIDTH_DEFAULT
    assert matrix.num_mines == MATRIX_MINES_DEFAULT
    assert sum(cell.is_bomb for cell in matrix.cells) == MATRIX_MINES_DEFAULT


def test_build_matrix_ignores_unknown_arguments():
    matrix = build_matrix(["minesweeper", "--colour=red", "--matrix_length=6"])
    assert matrix.length == 6
    assert matrix.width == MATRIX_WIDTH_DEFAULT


def test_build_matrix_too_many_mines_falls_back_to_default():
    matrix = build_matrix(["--matrix_length=8", "--matrix_width=8", "--num_mines=64"])
    assert matrix.num_mines == MATRIX_MINES_DEFAULT
    assert sum(cell.is_bomb for cell in matrix.cells) == MATRIX_MINES_DEFAULT


def test_build_matrix_help():
    with pytest.raises(HelpRequested):
        build_matrix(["--matrix_length=5", "--help"])


def test_main_help_shows_help_and_exits_cleanly(fake_curses):
    status = main(["--help"])
    assert status == 0
    assert "Welcome to Minesweeper." in fake_curses["window"].text
    assert fake_curses["ended"] >= 1


def test_main_terminal_too_small(fake_curses, capsys):
    fake_curses["window"] = FakeWindow(rows=5, cols=5)
    status = main(["--matrix_length=10", "--matrix_width=10"])
    assert status == 1
    assert "Terminal too small" in capsys.readouterr().err
    assert fake_curses["ended"] >= 1


def test_main_quit_ends_game_and_restores_signals(fake_curses):
    before = signal.getsignal(signal.SIGINT)
    fake_curses["window"] = FakeWindow(keys=[ord("q")])

    status = main(["--matrix_length=3", "--matrix_width=3", "--num_mines=1"])

    assert status == 0
    assert "GAME OVER! EXPLODED!!!" in fake_curses["window"].text
    assert signal.getsignal(signal.SIGINT) == before
    assert fake_curses["ended"] >= 1
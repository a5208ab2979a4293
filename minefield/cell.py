"""A single square of the minefield."""

from __future__ import annotations

from dataclasses import dataclass

_COUNTER_LIMIT = 256


@dataclass
class GameCell:
    """State of one square: visibility, mine, flag and neighbouring-mine count."""

    revealed: bool = False
    is_bomb: bool = False
    is_flag: bool = False
    num_surrounding_bombs: int = 0

    def clear(self) -> None:
        """Reset the cell to an empty, hidden square."""
        self.revealed = False
        self.is_bomb = False
        self.is_flag = False
        self.num_surrounding_bombs = 0

    def add_neighbouring_bomb(self) -> None:
        """Count one more mine next to this cell (an 8-bit counter)."""
        self.num_surrounding_bombs = (self.num_surrounding_bombs + 1) % _COUNTER_LIMIT
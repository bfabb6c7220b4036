"""Moves between squares of the board."""

from __future__ import annotations

from dataclasses import dataclass

from .piece import BOARD_ROWS, Piece


@dataclass
class Move:
    """A move from column ``x``, row ``y`` to column ``i``, row ``j``."""

    x: int
    y: int
    i: int
    j: int
    captured: Piece | None = None
    eat_move: bool = False
    eval: int = 0

    def is_capture(self) -> bool:
        """True when the move took an opponent's piece."""
        return self.eat_move


def format_square(x: int, y: int) -> str:
    """Show a board square as ``<row,column>``, for instance ``<1,A>``."""
    return f"<{BOARD_ROWS - y},{chr(x + ord('A'))}>"
"""A player and the pieces they own."""

from __future__ import annotations

from dataclasses import dataclass, field

from .piece import BLACK, NUM_PIECES, WHITE, Piece

_BACK_RANK = (
    (4, "k"),
    (3, "q"),
    (0, "r"),
    (7, "r"),
    (2, "b"),
    (5, "b"),
    (1, "n"),
    (6, "n"),
)


@dataclass(eq=False)
class User:
    """A player with a symbol, a colour and up to sixteen pieces."""

    symbol: str
    color: int
    pieces: list[Piece] = field(default_factory=list)
    king: Piece | None = None

    @property
    def num_pieces(self) -> int:
        return len(self.pieces)

    def initialize(self) -> User:
        """Set up the standard starting pieces, most valuable first."""
        if self.color == BLACK:
            back, pawns = 0, 1
        elif self.color == WHITE:
            back, pawns = 7, 6
        else:
            raise ValueError(f"invalid colour: {self.color!r}")
        self.pieces = [
            Piece(x, back, self.symbol, kind, self.color) for x, kind in _BACK_RANK
        ]
        self.pieces.extend(
            Piece(x, pawns, self.symbol, "m", self.color) for x in range(8)
        )
        self.king = self.pieces[0]
        return self

    def copy(self) -> User:
        """Return a user with copies of every piece."""
        clone = User(self.symbol, self.color)
        for piece in self.pieces:
            copied = piece.copy()
            clone.pieces.append(copied)
            if copied.kind == "k":
                clone.king = copied
        return clone

    def add_piece(self, x: int, y: int, kind: str) -> Piece:
        """Give the user a new piece at column ``x``, row ``y``."""
        if len(self.pieces) >= NUM_PIECES:
            raise ValueError(f"a player cannot own more than {NUM_PIECES} pieces")
        piece = Piece(x, y, self.symbol, kind, self.color)
        self.pieces.append(piece)
        if kind == "k":
            self.king = piece
        return piece
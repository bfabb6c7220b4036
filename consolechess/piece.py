"""Chess pieces, board constants and piece evaluation."""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_LINE_LENGTH = 1024
EXPERT_LEVEL = 5
EMPTY_PIECE = "_"
NUM_PIECES = 16
BOARD_ROWS = 8
BOARD_COLUMNS = 8
PLAYER_1 = "H"
PLAYER_2 = "C"
WHITE = 1
BLACK = 0
TWO_PLAYERS_MODE = 2
ONE_PLAYER_MODE = 1
USER_COLOR_DEFAULT = 1
DIFFICULTY_DEFAULT = 2

_BASIC_SCORES = {"k": 100, "q": 9, "r": 5, "b": 3, "n": 3, "m": 1}

_PAWN_TABLE = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5, 5, 10, 25, 25, 10, 5, 5),
    (0, 0, 0, 20, 20, 0, 0, 0),
    (5, -5, -10, 0, 0, -10, -5, 5),
    (5, 10, 10, -20, -20, 10, 10, 5),
    (0, 0, 0, 0, 0, 0, 0, 0),
)
_KNIGHT_TABLE = (
    (-50, -40, -30, -30, -30, -30, -40, -50),
    (-40, -20, 0, 0, 0, 0, -20, -40),
    (-30, 0, 10, 15, 15, 10, 0, -30),
    (-30, 5, 15, 20, 20, 15, 5, -30),
    (-30, 0, 15, 20, 20, 15, 0, -30),
    (-30, 5, 10, 15, 15, 10, 5, -30),
    (-40, -20, 0, 5, 5, 0, -20, -40),
    (-50, -40, -30, -30, -30, -30, -40, -50),
)
_BISHOP_TABLE = (
    (-20, -10, -10, -10, -10, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 10, 10, 5, 0, -10),
    (-10, 5, 5, 10, 10, 5, 5, -10),
    (-10, 0, 10, 10, 10, 10, 0, -10),
    (-10, 10, 10, 10, 10, 10, 10, -10),
    (-10, 5, 0, 0, 0, 0, 5, -10),
    (-20, -10, -10, -10, -10, -10, -10, -20),
)
_ROOK_TABLE = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (5, 10, 10, 10, 10, 10, 10, 5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (0, 0, 0, 5, 5, 0, 0, 0),
)
_QUEEN_TABLE = (
    (-20, -10, -10, -5, -5, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 5, 5, 5, 0, -10),
    (-5, 0, 5, 5, 5, 5, 0, -5),
    (0, 0, 5, 5, 5, 5, 0, -5),
    (-10, 5, 5, 5, 5, 5, 0, -10),
    (-10, 0, 5, 0, 0, 0, 0, -10),
    (-20, -10, -10, -5, -5, -10, -10, -20),
)
_KING_TABLE = (
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-20, -30, -30, -40, -40, -30, -30, -20),
    (-10, -20, -20, -20, -20, -20, -20, -10),
    (20, 20, 0, 0, 0, 0, 20, 20),
    (20, 30, 10, 0, 0, 10, 30, 20),
)

_EXPERT = {
    "k": (20000, _KING_TABLE),
    "q": (900, _QUEEN_TABLE),
    "r": (500, _ROOK_TABLE),
    "b": (330, _BISHOP_TABLE),
    "n": (320, _KNIGHT_TABLE),
    "m": (100, _PAWN_TABLE),
}

_NAMES = {
    "k": "King",
    "r": "Rook",
    "q": "Queen",
    "b": "Bishop",
    "n": "Knight",
    "m": "Pawn",
}


@dataclass(eq=False)
class Piece:
    """A piece on the board; ``kind`` is one of k, q, r, b, n, m (pawn)."""

    x: int
    y: int
    player: str
    kind: str
    color: int
    alive: bool = True

    def copy(self) -> Piece:
        """Return an independent piece with the same fields."""
        return replace(self)

    def score(self) -> int:
        """Material value of a living piece, 0 once it has been captured."""
        if not self.alive:
            return 0
        return _BASIC_SCORES.get(self.kind, 0)

    def expert_score(self) -> int:
        """Material plus positional value, seen from the piece owner's side."""
        if not self.alive or self.kind not in _EXPERT:
            return 0
        row = self.y if self.color == WHITE else BOARD_ROWS - 1 - self.y
        base, table = _EXPERT[self.kind]
        return base + table[row][self.x]

    def move_to(self, i: int, j: int) -> None:
        """Place the piece on column ``i``, row ``j``."""
        self.x = i
        self.y = j

    def symbol(self) -> str:
        """Board letter: upper case for black, lower case for white."""
        return self.kind.upper() if self.color == BLACK else self.kind

    def name(self) -> str | None:
        """Colour and piece name, such as ``BlackKing``; None for an unknown kind."""
        base = _NAMES.get(self.kind)
        if base is None:
            return None
        return ("Black" if self.color == BLACK else "White") + base


def piece_symbol(piece: Piece | None) -> str:
    """Board letter for a square, ``_`` when it is empty."""
    return EMPTY_PIECE if piece is None else piece.symbol()
"""The chess board, the two players on it and the history of moves played."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto

from .errors import ChessError, ErrorKind
from .move import Move
from .piece import (
    BLACK,
    BOARD_COLUMNS,
    BOARD_ROWS,
    PLAYER_1,
    PLAYER_2,
    Piece,
    piece_symbol,
)
from .settings import Settings, default_settings
from .user import User

HISTORY_SIZE = 6


class GameMessage(Enum):
    """Outcomes reported about a game."""

    INVALID_MOVE = auto()
    INVALID_ARGUMENT = auto()
    NO_HISTORY = auto()
    SUCCESS = auto()
    CHECK = auto()
    TIE = auto()
    CHECKMATE = auto()
    CONTINUE = auto()


class NoHistoryError(ChessError):
    """Raised when there is no move left to undo."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.UNDO_MOVE)


def index_is_valid(x: int, y: int) -> bool:
    """True when column ``x`` and row ``y`` lie on the board."""
    return 0 <= x < BOARD_COLUMNS and 0 <= y < BOARD_ROWS


class Game:
    """An 8x8 chess board with two players and a bounded move history.

    ``board[j][i]`` holds the piece on row ``j``, column ``i``, or None.
    Row 0 is the top of the printed board (row 8 to the player).
    """

    def __init__(self, history_size: int = HISTORY_SIZE) -> None:
        if history_size <= 0:
            raise ChessError(ErrorKind.COMMAND_LINE, "GameCreate")
        self.settings: Settings = default_settings()
        self.board: list[list[Piece | None]] = [
            [None] * BOARD_COLUMNS for _ in range(BOARD_ROWS)
        ]
        self.user1: User | None = None
        self.user2: User | None = None
        self.current_player: str = PLAYER_1
        self.history: deque[Move] = deque(maxlen=history_size)

    def initialize(self, settings: Settings) -> Game:
        """Apply the settings and set up both players' starting pieces."""
        self.settings = Settings(
            settings.game_level, settings.game_mode, settings.user_color
        )
        color = self.settings.user_color
        self.user1 = User(PLAYER_1, color).initialize()
        self.user2 = User(PLAYER_2, 1 - color).initialize()
        for piece in (*self.user1.pieces, *self.user2.pieces):
            self.board[piece.y][piece.x] = piece
        self.current_player = PLAYER_2 if settings.user_color == BLACK else PLAYER_1
        return self

    def set_move(self, move: Move) -> None:
        """Play a move and record it, dropping the oldest one when full."""
        self.apply(move)
        self.history.append(move)

    def apply(self, move: Move) -> None:
        """Move the piece on the board, recording any capture in ``move``."""
        mover = self.board[move.y][move.x]
        if mover is None:
            raise ValueError(f"no piece at column {move.x}, row {move.y}")
        move.eat_move = False
        move.captured = None
        target = self.board[move.j][move.i]
        if target is not None:
            move.captured = target
            move.eat_move = True
            target.alive = False
        self.board[move.j][move.i] = mover
        self.board[move.y][move.x] = None
        mover.move_to(move.i, move.j)

    def revert(self, move: Move) -> None:
        """Take back a move made by :meth:`apply`, restoring any capture."""
        mover = self.board[move.j][move.i]
        if mover is None:
            raise ValueError(f"no piece at column {move.i}, row {move.j}")
        self.board[move.y][move.x] = mover
        mover.move_to(move.x, move.y)
        self.board[move.j][move.i] = None
        if move.eat_move and move.captured is not None:
            move.captured.alive = True
            self.board[move.j][move.i] = move.captured

    def undo_prev_move(self) -> Move:
        """Take back the last recorded move and return it."""
        if not self.history:
            raise NoHistoryError()
        move = self.history.pop()
        self.revert(move)
        return move

    def change_turn(self) -> None:
        """Pass the turn to the other player."""
        self.current_player = PLAYER_2 if self.current_player == PLAYER_1 else PLAYER_1

    def current_user(self) -> User:
        """The player whose turn it is."""
        user = self.user1 if self.current_player == PLAYER_1 else self.user2
        if user is None:
            raise ChessError(ErrorKind.NULL_POINTER)
        return user

    def render(self) -> str:
        """The board as printed to the console."""
        lines = [
            f"{BOARD_ROWS - j}|"
            + "".join(f" {piece_symbol(piece)}" for piece in row)
            + " |"
            for j, row in enumerate(self.board)
        ]
        lines.append("  " + "-" * (2 * BOARD_COLUMNS + 1))
        lines.append(
            "   " + " ".join(chr(ord("A") + i) for i in range(BOARD_COLUMNS))
        )
        return "\n".join(lines) + "\n"
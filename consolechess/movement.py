"""Move legality and threat detection on a chess board."""

from __future__ import annotations

from collections.abc import Callable

from .board import Game, index_is_valid
from .move import Move
from .piece import BLACK, WHITE, Piece

_DIAGONALS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
_ORTHOGONALS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_KNIGHT_OFFSETS = ((1, -2), (2, -1), (1, 2), (-1, 2), (2, 1), (-2, 1), (-2, -1), (-1, -2))
_KING_OFFSETS = ((1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1))
_RAY_LENGTH = 8


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _rook_move(game: Game, move: Move) -> bool:
    if move.y != move.j and move.x != move.i:
        return False
    if move.y == move.j and move.x != move.i:
        low, high = sorted((move.x, move.i))
        return all(game.board[move.y][n] is None for n in range(low + 1, high))
    if move.x == move.i and move.y != move.j:
        low, high = sorted((move.y, move.j))
        return all(game.board[n][move.x] is None for n in range(low + 1, high))
    return True


def _bishop_move(game: Game, move: Move) -> bool:
    dx = _sign(move.i - move.x)
    dy = _sign(move.j - move.y)
    if dx == 0 or dy == 0:
        return False
    x, y = move.x + dx, move.y + dy
    while index_is_valid(x, y):
        if (x, y) == (move.i, move.j):
            return True
        if game.board[y][x] is not None:
            return False
        x += dx
        y += dy
    return False


def _knight_move(game: Game, move: Move) -> bool:
    dx = abs(move.i - move.x)
    dy = abs(move.j - move.y)
    return (dx, dy) in ((2, 1), (1, 2))


def _queen_move(game: Game, move: Move) -> bool:
    return _bishop_move(game, move) or _rook_move(game, move)


def _king_move(game: Game, move: Move) -> bool:
    dx = abs(move.i - move.x)
    dy = abs(move.j - move.y)
    return max(dx, dy) == 1


def _pawn_move_directed(game: Game, move: Move, step: int, start_row: int) -> bool:
    mover = game.board[move.y][move.x]
    target = game.board[move.j][move.i]
    if move.j == move.y + step and move.x == move.i:
        return target is None
    if move.y == start_row and move.x == move.i:
        if move.j == move.y + 2 * step:
            return target is None and game.board[move.y + step][move.x] is None
        return False
    if move.j == move.y + step and abs(move.i - move.x) == 1 and target is not None:
        return target.player != mover.player
    return False


def _pawn_move(game: Game, move: Move) -> bool:
    color = game.current_user().color
    if color == WHITE:
        return _pawn_move_directed(game, move, -1, 6)
    if color == BLACK:
        return _pawn_move_directed(game, move, 1, 1)
    return False


_RULES: dict[str, Callable[[Game, Move], bool]] = {
    "r": _rook_move,
    "b": _bishop_move,
    "n": _knight_move,
    "q": _queen_move,
    "k": _king_move,
    "m": _pawn_move,
}


def pseudo_legal_move(game: Game, move: Move) -> bool:
    """True when the piece may make the move, ignoring its own king's safety.

    Pawn direction follows the colour of the player whose turn it is.
    """
    mover = game.board[move.y][move.x]
    if mover is None:
        return False
    rule = _RULES.get(mover.kind)
    return rule is not None and rule(game, move)


def is_valid_move(game: Game, move: Move) -> bool:
    """True when the current player may legally make the move."""
    if not (index_is_valid(move.i, move.j) and index_is_valid(move.x, move.y)):
        return False
    mover = game.board[move.y][move.x]
    if mover is None or mover.color != game.current_user().color:
        return False
    target = game.board[move.j][move.i]
    if target is not None and target.color == mover.color:
        return False
    if not pseudo_legal_move(game, move):
        return False
    game.apply(move)
    try:
        return not in_check(game)
    finally:
        game.revert(move)


def _threat_from(game: Game, x: int, y: int, i: int, j: int) -> Piece | None:
    if not index_is_valid(x, y):
        return None
    attacker = game.board[y][x]
    if attacker is None or attacker.player == game.current_player:
        return None
    move = Move(x, y, i, j)
    target = game.board[j][i]
    game.change_turn()
    try:
        if target is not None and target.kind == "k":
            reaches = pseudo_legal_move(game, move)
        else:
            reaches = is_valid_move(game, move)
    finally:
        game.change_turn()
    return attacker if reaches else None


def _threat_along(game: Game, i: int, j: int, dx: int, dy: int) -> Piece | None:
    for step in range(1, _RAY_LENGTH + 1):
        found = _threat_from(game, i + step * dx, j + step * dy, i, j)
        if found is not None:
            return found
    return None


def threat(game: Game, i: int, j: int) -> Piece | None:
    """The first opponent piece that can reach column ``i``, row ``j``, or None."""
    if not index_is_valid(i, j):
        return None
    for dx, dy in (*_DIAGONALS, *_ORTHOGONALS):
        found = _threat_along(game, i, j, dx, dy)
        if found is not None:
            return found
    color = game.current_user().color
    if color == WHITE:
        pawn_offsets: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1))
    elif color == BLACK:
        pawn_offsets = ((-1, 1), (1, 1))
    else:
        pawn_offsets = ()
    for dx, dy in (*_KNIGHT_OFFSETS, *pawn_offsets, *_KING_OFFSETS):
        found = _threat_from(game, i + dx, j + dy, i, j)
        if found is not None:
            return found
    return None


def in_check(game: Game) -> bool:
    """True when the current player's king is attacked."""
    king = game.current_user().king
    if king is None:
        return False
    return threat(game, king.x, king.y) is not None
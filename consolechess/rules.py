"""Move generation, checkmate, tie detection and the get_moves listing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from .board import Game, GameMessage
from .move import Move, format_square
from .movement import in_check, is_valid_move, threat
from .piece import BLACK, BOARD_ROWS, WHITE, Piece

_KNIGHT_STEPS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
_KING_STEPS = ((1, 1), (1, 0), (1, -1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (0, 1))


@contextmanager
def _opponent_turn(game: Game) -> Iterator[None]:
    """Hand the turn to the other player for the duration of the block."""
    game.change_turn()
    try:
        yield
    finally:
        game.change_turn()


def _legal_moves(game: Game, piece: Piece, targets: Iterable[tuple[int, int]]) -> list[Move]:
    x, y = piece.x, piece.y
    moves = []
    for i, j in targets:
        move = Move(x, y, i, j)
        if is_valid_move(game, move):
            moves.append(move)
    return moves


def _rook_targets(piece: Piece) -> Iterator[tuple[int, int]]:
    x, y = piece.x, piece.y
    for n in range(BOARD_ROWS):
        if x != n:
            yield n, y
        if y != n:
            yield x, n


def _bishop_targets(piece: Piece) -> Iterator[tuple[int, int]]:
    x, y = piece.x, piece.y
    for n in range(BOARD_ROWS):
        yield x + n, y + n
        yield x - n, y - n
        yield x + n, y - n
        yield x - n, y + n


def _step_targets(piece: Piece, steps: Iterable[tuple[int, int]]) -> Iterator[tuple[int, int]]:
    return ((piece.x + dx, piece.y + dy) for dx, dy in steps)


def _pawn_targets(game: Game, piece: Piece) -> list[tuple[int, int]]:
    color = game.current_user().color
    if color == WHITE:
        step = -1
    elif color == BLACK:
        step = 1
    else:
        return []
    x, y = piece.x, piece.y
    return [(x + 1, y + step), (x - 1, y + step), (x, y + step), (x, y + 2 * step)]


def get_moves(game: Game, piece: Piece) -> list[Move]:
    """All legal moves of a piece for the player whose turn it is."""
    kind = piece.kind
    if kind == "r":
        return _legal_moves(game, piece, _rook_targets(piece))
    if kind == "b":
        return _legal_moves(game, piece, _bishop_targets(piece))
    if kind == "n":
        return _legal_moves(game, piece, _step_targets(piece, _KNIGHT_STEPS))
    if kind == "q":
        return _legal_moves(game, piece, _rook_targets(piece)) + _legal_moves(
            game, piece, _bishop_targets(piece)
        )
    if kind == "k":
        return _legal_moves(game, piece, _step_targets(piece, _KING_STEPS))
    if kind == "m":
        return _legal_moves(game, piece, _pawn_targets(game, piece))
    raise ValueError(f"unknown piece kind: {kind!r}")


def is_checkmate(game: Game) -> bool:
    """True when the current player is mated; the mated king is marked captured."""
    current = game.current_user()
    king = current.king
    if king is None:
        return False
    attacker = threat(game, king.x, king.y)
    if attacker is None:
        return False
    if _legal_moves(game, king, _step_targets(king, _KING_STEPS)):
        return False
    opponent = game.user2 if current is game.user1 else game.user1
    if opponent is not None:
        for piece in opponent.pieces:
            if piece is attacker:
                continue
            move = Move(piece.x, piece.y, king.x, king.y)
            with _opponent_turn(game):
                second_attacker = is_valid_move(game, move)
            if second_attacker:
                king.alive = False
                return True
    with _opponent_turn(game):
        capturer = threat(game, attacker.x, attacker.y)
    if capturer is not None:
        return False
    if can_block_threat(game, king, attacker):
        return False
    king.alive = False
    return True


def _bishop_block_squares(king: Piece, attacker: Piece) -> Iterator[tuple[int, int]]:
    kx, ky, ax, ay = king.x, king.y, attacker.x, attacker.y
    if kx < ax and ky > ay:
        return ((kx + n, ky - n) for n in range(1, ky - ay))
    if kx > ax and ky > ay:
        return ((kx - n, ky - n) for n in range(1, ky - ay + 1))
    if kx < ax and ky < ay:
        return ((kx + n, ky + n) for n in range(1, ay - ky + 1))
    if kx > ax and ky < ay:
        return ((kx - n, ky + n) for n in range(1, ay - ky + 1))
    return iter(())


def _rook_block_squares(king: Piece, attacker: Piece) -> Iterator[tuple[int, int]]:
    kx, ky, ax, ay = king.x, king.y, attacker.x, attacker.y
    if kx == ax and ky > ay:
        return ((kx, r) for r in range(ky - 1, ay - 1, -1))
    if kx == ax and ky < ay:
        return ((kx, r) for r in range(ky + 1, ay + 1))
    if kx > ax and ky == ay:
        return ((c, ky) for c in range(kx - 1, ax - 1, -1))
    if kx < ax and ky == ay:
        return ((c, ky) for c in range(kx + 1, ax + 1))
    return iter(())


def _can_reach_any(game: Game, squares: Iterable[tuple[int, int]]) -> bool:
    with _opponent_turn(game):
        return any(threat(game, i, j) is not None for i, j in squares)


def can_block_threat(game: Game, king: Piece, attacker: Piece) -> bool:
    """True when the king's side can put a piece on the attacker's line."""
    kind = attacker.kind
    if kind == "r":
        return _can_reach_any(game, _rook_block_squares(king, attacker))
    if kind == "b":
        return _can_reach_any(game, _bishop_block_squares(king, attacker))
    if kind == "q":
        return _can_reach_any(game, _rook_block_squares(king, attacker)) or _can_reach_any(
            game, _bishop_block_squares(king, attacker)
        )
    return False


def is_tie(game: Game) -> bool:
    """True when no living piece of the current player other than the king can move."""
    return not any(
        get_moves(game, piece)
        for piece in game.current_user().pieces
        if piece.alive and piece.kind != "k"
    )


def game_status(game: Game) -> GameMessage:
    """CHECKMATE, CHECK, TIE or CONTINUE for the player whose turn it is."""
    if in_check(game):
        if is_checkmate(game):
            return GameMessage.CHECKMATE
        return GameMessage.CHECK
    if is_tie(game):
        return GameMessage.TIE
    return GameMessage.CONTINUE


def format_get_moves(game: Game, moves: Iterable[Move]) -> str:
    """List moves by target square, ``*`` when attacked there and ``^`` on a capture.

    Squares are ordered by row number, then by column.
    """
    ordered = sorted(moves, key=lambda m: (BOARD_ROWS - m.j, m.i))
    lines = []
    for move in ordered:
        capture = move.is_capture()
        game.apply(move)
        try:
            attacked = threat(game, move.i, move.j) is not None
        finally:
            game.revert(move)
        suffix = ("*" if attacked else "") + ("^" if capture else "")
        lines.append(format_square(move.i, move.j) + suffix + "\n")
    return "".join(lines)
from collections import Counter

import pytest

from consolechess.piece import BLACK, NUM_PIECES, PLAYER_1, PLAYER_2, WHITE
from consolechess.user import User


def test_new_user_has_no_pieces():
    user = User(PLAYER_1, WHITE)
    assert user.num_pieces == 0
    assert user.king is None


def test_initialize_white():
    user = User(PLAYER_1, WHITE).initialize()
    assert user.num_pieces == NUM_PIECES
    assert user.king is user.pieces[0]
    assert (user.king.kind, user.king.x, user.king.y) == ("k", 4, 7)
    assert {p.y for p in user.pieces if p.kind == "m"} == {6}
    assert {p.y for p in user.pieces if p.kind != "m"} == {7}
    assert all(p.color == WHITE and p.player == PLAYER_1 for p in user.pieces)


def test_initialize_black():
    user = User(PLAYER_2, BLACK).initialize()
    assert (user.king.x, user.king.y) == (4, 0)
    assert {p.y for p in user.pieces if p.kind == "m"} == {1}
    assert {p.y for p in user.pieces if p.kind != "m"} == {0}


def test_initial_piece_counts_and_squares():
    user = User(PLAYER_1, WHITE).initialize()
    counts = Counter(p.kind for p in user.pieces)
    assert counts == {"k": 1, "q": 1, "r": 2, "b": 2, "n": 2, "m": 8}
    squares = {(p.x, p.y) for p in user.pieces}
    assert len(squares) == NUM_PIECES
    assert [p.kind for p in user.pieces[:2]] == ["k", "q"]


def test_initialize_rejects_bad_colour():
    with pytest.raises(ValueError):
        User(PLAYER_1, 7).initialize()


def test_copy_is_deep():
    user = User(PLAYER_1, WHITE).initialize()
    clone = user.copy()
    assert clone.num_pieces == user.num_pieces
    assert clone.king is not user.king
    assert clone.king.kind == "k"
    assert [(p.x, p.y, p.kind) for p in clone.pieces] == [
        (p.x, p.y, p.kind) for p in user.pieces
    ]
    clone.pieces[5].move_to(3, 3)
    assert (user.pieces[5].x, user.pieces[5].y) != (3, 3)


def test_add_piece_sets_king():
    user = User(PLAYER_2, BLACK)
    rook = user.add_piece(0, 0, "r")
    king = user.add_piece(4, 0, "k")
    assert user.pieces == [rook, king]
    assert user.king is king
    assert king.player == PLAYER_2 and king.color == BLACK


def test_add_piece_limit():
    user = User(PLAYER_1, WHITE).initialize()
    with pytest.raises(ValueError):
        user.add_piece(0, 0, "q")
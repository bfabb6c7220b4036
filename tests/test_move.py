from consolechess.move import Move, format_square
from consolechess.piece import BLACK, PLAYER_2, Piece


def test_new_move_is_not_capture():
    move = Move(1, 2, 3, 4)
    assert (move.x, move.y, move.i, move.j) == (1, 2, 3, 4)
    assert move.is_capture() is False
    assert move.captured is None


def test_capture_flag():
    victim = Piece(3, 4, PLAYER_2, "m", BLACK)
    move = Move(1, 2, 3, 4, captured=victim, eat_move=True)
    assert move.is_capture() is True
    assert move.captured is victim


def test_format_square_corners():
    assert format_square(0, 7) == "<1,A>"
    assert format_square(7, 0) == "<8,H>"


def test_format_square_all_distinct():
    squares = {format_square(x, y) for x in range(8) for y in range(8)}
    assert len(squares) == 64
    assert all(s.startswith("<") and s.endswith(">") for s in squares)
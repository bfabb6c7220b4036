import pytest

from consolechess.errors import ChessError, ErrorKind, error_message


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ErrorKind.FILE_SAVE, "File cannot be created or modified"),
        (ErrorKind.FILE_LOAD, "Error: File doesn't exist or cannot be opened"),
        (ErrorKind.COMMAND_LINE, "ERROR: invalid command"),
        (ErrorKind.UNDO_MOVE, "Empty history, move cannot be undone"),
        (ErrorKind.NULL_POINTER, "ERROR: there was a case of null pointer exception"),
    ],
)
def test_fixed_messages(kind, expected):
    assert error_message(kind) == expected


def test_memory_message_names_function():
    assert error_message(ErrorKind.MEMORY, "GameCreate") == "ERROR: GameCreate has failed"


def test_chess_error_carries_kind_and_message():
    with pytest.raises(ChessError) as info:
        raise ChessError(ErrorKind.UNDO_MOVE)
    assert info.value.kind is ErrorKind.UNDO_MOVE
    assert str(info.value) == error_message(ErrorKind.UNDO_MOVE)


def test_chess_error_keeps_function_name():
    err = ChessError(ErrorKind.MEMORY, "User1")
    assert err.func == "User1"
    assert str(err) == "ERROR: User1 has failed"


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        error_message("bogus")
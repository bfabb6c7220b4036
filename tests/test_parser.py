import pytest

from consolechess.move import format_square
from consolechess.parser import CommandType, is_int, parse_line


@pytest.mark.parametrize(
    "text, expected",
    [("12", True), ("5\n", True), ("1a", False), ("", False), (None, False), ("-3", False)],
)
def test_is_int(text, expected):
    assert is_int(text) is expected


@pytest.mark.parametrize("line", ["", "   \n", "\t\r\n", "bogus", "undo now", "start 1"])
def test_invalid_lines(line):
    assert parse_line(line).cmd is CommandType.INVALID_LINE


@pytest.mark.parametrize(
    "line, kind",
    [
        ("undo\n", CommandType.UNDO_MOVE),
        ("default", CommandType.DEFAULT),
        ("reset", CommandType.RESTART),
        ("print_setting", CommandType.PRINT_SETTINGS),
        ("  quit\t\n", CommandType.QUIT),
        ("start", CommandType.START),
    ],
)
def test_single_word_commands(line, kind):
    command = parse_line(line)
    assert command.cmd is kind
    assert command.valid_arg is True


@pytest.mark.parametrize(
    "word, kind",
    [
        ("game_mode", CommandType.GAME_MODE),
        ("difficulty", CommandType.DIFFICULTY),
        ("user_color", CommandType.USER_COLOR),
    ],
)
def test_integer_arguments(word, kind):
    command = parse_line(f"{word} 2\n")
    assert command.cmd is kind
    assert command.arg == 2
    assert command.valid_arg is True


def test_non_integer_argument_keeps_default():
    command = parse_line("difficulty x")
    assert command.cmd is CommandType.DIFFICULTY
    assert command.arg == -1
    missing = parse_line("game_mode")
    assert missing.cmd is CommandType.GAME_MODE
    assert missing.arg == -1


def test_move_round_trips_squares():
    command = parse_line("move <2,A> to <3,A>\n")
    assert command.cmd is CommandType.MOVE
    assert format_square(command.move.x, command.move.y) == "<2,A>"
    assert format_square(command.move.i, command.move.j) == "<3,A>"


@pytest.mark.parametrize(
    "line",
    ["move", "move <2,A>", "move <2,A> onto <3,A>", "move <2,A> to", "move <x,A> to <3,A>", "move <2,A> to 3A"],
)
def test_malformed_moves(line):
    assert parse_line(line).cmd is CommandType.INVALID_LINE


def test_get_moves():
    command = parse_line("get_moves <5,E>")
    assert command.cmd is CommandType.GET_MOVES
    assert format_square(command.move.x, command.move.y) == "<5,E>"
    assert parse_line("get_moves").cmd is CommandType.INVALID_LINE
    assert parse_line("get_moves E5").cmd is CommandType.INVALID_LINE


def test_load_existing_file(tmp_path):
    saved = tmp_path / "game.xml"
    saved.write_text("content")
    command = parse_line(f"load {saved}")
    assert command.cmd is CommandType.LOAD
    assert command.path == str(saved)
    assert command.valid_arg is True


def test_load_missing_file(tmp_path):
    command = parse_line(f"load {tmp_path / 'missing.xml'}")
    assert command.cmd is CommandType.LOAD
    assert command.path is None
    assert command.valid_arg is False


def test_save_creates_file(tmp_path):
    target = tmp_path / "out.xml"
    command = parse_line(f"save {target}")
    assert command.cmd is CommandType.SAVE
    assert command.path == str(target)
    assert target.exists()


def test_save_into_missing_directory(tmp_path):
    command = parse_line(f"save {tmp_path / 'nowhere' / 'out.xml'}")
    assert command.cmd is CommandType.SAVE
    assert command.path is None
    assert command.valid_arg is False
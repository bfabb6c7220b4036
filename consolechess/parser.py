"""Parsing of the lines a player types at the console."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto

from .move import Move
from .piece import BOARD_ROWS

_DELIMITERS = re.compile(r"[ \t\r\n]+")
_SQUARE = re.compile(r"<([+-]?\d+),(.)", re.DOTALL)
_DIGITS = frozenset("0123456789")


class CommandType(Enum):
    """Kinds of command a line can hold."""

    GAME_MODE = auto()
    DIFFICULTY = auto()
    USER_COLOR = auto()
    LOAD = auto()
    DEFAULT = auto()
    PRINT_SETTINGS = auto()
    QUIT = auto()
    RESTART = auto()
    UNDO_MOVE = auto()
    START = auto()
    MOVE = auto()
    SAVE = auto()
    INVALID_LINE = auto()
    GET_MOVES = auto()


def _default_move() -> Move:
    return Move(0, 0, 0, 1)


@dataclass
class Command:
    """A parsed line: its kind, an integer argument, a move and a file path."""

    cmd: CommandType = CommandType.INVALID_LINE
    valid_arg: bool = False
    arg: int = -1
    move: Move = field(default_factory=_default_move)
    path: str | None = None


_SINGLE_WORDS = {
    "undo": CommandType.UNDO_MOVE,
    "default": CommandType.DEFAULT,
    "reset": CommandType.RESTART,
    "print_setting": CommandType.PRINT_SETTINGS,
    "quit": CommandType.QUIT,
    "start": CommandType.START,
}

_INT_COMMANDS = {
    "game_mode": CommandType.GAME_MODE,
    "difficulty": CommandType.DIFFICULTY,
    "user_color": CommandType.USER_COLOR,
}


def is_int(text: str | None) -> bool:
    """True when the text is made of decimal digits up to its first newline."""
    if not text:
        return False
    return all(ch in _DIGITS for ch in text.split("\n", 1)[0])


def _parse_square(token: str | None) -> tuple[int, int] | None:
    """Column and row indices of a ``<row,column>`` token, or None."""
    if token is None:
        return None
    match = _SQUARE.match(token)
    if match is None:
        return None
    row, column = int(match.group(1)), match.group(2)
    return ord(column) - ord("A"), BOARD_ROWS - row


def _parse_get_moves(command: Command, args: list[str]) -> Command:
    square = _parse_square(args[0] if args else None)
    if square is None:
        command.cmd = CommandType.INVALID_LINE
        return command
    command.move.x, command.move.y = square
    command.cmd = CommandType.GET_MOVES
    return command


def _parse_move(command: Command, args: list[str]) -> Command:
    source = _parse_square(args[0] if args else None)
    if source is None or len(args) < 2 or args[1] != "to":
        command.cmd = CommandType.INVALID_LINE
        return command
    target = _parse_square(args[2] if len(args) > 2 else None)
    if target is None:
        command.cmd = CommandType.INVALID_LINE
        return command
    command.move.x, command.move.y = source
    command.move.i, command.move.j = target
    command.cmd = CommandType.MOVE
    return command


def _parse_int_argument(command: Command, kind: CommandType, args: list[str]) -> Command:
    command.cmd = kind
    token = args[0] if args else None
    if is_int(token):
        command.arg = int(token)
    command.valid_arg = True
    return command


def _parse_path(command: Command, kind: CommandType, args: list[str], mode: str) -> Command:
    """Keep the path when the file can be opened in ``mode``.

    Opening with ``"w"`` creates or empties the file, as a save will.
    """
    command.cmd = kind
    command.path = None
    if not args:
        return command
    try:
        with open(args[0], mode):
            pass
    except OSError:
        return command
    command.path = args[0]
    command.valid_arg = True
    return command


def parse_line(line: str) -> Command:
    """Parse one console line into a :class:`Command`."""
    command = Command()
    tokens = [token for token in _DELIMITERS.split(line) if token]
    if not tokens:
        return command
    word, args = tokens[0], tokens[1:]
    if word == "move":
        return _parse_move(command, args)
    if word == "get_moves":
        return _parse_get_moves(command, args)
    if word in _INT_COMMANDS:
        return _parse_int_argument(command, _INT_COMMANDS[word], args)
    if word == "load":
        return _parse_path(command, CommandType.LOAD, args, "r")
    if word == "save":
        return _parse_path(command, CommandType.SAVE, args, "w")
    if not args and word in _SINGLE_WORDS:
        command.cmd = _SINGLE_WORDS[word]
        command.valid_arg = True
    return command
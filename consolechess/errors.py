"""Error kinds reported by the chess program and the exception that carries them."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The kinds of error the program reports to the player."""

    MEMORY = "memory"
    COMMAND_LINE = "command_line"
    UNDO_MOVE = "undo_move"
    NULL_POINTER = "null_pointer"
    FILE_SAVE = "file_save"
    FILE_LOAD = "file_load"


def error_message(kind: ErrorKind, func: str | None = None) -> str:
    """Return the text shown to the player for an error of the given kind."""
    if kind is ErrorKind.MEMORY:
        return f"ERROR: {func} has failed"
    if kind is ErrorKind.FILE_SAVE:
        return "File cannot be created or modified"
    if kind is ErrorKind.FILE_LOAD:
        return "Error: File doesn't exist or cannot be opened"
    if kind is ErrorKind.COMMAND_LINE:
        return "ERROR: invalid command"
    if kind is ErrorKind.UNDO_MOVE:
        return "Empty history, move cannot be undone"
    if kind is ErrorKind.NULL_POINTER:
        return "ERROR: there was a case of null pointer exception"
    raise ValueError(f"unknown error kind: {kind!r}")


class ChessError(Exception):
    """An error whose message is the one the player sees."""

    def __init__(self, kind: ErrorKind, func: str | None = None) -> None:
        self.kind = kind
        self.func = func
        super().__init__(error_message(kind, func))
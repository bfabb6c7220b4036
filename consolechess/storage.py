"""Saving games to, and loading them from, the XML file format."""

from __future__ import annotations

import re

from .board import HISTORY_SIZE, Game
from .errors import ChessError, ErrorKind
from .piece import (
    BLACK,
    BOARD_COLUMNS,
    BOARD_ROWS,
    EMPTY_PIECE,
    ONE_PLAYER_MODE,
    PLAYER_1,
    PLAYER_2,
    WHITE,
    piece_symbol,
)
from .settings import Settings
from .user import User

_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n<game>\n'
_ROW = re.compile(r"<row_[+-]?\d+>(\S+)")
_TWO_PLAYER_LEVEL = 2
_TWO_PLAYER_COLOR = 1


def dumps_game(game: Game) -> str:
    """The game as the text of a save file."""
    settings = game.settings
    parts = [
        _HEADER,
        f"\t<current_turn>{game.current_user().color}</current_turn>\n",
        f"\t<game_mode>{settings.game_mode}</game_mode>\n",
    ]
    if settings.game_mode == ONE_PLAYER_MODE:
        parts.append(f"\t<difficulty>{settings.game_level}</difficulty>\n")
        parts.append(f"\t<user_color>{settings.user_color}</user_color>\n")
    parts.append("\t<board>\n")
    for j, row in enumerate(game.board):
        number = BOARD_ROWS - j
        line = "".join(piece_symbol(piece) for piece in row)
        parts.append(f"\t\t<row_{number}>{line}</row_{number}>\n")
    parts.append("\t</board>\n</game>\n")
    return "".join(parts)


def _int_field(text: str, tag: str) -> int:
    match = re.search(rf"<{tag}>\s*([+-]?\d+)", text)
    if match is None:
        raise ChessError(ErrorKind.FILE_LOAD)
    return int(match.group(1))


def _player_to_move(turn: int, user_color: int) -> str:
    if turn == WHITE:
        return PLAYER_1 if user_color == WHITE else PLAYER_2
    return PLAYER_2 if user_color == WHITE else PLAYER_1


def loads_game(text: str) -> Game:
    """Build a game from the text of a save file."""
    turn = _int_field(text, "current_turn")
    mode = _int_field(text, "game_mode")
    if mode == ONE_PLAYER_MODE:
        level = _int_field(text, "difficulty")
        color = _int_field(text, "user_color")
    else:
        level, color = _TWO_PLAYER_LEVEL, _TWO_PLAYER_COLOR
    rows = _ROW.findall(text)[:BOARD_ROWS]
    if len(rows) < BOARD_ROWS or any(len(row) < BOARD_COLUMNS for row in rows):
        raise ChessError(ErrorKind.FILE_LOAD)

    game = Game(HISTORY_SIZE)
    game.settings = Settings(level, mode, color)
    game.current_player = _player_to_move(turn, color)
    game.user1 = User(PLAYER_1, color)
    game.user2 = User(PLAYER_2, 1 - color)
    if game.user1.color == BLACK:
        black_owner, white_owner = game.user1, game.user2
    else:
        black_owner, white_owner = game.user2, game.user1
    try:
        for j, row in enumerate(rows):
            for i, ch in enumerate(row[:BOARD_COLUMNS]):
                if ch == EMPTY_PIECE:
                    continue
                if ch == ch.upper():
                    owner, kind = black_owner, ch.lower()
                else:
                    owner, kind = white_owner, ch
                game.board[j][i] = owner.add_piece(i, j, kind)
    except ValueError as exc:
        raise ChessError(ErrorKind.FILE_LOAD) from exc
    return game


def save_game(game: Game, path: str) -> None:
    """Write the game to a file, replacing what was there."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(dumps_game(game))
    except OSError as exc:
        raise ChessError(ErrorKind.FILE_SAVE, path) from exc


def load_game(path: str) -> Game:
    """Read a game from a save file."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ChessError(ErrorKind.FILE_LOAD, path) from exc
    return loads_game(text)
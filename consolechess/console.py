"""The console game: settings dialogue, player turns and computer turns."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from .board import HISTORY_SIZE, Game, GameMessage, NoHistoryError, index_is_valid
from .errors import ChessError, ErrorKind, error_message
from .move import Move, format_square
from .movement import is_valid_move
from .parser import Command, CommandType, parse_line
from .piece import (
    BLACK,
    DIFFICULTY_DEFAULT,
    ONE_PLAYER_MODE,
    PLAYER_1,
    PLAYER_2,
    TWO_PLAYERS_MODE,
    USER_COLOR_DEFAULT,
    WHITE,
)
from .rules import format_get_moves, game_status, get_moves
from .settings import Settings, default_settings
from .storage import load_game, save_game

ChooseMove = Callable[[Game], Move]

_PIECE_WORDS = {
    "r": "rook",
    "b": "bishop",
    "n": "knight",
    "q": "queen",
    "k": "king",
    "m": "pawn",
}

_KEEP_ASKING = (CommandType.INVALID_LINE, CommandType.SAVE, CommandType.GET_MOVES)


class _SessionEnd(Exception):
    """The player quit or the input ran out."""


class _Restart(Exception):
    """The player asked for a new game."""


def _first_legal_move(game: Game) -> Move:
    """A simple computer player: the first legal move of the side to move."""
    for piece in game.current_user().pieces:
        if piece.alive:
            moves = get_moves(game, piece)
            if moves:
                return moves[0]
    raise ChessError(ErrorKind.COMMAND_LINE, "computer move")


def _color_word(color: int) -> str:
    return "white" if color else "black"


class ConsoleSession:
    """A chess session played through text streams."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        choose_move: ChooseMove | None = None,
    ) -> None:
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self.choose_move = choose_move or _first_legal_move
        self.settings = default_settings()

    def _write(self, text: str) -> None:
        self.output.write(text)

    def _say(self, text: str) -> None:
        self.output.write(text + "\n")

    def _read_line(self) -> str:
        line = self.input.readline()
        if line == "":
            raise _SessionEnd()
        return line

    def run(self) -> int:
        """Play games until one ends or the player quits; return the exit status."""
        while True:
            try:
                game, loaded = self.configure()
                self.start_game(game, loaded)
                return 0
            except _Restart:
                continue
            except _SessionEnd:
                return 0

    def configure(self) -> tuple[Game, bool]:
        """Read settings until ``start``; return the game and whether it was loaded."""
        self._say(
            "Specify game setting or type 'start' to begin a game with the current setting:"
        )
        self.settings = default_settings()
        game: Game | None = None
        loaded = False
        while True:
            command = self.handle_setting(parse_line(self._read_line()))
            if command.cmd is CommandType.START:
                break
            if command.cmd is CommandType.LOAD:
                if command.path is None:
                    self._say(error_message(ErrorKind.FILE_LOAD))
                    continue
                try:
                    game = load_game(command.path)
                except ChessError as exc:
                    self._say(str(exc))
                    continue
                loaded = True
                current = game.settings
                self.settings = Settings(
                    current.game_level, current.game_mode, current.user_color
                )
        if game is None:
            game = Game(HISTORY_SIZE).initialize(self.settings)
        return game, loaded

    def handle_setting(self, command: Command) -> Command:
        """Apply one settings command; invalid ones come back as INVALID_LINE."""
        settings = self.settings
        cmd = command.cmd
        if cmd is CommandType.GAME_MODE:
            if not self._set_game_mode(command.arg):
                command.cmd = CommandType.INVALID_LINE
        elif cmd is CommandType.DIFFICULTY:
            if not self._set_difficulty(command.arg):
                command.cmd = CommandType.INVALID_LINE
        elif cmd is CommandType.USER_COLOR:
            if settings.game_mode != ONE_PLAYER_MODE:
                command.cmd = CommandType.INVALID_LINE
            elif command.arg == -1:
                command.arg = settings.user_color
            elif command.arg not in (0, 1):
                command.cmd = CommandType.INVALID_LINE
            else:
                settings.user_color = command.arg
        elif cmd is CommandType.LOAD or cmd is CommandType.START:
            pass
        elif cmd is CommandType.DEFAULT:
            settings.reset(DIFFICULTY_DEFAULT, ONE_PLAYER_MODE, USER_COLOR_DEFAULT)
        elif cmd is CommandType.PRINT_SETTINGS:
            if settings.game_mode == TWO_PLAYERS_MODE:
                self._write("SETTINGS:\nGAME_MODE: 2\n")
            else:
                self._write(
                    "SETTINGS:\nGAME_MODE: 1\n"
                    f"DIFFICULTY_LVL: {settings.game_level}\n"
                    f"USER_CLR: {'WHITE' if settings.user_color else 'BLACK'}\n"
                )
        elif cmd is CommandType.QUIT:
            self._say("Exiting...")
            raise _SessionEnd()
        else:
            command.cmd = CommandType.INVALID_LINE
            self._say("ERROR: invalid command!")
        return command

    def _set_game_mode(self, mode: int) -> bool:
        if mode not in (ONE_PLAYER_MODE, TWO_PLAYERS_MODE):
            self._say("Wrong game mode")
            return False
        suffix = "s" if mode == TWO_PLAYERS_MODE else ""
        self._say(f"Game mode is set to {mode} player{suffix}")
        if mode == TWO_PLAYERS_MODE:
            self.settings.reset(DIFFICULTY_DEFAULT, TWO_PLAYERS_MODE, WHITE)
        self.settings.game_mode = mode
        return True

    def _set_difficulty(self, level: int) -> bool:
        if self.settings.game_mode != ONE_PLAYER_MODE:
            return False
        if not 1 <= level <= 5:
            self._say("Wrong difficulty level. The value should be between 1 to 5")
            return False
        self.settings.game_level = level
        return True

    def start_game(self, game: Game, loaded: bool) -> None:
        """Alternate turns until the game is over."""
        over = False
        if game.settings.game_mode == ONE_PLAYER_MODE:
            if game.settings.user_color == BLACK:
                if not loaded:
                    game.current_player = PLAYER_2
                if game.current_user().color == WHITE:
                    self._first_move_computer(game)
                    over = self.game_over(game)
            elif loaded and game.current_user().color == BLACK:
                self._first_move_computer(game)
                over = self.game_over(game)
            while not over:
                self.user_turn(game)
                over = self.game_over(game)
                if over:
                    break
                self._computer_turn(game)
                over = self.game_over(game)
        else:
            while not over:
                self.user_turn(game)
                over = self.game_over(game)

    def _announce_computer_move(self, game: Game, move: Move) -> None:
        piece = game.board[move.j][move.i]
        word = _PIECE_WORDS.get(piece.kind) if piece is not None else None
        if word is not None:
            self._say(
                f"Computer: move {word} at {format_square(move.x, move.y)} "
                f"to {format_square(move.i, move.j)}"
            )

    def _first_move_computer(self, game: Game) -> None:
        game.current_player = PLAYER_2
        move = self.choose_move(game)
        game.apply(move)
        self._announce_computer_move(game, move)
        game.change_turn()

    def _computer_turn(self, game: Game) -> None:
        move = self.choose_move(game)
        game.set_move(move)
        game.change_turn()
        self._announce_computer_move(game, move)

    def user_turn(self, game: Game) -> None:
        """Show the board and read commands until the player has moved."""
        self._write(game.render())
        while True:
            color = _color_word(game.current_user().color)
            self._say(f"{color} player - enter your move:")
            command = self.handle_input(game, self._read_line())
            if command.cmd not in _KEEP_ASKING:
                return

    def handle_input(self, game: Game, line: str) -> Command:
        """Carry out one command typed during the game."""
        command = parse_line(line)
        cmd = command.cmd
        if cmd is CommandType.MOVE:
            move = command.move
            if not (index_is_valid(move.x, move.y) and index_is_valid(move.i, move.j)):
                self._say("Invalid position on the board")
                command.cmd = CommandType.INVALID_LINE
            else:
                piece = game.board[move.y][move.x]
                if piece is None or piece.player != game.current_player:
                    self._say("The specified position does not contain your piece")
                    command.cmd = CommandType.INVALID_LINE
                elif not is_valid_move(game, move):
                    self._say("Illegal move")
                    command.cmd = CommandType.INVALID_LINE
                else:
                    game.set_move(move)
                    game.change_turn()
        elif cmd is CommandType.GET_MOVES:
            self.show_moves(game, command.move.x, command.move.y)
        elif cmd is CommandType.SAVE:
            self._save(game, command.path)
        elif cmd is CommandType.UNDO_MOVE:
            if game.settings.game_mode == TWO_PLAYERS_MODE:
                self._say("Undo command not available in 2 players mode")
            elif self.undo(game):
                self._write(game.render())
            command.cmd = CommandType.INVALID_LINE
        elif cmd is CommandType.RESTART:
            self._say("Restarting...")
            raise _Restart()
        elif cmd is CommandType.QUIT:
            self._say("Exiting...")
            raise _SessionEnd()
        else:
            command.cmd = CommandType.INVALID_LINE
            self._say(error_message(ErrorKind.COMMAND_LINE))
        return command

    def _save(self, game: Game, path: str | None) -> None:
        if path is None:
            self._say(error_message(ErrorKind.FILE_SAVE))
            return
        try:
            save_game(game, path)
        except ChessError as exc:
            self._say(str(exc))

    def show_moves(self, game: Game, x: int, y: int) -> None:
        """Print the legal moves of the piece on column ``x``, row ``y``."""
        settings = game.settings
        if settings.game_mode == TWO_PLAYERS_MODE or settings.game_level > 2:
            self._say(
                "get moves command is available only in one player mode at level 1 or 2"
            )
        elif not index_is_valid(x, y):
            self._say("Invalid position on the board")
        else:
            piece = game.board[y][x]
            if piece is None or piece.player != game.current_player:
                self._say("The specified position does not contain you piece")
            else:
                self._write(format_get_moves(game, get_moves(game, piece)))

    def _undo_one(self, game: Game) -> None:
        move = game.undo_prev_move()
        piece = game.board[move.y][move.x]
        color = _color_word(piece.color) if piece is not None else "black"
        self._say(
            f"Undo move for player {color} : {format_square(move.i, move.j)} "
            f"-> {format_square(move.x, move.y)}"
        )

    def undo(self, game: Game) -> bool:
        """Take back the computer's move and the player's; False without history."""
        game.change_turn()
        try:
            self._undo_one(game)
        except NoHistoryError:
            pass
        finally:
            game.change_turn()
        try:
            self._undo_one(game)
        except NoHistoryError as exc:
            self._say(str(exc))
            return False
        return True

    def game_over(self, game: Game) -> bool:
        """Report check, checkmate or a tie; True when the game has ended."""
        status = game_status(game)
        one_player_human = (
            game.settings.game_mode == ONE_PLAYER_MODE
            and game.current_player == PLAYER_1
        )
        color = game.current_user().color
        if status is GameMessage.CHECKMATE:
            winner = "black" if color else "white"
            self._say(f"Checkmate! {winner} player wins the game")
        elif status is GameMessage.TIE:
            self._say("The game ends in a tie" if one_player_human else "The game is tied")
        elif status is GameMessage.CHECK:
            if one_player_human:
                self._say("Check!")
            else:
                self._say(f"Check: {_color_word(color)} King is threatened!")
        return status in (GameMessage.CHECKMATE, GameMessage.TIE)


def main(argv: list[str] | None = None) -> int:
    """Run the console game; ``-c`` or no option selects the console."""
    args = sys.argv[1:] if argv is None else argv
    if args == ["-g"]:
        sys.stderr.write("ERROR: graphical mode is not available\n")
        return 1
    return ConsoleSession().run()
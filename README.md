# consolechess

A chess game played in the terminal. Two people can play at the same
keyboard, or one person can play against the computer.

## Installing

```
pip install .
```

## Playing

```
consolechess
```

`consolechess -c` does the same. The session ends when a game is won or
tied, when you type `quit`, or when the input runs out.

### Settings

Before the game begins you choose the settings. Type `start` to begin with
the current settings.

| Command | Effect |
|---|---|
| `game_mode 1` / `game_mode 2` | one player (against the computer) or two players |
| `difficulty N` | level 1 to 5 (one-player mode only) |
| `user_color 0` / `user_color 1` | play black or white (one-player mode only) |
| `load FILE` | load a saved game |
| `default` | one-player mode, difficulty 2, user plays white |
| `print_setting` | show the current settings |
| `start` | begin the game |
| `quit` | exit |

The defaults are one-player mode, difficulty 2, and the user plays white.
Choosing two-player mode resets the difficulty to 2 and the colour to white.

### During the game

| Command | Effect |
|---|---|
| `move <2,E> to <4,E>` | move the piece on row 2, column E to row 4, column E |
| `get_moves <2,E>` | list the legal moves of your piece (one-player mode, level 1 or 2) |
| `save FILE` | save the game to a file |
| `undo` | take back the computer's last move and your own (one-player mode) |
| `reset` | go back to the settings stage |
| `quit` | exit |

The board is printed with rows numbered 8 at the top down to 1 and columns
A to H. White pieces are lower case, black pieces upper case: `k` king,
`q` queen, `r` rook, `b` bishop, `n` knight, `m` pawn. An empty square is `_`.

`get_moves` lists target squares ordered by row number, then column. A `*`
after a square means the piece would be attacked there; a `^` means the move
captures a piece.

The last six moves are kept for `undo`. When the computer moves first, that
opening move is not kept.

After each turn the game reports `Check`, checkmate, or a tie. A tie is
declared when none of the side to move's pieces other than the king has a
legal move.

Saved games are small XML files holding the side to move, the game mode, the
difficulty and user colour (one-player mode only) and the board, one row per
line.

## Using it from Python

Board squares are indexed by column `x` (0 for A) and row `y` (0 for row 8,
the top of the printed board).

```python
from consolechess.board import Game
from consolechess.move import Move
from consolechess.movement import is_valid_move
from consolechess.rules import game_status, get_moves
from consolechess.settings import default_settings

game = Game().initialize(default_settings())
move = Move(4, 6, 4, 4)          # white pawn <2,E> to <4,E>
assert is_valid_move(game, move)
game.set_move(move)
game.change_turn()
print(game.render())
print(game_status(game))         # GameMessage.CONTINUE
```

- `consolechess.board.Game` holds the board, both players and the move
  history; `undo_prev_move()` raises `NoHistoryError` when nothing is left.
- `consolechess.rules` has `get_moves`, `is_checkmate`, `is_tie`,
  `game_status` and `format_get_moves`.
- `consolechess.storage` has `dumps_game`, `loads_game`, `save_game` and
  `load_game`; failures raise `consolechess.errors.ChessError`.
- `consolechess.parser.parse_line` turns a typed line into a `Command`.
- `consolechess.console.ConsoleSession(input_stream, output_stream,
  choose_move)` runs a session on any text streams. `choose_move` is a
  function that takes the `Game` and returns a legal `Move` for the side to
  move; it is played as given.

## What it does not do

- The computer opponent is simple: unless you pass your own `choose_move`,
  it plays the first legal move it finds, taking pieces in order. The
  difficulty setting is stored and saved, and limits `get_moves` to levels
  1 and 2, but does not change how the computer plays.
- There is no graphical mode; `consolechess -g` prints an error and exits
  with status 1.
- Castling, en passant and pawn promotion are not part of the rules.

## Running the tests

```
pip install .[test]
pytest
```
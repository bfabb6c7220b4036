import pytest

from consolechess.board import Game
from consolechess.errors import ChessError, ErrorKind
from consolechess.move import Move
from consolechess.piece import BLACK, PLAYER_1, PLAYER_2, WHITE
from consolechess.settings import Settings, default_settings
from consolechess.storage import dumps_game, load_game, loads_game, save_game


def _new_game(settings=None):
    return Game().initialize(settings or default_settings())


def test_dumps_header_and_settings():
    text = dumps_game(_new_game())
    assert text.startswith(
        '<?xml version="1.0" encoding="UTF-8"?>\n<game>\n'
        "\t<current_turn>1</current_turn>\n"
        "\t<game_mode>1</game_mode>\n"
        "\t<difficulty>2</difficulty>\n"
        "\t<user_color>1</user_color>\n"
        "\t<board>\n"
    )
    assert text.endswith("\t</board>\n</game>\n")


def test_dumps_rows():
    text = dumps_game(_new_game())
    assert "\t\t<row_8>RNBQKBNR</row_8>\n" in text
    assert "\t\t<row_5>________</row_5>\n" in text


def test_two_player_mode_omits_difficulty_and_color():
    game = _new_game(Settings(3, 2, 1))
    text = dumps_game(game)
    assert "<difficulty>" not in text
    assert "<user_color>" not in text
    loaded = loads_game(text)
    assert loaded.settings == Settings(2, 2, 1)


def test_round_trip_initial_game():
    game = _new_game()
    loaded = loads_game(dumps_game(game))
    assert loaded.render() == game.render()
    assert loaded.current_player == game.current_player
    assert loaded.settings == game.settings
    assert loaded.user1.num_pieces == 16
    assert loaded.user2.num_pieces == 16
    assert loaded.user1.king.kind == "k"
    assert (loaded.user1.king.x, loaded.user1.king.y) == (4, 7)


def test_round_trip_keeps_turn_after_move():
    game = _new_game()
    game.set_move(Move(4, 6, 4, 4))
    game.change_turn()
    text = dumps_game(game)
    assert "<current_turn>0</current_turn>" in text
    loaded = loads_game(text)
    assert loaded.current_player == PLAYER_2
    assert loaded.current_user().color == BLACK
    assert loaded.render() == game.render()


def test_black_user_round_trip():
    game = _new_game(Settings(2, 1, 0))
    loaded = loads_game(dumps_game(game))
    assert loaded.user1.color == BLACK
    assert loaded.user2.color == WHITE
    assert loaded.current_player == PLAYER_2
    assert (loaded.user1.king.x, loaded.user1.king.y) == (
        game.user1.king.x,
        game.user1.king.y,
    )
    assert loaded.board[0][4] is loaded.user1.king


def test_loaded_pieces_sit_on_their_squares():
    loaded = loads_game(dumps_game(_new_game()))
    for j, row in enumerate(loaded.board):
        for i, piece in enumerate(row):
            if piece is not None:
                assert (piece.x, piece.y) == (i, j)


def test_save_and_load_file(tmp_path):
    game = _new_game()
    game.set_move(Move(1, 7, 2, 5))
    path = tmp_path / "game.xml"
    save_game(game, str(path))
    assert path.read_text(encoding="utf-8") == dumps_game(game)
    loaded = load_game(str(path))
    assert loaded.render() == game.render()
    assert loaded.current_player == PLAYER_1


def test_load_missing_file(tmp_path):
    with pytest.raises(ChessError) as info:
        load_game(str(tmp_path / "missing.xml"))
    assert info.value.kind is ErrorKind.FILE_LOAD


def test_save_to_directory_fails(tmp_path):
    with pytest.raises(ChessError) as info:
        save_game(_new_game(), str(tmp_path))
    assert info.value.kind is ErrorKind.FILE_SAVE


def test_malformed_text_raises():
    with pytest.raises(ChessError) as info:
        loads_game("<game>\n<current_turn>1</current_turn>\n</game>\n")
    assert info.value.kind is ErrorKind.FILE_LOAD
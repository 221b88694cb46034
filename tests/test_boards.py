import pytest

from sudokuhints.boards import BASIC_EASY, SUDOKU_DOT_COM_MASTER_A, board_names, get_board
from sudokuhints.game import Game


def test_board_names_sorted_and_known():
    names = board_names()
    assert names == sorted(names)
    assert "basic-easy" in names
    assert "sudoku-dot-com-master-a" in names
    assert "zero" in names


@pytest.mark.parametrize("name", board_names())
def test_every_board_is_nine_by_nine_of_digits(name):
    board = get_board(name)
    assert len(board) == 9
    assert all(len(row) == 9 for row in board)
    assert all(0 <= v <= 9 for row in board for v in row)


def test_get_board_returns_source_values():
    assert get_board("basic-easy")[0] == [8, 0, 1, 0, 3, 5, 0, 2, 0]
    assert get_board("sudoku-dot-com-master-a") == [list(r) for r in SUDOKU_DOT_COM_MASTER_A]


def test_get_board_returns_independent_copy():
    board = get_board("basic-easy")
    board[0][0] = 0
    assert get_board("basic-easy")[0][0] == BASIC_EASY[0][0]
    assert BASIC_EASY[0][0] == 8


def test_unknown_board_raises():
    with pytest.raises(KeyError):
        get_board("no-such-board")


@pytest.mark.parametrize("name", [n for n in board_names() if n != "zero"])
def test_puzzles_load_into_a_valid_game(name):
    game = Game()
    game.fill_basic(get_board(name))
    game.check_board()
    assert not game.won()
    assert game.symbols == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]
import pytest

from sudokuhints.boards import BASIC_EASY
from sudokuhints.game import (
    DEFAULT_GROUP_4X4,
    DEFAULT_GROUP_9X9,
    BoardError,
    Cell,
    Game,
    Loc,
)

NINE = ["1", "2", "3", "4", "5", "6", "7", "8", "9"]

SOLVED_4X4 = [
    ["1", "2", "3", "4"],
    ["3", "4", "1", "2"],
    ["2", "1", "4", "3"],
    ["4", "3", "2", "1"],
]


def _empty_4x4():
    return [["", "", "", ""] for _ in range(4)]


def test_default_groups_match_source_layout():
    assert DEFAULT_GROUP_9X9[Loc(0, 0)] == 0
    assert DEFAULT_GROUP_9X9[Loc(0, 3)] == 1
    assert DEFAULT_GROUP_9X9[Loc(3, 0)] == 3
    assert DEFAULT_GROUP_9X9[Loc(8, 8)] == 8
    assert DEFAULT_GROUP_4X4[Loc(0, 2)] == 1
    assert DEFAULT_GROUP_4X4[Loc(2, 0)] == 2
    assert len(DEFAULT_GROUP_9X9) == 81
    assert sorted(set(DEFAULT_GROUP_9X9.values())) == list(range(9))


def test_fill_basic_sets_symbols_values_and_candidates():
    game = Game()
    game.fill_basic(BASIC_EASY)
    assert game.symbols == NINE
    first = game.board[0][0].cell
    assert first.value == "8"
    assert first.starting_value
    assert first.candidates == []
    empty = game.board[0][1].cell
    assert empty.value == ""
    assert not empty.starting_value
    assert empty.candidates == NINE


def test_fill_without_any_symbols_raises():
    with pytest.raises(BoardError, match="no symbols found"):
        Game().fill(_empty_4x4(), DEFAULT_GROUP_4X4, None)


def test_fill_symbol_group_mismatch_raises():
    cells = _empty_4x4()
    cells[0][0] = "1"
    with pytest.raises(BoardError, match="does not match number of group values"):
        Game().fill(cells, DEFAULT_GROUP_4X4, None)


def test_fill_sorts_given_symbols():
    game = Game()
    game.fill(_empty_4x4(), DEFAULT_GROUP_4X4, ["d", "b", "a", "c"])
    assert game.symbols == ["a", "b", "c", "d"]
    assert game.board[3][3].cell.candidates == ["a", "b", "c", "d"]


def test_fill_ints_turns_zero_into_empty():
    game = Game()
    cells = [[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 0]]
    game.fill_ints(cells, DEFAULT_GROUP_4X4, None)
    assert game.board[3][3].cell.value == ""
    assert game.board[3][3].cell.candidates == ["1", "2", "3", "4"]
    assert game.board[0][1].cell.value == "2"


def test_cell_set_clears_candidates():
    cell = Cell(candidates=["1", "2"])
    cell.set("2")
    assert cell.value == "2"
    assert cell.candidates == []


def test_remove_candidates_returns_removed_in_candidate_order():
    cell = Cell(candidates=["1", "2", "3", "4"])
    removed = cell.remove_candidates(["4", "", "2", "9"])
    assert removed == ["2", "4"]
    assert cell.candidates == ["1", "3"]
    assert cell.remove_candidates(["2"]) == []


def test_remove_candidates_on_filled_cell_does_nothing():
    cell = Cell(value="5", candidates=["5"])
    assert cell.remove_candidates(["5"]) == []
    assert cell.candidates == ["5"]


def test_sectioned_cells_share_cells_and_cover_board():
    game = Game()
    game.fill_basic(BASIC_EASY)
    rows, cols, groups = game.sectioned_cells()
    for sections in (rows, cols, groups):
        assert len(sections) == 9
        assert all(len(section) == 9 for section in sections)
    assert rows[2][5].loc == Loc(5, 2)
    assert cols[5][2].loc == Loc(5, 2)
    assert rows[2][5].cell is cols[5][2].cell
    assert all(
        game.board[lc.loc.y][lc.loc.x].group == index
        for index, section in enumerate(groups)
        for lc in section
    )


def test_single_candidate_found_after_narrowing():
    game = Game()
    game.fill_basic(BASIC_EASY)
    assert game.single_candidate() is None
    game.board[1][0].cell.remove_candidates(["1", "2", "3", "4", "5", "6", "8", "9"])
    assert game.single_candidate() == (0, 1, "7")


def test_won_on_complete_board():
    game = Game()
    game.fill(SOLVED_4X4, DEFAULT_GROUP_4X4, None)
    assert game.won()
    game.check_board()
    assert game.single_candidate() is None


def test_not_won_with_empty_cell():
    game = Game()
    game.fill_basic(BASIC_EASY)
    assert not game.won()


def test_check_board_duplicate_value():
    cells = _empty_4x4()
    cells[0][0] = "1"
    cells[0][3] = "1"
    game = Game()
    game.fill(cells, DEFAULT_GROUP_4X4, ["1", "2", "3", "4"])
    with pytest.raises(BoardError, match=r"duplicate value '1' in row 0 at positions \[\{0 0\} \{3 0\}\]"):
        game.check_board()


def test_check_board_duplicate_single_candidate():
    game = Game()
    game.fill(_empty_4x4(), DEFAULT_GROUP_4X4, ["1", "2", "3", "4"])
    game.board[0][0].cell.candidates = ["2"]
    game.board[0][2].cell.candidates = ["2"]
    with pytest.raises(BoardError, match="multiple cells with only candidate '2' in row 0"):
        game.check_board()


def test_check_board_accepts_starting_puzzle():
    game = Game()
    game.fill_basic(BASIC_EASY)
    game.check_board()
    assert not game.won()
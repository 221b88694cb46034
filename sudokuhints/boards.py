"""Sample puzzles, with 0 marking an empty cell."""

from __future__ import annotations

Board = tuple[tuple[int, ...], ...]

ZERO_BOARD: Board = tuple(tuple(0 for _ in range(9)) for _ in range(9))

BASIC_EASY: Board = (
    (8, 0, 1, 0, 3, 5, 0, 2, 0),
    (0, 0, 0, 2, 7, 6, 0, 5, 1),
    (0, 0, 6, 9, 0, 1, 0, 7, 3),
    (0, 9, 8, 0, 1, 0, 0, 3, 4),
    (7, 6, 0, 3, 5, 0, 0, 0, 0),
    (1, 0, 0, 0, 4, 9, 6, 0, 0),
    (0, 0, 0, 0, 9, 0, 5, 0, 0),
    (0, 1, 0, 0, 6, 0, 0, 0, 0),
    (6, 8, 3, 5, 0, 0, 1, 9, 0),
)

BASIC_HARD: Board = (
    (5, 0, 0, 0, 2, 7, 0, 0, 0),
    (3, 0, 0, 0, 0, 0, 5, 0, 6),
    (0, 4, 0, 3, 0, 0, 0, 0, 0),
    (6, 9, 0, 0, 0, 2, 0, 0, 0),
    (0, 0, 1, 0, 9, 0, 0, 0, 0),
    (0, 0, 0, 8, 0, 0, 0, 0, 5),
    (0, 0, 8, 0, 0, 0, 0, 9, 0),
    (4, 0, 0, 0, 0, 6, 0, 0, 1),
    (0, 0, 0, 0, 0, 1, 0, 7, 0),
)

NYT_HARD_2_JUNE_2025: Board = (
    (0, 4, 0, 0, 7, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 1, 0, 2, 4),
    (0, 6, 0, 0, 3, 0, 5, 0, 0),
    (7, 1, 0, 0, 0, 0, 0, 0, 9),
    (0, 0, 0, 0, 4, 7, 0, 0, 0),
    (0, 5, 2, 6, 0, 0, 0, 0, 0),
    (0, 0, 7, 1, 2, 0, 0, 0, 0),
    (0, 0, 8, 0, 0, 0, 0, 0, 0),
    (0, 2, 0, 0, 5, 4, 0, 3, 0),
)

SUDOKU_DOT_COM_EXTREME_A: Board = (
    (9, 6, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 0, 0, 8, 7, 2),
    (3, 0, 0, 0, 0, 0, 0, 9, 0),
    (5, 0, 4, 0, 0, 6, 0, 0, 0),
    (0, 0, 0, 0, 0, 1, 0, 0, 8),
    (0, 0, 0, 9, 0, 0, 4, 0, 0),
    (0, 7, 0, 0, 8, 0, 1, 0, 0),
    (0, 2, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 9, 2, 7, 0, 0, 0, 0),
)

SUDOKU_DOT_COM_MASTER_A: Board = (
    (0, 0, 0, 6, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 7, 0, 0, 1),
    (5, 1, 3, 9, 0, 0, 6, 0, 0),
    (0, 6, 0, 0, 0, 0, 0, 0, 0),
    (0, 8, 0, 0, 0, 5, 0, 9, 0),
    (0, 0, 0, 0, 0, 6, 2, 0, 4),
    (9, 0, 0, 0, 7, 8, 0, 1, 0),
    (1, 5, 0, 0, 2, 0, 0, 0, 0),
    (3, 0, 0, 0, 0, 0, 9, 2, 0),
)

_BOARDS: dict[str, Board] = {
    "zero": ZERO_BOARD,
    "basic-easy": BASIC_EASY,
    "basic-hard": BASIC_HARD,
    "nyt-hard-2-june-2025": NYT_HARD_2_JUNE_2025,
    "sudoku-dot-com-extreme-a": SUDOKU_DOT_COM_EXTREME_A,
    "sudoku-dot-com-master-a": SUDOKU_DOT_COM_MASTER_A,
}


def board_names() -> list[str]:
    """Return the names of the built-in boards, sorted."""
    return sorted(_BOARDS)


def get_board(name: str) -> list[list[int]]:
    """Return a fresh, mutable copy of the named board."""
    try:
        board = _BOARDS[name]
    except KeyError:
        raise KeyError(f"unknown board {name!r}") from None
    return [list(row) for row in board]
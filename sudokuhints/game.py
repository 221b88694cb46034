"""Board model: cells, groups, filling a game and checking its state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence


@dataclass(frozen=True)
class Loc:
    """A position on the board; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{{{self.x} {self.y}}}"


def _standard_groups(size: int, box: int) -> dict[Loc, int]:
    return {
        Loc(x, y): (x // box) * box + y // box
        for x in range(size)
        for y in range(size)
    }


DEFAULT_GROUP_9X9: dict[Loc, int] = _standard_groups(9, 3)
DEFAULT_GROUP_4X4: dict[Loc, int] = _standard_groups(4, 2)

BASIC_SYMBOLS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8", "9")


class BoardError(ValueError):
    """Raised when a board cannot be filled or is in an impossible state."""


@dataclass
class Cell:
    """One square: its value (empty when unsolved) and remaining candidates."""

    value: str = ""
    candidates: list[str] = field(default_factory=list)
    starting_value: bool = False

    def set(self, value: str) -> None:
        """Fill the cell and drop its candidates."""
        self.value = value
        self.candidates = []

    def remove_candidates(self, values: Sequence[str]) -> list[str]:
        """Remove the given candidates and return those actually removed."""
        if self.value:
            return []
        wanted = {v for v in values if v}
        removed = [c for c in self.candidates if c in wanted]
        if removed:
            self.candidates = [c for c in self.candidates if c not in wanted]
        return removed


@dataclass
class LocCell:
    """A cell together with its position."""

    loc: Loc
    cell: Cell


@dataclass
class GroupedCell:
    """A cell together with the index of the group (box) it belongs to."""

    group: int
    cell: Cell


def _format_locs(locs: Sequence[Loc]) -> str:
    return "[" + " ".join(str(loc) for loc in locs) + "]"


@dataclass
class Game:
    """A sudoku game in progress, with options for stepping through it."""

    symbols: list[str] = field(default_factory=list)
    board: list[list[GroupedCell]] = field(default_factory=list)
    hide_simple: bool = False
    random_eliminators: bool = False
    run_simple_first: bool = False
    auto_solve: bool = False

    def fill(
        self,
        cells: Sequence[Sequence[str]],
        group: Mapping[Loc, int],
        symbols: Optional[Sequence[str]],
    ) -> None:
        """Load a board of strings ('' for empty) with a group layout."""
        seen: set[str] = set()
        self.board = []
        for y, row in enumerate(cells):
            board_row = []
            for x, value in enumerate(row):
                if value:
                    seen.add(value)
                board_row.append(
                    GroupedCell(
                        group=group.get(Loc(x, y), 0),
                        cell=Cell(value=value, starting_value=bool(value)),
                    )
                )
            self.board.append(board_row)

        chosen = list(symbols) if symbols else list(seen)
        if not chosen:
            raise BoardError("no symbols found in the provided cells")

        group_count = len(set(group.values()))
        if len(chosen) != group_count:
            raise BoardError(
                f"number of symbols ({len(chosen)}) does not match "
                f"number of group values ({group_count})"
            )
        self.symbols = sorted(chosen)

        for row in self.board:
            for grouped in row:
                if not grouped.cell.value:
                    grouped.cell.candidates = list(self.symbols)

    def fill_basic(self, cells: Sequence[Sequence[int]]) -> None:
        """Load a standard 9x9 board of ints, 0 meaning empty."""
        self.fill_ints(cells, DEFAULT_GROUP_9X9, list(BASIC_SYMBOLS))

    def fill_ints(
        self,
        cells: Sequence[Sequence[int]],
        group: Mapping[Loc, int],
        symbols: Optional[Sequence[str]],
    ) -> None:
        """Load a board of ints, 0 meaning empty.

        The symbols are always taken from the values present on the board.
        """
        str_cells = [[str(v) if v else "" for v in row] for row in cells]
        self.fill(str_cells, group, None)

    def sectioned_cells(
        self,
    ) -> tuple[list[list[LocCell]], list[list[LocCell]], list[list[LocCell]]]:
        """Return the cells split into rows, columns and groups."""
        size = len(self.symbols)
        rows: list[list[LocCell]] = [[] for _ in range(size)]
        cols: list[list[LocCell]] = [[] for _ in range(size)]
        group_map: dict[int, list[LocCell]] = {}
        for y, row in enumerate(self.board):
            for x, grouped in enumerate(row):
                lc = LocCell(loc=Loc(x, y), cell=grouped.cell)
                rows[y].append(lc)
                cols[x].append(lc)
                group_map.setdefault(grouped.group, []).append(lc)

        groups: list[list[LocCell]] = [[] for _ in range(size)]
        for index, members in group_map.items():
            groups[index] = members
        return rows, cols, groups

    def single_candidate(self) -> Optional[tuple[int, int, str]]:
        """Return ``(x, y, value)`` of the first cell with one candidate left."""
        for y, row in enumerate(self.board):
            for x, grouped in enumerate(row):
                if len(grouped.cell.candidates) == 1:
                    return x, y, grouped.cell.candidates[0]
        return None

    def won(self) -> bool:
        """True when every cell holds a value."""
        return all(grouped.cell.value for row in self.board for grouped in row)

    def check_board(self) -> None:
        """Raise BoardError if a section repeats a value or a lone candidate."""
        rows, cols, groups = self.sectioned_cells()
        for name, sections in (("row", rows), ("column", cols), ("group", groups)):
            for index, cells in enumerate(sections):
                values: dict[str, list[Loc]] = {}
                singles: dict[str, list[Loc]] = {}
                for lc in cells:
                    if lc.cell.value:
                        values.setdefault(lc.cell.value, []).append(lc.loc)
                    elif len(lc.cell.candidates) == 1:
                        singles.setdefault(lc.cell.candidates[0], []).append(lc.loc)

                for value, locs in values.items():
                    if len(locs) > 1:
                        raise BoardError(
                            f"duplicate value '{value}' in {name} {index} "
                            f"at positions {_format_locs(locs)}"
                        )
                for value, locs in singles.items():
                    if len(locs) > 1:
                        raise BoardError(
                            f"multiple cells with only candidate '{value}' in "
                            f"{name} {index} at positions {_format_locs(locs)}"
                        )
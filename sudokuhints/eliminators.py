"""Candidate eliminators and the driver that applies them to a game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import combinations
from typing import Callable, Optional, Sequence

from .game import Game, LocCell

PartitionEliminator = Callable[[Sequence[LocCell]], Optional[str]]
GameEliminator = Callable[[Game], Optional[str]]


class NoEliminationError(Exception):
    """Raised when no eliminator can remove any candidate."""


@dataclass(frozen=True)
class CandidateEliminator:
    """A named rule that removes candidates from a partition or a whole game."""

    name: str
    description: str
    partition_eliminator: Optional[PartitionEliminator] = None
    game_eliminator: Optional[GameEliminator] = None
    simple: bool = False


def _removed_message(x: int, y: int, removed: Sequence[str]) -> str:
    return f"removed candidates (x:{x},y:{y}) [{' '.join(removed)}]"


def filled_cell(cells: Sequence[LocCell]) -> Optional[str]:
    """Remove the values already placed in the partition from its other cells."""
    found = [lc.cell.value for lc in cells]
    for lc in cells:
        removed = lc.cell.remove_candidates(found)
        if removed:
            return _removed_message(lc.loc.x, lc.loc.y, removed)
    return None


def unique_candidate(cells: Sequence[LocCell]) -> Optional[str]:
    """Where N candidates share exactly the same N cells, drop all others there."""
    places: dict[str, list] = {}
    for lc in cells:
        for candidate in lc.cell.candidates:
            places.setdefault(candidate, []).append(lc.loc)

    by_locs: dict[tuple, list[str]] = {}
    for candidate, locs in places.items():
        key = tuple(sorted(locs, key=lambda loc: (loc.y, loc.x)))
        by_locs.setdefault(key, []).append(candidate)

    keep_at: dict = {}
    for locs, candidates in by_locs.items():
        if len(candidates) == len(locs):
            for loc in locs:
                keep_at[loc] = candidates

    if not keep_at:
        return None

    for lc in cells:
        keep = keep_at.get(lc.loc)
        if keep is None:
            continue
        to_remove = [c for c in lc.cell.candidates if c not in keep]
        removed = lc.cell.remove_candidates(to_remove)
        if removed:
            return _removed_message(lc.loc.x, lc.loc.y, removed)
    return None


def candidate_chains(cells: Sequence[LocCell]) -> Optional[str]:
    """If N cells hold exactly N candidates between them, remove those elsewhere."""
    open_cells = [lc for lc in cells if len(lc.cell.candidates) >= 2]
    for size in range(2, len(open_cells) + 1):
        for combo in combinations(open_cells, size):
            shared = {c for lc in combo for c in lc.cell.candidates}
            if len(shared) != size:
                continue
            chain = {lc.loc for lc in combo}
            for lc in cells:
                if lc.loc in chain:
                    continue
                removed = lc.cell.remove_candidates(list(shared))
                if removed:
                    return _removed_message(lc.loc.x, lc.loc.y, removed)
    return None


def _locked(places: dict[tuple[int, str], set[int]]) -> list[tuple[tuple[int, int], list[str]]]:
    holders: dict[tuple[int, int], list[str]] = {}
    for (group, candidate), indices in places.items():
        if len(indices) == 1:
            (index,) = indices
            holders.setdefault((group, index), []).append(candidate)
    return sorted((key, sorted(candidates)) for key, candidates in holders.items())


def group_and_row_column(game: Game) -> Optional[str]:
    """If a group holds a candidate in only one row or column, remove it from
    that row or column outside the group."""
    row_places: dict[tuple[int, str], set[int]] = {}
    col_places: dict[tuple[int, str], set[int]] = {}
    for y, row in enumerate(game.board):
        for x, grouped in enumerate(row):
            for candidate in grouped.cell.candidates:
                row_places.setdefault((grouped.group, candidate), set()).add(y)
                col_places.setdefault((grouped.group, candidate), set()).add(x)

    row_locks = _locked(row_places)
    col_locks = _locked(col_places)
    if not row_locks and not col_locks:
        return None

    for y, row in enumerate(game.board):
        for x, grouped in enumerate(row):
            for locks, index in ((row_locks, y), (col_locks, x)):
                candidates = next(
                    (
                        cands
                        for (group, loc), cands in locks
                        if loc == index and group != grouped.group
                    ),
                    None,
                )
                if candidates is None:
                    continue
                removed = grouped.cell.remove_candidates(candidates)
                if removed:
                    return _removed_message(x, y, removed)
    return None


FILLED_CELL = CandidateEliminator(
    name="Filled Cell",
    description="Eliminates candidates in the same row as a filled cell.",
    partition_eliminator=filled_cell,
    simple=True,
)

UNIQUE_CANDIDATE = CandidateEliminator(
    name="Unique Candidate",
    description=(
        "Eliminates all other candidates if a cell has a unique candidate "
        "in its partition."
    ),
    partition_eliminator=unique_candidate,
    simple=True,
)

CANDIDATE_CHAINS = CandidateEliminator(
    name="Candidate Chains",
    description=(
        "If N cells form a chain where they share exactly N candidates total, "
        "remove those candidates from other cells in the partition."
    ),
    partition_eliminator=candidate_chains,
)

GROUP_AND_ROW_COLUMN = CandidateEliminator(
    name="Group and Row/Column",
    description=(
        "If a group only has values in a row or column, then remove those "
        "candidates from the other cells in that row or column."
    ),
    game_eliminator=group_and_row_column,
)

ELIMINATORS: tuple[CandidateEliminator, ...] = (
    FILLED_CELL,
    UNIQUE_CANDIDATE,
    CANDIDATE_CHAINS,
    GROUP_AND_ROW_COLUMN,
)


def _ordered_eliminators(shuffle: bool) -> list[CandidateEliminator]:
    if not shuffle:
        return list(ELIMINATORS)
    simple = [e for e in ELIMINATORS if e.simple]
    other = [e for e in ELIMINATORS if not e.simple]
    random.shuffle(simple)
    random.shuffle(other)
    return simple + other


def eliminate_candidates(game: Game, only_simples: bool) -> Optional[str]:
    """Apply the first eliminator that changes something and describe the change.

    Returns None when the change came from a simple eliminator and the game
    hides those. Raises NoEliminationError when nothing could be removed.
    """
    rows, cols, groups = game.sectioned_cells()
    for eliminator in _ordered_eliminators(game.random_eliminators):
        if only_simples and not eliminator.simple:
            continue
        if eliminator.partition_eliminator is not None:
            partitions = [("rows", rows), ("cols", cols), ("groups", groups)]
            if game.random_eliminators:
                random.shuffle(partitions)
            for name, sections in partitions:
                for index, cells in enumerate(sections):
                    change = eliminator.partition_eliminator(cells)
                    if change:
                        if game.hide_simple and eliminator.simple:
                            return None
                        return f"({eliminator.name}) {name} {index}: {change}"
        if eliminator.game_eliminator is not None:
            change = eliminator.game_eliminator(game)
            if change:
                return f"({eliminator.name}): {change}"
    raise NoEliminationError("no candidates eliminated by any rules")
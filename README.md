# sudokuhints

A Sudoku solver that works the way a person does. Each step either removes
candidates with a named technique or fills a cell that has only one candidate
left. Every step is reported, so you can follow the reasoning or use it as a
hint.

## Techniques

The techniques live in `sudokuhints.eliminators` and are applied in this order:

- **Filled Cell** (`filled_cell`): a value placed in a row, column or group is
  removed from the candidates of the other cells there.
- **Unique Candidate** (`unique_candidate`): if N candidates can only go in the
  same N cells of a partition, those cells drop every other candidate.
- **Candidate Chains** (`candidate_chains`): if N cells together hold exactly N
  candidates, those candidates are removed from the rest of the partition.
- **Group and Row/Column** (`group_and_row_column`): if a candidate in a group
  only appears in one row or column, it is removed from that row or column
  outside the group.

The first two are marked as simple. Each is wrapped in a
`CandidateEliminator`, and the ordered list is `ELIMINATORS`.

## Installation

```
pip install .
```

## Command line

```
sudokuhints
```

This solves a built-in puzzle in the terminal, printing every elimination
("Change: ...") and every placed value ("Found single candidate at (x, y): v")
followed by the board, until the puzzle is solved or no technique can make
progress. Options:

- `--board NAME`: which built-in board to solve (default
  `sudoku-dot-com-master-a`). The names are `basic-easy`, `basic-hard`,
  `nyt-hard-2-june-2025`, `sudoku-dot-com-extreme-a`,
  `sudoku-dot-com-master-a` and `zero`.
- `--step`: pause after every placed value. Press Enter to continue, or type
  `s` or `solve` to run to the end without further pauses.
- `--hide-simple`: do not report changes made by the simple techniques.
- `--random-eliminators`: apply the techniques (simple ones first) and the
  rows/columns/groups in a random order.
- `--no-simple-first`: by default the simple techniques are first run quietly
  until one makes a change; this turns that off.

On a terminal, groups are shaded in alternating colours, values placed by the
solver are bold and the cell just filled is highlighted green. Colour is left
out when output is not a terminal, when `NO_COLOR` is set or when `TERM` is
`dumb`.

## Library use

```python
from sudokuhints.boards import board_names, get_board
from sudokuhints.game import Game
from sudokuhints.eliminators import eliminate_candidates
from sudokuhints.console import render

print(board_names())

game = Game()
game.fill_basic(get_board("basic-easy"))

print(eliminate_candidates(game, False))   # one elimination step, described
print(game.single_candidate())             # (x, y, value) or None
print(render(game, None))
```

- `Game.fill(cells, group, symbols)` loads a board of strings (`""` for an
  empty cell) with a mapping of `Loc` to group index. If `symbols` is empty,
  the symbols are the distinct values on the board. The number of symbols must
  equal the number of distinct groups, otherwise `BoardError` is raised.
  `DEFAULT_GROUP_9X9` and `DEFAULT_GROUP_4X4` in `sudokuhints.game` give the
  standard layouts.
- `Game.fill_basic(cells)` and `Game.fill_ints(cells, group, symbols)` load
  boards of ints with 0 for empty. Both take the symbols from the values on the
  board, so every symbol must appear at least once; the `zero` board, for
  example, is rejected with `BoardError`.
- `Game.check_board()` raises `BoardError` when a row, column or group holds
  the same value twice, or two cells whose only candidate is the same.
- `Game.won()` is true once every cell holds a value.
- `eliminate_candidates(game, only_simples)` applies the first technique that
  removes something and returns a description of the change. It returns `None`
  when the change came from a simple technique and `game.hide_simple` is set,
  and raises `NoEliminationError` when nothing more can be removed.
- `step_through(game, out, lines)` runs the whole walk-through, writing to any
  text stream `out` and reading pause answers from the iterable `lines`;
  `step_through_console(game)` does the same on stdout and stdin.

## Limitations

Puzzles come only from the built-in boards or from code calling `Game.fill`;
the command cannot read a puzzle from a file or from typed input. When the
techniques run out before the puzzle is solved, the run stops with an error
rather than guessing.

## Running the tests

```
pip install .[test]
pytest
```
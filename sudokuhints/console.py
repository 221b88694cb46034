"""Console front end: draw the board and step through the hints."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional, TextIO

from .boards import board_names, get_board
from .eliminators import NoEliminationError, eliminate_candidates
from .game import BoardError, Game, Loc

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_CYAN = "36"
_GROUP_COLORS = (_YELLOW, _CYAN)
_EMPTY_MARK = "⛝"
_CLEAR_LINE_ABOVE = "\033[1A\033[K"
_DEFAULT_BOARD = "sudoku-dot-com-master-a"


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, *codes: str) -> str:
    if not codes or not _colors_enabled():
        return text
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def render(game: Game, last_updated: Optional[Loc]) -> str:
    """Draw the board, shading groups and highlighting the last placed cell."""
    lines = []
    for y, row in enumerate(game.board):
        parts = []
        for x, grouped in enumerate(row):
            cell = grouped.cell
            if last_updated is not None and last_updated == Loc(x, y):
                codes = [_GREEN, _BOLD]
            else:
                codes = [_GROUP_COLORS[grouped.group % 2]]
            if not cell.starting_value and cell.value:
                codes.append(_BOLD)
            parts.append(_paint(cell.value or _EMPTY_MARK, *codes) + " ")
        lines.append("".join(parts))
    return "\n".join(lines)


def _flush(out: TextIO) -> None:
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()


def _report_error(
    out: TextIO, game: Game, last_updated: Optional[Loc], error: Exception
) -> None:
    _flush(out)
    out.write(render(game, last_updated) + "\n")
    out.write(_paint(f"\nError: {error}\n", _RED))


def step_through(game: Game, out: TextIO, lines: Iterable[str]) -> None:
    """Solve the game hint by hint, writing each step to ``out``.

    Unless the game auto-solves, a line is read from ``lines`` after every
    placement; "solve" or "s" switches to solving without further pauses.
    """
    inputs = iter(lines)
    changes: list[str] = []
    last_updated: Optional[Loc] = None

    if game.run_simple_first:
        while True:
            try:
                change = eliminate_candidates(game, True)
            except NoEliminationError as err:
                _report_error(out, game, last_updated, err)
                return
            if change:
                break

    out.write(render(game, last_updated) + "\n")
    solve = game.auto_solve
    while True:
        found = game.single_candidate()
        if found is None:
            try:
                change = eliminate_candidates(game, False)
            except NoEliminationError as err:
                _report_error(out, game, last_updated, err)
                break
            if change:
                out.write("Change: " + change + "\n")
                changes.append(change + "\n")
            continue

        x, y, value = found
        message = f"Found single candidate at ({x}, {y}): {value}\n"
        last_updated = Loc(x, y)
        out.write(message)
        changes.append(message)
        game.board[y][x].cell.set(value)

        try:
            game.check_board()
        except BoardError as err:
            _report_error(out, game, last_updated, err)
            out.write("".join(changes))
            break

        if game.won():
            _flush(out)
            out.write(render(game, last_updated) + "\n")
            out.write(_paint("Congratulations! We solved the Sudoku puzzle!", _GREEN) + "\n")
            break

        if not solve:
            out.write(_paint("Enter to continue ", _YELLOW))
            text = next(inputs, "").rstrip("\r\n")
            if text in ("solve", "s"):
                solve = True
            out.write(_CLEAR_LINE_ABOVE)
        _flush(out)
        out.write(render(game, last_updated) + "\n")


def step_through_console(game: Game) -> None:
    """Step through the game on the terminal, reading Enter from stdin."""
    step_through(game, sys.stdout, sys.stdin)


def main(argv: Optional[list[str]] = None) -> int:
    """Load a built-in board and walk through its solution with hints."""
    parser = argparse.ArgumentParser(
        prog="sudokuhints", description="Step through a sudoku with hints."
    )
    parser.add_argument(
        "--board", choices=board_names(), default=_DEFAULT_BOARD,
        help="built-in board to solve",
    )
    parser.add_argument(
        "--hide-simple", action="store_true",
        help="do not report changes made by simple eliminators",
    )
    parser.add_argument(
        "--random-eliminators", action="store_true",
        help="apply the eliminators in a random order",
    )
    parser.add_argument(
        "--no-simple-first", action="store_true",
        help="do not run the simple eliminators quietly first",
    )
    parser.add_argument(
        "--step", action="store_true",
        help="pause after every placement instead of solving straight through",
    )
    args = parser.parse_args(argv)

    game = Game()
    try:
        game.fill_basic(get_board(args.board))
    except BoardError as err:
        print(f"Failed to fill game: {err}", file=sys.stderr)
        return 1

    game.hide_simple = args.hide_simple
    game.random_eliminators = args.random_eliminators
    game.run_simple_first = not args.no_simple_first
    game.auto_solve = not args.step
    step_through_console(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
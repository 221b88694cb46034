"""Step-by-step Sudoku solving with explained candidate eliminations."""

__version__ = "0.1.0"
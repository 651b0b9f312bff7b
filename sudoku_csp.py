# sudoku_csp.py
from dataclasses import dataclass
from typing import List, Tuple, Optional
import logging

log = logging.getLogger(__name__)

# ----------------------------
# Config
# ----------------------------
GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = range(1, GRID_SIZE + 1)

# ----------------------------
# Types
# ----------------------------
Variable = Tuple[int, int]
Grid = List[List[int]]


class SudokuGridError(ValueError):
    """Raised when a grid, puzzle text or snapshot does not have the 9x9 digit shape."""


@dataclass
class SearchStats:
    """Per-call search counters. Owned by the caller, never shared between solves."""
    assignments: int = 0
    backtracks: int = 0

# ----------------------------
# CSP Components: Variables, Constraints
# ----------------------------

def get_variables() -> List[Variable]:
    """Return list of variables (row, column) in row-major order."""
    return [(row, column) for row in range(GRID_SIZE) for column in range(GRID_SIZE)]

def is_valid_placement(grid: Grid, digit: int, row: int, column: int) -> bool:
    """
    Check that `digit` does not already appear in the row, column or 3x3 box of (row, column).
    The target cell itself is scanned too, so it must hold EMPTY when this is called.
    """
    # Row constraint
    for value in grid[row]:
        if value == digit:
            return False

    # Column constraint
    for row_index in range(GRID_SIZE):
        if grid[row_index][column] == digit:
            return False

    # Box constraint (3x3)
    box_start_row, box_start_column = (row // BOX_SIZE) * BOX_SIZE, (column // BOX_SIZE) * BOX_SIZE
    for box_row_index in range(box_start_row, box_start_row + BOX_SIZE):
        for box_column_index in range(box_start_column, box_start_column + BOX_SIZE):
            if grid[box_row_index][box_column_index] == digit:
                return False

    return True

# ----------------------------
# Result snapshot
# ----------------------------

def grid_to_snapshot(grid: Grid) -> str:
    """Freeze the grid into an 81-character row-major digit string."""
    return "".join(str(value) for row in grid for value in row)

def grid_from_snapshot(snapshot: str) -> Grid:
    """Rebuild a 9x9 grid from an 81-character row-major digit string."""
    if len(snapshot) != GRID_SIZE * GRID_SIZE or any(character not in "0123456789" for character in snapshot):
        raise SudokuGridError(f"Snapshot must be {GRID_SIZE * GRID_SIZE} digits, got {snapshot!r}")
    return [
        [int(snapshot[row * GRID_SIZE + column]) for column in range(GRID_SIZE)]
        for row in range(GRID_SIZE)
    ]

# ----------------------------
# CSP Backtracking Solver
# ----------------------------

def select_unassigned_variable(grid: Grid) -> Optional[Variable]:
    """Find next unassigned variable (first empty cell in row-major order)."""
    for row in range(GRID_SIZE):
        for column in range(GRID_SIZE):
            if grid[row][column] == EMPTY:
                return (row, column)
    return None

def backtrack_solve(grid: Grid, stats: Optional[SearchStats] = None) -> Optional[str]:
    """
    Naive backtracking solver (first-empty selection, digits tried in ascending order).

    Mutates `grid` in place. Returns the snapshot of the grid taken when the first
    complete assignment is reached, or None when the search is exhausted. On None
    every trial has been undone and the grid is back in its original state.

    Clues are never re-checked against each other, so a grid with duplicate clues
    can still come back "solved"; run the result through validate_full_grid.
    """
    variable = select_unassigned_variable(grid)
    if variable is None:
        return grid_to_snapshot(grid)  # solved

    row, column = variable
    for digit in DIGITS:
        if is_valid_placement(grid, digit, row, column):
            # assign
            grid[row][column] = digit
            if stats is not None:
                stats.assignments += 1

            snapshot = backtrack_solve(grid, stats)
            if snapshot is not None:
                return snapshot

            # undo
            grid[row][column] = EMPTY
            if stats is not None:
                stats.backtracks += 1

    return None

def search_snapshot(grid: Grid, stats: Optional[SearchStats] = None) -> Optional[str]:
    """Run backtrack_solve on `grid` and log the search totals at DEBUG."""
    if stats is None:
        stats = SearchStats()
    snapshot = backtrack_solve(grid, stats)
    log.debug("Search %s after %d assignments, %d backtracks",
              "succeeded" if snapshot is not None else "exhausted", stats.assignments, stats.backtracks)
    return snapshot

def solve(grid: Grid, stats: Optional[SearchStats] = None) -> bool:
    """Solve `grid` in place. True if a solution was found and is left committed in the grid."""
    return search_snapshot(grid, stats) is not None

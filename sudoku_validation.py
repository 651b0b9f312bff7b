# sudoku_validation.py
from typing import Any

from sudoku_csp import BOX_SIZE, EMPTY, GRID_SIZE, Grid, SudokuGridError, get_variables

# ----------------------------
# Input shape
# ----------------------------

def check_grid_shape(grid: Any) -> None:
    """Raise SudokuGridError unless `grid` is 9 rows of 9 ints in [0, 9]."""
    if not isinstance(grid, (list, tuple)) or len(grid) != GRID_SIZE:
        raise SudokuGridError(f"Grid must have {GRID_SIZE} rows")
    for row_index, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != GRID_SIZE:
            raise SudokuGridError(f"Row {row_index} must have {GRID_SIZE} cells")
        for column_index, value in enumerate(row):
            # bool is an int subclass but never a digit
            if isinstance(value, bool) or not isinstance(value, int) or not EMPTY <= value <= GRID_SIZE:
                raise SudokuGridError(
                    f"Cell ({row_index}, {column_index}) must be an int in [{EMPTY}, {GRID_SIZE}], got {value!r}"
                )

def clues_are_consistent(grid: Grid) -> bool:
    """Return True when no two clues share a row, column or 3x3 box."""
    seen = set()
    for row, column in get_variables():
        value = grid[row][column]
        if value == EMPTY:
            continue
        box = (row // BOX_SIZE, column // BOX_SIZE)
        keys = (("row", row, value), ("column", column, value), ("box", box, value))
        if any(key in seen for key in keys):
            return False
        seen.update(keys)
    return True

# ----------------------------
# Full-grid validation
# ----------------------------

def validate_full_grid(grid: Grid) -> bool:
    """
    Check a completely filled grid: every row, column and 3x3 box holds 9 distinct values.
    The grid is assumed to contain only digits 1-9; the result on a grid with empty cells
    is not meaningful.
    """
    # Rows
    for row in range(GRID_SIZE):
        if len(set(grid[row])) != GRID_SIZE:
            return False

    # Columns
    for column in range(GRID_SIZE):
        if len({grid[row][column] for row in range(GRID_SIZE)}) != GRID_SIZE:
            return False

    # Boxes: no other cell in a cell's box shares its value
    for row in range(GRID_SIZE):
        for column in range(GRID_SIZE):
            box_start_row, box_start_column = (row // BOX_SIZE) * BOX_SIZE, (column // BOX_SIZE) * BOX_SIZE
            for box_row_index in range(box_start_row, box_start_row + BOX_SIZE):
                for box_column_index in range(box_start_column, box_start_column + BOX_SIZE):
                    if (box_row_index, box_column_index) == (row, column):
                        continue
                    if grid[box_row_index][box_column_index] == grid[row][column]:
                        return False

    return True

# sudoku_format.py
from typing import List

from sudoku_csp import BOX_SIZE, EMPTY, GRID_SIZE, Grid, SudokuGridError

# separators allowed between cells in puzzle text
IGNORED_CHARACTERS = set(" \t\r\n|-+,")
EMPTY_CHARACTERS = {"0", "."}

# ----------------------------
# Parse Sudoku
# ----------------------------
def parse_grid(text: str) -> Grid:
    """
    Parse puzzle text into a grid. Cells are read row-major: digits 1-9 are clues,
    '0' or '.' is an empty cell. Whitespace and '|', '-', '+', ',' are ignored, so
    both a single 81-character line and the output of format_grid are accepted.
    """
    cells: List[int] = []
    for character in text:
        if character in IGNORED_CHARACTERS:
            continue
        if character in EMPTY_CHARACTERS:
            cells.append(EMPTY)
        elif character in "123456789":
            cells.append(int(character))
        else:
            raise SudokuGridError(f"Unexpected character {character!r} in puzzle text")

    if len(cells) != GRID_SIZE * GRID_SIZE:
        raise SudokuGridError(f"Puzzle text must contain {GRID_SIZE * GRID_SIZE} cells, found {len(cells)}")

    return [cells[row * GRID_SIZE:(row + 1) * GRID_SIZE] for row in range(GRID_SIZE)]

# ----------------------------
# Print Sudoku
# ----------------------------
def format_grid(grid: Grid) -> str:
    lines: List[str] = []
    for row_index in range(GRID_SIZE):
        row_str = ""
        for column_index in range(GRID_SIZE):
            val = grid[row_index][column_index]
            row_str += str(val) if val != EMPTY else "."
            if column_index == GRID_SIZE - 1:
                continue
            if column_index % BOX_SIZE == BOX_SIZE - 1:
                row_str += " | "
            else:
                row_str += " "
        lines.append(row_str)
        if row_index % BOX_SIZE == BOX_SIZE - 1 and row_index != GRID_SIZE - 1:
            lines.append("-" * 21)
    return "\n".join(lines)

def print_grid(grid: Grid):
    print(format_grid(grid))
    print()

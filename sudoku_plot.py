# sudoku_plot.py
from typing import Optional
import logging

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from sudoku_csp import BOX_SIZE, EMPTY, GRID_SIZE, Grid

log = logging.getLogger(__name__)

# ----------------------------
# Config
# ----------------------------
CLUE_COLOR = "black"
SOLVED_COLOR = "#1f78b4"
FIGURE_SIZE = (6, 6)
DPI = 200

# ----------------------------
# Visualization helper
# ----------------------------
def plot_grid(puzzle: Grid, solution: Optional[Grid] = None, out_png: str = "sudoku_solution.png", title: str = "Sudoku (backtracking solver)") -> str:
    """
    Draw the puzzle to a PNG. Clues are drawn in CLUE_COLOR; when `solution` is given,
    the cells the solver filled in are drawn in SOLVED_COLOR. Returns the output path.
    """
    fig, ax = plt.subplots(1, 1, figsize=FIGURE_SIZE)

    for row in range(GRID_SIZE):
        for column in range(GRID_SIZE):
            # row 0 at the top
            y = GRID_SIZE - row - 1
            ax.add_patch(Rectangle((column, y), 1, 1, linewidth=0.5, edgecolor="black", facecolor="none"))

            clue = puzzle[row][column]
            if clue != EMPTY:
                ax.text(column + 0.5, y + 0.5, str(clue), fontsize=18, ha="center", va="center", color=CLUE_COLOR)
            elif solution is not None:
                ax.text(column + 0.5, y + 0.5, str(solution[row][column]), fontsize=18, ha="center", va="center", color=SOLVED_COLOR)

    # heavier lines around the 3x3 boxes
    for box_row in range(0, GRID_SIZE, BOX_SIZE):
        for box_column in range(0, GRID_SIZE, BOX_SIZE):
            ax.add_patch(Rectangle((box_column, GRID_SIZE - box_row - BOX_SIZE), BOX_SIZE, BOX_SIZE,
                                   linewidth=2, edgecolor="black", facecolor="none"))

    ax.set_xlim(0, GRID_SIZE)
    ax.set_ylim(0, GRID_SIZE)
    ax.set_aspect("equal")
    ax.set_axis_off()
    plt.title(title)
    plt.tight_layout()
    fig.savefig(out_png, dpi=DPI)
    plt.close(fig)
    log.info("Saved grid to %s", out_png)
    return out_png

# sudoku_solution.py
from enum import Enum
from typing import List, Optional, Union
import argparse
import copy
import logging
import sys
import time

from sudoku_csp import Grid, SearchStats, SudokuGridError, grid_from_snapshot, search_snapshot
from sudoku_format import parse_grid, print_grid
from sudoku_validation import check_grid_shape, clues_are_consistent, validate_full_grid

log = logging.getLogger(__name__)

# ----------------------------
# Result kinds
# ----------------------------
class SolveFailure(Enum):
    """Explicit non-grid result of get_grid_solution. Returned, never raised."""
    UNSOLVABLE = "Sudoku solution could not be calculated."
    INVALID_SOLUTION = "There are no valid solutions to this sudoku."

    @property
    def message(self) -> str:
        return self.value

# ----------------------------
# Orchestration
# ----------------------------
def get_grid_solution(grid: Grid, fail_fast: bool = False, stats: Optional[SearchStats] = None) -> Union[Grid, SolveFailure]:
    """
    Solve `grid` and return the validated solution, or a SolveFailure.

    The caller's grid is not modified. SolveFailure.UNSOLVABLE means the search ran out of
    digits to try; SolveFailure.INVALID_SOLUTION means the search filled the grid but the
    result breaks a Sudoku rule, which only happens when the clues already contain a
    duplicate. With `fail_fast`, such clues are reported as INVALID_SOLUTION before searching.

    Raises SudokuGridError if `grid` is not a 9x9 grid of ints in [0, 9].
    """
    check_grid_shape(grid)

    if fail_fast and not clues_are_consistent(grid):
        log.warning(SolveFailure.INVALID_SOLUTION.message)
        return SolveFailure.INVALID_SOLUTION

    if stats is None:
        stats = SearchStats()
    # fresh lists so tuple rows are accepted and the caller's grid is left alone
    snapshot = search_snapshot([list(row) for row in grid], stats)
    if snapshot is None:
        log.warning(SolveFailure.UNSOLVABLE.message)
        return SolveFailure.UNSOLVABLE

    solution = grid_from_snapshot(snapshot)
    if not validate_full_grid(solution):
        log.warning(SolveFailure.INVALID_SOLUTION.message)
        return SolveFailure.INVALID_SOLUTION

    log.info("Solved after %d assignments, %d backtracks", stats.assignments, stats.backtracks)
    return solution

# ----------------------------
# Example Puzzle
# ----------------------------
EXAMPLE_PUZZLE: Grid = [
    [5,3,0, 0,7,0, 0,0,0],
    [6,0,0, 1,9,5, 0,0,0],
    [0,9,8, 0,0,0, 0,6,0],

    [8,0,0, 0,6,0, 0,0,3],
    [4,0,0, 8,0,3, 0,0,1],
    [7,0,0, 0,2,0, 0,0,6],

    [0,6,0, 0,0,0, 2,8,0],
    [0,0,0, 4,1,9, 0,0,5],
    [0,0,0, 0,8,0, 0,7,9]
]

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by backtracking.")
    parser.add_argument("puzzle", nargs="?", help="81 cells row-major, '0' or '.' for empty (default: built-in example)")
    parser.add_argument("--fail-fast", action="store_true", help="reject duplicate clues before searching")
    parser.add_argument("--plot", metavar="PNG", help="save the solved grid as a PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        puzzle = parse_grid(args.puzzle) if args.puzzle else copy.deepcopy(EXAMPLE_PUZZLE)
    except SudokuGridError as grid_error:
        print("Invalid puzzle:", grid_error)
        return 2

    print("=== Given puzzle ===")
    print_grid(puzzle)

    stats = SearchStats()
    start_time = time.perf_counter()
    result = get_grid_solution(puzzle, fail_fast=args.fail_fast, stats=stats)
    elapsed_time = time.perf_counter() - start_time

    if isinstance(result, SolveFailure):
        print(result.message)
    else:
        print("=== Solved puzzle ===")
        print_grid(result)
        if args.plot:
            from sudoku_plot import plot_grid
            plot_grid(puzzle, result, out_png=args.plot)
            print("Saved grid to", args.plot)

    print(f"Assignments: {stats.assignments}, Backtracks: {stats.backtracks}, Time: {elapsed_time:.4f}s")
    return 1 if isinstance(result, SolveFailure) else 0

if __name__ == "__main__":
    sys.exit(main())

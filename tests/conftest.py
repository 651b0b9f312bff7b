"""Shared fixtures and helpers for the Sudoku tests."""

import copy

import matplotlib
matplotlib.use("Agg")

import pytest

from sudoku_csp import GRID_SIZE, Grid


PUZZLE: Grid = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION_SNAPSHOT = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

SOLUTION: Grid = [
    [int(value) for value in SOLUTION_SNAPSHOT[row * 9:(row + 1) * 9]]
    for row in range(9)
]


def make_dead_end_grid() -> Grid:
    """
    Consistent clues, but cell (0, 1) has no legal digit: its column holds 1-8 and its row holds 9.
    The solver tries 3-8 in (0, 0) first, so the search does a little work before failing.
    """
    grid = [[0] * 9 for _ in range(9)]
    grid[0][5] = 9
    for row in range(1, 9):
        grid[row][1] = row
    return grid


def assert_sudoku_invariant(grid: Grid) -> None:
    """Every row, column and 3x3 box holds each digit 1-9 exactly once."""
    digits = set(range(1, 10))
    for row in range(GRID_SIZE):
        assert set(grid[row]) == digits
    for column in range(GRID_SIZE):
        assert {grid[row][column] for row in range(GRID_SIZE)} == digits
    for box_row in range(0, GRID_SIZE, 3):
        for box_column in range(0, GRID_SIZE, 3):
            box = {grid[r][c] for r in range(box_row, box_row + 3) for c in range(box_column, box_column + 3)}
            assert box == digits


@pytest.fixture
def puzzle() -> Grid:
    return copy.deepcopy(PUZZLE)


@pytest.fixture
def solution() -> Grid:
    return copy.deepcopy(SOLUTION)


@pytest.fixture
def empty_grid() -> Grid:
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def dead_end_grid() -> Grid:
    return make_dead_end_grid()

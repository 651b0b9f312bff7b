"""Tests for puzzle text parsing and grid formatting."""

import pytest

from sudoku_csp import SudokuGridError, grid_to_snapshot
from sudoku_format import format_grid, parse_grid, print_grid


class TestParseGrid:
    """Test reading puzzle text into a grid."""

    def test_single_line(self, puzzle):
        assert parse_grid(grid_to_snapshot(puzzle)) == puzzle

    def test_dots_for_empty_cells(self, puzzle):
        text = grid_to_snapshot(puzzle).replace("0", ".")
        assert parse_grid(text) == puzzle

    def test_multi_line_with_separators(self, puzzle):
        text = "\n".join(",".join(str(value) for value in row) for row in puzzle)
        assert parse_grid(text) == puzzle

    def test_reads_formatted_grid(self, puzzle):
        assert parse_grid(format_grid(puzzle)) == puzzle

    def test_too_few_cells(self):
        with pytest.raises(SudokuGridError):
            parse_grid("0" * 80)

    def test_too_many_cells(self):
        with pytest.raises(SudokuGridError):
            parse_grid("0" * 82)

    def test_unexpected_character(self):
        with pytest.raises(SudokuGridError):
            parse_grid("x" + "0" * 80)


class TestFormatGrid:
    """Test the text layout of a grid."""

    def test_layout(self, puzzle):
        lines = format_grid(puzzle).splitlines()
        assert len(lines) == 11
        assert lines[0] == "5 3 . | . 7 . | . . ."
        assert lines[3] == "-" * 21
        assert lines[7] == "-" * 21
        assert lines[10] == ". . . | . 8 . | . 7 9"

    def test_solved_grid_has_no_dots(self, solution):
        assert "." not in format_grid(solution)

    def test_print_grid(self, puzzle, capsys):
        print_grid(puzzle)
        assert capsys.readouterr().out == format_grid(puzzle) + "\n\n"

"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from sudoku_game.core.board import SudokuBoard
from sudoku_game.core.validator import (
    is_placeable,
    is_valid_board,
    block_digits,
    CellStatus,
    check_cell,
    check_answers,
)


SOLUTION = (
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

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_wrong_shape(self):
        """Only 9x9 grids are accepted."""
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_rejects_out_of_range_values(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, 0] = 10
        with pytest.raises(ValueError):
            SudokuBoard(grid)

    def test_constructor_copies_grid(self):
        """The board never aliases the array it was built from."""
        grid = np.zeros((9, 9), dtype=np.int32)
        board = SudokuBoard(grid)
        grid[0, 0] = 5
        assert board.is_empty(0, 0)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_rejects_invalid_value(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_box_origin(self):
        """Block coordinate is the top-left corner of the 3x3 block."""
        assert SudokuBoard.box_origin(0, 0) == (0, 0)
        assert SudokuBoard.box_origin(4, 7) == (3, 6)
        assert SudokuBoard.box_origin(8, 2) == (6, 0)

    def test_linear_index(self):
        """Linear index is row*9+col."""
        assert SudokuBoard.cell_to_index(0, 0) == 0
        assert SudokuBoard.cell_to_index(8, 8) == 80
        assert SudokuBoard.index_to_cell(40) == (4, 4)
        assert SudokuBoard.index_to_cell(SudokuBoard.cell_to_index(3, 7)) == (3, 7)

        with pytest.raises(ValueError):
            SudokuBoard.index_to_cell(81)
        with pytest.raises(ValueError):
            SudokuBoard.cell_to_index(9, 0)

    def test_find_first_empty_is_row_major(self):
        board = SudokuBoard.from_string(SOLUTION)
        board.clear(4, 2)
        board.clear(6, 0)
        assert board.find_first_empty() == (4, 2)
        assert SudokuBoard.from_string(SOLUTION).find_first_empty() is None

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    def test_rejects_off_board_cells(self):
        """Negative or too-large coordinates raise instead of wrapping around."""
        board = SudokuBoard.from_string(SOLUTION)
        for row, col in [(-1, 0), (0, -1), (9, 0), (0, 9)]:
            with pytest.raises(ValueError):
                board.get(row, col)
            with pytest.raises(ValueError):
                board.set(row, col, 1)
            with pytest.raises(ValueError):
                board.is_empty(row, col)

    def test_is_solved(self):
        assert SudokuBoard.from_string(SOLUTION).is_solved()
        assert not SudokuBoard.from_string(PUZZLE).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 80 + "9")
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_from_string_rejects_non_ascii_digits(self):
        """Only ASCII 0-9 and . are accepted."""
        with pytest.raises(ValueError):
            SudokuBoard.from_string("\u0663" * 81)
        with pytest.raises(ValueError):
            SudokuBoard.from_string("\uff15" + "0" * 80)

    def test_to_string_round_trip(self):
        assert SudokuBoard.from_string(PUZZLE).to_string() == PUZZLE

    def test_2d_list(self):
        rows = SudokuBoard.from_string(SOLUTION).to_2d_list()
        assert rows[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
        assert SudokuBoard.from_2d_list(rows) == SudokuBoard.from_string(SOLUTION)

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_str(self):
        text = str(SudokuBoard.from_string(PUZZLE))
        assert text.splitlines()[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_placeable(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        assert not is_placeable(board, 0, 5, 5)
        assert not is_placeable(board, 5, 0, 5)
        assert not is_placeable(board, 1, 1, 5)
        assert is_placeable(board, 0, 5, 7)
        assert is_placeable(board, 4, 4, 5)

    def test_is_placeable_rejects_off_board_cells(self):
        board = SudokuBoard()
        board.set(8, 0, 5)
        with pytest.raises(ValueError):
            is_placeable(board, -1, 0, 5)
        with pytest.raises(ValueError):
            is_placeable(board, 0, 9, 5)

    def test_is_valid_board(self):
        assert is_valid_board(SudokuBoard.from_string(SOLUTION))
        assert is_valid_board(SudokuBoard.from_string(PUZZLE))

        board = SudokuBoard.from_string(PUZZLE)
        board.set(0, 2, 5)
        assert not is_valid_board(board)

    def test_is_placeable_rejects_out_of_range_digits(self):
        board = SudokuBoard()
        assert not is_placeable(board, 0, 0, 0)
        assert not is_placeable(board, 0, 0, 10)

    def test_is_placeable_ignores_own_cell(self):
        """A digit already written in the cell does not conflict with itself."""
        board = SudokuBoard.from_string(SOLUTION)
        for row in range(9):
            for col in range(9):
                assert is_placeable(board, row, col, board.get(row, col))

    def test_is_placeable_is_repeatable(self):
        """Same grid, cell and digit always give the same answer."""
        board = SudokuBoard.from_string(PUZZLE)
        first = [is_placeable(board, r, c, n)
                 for r in range(9) for c in range(9) for n in range(1, 10)]
        second = [is_placeable(board, r, c, n)
                  for r in reversed(range(9)) for c in reversed(range(9)) for n in range(9, 0, -1)]
        assert first == list(reversed(second))
        assert board.to_string() == PUZZLE

    def test_block_digits(self):
        board = SudokuBoard.from_string(PUZZLE)
        assert block_digits(board, 0, 0) == {5, 3, 6, 9, 8}
        assert block_digits(board, 4, 4) == {6, 8, 3, 2}

    def test_check_cell(self):
        solution = SudokuBoard.from_string(SOLUTION)
        assert check_cell(solution, 0, 2, 4) is CellStatus.CORRECT
        assert check_cell(solution, 0, 2, 1) is CellStatus.INCORRECT
        assert check_cell(solution, 0, 2, 0) is CellStatus.UNFILLED
        assert check_cell(solution, 0, 2, None) is CellStatus.UNFILLED


class TestCheckAnswers:
    """Tests for whole-puzzle answer checking."""

    def _full_entries(self, puzzle, solution):
        return {
            (r, c): solution.get(r, c)
            for r in range(9) for c in range(9) if puzzle.is_empty(r, c)
        }

    def test_all_correct(self):
        puzzle = SudokuBoard.from_string(PUZZLE)
        solution = SudokuBoard.from_string(SOLUTION)

        result = check_answers(puzzle, solution, self._full_entries(puzzle, solution))

        assert result.solved
        assert len(result.statuses) == puzzle.count_empty()
        assert result.message == "Congratulations! Solved!"

    def test_unfilled_cells(self):
        puzzle = SudokuBoard.from_string(PUZZLE)
        solution = SudokuBoard.from_string(SOLUTION)

        result = check_answers(puzzle, solution, {(0, 2): 4})

        assert not result.all_filled
        assert result.all_correct
        assert result.statuses[(0, 2)] is CellStatus.CORRECT
        assert result.statuses[(0, 3)] is CellStatus.UNFILLED
        assert result.message == "There are still empty cells."

    def test_mistakes(self):
        puzzle = SudokuBoard.from_string(PUZZLE)
        solution = SudokuBoard.from_string(SOLUTION)
        entries = self._full_entries(puzzle, solution)
        entries[(0, 2)] = 1

        result = check_answers(puzzle, solution, entries)

        assert result.all_filled
        assert not result.all_correct
        assert result.incorrect_cells == [(0, 2)]
        assert result.message.startswith("There are mistakes")

    def test_fixed_cells_are_skipped(self):
        puzzle = SudokuBoard.from_string(PUZZLE)
        solution = SudokuBoard.from_string(SOLUTION)

        result = check_answers(puzzle, solution, {(0, 0): 9})

        assert (0, 0) not in result.statuses


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

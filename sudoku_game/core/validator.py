"""Validation utilities for Sudoku boards and player answers."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Set, Tuple

from .board import SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_placeable(board: SudokuBoard, row: int, col: int, num: int) -> bool:
    """
    Check if digit num can be placed at (row, col).

    The digit must not appear in any other cell of the same row, column or
    3x3 block. The cell (row, col) itself is ignored, so the check gives the
    same answer whether or not the digit has already been written there.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        num: Digit to check (1-9).

    Raises:
        ValueError: If (row, col) is off the board.

    Returns:
        True if the placement is valid.
    """
    board.validate_cell(row, col)
    if num < 1 or num > SIZE:
        return False

    grid = board.grid

    for x in range(SIZE):
        if x != col and grid[row, x] == num:
            return False

    for x in range(SIZE):
        if x != row and grid[x, col] == num:
            return False

    start_row, start_col = board.box_origin(row, col)
    for i in range(start_row, start_row + BOX_SIZE):
        for j in range(start_col, start_col + BOX_SIZE):
            if (i, j) != (row, col) and grid[i, j] == num:
                return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """Check if the entire board state is valid (no conflicts)."""
    return board.is_valid()


def block_digits(board: SudokuBoard, row: int, col: int) -> Set[int]:
    """Digits already present in the 3x3 block containing (row, col)."""
    return {int(v) for v in board.get_box(row, col) if v != 0}


class CellStatus(Enum):
    """Outcome of comparing a player's entry with the solution."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNFILLED = "unfilled"


def check_cell(solution: SudokuBoard, row: int, col: int, value: Optional[int]) -> CellStatus:
    """
    Compare an entered digit against the solution.

    A cell is unfilled if no digit was entered (None or 0), correct if the
    digit equals the solution's digit at (row, col) and incorrect otherwise.
    """
    if not value:
        return CellStatus.UNFILLED
    if value == solution.get(row, col):
        return CellStatus.CORRECT
    return CellStatus.INCORRECT


@dataclass
class CheckResult:
    """Result of checking every editable cell of a puzzle."""
    statuses: Dict[Tuple[int, int], CellStatus] = field(default_factory=dict)
    all_filled: bool = True
    all_correct: bool = True

    @property
    def solved(self) -> bool:
        return self.all_filled and self.all_correct

    @property
    def incorrect_cells(self):
        return sorted(cell for cell, s in self.statuses.items() if s is CellStatus.INCORRECT)

    @property
    def message(self) -> str:
        if not self.all_filled:
            return "There are still empty cells."
        if self.all_correct:
            return "Congratulations! Solved!"
        return "There are mistakes. Check the highlighted cells."


def check_answers(
    puzzle: SudokuBoard,
    solution: SudokuBoard,
    entries: Mapping[Tuple[int, int], int],
) -> CheckResult:
    """
    Check the player's entries for every editable cell of a puzzle.

    Args:
        puzzle: The carved puzzle. Non-zero cells are fixed clues and skipped.
        solution: The complete solution grid.
        entries: Mapping of (row, col) to the entered digit.

    Returns:
        CheckResult with a status per editable cell.
    """
    result = CheckResult()

    for row in range(SIZE):
        for col in range(SIZE):
            if not puzzle.is_empty(row, col):
                continue

            status = check_cell(solution, row, col, entries.get((row, col)))
            result.statuses[(row, col)] = status

            if status is CellStatus.UNFILLED:
                result.all_filled = False
            elif status is CellStatus.INCORRECT:
                result.all_correct = False

    return result

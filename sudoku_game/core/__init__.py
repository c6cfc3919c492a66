"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE, NUM_CELLS
from .validator import (
    is_placeable,
    is_valid_board,
    block_digits,
    CellStatus,
    CheckResult,
    check_cell,
    check_answers,
)

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "NUM_CELLS",
    "is_placeable",
    "is_valid_board",
    "block_digits",
    "CellStatus",
    "CheckResult",
    "check_cell",
    "check_answers",
]

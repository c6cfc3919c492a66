"""Sudoku puzzle generation, carving and answer checking for a single-player game."""

from .core import SudokuBoard, is_placeable, CellStatus, CheckResult, check_cell, check_answers
from .generator import (
    SudokuGenerator,
    PuzzleCarver,
    Difficulty,
    GenerationResult,
    generate_complete_board,
    carve,
)
from .session import GameSession, GenerationPhase

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "is_placeable",
    "CellStatus",
    "CheckResult",
    "check_cell",
    "check_answers",
    "SudokuGenerator",
    "PuzzleCarver",
    "Difficulty",
    "GenerationResult",
    "generate_complete_board",
    "carve",
    "GameSession",
    "GenerationPhase",
]

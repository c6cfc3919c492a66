"""Generator module for creating Sudoku grids and puzzles."""

from .generator import SudokuGenerator, GenerationStats, generate_complete_board
from .carver import PuzzleCarver, Difficulty, GenerationResult, carve

__all__ = [
    "SudokuGenerator",
    "GenerationStats",
    "generate_complete_board",
    "PuzzleCarver",
    "Difficulty",
    "GenerationResult",
    "carve",
]

"""Puzzle carving: remove cells from a complete grid and label the difficulty."""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.board import SudokuBoard, NUM_CELLS

MIN_CELLS_TO_REMOVE = 40
MAX_CELLS_TO_REMOVE = 60
MEDIUM_THRESHOLD = 45
HARD_THRESHOLD = 52


class Difficulty(Enum):
    """Difficulty tiers, assigned from the number of removed cells."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        """Display name of the tier."""
        return self.value.capitalize()

    @property
    def removal_range(self):
        """Inclusive range of removed cells that maps to this tier (min, max)."""
        ranges = {
            Difficulty.EASY: (MIN_CELLS_TO_REMOVE, MEDIUM_THRESHOLD - 1),    # 40-44 removed
            Difficulty.MEDIUM: (MEDIUM_THRESHOLD, HARD_THRESHOLD - 1),       # 45-51 removed
            Difficulty.HARD: (HARD_THRESHOLD, MAX_CELLS_TO_REMOVE),          # 52-60 removed
        }
        return ranges[self]

    @classmethod
    def from_cells_removed(cls, cells_removed: int) -> Difficulty:
        """
        Classify a puzzle purely by how many cells were removed.

        This reflects how sparse the starting grid is, nothing more: it says
        nothing about uniqueness of the solution or the techniques needed.
        """
        if cells_removed < MIN_CELLS_TO_REMOVE or cells_removed > MAX_CELLS_TO_REMOVE:
            raise ValueError(
                f"Cells removed must be {MIN_CELLS_TO_REMOVE}-{MAX_CELLS_TO_REMOVE}, "
                f"got {cells_removed}"
            )
        if cells_removed < MEDIUM_THRESHOLD:
            return cls.EASY
        if cells_removed < HARD_THRESHOLD:
            return cls.MEDIUM
        return cls.HARD


@dataclass(frozen=True)
class GenerationResult:
    """A carved puzzle paired with its difficulty label."""
    puzzle: SudokuBoard
    difficulty: Difficulty
    cells_removed: int

    @property
    def clues(self) -> int:
        return NUM_CELLS - self.cells_removed


class PuzzleCarver:
    """
    Removes a random number of cells from a complete grid.

    Between 40 and 60 cells (inclusive, uniform) are zeroed at positions
    chosen by shuffling all 81 cell indices. The solution is never modified
    and the puzzle never shares its storage.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def carve(self, solution: SudokuBoard) -> GenerationResult:
        """
        Create a puzzle from a complete solution.

        Args:
            solution: A complete, valid grid. This is not re-validated.

        Returns:
            GenerationResult with the puzzle and its difficulty.
        """
        puzzle = solution.copy()

        cells_to_remove = self.rng.randint(MIN_CELLS_TO_REMOVE, MAX_CELLS_TO_REMOVE)

        positions = list(range(NUM_CELLS))
        self.rng.shuffle(positions)

        for pos in positions[:cells_to_remove]:
            row, col = SudokuBoard.index_to_cell(pos)
            puzzle.clear(row, col)

        return GenerationResult(
            puzzle=puzzle,
            difficulty=Difficulty.from_cells_removed(cells_to_remove),
            cells_removed=cells_to_remove,
        )


def carve(solution: SudokuBoard, rng: Optional[random.Random] = None) -> GenerationResult:
    """Carve a puzzle out of a complete solution using the given random source."""
    return PuzzleCarver(rng=rng).carve(solution)

"""Complete Sudoku grid generation using randomized backtracking."""

from __future__ import annotations
import random
import time
from dataclasses import dataclass
from typing import Optional

from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_placeable


@dataclass
class GenerationStats:
    """Statistics from the last generation run."""
    placements: int = 0
    backtracks: int = 0
    time_seconds: float = 0.0


class SudokuGenerator:
    """
    Generator for complete, rule-valid 9x9 Sudoku grids.

    Algorithm:
    1. Take the first empty cell in row-major order
    2. Try the digits 1-9 in a freshly shuffled order
    3. Place a valid digit and recurse; undo the placement only if the
       rest of the grid cannot be completed

    The shuffle at every cell is what makes repeated runs produce different
    grids. All randomness comes from the generator's own random source.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source to draw from. Defaults to a private
                 random.Random seeded with seed.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.stats = GenerationStats()

    def generate_complete_board(self) -> SudokuBoard:
        """Generate a complete valid Sudoku board."""
        self.stats = GenerationStats()
        start_time = time.perf_counter()

        board = SudokuBoard()
        if not self._fill_board(board):
            # An empty 9x9 board always has a completion.
            raise RuntimeError("Backtracking failed to complete the board")

        self.stats.time_seconds = time.perf_counter() - start_time
        return board

    def _fill_board(self, board: SudokuBoard) -> bool:
        """
        Fill the board in place using randomized backtracking.

        Returns True once every cell is filled, False if the current
        partial assignment has no completion.
        """
        cell = board.find_first_empty()
        if cell is None:
            return True

        row, col = cell
        numbers = list(range(1, SIZE + 1))
        self.rng.shuffle(numbers)

        for num in numbers:
            if is_placeable(board, row, col, num):
                board.set(row, col, num)
                self.stats.placements += 1
                if self._fill_board(board):
                    return True
                board.clear(row, col)
                self.stats.backtracks += 1

        return False


def generate_complete_board(rng: Optional[random.Random] = None) -> SudokuBoard:
    """Generate a complete valid Sudoku board from the given random source."""
    return SudokuGenerator(rng=rng).generate_complete_board()

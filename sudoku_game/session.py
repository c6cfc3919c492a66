"""Game session: owns the solution and drives the generate/enter/check workflow."""

from __future__ import annotations
import asyncio
import random
from enum import Enum
from typing import Callable, Dict, Iterator, Optional, Set, Tuple

from tqdm import tqdm

from .core.board import SudokuBoard, SIZE
from .core.validator import (
    CellStatus,
    CheckResult,
    block_digits,
    check_answers,
    check_cell,
)
from .generator import SudokuGenerator, PuzzleCarver, Difficulty, GenerationResult


class GenerationPhase(Enum):
    """Progress points reported while a new puzzle is generated."""
    STARTED = "Generating..."
    SOLUTION_READY = "Creating puzzle..."
    PUZZLE_READY = "Done"


class GameSession:
    """
    A single-player game.

    The session holds the solution grid as the answer key, the carved puzzle
    shown to the player, and the digits the player has entered so far.
    Regenerating replaces all three.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        show_progress: bool = False,
        on_phase: Optional[Callable[[GenerationPhase], None]] = None,
        reject_incorrect: bool = True,
    ):
        """
        Initialize the session.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random source shared by the generator and the carver.
            show_progress: Show a tqdm progress bar while generating.
            on_phase: Callback invoked at every GenerationPhase, so a host
                      can repaint progress between phases.
            reject_incorrect: If True, entries that do not match the solution
                              are refused and not stored.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.generator = SudokuGenerator(rng=self.rng)
        self.carver = PuzzleCarver(rng=self.rng)
        self.show_progress = show_progress
        self.on_phase = on_phase
        self.reject_incorrect = reject_incorrect

        self.solution: Optional[SudokuBoard] = None
        self.result: Optional[GenerationResult] = None
        self.entries: Dict[Tuple[int, int], int] = {}
        self._generating = False

    @property
    def puzzle(self) -> Optional[SudokuBoard]:
        return self.result.puzzle if self.result else None

    @property
    def difficulty(self) -> Optional[Difficulty]:
        return self.result.difficulty if self.result else None

    @property
    def is_generating(self) -> bool:
        return self._generating

    def new_puzzle(self) -> GenerationResult:
        """Generate a fresh solution and puzzle, replacing the current game."""
        self._begin()
        try:
            with tqdm(total=len(GenerationPhase), desc="Sudoku",
                      disable=not self.show_progress) as pbar:
                for phase in self._steps():
                    self._report(phase, pbar)
        finally:
            self._generating = False
        return self.result

    async def new_puzzle_async(self, start_delay: float = 0.1, delay: float = 0.05) -> GenerationResult:
        """
        Generate a new puzzle, yielding to the event loop between phases.

        Args:
            start_delay: Seconds to sleep after STARTED, before the board is built.
            delay: Seconds to sleep after SOLUTION_READY, before carving.
        """
        delays = {
            GenerationPhase.STARTED: start_delay,
            GenerationPhase.SOLUTION_READY: delay,
        }
        self._begin()
        try:
            with tqdm(total=len(GenerationPhase), desc="Sudoku",
                      disable=not self.show_progress) as pbar:
                for phase in self._steps():
                    self._report(phase, pbar)
                    if phase in delays:
                        await asyncio.sleep(delays[phase])
        finally:
            self._generating = False
        return self.result

    def _begin(self) -> None:
        if self._generating:
            raise RuntimeError("A puzzle is already being generated")
        self._generating = True

    def _steps(self) -> Iterator[GenerationPhase]:
        # The previous game is gone as soon as regeneration starts.
        self.solution = None
        self.result = None
        self.entries = {}
        yield GenerationPhase.STARTED

        self.solution = self.generator.generate_complete_board()
        yield GenerationPhase.SOLUTION_READY

        self.result = self.carver.carve(self.solution)
        yield GenerationPhase.PUZZLE_READY

    def _report(self, phase: GenerationPhase, pbar: tqdm) -> None:
        pbar.set_description(phase.value)
        pbar.update(1)
        if self.on_phase is not None:
            self.on_phase(phase)

    def _require_game(self) -> None:
        if self.result is None:
            raise RuntimeError("No puzzle yet, call new_puzzle() first")

    def is_fixed(self, row: int, col: int) -> bool:
        """True if (row, col) is a clue of the puzzle and cannot be edited."""
        self._require_game()
        SudokuBoard.validate_cell(row, col)
        return not self.puzzle.is_empty(row, col)

    def enter(self, row: int, col: int, value: int) -> CellStatus:
        """
        Enter a digit into an editable cell.

        Returns:
            CORRECT if the digit matches the solution, INCORRECT otherwise.
            With reject_incorrect, incorrect digits are not stored.
        """
        if self.is_fixed(row, col):
            raise ValueError(f"Cell ({row}, {col}) is fixed")
        if value < 1 or value > SIZE:
            raise ValueError(f"Value must be 1-{SIZE}, got {value}")

        status = check_cell(self.solution, row, col, value)
        if status is CellStatus.CORRECT or not self.reject_incorrect:
            self.entries[(row, col)] = value
        return status

    def clear(self, row: int, col: int) -> None:
        """Remove the player's entry from a cell."""
        if self.is_fixed(row, col):
            raise ValueError(f"Cell ({row}, {col}) is fixed")
        self.entries.pop((row, col), None)

    def display_board(self) -> SudokuBoard:
        """The puzzle with the player's entries filled in."""
        self._require_game()
        board = self.puzzle.copy()
        for (row, col), value in self.entries.items():
            board.set(row, col, value)
        return board

    def available_digits(self, row: int, col: int) -> Set[int]:
        """Digits not yet shown anywhere in the block of (row, col)."""
        self._require_game()
        SudokuBoard.validate_cell(row, col)
        return set(range(1, SIZE + 1)) - block_digits(self.display_board(), row, col)

    def check(self) -> CheckResult:
        """Check every editable cell against the solution."""
        self._require_game()
        return check_answers(self.puzzle, self.solution, self.entries)

    def is_solved(self) -> bool:
        return self.check().solved

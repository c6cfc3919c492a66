"""Sudoku board representation for the standard 9x9 game."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

SIZE = 9
BOX_SIZE = 3
NUM_CELLS = SIZE * SIZE


class SudokuBoard:
    """
    A 9x9 Sudoku grid.

    Cells hold 0 for empty and 1-9 for a placed digit. The same class is used
    for both the solution (fully populated) and the puzzle (solution with a
    subset of cells zeroed).
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. It is copied, never aliased.
                  If None, creates an empty board.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a copy of the board with independent storage."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    @staticmethod
    def validate_cell(row: int, col: int) -> None:
        """Raise ValueError unless (row, col) lies on the board."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Cell must be within 0-{SIZE - 1}, got ({row}, {col})")

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self.validate_cell(row, col)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self.validate_cell(row, col)
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.validate_cell(row, col)
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        self.validate_cell(row, col)
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    @staticmethod
    def box_origin(row: int, col: int) -> Tuple[int, int]:
        """Top-left corner of the 3x3 block containing (row, col)."""
        return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        self.validate_cell(row, col)
        box_row, box_col = self.box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    @staticmethod
    def index_to_cell(index: int) -> Tuple[int, int]:
        """Convert a linear index (0-80) to a (row, col) pair."""
        if index < 0 or index >= NUM_CELLS:
            raise ValueError(f"Index must be 0-{NUM_CELLS - 1}, got {index}")
        return index // SIZE, index % SIZE

    @staticmethod
    def cell_to_index(row: int, col: int) -> int:
        """Convert a (row, col) pair to its linear index row*9+col."""
        SudokuBoard.validate_cell(row, col)
        return row * SIZE + col

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def find_first_empty(self) -> Optional[Tuple[int, int]]:
        """Return the first empty cell in row-major order, or None if full."""
        for i in range(SIZE):
            for j in range(SIZE):
                if self.grid[i, j] == 0:
                    return i, j
        return None

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for i in range(SIZE):
            row = self.get_row(i)
            non_zero = row[row != 0]
            if len(non_zero) != len(set(non_zero)):
                return False

        for j in range(SIZE):
            col = self.get_col(j)
            non_zero = col[col != 0]
            if len(non_zero) != len(set(non_zero)):
                return False

        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != 0]
                if len(non_zero) != len(set(non_zero)):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the grid is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != NUM_CELLS:
            raise ValueError(f"String length must be {NUM_CELLS}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c in "0123456789":
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in board string: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def to_2d_list(self) -> List[List[int]]:
        """Convert the board to a plain 2D list of ints."""
        return self.grid.tolist()

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())

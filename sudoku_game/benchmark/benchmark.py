"""Benchmarking framework for puzzle generation."""

from __future__ import annotations
import json
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.validator import is_valid_board
from ..generator import SudokuGenerator, PuzzleCarver, Difficulty


@dataclass
class GenerationRecord:
    """Measurements from a single generate-and-carve run."""
    index: int
    cells_removed: int
    clues: int
    difficulty: str
    generate_seconds: float
    carve_seconds: float
    placements: int
    backtracks: int
    valid: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "cells_removed": self.cells_removed,
            "clues": self.clues,
            "difficulty": self.difficulty,
            "generate_seconds": self.generate_seconds,
            "carve_seconds": self.carve_seconds,
            "total_seconds": self.generate_seconds + self.carve_seconds,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "valid": self.valid,
        }


class GenerationBenchmark:
    """
    Runs the generation pipeline repeatedly and collects statistics.

    Useful for looking at how the removal count, and therefore the
    difficulty label, is distributed, and at how much backtracking
    grid construction needs.
    """

    def __init__(self, count: int = 100, seed: Optional[int] = None):
        """
        Initialize the benchmark.

        Args:
            count: Number of puzzles to generate.
            seed: Random seed for reproducibility.
        """
        if count < 1:
            raise ValueError(f"Count must be positive, got {count}")
        self.count = count
        self.seed = seed
        self.generator = SudokuGenerator(seed=seed)
        self.carver = PuzzleCarver(rng=self.generator.rng)
        self.results: List[GenerationRecord] = []
        self.puzzles: Dict[str, List[SudokuBoard]] = {}

    def run(self, show_progress: bool = True) -> List[GenerationRecord]:
        """
        Run the full benchmark.

        Returns:
            List of GenerationRecord objects.
        """
        self.results = []
        self.puzzles = {d.value: [] for d in Difficulty}

        for i in tqdm(range(self.count), desc="Generating", disable=not show_progress):
            solution = self.generator.generate_complete_board()
            stats = self.generator.stats

            start_time = time.perf_counter()
            result = self.carver.carve(solution)
            carve_seconds = time.perf_counter() - start_time

            self.puzzles[result.difficulty.value].append(result.puzzle)
            self.results.append(GenerationRecord(
                index=i,
                cells_removed=result.cells_removed,
                clues=result.clues,
                difficulty=result.difficulty.value,
                generate_seconds=stats.time_seconds,
                carve_seconds=carve_seconds,
                placements=stats.placements,
                backtracks=stats.backtracks,
                valid=(
                    solution.is_complete()
                    and is_valid_board(solution)
                    and is_valid_board(result.puzzle)
                    and result.puzzle.count_empty() == result.cells_removed
                ),
            ))

        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        if not self.results:
            raise RuntimeError("No results yet, call run() first")

        removed = np.array([r.cells_removed for r in self.results])
        gen_times = np.array([r.generate_seconds for r in self.results])
        backtracks = np.array([r.backtracks for r in self.results])
        total = len(self.results)

        summary = {
            "total_puzzles": total,
            "seed": self.seed,
            "valid_rate": sum(r.valid for r in self.results) / total * 100,
            "cells_removed": {
                "min": int(removed.min()),
                "max": int(removed.max()),
                "mean": float(removed.mean()),
            },
            "avg_generate_seconds": float(gen_times.mean()),
            "max_generate_seconds": float(gen_times.max()),
            "avg_carve_seconds": float(np.mean([r.carve_seconds for r in self.results])),
            "avg_backtracks": float(backtracks.mean()),
            "max_backtracks": int(backtracks.max()),
            "results_by_difficulty": {},
        }

        for difficulty in Difficulty:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            summary["results_by_difficulty"][difficulty.value] = {
                "count": len(diff_results),
                "share": len(diff_results) / total * 100,
                "avg_clues": (
                    float(np.mean([r.clues for r in diff_results])) if diff_results else 0.0
                ),
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for difficulty, puzzles in self.puzzles.items():
            if puzzles:
                save_to_folder(puzzles, os.path.join(puzzles_dir, difficulty),
                               prefix=f"puzzle_{difficulty}")

        print(f"Results and puzzles saved to {output_dir}")

    def to_dataframe(self):
        """Convert results to pandas DataFrame (requires pandas)."""
        try:
            import pandas as pd
        except ImportError:
            raise ImportError("pandas is required for DataFrame conversion")
        return pd.DataFrame([r.to_dict() for r in self.results])


def save_to_folder(puzzles: List[SudokuBoard], folder_path: str, prefix: str = "puzzle") -> List[str]:
    """
    Save a list of puzzles to a folder as individual text files.

    Args:
        puzzles: List of SudokuBoard objects.
        folder_path: Directory to save the puzzles.
        prefix: Prefix for the filename (default: "puzzle").

    Returns:
        Paths of the written files.
    """
    os.makedirs(folder_path, exist_ok=True)

    paths = []
    for i, puzzle in enumerate(puzzles, 1):
        file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
        with open(file_path, "w") as f:
            f.write(puzzle.to_string())
            f.write("\n\nPretty format:\n")
            f.write(str(puzzle))
        paths.append(file_path)
    return paths

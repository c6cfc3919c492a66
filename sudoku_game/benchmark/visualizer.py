"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationRecord
from ..generator import Difficulty
from ..generator.carver import MIN_CELLS_TO_REMOVE, MAX_CELLS_TO_REMOVE, MEDIUM_THRESHOLD, HARD_THRESHOLD


class Visualizer:
    """
    Chart generator for puzzle generation benchmark results.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(self, results: List[GenerationRecord], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of generation records.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_removal_histogram(),
            self.plot_difficulty_distribution(),
            self.plot_generation_time(),
            self.plot_backtracks(),
        ]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_removal_histogram(self) -> str:
        """Histogram of removed-cell counts, colored by difficulty tier."""
        fig, ax = plt.subplots(figsize=(10, 6))

        bins = np.arange(MIN_CELLS_TO_REMOVE, MAX_CELLS_TO_REMOVE + 2) - 0.5
        for difficulty in Difficulty:
            values = [r.cells_removed for r in self.results if r.difficulty == difficulty.value]
            ax.hist(values, bins=bins, label=difficulty.label,
                    color=self.COLORS[difficulty.value], edgecolor='black', linewidth=0.5)

        for threshold in (MEDIUM_THRESHOLD, HARD_THRESHOLD):
            ax.axvline(threshold - 0.5, color='black', linestyle='--', linewidth=1)

        ax.set_xlabel('Cells Removed', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Distribution of Removed Cells', fontsize=14, fontweight='bold')
        ax.legend(title='Difficulty')

        return self._save("removal_histogram.png")

    def plot_difficulty_distribution(self) -> str:
        """Bar chart of how many puzzles landed in each tier."""
        fig, ax = plt.subplots(figsize=(8, 6))

        labels = [d.label for d in Difficulty]
        counts = [sum(1 for r in self.results if r.difficulty == d.value) for d in Difficulty]
        colors = [self.COLORS[d.value] for d in Difficulty]

        bars = ax.bar(labels, counts, color=colors, edgecolor='black', linewidth=0.5)

        total = max(len(self.results), 1)
        for bar, count in zip(bars, counts):
            ax.annotate(f'{count / total * 100:.1f}%',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Puzzles per Difficulty Tier', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("difficulty_distribution.png")

    def plot_generation_time(self) -> str:
        """Distribution of complete-board generation times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times_ms = [r.generate_seconds * 1000 for r in self.results]
        sns.histplot(times_ms, ax=ax, kde=len(times_ms) > 1, color="#3498db")

        ax.set_xlabel('Generation Time (ms)', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Complete Board Generation Time', fontsize=14, fontweight='bold')

        return self._save("generation_time.png")

    def plot_backtracks(self) -> str:
        """Scatter of backtracks against generation time."""
        fig, ax = plt.subplots(figsize=(10, 6))

        ax.scatter([r.backtracks for r in self.results],
                   [r.generate_seconds * 1000 for r in self.results],
                   color="#9b59b6", edgecolor='black', linewidth=0.5, alpha=0.7)

        ax.set_xlabel('Backtracks', fontsize=12)
        ax.set_ylabel('Generation Time (ms)', fontsize=12)
        ax.set_title('Backtracking Effort', fontsize=14, fontweight='bold')

        return self._save("backtracks.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Summary\n",
            "| Difficulty | Puzzles | Share | Avg Clues | Avg Time | Avg Backtracks |",
            "|------------|---------|-------|-----------|----------|----------------|"
        ]

        total = max(len(self.results), 1)
        for difficulty in Difficulty:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                lines.append(f"| {difficulty.label} | 0 | 0.0% | - | - | - |")
                continue

            avg_clues = np.mean([r.clues for r in diff_results])
            avg_time = np.mean([r.generate_seconds + r.carve_seconds for r in diff_results])
            avg_backtracks = np.mean([r.backtracks for r in diff_results])

            lines.append(
                f"| {difficulty.label} | {len(diff_results)} | "
                f"{len(diff_results) / total * 100:.1f}% | {avg_clues:.1f} | "
                f"{avg_time * 1000:.2f}ms | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "generation_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path

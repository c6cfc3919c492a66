"""Benchmark module for puzzle generation statistics."""

from .benchmark import GenerationBenchmark, GenerationRecord, save_to_folder
from .visualizer import Visualizer

__all__ = ["GenerationBenchmark", "GenerationRecord", "save_to_folder", "Visualizer"]

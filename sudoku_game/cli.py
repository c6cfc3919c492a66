"""Command-line interface for the Sudoku game core."""

import argparse
import json
import sys

from .core.board import SudokuBoard, SIZE
from .core.validator import CellStatus, check_answers
from .session import GameSession
from .benchmark import GenerationBenchmark, Visualizer, save_to_folder


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Answer Checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles with a fixed seed
  python -m sudoku_game.cli generate --count 5 --seed 42

  # Check a player's board against the solution
  python -m sudoku_game.cli check --puzzle "0030206..." --solution "4835..." --entries "4835..."

  # Measure generation over 200 runs
  python -m sudoku_game.cli benchmark --count 200 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the solution below each puzzle"
    )

    check_parser = subparsers.add_parser("check", help="Check a player's answers")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 for empty cells)"
    )
    check_parser.add_argument(
        "--solution", type=str, required=True,
        help="Solution string (81 chars)"
    )
    check_parser.add_argument(
        "--entries", "-e", type=str, required=True,
        help="Player's board (81 chars, 0 for cells left blank)"
    )

    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--count", "-n", type=int, default=100,
        help="Number of puzzles to generate (default: 100)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "check":
        cmd_check(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_generate(args):
    """Handle the generate command."""
    session = GameSession(seed=args.seed, show_progress=args.count > 1)

    all_puzzles = []
    boards = []

    for i in range(1, args.count + 1):
        result = session.new_puzzle()
        all_puzzles.append({
            "index": i,
            "difficulty": result.difficulty.value,
            "cells_removed": result.cells_removed,
            "clues": result.clues,
            "puzzle": result.puzzle.to_string(),
            "solution": session.solution.to_string(),
        })
        boards.append(result.puzzle)

        print(f"\n--- Puzzle {i}: {result.difficulty.label} ({result.clues} clues) ---")
        print(result.puzzle)
        if args.show_solution:
            print("Solution:")
            print(session.solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")
    else:
        save_to_folder(boards, "puzzles")
        print("\nPuzzles also saved individually in the 'puzzles/' directory")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_check(args):
    """Handle the check command."""
    try:
        puzzle = SudokuBoard.from_string(args.puzzle)
        solution = SudokuBoard.from_string(args.solution)
        player = SudokuBoard.from_string(args.entries)
    except ValueError as e:
        print(f"Error parsing board: {e}")
        sys.exit(1)

    entries = {
        (row, col): player.get(row, col)
        for row in range(SIZE)
        for col in range(SIZE)
        if puzzle.is_empty(row, col) and not player.is_empty(row, col)
    }

    result = check_answers(puzzle, solution, entries)

    for (row, col), status in sorted(result.statuses.items()):
        if status is CellStatus.INCORRECT:
            print(f"✗ ({row + 1}, {col + 1}): {entries[(row, col)]} is incorrect")

    print(result.message)
    if not result.solved:
        sys.exit(1)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {args.count}")
    print(f"Seed: {args.seed}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(count=args.count, seed=args.seed)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    removed = summary["cells_removed"]
    print(f"Valid: {summary['valid_rate']:.1f}%")
    print(f"Cells removed: {removed['min']}-{removed['max']} (mean {removed['mean']:.1f})")
    print(f"Avg generation time: {summary['avg_generate_seconds'] * 1000:.2f} ms")
    print(f"Avg backtracks: {summary['avg_backtracks']:.1f}")

    print("\nBy Difficulty:")
    print("-" * 50)
    for difficulty, stats in summary["results_by_difficulty"].items():
        print(f"  {difficulty.capitalize():<8} {stats['count']:>5} ({stats['share']:.1f}%)")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()

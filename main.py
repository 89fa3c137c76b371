"""
TSP Solver - Main Application
Simulated Annealing on a point file, best tour exported to CSV.
"""

import argparse
import sys
from typing import List, Optional, Sequence

import config as defaults
from benchmark import append_results, print_summary_row, run_repeated, summarize_runs
from config import AnnealingConfig
from data_generator import load_points
from simulated_annealing import SimulatedAnnealingSolver
from tour_exporter import export_tour_csv
from tsp_core import Point, tour_length


EXIT_READ_ERROR = 1


def print_summary(points: Sequence[Point], tour: List[int]):
    print("Best tour found: ")
    print(" ".join(str(pos + 1) for pos in tour))
    print(f"Best Distance: {tour_length(points, tour):.2f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TSP Solver - Simulated Annealing over a file of 2D points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: reads '380 tsp points.txt', writes best_tour.csv
  python main.py

  # Longer, reproducible run with a slower cooling schedule
  python main.py --input points.txt --iterations 200000 --cooling-rate 0.9995 --seed 7

  # 20 runs with consecutive seeds, statistics appended to sa_runs.csv
  python main.py --input points.txt --runs 20 --seed 1
        """
    )

    parser.add_argument('--input', type=str, default=defaults.INPUT_PATH,
                        help=f'Point file with "index x y" triples (default: {defaults.INPUT_PATH})')
    parser.add_argument('--output', type=str, default=defaults.OUTPUT_PATH,
                        help=f'CSV file for the best tour (default: {defaults.OUTPUT_PATH})')
    parser.add_argument('--iterations', type=int, default=defaults.ITERATION_BUDGET,
                        help=f'Iteration budget (default: {defaults.ITERATION_BUDGET})')
    parser.add_argument('--temperature', type=float, default=defaults.INITIAL_TEMPERATURE,
                        help=f'Initial temperature (default: {defaults.INITIAL_TEMPERATURE})')
    parser.add_argument('--cooling-rate', type=float, default=defaults.COOLING_RATE,
                        help=f'Geometric cooling factor in (0, 1) (default: {defaults.COOLING_RATE})')
    parser.add_argument('--report-every', type=int, default=defaults.REPORTING_INTERVAL,
                        help=f'Progress line every N iterations (default: {defaults.REPORTING_INTERVAL})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: OS entropy)')
    parser.add_argument('--patience', type=int, default=None,
                        help='Stop early after N iterations without a new best')
    parser.add_argument('--full-recompute', action='store_true',
                        help='Recompute the whole tour length for every move')
    parser.add_argument('--runs', type=int, default=None,
                        help='Run N times and report statistics instead of a single run')
    parser.add_argument('--results', type=str, default=defaults.RESULTS_FILE,
                        help=f'CSV the --runs statistics are appended to (default: {defaults.RESULTS_FILE})')
    parser.add_argument('--plot', action='store_true',
                        help='Plot the best tour and the convergence history')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress lines')

    return parser


def config_from_args(args) -> AnnealingConfig:
    return AnnealingConfig(
        iteration_budget=args.iterations,
        initial_temperature=args.temperature,
        cooling_rate=args.cooling_rate,
        reporting_interval=args.report_every,
        seed=args.seed,
        patience=args.patience,
        incremental=not args.full_recompute,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the TSP solver application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    if args.runs is not None and args.runs <= 0:
        parser.error(f"--runs must be > 0, got {args.runs}")

    # Reading the points from the file
    try:
        store = load_points(args.input)
    except (OSError, ValueError) as e:
        print(f"Error: Could not read points: {e}", file=sys.stderr)
        return EXIT_READ_ERROR

    if len(store) == 0:
        print(f"Error: No points read from {args.input}", file=sys.stderr)
        return EXIT_READ_ERROR

    print(f"Points read successfully ({len(store)} points)")
    points = store.points()

    if args.runs:
        results = run_repeated(points, cfg, args.runs, show_progress=not args.quiet)
        summary = summarize_runs(results, cfg, problem_name=args.input)
        print_summary_row(summary)
        append_results(summary, args.results)
        best = min(results, key=lambda r: r["distance"])
        best_tour, log = best["tour"], []
    else:
        solver = SimulatedAnnealingSolver(points, cfg)
        best_tour, log = solver.solve(verbose=not args.quiet)

    print_summary(points, best_tour)

    # A failed export does not invalidate the search result
    try:
        export_tour_csv(points, best_tour, args.output)
        print(f"Best tour written to {args.output}")
    except OSError as e:
        print(f"Error: Could not open file {args.output} for writing: {e}", file=sys.stderr)

    if args.plot:
        from visualization import TSPVisualizer

        visualizer = TSPVisualizer()
        visualizer.plot_tour(points, best_tour, title="Simulated Annealing Tour")
        if log:
            visualizer.plot_convergence(log)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Repeated-run statistics for the annealing solver.

Simulated annealing is stochastic, so a single run says little about the
parameters. This runs the solver several times with consecutive seeds and
reports Best / Average / Std. Deviation of the final distances. Rows are
appended to a CSV so that different parameter sets can be compared.
"""

import os
import time
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
from tqdm import tqdm

from config import AnnealingConfig
from simulated_annealing import SimulatedAnnealingSolver
from tsp_core import Point


def run_repeated(
    points: Sequence[Point],
    config: AnnealingConfig,
    runs: int,
    show_progress: bool = True,
) -> List[Dict]:
    """
    Run the solver `runs` times. Run k uses seed `config.seed + k`
    (or OS entropy for every run when no seed is configured).
    """
    if runs <= 0:
        raise ValueError(f"runs must be > 0, got {runs}")

    results = []
    for k in tqdm(range(runs), desc="SA", disable=not show_progress):
        seed = None if config.seed is None else config.seed + k
        solver = SimulatedAnnealingSolver(points, replace(config, seed=seed))

        start = time.time()
        tour, _ = solver.solve()
        elapsed = time.time() - start

        results.append({
            "run": k,
            "seed": seed,
            "distance": solver.best_distance,
            "time": elapsed,
            "tour": tour,
        })

    return results


def summarize_runs(results: List[Dict], config: AnnealingConfig, problem_name: str = "") -> Dict:
    distances = [r["distance"] for r in results]
    times = [r["time"] for r in results]

    return {
        "Problem": problem_name,
        "N_Runs": len(results),
        "Iterations": config.iteration_budget,
        "Initial_Temp": config.initial_temperature,
        "Cooling_Rate": config.cooling_rate,
        "Best_Dist": float(np.min(distances)),
        "Avg_Dist": float(np.mean(distances)),
        "Std_Dev": float(np.std(distances)),
        "Avg_Time_s": float(np.mean(times)),
    }


def print_summary_row(summary: Dict):
    header = f"| {'Best Dist':<12} | {'Avg. Dist':<12} | {'Std. Dev':<10} | {'Avg. Time (s)':<13} |"
    print(header)
    print("-" * len(header))
    print(
        f"| {summary['Best_Dist']:<12.2f} | {summary['Avg_Dist']:<12.2f} "
        f"| {summary['Std_Dev']:<10.2f} | {summary['Avg_Time_s']:<13.3f} |"
    )
    print("-" * len(header))


def append_results(summary: Dict, path: Optional[str]):
    """Append one summary row; the header is written only for a new file."""
    if not path:
        return
    file_exists = os.path.isfile(path)
    pd.DataFrame([summary]).to_csv(path, mode="a", header=not file_exists, index=False)

"""
Default parameters for the simulated annealing solver.
"""

import math
from dataclasses import dataclass
from typing import Optional


# ================================
# CONFIGURATION
# ================================
INPUT_PATH = "380 tsp points.txt"
OUTPUT_PATH = "best_tour.csv"

ITERATION_BUDGET = 10000
INITIAL_TEMPERATURE = 1000.0
COOLING_RATE = 0.80
REPORTING_INTERVAL = 1000

RESULTS_FILE = "sa_runs.csv"   # appended to by the repeated-run mode


@dataclass
class AnnealingConfig:
    """Search parameters for one annealing run."""

    iteration_budget: int = ITERATION_BUDGET
    initial_temperature: float = INITIAL_TEMPERATURE
    cooling_rate: float = COOLING_RATE
    reporting_interval: int = REPORTING_INTERVAL
    seed: Optional[int] = None
    # Stop after this many iterations without a new best; None runs the full budget
    patience: Optional[int] = None
    incremental: bool = True

    def validate(self) -> 'AnnealingConfig':
        if self.iteration_budget <= 0:
            raise ValueError(f"iteration_budget must be > 0, got {self.iteration_budget}")
        if not (math.isfinite(self.initial_temperature) and self.initial_temperature > 0):
            raise ValueError(f"initial_temperature must be finite and > 0, got {self.initial_temperature}")
        if not 0.0 < self.cooling_rate < 1.0:
            raise ValueError(f"cooling_rate must be in (0, 1), got {self.cooling_rate}")
        if self.reporting_interval <= 0:
            raise ValueError(f"reporting_interval must be > 0, got {self.reporting_interval}")
        if self.patience is not None and self.patience <= 0:
            raise ValueError(f"patience must be > 0, got {self.patience}")
        return self

"""
Simulated Annealing Solver with pairwise-swap moves + Convergence Logging
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from config import AnnealingConfig
from tsp_core import DistanceMatrix, Point, swap_delta


ProgressCallback = Callable[[int, float], None]


@dataclass
class OptimizerState:
    """Mutable search state, owned by a single solver for one run."""

    current_tour: List[int]
    current_distance: float
    best_tour: List[int]
    best_distance: float
    temperature: float
    iteration: int = 0


def acceptance_probability(delta: float, temperature: float) -> float:
    """Metropolis criterion: probability of moving to a neighbour `delta` longer."""
    if delta < 0:
        return 1.0
    if temperature <= 0:
        # temperature has underflowed to zero
        return 0.0
    return math.exp(-delta / temperature)


def format_progress(iteration: int, best_distance: float) -> str:
    return f"Iteration {iteration}- Best Distance: {best_distance:.2f}"


class SimulatedAnnealingSolver:
    """
    Simulated Annealing solver for TSP

    - random initial permutation
    - swap two distinct positions per iteration
    - Metropolis acceptance, geometric cooling every iteration
    - best-so-far tracking, fixed iteration budget (optional early stop)

    All randomness comes from `rng`, so a seeded `random.Random` makes a run
    reproducible.
    """

    def __init__(
        self,
        points: Sequence[Point],
        config: Optional[AnnealingConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        if len(points) == 0:
            raise ValueError("Cannot anneal an empty point set")

        self.points = points
        self.n_points = len(points)
        self.config = (config or AnnealingConfig()).validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        self.distance_matrix = DistanceMatrix(points)

        # SA state
        self.state: Optional[OptimizerState] = None
        self.history: List[Tuple[int, float]] = []
        self._since_improvement = 0

    # ---------------------------------------
    # Initialization
    # ---------------------------------------

    def initialize(self) -> OptimizerState:
        tour = list(range(self.n_points))
        self.rng.shuffle(tour)

        dist = self.distance_matrix.tour_length(tour)
        self.state = OptimizerState(
            current_tour=tour,
            current_distance=dist,
            best_tour=tour.copy(),
            best_distance=dist,
            temperature=self.config.initial_temperature,
        )
        self.history = []
        self._since_improvement = 0
        return self.state

    # ---------------------------------------
    # Annealing operators
    # ---------------------------------------

    def propose_move(self) -> Tuple[int, int]:
        """Pick two distinct positions uniformly at random."""
        i = self.rng.randrange(self.n_points)
        j = (i + 1 + self.rng.randrange(self.n_points - 1)) % self.n_points
        return i, j

    def accept(self, delta: float, temperature: float) -> bool:
        # Improvements never consume a random draw
        if delta < 0:
            return True
        return self.rng.random() < acceptance_probability(delta, temperature)

    def temperature_at(self, k: int) -> float:
        """Temperature after k iterations."""
        return self.config.initial_temperature * self.config.cooling_rate ** k

    # ---------------------------------------
    # Single iteration
    # ---------------------------------------

    def step(self) -> bool:
        """
        Run one iteration on the current state.

        Returns whether the proposed swap was accepted.
        """
        if self.state is None:
            self.initialize()

        state = self.state
        accepted = False
        improved = False

        if self.n_points >= 2:
            tour = state.current_tour
            i, j = self.propose_move()

            if self.config.incremental:
                new_distance = state.current_distance + swap_delta(
                    self.distance_matrix, tour, i, j
                )
                tour[i], tour[j] = tour[j], tour[i]
            else:
                tour[i], tour[j] = tour[j], tour[i]
                new_distance = self.distance_matrix.tour_length(tour)

            delta = new_distance - state.current_distance

            if self.accept(delta, state.temperature):
                accepted = True
                state.current_distance = new_distance

                if new_distance < state.best_distance:
                    # resync the running sum so a recorded best is the true tour length
                    state.current_distance = self.distance_matrix.tour_length(tour)
                    if state.current_distance < state.best_distance:
                        state.best_tour = tour.copy()
                        state.best_distance = state.current_distance
                        improved = True
            else:
                # undo the swap
                tour[i], tour[j] = tour[j], tour[i]

        self._since_improvement = 0 if improved else self._since_improvement + 1

        # cool on every iteration, accepted or not
        state.temperature *= self.config.cooling_rate
        state.iteration += 1
        return accepted

    # ---------------------------------------
    # FIXED-BUDGET SOLVE FUNCTION
    # ---------------------------------------

    def solve(
        self,
        progress: Optional[ProgressCallback] = None,
        verbose: bool = False,
    ) -> Tuple[List[int], List[Tuple[int, float]]]:
        """
        Returns:
            best_tour (positions into the point sequence)
            log = [(iteration, best_distance)] at the reporting interval
        """
        self.initialize()

        if self.n_points < 2:
            return self.state.best_tour.copy(), self.history

        interval = self.config.reporting_interval
        patience = self.config.patience

        for it in range(self.config.iteration_budget):
            self.step()

            if it % interval == 0:
                best_d = self.state.best_distance
                self.history.append((it, best_d))
                if progress:
                    progress(it, best_d)
                if verbose:
                    print(format_progress(it, best_d))

            if patience is not None and self._since_improvement >= patience:
                if verbose:
                    print(f"[SA] No improvement for {patience} iterations, stopping at {it + 1}")
                break

        return self.state.best_tour.copy(), self.history

    @property
    def best_distance(self) -> float:
        return self.state.best_distance if self.state else float("inf")

    def get_best_tour(self):
        return self.state.best_tour.copy() if self.state else None

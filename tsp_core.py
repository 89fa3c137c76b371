"""
TSP Solver - Core Module
Contains the point store and the distance model used by the annealing solver.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """A labeled 2D point. The label is kept exactly as it appears in the input."""

    index: int
    x: float
    y: float

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return distance(self, other)

    def __repr__(self):
        return f"Point({self.index}, {self.x:.2f}, {self.y:.2f})"


class PointStore:
    """Immutable, ordered collection of the points read from input."""

    def __init__(self, points: Sequence[Point] = ()):
        self._points: Tuple[Point, ...] = tuple(points)

    def points(self) -> Tuple[Point, ...]:
        return self._points

    def __len__(self):
        return len(self._points)

    def __getitem__(self, position):
        return self._points[position]

    def __iter__(self):
        return iter(self._points)

    def __repr__(self):
        return f"PointStore(points={len(self._points)})"


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return float(np.sqrt(dx * dx + dy * dy))


def tour_length(points: Sequence[Point], tour: Sequence[int]) -> float:
    """
    Total length of the closed tour.

    `tour` holds positions into `points`; the closing edge from the last
    position back to the first is included.
    """
    if len(tour) < 2:
        return 0.0

    total = 0.0
    for i in range(len(tour) - 1):
        total += distance(points[tour[i]], points[tour[i + 1]])

    # Return to the starting point
    total += distance(points[tour[-1]], points[tour[0]])
    return total


def is_permutation(tour: Sequence[int], n: int) -> bool:
    """True when `tour` contains every position 0..n-1 exactly once."""
    return len(tour) == n and sorted(tour) == list(range(n))


class DistanceMatrix:
    """Precomputed distance matrix for efficient distance lookups."""

    def __init__(self, points: Sequence[Point]):
        self.points = points
        self.n = len(points)

        coords = np.array([[p.x, p.y] for p in points], dtype=float).reshape(self.n, 2)
        diff = coords[:, None, :] - coords[None, :, :]
        self.matrix = np.sqrt((diff ** 2).sum(axis=-1))

    def get(self, i: int, j: int) -> float:
        """Get distance by point positions."""
        return float(self.matrix[i, j])

    def tour_length(self, tour: Sequence[int]) -> float:
        if len(tour) < 2:
            return 0.0
        order = np.asarray(tour)
        return float(self.matrix[order, np.roll(order, -1)].sum())


def swap_delta(matrix: DistanceMatrix, tour: List[int], i: int, j: int) -> float:
    """
    Change in tour length if positions i and j were swapped.

    Only the edges touching i, j and their cyclic neighbours are looked at,
    so this is O(1) regardless of tour size.
    """
    n = len(tour)
    if i == j or n < 3:
        # With 2 points every order has the same length
        return 0.0

    d = matrix.matrix

    # Edges incident to either position, as (left position, right position)
    edges = {((i - 1) % n, i), (i, (i + 1) % n), ((j - 1) % n, j), (j, (j + 1) % n)}

    def position_after_swap(p):
        if p == i:
            return j
        if p == j:
            return i
        return p

    before = 0.0
    after = 0.0
    for a, b in edges:
        before += d[tour[a], tour[b]]
        after += d[tour[position_after_swap(a)], tour[position_after_swap(b)]]

    return float(after - before)

import math
import os
import random
from typing import Optional, Sequence

from tsp_core import Point, PointStore


def load_points(path) -> PointStore:
    """
    Point file loader.
    Format:
        - whitespace separated triples: index x y
        - line breaks anywhere (one record per line is typical, not required)
    Handles:
        - blank lines
        - an incomplete trailing record (ignored with a warning)
    Raises:
        - FileNotFoundError when the file does not exist
        - ValueError when a token of a complete record is not a finite number
    """

    if not os.path.exists(path):
        raise FileNotFoundError(f"Point file not found: {path}")

    with open(path, "r") as f:
        tokens = f.read().split()

    n_complete = len(tokens) // 3
    leftover = len(tokens) - n_complete * 3

    points = []
    for r in range(n_complete):
        index, x, y = tokens[3 * r: 3 * r + 3]
        try:
            point = Point(int(index), float(x), float(y))
        except ValueError:
            point = None

        # float() also takes "nan" and "inf"
        if point is None or not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise ValueError(
                f"Malformed record #{r + 1} in {path}: {index!r} {x!r} {y!r}"
            )
        points.append(point)

    if leftover:
        print(f"Warning: ignoring {leftover} trailing token(s) in {path}")

    return PointStore(points)


def write_points(path, points: Sequence[Point]):
    """Write points in the loader's `index x y` format."""
    with open(path, "w") as f:
        for p in points:
            f.write(f"{p.index} {p.x!r} {p.y!r}\n")


def generate_random_points(
    n: int,
    width: float = 100,
    height: float = 100,
    rng: Optional[random.Random] = None,
) -> PointStore:
    """
    Generate random points for testing.

    Args:
        n: Number of points to generate
        width: Width of the area
        height: Height of the area
        rng: Random source (module-level random if omitted)

    Returns:
        PointStore of points labeled 1..n
    """
    rng = rng or random
    points = []
    for i in range(n):
        x = rng.uniform(0, width)
        y = rng.uniform(0, height)
        points.append(Point(i + 1, x, y))
    return PointStore(points)

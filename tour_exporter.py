"""
Tour export - writes the best tour to CSV and reads it back.
"""

import pandas as pd
from typing import Sequence

from tsp_core import Point


COLUMNS = ["Index", "X", "Y"]


def tour_to_frame(points: Sequence[Point], tour: Sequence[int]) -> pd.DataFrame:
    """One row per tour position, plus a closing row back to the first point."""
    rows = [(points[pos].index, points[pos].x, points[pos].y) for pos in tour]

    # Adding the return to the first point
    if rows:
        rows.append(rows[0])

    return pd.DataFrame(rows, columns=COLUMNS)


def export_tour_csv(points: Sequence[Point], tour: Sequence[int], path):
    """
    Write `tour` to `path` as `Index,X,Y` rows in visiting order.

    Raises OSError when the destination cannot be opened for writing.
    """
    df = tour_to_frame(points, tour)
    with open(path, "w", newline="") as f:
        df.to_csv(f, index=False)


def read_tour_csv(path) -> pd.DataFrame:
    """Read a file written by `export_tour_csv`, closing row included."""
    return pd.read_csv(path)

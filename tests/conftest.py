import random

import matplotlib
import pytest

matplotlib.use("Agg")

from data_generator import generate_random_points
from tsp_core import Point, PointStore


class ScriptedRandom:
    """Random source that replays fixed draws; shuffle leaves the order alone."""

    def __init__(self, moves=(), draws=()):
        self.moves = list(moves)
        self.draws = list(draws)

    def randrange(self, n):
        value = self.moves.pop(0)
        assert 0 <= value < n
        return value

    def random(self):
        return self.draws.pop(0)

    def shuffle(self, seq):
        pass


@pytest.fixture
def unit_square():
    return PointStore([
        Point(1, 0.0, 0.0),
        Point(2, 1.0, 0.0),
        Point(3, 1.0, 1.0),
        Point(4, 0.0, 1.0),
    ])


@pytest.fixture
def random_points():
    return generate_random_points(25, rng=random.Random(1234))


@pytest.fixture
def scripted_random():
    return ScriptedRandom

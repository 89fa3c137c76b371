import pytest

import config
from config import AnnealingConfig


def test_defaults():
    cfg = AnnealingConfig()
    assert cfg.iteration_budget == config.ITERATION_BUDGET == 10000
    assert cfg.initial_temperature == 1000.0
    assert cfg.cooling_rate == 0.80
    assert cfg.reporting_interval == 1000
    assert cfg.patience is None
    assert cfg.incremental
    assert cfg.validate() is cfg


@pytest.mark.parametrize("kwargs", [
    {"iteration_budget": 0},
    {"initial_temperature": 0.0},
    {"initial_temperature": -1.0},
    {"initial_temperature": float("nan")},
    {"initial_temperature": float("inf")},
    {"cooling_rate": float("nan")},
    {"cooling_rate": 0.0},
    {"cooling_rate": 1.0},
    {"reporting_interval": 0},
    {"patience": 0},
])
def test_out_of_range_values_rejected(kwargs):
    with pytest.raises(ValueError):
        AnnealingConfig(**kwargs).validate()

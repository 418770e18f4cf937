"""Shared fixtures for the simulator test suite."""

import numpy as np
import pytest

from gbmvar.model import SimulationParameters
from gbmvar.simulation.path_generator import PathGenerator
from gbmvar.simulation.statistics import aggregate


@pytest.fixture
def default_params():
    """Parameters of the reference scenario."""
    return SimulationParameters(
        initial_price=100.0,
        annual_volatility=20.0,
        horizon_days=30,
        iteration_count=1000,
    )


@pytest.fixture
def sample_paths():
    """Small seeded path ensemble."""
    generator = PathGenerator(
        initial_price=100.0,
        annual_volatility=30.0,
        horizon_days=10,
        iteration_count=200,
        seed=42,
    )
    return generator.generate_paths()


@pytest.fixture
def sample_result(sample_paths):
    """Aggregated result of the sample ensemble."""
    return aggregate(sample_paths, 100.0)


@pytest.fixture
def hand_checked_paths():
    """Twenty two-day paths starting at 10 with final prices 1..20 shuffled."""
    rng = np.random.default_rng(0)
    terminal = rng.permutation(np.arange(1.0, 21.0))
    return np.column_stack([np.full(20, 10.0), terminal])

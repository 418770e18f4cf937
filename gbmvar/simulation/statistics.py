"""
Summary statistics over a completed path ensemble.

Percentiles use a nearest-rank rule: sort ascending and take the element at
0-based index ``floor(n * fraction)``. There is no interpolation between
neighbouring ranks, so results are reproducible and easy to check by hand,
but they differ slightly from ``np.percentile``'s default linear method.
"""

import math
from typing import Tuple

import numpy as np

from gbmvar.exceptions import ComputationError
from gbmvar.model import SimulationResult

LOWER_PERCENTILE = 0.05
UPPER_PERCENTILE = 0.95
VAR_QUANTILE = 0.05  # 95% confidence


def nearest_rank(sorted_values: np.ndarray, fraction: float) -> np.ndarray:
    """Pick the nearest-rank element along axis 0 of an ascending array.

    Parameters
    ----------
    sorted_values : np.ndarray
        Values sorted ascending along axis 0
    fraction : float
        Quantile in [0, 1)

    Returns
    -------
    np.ndarray
        Element (1-D input) or row (2-D input) at index floor(n * fraction),
        copied so it does not keep the sorted array alive
    """
    n = sorted_values.shape[0]
    index = min(math.floor(n * fraction), n - 1)
    return sorted_values[index].copy()


def mean_path(paths: np.ndarray) -> np.ndarray:
    """Cross-sectional mean of the ensemble at each day."""
    return paths.mean(axis=0)


def percentile_bands(paths: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """5th and 95th nearest-rank percentiles at each day.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Lower and upper band, each of length horizon_days + 1
    """
    ordered = np.sort(paths, axis=0)
    return (
        nearest_rank(ordered, LOWER_PERCENTILE),
        nearest_rank(ordered, UPPER_PERCENTILE),
    )


def terminal_statistics(paths: np.ndarray) -> Tuple[float, float, float]:
    """Mean, minimum and maximum of the final prices."""
    terminal = paths[:, -1]
    return float(terminal.mean()), float(terminal.min()), float(terminal.max())


def value_at_risk(paths: np.ndarray, initial_price: float) -> Tuple[float, float]:
    """Historical-style VaR of the simulated terminal returns.

    Parameters
    ----------
    paths : np.ndarray
        Completed path ensemble
    initial_price : float
        Price the returns are measured against

    Returns
    -------
    Tuple[float, float]
        VaR amount in currency units (non-negative) and the underlying
        return quantile in percent (sign preserved, negative for a loss)
    """
    returns = (paths[:, -1] - initial_price) / initial_price
    quantile = float(nearest_rank(np.sort(returns), VAR_QUANTILE))
    return initial_price * abs(quantile), quantile * 100


def aggregate(paths: np.ndarray, initial_price: float) -> SimulationResult:
    """Compute every summary statistic of a path ensemble.

    Parameters
    ----------
    paths : np.ndarray
        Prices of shape (iteration_count, horizon_days + 1)
    initial_price : float
        Starting price shared by all paths

    Returns
    -------
    SimulationResult
        Result holding the paths unchanged plus all statistics

    Raises
    ------
    ComputationError
        If the ensemble is empty or not two-dimensional
    """
    if paths.ndim != 2 or paths.shape[0] == 0 or paths.shape[1] == 0:
        raise ComputationError(f"Cannot aggregate path ensemble of shape {paths.shape}")

    p5, p95 = percentile_bands(paths)
    terminal_mean, terminal_min, terminal_max = terminal_statistics(paths)
    var_amount, var_percent = value_at_risk(paths, initial_price)

    return SimulationResult(
        paths=paths,
        mean_path=mean_path(paths),
        p5_path=p5,
        p95_path=p95,
        terminal_mean=terminal_mean,
        terminal_min=terminal_min,
        terminal_max=terminal_max,
        var_95_amount=var_amount,
        var_95_percent=var_percent,
    )

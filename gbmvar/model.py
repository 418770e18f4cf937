"""
Data model for the GBM Value-at-Risk simulator.

This module defines the immutable input parameters of a simulation and the
result produced from a completed path ensemble.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

import numpy as np
import pandas as pd

from gbmvar.exceptions import ValidationError
from gbmvar.validation import (
    BYTES_PER_PRICE,
    HORIZON_REASON,
    ITERATIONS_REASON,
    PRICE_REASON,
    VOLATILITY_REASON,
)


def _read_number(body: Mapping[str, Any], field: str, reason: str) -> float:
    value = body.get(field)
    if value is None or isinstance(value, bool):
        raise ValidationError(reason)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(reason) from None


def _read_integer(body: Mapping[str, Any], field: str, reason: str) -> int:
    number = _read_number(body, field, reason)
    if not math.isfinite(number) or not number.is_integer():
        raise ValidationError(reason)
    return int(number)


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs of a single simulation call.

    Parameters
    ----------
    initial_price : float
        Price every path starts from
    annual_volatility : float
        Annualized volatility in percent (e.g. 20 for 20%)
    horizon_days : int
        Number of trading days to simulate
    iteration_count : int
        Number of independent paths
    """

    initial_price: float
    annual_volatility: float
    horizon_days: int
    iteration_count: int

    @classmethod
    def from_mapping(cls, body: Mapping[str, Any]) -> "SimulationParameters":
        """
        Build parameters from a request body.

        Fields are read in validation order, so a body with several bad
        fields is rejected with the reason of the first one.

        Parameters
        ----------
        body : Mapping[str, Any]
            Request fields keyed by parameter name

        Returns
        -------
        SimulationParameters
            Parsed parameters (not yet range-checked)

        Raises
        ------
        ValidationError
            If a field is missing, non-numeric, or a count is fractional
        """
        return cls(
            initial_price=_read_number(body, "initial_price", PRICE_REASON),
            annual_volatility=_read_number(body, "annual_volatility", VOLATILITY_REASON),
            horizon_days=_read_integer(body, "horizon_days", HORIZON_REASON),
            iteration_count=_read_integer(body, "iteration_count", ITERATIONS_REASON),
        )

    @property
    def memory_footprint(self) -> int:
        """Approximate size in bytes of the path matrix."""
        return self.iteration_count * (self.horizon_days + 1) * BYTES_PER_PRICE


@dataclass(frozen=True, eq=False)
class SimulationResult:
    """
    Outcome of a completed simulation.

    Attributes
    ----------
    paths : np.ndarray
        Simulated prices, shape (iteration_count, horizon_days + 1)
    mean_path : np.ndarray
        Cross-sectional mean at each day
    p5_path : np.ndarray
        5th percentile (nearest rank) at each day
    p95_path : np.ndarray
        95th percentile (nearest rank) at each day
    terminal_mean : float
        Mean of the final prices
    terminal_min : float
        Lowest final price
    terminal_max : float
        Highest final price
    var_95_amount : float
        95% Value-at-Risk in currency units (non-negative)
    var_95_percent : float
        Return quantile behind the VaR, in percent (sign preserved)
    """

    paths: np.ndarray
    mean_path: np.ndarray
    p5_path: np.ndarray
    p95_path: np.ndarray
    terminal_mean: float
    terminal_min: float
    terminal_max: float
    var_95_amount: float
    var_95_percent: float

    def __post_init__(self):
        # Read-only views; the arrays handed in stay writeable for their owner
        for name in ("paths", "mean_path", "p5_path", "p95_path"):
            view = getattr(self, name).view()
            view.setflags(write=False)
            object.__setattr__(self, name, view)

    @property
    def iteration_count(self) -> int:
        return self.paths.shape[0]

    @property
    def horizon_days(self) -> int:
        return self.paths.shape[1] - 1

    def to_dict(self, include_paths: bool = True) -> Dict[str, Any]:
        """
        Serialize to the response payload.

        Parameters
        ----------
        include_paths : bool, default=True
            Whether to include the full path matrix under 'simulations'

        Returns
        -------
        dict
            JSON-ready payload made of plain floats and lists
        """
        payload: Dict[str, Any] = {}
        if include_paths:
            payload["simulations"] = self.paths.tolist()
        payload.update({
            "average": self.mean_path.tolist(),
            "percentile_5": self.p5_path.tolist(),
            "percentile_95": self.p95_path.tolist(),
            "final_price_average": float(self.terminal_mean),
            "final_price_minimum": float(self.terminal_min),
            "final_price_maximum": float(self.terminal_max),
            "var_95": float(self.var_95_amount),
            "var_percentage": float(self.var_95_percent),
        })
        return payload

    def summary_frame(self) -> pd.DataFrame:
        """
        Per-day summary of the ensemble.

        Returns
        -------
        pd.DataFrame
            Columns 'average', 'percentile_5', 'percentile_95' indexed by day
        """
        return pd.DataFrame(
            {
                "average": self.mean_path,
                "percentile_5": self.p5_path,
                "percentile_95": self.p95_path,
            },
            index=pd.RangeIndex(len(self.mean_path), name="day"),
        )

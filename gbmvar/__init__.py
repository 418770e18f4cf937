"""GBM Value-at-Risk Simulator.

A Python package for estimating the future price distribution of an asset
with a Geometric Brownian Motion Monte Carlo simulation, summarised as mean
path, percentile bands, terminal price statistics and 95% Value-at-Risk.
"""

from gbmvar.engine import SimulationEngine, SimulationOutcome, simulate
from gbmvar.exceptions import ComputationError, SimulationError, ValidationError
from gbmvar.model import SimulationParameters, SimulationResult
from gbmvar.simulation import BoxMullerGenerator, PathGenerator, aggregate
from gbmvar.validation import check_parameters, validate_parameters

__version__ = "1.0.0"
__all__ = [
    "SimulationEngine",
    "SimulationOutcome",
    "simulate",
    "SimulationError",
    "ValidationError",
    "ComputationError",
    "SimulationParameters",
    "SimulationResult",
    "BoxMullerGenerator",
    "PathGenerator",
    "aggregate",
    "check_parameters",
    "validate_parameters",
]

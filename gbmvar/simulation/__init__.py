"""Simulation kernel: normal variates, GBM paths and ensemble statistics."""

from gbmvar.simulation.random_variates import BoxMullerGenerator
from gbmvar.simulation.path_generator import PathGenerator
from gbmvar.simulation.statistics import aggregate

__all__ = ["BoxMullerGenerator", "PathGenerator", "aggregate"]

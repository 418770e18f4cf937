"""
Simulation engine: validate, generate paths, aggregate.

The engine is the boundary a transport layer talks to. It never raises for
bad input or a failed computation; it returns a ``SimulationOutcome`` whose
``kind`` tells the caller which of the two failure shapes occurred.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from gbmvar.exceptions import ValidationError
from gbmvar.model import SimulationParameters, SimulationResult
from gbmvar.simulation.path_generator import PathGenerator
from gbmvar.simulation.random_variates import BoxMullerGenerator
from gbmvar.simulation.statistics import aggregate
from gbmvar.validation import validate_parameters

OK = "ok"
VALIDATION_ERROR = "validation_error"
COMPUTATION_ERROR = "computation_error"

COMPUTATION_ERROR_MESSAGE = "Error processing the simulation"

_STATUS_CODES = {
    OK: 200,
    VALIDATION_ERROR: 400,
    COMPUTATION_ERROR: 500,
}


@dataclass(frozen=True)
class SimulationOutcome:
    """Either a complete result or an error message, never both."""

    result: Optional[SimulationResult] = None
    error: Optional[str] = None
    kind: str = OK

    @classmethod
    def success(cls, result: SimulationResult) -> "SimulationOutcome":
        return cls(result=result)

    @classmethod
    def invalid(cls, reason: str) -> "SimulationOutcome":
        return cls(error=reason, kind=VALIDATION_ERROR)

    @classmethod
    def failed(cls, message: str = COMPUTATION_ERROR_MESSAGE) -> "SimulationOutcome":
        return cls(error=message, kind=COMPUTATION_ERROR)

    @property
    def ok(self) -> bool:
        return self.kind == OK

    @property
    def status_code(self) -> int:
        """HTTP-style status: 200 success, 400 validation, 500 computation."""
        return _STATUS_CODES[self.kind]

    def to_dict(self, include_paths: bool = True) -> Dict[str, Any]:
        """Success payload, or ``{"error": message}`` for a failure."""
        if self.result is not None:
            return self.result.to_dict(include_paths=include_paths)
        return {"error": self.error}


class SimulationEngine:
    """
    Runs GBM Monte Carlo simulations.

    Every call is independent: a fresh variate source is built per call and
    nothing is kept between calls.

    Parameters
    ----------
    seed : int, optional
        Seed for the variate source. When set, identical parameters give
        identical results on every call.
    logger : logging.Logger, optional
        Logger receiving entry, exit and failure records
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.seed = seed
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def simulate(self, params: SimulationParameters) -> SimulationOutcome:
        """
        Validate the parameters and run the simulation.

        Parameters
        ----------
        params : SimulationParameters
            Simulation inputs

        Returns
        -------
        SimulationOutcome
            Complete result, validation error, or computation error
        """
        self.logger.info(
            "Simulation requested: price=%s volatility=%s%% days=%s iterations=%s",
            params.initial_price,
            params.annual_volatility,
            params.horizon_days,
            params.iteration_count,
        )

        try:
            validate_parameters(params)
        except ValidationError as e:
            self.logger.warning("Validation failed: %s", e.reason)
            return SimulationOutcome.invalid(e.reason)

        try:
            generator = PathGenerator(
                initial_price=params.initial_price,
                annual_volatility=params.annual_volatility,
                horizon_days=params.horizon_days,
                iteration_count=params.iteration_count,
                variates=BoxMullerGenerator(seed=self.seed),
            )
            paths = generator.generate_paths()
            result = aggregate(paths, params.initial_price)
        except Exception:
            self.logger.exception("Simulation failed")
            return SimulationOutcome.failed()

        self.logger.info(
            "Simulation completed: terminal_mean=%.4f var_95=%.4f (%.2f%%)",
            result.terminal_mean,
            result.var_95_amount,
            result.var_95_percent,
        )
        return SimulationOutcome.success(result)

    def handle_request(self, body: Mapping[str, Any]) -> SimulationOutcome:
        """
        Parse a request body and run the simulation.

        Parameters
        ----------
        body : Mapping[str, Any]
            Request with 'initial_price', 'annual_volatility',
            'horizon_days' and 'iteration_count'

        Returns
        -------
        SimulationOutcome
            Outcome of the simulation, or a validation error if the body
            cannot be parsed
        """
        try:
            params = SimulationParameters.from_mapping(body)
        except ValidationError as e:
            self.logger.warning("Rejected request body: %s", e.reason)
            return SimulationOutcome.invalid(e.reason)
        return self.simulate(params)


def simulate(
    initial_price: float,
    annual_volatility: float,
    horizon_days: int,
    iteration_count: int,
    seed: Optional[int] = None,
) -> SimulationOutcome:
    """Run one simulation with a throwaway engine."""
    params = SimulationParameters(
        initial_price=initial_price,
        annual_volatility=annual_volatility,
        horizon_days=horizon_days,
        iteration_count=iteration_count,
    )
    return SimulationEngine(seed=seed).simulate(params)

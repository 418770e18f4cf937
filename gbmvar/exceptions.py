"""Error types raised by the simulation engine."""


class SimulationError(Exception):
    """Base class for simulation failures."""


class ValidationError(SimulationError, ValueError):
    """Input parameters were rejected before any computation started.

    Parameters
    ----------
    reason : str
        Human-readable explanation, safe to show to the caller
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ComputationError(SimulationError, RuntimeError):
    """The simulation reached an invalid internal state."""

"""Range checks applied to simulation parameters before any computation."""

import numbers
from typing import Optional

from gbmvar.exceptions import ValidationError

MIN_VOLATILITY = 0.0
MAX_VOLATILITY = 200.0
MIN_HORIZON_DAYS = 1
MAX_HORIZON_DAYS = 365
MIN_ITERATIONS = 100
MAX_ITERATIONS = 10000

BYTES_PER_PRICE = 8
MEMORY_BUDGET_BYTES = 50 * 1024 * 1024  # 50 MiB

PRICE_REASON = "Initial price must be greater than 0"
VOLATILITY_REASON = (
    f"Annual volatility out of range: must be between "
    f"{MIN_VOLATILITY:g} and {MAX_VOLATILITY:g}%"
)
HORIZON_REASON = (
    f"Horizon out of range: must be between "
    f"{MIN_HORIZON_DAYS} and {MAX_HORIZON_DAYS} days"
)
ITERATIONS_REASON = (
    f"Iteration count out of range: must be between "
    f"{MIN_ITERATIONS} and {MAX_ITERATIONS}"
)
MEMORY_REASON = "Parameter combination exceeds the memory budget"


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_parameters(params, memory_budget: int = MEMORY_BUDGET_BYTES) -> Optional[str]:
    """Return the first rejection reason for ``params``, or None if valid.

    Non-numeric values fail the check of their field, as do fractional day
    and iteration counts. Comparisons are written so that NaN fails every
    range check.
    """
    if not _is_real(params.initial_price) or not params.initial_price > 0:
        return PRICE_REASON
    if (not _is_real(params.annual_volatility)
            or not MIN_VOLATILITY <= params.annual_volatility <= MAX_VOLATILITY):
        return VOLATILITY_REASON
    if (not _is_integer(params.horizon_days)
            or not MIN_HORIZON_DAYS <= params.horizon_days <= MAX_HORIZON_DAYS):
        return HORIZON_REASON
    if (not _is_integer(params.iteration_count)
            or not MIN_ITERATIONS <= params.iteration_count <= MAX_ITERATIONS):
        return ITERATIONS_REASON

    footprint = params.iteration_count * (params.horizon_days + 1) * BYTES_PER_PRICE
    if footprint > memory_budget:
        return MEMORY_REASON
    return None


def validate_parameters(params, memory_budget: int = MEMORY_BUDGET_BYTES) -> None:
    """Validate simulation parameters.

    Parameters
    ----------
    params : SimulationParameters
        Parameters to check
    memory_budget : int, default=MEMORY_BUDGET_BYTES
        Upper bound in bytes for the path matrix

    Raises
    ------
    ValidationError
        With the reason of the first failed check
    """
    reason = check_parameters(params, memory_budget=memory_budget)
    if reason is not None:
        raise ValidationError(reason)

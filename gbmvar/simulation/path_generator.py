"""Monte Carlo path generator using Geometric Brownian Motion."""

from typing import Optional

import numpy as np

from gbmvar.exceptions import ComputationError
from gbmvar.simulation.random_variates import BoxMullerGenerator

TRADING_DAYS_PER_YEAR = 252
RISK_FREE_RATE = 0.0


class PathGenerator:
    """Generates an ensemble of GBM price paths.

    All paths start from the same price and evolve with zero drift
    (the risk-free rate is fixed at 0) and constant volatility, one trading
    day per step.

    Parameters
    ----------
    initial_price : float
        Price from which all paths start
    annual_volatility : float
        Annualized volatility in percent (e.g. 20 for 20%)
    horizon_days : int
        Number of trading days to simulate
    iteration_count : int
        Number of independent paths to generate
    variates : BoxMullerGenerator, optional
        Source of standard-normal draws
    seed : int, optional
        Random seed used when no variate source is given
    """

    def __init__(
        self,
        initial_price: float,
        annual_volatility: float,
        horizon_days: int,
        iteration_count: int,
        variates: Optional[BoxMullerGenerator] = None,
        seed: Optional[int] = None,
    ):
        self.initial_price = initial_price
        self.annual_volatility = annual_volatility
        self.horizon_days = horizon_days
        self.iteration_count = iteration_count
        self.variates = variates if variates is not None else BoxMullerGenerator(seed=seed)

        # Time step: one trading day in years
        self.dt = 1.0 / TRADING_DAYS_PER_YEAR
        self.daily_vol = annual_volatility / 100 / np.sqrt(TRADING_DAYS_PER_YEAR)

    def generate_paths(self) -> np.ndarray:
        """Generate the full path ensemble.

        Returns
        -------
        np.ndarray
            Prices of shape (iteration_count, horizon_days + 1); column 0
            holds the initial price for every path

        Raises
        ------
        ComputationError
            If the counts are not positive or a price is not finite and positive
        """
        if self.iteration_count <= 0 or self.horizon_days <= 0:
            raise ComputationError(
                f"Iteration count and horizon must be positive, got "
                f"{self.iteration_count} and {self.horizon_days}"
            )

        paths = np.empty((self.iteration_count, self.horizon_days + 1))
        paths[:, 0] = self.initial_price

        # S(t) = S(t-1) * exp((r - 0.5*sigma^2)*dt + sigma*sqrt(dt)*Z)
        drift_term = (RISK_FREE_RATE - 0.5 * self.daily_vol ** 2) * self.dt
        diffusion_scale = self.daily_vol * np.sqrt(self.dt)
        for t in range(1, self.horizon_days + 1):
            z = self.variates.standard_normal_batch(self.iteration_count)
            paths[:, t] = paths[:, t - 1] * np.exp(drift_term + diffusion_scale * z)

        if not np.all(np.isfinite(paths)) or not np.all(paths > 0):
            raise ComputationError("Simulation produced non-finite or non-positive prices")

        return paths

"""Standard-normal variates from the Box-Muller transform."""

from typing import Optional

import numpy as np


class BoxMullerGenerator:
    """Generates standard-normal draws from pairs of uniform draws.

    Each normal value consumes two fresh uniforms ``u1, u2`` from the open
    interval (0, 1) and is computed as
    ``sqrt(-2 * ln(u1)) * cos(2 * pi * u2)``. The companion sine variate is
    never cached, so every call is independent of the previous one.

    Parameters
    ----------
    seed : int, optional
        Random seed for the underlying uniform source
    rng : np.random.Generator, optional
        Uniform source to use instead of a freshly seeded one
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self) -> float:
        """Draw one uniform value from (0, 1), redrawing exact zeros.

        Returns
        -------
        float
            Uniform value strictly greater than 0
        """
        u = 0.0
        while u == 0.0:
            u = float(self.rng.random())
        return u

    def uniform_batch(self, n: int) -> np.ndarray:
        """Draw ``n`` uniform values from (0, 1), redrawing exact zeros."""
        u = self.rng.random(n)
        zeros = u == 0.0
        while zeros.any():
            u[zeros] = self.rng.random(int(zeros.sum()))
            zeros = u == 0.0
        return u

    def standard_normal(self) -> float:
        """Draw one standard-normal value.

        Returns
        -------
        float
            Standard-normal variate
        """
        u1 = self.uniform()
        u2 = self.uniform()
        return float(np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2))

    def standard_normal_batch(self, n: int) -> np.ndarray:
        """Draw ``n`` independent standard-normal values.

        Parameters
        ----------
        n : int
            Number of values to draw

        Returns
        -------
        np.ndarray
            Array of shape (n,)

        Raises
        ------
        ValueError
            If n is negative
        """
        if n < 0:
            raise ValueError(f"Batch size must be non-negative, got {n}")

        # All u1 values are drawn before the u2 values
        u1 = self.uniform_batch(n)
        u2 = self.uniform_batch(n)
        return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

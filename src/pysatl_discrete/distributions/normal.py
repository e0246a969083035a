"""
Normal distribution used by the approximate sampling strategies.

Density, distribution and quantile functions are evaluated through the error
function and its inverse from :mod:`scipy.special`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

if TYPE_CHECKING:
    from pysatl_discrete.rng import RandomSource
    from pysatl_discrete.types import FloatArray, NumericArray

_SQRT2 = math.sqrt(2.0)
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


@dataclass(frozen=True, slots=True)
class NormalDistribution:
    """
    Normal (Gaussian) distribution with a given mean and standard deviation.

    Parameters
    ----------
    mean : float
        Location of the distribution.
    sdev : float
        Standard deviation. Zero is accepted and yields a point mass at
        ``mean``: the density is infinite there and zero elsewhere, the CDF
        steps from zero to one at ``mean`` and every quantile is ``mean``.

    Raises
    ------
    ValueError
        If ``sdev`` is negative or a parameter is not finite.
    """

    mean: float
    sdev: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.mean) and math.isfinite(self.sdev)):
            raise ValueError("Normal parameters must be finite.")
        if self.sdev < 0.0:
            raise ValueError("Standard deviation must be non-negative.")

    @property
    def variance(self) -> float:
        return self.sdev * self.sdev

    def pdf(self, x: NumericArray) -> NumericArray:
        """
        Probability density at ``x``.

        Parameters
        ----------
        x : NumericArray
            Points at which to evaluate the density.

        Returns
        -------
        NumericArray
            Density values at points ``x``.
        """
        if self.sdev == 0.0:
            arr = np.asarray(x, dtype=float)
            return cast("NumericArray", np.where(arr == self.mean, np.inf, 0.0))
        z = (np.asarray(x, dtype=float) - self.mean) / self.sdev
        return cast("NumericArray", np.exp(-0.5 * z * z) / (self.sdev * _SQRT_TWO_PI))

    def cdf(self, x: NumericArray) -> NumericArray:
        """Probabilities ``P(X <= x)``."""
        if self.sdev == 0.0:
            arr = np.asarray(x, dtype=float)
            return cast("NumericArray", np.where(arr >= self.mean, 1.0, 0.0))
        z = (np.asarray(x, dtype=float) - self.mean) / (self.sdev * _SQRT2)
        return cast("NumericArray", 0.5 * (1.0 + erf(z)))

    def ppf(self, p: NumericArray) -> NumericArray:
        """
        Quantile function (inverse CDF).

        Raises
        ------
        ValueError
            If a probability is outside [0, 1].
        """
        arr = np.asarray(p, dtype=float)
        if np.any((arr < 0) | (arr > 1)):
            raise ValueError("Probability must be in [0, 1]")
        if self.sdev == 0.0:
            return cast("NumericArray", np.full_like(arr, self.mean))
        return cast("NumericArray", self.mean + self.sdev * _SQRT2 * erfinv(2.0 * arr - 1.0))

    def draw(self, rng: RandomSource) -> float:
        return self.mean + self.sdev * float(rng.standard_normal())

    def draws(self, n: int, rng: RandomSource) -> FloatArray:
        """Draw ``n`` independent deviates."""
        z = np.asarray(rng.standard_normal(n), dtype=np.float64).reshape(n)
        return self.mean + self.sdev * z


__all__ = [
    "NormalDistribution",
]

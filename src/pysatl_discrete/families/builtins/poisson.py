"""
Poisson distribution family implementation.

Contains the Poisson distribution and the family registration. Sampling
uses an exact cumulative table for small means, Knuth's multiplicative
method for moderate means and a rounded normal approximation for large
means.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from enum import StrEnum
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, pdtr, xlogy

from pysatl_discrete.distributions.distribution import StrategyDistribution
from pysatl_discrete.distributions.normal import NormalDistribution
from pysatl_discrete.distributions.strategies import (
    CDFTableLookup,
    KnuthPoisson,
    NormalApproximation,
)
from pysatl_discrete.distributions.support import IntegerInterval
from pysatl_discrete.exceptions import StrategyRegimeError
from pysatl_discrete.families.parametric_family import DiscreteFamily
from pysatl_discrete.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_discrete.families.registry import DiscreteFamilyRegister
from pysatl_discrete.types import DiscreteFamilyName

if TYPE_CHECKING:
    from pysatl_discrete.distributions.strategies import SamplingStrategy
    from pysatl_discrete.types import FloatArray, NumericArray

log = logging.getLogger(__name__)

KNUTH_MEAN_LIMIT = 1.0
"""Means from this value on are sampled with Knuth's method."""

NORMAL_MEAN_LIMIT = 50.0
"""Means from this value on are sampled from a normal approximation."""

EXACT_TABLE_SLOTS = 100
EXACT_TAIL_TOLERANCE = 1.0e-15


class PoissonMethod(StrEnum):
    """Sampling algorithm of a Poisson distribution."""

    EXACT = "exact"
    KNUTH = "knuth"
    NORMAL = "normal"


def _validate(mean: float) -> None:
    if not (math.isfinite(mean) and mean > 0.0):
        raise ValueError(f"Mean [{mean}] must be positive and finite.")


def poisson_log_pmf(k: NumericArray, mean: float) -> NumericArray:
    """
    Logarithm of the Poisson probability mass function.

    Returns ``-mean + k log(mean) - log(k!)`` for ``k >= 0`` and ``-inf``
    for negative ``k``.
    """
    _validate(mean)

    arr = np.asarray(k, dtype=np.float64)
    inside = arr >= 0
    kk = np.where(inside, arr, 0.0)
    result = np.where(inside, -mean + xlogy(kk, mean) - gammaln(kk + 1.0), -np.inf)

    if result.ndim == 0:
        return float(result)
    return cast("NumericArray", result)


def poisson_pmf(k: NumericArray, mean: float) -> NumericArray:
    """Poisson probability mass function; zero for negative ``k``."""
    result = np.exp(poisson_log_pmf(k, mean))
    if np.ndim(result) == 0:
        return float(result)
    return cast("NumericArray", result)


def poisson_method(mean: float) -> PoissonMethod:
    """Choose the sampling algorithm for a Poisson distribution."""
    _validate(mean)
    if mean < KNUTH_MEAN_LIMIT:
        return PoissonMethod.EXACT
    if mean < NORMAL_MEAN_LIMIT:
        return PoissonMethod.KNUTH
    return PoissonMethod.NORMAL


def exact_sampling_table(mean: float) -> FloatArray:
    """
    Cumulative probabilities ``P(X <= k)`` truncated where the remaining
    tail mass falls below ``1e-15``, followed by a final ``1.0``.

    Raises
    ------
    StrategyRegimeError
        If the tail does not fall below the threshold within the first
        hundred values.
    """
    cdf = np.cumsum(poisson_pmf(np.arange(EXACT_TABLE_SLOTS), mean))
    below = np.flatnonzero(1.0 - cdf[1 : EXACT_TABLE_SLOTS - 1] < EXACT_TAIL_TOLERANCE)

    if below.size == 0:
        raise StrategyRegimeError("The mean value is too large for explicit CDF sampling.")

    k = int(below[0]) + 1
    return np.append(cdf[: k + 1], 1.0)


class PoissonDistribution(StrategyDistribution):
    """
    Number of events in a fixed interval with a given mean rate.

    Parameters
    ----------
    mean : float
        Mean number of events; positive and finite.

    Raises
    ------
    ValueError
        If the mean is not positive and finite.
    """

    def __init__(self, mean: float) -> None:
        _validate(mean)
        mean = float(mean)
        method = poisson_method(mean)

        strategy: SamplingStrategy
        if method is PoissonMethod.EXACT:
            strategy = CDFTableLookup(exact_sampling_table(mean))
        elif method is PoissonMethod.KNUTH:
            strategy = KnuthPoisson(mean)
        else:
            strategy = NormalApproximation(NormalDistribution(mean, math.sqrt(mean)), lower=0)

        super().__init__(strategy)
        self._mean = mean
        self._method = method
        log.debug("Selected %s sampling for %r.", method.value, self)

    @property
    def method(self) -> PoissonMethod:
        return self._method

    @property
    def support(self) -> IntegerInterval:
        return IntegerInterval.NON_NEGATIVE

    def pmf(self, k: int) -> float:
        return float(poisson_pmf(k, self._mean))

    def log_pmf(self, k: int) -> float:
        return float(poisson_log_pmf(k, self._mean))

    def cdf(self, k: int) -> float:
        if k < 0:
            return 0.0
        return float(pdtr(k, self._mean))

    def mean(self) -> float:
        return self._mean

    def variance(self) -> float:
        return self._mean

    def median(self) -> float:
        """Approximate median ``max(0, floor(mean + 1/3 - 0.02/mean))``."""
        return max(0.0, float(math.floor(self._mean + 1.0 / 3.0 - 0.02 / self._mean)))

    def effective_range(self) -> IntegerInterval:
        """
        Finite range omitting less than ``1e-9`` of the mass.

        Small means use fixed ranges starting at zero; larger ones widen with
        the standard deviation.
        """
        mean = self._mean

        if mean < 0.01:
            return IntegerInterval(0, 3)
        if mean < 0.1:
            return IntegerInterval(0, 6)
        if mean < 1.0:
            return IntegerInterval(0, 12)
        if mean < 10.0:
            return IntegerInterval(0, math.ceil(12.0 * self.sdev()))

        return IntegerInterval(
            max(0, math.floor(mean - 8.0 * self.sdev())),
            math.ceil(mean + 8.0 * self.sdev()),
        )

    def __repr__(self) -> str:
        return f"PoissonDistribution(mean={self._mean})"


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """
    if DiscreteFamilyRegister.contains(DiscreteFamilyName.POISSON):
        return

    def _build(parameters: Parametrization) -> PoissonDistribution:
        parameters = cast(_Mean, parameters)
        return PoissonDistribution(parameters.mean)

    Poisson = DiscreteFamily(
        name=DiscreteFamilyName.POISSON,
        distr_parametrizations=["mean"],
        factory=_build,
    )

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of the Poisson distribution.

        Parameters
        ----------
        mean : float
            Mean number of events
        """

        mean: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return math.isfinite(self.mean) and self.mean > 0

    DiscreteFamilyRegister.register(Poisson)


__all__ = [
    "PoissonDistribution",
    "PoissonMethod",
    "poisson_pmf",
    "poisson_log_pmf",
    "poisson_method",
    "exact_sampling_table",
    "configure_poisson_family",
]

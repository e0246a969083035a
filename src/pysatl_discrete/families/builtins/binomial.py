"""
Binomial distribution family implementation.

Contains the binomial distribution, its closed-form helpers and the family
registration. Sampling switches between explicit Bernoulli trials and a
rounded normal approximation depending on the parameters.
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
from scipy.special import bdtr, gammaln, xlog1py, xlogy

from pysatl_discrete import comparator
from pysatl_discrete.distributions.distribution import StrategyDistribution
from pysatl_discrete.distributions.normal import NormalDistribution
from pysatl_discrete.distributions.strategies import BernoulliTrials, NormalApproximation
from pysatl_discrete.distributions.support import IntegerInterval
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
    from pysatl_discrete.types import NumericArray

log = logging.getLogger(__name__)

EXACT_TRIAL_LIMIT = 10
"""Fewer trials than this are always sampled exactly."""

APPROXIMATION_WIDTH = 4.0
"""Standard deviations around the mean that must fit in ``[0, N]``."""

EFFECTIVE_RANGE_WIDTH = 12.0

_LOG2 = math.log(2.0)


class BinomialMethod(StrEnum):
    """Sampling algorithm of a binomial distribution."""

    EXACT = "exact"
    APPROX = "approx"


def _validate(trial_count: int, success_prob: float) -> None:
    if trial_count < 0:
        raise ValueError("The number of trials must be non-negative.")
    if not 0.0 <= success_prob <= 1.0:
        raise ValueError(f"Success probability [{success_prob}] must lie in [0, 1].")


def binomial_mean(trial_count: int, success_prob: float) -> float:
    _validate(trial_count, success_prob)
    return trial_count * success_prob


def binomial_variance(trial_count: int, success_prob: float) -> float:
    _validate(trial_count, success_prob)
    return trial_count * success_prob * (1.0 - success_prob)


def binomial_log_pmf(k: NumericArray, trial_count: int, success_prob: float) -> NumericArray:
    """
    Logarithm of the binomial probability mass function.

    Parameters
    ----------
    k : NumericArray
        Points at which to evaluate.
    trial_count : int
        Number of trials ``N``.
    success_prob : float
        Probability of success in a single trial ``p``.

    Returns
    -------
    NumericArray
        ``log C(N, k) + k log p + (N - k) log(1 - p)`` inside ``[0, N]`` and
        ``-inf`` outside. The boundary cases ``p = 0`` and ``p = 1`` are exact.
    """
    _validate(trial_count, success_prob)

    arr = np.asarray(k, dtype=np.float64)
    inside = (arr >= 0) & (arr <= trial_count)
    kk = np.where(inside, arr, 0.0)
    rest = trial_count - kk

    log_choose = gammaln(trial_count + 1.0) - gammaln(kk + 1.0) - gammaln(rest + 1.0)
    log_pmf = log_choose + xlogy(kk, success_prob) + xlog1py(rest, -success_prob)
    result = np.where(inside, log_pmf, -np.inf)

    if result.ndim == 0:
        return float(result)
    return cast("NumericArray", result)


def binomial_pmf(k: NumericArray, trial_count: int, success_prob: float) -> NumericArray:
    """Binomial probability mass function; zero outside ``[0, N]``."""
    result = np.exp(binomial_log_pmf(k, trial_count, success_prob))
    if np.ndim(result) == 0:
        return float(result)
    return cast("NumericArray", result)


def use_normal_approximation(trial_count: int, success_prob: float) -> bool:
    """
    Decide whether a binomial distribution may be sampled from a normal one.

    Fewer than ten trials are always sampled exactly. Otherwise the normal
    approximation is used when the mean plus or minus four standard
    deviations lies within ``[0, N]``.
    """
    if trial_count < EXACT_TRIAL_LIMIT:
        return False

    mean = binomial_mean(trial_count, success_prob)
    sdev = math.sqrt(binomial_variance(trial_count, success_prob))
    support = IntegerInterval(0, trial_count)

    return support.contains_approx(mean - APPROXIMATION_WIDTH * sdev) and support.contains_approx(
        mean + APPROXIMATION_WIDTH * sdev
    )


class BinomialDistribution(StrategyDistribution):
    """
    Number of successes in ``trial_count`` independent trials.

    Parameters
    ----------
    trial_count : int
        Number of trials ``N >= 0``.
    success_prob : float
        Probability of success in a single trial, in ``[0, 1]``.

    Raises
    ------
    ValueError
        If a parameter is out of range.
    """

    def __init__(self, trial_count: int, success_prob: float) -> None:
        trial_count = comparator.validate_integer(trial_count, "Number of trials")
        success_prob = float(success_prob)
        _validate(trial_count, success_prob)

        strategy: SamplingStrategy
        if use_normal_approximation(trial_count, success_prob):
            method = BinomialMethod.APPROX
            normal = NormalDistribution(
                binomial_mean(trial_count, success_prob),
                math.sqrt(binomial_variance(trial_count, success_prob)),
            )
            strategy = NormalApproximation(normal, lower=0, upper=trial_count)
        else:
            method = BinomialMethod.EXACT
            strategy = BernoulliTrials(trial_count, success_prob)

        super().__init__(strategy)
        self._trial_count = trial_count
        self._success_prob = success_prob
        self._method = method
        log.debug("Selected %s sampling for %r.", method.value, self)

    @property
    def trial_count(self) -> int:
        return self._trial_count

    @property
    def success_prob(self) -> float:
        return self._success_prob

    @property
    def method(self) -> BinomialMethod:
        return self._method

    @property
    def support(self) -> IntegerInterval:
        return IntegerInterval(0, self._trial_count)

    def pmf(self, k: int) -> float:
        return float(binomial_pmf(k, self._trial_count, self._success_prob))

    def log_pmf(self, k: int) -> float:
        return float(binomial_log_pmf(k, self._trial_count, self._success_prob))

    def cdf(self, k: int) -> float:
        if k < 0:
            return 0.0
        if k >= self._trial_count:
            return 1.0
        return float(bdtr(k, self._trial_count, self._success_prob))

    def mean(self) -> float:
        return binomial_mean(self._trial_count, self._success_prob)

    def variance(self) -> float:
        return binomial_variance(self._trial_count, self._success_prob)

    def median(self) -> float:
        """
        Median of the distribution.

        An integral mean is the median. Otherwise the mean is rounded when
        ``p <= 1 - ln 2`` or ``p > ln 2`` and the midpoint of its floor and
        ceiling is returned in between. Approximately sampled distributions
        report the mean.
        """
        mean = self.mean()
        p = self._success_prob

        if self._method is BinomialMethod.APPROX:
            return mean
        if comparator.DEFAULT.is_integer(mean) or comparator.DEFAULT.eq(p, 0.5):
            return mean
        if p <= 1.0 - _LOG2 or p > _LOG2:
            return float(math.floor(mean + 0.5))
        return 0.5 * (math.floor(mean) + math.ceil(mean))

    def median_range(self) -> IntegerInterval:
        mean = self.mean()
        return IntegerInterval(math.floor(mean), math.ceil(mean))

    def effective_range(self) -> IntegerInterval:
        """Mean plus or minus twelve standard deviations, clipped to ``[0, N]``."""
        half_width = EFFECTIVE_RANGE_WIDTH * self.sdev()
        return IntegerInterval.around(self.mean(), half_width, self.support)

    def __repr__(self) -> str:
        return (
            f"BinomialDistribution(trial_count={self._trial_count}, "
            f"success_prob={self._success_prob})"
        )


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    if DiscreteFamilyRegister.contains(DiscreteFamilyName.BINOMIAL):
        return

    def _build(parameters: Parametrization) -> BinomialDistribution:
        parameters = cast(_TrialsProb, parameters)
        return BinomialDistribution(parameters.trial_count, parameters.success_prob)

    Binomial = DiscreteFamily(
        name=DiscreteFamilyName.BINOMIAL,
        distr_parametrizations=["trialsProb"],
        factory=_build,
    )

    @parametrization(family=Binomial, name="trialsProb")
    class _TrialsProb(Parametrization):
        """
        Standard parametrization of the binomial distribution.

        Parameters
        ----------
        trial_count : int
            Number of trials
        success_prob : float
            Probability of success in a single trial
        """

        trial_count: int
        success_prob: float

        @constraint(description="trial_count >= 0")
        def check_trial_count_non_negative(self) -> bool:
            return self.trial_count >= 0

        @constraint(description="0 <= success_prob <= 1")
        def check_success_prob(self) -> bool:
            return 0.0 <= self.success_prob <= 1.0

    DiscreteFamilyRegister.register(Binomial)


__all__ = [
    "BinomialDistribution",
    "BinomialMethod",
    "binomial_mean",
    "binomial_variance",
    "binomial_pmf",
    "binomial_log_pmf",
    "use_normal_approximation",
    "configure_binomial_family",
]

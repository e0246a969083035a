"""
Sampling Strategies
===================

This module defines the pluggable sampling interface of discrete
distributions and its implementations:

- :class:`SamplingStrategy` — draws one value or a batch of values.
- :class:`BernoulliTrials` — counts successes in explicit Bernoulli trials.
- :class:`NormalApproximation` — rounds and clamps draws from a matched
  normal distribution.
- :class:`CDFTableLookup` — selects the first cumulative probability
  exceeding a uniform draw.
- :class:`KnuthPoisson` — multiplies uniform deviates until their product
  falls to ``exp(-mean)``.
- :class:`UniformIntegers` — draws integers uniformly from a half-open range.
- :class:`InverseTransform` — inverts a tabulated CDF.

Notes
-----
- Strategies are stateless; the random source is passed to every call.
- Batch draws are vectorized and consume the random source differently from
  repeated single draws, but follow the same distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_discrete.exceptions import StrategyRegimeError, TableInvariantError
from pysatl_discrete.rng import uniform_draws

if TYPE_CHECKING:
    from pysatl_discrete.distributions.normal import NormalDistribution
    from pysatl_discrete.distributions.tables import CumulativeMassTable
    from pysatl_discrete.rng import RandomSource
    from pysatl_discrete.types import FloatArray, IntArray

log = logging.getLogger(__name__)


class SamplingStrategy(Protocol):
    """Protocol for discrete sampling algorithms."""

    def draw(self, rng: RandomSource) -> int: ...

    def draws(self, n: int, rng: RandomSource) -> IntArray: ...


def round_half_up(x: FloatArray) -> FloatArray:
    """Round to the nearest integer with ties going towards positive infinity."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)


@dataclass(frozen=True, slots=True)
class BernoulliTrials:
    """
    Count successes in ``trial_count`` independent trials.

    A trial succeeds when its uniform deviate is below ``success_prob``.
    """

    trial_count: int
    success_prob: float

    def draw(self, rng: RandomSource) -> int:
        if self.trial_count == 0:
            return 0
        return int(np.count_nonzero(uniform_draws(rng, self.trial_count) < self.success_prob))

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        result = np.zeros(n, dtype=np.int64)
        for _ in range(self.trial_count):
            result += uniform_draws(rng, n) < self.success_prob
        return result


@dataclass(frozen=True, slots=True)
class NormalApproximation:
    """
    Round draws of a normal distribution and clamp them to ``[lower, upper]``.

    Parameters
    ----------
    normal : NormalDistribution
        Normal distribution with the moments of the target distribution.
    lower : int
        Smallest value returned.
    upper : int or None
        Largest value returned; unbounded when ``None``.
    """

    normal: NormalDistribution
    lower: int = 0
    upper: int | None = None

    def draw(self, rng: RandomSource) -> int:
        raw = int(round_half_up(self.normal.draw(rng)))
        value = max(raw, self.lower)
        if self.upper is not None:
            value = min(value, self.upper)

        if value != raw:
            log.debug("Clamped normal draw %d to %d.", raw, value)
        return value

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        raw = round_half_up(self.normal.draws(n, rng))
        upper = np.inf if self.upper is None else self.upper
        clamped = np.clip(raw, self.lower, upper)

        changed = int(np.count_nonzero(clamped != raw))
        if changed:
            log.debug(
                "Clamped %d of %d normal draws to [%s, %s].", changed, n, self.lower, self.upper
            )
        return clamped.astype(np.int64)


def select_cdf(cdf: FloatArray, draw: float | FloatArray) -> int | IntArray:
    """
    Index of the first cumulative probability strictly greater than ``draw``.

    Raises
    ------
    TableInvariantError
        If ``draw`` is not below the last cumulative probability.
    """
    index = np.searchsorted(cdf, draw, side="right")
    if np.any(index >= cdf.size):
        raise TableInvariantError("Uniform draw exceeds the last cumulative probability.")
    if np.ndim(index) == 0:
        return int(index)
    return index.astype(np.int64)


class CDFTableLookup:
    """
    Sample by looking up uniform deviates in a cumulative probability table.

    Parameters
    ----------
    cdf : array_like of float
        Non-decreasing cumulative probabilities of the values
        ``0, 1, ..., len(cdf) - 1``; the last one must be ``1.0``.
    """

    __slots__ = ("_cdf",)

    def __init__(self, cdf: FloatArray) -> None:
        arr = np.array(cdf, dtype=np.float64)
        if arr.ndim != 1 or arr.size == 0 or arr[-1] != 1.0:
            raise ValueError("Sampling table must be a 1D array ending at 1.0.")
        arr.setflags(write=False)
        self._cdf = arr

    @property
    def cdf(self) -> FloatArray:
        return self._cdf

    def draw(self, rng: RandomSource) -> int:
        return int(select_cdf(self._cdf, float(rng.random())))

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        return np.asarray(select_cdf(self._cdf, uniform_draws(rng, n)), dtype=np.int64)


@dataclass(frozen=True, slots=True)
class KnuthPoisson:
    """
    Knuth's multiplicative sampler for Poisson variates.

    Parameters
    ----------
    mean : float
        Mean of the Poisson distribution.

    Raises
    ------
    StrategyRegimeError
        If the mean is too small for the iteration cap to be positive.
    """

    mean: float
    max_iterations: int = field(init=False)
    accept: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_iterations", math.floor(1000.0 * self.mean + 0.5))
        object.__setattr__(self, "accept", math.exp(-self.mean))

        if self.max_iterations < 1:
            raise StrategyRegimeError(
                "Knuth sampling is not appropriate for very small mean values."
            )

    def draw(self, rng: RandomSource) -> int:
        count = 0
        product = float(rng.random())

        while product > self.accept and count < self.max_iterations:
            count += 1
            product *= float(rng.random())

        return count

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        count = np.zeros(n, dtype=np.int64)
        product = uniform_draws(rng, n)

        active = product > self.accept
        while np.any(active):
            count[active] += 1
            product[active] *= uniform_draws(rng, int(np.count_nonzero(active)))
            active = (product > self.accept) & (count < self.max_iterations)

        return count


@dataclass(frozen=True, slots=True)
class UniformIntegers:
    """Draw integers uniformly from the half-open range ``[lower, upper)``."""

    lower: int
    upper: int

    def draw(self, rng: RandomSource) -> int:
        return int(rng.integers(self.lower, self.upper))

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        return np.asarray(rng.integers(self.lower, self.upper, size=n), dtype=np.int64).reshape(n)


class InverseTransform:
    """Sample by inverting a tabulated cumulative distribution function."""

    __slots__ = ("_table",)

    def __init__(self, table: CumulativeMassTable) -> None:
        self._table = table

    def draw(self, rng: RandomSource) -> int:
        return self._table.inverse(float(rng.random()))

    def draws(self, n: int, rng: RandomSource) -> IntArray:
        return self._table.inverse_many(uniform_draws(rng, n))


__all__ = [
    "SamplingStrategy",
    "BernoulliTrials",
    "NormalApproximation",
    "CDFTableLookup",
    "KnuthPoisson",
    "InverseTransform",
    "UniformIntegers",
    "select_cdf",
    "round_half_up",
]

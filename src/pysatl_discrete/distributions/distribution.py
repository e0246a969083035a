"""
Discrete Distribution Interface
===============================

This module defines the abstract base class shared by every discrete
distribution over a contiguous integer support:

- :class:`DiscreteDistribution` — PMF/CDF evaluation, moments, sampling,
  exact support, finite effective range, caching and tabular display.
- :class:`StrategyDistribution` — a distribution whose draws are delegated
  to a pluggable sampling strategy.

Notes
-----
- Subclasses must implement :meth:`~DiscreteDistribution.pmf`,
  :meth:`~DiscreteDistribution.draw` and
  :attr:`~DiscreteDistribution.support`; everything else has a default.
- The default moments are estimated once from a large Monte-Carlo sample
  (see :mod:`pysatl_discrete.config`) and memoized under a lock.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_discrete.config import get_settings
from pysatl_discrete.distributions.sampling import DiscreteSample
from pysatl_discrete.distributions.support import IntegerInterval
from pysatl_discrete.rng import resolve

if TYPE_CHECKING:
    from pysatl_discrete.distributions.compact import CompactDiscreteDistribution
    from pysatl_discrete.distributions.sampling import SampleSummary
    from pysatl_discrete.distributions.strategies import SamplingStrategy
    from pysatl_discrete.rng import RandomSource

log = logging.getLogger(__name__)

EFFECTIVE_RANGE_WIDTH = 7.0
"""Default half-width of the effective range in standard deviations."""

DISPLAY_HEADER = " k      pmf        cdf   \n---  ---------  ---------\n"


class DiscreteDistribution(ABC):
    """
    Probability distribution over a contiguous range of integers.
    """

    def __init__(self) -> None:
        self._summary_lock = threading.Lock()
        self._summary: SampleSummary | None = None

    @property
    @abstractmethod
    def support(self) -> IntegerInterval:
        """Exact range of integers with non-zero probability mass."""

    @abstractmethod
    def pmf(self, k: int) -> float:
        """Probability mass ``P(X = k)``."""

    @abstractmethod
    def draw(self, rng: RandomSource | None = None) -> int:
        """
        Draw a single value.

        Parameters
        ----------
        rng : RandomSource, optional
            Source of randomness; the default generator when omitted.
        """

    def log_pmf(self, k: int) -> float:
        """Natural logarithm of :meth:`pmf`; ``-inf`` where the mass is zero."""
        p = self.pmf(k)
        return math.log(p) if p > 0.0 else -math.inf

    def cdf(self, k: int) -> float:
        """
        Cumulative probability ``P(X <= k)``.

        The default sums :meth:`pmf` across the effective range up to ``k``,
        so mass outside the effective range is not counted.
        """
        effective = self.effective_range()
        upper = min(k, effective.upper)
        if upper < effective.lower:
            return 0.0
        return math.fsum(self.pmf(j) for j in range(effective.lower, upper + 1))

    def cdf_between(self, j: int, k: int) -> float:
        """
        Probability of the half-open range ``P(j < X <= k)``.

        Raises
        ------
        ValueError
            If ``j > k``.
        """
        if j > k:
            raise ValueError(f"Invalid range: ({j}, {k}].")
        return self.cdf(k) - self.cdf(j)

    def cdf_over(self, interval: IntegerInterval) -> float:
        """Probability of the closed range ``P(lower <= X <= upper)``."""
        return self.cdf_between(interval.lower - 1, interval.upper)

    def _sample_summary(self) -> SampleSummary:
        with self._summary_lock:
            if self._summary is None:
                count = get_settings().moment_sample_count
                log.debug("Estimating moments of %r from %d draws.", self, count)
                self._summary = self.sample(count).summary()
            return self._summary

    def mean(self) -> float:
        return self._sample_summary().mean

    def median(self) -> float:
        return self._sample_summary().median

    def variance(self) -> float:
        return self._sample_summary().variance

    def sdev(self) -> float:
        """Standard deviation."""
        return math.sqrt(self.variance())

    def median_range(self) -> IntegerInterval:
        """Integers bracketing the median: ``[floor(median), ceil(median)]``."""
        median = self.median()
        return IntegerInterval(math.floor(median), math.ceil(median))

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> DiscreteSample:
        """
        Draw ``n`` independent values.

        Parameters
        ----------
        n : int
            Number of values.
        rng : RandomSource, optional
            Source of randomness; the default generator when omitted.

        Returns
        -------
        DiscreteSample
            The drawn values.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        source = resolve(rng)
        draws = np.fromiter((self.draw(source) for _ in range(n)), dtype=np.int64, count=n)
        return DiscreteSample(draws)

    def effective_range(self) -> IntegerInterval:
        """
        Finite range holding all but a negligible fraction of the mass.

        The default is the mean plus or minus seven standard deviations,
        clipped to the support.
        """
        half_width = EFFECTIVE_RANGE_WIDTH * self.sdev()
        return IntegerInterval.around(self.mean(), half_width, self.support)

    def cache(self) -> CompactDiscreteDistribution:
        """Tabulate this distribution over its effective range."""
        from pysatl_discrete.distributions.compact import CompactDiscreteDistribution

        return CompactDiscreteDistribution.tabulate(self)

    def display(self, interval: IntegerInterval | None = None) -> str:
        """
        Render the PMF and CDF as a fixed-width text table.

        Parameters
        ----------
        interval : IntegerInterval, optional
            Rows to render; the effective range when omitted.
        """
        rows = self.effective_range() if interval is None else interval
        return DISPLAY_HEADER + "".join(
            f"{k:3d}   {self.pmf(k):8.6f}   {self.cdf(k):8.6f}\n" for k in rows
        )


class StrategyDistribution(DiscreteDistribution, ABC):
    """
    Discrete distribution that draws through a :class:`SamplingStrategy`.

    Parameters
    ----------
    strategy : SamplingStrategy
        Algorithm producing single and batch draws.
    """

    def __init__(self, strategy: SamplingStrategy) -> None:
        super().__init__()
        self._strategy = strategy

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._strategy

    def draw(self, rng: RandomSource | None = None) -> int:
        return self._strategy.draw(resolve(rng))

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> DiscreteSample:
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        return DiscreteSample(self._strategy.draws(n, resolve(rng)))


__all__ = [
    "DiscreteDistribution",
    "StrategyDistribution",
    "EFFECTIVE_RANGE_WIDTH",
]

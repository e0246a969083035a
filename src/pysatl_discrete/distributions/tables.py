"""
Tabulated Distribution Functions
================================

Distribution functions of discrete distributions tabulated over a closed
integer support:

- :class:`DistributionFunctionTable` — values indexed by offset from the
  lower bound of the support, with bounds-checked evaluation;
- :class:`ProbabilityMassTable` — a table of probabilities (PMF);
- :class:`CumulativeMassTable` — a non-decreasing table ending at one (CDF),
  derived from a PMF by running prefix sum.

Notes
-----
- Tables are immutable; caller-supplied arrays are copied.
- PMF tables evaluate to ``0.0`` outside their support and CDF tables
  saturate to ``0.0`` below and ``1.0`` above it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_discrete import comparator, rng as _rng
from pysatl_discrete.comparator import validate_probability
from pysatl_discrete.distributions.sampling import DiscreteSample
from pysatl_discrete.distributions.support import IntegerInterval
from pysatl_discrete.exceptions import TableInvariantError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.rng import RandomSource
    from pysatl_discrete.types import FloatArray, IntArray, NumericArray

log = logging.getLogger(__name__)

OMITTED_MASS_TOLERANCE = 1.0e-9
"""Largest probability mass an effective range may leave out."""

MEDIAN_TIE_BREAK = 0.50000001
"""Perturbed target used to find the upper end of a CDF plateau at 0.5."""


class DistributionFunctionTable:
    """
    Distribution function tabulated over a closed integer support.

    Parameters
    ----------
    support : IntegerInterval
        Range of integers the table covers.
    values : array_like of float
        Value at each point of the support; ``values[i]`` is the value at
        ``support.lower + i``.

    Raises
    ------
    ValueError
        If ``values`` is not one-dimensional or its length differs from the
        size of the support.
    """

    __slots__ = ("_support", "_values")

    def __init__(self, support: IntegerInterval, values: NumericArray | Iterable[float]) -> None:
        arr = np.array(values if isinstance(values, np.ndarray) else list(values), dtype=np.float64)

        if arr.ndim != 1 or arr.shape[0] != support.size:
            raise ValueError("Values do not span the range of support.")

        arr.setflags(write=False)
        self._support = support
        self._values = arr

    @property
    def support(self) -> IntegerInterval:
        """Range of support of this table."""
        return self._support

    @property
    def values(self) -> FloatArray:
        """Read-only array of tabulated values."""
        return self._values

    def points(self) -> IntArray:
        """Integer points of the support as an array."""
        return np.arange(self._support.lower, self._support.upper + 1, dtype=np.int64)

    def evaluate(self, k: int) -> float:
        """
        Evaluate the table at an integer point.

        Raises
        ------
        ValueError
            If ``k`` lies outside the support.
        """
        if not self._support.contains(k):
            raise ValueError(f"Evaluation point [{k}] is outside the range of support.")
        return float(self._values[k - self._support.lower])

    def equals(self, other: object, tolerance: float | None = None) -> bool:
        """
        Compare with another table of the same kind.

        Parameters
        ----------
        other : object
            Table to compare with.
        tolerance : float, optional
            Absolute tolerance for the values; the default comparator
            tolerance when omitted.

        Returns
        -------
        bool
            ``True`` iff both tables have the same type and support and their
            values agree within the tolerance.
        """
        if type(self) is not type(other):
            return False
        assert isinstance(other, DistributionFunctionTable)

        tol = comparator.DEFAULT.tolerance if tolerance is None else tolerance
        return self._support == other._support and bool(
            np.all(np.abs(self._values - other._values) <= tol)
        )

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def display(self) -> str:
        """Render one ``k => value`` line per point of the support."""
        return "".join(
            f"{k:6d} => {v:8.6f}\n" for k, v in zip(self._support, self._values, strict=True)
        )

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(support={self._support.format()})"


class ProbabilityMassTable(DistributionFunctionTable):
    """
    Probability mass function tabulated over a closed integer support.

    Every value must be a probability in ``[0, 1]``. Normalization is not
    enforced; the caching constructor normalizes explicitly.
    """

    __slots__ = ()

    def __init__(self, support: IntegerInterval, values: NumericArray | Iterable[float]) -> None:
        super().__init__(support, values)
        tol = comparator.DEFAULT.tolerance
        if not bool(np.all((self._values >= -tol) & (self._values <= 1.0 + tol))):
            raise ValueError("Probability mass values must lie in [0, 1].")

    @classmethod
    def create(cls, lower: int, values: NumericArray | Iterable[float]) -> ProbabilityMassTable:
        """
        Wrap explicit probabilities starting at ``lower``.

        Raises
        ------
        ValueError
            If ``values`` is empty or contains a value outside ``[0, 1]``.
        """
        arr = np.array(values if isinstance(values, np.ndarray) else list(values), dtype=np.float64)
        if arr.size == 0:
            raise ValueError("At least one probability is required.")
        return cls(IntegerInterval(lower, lower + arr.size - 1), arr)

    @classmethod
    def compute(cls, observations: Iterable[int] | Mapping[int, int]) -> ProbabilityMassTable:
        """
        Build the empirical PMF of integer observations.

        Parameters
        ----------
        observations : iterable of int or mapping of int to int
            Raw observations, or a mapping from each observed value to its
            number of occurrences.

        Raises
        ------
        ValueError
            If there are no observations or a count is negative.
        """
        if isinstance(observations, Mapping):
            points = np.array(list(observations.keys()), dtype=np.int64)
            counts = np.array(list(observations.values()), dtype=np.int64)
            if np.any(counts < 0):
                raise ValueError("Observation counts cannot be negative.")
        else:
            raw = np.array(list(observations), dtype=np.int64)
            points, counts = np.unique(raw, return_counts=True)

        total = int(counts.sum())
        if total == 0:
            raise ValueError("At least one observation is required.")

        observed = points[counts > 0]
        support = IntegerInterval(int(observed.min()), int(observed.max()))
        values = np.zeros(support.size, dtype=np.float64)
        np.add.at(values, points[counts > 0] - support.lower, counts[counts > 0] / total)
        return cls(support, values)

    @classmethod
    def cache(cls, dist: DiscreteDistribution) -> ProbabilityMassTable:
        """
        Tabulate a distribution over its effective range.

        The raw probabilities are renormalized to sum to one, so the cached
        table deviates from the distribution by about the omitted tail mass.
        That mass is measured with the distribution's own :meth:`cdf` on both
        sides of the effective range, so PMF round-off inside the range does
        not count as omitted.

        Raises
        ------
        ValueError
            If the distribution has no mass over its effective range.
        """
        effective = dist.effective_range()
        raw = np.array([dist.pmf(k) for k in effective], dtype=np.float64)
        total = float(raw.sum())

        if not total > 0.0:
            raise ValueError(f"No probability mass over the effective range {effective.format()}.")

        omitted = dist.cdf(effective.lower - 1) + (1.0 - dist.cdf(effective.upper))
        if omitted > OMITTED_MASS_TOLERANCE:
            warnings.warn(
                f"Effective range {effective.format()} omits {omitted:.3g} of the probability "
                "mass; the cached distribution will be renormalized.",
                RuntimeWarning,
                stacklevel=2,
            )
        log.debug("Cached %r over %s (omitted mass %.3g).", dist, effective.format(), omitted)
        return cls(effective, raw / total)

    def evaluate(self, k: int) -> float:
        """Probability mass at ``k``; zero outside the support."""
        if self._support.contains(k):
            return super().evaluate(k)
        return 0.0

    def total(self) -> float:
        """Total mass of the table."""
        return float(self._values.sum())

    def mean(self) -> float:
        return float(np.dot(self.points().astype(np.float64), self._values))

    def variance(self) -> float:
        mean = self.mean()
        return float(np.dot(self._values, (self.points().astype(np.float64) - mean) ** 2))

    def cdf(self) -> CumulativeMassTable:
        """Derive the cumulative table."""
        return CumulativeMassTable.compute(self)


class CumulativeMassTable(DistributionFunctionTable):
    """
    Cumulative distribution function tabulated over a closed integer support.

    Values must be probabilities, non-decreasing, and end at one.
    """

    __slots__ = ("_envelope",)

    def __init__(self, support: IntegerInterval, values: NumericArray | Iterable[float]) -> None:
        super().__init__(support, values)

        for value in self._values:
            validate_probability(value, "Cumulative probability")
        if not comparator.DEFAULT.is_non_decreasing(self._values):
            raise ValueError("Cumulative probabilities must be non-decreasing.")
        if not comparator.DEFAULT.is_unity(self._values[-1]):
            raise ValueError("Distribution is not normalized.")

        # Round-off may leave dips below the tolerance; search a monotone copy.
        envelope = np.maximum.accumulate(self._values)
        envelope.setflags(write=False)
        self._envelope = envelope

    @classmethod
    def compute(cls, source: ProbabilityMassTable | Iterable[int]) -> CumulativeMassTable:
        """
        Derive the cumulative table of a PMF, or of raw integer observations.

        Raises
        ------
        ValueError
            If the PMF is not normalized.
        """
        if isinstance(source, ProbabilityMassTable):
            pmf = source
        else:
            pmf = ProbabilityMassTable.compute(source)
        return cls(pmf.support, np.cumsum(pmf.values))

    def evaluate(self, k: int) -> float:
        """``P(X <= k)``; saturates outside the support."""
        if k < self._support.lower:
            return 0.0
        if k > self._support.upper:
            return 1.0
        return super().evaluate(k)

    def evaluate_between(self, j: int, k: int) -> float:
        """
        Probability of the half-open range ``P(j < X <= k)``.

        Raises
        ------
        ValueError
            If ``j > k``.
        """
        if j > k:
            raise ValueError(f"Invalid range: ({j}, {k}].")
        return self.evaluate(k) - self.evaluate(j)

    def inverse(self, cdf: float) -> int:
        """
        Smallest point ``k`` of the support with ``CDF(k) >= cdf``.

        Raises
        ------
        ValueError
            If ``cdf`` is not a probability.
        TableInvariantError
            If no such point exists.
        """
        validate_probability(cdf)
        target = cdf - comparator.DEFAULT.tolerance
        index = int(np.searchsorted(self._envelope, target, side="left"))

        if index >= self._envelope.size:
            raise TableInvariantError(
                f"Invalid CDF: no point reaches cumulative probability {cdf}."
            )
        return self._support.lower + index

    def inverse_many(self, cdf: NumericArray) -> IntArray:
        """Vectorized :meth:`inverse` for an array of probabilities."""
        arr = np.asarray(cdf, dtype=np.float64)
        tol = comparator.DEFAULT.tolerance
        if np.any((arr < -tol) | (arr > 1.0 + tol)):
            raise ValueError("Cumulative probabilities must lie in [0, 1].")

        index = np.searchsorted(self._envelope, arr - tol, side="left")
        if np.any(index >= self._envelope.size):
            raise TableInvariantError("Invalid CDF: inverse lookup fell off the table.")
        return (self._support.lower + index).astype(np.int64)

    def median(self) -> float:
        """
        Median of the tabulated distribution.

        A CDF plateau at exactly 0.5 yields the midpoint between the point
        reaching 0.5 and the next point of positive mass.
        """
        k = self.inverse(0.5)

        if comparator.DEFAULT.eq(self.evaluate(k), 0.5):
            return 0.5 * (k + self.inverse(MEDIAN_TIE_BREAK))
        return float(k)

    def pmf(self) -> ProbabilityMassTable:
        """Recover the PMF by first differences."""
        return ProbabilityMassTable.create(self._support.lower, np.diff(self._values, prepend=0.0))

    def draw(self, rng: RandomSource | None = None) -> int:
        """Inverse-transform sample of a single value."""
        return self.inverse(float(_rng.resolve(rng).random()))

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> DiscreteSample:
        """Inverse-transform sample of ``n`` values."""
        return DiscreteSample(self.inverse_many(_rng.uniform_draws(_rng.resolve(rng), n)))


__all__ = [
    "DistributionFunctionTable",
    "ProbabilityMassTable",
    "CumulativeMassTable",
    "OMITTED_MASS_TOLERANCE",
]

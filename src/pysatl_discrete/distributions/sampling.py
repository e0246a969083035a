"""
Sampling Containers
===================

Array-backed container for integer samples drawn from discrete
distributions, together with the summary statistics used to estimate
moments by simulation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_discrete.types import IntArray


class DiscreteSample:
    """
    Array-backed sample of integer values.

    Parameters
    ----------
    data : array_like of int
        Sample values; stored as a read-only 1D ``int64`` array.

    Raises
    ------
    ValueError
        If data is not one-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, data: IntArray | Iterable[int]) -> None:
        arr = np.array(data if isinstance(data, np.ndarray) else list(data), dtype=np.int64)
        if arr.ndim != 1:
            raise ValueError("DiscreteSample expects a 1D array of integers.")
        arr.setflags(write=False)
        self._data = arr

    def __len__(self) -> int:
        """Return the number of values."""
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self._data)

    @property
    def array(self) -> IntArray:
        """Return the backing (read-only) array."""
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return (len(self),)

    def counts(self) -> dict[int, int]:
        """
        Multiset view of the sample.

        Returns
        -------
        dict[int, int]
            Mapping from each observed value to its number of occurrences,
            ordered by value.
        """
        values, counts = np.unique(self._data, return_counts=True)
        return {int(v): int(c) for v, c in zip(values, counts, strict=True)}

    def count(self, k: int) -> int:
        return int(np.count_nonzero(self._data == k))

    def frequency(self, k: int) -> float:
        """Relative frequency of the value ``k``."""
        if len(self) == 0:
            return 0.0
        return self.count(k) / len(self)

    def summary(self) -> SampleSummary:
        """
        Compute mean, median and variance of the sample.

        Raises
        ------
        ValueError
            If the sample is empty.
        """
        return SampleSummary.compute(self._data)


@dataclass(frozen=True, slots=True)
class SampleSummary:
    """
    Summary statistics of a sample.

    Parameters
    ----------
    count : int
        Number of observations.
    mean : float
        Sample mean.
    median : float
        Sample median.
    variance : float
        Unbiased sample variance (zero for a single observation).
    """

    count: int
    mean: float
    median: float
    variance: float

    @classmethod
    def compute(cls, values: IntArray) -> SampleSummary:
        if values.size == 0:
            raise ValueError("At least one observation is required.")

        data = values.astype(np.float64)
        variance = float(np.var(data, ddof=1)) if data.size > 1 else 0.0
        return cls(
            count=int(data.size),
            mean=float(np.mean(data)),
            median=float(np.median(data)),
            variance=variance,
        )


__all__ = [
    "DiscreteSample",
    "SampleSummary",
]

"""
Empirical distribution of observed integer values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pysatl_discrete.distributions.compact import CompactDiscreteDistribution
from pysatl_discrete.distributions.sampling import DiscreteSample
from pysatl_discrete.distributions.tables import ProbabilityMassTable

if TYPE_CHECKING:
    from collections.abc import Iterable


class EmpiricalDiscreteDistribution(CompactDiscreteDistribution):
    """
    Distribution assigning each observed value its relative frequency.

    Build instances with :meth:`compute`.
    """

    def __init__(self, pmf: ProbabilityMassTable, count: int) -> None:
        super().__init__(pmf)
        self._count = count

    @classmethod
    def compute(
        cls, observations: Iterable[int] | Mapping[int, int] | DiscreteSample
    ) -> EmpiricalDiscreteDistribution:
        """
        Build the empirical distribution of a set of observations.

        Parameters
        ----------
        observations : iterable of int, mapping of int to int, or DiscreteSample
            Raw observations, or a mapping from observed values to counts.

        Raises
        ------
        ValueError
            If there are no observations.
        """
        if isinstance(observations, DiscreteSample):
            counts: Mapping[int, int] = observations.counts()
        elif isinstance(observations, Mapping):
            counts = observations
        else:
            counts = DiscreteSample(observations).counts()

        return cls(ProbabilityMassTable.compute(counts), sum(counts.values()))

    def count_observations(self) -> int:
        """Number of observations the distribution was computed from."""
        return self._count

    def stderr(self) -> float:
        """Standard error of the mean, ``sdev / sqrt(n)``."""
        return self.sdev() / math.sqrt(self._count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count}, support={self.support.format()})"


__all__ = [
    "EmpiricalDiscreteDistribution",
]

"""
Tabulated distributions backed by a PMF and its derived CDF.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_discrete.distributions.distribution import StrategyDistribution
from pysatl_discrete.distributions.strategies import InverseTransform
from pysatl_discrete.distributions.tables import ProbabilityMassTable

if TYPE_CHECKING:
    from pysatl_discrete.distributions.distribution import DiscreteDistribution
    from pysatl_discrete.distributions.support import IntegerInterval
    from pysatl_discrete.distributions.tables import CumulativeMassTable


class CompactDiscreteDistribution(StrategyDistribution):
    """
    Discrete distribution defined by a probability mass table.

    All queries are answered from the table and the cumulative table derived
    from it at construction; sampling inverts the cumulative table. The
    effective range is the support of the table.

    Parameters
    ----------
    pmf : ProbabilityMassTable
        Normalized probability masses.

    Raises
    ------
    ValueError
        If the masses do not sum to one.
    """

    def __init__(self, pmf: ProbabilityMassTable) -> None:
        cdf = pmf.cdf()
        super().__init__(InverseTransform(cdf))
        self._pmf = pmf
        self._cdf = cdf

    @classmethod
    def tabulate(cls, dist: DiscreteDistribution) -> CompactDiscreteDistribution:
        """
        Tabulate ``dist`` over its effective range.

        The wrapped distribution is not referenced after construction.
        """
        return cls(ProbabilityMassTable.cache(dist))

    def cache(self) -> CompactDiscreteDistribution:
        return self

    @property
    def pmf_table(self) -> ProbabilityMassTable:
        return self._pmf

    @property
    def cdf_table(self) -> CumulativeMassTable:
        return self._cdf

    @property
    def support(self) -> IntegerInterval:
        return self._pmf.support

    def effective_range(self) -> IntegerInterval:
        return self._pmf.support

    def pmf(self, k: int) -> float:
        return self._pmf.evaluate(k)

    def cdf(self, k: int) -> float:
        return self._cdf.evaluate(k)

    def cdf_between(self, j: int, k: int) -> float:
        return self._cdf.evaluate_between(j, k)

    def mean(self) -> float:
        return self._pmf.mean()

    def median(self) -> float:
        return self._cdf.median()

    def variance(self) -> float:
        return self._pmf.variance()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(support={self.support.format()})"


__all__ = [
    "CompactDiscreteDistribution",
]

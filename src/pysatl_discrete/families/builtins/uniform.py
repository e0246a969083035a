"""
Discrete uniform distribution family implementation.

Contains the discrete uniform distribution over a half-open integer range
and the family registration with half-open and closed parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import cast

from pysatl_discrete import comparator
from pysatl_discrete.distributions.distribution import StrategyDistribution
from pysatl_discrete.distributions.strategies import UniformIntegers
from pysatl_discrete.distributions.support import IntegerInterval
from pysatl_discrete.families.parametric_family import DiscreteFamily
from pysatl_discrete.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_discrete.families.registry import DiscreteFamilyRegister
from pysatl_discrete.types import DiscreteFamilyName


class UniformDiscreteDistribution(StrategyDistribution):
    """
    Equal probability for every integer in ``[lower, upper)``.

    Parameters
    ----------
    lower : int
        Smallest value (inclusive).
    upper : int
        Upper bound (exclusive).

    Raises
    ------
    ValueError
        If ``upper <= lower``.
    """

    def __init__(self, lower: int, upper: int) -> None:
        lower = comparator.validate_integer(lower, "Lower bound")
        upper = comparator.validate_integer(upper, "Upper bound")
        if upper <= lower:
            raise ValueError(f"Invalid support range: [{lower}, {upper}).")

        super().__init__(UniformIntegers(lower, upper))
        self._lower = lower
        self._upper = upper
        self._support = IntegerInterval(lower, upper - 1)
        self._density = 1.0 / self._support.size

    @property
    def lower(self) -> int:
        return self._lower

    @property
    def upper(self) -> int:
        return self._upper

    @property
    def support(self) -> IntegerInterval:
        return self._support

    def effective_range(self) -> IntegerInterval:
        return self._support

    def pmf(self, k: int) -> float:
        return self._density if self._lower <= k < self._upper else 0.0

    def cdf(self, k: int) -> float:
        if k < self._lower:
            return 0.0
        if k < self._upper:
            return self._density * (k + 1 - self._lower)
        return 1.0

    def mean(self) -> float:
        return 0.5 * (self._lower + self._upper - 1)

    def median(self) -> float:
        return self.mean()

    def variance(self) -> float:
        n = self._support.size
        return (n * n - 1) / 12.0

    def median_range(self) -> IntegerInterval:
        mean = self.mean()
        return IntegerInterval(math.floor(mean), math.ceil(mean))

    def __repr__(self) -> str:
        return f"UniformDiscreteDistribution(lower={self._lower}, upper={self._upper})"


def configure_uniform_family() -> None:
    """
    Configure and register the discrete Uniform distribution family.
    """
    if DiscreteFamilyRegister.contains(DiscreteFamilyName.UNIFORM):
        return

    def _build(parameters: Parametrization) -> UniformDiscreteDistribution:
        parameters = cast(_HalfOpen, parameters)
        return UniformDiscreteDistribution(parameters.lower, parameters.upper)

    Uniform = DiscreteFamily(
        name=DiscreteFamilyName.UNIFORM,
        distr_parametrizations=["halfOpen", "closed"],
        factory=_build,
    )

    @parametrization(family=Uniform, name="halfOpen")
    class _HalfOpen(Parametrization):
        """
        Half-open parametrization of the discrete uniform distribution.

        Parameters
        ----------
        lower : int
            Smallest value (inclusive)
        upper : int
            Upper bound (exclusive)
        """

        lower: int
        upper: int

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower < self.upper

    @parametrization(family=Uniform, name="closed")
    class _Closed(Parametrization):
        """
        Closed parametrization of the discrete uniform distribution.

        Parameters
        ----------
        first : int
            Smallest value (inclusive)
        last : int
            Largest value (inclusive)
        """

        first: int
        last: int

        @constraint(description="first <= last")
        def check_first_not_greater_than_last(self) -> bool:
            return self.first <= self.last

        def transform_to_base_parametrization(self) -> Parametrization:
            return _HalfOpen(lower=self.first, upper=self.last + 1)

    DiscreteFamilyRegister.register(Uniform)


__all__ = [
    "UniformDiscreteDistribution",
    "configure_uniform_family",
]

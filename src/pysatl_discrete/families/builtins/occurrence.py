"""
Occurrence distribution family implementation.

The occurrence distribution counts how many of ``N`` independent trials
produce an event of fixed probability. It is tabulated at construction and
answers "exactly", "at most" and "at least" queries from its tables.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np
from scipy.stats import binom

from pysatl_discrete import comparator
from pysatl_discrete.distributions.compact import CompactDiscreteDistribution
from pysatl_discrete.distributions.support import IntegerInterval
from pysatl_discrete.distributions.tables import ProbabilityMassTable
from pysatl_discrete.families.parametric_family import DiscreteFamily
from pysatl_discrete.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_discrete.families.registry import DiscreteFamilyRegister
from pysatl_discrete.types import DiscreteFamilyName


def occurrence_pmf_table(event_prob: float, trial_count: int) -> ProbabilityMassTable:
    """
    Tabulate the number of occurrences over ``[0, N]``.

    The binomial probabilities are renormalized by their own sum so the
    derived cumulative table ends at one for any number of trials.

    Raises
    ------
    ValueError
        If the trial count is negative or fractional, or the probability is
        invalid.
    """
    trial_count = comparator.validate_integer(trial_count, "Number of trials")
    if trial_count < 0:
        raise ValueError("The number of trials must be non-negative.")
    if not 0.0 <= event_prob <= 1.0:
        raise ValueError(f"Event probability [{event_prob}] must lie in [0, 1].")

    k = np.arange(trial_count + 1)
    values = np.atleast_1d(binom.pmf(k, trial_count, event_prob)).astype(np.float64)
    return ProbabilityMassTable(IntegerInterval(0, trial_count), values / values.sum())


class OccurrenceDistribution(CompactDiscreteDistribution):
    """
    Number of occurrences of an event in independent trials.

    Parameters
    ----------
    event_prob : float
        Probability of the event in a single trial.
    trial_count : int
        Number of trials.
    """

    def __init__(self, event_prob: float, trial_count: int) -> None:
        event_prob = float(event_prob)
        trial_count = comparator.validate_integer(trial_count, "Number of trials")
        super().__init__(occurrence_pmf_table(event_prob, trial_count))
        self._event_prob = event_prob
        self._trial_count = trial_count

    @property
    def event_prob(self) -> float:
        return self._event_prob

    @property
    def trial_count(self) -> int:
        return self._trial_count

    def exactly(self, k: int) -> float:
        """Probability of exactly ``k`` occurrences."""
        return self.pmf(k)

    def at_most(self, k: int) -> float:
        """Probability of at most ``k`` occurrences."""
        return self.cdf(k)

    def at_least(self, k: int) -> float:
        """Probability of at least ``k`` occurrences."""
        return 1.0 - self.at_most(k - 1)

    def __repr__(self) -> str:
        return (
            f"OccurrenceDistribution(event_prob={self._event_prob}, "
            f"trial_count={self._trial_count})"
        )


def configure_occurrence_family() -> None:
    """
    Configure and register the Occurrence distribution family.
    """
    if DiscreteFamilyRegister.contains(DiscreteFamilyName.OCCURRENCE):
        return

    def _build(parameters: Parametrization) -> OccurrenceDistribution:
        parameters = cast(_ProbTrials, parameters)
        return OccurrenceDistribution(parameters.event_prob, parameters.trial_count)

    Occurrence = DiscreteFamily(
        name=DiscreteFamilyName.OCCURRENCE,
        distr_parametrizations=["probTrials"],
        factory=_build,
    )

    @parametrization(family=Occurrence, name="probTrials")
    class _ProbTrials(Parametrization):
        """
        Standard parametrization of the occurrence distribution.

        Parameters
        ----------
        event_prob : float
            Probability of the event in a single trial
        trial_count : int
            Number of trials
        """

        event_prob: float
        trial_count: int

        @constraint(description="0 <= event_prob <= 1")
        def check_event_prob(self) -> bool:
            return 0.0 <= self.event_prob <= 1.0

        @constraint(description="trial_count >= 0")
        def check_trial_count_non_negative(self) -> bool:
            return self.trial_count >= 0

    DiscreteFamilyRegister.register(Occurrence)


__all__ = [
    "OccurrenceDistribution",
    "occurrence_pmf_table",
    "configure_occurrence_family",
]

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_discrete.distributions import IntegerInterval
from pysatl_discrete.families import (
    BinomialDistribution,
    OccurrenceDistribution,
    PoissonDistribution,
    UniformDiscreteDistribution,
    parse_descriptor,
)
from pysatl_discrete.families.descriptor import split_descriptor


class TestSplitDescriptor:
    @pytest.mark.parametrize(
        "descriptor, expected_result",
        [
            ("BINOMIAL; 5, 0.2", ("BINOMIAL", ["5", "0.2"])),
            ("  binomial ;5 ,0.2  ", ("BINOMIAL", ["5", "0.2"])),
            ("POISSON", ("POISSON", [])),
            ("POISSON;  ", ("POISSON", [])),
        ],
    )
    def test_split(self, descriptor, expected_result):
        assert split_descriptor(descriptor) == expected_result

    @pytest.mark.parametrize(
        "descriptor, message",
        [
            ("BINOMIAL; 5; 0.2", "Invalid distribution descriptor"),
            (" ; 5, 0.2", "Missing distribution type"),
            ("BINOMIAL; 5,, 0.2", "Empty parameter"),
            ("BINOMIAL; 5,", "Empty parameter"),
        ],
    )
    def test_malformed(self, descriptor, message):
        with pytest.raises(ValueError, match=message):
            split_descriptor(descriptor)


class TestParseDescriptor:
    def test_binomial(self):
        dist = parse_descriptor("BINOMIAL; 5, 0.2")

        assert isinstance(dist, BinomialDistribution)
        assert dist.trial_count == 5
        assert dist.success_prob == 0.2

    def test_poisson(self):
        dist = parse_descriptor("POISSON; 2.5")

        assert isinstance(dist, PoissonDistribution)
        assert dist.mean() == 2.5

    def test_uniform(self):
        dist = parse_descriptor("UNIFORM; -1, 3")

        assert isinstance(dist, UniformDiscreteDistribution)
        assert dist.support == IntegerInterval(-1, 2)
        assert [dist.cdf(k) for k in range(-1, 3)] == pytest.approx([0.25, 0.5, 0.75, 1.0])
        assert dist.mean() == 0.5

    def test_occurrence(self):
        dist = parse_descriptor("occurrence; 0.2, 4")

        assert isinstance(dist, OccurrenceDistribution)
        assert dist.event_prob == 0.2
        assert dist.trial_count == 4

    @pytest.mark.parametrize(
        "descriptor, message",
        [
            ("GEOMETRIC; 0.5", "No family GEOMETRIC"),
            ("BINOMIAL; 5", "expects 2 value"),
            ("BINOMIAL; 5.5, 0.2", "Invalid value"),
            ("BINOMIAL; 5, 1.5", "0 <= success_prob <= 1"),
            ("BINOMIAL; -1, 0.5", "trial_count >= 0"),
            ("POISSON; abc", "Invalid value"),
            ("POISSON; 0", "mean > 0"),
            ("POISSON; inf", "mean > 0"),
            ("UNIFORM; 3, 3", "lower < upper"),
            ("OCCURRENCE; 1.2, 4", "0 <= event_prob <= 1"),
        ],
    )
    def test_invalid(self, descriptor, message):
        with pytest.raises(ValueError, match=message):
            parse_descriptor(descriptor)

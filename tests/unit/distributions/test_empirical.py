from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_discrete.distributions import (
    DiscreteSample,
    EmpiricalDiscreteDistribution,
    IntegerInterval,
)

OBSERVATIONS = [1, 2, 3, 5, 2, 3, 5, 3, 5, 5]


class TestEmpiricalDiscreteDistribution:
    dist = EmpiricalDiscreteDistribution.compute(OBSERVATIONS)

    def test_statistics(self):
        assert self.dist.count_observations() == 10
        assert self.dist.support == IntegerInterval(1, 5)
        assert self.dist.mean() == pytest.approx(3.4)
        assert self.dist.variance() == pytest.approx(2.04)
        assert self.dist.median() == 3.0
        assert self.dist.stderr() == pytest.approx(0.451664, abs=1e-6)

    @pytest.mark.parametrize(
        "k, expected_result",
        [(0, 0.0), (1, 0.1), (2, 0.3), (3, 0.6), (4, 0.6), (5, 1.0), (6, 1.0)],
    )
    def test_cdf(self, k, expected_result):
        assert self.dist.cdf(k) == pytest.approx(expected_result)

    def test_pmf(self):
        assert self.dist.pmf(4) == 0.0
        assert self.dist.pmf(5) == pytest.approx(0.4)

    def test_equivalent_inputs(self):
        from_counts = EmpiricalDiscreteDistribution.compute({1: 1, 2: 2, 3: 3, 5: 4})
        from_sample = EmpiricalDiscreteDistribution.compute(DiscreteSample(OBSERVATIONS))

        for other in (from_counts, from_sample):
            assert other.count_observations() == 10
            assert other.pmf_table == self.dist.pmf_table

    def test_requires_observations(self):
        with pytest.raises(ValueError, match="At least one observation"):
            EmpiricalDiscreteDistribution.compute([])

    def test_single_observation(self):
        dist = EmpiricalDiscreteDistribution.compute([7])

        assert dist.mean() == 7.0
        assert dist.stderr() == 0.0
        assert dist.sample(5, None).counts() == {7: 5}

    def test_repr(self):
        assert repr(self.dist) == "EmpiricalDiscreteDistribution(count=10, support=[1, 5])"

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_discrete.distributions import (
    CDFTableLookup,
    IntegerInterval,
    KnuthPoisson,
    NormalApproximation,
)
from pysatl_discrete.exceptions import StrategyRegimeError
from pysatl_discrete.families.builtins.poisson import (
    PoissonDistribution,
    PoissonMethod,
    exact_sampling_table,
    poisson_log_pmf,
    poisson_method,
    poisson_pmf,
)

MEANS = [0.005, 0.05, 0.5, 1.0, 2.5, 9.5, 10.0, 50.0, 200.0, 1000.0]


class TestPoissonFunctions:
    @pytest.mark.parametrize("mean", [0.5, 2.5, 60.0])
    def test_pmf_matches_scipy(self, mean):
        k = np.arange(-2, 120)

        np.testing.assert_allclose(
            poisson_pmf(k, mean), stats.poisson.pmf(k, mean), rtol=1e-10, atol=1e-300
        )

    def test_log_pmf(self):
        assert poisson_log_pmf(0, 2.0) == pytest.approx(-2.0)
        assert poisson_log_pmf(-1, 2.0) == -math.inf

    @pytest.mark.parametrize("mean", [0.0, -1.0, math.inf, math.nan])
    def test_rejects_invalid_means(self, mean):
        with pytest.raises(ValueError, match="positive and finite"):
            poisson_pmf(1, mean)

    @pytest.mark.parametrize(
        "mean, expected_result",
        [
            (0.001, PoissonMethod.EXACT),
            (0.999, PoissonMethod.EXACT),
            (1.0, PoissonMethod.KNUTH),
            (49.9, PoissonMethod.KNUTH),
            (50.0, PoissonMethod.NORMAL),
            (1.0e6, PoissonMethod.NORMAL),
        ],
    )
    def test_method(self, mean, expected_result):
        assert poisson_method(mean) is expected_result

    def test_exact_sampling_table(self):
        table = exact_sampling_table(0.5)
        k = table.size - 2

        assert table[-1] == 1.0
        assert 1.0 - table[-2] < 1e-15
        assert 1.0 - table[-3] >= 1e-15
        np.testing.assert_allclose(table[:-1], stats.poisson.cdf(np.arange(k + 1), 0.5))

    def test_exact_sampling_table_rejects_large_means(self):
        with pytest.raises(StrategyRegimeError, match="too large"):
            exact_sampling_table(60.0)


class TestPoissonDistribution:
    @pytest.mark.parametrize(
        "mean, method, strategy",
        [
            (0.5, PoissonMethod.EXACT, CDFTableLookup),
            (2.5, PoissonMethod.KNUTH, KnuthPoisson),
            (75.0, PoissonMethod.NORMAL, NormalApproximation),
        ],
    )
    def test_strategy(self, mean, method, strategy):
        dist = PoissonDistribution(mean)

        assert dist.method is method
        assert isinstance(dist.sampling_strategy, strategy)

    def test_rejects_invalid_mean(self):
        with pytest.raises(ValueError):
            PoissonDistribution(0.0)

    def test_moments(self):
        dist = PoissonDistribution(2.5)

        assert dist.support == IntegerInterval.NON_NEGATIVE
        assert dist.mean() == 2.5
        assert dist.variance() == 2.5
        assert dist.sdev() == pytest.approx(math.sqrt(2.5))

    @pytest.mark.parametrize(
        "mean, expected_result", [(0.01, 0.0), (0.5, 0.0), (1.0, 1.0), (2.5, 2.0), (100.0, 100.0)]
    )
    def test_median(self, mean, expected_result):
        assert PoissonDistribution(mean).median() == expected_result

    @pytest.mark.parametrize("mean", [0.5, 2.5, 9.5, 75.0])
    def test_cdf_matches_scipy(self, mean):
        dist = PoissonDistribution(mean)

        for k in range(-1, int(mean * 3) + 10):
            assert dist.cdf(k) == pytest.approx(stats.poisson.cdf(k, mean), rel=1e-9, abs=1e-15)

    @pytest.mark.parametrize("mean", MEANS)
    def test_effective_range_holds_the_mass(self, mean):
        dist = PoissonDistribution(mean)
        effective = dist.effective_range()

        assert effective.lower >= 0
        assert 1.0 - dist.cdf_over(effective) <= 1e-9

    @pytest.mark.parametrize("mean, tolerance", [(0.5, 1e-12), (2.5, 1e-9), (9.5, 1e-9)])
    def test_cache(self, mean, tolerance):
        dist = PoissonDistribution(mean)
        cached = dist.cache()

        assert cached.support == dist.effective_range()
        for k in cached.support:
            assert abs(cached.pmf(k) - dist.pmf(k)) <= tolerance
            assert abs(cached.cdf(k) - dist.cdf(k)) <= tolerance

    @pytest.mark.parametrize("mean", [0.5, 4.0, 75.0])
    def test_sample_moments(self, mean, rng):
        values = PoissonDistribution(mean).sample(50_000, rng).array

        assert values.min() >= 0
        assert values.mean() == pytest.approx(mean, abs=0.03 * math.sqrt(mean) + 0.01)
        assert values.var() == pytest.approx(mean, rel=0.05)

    def test_exact_sampling_frequencies(self, rng):
        sample = PoissonDistribution(0.5).sample(100_000, rng)

        for k in range(4):
            assert abs(sample.frequency(k) - stats.poisson.pmf(k, 0.5)) < 0.01

    def test_display(self):
        lines = PoissonDistribution(0.005).display().splitlines()

        assert len(lines) == 2 + 4
        assert lines[2] == f"  0   {math.exp(-0.005):8.6f}   {math.exp(-0.005):8.6f}"

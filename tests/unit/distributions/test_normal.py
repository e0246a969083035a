from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_discrete.distributions.normal import NormalDistribution
from tests.utils.mocks import SequenceRandom


class TestNormalDistribution:
    dist = NormalDistribution(mean=1.5, sdev=2.0)
    grid = np.linspace(-6.0, 9.0, 31)

    def test_variance(self):
        assert self.dist.variance == 4.0

    @pytest.mark.parametrize(
        "mean, sdev", [(0.0, -1.0), (math.nan, 1.0), (0.0, math.inf)], ids=["neg", "nan", "inf"]
    )
    def test_rejects_invalid_parameters(self, mean, sdev):
        with pytest.raises(ValueError):
            NormalDistribution(mean, sdev)

    def test_pdf_matches_scipy(self):
        expected = stats.norm.pdf(self.grid, loc=1.5, scale=2.0)
        np.testing.assert_allclose(self.dist.pdf(self.grid), expected, rtol=1e-12)

    def test_cdf_matches_scipy(self):
        expected = stats.norm.cdf(self.grid, loc=1.5, scale=2.0)
        np.testing.assert_allclose(self.dist.cdf(self.grid), expected, rtol=1e-10, atol=1e-14)

    def test_ppf_inverts_cdf(self):
        p = np.array([0.01, 0.25, 0.5, 0.75, 0.99])

        np.testing.assert_allclose(self.dist.cdf(self.dist.ppf(p)), p, rtol=1e-10)
        assert float(self.dist.ppf(0.5)) == pytest.approx(1.5)

    def test_ppf_rejects_non_probabilities(self):
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            self.dist.ppf(1.5)

    def test_draw(self, rng):
        assert self.dist.draw(SequenceRandom([0.5])) == 1.5
        assert isinstance(self.dist.draw(rng), float)

    def test_draws_moments(self, rng):
        values = self.dist.draws(50_000, rng)

        assert values.shape == (50_000,)
        assert values.mean() == pytest.approx(1.5, abs=0.05)
        assert values.std() == pytest.approx(2.0, abs=0.05)

    def test_zero_deviation_is_point_mass(self, rng):
        point = NormalDistribution(3.0, 0.0)

        np.testing.assert_array_equal(point.draws(5, rng), np.full(5, 3.0))

    def test_zero_deviation_distribution_functions(self):
        point = NormalDistribution(3.0, 0.0)
        x = np.array([2.0, 3.0, 4.0])

        with np.errstate(all="raise"):
            np.testing.assert_array_equal(point.pdf(x), [0.0, np.inf, 0.0])
            np.testing.assert_array_equal(point.cdf(x), [0.0, 1.0, 1.0])
            np.testing.assert_array_equal(point.ppf([0.0, 0.5, 1.0]), [3.0, 3.0, 3.0])

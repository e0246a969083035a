from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_discrete.distributions import (
    CompactDiscreteDistribution,
    IntegerInterval,
    InverseTransform,
    ProbabilityMassTable,
)
from tests.utils.mocks import MockDiscreteDistribution, SequenceRandom


@pytest.fixture
def compact() -> CompactDiscreteDistribution:
    return CompactDiscreteDistribution(ProbabilityMassTable.create(2, [0.1, 0.2, 0.3, 0.4]))


class TestCompactDiscreteDistribution:
    def test_tables(self, compact):
        assert compact.support == IntegerInterval(2, 5)
        assert compact.effective_range() == compact.support
        assert compact.cdf_table == compact.pmf_table.cdf()
        assert isinstance(compact.sampling_strategy, InverseTransform)

    def test_rejects_unnormalized_table(self):
        with pytest.raises(ValueError, match="not normalized"):
            CompactDiscreteDistribution(ProbabilityMassTable.create(0, [0.2, 0.2]))

    @pytest.mark.parametrize(
        "k, pmf, cdf",
        [(1, 0.0, 0.0), (2, 0.1, 0.1), (3, 0.2, 0.3), (5, 0.4, 1.0), (6, 0.0, 1.0)],
    )
    def test_pmf_and_cdf(self, compact, k, pmf, cdf):
        assert compact.pmf(k) == pytest.approx(pmf)
        assert compact.cdf(k) == pytest.approx(cdf)

    def test_cdf_between(self, compact):
        assert compact.cdf_between(2, 4) == pytest.approx(0.5)
        assert compact.cdf_over(IntegerInterval(3, 4)) == pytest.approx(0.5)

    def test_moments_come_from_tables(self, compact):
        assert compact.mean() == pytest.approx(4.0)
        assert compact.variance() == pytest.approx(1.0)
        assert compact.median() == 4.0
        assert compact.median_range() == IntegerInterval(4, 4)

    def test_sampling_inverts_cdf(self, compact, rng):
        sample = compact.sample(3, SequenceRandom([0.05, 0.5, 0.95]))
        assert list(sample) == [2, 4, 5]

        frequencies = compact.sample(100_000, rng)
        for k, p in zip(range(2, 6), [0.1, 0.2, 0.3, 0.4], strict=True):
            assert abs(frequencies.frequency(k) - p) < 0.01

    def test_cache_returns_self(self, compact):
        assert compact.cache() is compact

    @pytest.mark.usefixtures("fast_moments")
    def test_tabulate_does_not_keep_source(self):
        source = MockDiscreteDistribution([0.5, 0.5])
        cached = CompactDiscreteDistribution.tabulate(source)
        draws_before = source.draw_count

        cached.sample(100, SequenceRandom([0.3, 0.7]))

        assert source.draw_count == draws_before
        np.testing.assert_allclose(cached.pmf_table.values, [0.5, 0.5])

    def test_display_and_repr(self, compact):
        lines = compact.display().splitlines()

        assert lines[2] == "  2   0.100000   0.100000"
        assert len(lines) == 2 + 4
        assert repr(compact) == "CompactDiscreteDistribution(support=[2, 5])"

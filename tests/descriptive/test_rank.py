"""
Tests for rank(): 0-based ranks with midpoint ties.
"""

import numpy as np
import pytest
from scipy.stats import rankdata

from pycorrstats.descriptive import rank


class TestRankDistinct:

    def test_strictly_decreasing_1000(self):
        values = np.arange(1000, 0, -1, dtype=np.float64)
        ranks = rank(values)
        assert np.all(np.diff(ranks) < 0)
        np.testing.assert_array_equal(ranks, np.arange(999, -1, -1))

    def test_zero_based(self):
        np.testing.assert_array_equal(rank([30.0, 10.0, 20.0]), [2.0, 0.0, 1.0])

    def test_input_not_mutated(self):
        values = np.array([3.0, 1.0, 2.0])
        rank(values)
        np.testing.assert_array_equal(values, [3.0, 1.0, 2.0])

    def test_list_input(self):
        ranks = rank([2, 1, 3])
        assert isinstance(ranks, np.ndarray)
        assert ranks.dtype == np.float64
        np.testing.assert_array_equal(ranks, [1.0, 0.0, 2.0])


class TestRankTies:

    def test_forced_duplicate_pair(self):
        """Positions 199 and 200 both hold 800 and share rank 799.5."""
        values = np.arange(999, -1, -1, dtype=np.float64)
        values[200] = 800.0
        ranks = rank(values)
        assert ranks[199] == 799.5
        assert ranks[200] == 799.5

    def test_three_way_tie_midpoint(self):
        values = [0.0, 1.0, 2.0, 3.0, 4.0, 7.0, 7.0, 7.0, 9.0]
        ranks = rank(values)
        np.testing.assert_array_equal(ranks[5:8], [6.0, 6.0, 6.0])
        assert ranks[8] == 8.0

    def test_two_way_tie_midpoint(self):
        ranks = rank([5.0, 0.0, 1.0, 2.0, 4.0, 4.0])
        np.testing.assert_array_equal(ranks[4:], [3.5, 3.5])
        assert ranks[0] == 5.0

    def test_trailing_tie_run_gets_midpoint(self):
        """A tie run that ends at the largest value is still corrected."""
        ranks = rank([1.0, 9.0, 9.0, 9.0])
        np.testing.assert_array_equal(ranks, [0.0, 2.0, 2.0, 2.0])

    def test_all_equal(self):
        np.testing.assert_array_equal(rank([4.0] * 5), [2.0] * 5)

    def test_equal_values_equal_ranks(self, rng):
        values = rng.integers(0, 10, size=300).astype(np.float64)
        ranks = rank(values)
        for v in np.unique(values):
            assert len(np.unique(ranks[values == v])) == 1

    def test_matches_scipy_average_rank(self, rng):
        values = rng.integers(0, 25, size=150).astype(np.float64)
        np.testing.assert_allclose(rank(values), rankdata(values, method='average') - 1.0)


class TestRankMissing:

    def test_nan_gets_nan_rank(self):
        ranks = rank([2.0, np.nan, 1.0])
        np.testing.assert_array_equal(ranks[[0, 2]], [1.0, 0.0])
        assert np.isnan(ranks[1])

    def test_nan_does_not_join_trailing_tie(self):
        ranks = rank([3.0, 3.0, np.nan, 1.0, np.nan])
        np.testing.assert_array_equal(ranks[[0, 1, 3]], [1.5, 1.5, 0.0])
        assert np.isnan(ranks[2]) and np.isnan(ranks[4])

    @pytest.mark.parametrize("values", [[], [np.nan], [np.nan, np.nan]])
    def test_degenerate(self, values):
        ranks = rank(values)
        assert len(ranks) == len(values)
        assert np.all(np.isnan(ranks))

    def test_single_value(self):
        np.testing.assert_array_equal(rank([42.0]), [0.0])

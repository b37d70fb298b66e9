"""
Tests for the linear-pass helpers: mean, sum, min, max, standard_deviation.
"""

import math

import numpy as np
import pytest

from pycorrstats import descriptive as ds


class TestKnownValues:

    def test_mean(self, sample_values):
        assert ds.mean(sample_values) == 43.25

    def test_sum(self, sample_values):
        assert ds.sum(sample_values) == 259.5

    def test_min(self, sample_values):
        assert ds.min(sample_values) == 3.5

    def test_max(self, sample_values):
        assert ds.max(sample_values) == 93.0

    def test_standard_deviation_matches_numpy(self, rng):
        values = rng.standard_normal(200) * 3.0 + 10.0
        np.testing.assert_allclose(
            ds.standard_deviation(values), np.std(values, ddof=1), rtol=1e-10
        )

    def test_standard_deviation_small(self):
        # var([1, 2, 3]) = 1 with the n - 1 denominator
        assert ds.standard_deviation([1.0, 2.0, 3.0]) == pytest.approx(1.0)


class TestMissingValuesOmitted:

    def test_all_helpers_skip_nan(self, sample_values):
        values = sample_values + [np.nan]
        assert ds.mean(values) == 43.25
        assert ds.sum(values) == 259.5
        assert ds.min(values) == 3.5
        assert ds.max(values) == 93.0
        assert ds.standard_deviation(values) == pytest.approx(
            np.std(sample_values, ddof=1)
        )

    def test_no_valid_values(self):
        values = [np.nan, np.nan]
        assert math.isnan(ds.mean(values))
        assert ds.sum(values) == 0.0
        assert math.isnan(ds.min(values))
        assert math.isnan(ds.max(values))
        assert math.isnan(ds.standard_deviation(values))

    def test_empty(self):
        assert math.isnan(ds.mean([]))
        assert math.isnan(ds.min([]))
        assert math.isnan(ds.max([]))


class TestDegenerate:

    def test_single_value_sd_is_nan(self):
        assert math.isnan(ds.standard_deviation([4.0]))

    def test_constant_sd_is_zero(self):
        assert ds.standard_deviation([2.5] * 10) == 0.0

"""
Tests for cor(): correlation matrices over the scalar coefficients.
"""

import numpy as np
import pytest

from pycorrstats.core.exceptions import ValidationError
from pycorrstats.descriptive import cor, pearson, spearman, kendall


class TestCorMatrix:

    @pytest.mark.parametrize("method", ['pearson', 'spearman', 'kendall'])
    def test_diagonal_and_symmetry(self, rng, method):
        data = rng.standard_normal((30, 4))
        C = cor(data, method=method).correlation_matrix
        assert C.shape == (4, 4)
        np.testing.assert_array_equal(np.diag(C), 1.0)
        np.testing.assert_array_equal(C, C.T)

    @pytest.mark.parametrize("method,func", [
        ('pearson', pearson), ('spearman', spearman), ('kendall', kendall),
    ])
    def test_entries_match_scalar_functions(self, rng, method, func):
        data = rng.standard_normal((25, 3))
        C = cor(data, method=method).correlation_matrix
        assert C[0, 2] == func(data[:, 0], data[:, 2])

    def test_pearson_matches_numpy_corrcoef(self, rng):
        data = rng.standard_normal((100, 3))
        result = cor(data)
        np.testing.assert_allclose(
            result.correlation_pearson, np.corrcoef(data, rowvar=False), rtol=1e-10
        )

    def test_xy_interface(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        y = np.array([2.0, 4.0, 5.0, 4.0, 5.0])
        result = cor(x, y, method='kendall')
        np.testing.assert_allclose(
            result.correlation_kendall[0, 1], 0.67082039324993692, rtol=1e-12
        )
        assert result.columns == ('x', 'y')

    def test_only_requested_method_populated(self, rng):
        result = cor(rng.standard_normal((10, 2)), method='spearman')
        assert result.correlation_spearman is not None
        assert result.correlation_pearson is None
        assert result.correlation_kendall is None

    def test_unknown_method_raises(self):
        with pytest.raises(ValidationError, match="Unknown correlation method"):
            cor(np.ones((5, 2)), method='distance')

    def test_xy_length_mismatch_raises(self):
        with pytest.raises(ValidationError, match="equal length"):
            cor([1.0, 2.0, 3.0], [1.0, 2.0])


class TestCorUndefinedPairs:

    def test_constant_column_nan_with_warning(self):
        data = np.array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]])
        result = cor(data)
        assert np.isnan(result.correlation_pearson[0, 1])
        assert any("cor_pearson[V1, V2] is undefined" in w for w in result.warnings)

    def test_too_few_rows_nan(self):
        result = cor(np.array([[1.0, 2.0], [2.0, 1.0]]), method='kendall')
        assert np.isnan(result.correlation_kendall[0, 1])
        assert len(result.warnings) == 1


class TestCorMissingData:

    DATA = np.array([
        [1.0, 10.0, 100.0],
        [2.0, np.nan, 200.0],
        [np.nan, 30.0, 300.0],
        [4.0, 40.0, np.nan],
        [5.0, 50.0, 500.0],
        [6.0, 60.0, 600.0],
    ])

    def test_everything_propagates(self):
        C = cor(self.DATA, use='everything').correlation_pearson
        assert np.isnan(C[0, 1])
        np.testing.assert_array_equal(np.diag(C), 1.0)

    def test_complete_obs(self):
        result = cor(self.DATA, method='spearman', use='complete.obs')
        assert result.n_complete == 3
        np.testing.assert_allclose(result.correlation_spearman, np.ones((3, 3)))

    @pytest.mark.parametrize("method", ['pearson', 'spearman', 'kendall'])
    def test_pairwise_complete_obs(self, method):
        result = cor(self.DATA, method=method, use='pairwise.complete.obs')
        np.testing.assert_allclose(result.correlation_matrix, np.ones((3, 3)), rtol=1e-10)
        assert result.pairwise_n[0, 1] == 4
        assert result.pairwise_n[0, 0] == 5

    def test_invalid_use(self):
        with pytest.raises(ValidationError, match="Invalid use="):
            cor(self.DATA, use='na.or.complete')

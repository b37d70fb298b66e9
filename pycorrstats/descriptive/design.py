"""
DescriptiveDesign: data wrapper for the matrix API.

Wraps a data matrix and provides validation and metadata for
describe(), cor() and summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pycorrstats.core.exceptions import ValidationError
from pycorrstats.core.validation import check_array, check_min_samples


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a data matrix (n observations x p variables) that may contain
    NaN values representing missing data. Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data)
        DescriptiveDesign.from_columns(x, y)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _columns: tuple[str, ...] | None

    @classmethod
    def from_array(cls, data) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D or 2D data matrix. Objects exposing .values (pandas
            DataFrame/Series) are unwrapped and their .columns kept as
            column names. 1D input is reshaped to (n, 1).
        """
        if hasattr(data, 'values'):
            columns = tuple(str(c) for c in data.columns) if hasattr(data, 'columns') else None
            data_array = check_array(data.values, 'data')
        else:
            columns = None
            data_array = check_array(data, 'data')

        if data_array.ndim == 1:
            data_array = data_array.reshape(-1, 1)

        return cls._build(data_array, columns=columns)

    @classmethod
    def from_columns(cls, *columns, names: tuple[str, ...] | None = None) -> DescriptiveDesign:
        """
        Build DescriptiveDesign by stacking equal-length 1D samples.

        Used by cor(x, y) to treat two samples as a two-column matrix.
        """
        arrays = [check_array(c, f'column {i}').ravel() for i, c in enumerate(columns)]
        lengths = {len(a) for a in arrays}
        if len(lengths) > 1:
            raise ValidationError(
                f"Columns must have equal length, got {[len(a) for a in arrays]}"
            )
        return cls._build(np.column_stack(arrays), columns=names)

    @classmethod
    def _build(
        cls,
        data: NDArray,
        columns: tuple[str, ...] | None = None,
    ) -> DescriptiveDesign:
        """Internal builder with validation."""
        if data.ndim != 2:
            raise ValidationError(
                f"Data must be 2D (observations x variables), got {data.ndim}D"
            )

        n, p = data.shape
        check_min_samples(data, 1, 'data')

        if p < 1:
            raise ValidationError(f"Need at least 1 variable, got {p}")

        if columns is not None and len(columns) != p:
            raise ValidationError(
                f"Got {len(columns)} column names for {p} variables"
            )

        # NaN is missing data; infinities have no rank or percentile meaning
        non_finite_mask = np.isinf(data)
        if np.any(non_finite_mask):
            loc = np.where(non_finite_mask)
            raise ValidationError(
                f"Data contains infinite values (first at row {loc[0][0]}, col {loc[1][0]})"
            )

        return cls(_data=data, _n=n, _p=p, _columns=columns)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Data matrix (n x p), may contain NaN."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of variables."""
        return self._p

    @property
    def columns(self) -> tuple[str, ...] | None:
        """Column names, or None if not available."""
        return self._columns

    @property
    def n_missing(self) -> int:
        """Total number of missing values."""
        return int(np.sum(np.isnan(self._data)))

    @property
    def has_missing(self) -> bool:
        return bool(np.any(np.isnan(self._data)))

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"DescriptiveDesign(n={self._n}, p={self._p}{missing})"

"""
Interpolated percentiles and Tukey outlier fences.

The percentile of a sample s (NaN removed, sorted ascending, length n)
at p in [0, 100] uses the 0-based position

    index = (n + 1) * (p / 100) - 1

An integral index selects s[index]; otherwise the two neighbours are
blended linearly:

    (ceil - index) * s[floor] + (index - floor) * s[ceil]

This is the (n + 1)p plotting position, Hyndman & Fan type 6 (R's
quantile(type=6), Excel's PERCENTILE.EXC). Positions before the first or
after the last element, which occur only for extreme p on small samples,
are clamped to the sample minimum or maximum.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycorrstats.descriptive._missing import columnwise_clean

# Tukey fence multiplier applied to the interquartile range
FENCE_FACTOR = 1.5


def sorted_clean(values: ArrayLike) -> NDArray:
    """NaN-free, ascending float64 copy of values."""
    return np.sort(columnwise_clean(np.asarray(values, dtype=np.float64).ravel()))


def _valid_percentile(p: float) -> bool:
    if math.isnan(p) or p < 0.0 or p > 100.0:
        warnings.warn(f"Invalid percentile value specified: {p}", stacklevel=3)
        return False
    return True


def _interpolate(sorted_values: NDArray, p: float) -> float:
    """
    Percentile p of an already cleaned, sorted, non-empty array.

    No validation. Callers must pass 0 <= p <= 100.
    """
    n = len(sorted_values)
    index = (n + 1) * (p / 100.0) - 1.0
    floor = math.floor(index)
    ceil = math.ceil(index)

    if floor < 0:
        return float(sorted_values[0])
    if ceil > n - 1:
        return float(sorted_values[n - 1])
    if floor == ceil:
        return float(sorted_values[floor])
    return float(
        (ceil - index) * sorted_values[floor]
        + (index - floor) * sorted_values[ceil]
    )


def percentile(values: ArrayLike, p: float) -> float:
    """
    Interpolated percentile of the non-NaN values.

    Parameters
    ----------
    values : array-like
        1D sample, may contain NaN (ignored).
    p : float
        Percentile in [0, 100].

    Returns
    -------
    float
        NaN when no valid value remains, or when p is outside [0, 100]
        (a UserWarning is emitted in that case).
    """
    p = float(p)
    if not _valid_percentile(p):
        return math.nan
    s = sorted_clean(values)
    if len(s) == 0:
        return math.nan
    return _interpolate(s, p)


def quantiles(values: ArrayLike, percentiles: ArrayLike) -> NDArray:
    """
    Several percentiles of one sample, sorting it only once.

    Invalid entries of percentiles produce NaN (with a warning each).
    """
    ps = np.atleast_1d(np.asarray(percentiles, dtype=np.float64))
    s = sorted_clean(values)
    result = np.full(len(ps), np.nan)
    for i, p in enumerate(ps):
        if _valid_percentile(float(p)) and len(s) > 0:
            result[i] = _interpolate(s, float(p))
    return result


def median(values: ArrayLike) -> float:
    """50th percentile of the non-NaN values."""
    return percentile(values, 50.0)


def first_quartile(values: ArrayLike) -> float:
    """25th percentile of the non-NaN values."""
    return percentile(values, 25.0)


def third_quartile(values: ArrayLike) -> float:
    """75th percentile of the non-NaN values."""
    return percentile(values, 75.0)


def quartile_range(values: ArrayLike) -> tuple[float, float]:
    """(25th percentile, 75th percentile). (NaN, NaN) for no valid value."""
    s = sorted_clean(values)
    if len(s) == 0:
        return math.nan, math.nan
    return _interpolate(s, 25.0), _interpolate(s, 75.0)


def regular_range(values: ArrayLike) -> tuple[float, float]:
    """
    Range outside which a value counts as an outlier (Tukey fences).

    Returns (Q1 - 1.5 * IQR, Q3 + 1.5 * IQR) with IQR = Q3 - Q1.
    """
    q1, q3 = quartile_range(values)
    iqr = q3 - q1
    return q1 - FENCE_FACTOR * iqr, q3 + FENCE_FACTOR * iqr


def min_regular(values: ArrayLike) -> float:
    """Lower Tukey fence, the smallest value not considered an outlier."""
    return regular_range(values)[0]


def max_regular(values: ArrayLike) -> float:
    """Upper Tukey fence, the largest value not considered an outlier."""
    return regular_range(values)[1]

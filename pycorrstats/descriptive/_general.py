"""
Single-pass summary statistics.

NaN values are omitted by every function here. An input with no valid
value gives NaN (sum gives 0.0).
"""

from __future__ import annotations

import builtins
import math

import numpy as np
from numpy.typing import ArrayLike

from pycorrstats.descriptive._missing import columnwise_clean


def _valid(values: ArrayLike) -> np.ndarray:
    return columnwise_clean(np.asarray(values, dtype=np.float64).ravel())


def mean(values: ArrayLike) -> float:
    """Arithmetic mean of the non-NaN values."""
    clean = _valid(values)
    if len(clean) == 0:
        return math.nan
    return float(np.sum(clean) / len(clean))


def sum(values: ArrayLike) -> float:
    """Sum of the non-NaN values."""
    return float(np.sum(_valid(values)))


def min(values: ArrayLike) -> float:
    """Smallest non-NaN value."""
    clean = _valid(values)
    if len(clean) == 0:
        return math.nan
    return float(np.min(clean))


def max(values: ArrayLike) -> float:
    """Largest non-NaN value."""
    clean = _valid(values)
    if len(clean) == 0:
        return math.nan
    return float(np.max(clean))


def standard_deviation(values: ArrayLike) -> float:
    """
    Sample standard deviation (n - 1 denominator) of the non-NaN values.

    Uses the sum-of-squares identity sqrt((sum(x^2) - sum(x)^2 / n) / (n - 1)),
    the same one pearson() uses. Cancellation can push the bracket a hair
    below zero for near-constant data, so it is clipped at 0. Fewer than
    two valid values give NaN.
    """
    clean = _valid(values)
    n = len(clean)
    if n < 2:
        return math.nan
    total = np.sum(clean)
    sum_sq = np.sum(clean * clean)
    return float(math.sqrt(builtins.max(sum_sq - total * total / n, 0.0) / (n - 1)))

"""
Pearson, Spearman and Kendall correlation coefficients.

Every coefficient takes two equal-length samples of at least three
values. Any other shape returns NaN rather than raising, and so does a
NaN anywhere in either sample. Degenerate data (a constant sample)
propagates to NaN through the floating-point division.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycorrstats.descriptive._rank import rank

# Smallest sample a coefficient is defined for
MIN_SAMPLES = 3


def _paired(x: ArrayLike, y: ArrayLike) -> tuple[NDArray, NDArray] | None:
    """float64 views of x and y, or None when the pair has no coefficient."""
    xa = np.asarray(x, dtype=np.float64).ravel()
    ya = np.asarray(y, dtype=np.float64).ravel()
    n = len(xa)
    if n != len(ya) or n < MIN_SAMPLES:
        return None
    if np.isnan(xa).any() or np.isnan(ya).any():
        return None
    return xa, ya


def pearson(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson product-moment correlation coefficient.

    ::

        r = sum((x - mean(x)) * (y - mean(y))) / ((n - 1) * Sx * Sy)

    with the sample standard deviations computed from the sum-of-squares
    identity Sx = sqrt((sum(x^2) - sum(x)^2 / n) / (n - 1)).

    Returns NaN for mismatched lengths, fewer than 3 samples, missing
    values, or a zero standard deviation.
    """
    pair = _paired(x, y)
    if pair is None:
        return math.nan
    xa, ya = pair
    n = len(xa)

    sum_x = np.sum(xa)
    sum_y = np.sum(ya)
    numerator = np.sum((xa - sum_x / n) * (ya - sum_y / n))

    with np.errstate(divide='ignore', invalid='ignore'):
        sx = np.sqrt((np.sum(xa * xa) - sum_x * sum_x / n) / (n - 1))
        sy = np.sqrt((np.sum(ya * ya) - sum_y * sum_y / n) / (n - 1))
        return float(numerator / ((n - 1) * sx * sy))


def spearman(x: ArrayLike, y: ArrayLike) -> float:
    """
    Spearman rank correlation coefficient.

    ::

        rho = 1 - 6 * sum((Rx - Ry)^2) / (n * (n^2 - 1))

    where Rx, Ry are midpoint-tie ranks from rank(). The closed form is
    exact without ties and an approximation with them.

    References:
        Spiegel, Murray R. (1961). Statistics, 2nd Edition (pp 376, 391-393).
    """
    pair = _paired(x, y)
    if pair is None:
        return math.nan
    xa, ya = pair
    n = len(xa)

    d = rank(xa) - rank(ya)
    return float(1.0 - 6.0 * np.sum(d * d) / (n * (n * n - 1.0)))


def kendall(x: ArrayLike, y: ArrayLike) -> float:
    """
    Kendall tau rank correlation coefficient, tie-corrected (tau-b).

    ::

                        concordant - discordant
        tau = -------------------------------------------
              sqrt((n0 - x_ties) * (n0 - y_ties)),  n0 = n(n-1)/2

    A pair (i, j) is tied in x when Rx[i] == Rx[j] and tied in y when
    Ry[i] == Ry[j]; a pair may count in both tie totals, and tied pairs
    are neither concordant nor discordant. Untied pairs are concordant
    when the rank differences share a sign, discordant otherwise.

    Runs over all n(n-1)/2 pairs, one vectorised row at a time.
    """
    pair = _paired(x, y)
    if pair is None:
        return math.nan
    xa, ya = pair
    n = len(xa)

    rx = rank(xa)
    ry = rank(ya)

    concordant = 0
    discordant = 0
    x_ties = 0
    y_ties = 0
    for i in range(n - 1):
        x_rel = rx[i + 1:] - rx[i]
        y_rel = ry[i + 1:] - ry[i]

        x_tied = x_rel == 0.0
        y_tied = y_rel == 0.0
        x_ties += int(x_tied.sum())
        y_ties += int(y_tied.sum())

        untied = ~(x_tied | y_tied)
        same_sign = (x_rel > 0.0) == (y_rel > 0.0)
        concordant += int((untied & same_sign).sum())
        discordant += int((untied & ~same_sign).sum())

    n0 = n * (n - 1) / 2.0
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(
            np.float64(concordant - discordant)
            / np.sqrt((n0 - x_ties) * (n0 - y_ties))
        )

"""
Tie-aware rank assignment.

Shared by spearman() and kendall() so both coefficients see identical
tie semantics.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycorrstats.descriptive._sort import tandem_sort


def rank(values: ArrayLike) -> NDArray:
    """
    0-based ranks with midpoint ranks for ties.

    Entry i is the position the i-th input value would occupy once the
    input is sorted ascending. Values that tie share the midpoint of the
    positions their run occupies: a run at sorted positions 5, 6, 7 gets
    6.0 for every member, a run at 3, 4 gets 3.5.

    NaN entries are missing observations. They sort after every valid
    value, are excluded from the runs and receive a NaN rank.

    Parameters
    ----------
    values : array-like
        1D sequence of floats. Not modified.

    Returns
    -------
    NDArray
        float64 array of the same length as values.
    """
    data = np.array(values, dtype=np.float64).ravel()
    n = len(data)
    order = np.arange(n, dtype=np.float64)

    tandem_sort(data, order)

    n_valid = n - int(np.isnan(data).sum())
    sorted_ranks = np.arange(n, dtype=np.float64)
    sorted_ranks[n_valid:] = np.nan

    # A run of equal values starts at last_diff and ends just before the
    # first strictly greater value (or at the end of the valid block).
    last_diff = 0
    for i in range(1, n_valid + 1):
        if i < n_valid and not data[i] > data[last_diff]:
            continue
        if i - last_diff > 1:
            sorted_ranks[last_diff:i] = last_diff + ((i - 1) - last_diff) / 2.0
        last_diff = i

    ranks = np.empty(n, dtype=np.float64)
    ranks[order.astype(np.intp)] = sorted_ranks
    return ranks

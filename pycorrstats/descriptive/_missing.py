"""
Missing data handling.

NaN is the missing-value marker throughout the package. The scalar
functions simply drop it (columnwise_clean); the matrix API additionally
supports three policies selected with use=:

- 'everything': keep all rows; a correlation pair touching NaN is NaN
- 'complete.obs': listwise deletion (drop rows with any NaN)
- 'pairwise.complete.obs': per (i, j) pair, use only rows valid in both
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import NDArray

from pycorrstats.core.exceptions import ValidationError


UseMethod = Literal['everything', 'complete.obs', 'pairwise.complete.obs']

USE_METHODS = ('everything', 'complete.obs', 'pairwise.complete.obs')


def columnwise_clean(col: NDArray) -> NDArray:
    """Return the non-NaN entries of a 1D array, in their original order."""
    return col[~np.isnan(col)]


def pairwise_mask(xi: NDArray, xj: NDArray) -> NDArray:
    """Boolean mask of the positions where both xi and xj are non-NaN."""
    return ~(np.isnan(xi) | np.isnan(xj))


def complete_rows(data: NDArray) -> NDArray:
    """Boolean mask of the rows of a 2D array that contain no NaN."""
    return ~np.any(np.isnan(data), axis=1)


def apply_use_policy(data: NDArray, use: str) -> tuple[NDArray, int]:
    """
    Apply a missing data policy to an (n, p) matrix.

    Parameters
    ----------
    data : NDArray
        (n, p) data matrix, may contain NaN.
    use : str
        'everything', 'complete.obs', or 'pairwise.complete.obs'.

    Returns
    -------
    clean_data : NDArray
        For 'complete.obs', the rows without NaN. For the other policies
        the input unchanged; their NaN handling is per operation.
    n_complete : int
        Number of rows without NaN.

    Raises
    ------
    ValidationError
        Unknown policy, or 'complete.obs' with no complete row.
    """
    if use not in USE_METHODS:
        raise ValidationError(
            f"Invalid use= parameter: {use!r}. "
            f"Must be 'everything', 'complete.obs', or 'pairwise.complete.obs'."
        )

    mask = complete_rows(data)
    n_complete = int(mask.sum())

    if use != 'complete.obs':
        return data, n_complete

    if n_complete < 1:
        raise ValidationError(
            "No complete observations (all rows contain NaN). "
            "Consider using use='pairwise.complete.obs'."
        )
    return data[mask], n_complete

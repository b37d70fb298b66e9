"""
Solver dispatch for the matrix API.

Provides describe() as the comprehensive entry point, plus cor() and
summary().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pycorrstats.core.exceptions import ValidationError
from pycorrstats.descriptive.design import DescriptiveDesign
from pycorrstats.descriptive.solution import DescriptiveSolution
from pycorrstats.descriptive.backends.cpu import CPUDescriptiveBackend
from pycorrstats.descriptive._missing import UseMethod


CorMethod = Literal['pearson', 'spearman', 'kendall']


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    use: UseMethod = 'everything',
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes per column: mean, sum, min, max, standard deviation,
    quartiles, regular (non-outlier) range and the six-number summary;
    plus the Pearson correlation matrix.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D or 2D data matrix.
    use : str
        Missing data handling. 'everything' (per-column statistics skip
        NaN, correlation pairs touching NaN are NaN), 'complete.obs'
        (listwise deletion), 'pairwise.complete.obs' (pairwise deletion
        for correlations).

    Returns
    -------
    DescriptiveSolution with all statistics populated.
    """
    design = _ensure_design(data)

    compute = {
        'mean', 'sum', 'min', 'max', 'sd',
        'quartiles', 'regular_range', 'summary', 'cor_pearson',
    }
    result = CPUDescriptiveBackend().solve(design, compute=compute, use=use)

    return DescriptiveSolution(_result=result, _design=design)


def cor(
    x: ArrayLike | DescriptiveDesign,
    y: ArrayLike | None = None,
    *,
    method: CorMethod = 'pearson',
    use: UseMethod = 'everything',
) -> DescriptiveSolution:
    """
    Compute a correlation matrix.

    Parameters
    ----------
    x : array-like or DescriptiveDesign
        2D data matrix (columns are variables), or DescriptiveDesign.
    y : array-like, optional
        Second variable (1D). If provided, computes cor(x, y) by
        stacking x and y as a 2-column matrix.
    method : str
        'pearson', 'spearman', 'kendall'.
    use : str
        Missing data handling.

    Returns
    -------
    DescriptiveSolution with the method's correlation matrix populated.
    Pairs without a defined coefficient are NaN and listed in warnings.
    """
    if method not in ('pearson', 'spearman', 'kendall'):
        raise ValidationError(
            f"Unknown correlation method: {method!r}. "
            f"Must be 'pearson', 'spearman', or 'kendall'."
        )

    if y is not None:
        design = DescriptiveDesign.from_columns(x, y, names=('x', 'y'))
    else:
        design = _ensure_design(x)

    result = CPUDescriptiveBackend().solve(
        design, compute={f'cor_{method}'}, use=use,
    )

    return DescriptiveSolution(_result=result, _design=design)


def summary(
    x: ArrayLike | DescriptiveDesign,
    *,
    use: UseMethod = 'everything',
) -> DescriptiveSolution:
    """
    Compute the six-number summary (Min, Q1, Median, Mean, Q3, Max).

    Quartiles use the (n + 1)p interpolated percentile.

    Parameters
    ----------
    x : array-like or DescriptiveDesign
        1D or 2D data.
    use : str
        Missing data handling.

    Returns
    -------
    DescriptiveSolution with summary_table populated.
    """
    design = _ensure_design(x)
    result = CPUDescriptiveBackend().solve(design, compute={'summary', 'mean'}, use=use)

    return DescriptiveSolution(_result=result, _design=design)

"""
Descriptive statistics module.

Scalar API (1D samples, NaN = missing):
    mean, sum, min, max, standard_deviation
    percentile, quantiles, median, first_quartile, third_quartile
    quartile_range, regular_range, min_regular, max_regular
    pearson, spearman, kendall
    rank, tandem_sort, triplet_sort

Matrix API:
    describe(data)  - All statistics at once
    cor(x)          - Correlation matrix (Pearson, Spearman, Kendall)
    summary(x)      - Six-number summary (Min, Q1, Median, Mean, Q3, Max)
"""

from pycorrstats.descriptive._general import (
    mean,
    sum,
    min,
    max,
    standard_deviation,
)
from pycorrstats.descriptive._percentile import (
    percentile,
    quantiles,
    median,
    first_quartile,
    third_quartile,
    quartile_range,
    regular_range,
    min_regular,
    max_regular,
)
from pycorrstats.descriptive._rank import rank
from pycorrstats.descriptive._sort import tandem_sort, triplet_sort
from pycorrstats.descriptive.correlation import pearson, spearman, kendall
from pycorrstats.descriptive.design import DescriptiveDesign
from pycorrstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pycorrstats.descriptive.solvers import describe, cor, summary

__all__ = [
    # Linear-pass helpers
    "mean",
    "sum",
    "min",
    "max",
    "standard_deviation",
    # Percentiles
    "percentile",
    "quantiles",
    "median",
    "first_quartile",
    "third_quartile",
    "quartile_range",
    "regular_range",
    "min_regular",
    "max_regular",
    # Ranks and co-sorting
    "rank",
    "tandem_sort",
    "triplet_sort",
    # Correlation
    "pearson",
    "spearman",
    "kendall",
    # Matrix API
    "describe",
    "cor",
    "summary",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]

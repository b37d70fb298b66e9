"""
PyCorrStats: descriptive statistics and rank correlation for Python.

Robust, numerically well-defined statistical primitives over float
samples in which NaN marks a missing observation. Undefined results
(too few samples, zero variance, no valid data) come back as NaN.

Submodules:
    descriptive: Summary statistics, percentiles, ranks, correlation
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from pycorrstats import descriptive
from pycorrstats.descriptive import (
    pearson,
    spearman,
    kendall,
    percentile,
    median,
    describe,
    cor,
)

__all__ = [
    "__version__",
    "descriptive",
    "pearson",
    "spearman",
    "kendall",
    "percentile",
    "median",
    "describe",
    "cor",
]

"""
Exception hierarchy for PyCorrStats.

All exceptions inherit from PyCorrStatsError to allow catching any
library-specific error.

Only API misuse raises. Degenerate numeric input (too few samples,
zero variance, all-missing data) is reported through a NaN result,
never through an exception.
"""


class PyCorrStatsError(Exception):
    """Base exception for all PyCorrStats errors."""
    pass


class ValidationError(PyCorrStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. an
    unknown correlation method or missing-data policy.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when sequences sorted together have different lengths.

    Attributes:
        lengths: Observed lengths keyed by parameter name, if known
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths

"""
Core infrastructure for PyCorrStats.

Shared abstractions used by the descriptive module:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pycorrstats.core.result import Result
from pycorrstats.core.exceptions import (
    PyCorrStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyCorrStatsError",
    "ValidationError",
    "DimensionError",
]

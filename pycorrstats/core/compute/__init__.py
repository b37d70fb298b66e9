"""
Shared compute infrastructure for PyCorrStats.

Domain backends live in {domain}/backends/. This module holds the
utilities they share.

Submodules:
    timing: Execution timing utilities
"""

from pycorrstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]

"""
Generic result container for PyCorrStats computations.

The Result class is the envelope every backend returns. It carries the
domain payload plus timing, non-fatal warnings and provenance so that a
number can always be traced back to the code and library versions that
produced it.
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Version information recorded on every Result."""
    from pycorrstats import __version__

    return {
        'pycorrstats_version': __version__,
        'python_version': platform.python_version(),
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (statistics, matrices)
        info: Structured metadata (missing-data policy, what was computed)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Algorithm and version metadata

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(mean=np.array([2.0])),
        ...     info={'use': 'everything', 'computed': ['mean']},
        ...     timing={'total_seconds': 0.001, 'mean': 0.0002},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

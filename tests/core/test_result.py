"""
Tests for the Result[P] envelope.
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pycorrstats
from pycorrstats.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**overrides):
    kwargs = dict(
        params=FakeParams(value=0.5),
        info={"use": "everything"},
        timing={"total_seconds": 0.01},
        backend_name="cpu_descriptive",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _make()
        assert result.params.value == 0.5
        assert result.info["use"] == "everything"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_descriptive"

    def test_timing_may_be_none(self):
        assert _make(timing=None).timing is None

    def test_warnings_default_empty(self):
        assert _make().warnings == ()


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=1.0)


class TestProvenance:

    def test_default_provenance_versions(self):
        prov = _default_provenance()
        assert prov["pycorrstats_version"] == pycorrstats.__version__
        assert prov["numpy_version"] == np.__version__
        assert "python_version" in prov

    def test_result_gets_default_provenance(self):
        assert "numpy_version" in _make().provenance

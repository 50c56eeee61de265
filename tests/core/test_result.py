"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.result import Result
from pymatrix.linalg._common import DeterminantParams


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cofactor",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=DeterminantParams(value=-12),
            info={"method": "cofactor", "dimension": 3},
            timing={"total_seconds": 0.01},
            backend_name="cofactor",
        )
        assert result.params.value == -12
        assert result.info["dimension"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cofactor"

    def test_timing_none(self):
        assert _result().timing is None

    def test_timing_with_breakdown(self):
        result = _result(
            timing={"total_seconds": 1.0, "determinant": 0.6, "adjugate": 0.4}
        )
        assert result.timing["adjugate"] == 0.4


# ═══════════════════════════════════════════════════════════════════════
# Defaults and immutability
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_explicit(self):
        result = _result(warnings=("slow", "ill-conditioned"))
        assert len(result.warnings) == 2


class TestImmutability:
    """Result is frozen; no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_backend_name(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "lapack"


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:
    """has_warning() checks for substring in any warning."""

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("cofactor expansion of a 10x10 matrix costs O(n!)",))
        assert result.has_warning("O(n!)") is True
        assert result.has_warning("10x10") is True

    def test_no_match(self):
        result = _result(warnings=("ill-conditioned",))
        assert result.has_warning("singular") is False

"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings tuple
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pypenalized.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "L-BFGS-B"},
            timing={"total_seconds": 0.5},
            backend_name="cpu_lbfgsb",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "L-BFGS-B"
        assert result.timing["total_seconds"] == 0.5
        assert result.backend_name == "cpu_lbfgsb"

    def test_timing_optional(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert result.timing is None

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert result.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)

    def test_cannot_reassign_warnings(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("late",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="x",
            warnings=("Optimization did not converge: iteration limit",),
        )
        assert result.has_warning("did not converge")
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert not result.has_warning("anything")

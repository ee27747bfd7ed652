"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object and complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_length: exact vector length
    - check_step_size: positive finite step sizes
"""

import numpy as np
import pytest

from pypenalized.core.exceptions import (
    DimensionError,
    InvalidStepSizeError,
    ShapeMismatchError,
    ValidationError,
)
from pypenalized.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_length,
    check_min_samples,
    check_ndim,
    check_step_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "X")
        assert np.issubdtype(result.dtype, np.floating)

    def test_float_array_passthrough(self):
        arr = np.array([1.0, 2.0, 3.0])
        assert check_array(arr, "X").dtype == np.float64

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="X"):
            check_array(["a", "b"], "X")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError):
            check_array(np.array([1, "a", None], dtype=object), "X")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "X")

    @pytest.mark.parametrize("dtype", [np.complex64, np.complex128])
    def test_complex_rejected(self, dtype):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([1.0, 2.0], dtype=dtype), "b")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "y")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "y")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 1.0]), "y")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros((2, 3, 4)), 3, "T")

    def test_check_ndim_fails(self):
        with pytest.raises(DimensionError, match="expected 3D"):
            check_ndim(np.zeros((2, 3)), 3, "T")

    def test_check_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "b")

    def test_check_2d(self):
        check_2d(np.zeros((3, 1)), "X")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "X")


# ═══════════════════════════════════════════════════════════════════════
# Lengths
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_matching(self):
        check_consistent_length(np.zeros(5), np.zeros((5, 2)), names=("y", "X"))

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="y=4, X=5"):
            check_consistent_length(np.zeros(4), np.zeros((5, 2)), names=("y", "X"))

    def test_single_array_ok(self):
        check_consistent_length(np.zeros(3), names=("y",))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("y",))


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(3), 3, "y")

    def test_too_few(self):
        with pytest.raises(ValidationError, match="at least 3"):
            check_min_samples(np.zeros(2), 3, "y")


class TestCheckLength:

    def test_exact(self):
        check_length(np.zeros(4), 4, "start")

    @pytest.mark.parametrize("n", [3, 5])
    def test_mismatch(self, n):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_length(np.zeros(n), 4, "start")
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == n
        assert "start" in str(exc_info.value)


# ═══════════════════════════════════════════════════════════════════════
# check_step_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckStepSize:

    @pytest.mark.parametrize("step", [1e-7, 1e-3, 1, np.float32(1e-4)])
    def test_valid(self, step):
        check_step_size(step, "eps")

    @pytest.mark.parametrize("step", [0.0, -1e-7, np.inf, -np.inf, np.nan])
    def test_invalid_value(self, step):
        with pytest.raises(InvalidStepSizeError, match="positive finite"):
            check_step_size(step, "eps")

    def test_rejected_value_recorded(self):
        with pytest.raises(InvalidStepSizeError) as exc_info:
            check_step_size(-0.5, "eps")
        assert exc_info.value.step == -0.5

    @pytest.mark.parametrize("step", ["small", None])
    def test_not_a_number(self, step):
        with pytest.raises(InvalidStepSizeError, match="not a number"):
            check_step_size(step, "eps")

"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of non-real data
    - check_finite: NaN/Inf detection
    - check_2d: dimensionality
    - check_size / check_zero_limit: scalar arguments
    - check_square / check_same_shape / check_inner_dims: operand shapes
    - check_index: bounds checking without wraparound
"""

import numpy as np
import pytest

from densematrix.core.exceptions import (
    BoundsError,
    ShapeMismatchError,
    ValidationError,
)
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_inner_dims,
    check_same_shape,
    check_size,
    check_square,
    check_zero_limit,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-real data."""

    def test_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_float32_promoted(self):
        result = check_array(np.ones((2, 2), dtype=np.float32), "A")
        assert result.dtype == np.float64

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="A"):
            check_array([["a", "b"]], "A")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([[1 + 2j]]), "A")

    def test_mixed_objects_rejected(self):
        with pytest.raises(ValidationError):
            check_array(np.array([1, "x", None], dtype=object), "A")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "A")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "A")


class TestCheck2d:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "A")

    def test_1d_rejected(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            check_2d(np.zeros(3), "A")


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    def test_zero_allowed(self):
        assert check_size(0, "nrows") == 0

    def test_numpy_integer_allowed(self):
        assert check_size(np.int64(3), "nrows") == 3

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="nrows"):
            check_size(-1, "nrows")

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            check_size(2.0, "nrows")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_size(True, "nrows")


class TestCheckZeroLimit:

    def test_default_value(self):
        assert check_zero_limit(1e-9) == 1e-9

    def test_zero_allowed(self):
        assert check_zero_limit(0) == 0.0

    @pytest.mark.parametrize("bad", [-1e-9, float("nan"), float("inf"), "1e-9"])
    def test_invalid_rejected(self, bad):
        with pytest.raises(ValidationError, match="zero_limit"):
            check_zero_limit(bad)


# ═══════════════════════════════════════════════════════════════════════
# Operand shapes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_square_passes(self):
        check_square((3, 3), "inverse")

    def test_non_square_rejected(self):
        with pytest.raises(ShapeMismatchError, match="2x3") as excinfo:
            check_square((2, 3), "inverse")
        assert excinfo.value.operation == "inverse"
        assert excinfo.value.left_shape == (2, 3)

    def test_same_shape_rejected(self):
        with pytest.raises(ShapeMismatchError) as excinfo:
            check_same_shape((2, 3), (3, 2), "add")
        assert excinfo.value.right_shape == (3, 2)

    def test_inner_dims_pass(self):
        check_inner_dims((2, 3), (3, 5), "multiply")

    def test_inner_dims_rejected(self):
        with pytest.raises(ShapeMismatchError, match="3 != 4"):
            check_inner_dims((2, 3), (4, 2), "multiply")


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(1, 2, (2, 3)) == (1, 2)

    def test_row_out_of_range(self):
        with pytest.raises(BoundsError) as excinfo:
            check_index(2, 0, (2, 3))
        assert excinfo.value.index == (2, 0)
        assert excinfo.value.shape == (2, 3)

    def test_negative_not_wrapped(self):
        with pytest.raises(BoundsError):
            check_index(-1, 0, (2, 3))

    def test_non_integer_rejected(self):
        with pytest.raises(BoundsError, match="integer"):
            check_index(0.5, 0, (2, 3))

    def test_empty_matrix_has_no_cells(self):
        with pytest.raises(BoundsError):
            check_index(0, 0, (0, 0))

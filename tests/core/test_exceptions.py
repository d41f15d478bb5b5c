"""
Tests for densematrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DenseMatrixError)
    - Diagnostic attributes on ShapeMismatchError, MalformedInputError,
      BoundsError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from densematrix.core.exceptions import (
    BoundsError,
    DenseMatrixError,
    MalformedInputError,
    NumericalError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DenseMatrixError."""

    def test_validation_error_is_densematrix_error(self):
        with pytest.raises(DenseMatrixError):
            raise ValidationError("bad input")

    def test_shape_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ShapeMismatchError("shapes differ")

    def test_malformed_input_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise MalformedInputError("ragged rows")

    def test_bounds_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise BoundsError("out of range")

    def test_bounds_error_is_index_error(self):
        """Code catching IndexError also catches BoundsError."""
        with pytest.raises(IndexError):
            raise BoundsError("out of range")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_densematrix_error(self):
        with pytest.raises(DenseMatrixError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:

    def test_attributes(self):
        err = ShapeMismatchError(
            "add: shapes must match",
            operation="add",
            left_shape=(2, 3),
            right_shape=(3, 2),
        )
        assert str(err) == "add: shapes must match"
        assert err.operation == "add"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (3, 2)

    def test_defaults_none(self):
        err = ShapeMismatchError("bad")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestMalformedInputError:

    def test_attributes(self):
        err = MalformedInputError("ragged", source="data.csv", line=3)
        assert err.source == "data.csv"
        assert err.line == 3

    def test_defaults_none(self):
        err = MalformedInputError("ragged")
        assert err.source is None
        assert err.line is None


class TestBoundsError:

    def test_attributes(self):
        err = BoundsError("out of range", index=(5, 0), shape=(2, 2))
        assert err.index == (5, 0)
        assert err.shape == (2, 2)


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "Pivot 1 is 0",
            matrix_name="A",
            phase="normalization",
            pivot_index=1,
            pivot_value=0.0,
            zero_limit=1e-9,
        )
        assert str(err) == "Pivot 1 is 0"
        assert err.matrix_name == "A"
        assert err.phase == "normalization"
        assert err.pivot_index == 1
        assert err.pivot_value == 0.0
        assert err.zero_limit == 1e-9

    def test_defaults_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.phase is None
        assert err.pivot_index is None
        assert err.pivot_value is None
        assert err.zero_limit is None

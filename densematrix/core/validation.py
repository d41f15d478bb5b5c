"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.exceptions import (
    ValidationError,
    ShapeMismatchError,
    BoundsError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, jagged rows or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array is not 2D
    """
    if array.ndim != 2:
        raise ValidationError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_size(value: Any, name: str) -> int:
    """
    Verify a dimension argument is a non-negative integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {value}")
    return int(value)


def check_zero_limit(zero_limit: Any) -> float:
    """
    Verify the pivot threshold is a finite, non-negative real number.

    Raises:
        ValidationError: If zero_limit is not a real number, negative or non-finite
    """
    if isinstance(zero_limit, bool) or not isinstance(zero_limit, numbers.Real):
        raise ValidationError(
            f"zero_limit: expected a real number, got {type(zero_limit).__name__}"
        )
    zero_limit = float(zero_limit)
    if not math.isfinite(zero_limit) or zero_limit < 0:
        raise ValidationError(
            f"zero_limit: expected a finite non-negative value, got {zero_limit}"
        )
    return zero_limit


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (nrows, ncols) of the operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If nrows != ncols
    """
    if shape[0] != shape[1]:
        raise ShapeMismatchError(
            f"{operation}: matrix must be square, got {shape[0]}x{shape[1]}",
            operation=operation,
            left_shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: shapes must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.ncols == right.nrows (matrix product).

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: inner dimensions must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]} ({left[1]} != {right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify (i, j) addresses a cell inside a matrix of the given shape.

    Negative indices are out of range; there is no wraparound.

    Returns:
        (i, j) as plain ints

    Raises:
        BoundsError: If either index is not an integer or is out of range
    """
    for label, value in (('row', i), ('column', j)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise BoundsError(
                f"{label} index must be an integer, got {type(value).__name__} {value!r}",
                index=(i, j),
                shape=shape,
            )
    i, j = int(i), int(j)
    if not (0 <= i < shape[0] and 0 <= j < shape[1]):
        raise BoundsError(
            f"index ({i}, {j}) is out of range for a {shape[0]}x{shape[1]} matrix",
            index=(i, j),
            shape=shape,
        )
    return i, j

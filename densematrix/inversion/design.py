"""
InversionDesign: validated input for Gauss-Jordan inversion.

Wraps a square float64 working array together with the pivot threshold.
Follows the design pattern: validation happens once at construction, and
backends receive an immutable, already-checked container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.matrix import Matrix, as_array
from densematrix.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_square,
    check_zero_limit,
)
from densematrix.core.compute.tolerances import ZERO_LIMIT


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for matrix inversion.

    Holds a private copy of the matrix to invert, so later changes to the
    caller's Matrix do not affect a prepared design.

    Construction:
        InversionDesign.from_matrix(matrix, zero_limit=1e-9)
        InversionDesign.from_array(array, zero_limit=1e-9)
    """
    _data: NDArray[np.float64]
    _n: int
    _zero_limit: float

    @classmethod
    def from_matrix(cls, matrix: Matrix, *, zero_limit: float = ZERO_LIMIT) -> InversionDesign:
        """
        Raises:
            ShapeMismatchError: If the matrix is not square
            ValidationError: If the matrix holds NaN or Inf values, or zero_limit
                is negative or not finite
        """
        return cls._build(as_array(matrix).copy(), zero_limit)

    @classmethod
    def from_array(cls, array: ArrayLike, *, zero_limit: float = ZERO_LIMIT) -> InversionDesign:
        """
        Raises:
            ValidationError: If the input is not a finite 2D real array or
                zero_limit is invalid
            ShapeMismatchError: If the array is not square
        """
        data = check_array(array, 'array')
        check_2d(data, 'array')
        return cls._build(np.array(data, dtype=np.float64, copy=True), zero_limit)

    @classmethod
    def _build(cls, data: NDArray[np.float64], zero_limit: Any) -> InversionDesign:
        """Internal builder with validation."""
        check_square(data.shape, 'inverse')
        check_finite(data, 'A')
        zero_limit = check_zero_limit(zero_limit)
        data.flags.writeable = False
        return cls(_data=data, _n=data.shape[0], _zero_limit=zero_limit)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only n x n matrix to invert."""
        return self._data

    @property
    def n(self) -> int:
        """Matrix order."""
        return self._n

    @property
    def zero_limit(self) -> float:
        """Pivot magnitudes below this are treated as zero."""
        return self._zero_limit

    def __repr__(self) -> str:
        return f"InversionDesign(n={self._n}, zero_limit={self._zero_limit:g})"

"""
Matrix: dense, row-major grid of float64 values.

The backing store is a single C-contiguous NumPy array, so element [i, j]
lives at flat offset i * ncols + j. Every row has exactly ncols values by
construction. Element access is bounds-checked and never wraps negative
indices.

Matrices are values: copies never share storage, and every derived matrix
(transpose, sums, products, inverse) is freshly allocated. resize() and
element assignment are the only mutations.

Usage:
    from densematrix import Matrix

    A = Matrix.from_rows([[4, 7], [2, 6]])
    A.check_dominant()      # False
    A_inv = A.inverse()
    A @ A_inv               # ~ identity
    A[0, 1]                 # 7.0
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import MalformedInputError, BoundsError
from densematrix.core.validation import (
    check_array,
    check_2d,
    check_size,
    check_index,
)
from densematrix.core.compute.tolerances import ZERO_LIMIT, CPU_FP64
from densematrix.core.compute.precision import is_close

if TYPE_CHECKING:
    from densematrix.core.compute.parallel import BackendChoice
    from densematrix.core.interop import ContinuousMatrix


class Matrix:
    """
    Dense nrows x ncols matrix of double-precision reals.

    Construction:
        Matrix()                 # empty 0x0
        Matrix(n)                # n x n zeros
        Matrix(nrows, ncols)     # nrows x ncols zeros
        Matrix.from_rows(rows)
        Matrix.from_array(array)
        Matrix.identity(n)
        Matrix.from_flat(cm)
        Matrix.from_file(path)
    """

    __slots__ = ('_data',)

    def __init__(self, nrows: int = 0, ncols: int | None = None):
        self._data: NDArray[np.float64] = np.zeros((0, 0), dtype=np.float64)
        self.resize(nrows, ncols)

    # === Construction ===

    @classmethod
    def _adopt(cls, array: NDArray[np.float64]) -> Matrix:
        """Wrap a freshly computed 2D array without copying it."""
        matrix = cls.__new__(cls)
        matrix._data = np.ascontiguousarray(array, dtype=np.float64)
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Matrix:
        """
        Build a matrix from a sequence of equally long rows.

        Raises:
            MalformedInputError: If rows disagree in length or hold nested
                sequences instead of numbers
            ValidationError: If values are not real numbers
        """
        rows = [list(row) for row in rows]
        if not rows:
            return cls()

        ncols = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != ncols:
                raise MalformedInputError(
                    f"Row {index + 1} has {len(row)} values, expected {ncols}",
                    source='rows',
                    line=index + 1,
                )

        data = check_array(rows, 'rows')
        if data.ndim != 2:
            raise MalformedInputError(
                f"rows: expected a sequence of rows of numbers, got nesting of depth {data.ndim}",
                source='rows',
            )
        return cls._adopt(data.copy())

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like. The input is always copied.

        Raises:
            ValidationError: If the input is not a 2D real numeric array
        """
        data = check_array(array, 'array')
        check_2d(data, 'array')
        return cls._adopt(data.copy())

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_size(n, 'n')
        return cls._adopt(np.eye(n, dtype=np.float64))

    @classmethod
    def from_flat(cls, cm: ContinuousMatrix) -> Matrix:
        """Build a matrix from a flat row-major interop record."""
        from densematrix.core.interop import from_flat
        return from_flat(cm)

    @classmethod
    def from_file(cls, path: str | Path, *, delimiter: str = ',') -> Matrix:
        """Load a matrix from a delimited text file (or .npy)."""
        from densematrix.core.io import read_csv
        return read_csv(path, delimiter=delimiter)

    # === Shape ===

    def resize(self, nrows: int, ncols: int | None = None) -> None:
        """
        Reshape to nrows x ncols, discarding all values.

        Every cell of the new store is zero. ncols defaults to nrows.
        Any non-negative shape is allowed, including 0 x 0.

        Raises:
            ValidationError: If a size is negative or not an integer
        """
        nrows = check_size(nrows, 'nrows')
        ncols = nrows if ncols is None else check_size(ncols, 'ncols')
        self._data = np.zeros((nrows, ncols), dtype=np.float64)

    @property
    def nrows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def ncols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(nrows, ncols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._data.size

    @property
    def is_square(self) -> bool:
        return self.nrows == self.ncols

    @property
    def is_empty(self) -> bool:
        """True if the matrix has no rows or no columns."""
        return self.nrows == 0 or self.ncols == 0

    # === Element access ===

    def at(self, i: int, j: int) -> float:
        """
        Value at row i, column j.

        Raises:
            BoundsError: If (i, j) is outside the matrix
        """
        i, j = check_index(i, j, self.shape)
        return float(self._data[i, j])

    def set(self, i: int, j: int, value: float) -> None:
        """
        Assign the value at row i, column j.

        Raises:
            BoundsError: If (i, j) is outside the matrix
        """
        i, j = check_index(i, j, self.shape)
        self._data[i, j] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = _split_key(key)
        return self.at(i, j)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = _split_key(key)
        self.set(i, j, value)

    def row(self, i: int) -> NDArray[np.float64]:
        """Copy of row i as a 1D array."""
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)) \
                or not 0 <= i < self.nrows:
            raise BoundsError(
                f"row {i!r} is out of range for a {self.nrows}x{self.ncols} matrix",
                index=(i, 0),
                shape=self.shape,
            )
        return self._data[int(i)].copy()

    # === Copies and comparison ===

    def copy(self) -> Matrix:
        """Independent deep copy."""
        return Matrix._adopt(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        result = self.copy()
        memo[id(self)] = result
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """
        Shape-equal and every cell within |a - b| <= atol + rtol * |b|.
        """
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    # === Operations ===

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.arithmetic import add
        return add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.arithmetic import sub
        return sub(self, other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.arithmetic import multiply
        return multiply(self, other)

    def transpose(self) -> Matrix:
        """New ncols x nrows matrix with out[j, i] = self[i, j]."""
        from densematrix.arithmetic import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def check_dominant(self) -> bool:
        """Row-wise diagonal dominance. See densematrix.arithmetic.check_dominant."""
        from densematrix.arithmetic import check_dominant
        return check_dominant(self)

    def inverse(
        self,
        zero_limit: float = ZERO_LIMIT,
        *,
        backend: BackendChoice = 'auto',
        workers: int | None = None,
    ) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination without pivoting.

        Use densematrix.inversion.invert() for pivots, timing and
        diagnostics alongside the inverse.

        Raises:
            ShapeMismatchError: If the matrix is not square
            SingularMatrixError: If a pivot falls below zero_limit
        """
        from densematrix.inversion.solvers import _invert
        return _invert(self, zero_limit, backend, workers).inverse

    # === Conversion ===

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the values as a (nrows, ncols) float64 array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def to_flat(self) -> ContinuousMatrix:
        """Flat row-major interop record. Fails on an empty matrix."""
        from densematrix.core.interop import to_flat
        return to_flat(self)

    def __repr__(self) -> str:
        return f"Matrix(nrows={self.nrows}, ncols={self.ncols})"

    def __str__(self) -> str:
        from densematrix.core.io import format_matrix
        return format_matrix(self)


def as_array(matrix: Matrix) -> NDArray[np.float64]:
    """Read-only view of a matrix's backing store, for kernels."""
    view = matrix._data.view()
    view.flags.writeable = False
    return view


def _split_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"Matrix indices must be (row, column) pairs, got {key!r}"
        )
    return key


__all__ = ['Matrix', 'as_array']

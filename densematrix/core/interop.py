"""
Flat-buffer interop record.

ContinuousMatrix carries a matrix as {nrows, ncols, length, data} with the
values in one row-major float64 buffer (element [i, j] at offset
i * ncols + j). It is the exchange format for code that cannot consume a
Matrix directly, for example a foreign library reading raw doubles.

Ownership is exclusive: to_flat() copies values out of a Matrix and
from_flat() copies them into a new one, so a record and a Matrix never
alias each other. A record can release its buffer explicitly or through
the context-manager protocol; a released record rejects further use.

Usage:
    with A.to_flat() as cm:
        send(cm.nrows, cm.ncols, cm.tobytes())

    B = from_flat(ContinuousMatrix.from_buffer(nrows, ncols, payload))
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import MalformedInputError
from densematrix.core.validation import check_array, check_size
from densematrix.core.matrix import Matrix, as_array


class ContinuousMatrix:
    """
    Row-major flat copy of a matrix, owned exclusively by its holder.

    Attributes:
        nrows: Number of rows
        ncols: Number of columns
        length: nrows * ncols
        data: Read-only 1D float64 array of length values
    """

    __slots__ = ('_nrows', '_ncols', '_data')

    def __init__(self, nrows: int, ncols: int, data: ArrayLike):
        """
        Raises:
            ValidationError: If sizes are not non-negative integers or data is not numeric
            MalformedInputError: If data does not hold exactly nrows * ncols values
        """
        self._nrows = check_size(nrows, 'nrows')
        self._ncols = check_size(ncols, 'ncols')

        values = check_array(data, 'data')
        if values.ndim != 1:
            raise MalformedInputError(
                f"data: expected a flat 1D buffer, got shape {values.shape}",
                source='ContinuousMatrix',
            )
        if values.size != self._nrows * self._ncols:
            raise MalformedInputError(
                f"data: holds {values.size} values, expected "
                f"{self._nrows} * {self._ncols} = {self._nrows * self._ncols}",
                source='ContinuousMatrix',
            )

        owned = np.array(values, dtype=np.float64, copy=True)
        owned.flags.writeable = False
        self._data: NDArray[np.float64] | None = owned

    @classmethod
    def from_buffer(cls, nrows: int, ncols: int, buffer: Any) -> ContinuousMatrix:
        """
        Build a record from raw native-endian float64 bytes.

        Raises:
            MalformedInputError: If the buffer is not a whole number of doubles
                or holds the wrong number of values
        """
        try:
            values = np.frombuffer(buffer, dtype=np.float64)
        except (ValueError, TypeError) as e:
            raise MalformedInputError(
                f"buffer: cannot read as float64 values: {e}",
                source='buffer',
            ) from e
        return cls(nrows, ncols, values)

    # === Properties ===

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def length(self) -> int:
        """Number of values, nrows * ncols."""
        return self._nrows * self._ncols

    @property
    def data(self) -> NDArray[np.float64]:
        """
        Read-only flat values.

        Raises:
            MalformedInputError: If the record has been released
        """
        if self._data is None:
            raise MalformedInputError(
                "ContinuousMatrix buffer has been released",
                source='ContinuousMatrix',
            )
        return self._data

    @property
    def released(self) -> bool:
        return self._data is None

    # === Ownership ===

    def release(self) -> None:
        """Drop the buffer. Safe to call more than once."""
        self._data = None

    def __enter__(self) -> ContinuousMatrix:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def tobytes(self) -> bytes:
        """Row-major native-endian float64 bytes."""
        return self.data.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContinuousMatrix):
            return NotImplemented
        if self.released or other.released:
            return False
        return (
            self._nrows == other._nrows
            and self._ncols == other._ncols
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None

    def __repr__(self) -> str:
        state = ", released" if self.released else ""
        return (
            f"ContinuousMatrix(nrows={self._nrows}, ncols={self._ncols}, "
            f"length={self.length}{state})"
        )


def to_flat(matrix: Matrix) -> ContinuousMatrix:
    """
    Copy a matrix into a flat row-major record.

    Raises:
        MalformedInputError: If the matrix has no rows or no columns
    """
    if matrix.is_empty:
        raise MalformedInputError(
            f"Empty matrix ({matrix.nrows}x{matrix.ncols}) cannot be converted "
            f"to a continuous matrix",
            source='Matrix',
        )
    return ContinuousMatrix(matrix.nrows, matrix.ncols, as_array(matrix).ravel(order='C'))


def from_flat(cm: ContinuousMatrix) -> Matrix:
    """
    Copy a flat row-major record into a new matrix.

    Raises:
        MalformedInputError: If the record has zero rows or columns, or was released
    """
    if cm.nrows == 0 or cm.ncols == 0:
        raise MalformedInputError(
            f"Continuous matrix has zero rows or columns ({cm.nrows}x{cm.ncols})",
            source='ContinuousMatrix',
        )
    return Matrix._adopt(cm.data.reshape(cm.nrows, cm.ncols).copy())

"""
Elementwise and product operators.

Every output cell depends only on the operands, so each operator is one
parallel region over output rows: a single vectorized NumPy call on the
'cpu' backend, or disjoint row blocks on a thread pool on the 'threaded'
backend. Both backends compute each cell with the same arithmetic.
"""

from __future__ import annotations

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from densematrix.core.matrix import Matrix, as_array
from densematrix.core.validation import check_same_shape, check_inner_dims
from densematrix.core.compute.parallel import (
    BackendChoice,
    BlockExecutor,
    select_backend,
)


def _run_rows(
    kernel: Callable[[slice], None],
    nrows: int,
    backend: BackendChoice,
    workers: int | None,
    stacklevel: int,
) -> None:
    """
    Run kernel over all rows [0, nrows) on the selected backend.

    stacklevel counts frames from select_backend() up to the user's call
    of the public operator.
    """
    chosen, n_workers = select_backend(backend, nrows, workers, stacklevel=stacklevel)
    if chosen == 'cpu':
        kernel(slice(0, nrows))
        return
    with BlockExecutor(n_workers) as ex:
        ex.map_blocks(kernel, 0, nrows)


def add(
    a: Matrix,
    b: Matrix,
    *,
    backend: BackendChoice = 'auto',
    workers: int | None = None,
) -> Matrix:
    """
    Elementwise sum, out[i, j] = a[i, j] + b[i, j].

    Raises:
        ShapeMismatchError: If a and b differ in shape
    """
    check_same_shape(a.shape, b.shape, 'add')
    return _elementwise(np.add, a, b, backend, workers)


def sub(
    a: Matrix,
    b: Matrix,
    *,
    backend: BackendChoice = 'auto',
    workers: int | None = None,
) -> Matrix:
    """
    Elementwise difference, out[i, j] = a[i, j] - b[i, j].

    Raises:
        ShapeMismatchError: If a and b differ in shape
    """
    check_same_shape(a.shape, b.shape, 'sub')
    return _elementwise(np.subtract, a, b, backend, workers)


def _elementwise(ufunc, a: Matrix, b: Matrix, backend, workers) -> Matrix:
    x, y = as_array(a), as_array(b)
    out = np.empty(a.shape, dtype=np.float64)

    def kernel(rows: slice) -> None:
        ufunc(x[rows], y[rows], out=out[rows])

    _run_rows(kernel, a.nrows, backend, workers, stacklevel=5)
    return Matrix._adopt(out)


def multiply(
    a: Matrix,
    b: Matrix,
    *,
    backend: BackendChoice = 'auto',
    workers: int | None = None,
) -> Matrix:
    """
    Matrix product, out[i, j] = sum_k a[i, k] * b[k, j].

    The result is a.nrows x b.ncols. An empty inner dimension gives a
    zero matrix.

    Raises:
        ShapeMismatchError: If a.ncols != b.nrows
    """
    check_inner_dims(a.shape, b.shape, 'multiply')
    x, y = as_array(a), as_array(b)
    out = np.zeros((a.nrows, b.ncols), dtype=np.float64)

    def kernel(rows: slice) -> None:
        np.matmul(x[rows], y, out=out[rows])

    if a.ncols > 0:
        _run_rows(kernel, a.nrows, backend, workers, stacklevel=4)
    return Matrix._adopt(out)


def transpose(
    a: Matrix,
    *,
    backend: BackendChoice = 'auto',
    workers: int | None = None,
) -> Matrix:
    """
    Transpose, out[j, i] = a[i, j]. The result is a.ncols x a.nrows.

    Blocks run over input rows, so each task fills its own output columns.
    """
    x = as_array(a)
    out: NDArray[np.float64] = np.empty((a.ncols, a.nrows), dtype=np.float64)

    def kernel(rows: slice) -> None:
        out[:, rows] = x[rows].T

    _run_rows(kernel, a.nrows, backend, workers, stacklevel=4)
    return Matrix._adopt(out)

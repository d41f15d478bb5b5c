"""
Gauss-Jordan elimination kernels (no pivoting).

The working matrix M starts as a copy of the input and the accumulator I
as the identity. Three phases turn M into a unit upper triangle and I into
the inverse:

    1. forward elimination   zero out M below the diagonal, pivot by pivot
    2. normalization         scale every row so that M[i, i] == 1
    3. backward elimination  cancel the upper triangle of M out of I

Each phase is expressed as block kernels over disjoint index ranges. The
caller supplies run(kernel, start, stop), which must call kernel on
blocks covering [start, stop) and return only after all of them finished.
A single-task runner and a thread-pool runner therefore execute exactly
the same floating-point operations per cell.
"""

from __future__ import annotations

from typing import Callable
import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import SingularMatrixError
from densematrix.core.compute.timing import Timer


Runner = Callable[[Callable[[slice], None], int, int], None]


def run_inline(kernel: Callable[[slice], None], start: int, stop: int) -> None:
    """Runner that treats the whole range as one block."""
    if stop > start:
        kernel(slice(start, stop))


def gauss_jordan(
    A: NDArray[np.float64],
    zero_limit: float,
    run: Runner,
    timer: Timer,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Invert A without row exchanges.

    Args:
        A: Square matrix, not modified
        zero_limit: Pivots with magnitude below this raise
        run: Block runner for the parallel regions
        timer: Receives one section per phase

    Returns:
        (inverse, pivots) where pivots is the diagonal of M after forward
        elimination

    Raises:
        SingularMatrixError: If a pivot or diagonal entry is below zero_limit
    """
    n = A.shape[0]
    M = np.array(A, dtype=np.float64, copy=True)
    I = np.eye(n, dtype=np.float64)

    with timer.section('forward_elimination'):
        for k in range(n - 1):
            _check_pivot(M[k, k], k, zero_limit, 'forward')
            run(_forward_kernel(M, I, k), k + 1, n)
        pivots = np.diagonal(M).copy()

    with timer.section('normalization'):
        bad = np.flatnonzero(np.abs(np.diagonal(M)) < zero_limit)
        if bad.size:
            i = int(bad[0])
            _check_pivot(M[i, i], i, zero_limit, 'normalization')
        run(_normalize_kernel(M, I), 0, n)

    with timer.section('backward_elimination'):
        run(_backward_kernel(M, I), 0, n)

    return I, pivots


def _check_pivot(value: float, index: int, zero_limit: float, phase: str) -> None:
    if abs(value) < zero_limit:
        if phase == 'forward':
            message = (
                f"Pivot {index} is {value:g} (|pivot| < {zero_limit:g}) during "
                f"forward elimination. Please use row permutation."
            )
        else:
            message = (
                f"Diagonal entry {index} is {value:g} (|value| < {zero_limit:g}) "
                f"during inverse."
            )
        raise SingularMatrixError(
            message,
            matrix_name='A',
            phase=phase,
            pivot_index=index,
            pivot_value=float(value),
            zero_limit=zero_limit,
        )


def _forward_kernel(M: NDArray, I: NDArray, k: int) -> Callable[[slice], None]:
    """Eliminate column k from a block of rows below the pivot row k."""
    pivot_row = M[k, k:]
    pivot_inv_row = I[k]
    pivot = M[k, k]

    def kernel(rows: slice) -> None:
        coef = M[rows, k] / pivot
        M[rows, k:] -= pivot_row * coef[:, np.newaxis]
        I[rows] -= pivot_inv_row * coef[:, np.newaxis]

    return kernel


def _normalize_kernel(M: NDArray, I: NDArray) -> Callable[[slice], None]:
    """Divide a block of rows of M and I by their diagonal entries."""

    def kernel(rows: slice) -> None:
        idx = np.arange(rows.start, rows.stop)
        diag = M[idx, idx][:, np.newaxis]
        I[rows] /= diag
        M[rows] /= diag

    return kernel


def _backward_kernel(M: NDArray, I: NDArray) -> Callable[[slice], None]:
    """
    Back-substitute a block of columns of I.

    For each row i (bottom-up) and each j > i in strictly descending
    order, I[i, m] -= I[j, m] * M[i, j]. M is only read, so every step
    sees the value M[i, j] had after normalization.
    """
    n = M.shape[0]

    def kernel(cols: slice) -> None:
        for i in range(n - 2, -1, -1):
            target = I[i, cols]
            for j in range(n - 1, i, -1):
                target -= I[j, cols] * M[i, j]

    return kernel

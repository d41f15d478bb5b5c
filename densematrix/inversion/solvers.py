"""
Solver dispatch for matrix inversion.

This module provides the invert() function (public API) and backend selection.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from densematrix.core.matrix import Matrix
from densematrix.core.compute.tolerances import ZERO_LIMIT
from densematrix.core.compute.parallel import BackendChoice, select_backend
from densematrix.inversion.design import InversionDesign
from densematrix.inversion.solution import InversionSolution
from densematrix.inversion.backends.cpu import CPUGaussJordanBackend
from densematrix.inversion.backends.threaded import ThreadedGaussJordanBackend


def _ensure_design(
    data: Matrix | ArrayLike | InversionDesign,
    zero_limit: float,
) -> InversionDesign:
    """Convert a Matrix or raw array to InversionDesign if needed."""
    if isinstance(data, InversionDesign):
        return data
    if isinstance(data, Matrix):
        return InversionDesign.from_matrix(data, zero_limit=zero_limit)
    return InversionDesign.from_array(data, zero_limit=zero_limit)


def _get_backend(backend: BackendChoice, n: int, workers: int | None, stacklevel: int):
    """Select backend based on preference and matrix order."""
    chosen, n_workers = select_backend(backend, n, workers, stacklevel=stacklevel)
    if chosen == 'threaded':
        return ThreadedGaussJordanBackend(workers=n_workers)
    return CPUGaussJordanBackend()


def invert(
    matrix: Matrix | ArrayLike | InversionDesign,
    *,
    zero_limit: float = ZERO_LIMIT,
    backend: BackendChoice = 'auto',
    workers: int | None = None,
) -> InversionSolution:
    """
    Invert a square matrix by Gauss-Jordan elimination without pivoting.

    Rows are eliminated in their natural order. A pivot (or, after
    elimination, a diagonal entry) whose magnitude is below zero_limit
    stops the inversion; no row exchange is attempted. Matrices that pass
    check_dominant() never hit this for structural reasons.

    Args:
        matrix: Square Matrix, 2D array-like, or a prepared InversionDesign
            (whose own zero_limit then applies)
        zero_limit: Pivot threshold, default 1e-9
        backend: Execution strategy:
            - 'auto': 'threaded' for n >= 256 on multi-core hosts, else 'cpu'
            - 'cpu': One vectorized task per phase
            - 'threaded': Disjoint row/column blocks on a thread pool
        workers: Thread count for 'threaded'; None uses one per CPU

    Returns:
        InversionSolution with the inverse, pivots, determinant and timing

    Raises:
        ShapeMismatchError: If the matrix is not square
        SingularMatrixError: If a pivot falls below zero_limit
        ValidationError: If inputs or options are invalid

    Example:
        >>> from densematrix import Matrix
        >>> from densematrix.inversion import invert
        >>>
        >>> sol = invert(Matrix.from_rows([[4, 7], [2, 6]]))
        >>> sol.inverse.allclose(Matrix.from_rows([[0.6, -0.7], [-0.2, 0.4]]))
        True
        >>> sol.determinant
        10.0
    """
    return _invert(matrix, zero_limit, backend, workers)


def _invert(matrix, zero_limit, backend, workers) -> InversionSolution:
    """
    Shared body of invert() and Matrix.inverse().

    Must be called directly from the public entry point, so that the
    fallback warning is attributed to the caller of that entry point.
    """
    design = _ensure_design(matrix, zero_limit)
    be = _get_backend(backend, design.n, workers, stacklevel=5)
    result = be.solve(design)
    return InversionSolution(_result=result, _design=design)

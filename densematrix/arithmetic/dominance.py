"""
Row-wise diagonal dominance.

A matrix whose every diagonal entry outweighs the rest of its row can be
eliminated in its natural order without pivoting, so this predicate is the
pre-check for densematrix.inversion.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from densematrix.core.matrix import Matrix, as_array
from densematrix.core.validation import check_square


def row_dominance(data: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
    """
    Per-row dominance flags of a square array, shape (n,).

    Row i passes when a[i, i] >= sum_j |a[i, j]| - |a[i, i]|. The diagonal
    enters the left side with its sign, so a row with a negative diagonal
    entry never passes.
    """
    diag = np.diagonal(data)
    row_abs_sum = np.sum(np.abs(data), axis=1)
    return diag >= row_abs_sum - np.abs(diag)


def dominant_rows(a: Matrix) -> NDArray[np.bool_]:
    """
    Per-row dominance flags of a square matrix.

    Raises:
        ShapeMismatchError: If a is not square
    """
    check_square(a.shape, 'check_dominant')
    return row_dominance(as_array(a))


def check_dominant(a: Matrix) -> bool:
    """
    True if every row of a square matrix is diagonally dominant.

    An empty (0 x 0) matrix is vacuously dominant.

    Raises:
        ShapeMismatchError: If a is not square
    """
    return bool(np.all(dominant_rows(a)))

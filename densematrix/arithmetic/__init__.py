"""
Matrix arithmetic.

Public API:
    add(a, b)          - Elementwise sum (shapes must match)
    sub(a, b)          - Elementwise difference (shapes must match)
    multiply(a, b)     - Matrix product (a.ncols == b.nrows)
    transpose(a)       - Shape-swapped copy
    check_dominant(a)  - Row-wise diagonal dominance of a square matrix
"""

from densematrix.arithmetic.ops import add, sub, multiply, transpose
from densematrix.arithmetic.dominance import (
    check_dominant,
    dominant_rows,
    row_dominance,
)

__all__ = [
    "add",
    "sub",
    "multiply",
    "transpose",
    "check_dominant",
    "dominant_rows",
    "row_dominance",
]

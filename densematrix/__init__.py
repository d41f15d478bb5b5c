"""
densematrix: dense matrices with pivotless Gauss-Jordan inversion.

A small numerical kernel: a row-major float64 Matrix value type, matrix
arithmetic, a diagonal-dominance pre-check and Gauss-Jordan inversion
with optional thread-pool execution.

Submodules:
    core: Matrix, interop record, file IO, exceptions, compute utilities
    arithmetic: add, sub, multiply, transpose, check_dominant
    inversion: invert() with pivots, determinant, timing and diagnostics
"""

__version__ = "0.1.0"

from densematrix.core import (
    Matrix,
    ContinuousMatrix,
    to_flat,
    from_flat,
    read_csv,
    write_csv,
    format_matrix,
    DenseMatrixError,
    ValidationError,
    ShapeMismatchError,
    MalformedInputError,
    BoundsError,
    NumericalError,
    SingularMatrixError,
)
from densematrix.arithmetic import add, sub, multiply, transpose, check_dominant
from densematrix.inversion import invert
from densematrix import arithmetic
from densematrix import inversion

__all__ = [
    "__version__",
    # Submodules
    "arithmetic",
    "inversion",
    # Matrix
    "Matrix",
    "ContinuousMatrix",
    "to_flat",
    "from_flat",
    "read_csv",
    "write_csv",
    "format_matrix",
    # Operations
    "add",
    "sub",
    "multiply",
    "transpose",
    "check_dominant",
    "invert",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "ShapeMismatchError",
    "MalformedInputError",
    "BoundsError",
    "NumericalError",
    "SingularMatrixError",
]

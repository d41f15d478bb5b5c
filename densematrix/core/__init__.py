"""
Core infrastructure for densematrix.

This module provides the Matrix value type and the shared abstractions,
utilities, and compute infrastructure used by the arithmetic and inversion
submodules.

Key components:
    matrix: Matrix value type (contiguous row-major float64 storage)
    interop: ContinuousMatrix flat-buffer transfer record
    io: CSV/.npy loading, CSV writing and text rendering
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    protocols: Backend protocol
    compute: Timing, tolerances, parallel block execution
"""

from densematrix.core.result import Result
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    ShapeMismatchError,
    MalformedInputError,
    BoundsError,
    NumericalError,
    SingularMatrixError,
)
from densematrix.core.matrix import Matrix
from densematrix.core.interop import ContinuousMatrix, to_flat, from_flat
from densematrix.core.io import read_csv, write_csv, format_matrix
from densematrix.core.protocols import Backend

__all__ = [
    # Matrix
    "Matrix",
    # Interop and IO
    "ContinuousMatrix",
    "to_flat",
    "from_flat",
    "read_csv",
    "write_csv",
    "format_matrix",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "ShapeMismatchError",
    "MalformedInputError",
    "BoundsError",
    "NumericalError",
    "SingularMatrixError",
]

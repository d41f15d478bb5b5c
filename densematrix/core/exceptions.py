"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by add/sub (shapes differ), multiply (inner dimensions differ)
    and by square-only operations such as inverse and the dominance check.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: Shape of the left (or only) operand
        right_shape: Shape of the right operand, None for unary operations
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class MalformedInputError(ValidationError):
    """
    External matrix source has an inconsistent or empty shape.

    Raised by CSV loading (ragged rows, empty fields, non-numeric fields,
    empty files), by flat-buffer interop (empty shape, length mismatch)
    and by row-based constructors given jagged rows.

    Attributes:
        source: File path or description of the input, if known
        line: 1-based line (or row) number of the first bad record, if known
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        line: int | None = None
    ):
        super().__init__(message)
        self.source = source
        self.line = line


class BoundsError(ValidationError, IndexError):
    """
    Element index is outside the matrix.

    Also an IndexError so that code written against plain sequences keeps
    working.

    Attributes:
        index: The offending (row, column) pair
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(DenseMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or has a near-zero pivot in its natural order.

    Raised by Gauss-Jordan inversion when a pivot (forward phase) or a
    diagonal entry (normalization phase) falls below the zero limit. No
    row permutation is attempted; the caller may permute rows and retry.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        phase: Elimination phase that failed ('forward' or 'normalization')
        pivot_index: Diagonal position of the failing pivot
        pivot_value: Value found at that position
        zero_limit: Threshold the value was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        phase: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        zero_limit: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.phase = phase
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.zero_limit = zero_limit

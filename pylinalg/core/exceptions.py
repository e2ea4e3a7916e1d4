"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Matrix operation failures additionally inherit
from MatrixError, and from the closest built-in or validation category
so callers can catch them either way.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple operands have inconsistent shapes.
    """
    pass


class MatrixError(PyLinalgError):
    """Base class for failures of a Matrix operation."""
    pass


class IncorrectDataSizeError(MatrixError, ValidationError):
    """
    Backing data length does not equal rows * columns.

    Raised only at construction.

    Attributes:
        expected_size: rows * columns of the requested shape
        actual_size: Length of the supplied data
    """

    def __init__(
        self,
        message: str,
        expected_size: int | None = None,
        actual_size: int | None = None
    ):
        super().__init__(message)
        self.expected_size = expected_size
        self.actual_size = actual_size


class IncompatibleDimensionsError(MatrixError, DimensionError):
    """
    Operand shapes violate an operation's shape precondition.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
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


class SquareMatrixRequiredError(MatrixError, DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: (rows, columns) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class InvalidIndexError(MatrixError, IndexError):
    """
    Element coordinate is out of range.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int,
        column: int,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape

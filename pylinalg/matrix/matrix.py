"""
Matrix: dense row-major float64 matrix.

Element (r, c) is stored at flat index c + r * columns of a 1-D float64
buffer. The buffer length always equals rows * columns; construction
rejects anything else. set() is the only mutating operation; every
other operation returns a new Matrix and leaves its operands untouched.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    IncompatibleDimensionsError,
    IncorrectDataSizeError,
    InvalidIndexError,
    SquareMatrixRequiredError,
    ValidationError,
)
from pylinalg.core.tolerances import COFACTOR_WARN_ORDER, DEFAULT_EPSILON
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_epsilon,
    check_non_negative_int,
    check_real,
)
from pylinalg.matrix._determinant import cofactor_determinant


class Matrix:
    """
    Dense rows x columns matrix of float64 values in row-major order.

    Construction:
        Matrix(rows, columns, data)
        Matrix.zeros(rows, columns)
        Matrix.square_zeros(n)
        Matrix.identity(n)
        Matrix.from_numpy(array)

    The constructor copies data into an owned buffer, so later changes
    to the caller's sequence are not visible through the matrix.
    """

    def __init__(self, rows: int, columns: int, data: ArrayLike):
        """
        Args:
            rows: Number of rows (non-negative)
            columns: Number of columns (non-negative)
            data: Flat numeric sequence of length rows * columns, row-major

        Raises:
            ValidationError: If rows/columns are not non-negative integers
                or data is not numeric
            DimensionError: If data is not one-dimensional
            IncorrectDataSizeError: If len(data) != rows * columns
        """
        rows = check_non_negative_int(rows, "rows")
        columns = check_non_negative_int(columns, "columns")
        buffer = check_array(data, "data")
        check_1d(buffer, "data")

        expected_size = rows * columns
        if buffer.size != expected_size:
            raise IncorrectDataSizeError(
                f"data: expected {expected_size} values for a {rows}x{columns} "
                f"matrix, got {buffer.size}",
                expected_size=expected_size,
                actual_size=int(buffer.size),
            )

        self._rows = rows
        self._columns = columns
        self._data = buffer

    @classmethod
    def _from_buffer(cls, rows: int, columns: int, buffer: NDArray[np.float64]) -> Matrix:
        """Internal constructor for buffers already known to be valid."""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._columns = columns
        matrix._data = buffer
        return matrix

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """rows x columns matrix of 0.0."""
        rows = check_non_negative_int(rows, "rows")
        columns = check_non_negative_int(columns, "columns")
        return cls._from_buffer(rows, columns, np.zeros(rows * columns, dtype=np.float64))

    @classmethod
    def square_zeros(cls, n: int) -> Matrix:
        """n x n matrix of 0.0."""
        return cls.zeros(n, n)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        matrix = cls.square_zeros(n)
        for i in range(matrix._rows):
            matrix._data[matrix._flat_index_unchecked(i, i)] = 1.0
        return matrix

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Raises:
            ValidationError: If array is not numeric
            DimensionError: If array is not 2D
        """
        values = check_array(array, "array")
        check_2d(values, "array")
        rows, columns = values.shape
        return cls._from_buffer(rows, columns, values.reshape(-1))

    # --- Shape and storage ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, columns) array."""
        return self._data.reshape(self._rows, self._columns).copy()

    # --- Element access ---

    def _flat_index_unchecked(self, row: int, column: int) -> int:
        return column + row * self._columns

    def _flat_index(self, row: int, column: int) -> int:
        for value, name in ((row, "row"), (column, "column")):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValidationError(
                    f"{name}: expected an integer index, got {type(value).__name__}"
                )
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise InvalidIndexError(
                f"Index ({row}, {column}) out of range for "
                f"{self._rows}x{self._columns} matrix",
                row=int(row),
                column=int(column),
                shape=self.shape,
            )
        return self._flat_index_unchecked(int(row), int(column))

    def get(self, row: int, column: int) -> float:
        """
        Element at (row, column).

        Raises:
            InvalidIndexError: If row >= rows or column >= columns
        """
        return float(self._data[self._flat_index(row, column)])

    def set(self, row: int, column: int, value: float) -> None:
        """
        Overwrite the element at (row, column).

        Raises:
            InvalidIndexError: If row >= rows or column >= columns
            ValidationError: If value is not a real number

        The matrix is left unmodified when either error is raised.
        """
        index = self._flat_index(row, column)
        self._data[index] = check_real(value, "value")

    # --- Arithmetic ---

    def _check_operand(self, other: Any, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"{operation}: expected Matrix operand, got {type(other).__name__}"
            )

    def sum(self, other: Matrix) -> Matrix:
        """
        Elementwise sum of two matrices of the same shape.

        Raises:
            IncompatibleDimensionsError: If the shapes differ
        """
        self._check_operand(other, "sum")
        if self.shape != other.shape:
            raise IncompatibleDimensionsError(
                f"sum: shapes {self._rows}x{self._columns} and "
                f"{other._rows}x{other._columns} differ",
                operation="sum",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        return Matrix._from_buffer(self._rows, self._columns, self._data + other._data)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Operands must be mutually transpose-compatible: self.rows must
        equal other.columns and self.columns must equal other.rows. The
        result is self.rows x other.columns.

        Raises:
            IncompatibleDimensionsError: If the shapes are not mutually
                transpose-compatible
        """
        self._check_operand(other, "multiply")
        if self._rows != other._columns or self._columns != other._rows:
            raise IncompatibleDimensionsError(
                f"multiply: {self._rows}x{self._columns} by "
                f"{other._rows}x{other._columns} requires "
                f"{self._columns}x{self._rows} right operand",
                operation="multiply",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        product = self.to_numpy() @ other.to_numpy()
        return Matrix._from_buffer(self._rows, other._columns, product.reshape(-1))

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Raises:
            SquareMatrixRequiredError: If rows != columns
        """
        if self._rows != self._columns:
            raise SquareMatrixRequiredError(
                f"determinant: requires a square matrix, got "
                f"{self._rows}x{self._columns}",
                shape=self.shape,
            )
        if self._rows > COFACTOR_WARN_ORDER:
            warnings.warn(
                f"determinant: cofactor expansion of a {self._rows}x{self._rows} "
                f"matrix is O(n!) and may be very slow",
                RuntimeWarning,
                stacklevel=2,
            )
        return cofactor_determinant(self.to_numpy())

    # --- Comparison ---

    def approx_eq(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if shapes match and every element differs by at most epsilon."""
        epsilon = check_epsilon(epsilon)
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) <= epsilon))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"data={self._data.tolist()})"
        )

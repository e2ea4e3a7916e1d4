"""
PyLinalg: a small dense linear-algebra kernel for Python.

Row-major float64 matrices with shape-checked arithmetic and a cofactor
determinant, 2-D and 3-D vectors built on the same primitives, and an
approximate-equality capability for comparing floating-point results.

Submodules:
    core: Exceptions, validation, tolerances, approximate equality
    matrix: Matrix type and literal construction helper
    vector: Vector2 and Vector3
    testing: Assertion helpers for test suites
"""

__version__ = "0.1.0"

from pylinalg.core import (
    ApproxEq,
    approx_eq,
    approx_eq_default,
    PyLinalgError,
    ValidationError,
    DimensionError,
    MatrixError,
    IncorrectDataSizeError,
    IncompatibleDimensionsError,
    SquareMatrixRequiredError,
    InvalidIndexError,
)
from pylinalg.matrix import Matrix, matrix_from_rows
from pylinalg.vector import Vector2, Vector3

__all__ = [
    "__version__",
    "Matrix",
    "matrix_from_rows",
    "Vector2",
    "Vector3",
    "ApproxEq",
    "approx_eq",
    "approx_eq_default",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "MatrixError",
    "IncorrectDataSizeError",
    "IncompatibleDimensionsError",
    "SquareMatrixRequiredError",
    "InvalidIndexError",
]

"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
matrix and vector kernels.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers and kernel limits
    approx: ApproxEq protocol and approx_eq comparison
"""

from pylinalg.core.approx import ApproxEq, approx_eq, approx_eq_default
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    MatrixError,
    IncorrectDataSizeError,
    IncompatibleDimensionsError,
    SquareMatrixRequiredError,
    InvalidIndexError,
)
from pylinalg.core.tolerances import (
    ToleranceTier,
    DEFAULT,
    STRICT,
    DEFAULT_EPSILON,
    select_tolerance,
)

__all__ = [
    # Approximate equality
    "ApproxEq",
    "approx_eq",
    "approx_eq_default",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "MatrixError",
    "IncorrectDataSizeError",
    "IncompatibleDimensionsError",
    "SquareMatrixRequiredError",
    "InvalidIndexError",
    # Tolerances
    "ToleranceTier",
    "DEFAULT",
    "STRICT",
    "DEFAULT_EPSILON",
    "select_tolerance",
]

"""
Matrix kernel.

Dense row-major float64 matrices with shape-checked arithmetic and a
cofactor-expansion determinant.

Public API:
    Matrix              - the matrix type
    matrix_from_rows    - build a Matrix from row-grouped literal values
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.builders import matrix_from_rows

__all__ = [
    "Matrix",
    "matrix_from_rows",
]

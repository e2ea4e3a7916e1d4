"""
Literal construction helper for small fixed matrices.

Intended for trusted, hand-written values (tests, constants), where a
shape mistake is a programming error rather than something to recover
from: mismatches surface as IncorrectDataSizeError from Matrix itself.
"""

from __future__ import annotations

from typing import Iterable

from pylinalg.core.exceptions import IncorrectDataSizeError
from pylinalg.matrix.matrix import Matrix


def matrix_from_rows(
    values: Iterable[Iterable[float]],
    rows: int | None = None,
    columns: int | None = None,
) -> Matrix:
    """
    Build a Matrix from row-grouped values.

    Usage:
        m = matrix_from_rows([
            [1.0, 2.0, 3.0],
            [4.0, 5.0, 6.0],
        ])

    Args:
        values: One iterable of numbers per row
        rows: Declared row count (default: number of row groups)
        columns: Declared column count (default: length of the first row)

    Returns:
        Matrix with the values in row-major order

    Raises:
        IncorrectDataSizeError: If a row has the wrong length or the
            total count does not match rows * columns
    """
    groups = [list(group) for group in values]

    if rows is None:
        rows = len(groups)
    if columns is None:
        columns = len(groups[0]) if groups else 0

    for index, group in enumerate(groups):
        if len(group) != columns:
            raise IncorrectDataSizeError(
                f"values: row {index} has {len(group)} values, expected {columns}",
                expected_size=columns,
                actual_size=len(group),
            )

    data = [value for group in groups for value in group]
    return Matrix(rows, columns, data)

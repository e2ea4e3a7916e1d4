"""
Cofactor (Laplace) expansion of the determinant.

Expands along row 0: each entry of the first row, with alternating
sign, multiplies the determinant of the minor obtained by deleting
row 0 and that entry's column. Each minor is a freshly allocated
array, so no state is shared between recursion levels.

Cost is O(n!), which is fine for the 2x2 to 4x4 matrices this kernel
is used with.
"""

import numpy as np
from numpy.typing import NDArray


def cofactor_determinant(values: NDArray[np.float64]) -> float:
    """
    Determinant of a square array by recursive cofactor expansion.

    Args:
        values: Square (n x n) float64 array. Not modified.

    Returns:
        The determinant as a Python float.

    Note:
        The expansion only terminates at 2 x 2. Below that it degenerates:
        the empty (0 x 0) matrix is an empty sum, 0.0, and a 1 x 1
        matrix is a * det(0 x 0), also 0.0.
    """
    n = values.shape[0]

    if n == 2:
        return float(values[0, 0] * values[1, 1] - values[0, 1] * values[1, 0])

    result = 0.0
    for column_mask in range(n):
        sign = 1.0 if column_mask % 2 == 0 else -1.0
        coefficient = sign * values[0, column_mask]
        # np.delete always returns a new array
        minor = np.delete(values[1:], column_mask, axis=1)
        result += coefficient * cofactor_determinant(minor)

    return float(result)

"""
Assertion helpers for comparing floating-point results in test suites.

Mirrors numpy.testing: each helper raises AssertionError with the
left/right values and the offending differences, so a failing test
reports what was off and by how much.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pylinalg.core.tolerances import DEFAULT_EPSILON
from pylinalg.core.validation import check_epsilon
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector2, Vector3


def _components(value: Any) -> tuple[str, np.ndarray]:
    if isinstance(value, (Vector2, Vector3)):
        return type(value).__name__, value.to_numpy()
    if isinstance(value, Matrix):
        return f"Matrix {value.rows}x{value.columns}", value.to_numpy()
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return "scalar", np.array([float(value)])
    raise TypeError(f"assert_approx_equal: unsupported type {type(value).__name__}")


def assert_approx_equal(
    actual: Any,
    expected: Any,
    epsilon: float = DEFAULT_EPSILON,
) -> None:
    """
    Assert |actual - expected| <= epsilon, componentwise.

    Args:
        actual: Scalar, Vector2, Vector3 or Matrix
        expected: Value of the same kind and shape
        epsilon: Maximum allowed absolute difference per component

    Raises:
        AssertionError: If kinds/shapes differ or any difference exceeds epsilon
    """
    epsilon = check_epsilon(epsilon)
    left_kind, left = _components(actual)
    right_kind, right = _components(expected)

    if left_kind != right_kind:
        raise AssertionError(
            f"assertion failed: {left_kind} not comparable with {right_kind}"
        )

    diffs = np.abs(left - right)
    # NaN differences never compare <= epsilon
    if np.all(diffs <= epsilon):
        return

    raise AssertionError(
        f"assertion failed: {left_kind} not approx equal\n"
        f"  left:  {left.tolist()}\n"
        f"  right: {right.tolist()}\n"
        f"  diffs: {diffs.tolist()} > {epsilon}"
    )

"""
Approximate equality for floating-point-bearing values.

Scalars compare as |a - b| <= epsilon. Composite types (vectors,
matrices) opt in by implementing the ApproxEq protocol, comparing
componentwise with the same absolute tolerance.
"""

from __future__ import annotations

import numbers
from typing import Any, Protocol, runtime_checkable

from pylinalg.core.tolerances import DEFAULT_EPSILON
from pylinalg.core.validation import check_epsilon


@runtime_checkable
class ApproxEq(Protocol):
    """
    Protocol for values that can be compared within an absolute tolerance.

    Implementations compare pairwise scalar differences and must return
    False (never raise) for an operand of a different type or shape.
    """

    def approx_eq(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        ...


def _is_real_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def approx_eq(a: Any, b: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Compare two values within an absolute tolerance.

    Args:
        a: Real scalar or ApproxEq implementation
        b: Value of the same kind as a
        epsilon: Maximum allowed absolute difference per component

    Returns:
        True if every pairwise difference is at most epsilon

    Raises:
        ValidationError: If epsilon is negative, NaN or infinite
        TypeError: If the operands cannot be compared
    """
    epsilon = check_epsilon(epsilon)

    if _is_real_scalar(a) and _is_real_scalar(b):
        return abs(float(a) - float(b)) <= epsilon

    if isinstance(a, ApproxEq) and type(a) is type(b):
        return a.approx_eq(b, epsilon)

    raise TypeError(
        f"approx_eq: cannot compare {type(a).__name__} with {type(b).__name__}"
    )


def approx_eq_default(a: Any, b: Any) -> bool:
    """approx_eq with the default epsilon of 1e-6."""
    return approx_eq(a, b, DEFAULT_EPSILON)

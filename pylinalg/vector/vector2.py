"""
Vector2: immutable 2-D coordinate pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.tolerances import DEFAULT_EPSILON
from pylinalg.core.validation import check_epsilon
from pylinalg.vector._common import angle_from_dot, as_component, euclidean_norm


@dataclass(frozen=True)
class Vector2:
    """
    2-D vector of float64 components.

    Every operation returns a new Vector2 (or a float); instances are
    never mutated.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', as_component(self.x, 'x'))
        object.__setattr__(self, 'y', as_component(self.y, 'y'))

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, multiplier: float) -> Vector2:
        """Scale both components by multiplier."""
        return Vector2(self.x * multiplier, self.y * multiplier)

    def dot_product(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Euclidean norm."""
        return euclidean_norm(self.x, self.y)

    def angle_between(self, other: Vector2) -> float:
        """
        Angle to other in radians, in [0, pi].

        NaN when either vector has zero magnitude.
        """
        return angle_from_dot(
            self.dot_product(other),
            self.magnitude() * other.magnitude(),
        )

    def approx_eq(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if both components differ by at most epsilon."""
        epsilon = check_epsilon(epsilon)
        if not isinstance(other, Vector2):
            return False
        return abs(self.x - other.x) <= epsilon and abs(self.y - other.y) <= epsilon

    def to_numpy(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

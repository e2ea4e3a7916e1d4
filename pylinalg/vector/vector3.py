"""
Vector3: immutable 3-D coordinate triple.

The cross product is computed from three 2x2 determinants of the
Matrix kernel rather than a hand-written formula, so it shares the
determinant implementation with Matrix.determinant().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.tolerances import DEFAULT_EPSILON
from pylinalg.core.validation import check_epsilon
from pylinalg.matrix import Matrix
from pylinalg.vector._common import angle_from_dot, as_component, euclidean_norm


@dataclass(frozen=True)
class Vector3:
    """
    3-D vector of float64 components.

    Every operation returns a new Vector3 (or a float); instances are
    never mutated.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, 'x', as_component(self.x, 'x'))
        object.__setattr__(self, 'y', as_component(self.y, 'y'))
        object.__setattr__(self, 'z', as_component(self.z, 'z'))

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, multiplier: float) -> Vector3:
        """Scale all components by multiplier."""
        return Vector3(self.x * multiplier, self.y * multiplier, self.z * multiplier)

    def dot_product(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        """Euclidean norm."""
        return euclidean_norm(self.x, self.y, self.z)

    def angle_between(self, other: Vector3) -> float:
        """
        Angle to other in radians, in [0, pi].

        NaN when either vector has zero magnitude.
        """
        return angle_from_dot(
            self.dot_product(other),
            self.magnitude() * other.magnitude(),
        )

    def normalize(self) -> Vector3:
        """
        Unit vector in the same direction.

        The zero vector has no direction; its components come back NaN
        and numpy emits a RuntimeWarning.
        """
        return self.multiply(np.float64(1.0) / np.float64(self.magnitude()))

    def cross_product(self, other: Vector3) -> Vector3:
        """
        self x other, via 2x2 determinants of the component minors.

            x =  | ay az |     y = -| ax az |     z =  | ax ay |
                 | by bz |          | bx bz |          | bx by |
        """
        x = Matrix(2, 2, [self.y, self.z, other.y, other.z]).determinant()
        y = -Matrix(2, 2, [self.x, self.z, other.x, other.z]).determinant()
        z = Matrix(2, 2, [self.x, self.y, other.x, other.y]).determinant()
        return Vector3(x, y, z)

    def approx_eq(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if all three components differ by at most epsilon."""
        epsilon = check_epsilon(epsilon)
        if not isinstance(other, Vector3):
            return False
        return (
            abs(self.x - other.x) <= epsilon
            and abs(self.y - other.y) <= epsilon
            and abs(self.z - other.z) <= epsilon
        )

    def to_numpy(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

"""
Vector kernel.

Immutable fixed-size vectors with arithmetic and geometric operations.

Public API:
    Vector2     - 2-D vector
    Vector3     - 3-D vector (adds normalize and cross_product)
"""

from pylinalg.vector.vector2 import Vector2
from pylinalg.vector.vector3 import Vector3

__all__ = [
    "Vector2",
    "Vector3",
]

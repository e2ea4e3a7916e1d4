"""
Shared numerics for the fixed-size vector types.
"""

import numpy as np

from pylinalg.core.validation import check_real


def as_component(value: float, name: str) -> float:
    """Convert a real coordinate to a Python float; anything else is rejected."""
    return check_real(value, name)


def euclidean_norm(*components: float) -> float:
    """sqrt of the sum of squared components."""
    return float(np.sqrt(sum(c * c for c in components)))


def angle_from_dot(dot: float, magnitude_product: float) -> float:
    """
    acos(dot / magnitude_product) in radians.

    A zero magnitude product yields NaN (numpy emits a RuntimeWarning).
    The cosine is clipped into [-1, 1] so rounding on (anti)parallel
    vectors gives 0 or pi instead of NaN.
    """
    cos_theta = np.float64(dot) / np.float64(magnitude_product)
    return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))

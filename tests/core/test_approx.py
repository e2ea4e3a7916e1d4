"""
Tests for approximate equality and tolerance tiers.

Validates:
    - Scalar comparison |a - b| <= epsilon, inclusive at the boundary
    - Delegation to ApproxEq implementers (vectors, matrices)
    - Default epsilon of 1e-6
    - Rejection of unsupported or mismatched operands and bad epsilons
    - Tolerance tier lookup
"""

import numpy as np
import pytest

from pylinalg.core.approx import ApproxEq, approx_eq, approx_eq_default
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.tolerances import (
    DEFAULT,
    DEFAULT_EPSILON,
    STRICT,
    ToleranceTier,
    select_tolerance,
)
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector2, Vector3


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalarApproxEq:

    def test_equal_values(self):
        assert approx_eq(1.5, 1.5, 0.0)

    def test_within_epsilon(self):
        assert approx_eq(1.0, 1.0 + 5e-7, 1e-6)

    def test_outside_epsilon(self):
        assert not approx_eq(1.0, 1.0 + 2e-6, 1e-6)

    def test_boundary_is_inclusive(self):
        assert approx_eq(0.0, 0.5, 0.5)

    def test_int_and_float(self):
        assert approx_eq(3, 3.0000001)

    def test_numpy_scalars(self):
        assert approx_eq(np.float64(2.0), np.float32(2.0))

    def test_nan_never_equal(self):
        assert not approx_eq(float("nan"), float("nan"), 1.0)

    def test_default_variant_uses_1e_6(self):
        assert DEFAULT_EPSILON == 1e-6
        assert approx_eq_default(10.0, 10.0 + 9e-7)
        assert not approx_eq_default(10.0, 10.0 + 1.1e-6)


# ═══════════════════════════════════════════════════════════════════════
# Composite types
# ═══════════════════════════════════════════════════════════════════════


class TestCompositeApproxEq:

    def test_vectors_implement_protocol(self):
        assert isinstance(Vector2(1, 2), ApproxEq)
        assert isinstance(Vector3(1, 2, 3), ApproxEq)
        assert isinstance(Matrix.zeros(1, 1), ApproxEq)

    def test_vector2_componentwise(self):
        assert approx_eq(Vector2(1.0, 2.0), Vector2(1.0 + 1e-7, 2.0 - 1e-7))
        assert not approx_eq(Vector2(1.0, 2.0), Vector2(1.0, 2.1))

    def test_vector3_componentwise(self):
        assert approx_eq(Vector3(1, 2, 3), Vector3(1, 2, 3.0000001))
        assert not approx_eq(Vector3(1, 2, 3), Vector3(1, 2, 3.01), 1e-3)

    def test_matrix_elementwise(self):
        a = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        b = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0000001])
        assert approx_eq(a, b)
        assert not approx_eq(a, b, 0.0)

    def test_mismatched_types_raise(self):
        with pytest.raises(TypeError, match="cannot compare Vector2 with Vector3"):
            approx_eq(Vector2(0, 0), Vector3(0, 0, 0))

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            approx_eq("1.0", "1.0")

    def test_bool_is_not_a_scalar(self):
        with pytest.raises(TypeError):
            approx_eq(True, 1.0)


# ═══════════════════════════════════════════════════════════════════════
# Epsilon validation and tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestEpsilonAndTiers:

    def test_negative_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            approx_eq(1.0, 1.0, -1e-9)

    def test_nan_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            approx_eq(1.0, 1.0, float("nan"))

    def test_default_tier(self):
        assert select_tolerance() is DEFAULT
        assert DEFAULT.atol == DEFAULT_EPSILON

    def test_strict_tier(self):
        tier = select_tolerance('strict')
        assert tier is STRICT
        assert tier.atol < DEFAULT.atol

    def test_unknown_tier(self):
        with pytest.raises(ValidationError, match="unknown tolerance tier"):
            select_tolerance('loose')

    def test_tier_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT.atol = 1.0

    def test_tier_fields(self):
        tier = ToleranceTier(atol=0.1, name='custom', description='test')
        assert approx_eq(1.0, 1.05, tier.atol)

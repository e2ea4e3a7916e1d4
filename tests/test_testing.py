"""
Tests for the pylinalg.testing assertion helpers.
"""

import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix import Matrix
from pylinalg.testing import assert_approx_equal
from pylinalg.vector import Vector2, Vector3


class TestAssertApproxEqual:

    def test_scalars_pass(self):
        assert_approx_equal(1.0, 1.0 + 1e-7)

    def test_scalar_failure_message(self):
        with pytest.raises(AssertionError) as exc_info:
            assert_approx_equal(1.0, 1.5, 0.1)
        message = str(exc_info.value)
        assert "scalar not approx equal" in message
        assert "left:  [1.0]" in message
        assert "right: [1.5]" in message
        assert "diffs: [0.5] > 0.1" in message

    def test_vector2_failure_lists_components(self):
        with pytest.raises(AssertionError, match="Vector2 not approx equal"):
            assert_approx_equal(Vector2(1.0, 2.0), Vector2(1.0, 3.0))

    def test_vector3_pass(self):
        assert_approx_equal(Vector3(1.0, 2.0, 3.0), Vector3(1.0, 2.0, 3.0000001))

    def test_matrix(self):
        a = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
        assert_approx_equal(a, Matrix(2, 2, [1.0, 2.0, 3.0, 4.0000001]))
        with pytest.raises(AssertionError, match="Matrix 2x2 not approx equal"):
            assert_approx_equal(a, Matrix.zeros(2, 2))

    def test_nan_fails(self):
        with pytest.raises(AssertionError):
            assert_approx_equal(float("nan"), 0.0, 1.0)

    def test_kind_mismatch(self):
        with pytest.raises(AssertionError, match="Vector2 not comparable with Vector3"):
            assert_approx_equal(Vector2(0, 0), Vector3(0, 0, 0))

    def test_matrix_shape_mismatch(self):
        with pytest.raises(AssertionError, match="not comparable"):
            assert_approx_equal(Matrix.zeros(1, 2), Matrix.zeros(2, 1))

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            assert_approx_equal([1.0], [1.0])

    def test_bad_epsilon(self):
        with pytest.raises(ValidationError):
            assert_approx_equal(1.0, 1.0, -1.0)

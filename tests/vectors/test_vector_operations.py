"""
Tests for element-wise arithmetic on vectors.

Validates:
    - Operators (+, -, *, /, //, %, unary -) and their shape checks
    - Checked integer overflow versus the wrapping variants
    - Rounding, clamping, edge, scale, lerp
"""

import numpy as np
import pytest

from geode import (
    ArithmeticOverflowError,
    Bounds,
    DimensionError,
    InvalidArgumentError,
    Vector,
)


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add_and_subtract(self):
        a, b = Vector([1, 2, 3]), Vector([10, 20, 30])
        assert a + b == Vector([11, 22, 33])
        assert b - a == Vector([9, 18, 27])

    def test_add_mixed_dtypes_promotes(self):
        result = Vector([1, 2]) + Vector([0.5, 0.5])
        assert result == Vector([1.5, 2.5])

    def test_size_mismatch_raises(self):
        with pytest.raises(DimensionError, match="Vectors must have the same dimensions"):
            Vector([1, 2]) + Vector([1, 2, 3])

    def test_add_scalar_unsupported(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) + 1

    def test_negate(self):
        assert -Vector([1, -2, 0]) == Vector([-1, 2, 0])
        assert +Vector([1, 2]) == Vector([1, 2])

    def test_scalar_multiply_both_sides(self):
        vector = Vector([1, -2, 3])
        assert vector * 2 == Vector([2, -4, 6])
        assert 2 * vector == Vector([2, -4, 6])

    def test_true_divide(self):
        np.testing.assert_allclose(Vector([1, 2, 3]) / 2, [0.5, 1.0, 1.5])

    def test_float_divide_by_zero_is_ieee(self):
        result = Vector([1.0, -1.0]) / 0
        assert result == Vector([np.inf, -np.inf])

    def test_floor_divide(self):
        assert Vector([7, -7]) // 2 == Vector([3, -4])

    def test_integer_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector([1, 2]) // 0

    def test_modulo_scalar_and_vector(self):
        assert Vector([7, 8, 9]) % 4 == Vector([3, 0, 1])
        assert Vector([7, 8, 9]) % Vector([2, 3, 4]) == Vector([1, 2, 1])

    def test_integer_modulo_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector([7, 8]) % Vector([1, 0])


# ═══════════════════════════════════════════════════════════════════════
# Checked versus wrapping integer arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestOverflow:

    def test_checked_add_raises(self):
        a = Vector([127, 0], dtype=np.int8)
        b = Vector([1, 0], dtype=np.int8)
        with pytest.raises(ArithmeticOverflowError):
            a + b

    def test_add_wrapping(self):
        a = Vector([127, 0], dtype=np.int8)
        b = Vector([1, 0], dtype=np.int8)
        assert a.add_wrapping(b) == Vector([-128, 0], dtype=np.int8)

    def test_sub_wrapping(self):
        a = Vector([-128], dtype=np.int8)
        b = Vector([1], dtype=np.int8)
        with pytest.raises(ArithmeticOverflowError):
            a - b
        assert a.sub_wrapping(b) == Vector([127], dtype=np.int8)

    def test_checked_scalar_multiply_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([100], dtype=np.int8) * 2

    def test_mul_wrapping(self):
        result = Vector([100], dtype=np.int8).mul_wrapping(2)
        assert result == Vector([-56], dtype=np.int8)
        assert result.dtype == np.int8

    def test_negate_minimum_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            -Vector([-128], dtype=np.int8)

    def test_abs_minimum_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([-128], dtype=np.int8).abs()

    def test_sum_overflow_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([100, 100], dtype=np.int8).sum()

    def test_float_overflow_is_ieee(self):
        result = Vector([1e308]) * 10
        assert np.isinf(result[0])


class TestWideScalars:

    def test_floor_divide_by_wide_int(self):
        result = Vector([1, 2], dtype=np.int8) // 1000
        assert result == Vector([0, 0], dtype=np.int8)
        assert result.dtype == np.int8

    def test_floor_divide_by_wide_negative_int(self):
        assert Vector([-3, 7], dtype=np.int8) // -1000 == Vector([0, -1], dtype=np.int8)

    def test_modulo_by_wide_int(self):
        assert Vector([1, 2], dtype=np.int8) % 1000 == Vector([1, 2], dtype=np.int8)

    def test_true_divide_by_wide_int(self):
        result = Vector([1, 2], dtype=np.int8) / 1000
        np.testing.assert_allclose(np.asarray(result), [0.001, 0.002])

    def test_multiply_by_wide_int_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([1, 2], dtype=np.int8) * 1000

    def test_multiply_unsigned_by_negative_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([1, 2], dtype=np.uint8) * -1

    def test_multiply_zero_by_wide_int(self):
        assert Vector([0, 0], dtype=np.int8) * 1000 == Vector([0, 0], dtype=np.int8)

    def test_mul_wrapping_by_wide_int(self):
        result = Vector([1, 2], dtype=np.int8).mul_wrapping(1000)
        assert result == Vector([-24, -48], dtype=np.int8)
        assert result.dtype == np.int8


# ═══════════════════════════════════════════════════════════════════════
# Unary element-wise functions
# ═══════════════════════════════════════════════════════════════════════


class TestUnary:

    def test_abs(self):
        assert Vector([-5, 42, -20]).abs() == Vector([5, 42, 20])

    def test_abs2(self):
        assert Vector([-5, 3, -2]).abs2() == Vector([25, 9, 4])

    def test_abs2_complex(self):
        result = Vector([3 + 4j, 1j]).abs2()
        np.testing.assert_allclose(np.asarray(result), [25.0, 1.0])

    def test_sign(self):
        assert Vector([-3, 0, 7]).sign() == Vector([-1, 0, 1])

    def test_round(self):
        result = Vector([1.25, -5.77, 3.01]).round(1)
        np.testing.assert_allclose(np.asarray(result), [1.2, -5.8, 3.0])

    def test_round_ties_to_even(self):
        assert Vector([0.5, 1.5, 2.5]).round() == Vector([0.0, 2.0, 2.0])

    def test_ceil_and_floor(self):
        vector = Vector([1.2, -1.2])
        assert vector.ceil() == Vector([2.0, -1.0])
        assert vector.floor() == Vector([1.0, -2.0])

    def test_integer_rounding_is_identity(self):
        vector = Vector([1, -2, 3])
        assert vector.round() == vector
        assert vector.ceil() == vector
        assert vector.floor() == vector

    def test_fraction(self):
        result = Vector([1.5, -5.75, 3.0]).fraction()
        np.testing.assert_allclose(np.asarray(result), [0.5, 0.25, 0.0])


# ═══════════════════════════════════════════════════════════════════════
# Clamp
# ═══════════════════════════════════════════════════════════════════════


class TestClamp:

    def test_scalar_bounds(self):
        assert Vector([5, -2, 0]).clamp(-1, 1) == Vector([1, -1, 0])

    def test_bounds_object(self):
        assert Vector([5, -2, 0]).clamp(Bounds(-1, 1)) == Vector([1, -1, 0])

    def test_open_ends(self):
        assert Vector([5, -2, 0]).clamp(Bounds(lower=-1)) == Vector([5, -1, 0])
        assert Vector([5, -2, 0]).clamp(None, 1) == Vector([1, -2, 0])

    def test_exclusive_without_upper_end_accepted(self):
        assert Vector([5, -2]).clamp(Bounds(0, None, exclusive=True)) == Vector([5, 0])

    def test_vector_bounds(self):
        result = Vector([5, -2, 0]).clamp(Vector([0, 0, 1]), Vector([2, 2, 2]))
        assert result == Vector([2, 0, 1])

    def test_exclusive_bounds_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Vector([5, -2, 0]).clamp(Bounds(-1, 1, exclusive=True))

    def test_python_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Vector([5, -2, 0]).clamp(range(-1, 2))

    def test_lower_above_upper_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Vector([5, -2, 0]).clamp(2, 1)

    def test_bound_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Vector([5, -2, 0]).clamp(Vector([0, 0]), 1)

    def test_unsupported_bound_type(self):
        with pytest.raises(TypeError):
            Vector([1, 2]).clamp((0, 1))

    def test_wide_int_bounds_leave_values(self):
        result = Vector([1, 2], dtype=np.int8).clamp(-1000, 1000)
        assert result == Vector([1, 2], dtype=np.int8)
        assert result.dtype == np.int8

    def test_wide_lower_bound_above_range_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([1, 2], dtype=np.int8).clamp(200, None)

    def test_wide_upper_bound_below_range_raises(self):
        with pytest.raises(ArithmeticOverflowError):
            Vector([1, 2], dtype=np.int8).clamp(None, -200)


# ═══════════════════════════════════════════════════════════════════════
# Edge, scale, lerp
# ═══════════════════════════════════════════════════════════════════════


class TestEdge:

    def test_scalar_threshold(self):
        assert Vector([1, 2, 3]).edge(2) == Vector([0, 1, 1])

    def test_vector_threshold(self):
        assert Vector([1, 2, 3]).edge(Vector([3, 2, 1])) == Vector([0, 1, 1])

    def test_keeps_dtype(self):
        assert Vector([0.5, 1.5]).edge(1.0).dtype == np.float64


class TestScale:

    def test_scale_by_scalar(self):
        assert Vector([5, -2, 0]).scale(3) == Vector([15, -6, 0])

    def test_scale_by_vector(self):
        assert Vector([1, 0, -1]).scale(Vector([2, 3, 5])) == Vector([2, 0, -5])

    def test_scale_in_place_for_floats(self):
        vector = Vector([1.0, 2.0])
        result = vector.scale_(2)
        assert result is vector
        assert result == Vector([2.0, 4.0])

    def test_scale_in_place_keeps_storage_read_only(self):
        vector = Vector([1.0, 2.0]).scale_(2)
        assert vector.to_buffer().readonly

    def test_scale_in_place_falls_back_for_integers(self):
        vector = Vector([1, 2])
        result = vector.scale_(3)
        assert result == Vector([3, 6])
        assert vector == Vector([1, 2])

    def test_scale_in_place_falls_back_on_promotion(self):
        vector = Vector([1.0, 2.0], dtype=np.float32)
        result = vector.scale_(Vector([2.0, 2.0]))
        assert result == Vector([2.0, 4.0])
        assert result.dtype == np.float64


class TestLerp:

    def test_midpoint(self):
        result = Vector([0, 10]).lerp(Vector([10, 20]), 0.5)
        assert result == Vector([5.0, 15.0])

    def test_exact_at_both_ends(self):
        a = Vector([1e20, 1.0])
        b = Vector([1.0, 1e20])
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

    def test_size_mismatch(self):
        with pytest.raises(DimensionError):
            Vector([1, 2]).lerp(Vector([1, 2, 3]), 0.5)

    def test_boundary_fixture(self):
        a = Vector([3.0, 5.0, 7.0])
        b = Vector([23.0, 35.0, 47.0])
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

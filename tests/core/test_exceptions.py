"""
Tests for the Geode exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via GeodeError)
    - Built-in bases (IndexError, OverflowError) for interoperability
    - Diagnostic attributes on DimensionError, IndexOutOfRangeError,
      ArithmeticOverflowError
    - Default attribute values (None for optional attributes)
"""

import pytest

from geode.core.exceptions import (
    ArithmeticOverflowError,
    DimensionError,
    GeodeError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NumericalError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via GeodeError."""

    def test_validation_error_is_geode_error(self):
        with pytest.raises(GeodeError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_invalid_argument_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidArgumentError("exclusive range")

    def test_index_error_is_geode_error(self):
        with pytest.raises(GeodeError):
            raise IndexOutOfRangeError("out of range")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_index_error_is_not_validation_error(self):
        assert not isinstance(IndexOutOfRangeError("x"), ValidationError)

    def test_overflow_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise ArithmeticOverflowError("overflow")

    def test_overflow_is_builtin_overflow_error(self):
        with pytest.raises(OverflowError):
            raise ArithmeticOverflowError("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Simple exceptions (no extra attributes)
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleExceptions:
    """GeodeError, ValidationError, InvalidArgumentError carry only a message."""

    def test_geode_error_message(self):
        assert str(GeodeError("base error")) == "base error"

    def test_validation_error_message(self):
        err = ValidationError("components: cannot convert to array")
        assert "cannot convert" in str(err)

    def test_invalid_argument_message(self):
        err = InvalidArgumentError("Can't clamp an exclusive range")
        assert "exclusive" in str(err)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries the expected and actual shapes."""

    def test_all_attributes(self):
        err = DimensionError("Vectors must match", expected=(3,), actual=(2,))
        assert str(err) == "Vectors must match"
        assert err.expected == (3,)
        assert err.actual == (2,)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.expected is None
        assert err.actual is None


class TestIndexOutOfRangeError:
    """IndexOutOfRangeError carries the index and the container bounds."""

    def test_flat_index(self):
        err = IndexOutOfRangeError("index 5 out of range", index=5, bounds=(3,))
        assert err.index == 5
        assert err.bounds == (3,)

    def test_two_dimensional_index(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            raise IndexOutOfRangeError("bad", index=(2, 0), bounds=(2, 2))
        assert exc_info.value.index == (2, 0)
        assert exc_info.value.bounds == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("bad")
        assert err.index is None
        assert err.bounds is None


class TestArithmeticOverflowError:
    """ArithmeticOverflowError names the dtype and operation."""

    def test_all_attributes(self):
        err = ArithmeticOverflowError("add overflowed int8", dtype="int8", operation="add")
        assert err.dtype == "int8"
        assert err.operation == "add"

    def test_defaults_are_none(self):
        err = ArithmeticOverflowError("overflow")
        assert err.dtype is None
        assert err.operation is None

"""
Element-wise arithmetic shared by vectors and matrices.

Intended to be used as a mix-in on FixedContainer subclasses. Every method
returns a new container of the same kind and shape, except ``scale_``,
which may reuse this container's storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from geode.core import arithmetic
from geode.core.arithmetic import checked, checked_divide, is_scalar, wrapping
from geode.core.exceptions import ArithmeticOverflowError, InvalidArgumentError


@dataclass(frozen=True)
class Bounds:
    """
    Closed interval used by ``clamp``.
    
    Either end may be None for no bound on that side. Each end may be a
    scalar or a container with the same shape as the one being clamped.
    Exclusive bounds exist only so they can be rejected explicitly.
    """
    lower: Any = None
    upper: Any = None
    exclusive: bool = False


_UNSET = object()


class ElementwiseOperations:
    """Arithmetic, rounding, clamping and interpolation, element by element."""

    __slots__ = ()

    def abs(self):
        """
        Absolute value of each element.
        
        ```
        Vector([-5, 42, -20]).abs()  # => (5, 42, 20)
        ```
        """
        return self._wrap(checked(np.abs, self._data, name="abs"))

    def abs2(self):
        """
        Square of the absolute value of each element.
        
        ```
        Vector([-5, 3, -2]).abs2()  # => (25, 9, 4)
        ```
        """
        data = self._data
        if np.issubdtype(data.dtype, np.complexfloating):
            return self._wrap(data.real * data.real + data.imag * data.imag)
        return self._wrap(checked(np.multiply, data, data, name="abs2"))

    def sign(self):
        """1 for positive elements, -1 for negative ones, 0 for zero."""
        return self._wrap(np.sign(self._data))

    def round(self, digits: int | None = None):
        """
        Round each element, ties to even.
        
        ```
        Vector([1.25, -5.77, 3.01]).round(1)  # => (1.2, -5.8, 3.0)
        ```
        """
        if digits is None:
            if not np.issubdtype(self._data.dtype, np.inexact):
                return self._wrap(self._data.copy())
            return self._wrap(np.round(self._data))
        return self._wrap(np.round(self._data, digits))

    def ceil(self):
        """Round each element up to the nearest integer."""
        if not np.issubdtype(self._data.dtype, np.inexact):
            return self._wrap(self._data.copy())
        return self._wrap(np.ceil(self._data))

    def floor(self):
        """Round each element down to the nearest integer."""
        if not np.issubdtype(self._data.dtype, np.inexact):
            return self._wrap(self._data.copy())
        return self._wrap(np.floor(self._data))

    def fraction(self):
        """
        Fractional part of each element, ``self - floor(self)``.
        
        ```
        Vector([1.5, -5.75, 3.0]).fraction()  # => (0.5, 0.25, 0.0)
        ```
        """
        return self - self.floor()

    def clamp(self, lower: Any, upper: Any = _UNSET):
        """
        Restrict each element to a closed interval.
        
        Accepts ``clamp(lower, upper)`` with scalars or same-shape
        containers (either may be None), or a single ``Bounds``. A Python
        ``range`` is always exclusive of its stop and is rejected, as is
        any exclusive ``Bounds`` with an upper end.
        
        ```
        Vector([5, -2, 0]).clamp(-1, 1)             # => (1, -1, 0)
        Vector([5, -2, 0]).clamp(Bounds(-1, 1))     # => (1, -1, 0)
        Vector([5, -2, 0]).clamp(Bounds(-1, 1, exclusive=True))  # InvalidArgumentError
        ```
        
        Raises:
            InvalidArgumentError: Exclusive range, or lower > upper
            DimensionError: Container bound of a different shape
        """
        if upper is _UNSET:
            lower, upper = _unpack_bounds(lower)

        lo = None if lower is None else self._bound_data(lower, "clamp")
        hi = None if upper is None else self._bound_data(upper, "clamp")
        if lo is not None and hi is not None and np.any(np.asarray(lo) > np.asarray(hi)):
            raise InvalidArgumentError(f"Can't clamp with lower > upper ({lower} > {upper})")

        lo = self._fit_integer_bound(lo, "lower")
        hi = self._fit_integer_bound(hi, "upper")

        result = self._data
        if lo is not None:
            result = np.maximum(result, lo)
        if hi is not None:
            result = np.minimum(result, hi)
        return self._wrap(np.array(result))

    def edge(self, threshold: Any):
        """
        Step function per element: 0 below *threshold*, otherwise 1.
        
        *threshold* is a scalar or a same-shape container. An element equal
        to its threshold maps to 1.
        
        ```
        Vector([1, 2, 3]).edge(2)                  # => (0, 1, 1)
        Vector([1, 2, 3]).edge(Vector([3, 2, 1]))  # => (0, 1, 1)
        ```
        """
        dtype = self._data.dtype
        below = self._data < self._bound_data(threshold, "edge")
        return self._wrap(np.where(below, dtype.type(0), dtype.type(1)).astype(dtype))

    def scale(self, amount: Any):
        """
        Multiply each element by a scalar or the matching element of a
        same-shape container.
        
        ```
        Vector([1, 0, -1]).scale(Vector([2, 3, 5]))  # => (2, 0, -5)
        Vector([5, -2, 0]).scale(3)                  # => (15, -6, 0)
        ```
        """
        return self._wrap(checked(np.multiply, self._data, self._bound_data(amount, "scale"), name="scale"))

    def scale_(self, amount: Any):
        """
        In-place variant of ``scale``.
        
        Writes into this container's storage when the result keeps the
        same floating dtype; otherwise behaves exactly like ``scale``. The
        result is identical either way, but only the returned value is
        guaranteed to hold it. Only call this on a container nothing else
        references, and always use the return value.
        """
        operand = self._bound_data(amount, "scale_")
        data = self._data
        if (
            not np.issubdtype(data.dtype, np.floating)
            or np.result_type(data, operand) != data.dtype
            or not data.flags.owndata
        ):
            return self.scale(amount)

        data.setflags(write=True)
        try:
            np.multiply(data, operand, out=data)
        finally:
            data.setflags(write=False)
        return self

    def lerp(self, other: Any, t: Any):
        """
        Linear interpolation towards *other*.
        
        *t* is a value from 0 to 1, where 0 gives this container and 1 gives
        *other*. Computed as ``self * (1 - t) + other * t``, which is exact
        at both ends even when the magnitudes differ greatly.
        """
        other_data = self._same_shape_data(other, "lerp")
        return self._wrap(
            checked(lambda a, b: arithmetic.lerp(a, b, t), self._data, other_data, name="lerp")
        )

    def __neg__(self):
        return self._wrap(checked(np.negative, self._data, name="negate"))

    def __pos__(self):
        return self

    def __add__(self, other: Any):
        if not self._is_same_family(other):
            return NotImplemented
        other_data = self._same_shape_data(other, "add")
        return self._wrap(checked(np.add, self._data, other_data, name="add"))

    def __sub__(self, other: Any):
        if not self._is_same_family(other):
            return NotImplemented
        other_data = self._same_shape_data(other, "subtract")
        return self._wrap(checked(np.subtract, self._data, other_data, name="subtract"))

    def __mul__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(checked(np.multiply, self._data, other, name="multiply"))

    def __rmul__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(checked(np.multiply, other, self._data, name="multiply"))

    def __truediv__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(checked_divide(np.true_divide, self._data, other, name="division"))

    def __floordiv__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(checked_divide(np.floor_divide, self._data, other, name="division"))

    def __mod__(self, other: Any):
        if not (is_scalar(other) or self._is_same_family(other)):
            return NotImplemented
        operand = self._bound_data(other, "modulo")
        return self._wrap(checked_divide(np.remainder, self._data, operand, name="modulo"))

    def add_wrapping(self, other: Any):
        """Element-wise sum; integer overflow wraps instead of raising."""
        other_data = self._same_shape_data(other, "add_wrapping")
        return self._wrap(wrapping(np.add, self._data, other_data))

    def sub_wrapping(self, other: Any):
        """Element-wise difference; integer overflow wraps instead of raising."""
        other_data = self._same_shape_data(other, "sub_wrapping")
        return self._wrap(wrapping(np.subtract, self._data, other_data))

    def mul_wrapping(self, other: Any):
        """Scale by a scalar; integer overflow wraps instead of raising."""
        if not is_scalar(other):
            raise TypeError(f"mul_wrapping: unsupported operand {type(other).__name__}")
        return self._wrap(wrapping(np.multiply, self._data, other))

    def _bound_data(self, value: Any, operation: str) -> Any:
        # Scalars broadcast; containers must match this shape exactly
        if is_scalar(value):
            return value
        return self._same_shape_data(value, operation)

    def _fit_integer_bound(self, bound: Any, side: str) -> Any:
        # A Python int beyond the integer dtype's range either bounds nothing
        # or would force every element out of range
        dtype = self._data.dtype
        if bound is None or not arithmetic.is_wide_int(bound, dtype):
            return bound
        info = np.iinfo(dtype)
        if (side == "lower" and bound > info.max) or (side == "upper" and bound < info.min):
            raise ArithmeticOverflowError(
                f"clamp {side} bound {bound} overflowed {dtype}",
                dtype=str(dtype),
                operation="clamp",
            )
        return None


def _unpack_bounds(bounds: Any) -> tuple[Any, Any]:
    if isinstance(bounds, range):
        raise InvalidArgumentError(
            "Can't clamp an exclusive range (Python ranges exclude their stop)"
        )
    if not isinstance(bounds, Bounds):
        raise TypeError(
            f"clamp expects (lower, upper) or Bounds, got {type(bounds).__name__}"
        )
    if bounds.exclusive and bounds.upper is not None:
        raise InvalidArgumentError("Can't clamp an exclusive range")
    return bounds.lower, bounds.upper

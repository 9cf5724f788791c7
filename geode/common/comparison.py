"""
Element-wise comparison shared by vectors and matrices.

Intended to be used as a mix-in on FixedContainer subclasses. Relational
methods return a container of the same shape holding booleans (or -1/0/1
for ``compare``); ``==`` on the container itself is the all-elements
equality defined in FixedContainer.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from geode.core.tolerances import select_tolerance


class ElementwiseComparison:
    """Relational predicates applied element by element."""

    __slots__ = ()

    def compare(self, other: Any):
        """
        Three-way comparison of each element against *other*'s.
        
        Each element of the result is -1 if this element is less, 0 if
        equal and 1 if greater. Elements that can't be ordered (NaN)
        compare as 0.
        
        ```
        Vector([1, 2, 3]).compare(Vector([3, 2, 1]))  # => (-1, 0, 1)
        ```
        """
        a = self._data
        b = self._same_shape_data(other, "compare")
        result = np.where(a < b, -1, np.where(a > b, 1, 0)).astype(np.int32)
        return self._wrap(result)

    def eq(self, other: Any):
        """
        Element-wise ``==``.
        
        ```
        Vector([1, 2, 3]).eq(Vector([3, 2, 1]))  # => (False, True, False)
        ```
        """
        return self._wrap(self._data == self._same_shape_data(other, "eq"))

    def lt(self, other: Any):
        """Element-wise ``<``."""
        return self._wrap(self._data < self._same_shape_data(other, "lt"))

    def le(self, other: Any):
        """Element-wise ``<=``."""
        return self._wrap(self._data <= self._same_shape_data(other, "le"))

    def gt(self, other: Any):
        """Element-wise ``>``."""
        return self._wrap(self._data > self._same_shape_data(other, "gt"))

    def ge(self, other: Any):
        """Element-wise ``>=``."""
        return self._wrap(self._data >= self._same_shape_data(other, "ge"))

    def is_zero(self) -> bool:
        """
        True if every element equals zero.
        
        ```
        Vector([0, 0, 0]).is_zero()  # => True
        Vector([1, 0, 2]).is_zero()  # => False
        ```
        """
        return bool(np.all(self._data == 0))

    def is_near_zero(self, tolerance: Any = None) -> bool:
        """
        True if every element's absolute value is at most *tolerance*.
        
        Without a tolerance, the absolute tolerance of the dtype's tier
        (FP32 or FP64) is used.
        
        ```
        Vector([0.0, 0.01, 0.001]).is_near_zero(0.01)  # => True
        Vector([0.1, 0.0, 0.01]).is_near_zero(0.01)    # => False
        ```
        """
        if tolerance is None:
            tolerance = select_tolerance(self._data.dtype).atol
        return bool(np.all(np.abs(self._data) <= tolerance))

"""
Vector: fixed-size ordered sequence of scalars.

A vector of size N holds exactly N elements of one numpy dtype. The size
is fixed at construction and never changes; every operation returns a
new vector. Arithmetic, comparison, geometry and matrix interaction are
mixed in from the capability modules.

Construction:
    Vector([1, 2, 3])
    Vector.of(1, 2, 3)
    Vector.generate(3, lambda i: i * 5)
    Vector.zero(3)
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from geode.common.base import FixedContainer
from geode.common.comparison import ElementwiseComparison
from geode.common.operations import ElementwiseOperations
from geode.core.exceptions import DimensionError
from geode.core.validation import (
    check_components,
    check_index,
    check_integer,
    check_ndim,
    check_positive_size,
)
from geode.vectors.geometry import VectorGeometry
from geode.vectors.matrices import VectorMatrices


class Vector(
    VectorGeometry,
    VectorMatrices,
    ElementwiseOperations,
    ElementwiseComparison,
    FixedContainer,
):
    """
    Fixed-size vector of scalars.
    
    Indices run from 0 to ``size - 1``; negative indices are out of range.
    Vectors of different sizes are never equal and never combine: every
    binary operation checks sizes and raises DimensionError on mismatch.
    """

    __slots__ = ()

    _kind = "Vectors"

    def __init__(self, components: ArrayLike | Vector, dtype: DTypeLike = None):
        """
        Create a vector from existing components.
        
        Args:
            components: Sequence of scalars, 1D array, or another vector to copy
            dtype: Optional scalar type; inferred from the components if omitted
            
        Raises:
            DimensionError: If the components are empty or not one-dimensional
            ValidationError: If the components are not numeric
        """
        if isinstance(components, Vector):
            components = components._data
        data = check_components(components, "components", dtype)
        check_ndim(data, 1, "components")
        check_positive_size(data, "components")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def of(cls, *components: Any, dtype: DTypeLike = None) -> Vector:
        """
        Create a vector from positional components.
        
        ```
        Vector.of(1, 2, 3)  # => (1, 2, 3)
        ```
        """
        return cls(components, dtype=dtype)

    @classmethod
    def generate(
        cls,
        size: int,
        fn: Callable[[int], Any],
        dtype: DTypeLike = None,
    ) -> Vector:
        """
        Create a vector by calling *fn* with each index.
        
        ```
        Vector.generate(3, lambda i: i * 5)  # => (0, 5, 10)
        ```
        """
        return cls([fn(i) for i in range(size)], dtype=dtype)

    @classmethod
    def zero(cls, size: int, dtype: DTypeLike = np.float64) -> Vector:
        """
        Create a vector of *size* zeroes.
        
        ```
        Vector.zero(3)  # => (0.0, 0.0, 0.0)
        ```
        """
        if size < 1:
            raise DimensionError(f"size must be positive, got {size}", actual=(size,))
        return cls._from_array(np.zeros(size, dtype=dtype))

    def _is_same_family(self, other: Any) -> bool:
        return isinstance(other, Vector)

    def get(self, index: int) -> Any:
        """
        Element at *index*.
        
        Raises:
            IndexOutOfRangeError: If index is outside 0...size
        """
        return self._data[check_index(index, self.size, "index")]

    def get_or_none(self, index: int) -> Any | None:
        """Element at *index*, or None if the index is out of range."""
        index = check_integer(index, "index")
        if not 0 <= index < self.size:
            return None
        return self._data[index]

    def unsafe_fetch(self, index: int) -> Any:
        """
        Element at *index* without a bounds check.
        
        Only for call sites that have already validated the index.
        Out-of-range or negative indices give unspecified results.
        """
        return self._data[index]

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    @property
    def x(self) -> Any:
        """First component."""
        return self._component(0, "x")

    @property
    def y(self) -> Any:
        """Second component."""
        return self._component(1, "y")

    @property
    def z(self) -> Any:
        """Third component."""
        return self._component(2, "z")

    @property
    def w(self) -> Any:
        """Fourth component."""
        return self._component(3, "w")

    def _component(self, index: int, name: str) -> Any:
        if self.size <= index:
            raise DimensionError(
                f"Vector does not have a {name} component (size {self.size} < {index + 1})",
                actual=self.shape,
            )
        return self._data[index]

    def to_tuple(self) -> tuple[Any, ...]:
        """Components as a tuple of Python scalars."""
        return tuple(self._data.tolist())

    def map(self, fn: Callable[[Any], Any]) -> Vector:
        """
        New vector with *fn* applied to each component.
        
        The result may have a different dtype.
        
        ```
        Vector([1, 2, 3]).map(lambda v: v * 2)  # => (2, 4, 6)
        ```
        """
        return self._mapped([fn(v) for v in self._data])

    def map_with_index(self, fn: Callable[[Any, int], Any], offset: int = 0) -> Vector:
        """
        Like ``map``, but *fn* also receives an index starting at *offset*.
        
        ```
        vector = Vector([1, 2, 3])
        vector.map_with_index(lambda v, i: v * i)     # => (0, 2, 6)
        vector.map_with_index(lambda v, i: v + i, 3)  # => (4, 6, 8)
        ```
        """
        return self._mapped([fn(v, offset + i) for i, v in enumerate(self._data)])

    def zip_map(self, other: Vector, fn: Callable[[Any, Any], Any]) -> Vector:
        """
        New vector from *fn* applied to matching components of both vectors.
        
        ```
        Vector([1, 2, 3]).zip_map(Vector([3, 2, 1]), min)  # => (1, 2, 1)
        ```
        
        Raises:
            DimensionError: If the vectors differ in size
        """
        other_data = self._same_shape_data(other, "zip_map")
        return self._mapped([fn(a, b) for a, b in zip(self._data, other_data)])

    def _mapped(self, values: list[Any]) -> Vector:
        data = check_components(values, "mapped values")
        check_ndim(data, 1, "mapped values")
        return type(self)._from_array(data)

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._data) + ")"

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r}, dtype={self.dtype})"

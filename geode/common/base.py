"""
FixedContainer: storage and value semantics shared by vectors and matrices.

A container owns a read-only, C-contiguous numpy array whose shape never
changes after construction. Every transformation returns a new container.
The capability mixins (operations, comparison, geometry, ...) are written
against the small surface defined here:

    _data              the read-only storage
    _wrap(array)       build a container of the same kind around a fresh array
    _is_same_family()  whether another object is the same kind of container
    _same_shape_data() the other container's storage, after a shape check
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from geode.core.arithmetic import exact_sum
from geode.core.validation import check_same_shape


class FixedContainer:
    """Base class for fixed-shape numeric containers."""

    __slots__ = ("_data",)

    # Numpy must never broadcast a container into an array operation;
    # returning NotImplemented lets our reflected operators run instead.
    __array_ufunc__ = None

    # Used in shape error messages: "Vectors" / "Matrices"
    _kind = "Containers"

    _data: NDArray[Any]

    @classmethod
    def _from_array(cls, array: NDArray[Any]) -> FixedContainer:
        """
        Wrap *array* without copying.
        
        The caller hands over ownership: *array* must be freshly allocated
        and not referenced anywhere else.
        """
        container = object.__new__(cls)
        array.setflags(write=False)
        container._data = array
        return container

    def _wrap(self, array: Any) -> FixedContainer:
        """Build a same-kind container around an operation's result."""
        result = np.asarray(array)
        if not result.flags.owndata or not result.flags.c_contiguous:
            result = np.array(result, order="C")
        return type(self)._from_array(result)

    def _is_same_family(self, other: Any) -> bool:
        raise NotImplementedError

    def _same_shape_data(self, other: Any, operation: str) -> NDArray[Any]:
        """
        Return *other*'s storage after verifying it has this shape.
        
        Raises:
            TypeError: If *other* is not the same kind of container
            DimensionError: If the shapes differ
        """
        if not self._is_same_family(other):
            raise TypeError(
                f"{operation}: expected {type(self).__name__}, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape, self._kind)
        return other._data

    @property
    def shape(self) -> tuple[int, ...]:
        """Shape of the container."""
        return tuple(self._data.shape)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(self._data.size)

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of the elements."""
        return self._data.dtype

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.reshape(-1))

    def __eq__(self, other: object) -> bool:
        if not self._is_same_family(other):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self._kind, self.shape, tuple(self._data.reshape(-1).tolist())))

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        # Storage is shared and read-only, so every export is a fresh copy
        if copy is False:
            raise ValueError(f"{type(self).__name__} can only be exported as a copy")
        return np.array(self._data, dtype=dtype, copy=True)

    def sum(self) -> Any:
        """Sum of all elements (checked for integer dtypes)."""
        return exact_sum(self._data)

    def to_numpy(self) -> NDArray[Any]:
        """Writable copy of the elements as a numpy array."""
        return self._data.copy()

    def to_buffer(self) -> memoryview:
        """
        Read-only view over the elements in row-major order.
        
        The view is flat (one dimension, ``size`` items) and shares memory
        with this container. Intended for handing the data to external
        numeric APIs for the duration of a call.
        """
        return memoryview(self._data.reshape(-1))

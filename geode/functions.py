"""
Free functions over scalars and containers.

``minimum`` and ``maximum`` accept a container with another container of
the same shape or with a scalar. ``lerp`` works on scalars and
containers alike. ``edge`` is the scalar step function; containers have
their own ``edge`` method.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from geode.common.base import FixedContainer
from geode.core import arithmetic
from geode.core.arithmetic import is_scalar


def minimum(a: Any, b: Any) -> Any:
    """
    Element-wise minimum.
    
    ```
    minimum(Vector([1, 5, 3]), Vector([4, 2, 6]))  # => (1, 2, 3)
    minimum(Vector([1, 5, 3]), 2)                  # => (1, 2, 2)
    ```
    """
    return _elementwise(np.minimum, a, b, "minimum")


def maximum(a: Any, b: Any) -> Any:
    """
    Element-wise maximum.
    
    ```
    maximum(Vector([1, 5, 3]), Vector([4, 2, 6]))  # => (4, 5, 6)
    ```
    """
    return _elementwise(np.maximum, a, b, "maximum")


def lerp(a: Any, b: Any, t: Any) -> Any:
    """
    Linear interpolation between *a* and *b* by *t* (0 gives *a*, 1 gives *b*).
    
    Containers delegate to their ``lerp`` method.
    """
    if isinstance(a, FixedContainer):
        return a.lerp(b, t)
    return arithmetic.lerp(a, b, t)


def edge(value: Any, threshold: Any) -> Any:
    """
    Step function: 0 if *value* is below *threshold*, otherwise 1.
    
    ```
    edge(3, 5)      # => 0
    edge(5.0, 5.0)  # => 1.0
    ```
    """
    if isinstance(value, FixedContainer):
        return value.edge(threshold)
    return arithmetic.edge(value, threshold)


def _elementwise(op: Any, a: Any, b: Any, name: str) -> Any:
    if isinstance(a, FixedContainer):
        return a._wrap(op(a._data, a._bound_data(b, name)))
    if isinstance(b, FixedContainer):
        return b._wrap(op(b._bound_data(a, name), b._data))
    if is_scalar(a) and is_scalar(b):
        return op(a, b)
    raise TypeError(
        f"{name} expects containers or scalars, got "
        f"{type(a).__name__} and {type(b).__name__}"
    )

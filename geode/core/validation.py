"""
Input validation utilities for Geode.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or making assumptions about the intended shape.

Design principles:
    - No silent type coercion (except np.array on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation names included in all shape error messages
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from geode.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_components(
    components: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and copy input into a fresh numpy array.
    
    Accepts any array-like. Rejects inputs that result in object dtype
    (indicating ragged rows, mixed types or non-numeric data) and
    non-numeric dtypes other than bool.
    
    Args:
        components: Input to validate
        name: Parameter name for error messages
        dtype: Optional dtype to cast to
        
    Returns:
        C-contiguous numpy.ndarray that shares no memory with the input
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If nested input is ragged
    """
    try:
        result = np.array(components, dtype=dtype, copy=True, order="C")
    except ValueError as e:
        if "inhomogeneous" in str(e):
            raise DimensionError(f"{name}: rows have different sizes") from e
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D data, got {array.ndim}D with shape {array.shape}"
        )


def check_positive_size(array: NDArray[Any], name: str) -> None:
    """
    Verify every dimension of the array is at least one.
    
    Raises:
        DimensionError: If any dimension is zero
    """
    if array.size == 0:
        raise DimensionError(
            f"{name}: dimensions must be positive, got shape {array.shape}",
            actual=tuple(array.shape),
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    kind: str,
) -> None:
    """
    Verify two containers have identical shapes.
    
    Args:
        left: Shape of the receiver
        right: Shape of the other operand
        kind: "Vectors" or "Matrices", used in the message
        
    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{kind} must have the same dimensions for this operation "
            f"({_format_shape(right)} != {_format_shape(left)})",
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, ...],
) -> None:
    """
    Verify a product's inner dimensions agree.
    
    *left* is the (rows, columns) of the left matrix, *right* is the shape
    of the right operand (a matrix or a vector).
    
    Raises:
        DimensionError: If columns of the left operand != rows of the right
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"Inner dimensions must match for multiplication "
            f"({_format_shape(left)} * {_format_shape(right)})",
            expected=(left[1],),
            actual=(right[0],),
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.
    
    Raises:
        DimensionError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise DimensionError(
            f"{operation} can only be called on square matrices "
            f"(matrix is {rows}x{columns})",
            expected=(rows, rows),
            actual=shape,
        )


def check_integer(index: Any, name: str) -> int:
    """
    Verify *index* is an integer (bools excluded).
    
    Raises:
        TypeError: If the index is not an integer
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(index).__name__}")
    return int(index)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify a single index lies in ``0 <= index < bound``.
    
    Negative indices are rejected rather than counted from the end.
    
    Returns:
        The index as a Python int
        
    Raises:
        IndexOutOfRangeError: If the index is outside the range
        TypeError: If the index is not an integer
    """
    index = check_integer(index, name)
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name} {index} out of range (0...{bound})",
            index=index,
            bounds=(bound,),
        )
    return index


def _format_shape(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape)

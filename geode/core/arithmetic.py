"""
Element-wise arithmetic kernels shared by vectors and matrices.

Two explicit code paths exist for every operation that can overflow:

    checked:  the numpy result is verified against the exact Python-int
              result for integer dtypes; ArithmeticOverflowError on overflow
    wrapping: the numpy result is returned as-is, so integer values wrap
              modulo 2**bits

Floating dtypes follow IEEE semantics on both paths. Nothing here picks
one path silently; callers choose.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from geode.core.exceptions import ArithmeticOverflowError


def is_scalar(value: Any) -> bool:
    """True for Python and numpy numbers (bool included)."""
    return isinstance(value, (numbers.Number, np.generic)) and not isinstance(
        value, (np.ndarray, str, bytes)
    )


def checked(op: Callable[..., Any], *operands: Any, name: str) -> Any:
    """
    Apply *op* and verify integer results did not overflow.
    
    A Python int that does not fit the integer arrays' dtype is not
    handed to numpy; the result is computed exactly and converted back
    to that dtype instead.
    
    Args:
        op: numpy ufunc or function taking the operands
        *operands: Arrays and/or scalars
        name: Operation name for error messages
        
    Returns:
        The numpy result of ``op(*operands)``
        
    Raises:
        ArithmeticOverflowError: If an integer result does not fit its dtype
    """
    dtype = _integer_array_dtype(operands)
    if dtype is not None and any(is_wide_int(x, dtype) for x in operands):
        return _from_exact(op(*(_exact(x) for x in operands)), dtype, name)

    with np.errstate(over="ignore"):
        result = op(*operands)

    dtype = np.asarray(result).dtype
    if not np.issubdtype(dtype, np.integer):
        return result

    exact = op(*(_exact(x) for x in operands))
    if not _fits(exact, dtype):
        raise _overflow(name, dtype)
    return result


def wrapping(op: Callable[..., Any], *operands: Any) -> Any:
    """
    Apply *op*, letting integer results wrap around.
    
    Python ints too wide for the integer arrays' dtype are wrapped into it
    first, which leaves sums, differences and products unchanged modulo
    2**bits.
    """
    dtype = _integer_array_dtype(operands)
    if dtype is not None:
        operands = tuple(_wrap_int(x, dtype) if is_wide_int(x, dtype) else x for x in operands)
    with np.errstate(over="ignore"):
        return op(*operands)


def checked_divide(op: Callable[..., Any], left: Any, right: Any, *, name: str) -> Any:
    """
    Division-like *op* (``floor_divide``, ``remainder``, ``true_divide``).
    
    Integer division by zero raises instead of returning numpy's silent 0.
    Floating division by zero produces inf/nan without a RuntimeWarning.
    
    Raises:
        ZeroDivisionError: Integer division or modulo by zero
        ArithmeticOverflowError: Integer result overflow (INT_MIN // -1)
    """
    if op is not np.true_divide and _is_integer_operation(left, right):
        if np.any(np.asarray(right) == 0):
            raise ZeroDivisionError(f"integer {name} by zero")
        return checked(op, left, right, name=name)

    dtype = _integer_array_dtype((left, right))
    if dtype is not None:
        left, right = (float(x) if is_wide_int(x, dtype) else x for x in (left, right))
    with np.errstate(divide="ignore", invalid="ignore"):
        return op(left, right)


def exact_sum(array: NDArray[Any], *, name: str = "sum") -> Any:
    """
    Sum all elements, keeping the array's dtype.
    
    Integer sums are computed exactly and checked against the dtype.
    """
    if np.issubdtype(array.dtype, np.integer):
        total = sum(int(v) for v in array.ravel().tolist())
        return to_scalar(total, array.dtype, name=name)
    return np.sum(array)


def wrapping_sum(array: NDArray[Any]) -> Any:
    """Sum all elements, wrapping integer overflow in the array's dtype."""
    if np.issubdtype(array.dtype, np.integer):
        with np.errstate(over="ignore"):
            return np.sum(array, dtype=array.dtype)
    return np.sum(array)


def to_scalar(value: Any, dtype: Any, *, name: str) -> Any:
    """
    Convert an exact Python number into a numpy scalar of *dtype*.
    
    Raises:
        ArithmeticOverflowError: If an integer value does not fit
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer) and not _fits(value, dtype):
        raise ArithmeticOverflowError(
            f"{name} overflowed {dtype}",
            dtype=str(dtype),
            operation=name,
        )
    return dtype.type(value)


def lerp(a: Any, b: Any, t: Any) -> Any:
    """
    Linear interpolation between *a* and *b*.
    
    Uses ``a * (1 - t) + b * t``, which returns exactly *a* at ``t == 0``
    and exactly *b* at ``t == 1`` regardless of the magnitudes involved.
    Works on scalars and numpy arrays alike.
    """
    return a * (1 - t) + b * t


def edge(value: Any, threshold: Any) -> Any:
    """
    Step function: 0 if *value* is less than *threshold*, otherwise 1.
    
    The result has the same type as *value*.
    """
    kind = value.dtype.type if isinstance(value, np.generic) else type(value)
    return kind(0) if value < threshold else kind(1)


def is_wide_int(value: Any, dtype: Any) -> bool:
    """True if *value* is a Python int outside the range of integer *dtype*."""
    dtype = np.dtype(dtype)
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return np.issubdtype(dtype, np.integer) and not _fits(value, dtype)


def _exact(operand: Any) -> Any:
    # Python ints never overflow, so object arrays give the exact result
    if isinstance(operand, np.ndarray) and np.issubdtype(operand.dtype, np.integer):
        return operand.astype(object)
    if isinstance(operand, np.integer):
        return int(operand)
    return operand


def _fits(exact: Any, dtype: np.dtype) -> bool:
    info = np.iinfo(dtype)
    values = np.asarray(exact, dtype=object).ravel()
    return all(info.min <= v <= info.max for v in values)


def _integer_array_dtype(operands: tuple[Any, ...]) -> np.dtype | None:
    arrays = [x for x in operands if isinstance(x, np.ndarray)]
    if not arrays:
        return None
    dtype = np.result_type(*arrays)
    return dtype if np.issubdtype(dtype, np.integer) else None


def _is_integer_operation(*operands: Any) -> bool:
    for operand in operands:
        if isinstance(operand, (np.ndarray, np.generic)):
            if not np.issubdtype(operand.dtype, np.integer):
                return False
        elif isinstance(operand, bool) or not isinstance(operand, int):
            return False
    return True


def _from_exact(exact: Any, dtype: np.dtype, name: str) -> NDArray[Any]:
    if not _fits(exact, dtype):
        raise _overflow(name, dtype)
    return np.asarray(exact, dtype=object).astype(dtype)


def _wrap_int(value: int, dtype: np.dtype) -> Any:
    bits = dtype.itemsize * 8
    wrapped = value % (1 << bits)
    if np.issubdtype(dtype, np.signedinteger) and wrapped >= 1 << (bits - 1):
        wrapped -= 1 << bits
    return dtype.type(wrapped)


def _overflow(name: str, dtype: np.dtype) -> ArithmeticOverflowError:
    return ArithmeticOverflowError(
        f"{name} overflowed {dtype} (use the wrapping variant to wrap instead)",
        dtype=str(dtype),
        operation=name,
    )

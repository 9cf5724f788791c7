"""
Exception hierarchy for Geode.

All exceptions inherit from GeodeError to allow catching any
library-specific error. Errors that have a natural builtin counterpart
also inherit from it, so ``except IndexError`` keeps working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class GeodeError(Exception):
    """Base exception for all Geode errors."""
    pass


class ValidationError(GeodeError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Container shapes are incorrect or inconsistent.
    
    Raised when a vector or matrix does not have the shape an operation
    requires: different vector sizes, mismatched inner dimensions in a
    product, or a non-square matrix given to a square-only operation.
    
    Attributes:
        expected: Shape the operation required, if known
        actual: Shape that was received, if known
    """
    
    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidArgumentError(ValidationError):
    """
    An argument is well-formed but not acceptable.
    
    Raised for exclusive ranges given to clamp, or bounds whose lower
    value exceeds the upper value.
    """
    pass


class IndexOutOfRangeError(GeodeError, IndexError):
    """
    Index is outside the bounds of a container.
    
    Attributes:
        index: The offending index (int or (i, j) tuple)
        bounds: Shape of the container that was indexed
    """
    
    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        bounds: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class NumericalError(GeodeError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class ArithmeticOverflowError(NumericalError, OverflowError):
    """
    Checked integer arithmetic overflowed its dtype.
    
    Raised by the checked operators on integer containers. The wrapping
    variants (``add_wrapping`` and friends) never raise this.
    
    Attributes:
        dtype: Name of the integer dtype that overflowed
        operation: Name of the operation that overflowed
    """
    
    def __init__(
        self,
        message: str,
        dtype: str | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.dtype = dtype
        self.operation = operation

"""
Core infrastructure for Geode.

Shared building blocks used by the vector and matrix modules.

Key components:
    exceptions: Exception hierarchy
    validation: Input and shape validators
    arithmetic: Checked and wrapping numeric kernels
    tolerances: Floating-point tolerance tiers and numeric limits
    protocols: AngleLike protocol accepted by rotate
"""

from geode.core.protocols import AngleLike
from geode.core.tolerances import (
    ToleranceTier,
    FP64,
    FP32,
    ANGLE_EPSILON,
    MAX_COFACTOR_SIDE,
    select_tolerance,
)
from geode.core.exceptions import (
    GeodeError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    NumericalError,
    ArithmeticOverflowError,
)

__all__ = [
    # Protocols
    "AngleLike",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP32",
    "ANGLE_EPSILON",
    "MAX_COFACTOR_SIDE",
    "select_tolerance",
    # Exceptions
    "GeodeError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "NumericalError",
    "ArithmeticOverflowError",
]

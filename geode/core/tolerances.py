"""
Tolerance tiers and numeric constants.

Defines precision expectations for the floating dtypes Geode containers
usually hold, plus the thresholds the geometry and square-matrix code
relies on:
- FP64: double precision, the default for Python floats
- FP32: relaxed for single-precision arithmetic

Used by the test suite, ``is_near_zero`` and ``Vector.angle``.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision: results agree to a few ulps
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, agrees to a few ulps',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, relaxed for float32 rounding',
)

# Denominators at or below this are treated as a zero-length vector
# when computing the angle between two vectors.
ANGLE_EPSILON = float(np.finfo(np.float64).eps)

# Cofactor expansion is exponential in the side length; past this size
# determinant() warns that an LU-based method should be used instead.
MAX_COFACTOR_SIDE = 4


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select the tolerance tier for a given dtype."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating) and dtype.itemsize <= 4:
        return FP32
    return FP64

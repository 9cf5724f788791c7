"""
Geode: fixed-size vectors and matrices for numeric and geometric work.

Containers wrap immutable numpy storage whose shape is fixed at
construction. Shape mismatches, out-of-range indices and integer
overflow fail loudly instead of broadcasting, wrapping or truncating.

Submodules:
    vectors: Vector and its geometric operations
    matrices: Matrix, traversals and square-matrix operations
    functions: Scalar and element-wise helpers (minimum, maximum, lerp, edge)
    core: Exceptions, validators, tolerances and arithmetic kernels
"""

__version__ = "0.1.0"

from geode.core.exceptions import (
    GeodeError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    NumericalError,
    ArithmeticOverflowError,
)
from geode.common.operations import Bounds
from geode.vectors import Vector
from geode.matrices import Matrix
from geode import functions

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    "Bounds",
    # Helpers
    "functions",
    # Exceptions
    "GeodeError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "NumericalError",
    "ArithmeticOverflowError",
]

"""
Capabilities shared by vectors and matrices.

Submodules:
    base: FixedContainer storage, equality, hashing and buffer interop
    operations: element-wise arithmetic, clamp, edge, scale, lerp
    comparison: element-wise relational predicates
"""

from geode.common.base import FixedContainer
from geode.common.comparison import ElementwiseComparison
from geode.common.operations import Bounds, ElementwiseOperations

__all__ = [
    "FixedContainer",
    "ElementwiseComparison",
    "ElementwiseOperations",
    "Bounds",
]

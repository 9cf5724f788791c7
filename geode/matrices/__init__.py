"""
Fixed-size matrices.

Components:
    matrix: Matrix container, construction, access, products
    square: Diagonal, trace and determinant of square matrices
    vectors: Row/column vector conversion and matrix-vector products
    iterators: Restartable row, column, diagonal and index traversals
"""

from geode.matrices.matrix import Matrix
from geode.matrices.iterators import (
    IndicesTraversal,
    ElementsWithIndicesTraversal,
    RowTraversal,
    ColumnTraversal,
    DiagonalTraversal,
)

__all__ = [
    "Matrix",
    "IndicesTraversal",
    "ElementsWithIndicesTraversal",
    "RowTraversal",
    "ColumnTraversal",
    "DiagonalTraversal",
]

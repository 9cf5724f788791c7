"""
Methods for vectors interacting with matrices.

Intended to be used as a mix-in on ``Vector``. A vector converts to a
single-row or single-column matrix, and multiplies a square matrix as a
row vector.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from geode.core.arithmetic import checked, wrapping
from geode.core.exceptions import DimensionError


class VectorMatrices:
    """Row/column conversion and row-vector products."""

    __slots__ = ()

    def to_row(self):
        """
        Single-row matrix holding this vector's components.
        
        ```
        Vector([1, 2, 3]).to_row()  # => [[1, 2, 3]]
        ```
        """
        from geode.matrices.matrix import Matrix

        return Matrix._from_array(self._data.reshape(1, -1).copy())

    def to_column(self):
        """
        Single-column matrix holding this vector's components.
        
        ```
        Vector([1, 2, 3]).to_column()  # => [[1], [2], [3]]
        ```
        """
        from geode.matrices.matrix import Matrix

        return Matrix._from_array(self._data.reshape(-1, 1).copy())

    def __mul__(self, other: Any):
        from geode.matrices.matrix import Matrix

        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=False)
        return super().__mul__(other)

    def __matmul__(self, other: Any):
        from geode.matrices.matrix import Matrix

        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=False)
        if self._is_same_family(other):
            return self.dot(other)
        return NotImplemented

    def mul_wrapping(self, other: Any):
        """
        Multiply by a scalar or a square matrix, wrapping integer overflow.
        """
        from geode.matrices.matrix import Matrix

        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=True)
        return super().mul_wrapping(other)

    def _times_matrix(self, matrix: Any, wrap: bool):
        """
        Row-vector product ``vᵀ · M``.
        
        The matrix must be square with a side length equal to this
        vector's size. Returns a vector of the same size.
        
        ```
        Vector([1, 10, 100]) * Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # => (741, 852, 963)
        ```
        """
        rows, columns = matrix.shape
        if rows != columns or rows != self.size:
            raise DimensionError(
                f"Vector length must equal matrix side length for this operation "
                f"({rows}x{columns} != {self.size})",
                expected=(self.size, self.size),
                actual=(rows, columns),
            )
        if wrap:
            return self._wrap(wrapping(np.matmul, self._data, matrix._data))
        return self._wrap(checked(np.matmul, self._data, matrix._data, name="multiply"))

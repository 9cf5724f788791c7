"""
Methods for matrices interacting with vectors.

Intended to be used as a mix-in on ``Matrix``. A matrix with a single row
or a single column converts back to a vector, and a matrix multiplies a
vector treated as a column.
"""

from __future__ import annotations

import numpy as np

from geode.core.arithmetic import checked, wrapping
from geode.core.exceptions import DimensionError
from geode.core.validation import check_inner_dimensions
from geode.vectors.vector import Vector


class MatrixVectors:
    """Row/column vector views and matrix-vector products."""

    __slots__ = ()

    def is_row(self) -> bool:
        """True if the matrix has exactly one row."""
        return self.rows == 1

    def is_column(self) -> bool:
        """True if the matrix has exactly one column."""
        return self.columns == 1

    def to_vector(self) -> Vector:
        """
        Convert a single-row or single-column matrix to a vector.
        
        ```
        Matrix([[1, 2, 3]]).to_vector()      # => (1, 2, 3)
        Matrix([[1], [2], [3]]).to_vector()  # => (1, 2, 3)
        ```
        
        Raises:
            DimensionError: If the matrix has more than one row and column
        """
        if self.is_row():
            return self.unsafe_fetch_row(0)
        if self.is_column():
            return self.unsafe_fetch_column(0)
        raise DimensionError(
            f"to_vector can only be called on matrices with one row or one column "
            f"(matrix is {self.rows}x{self.columns})",
            actual=self.shape,
        )

    def _times_vector(self, vector: Vector, wrap: bool) -> Vector:
        """
        Matrix-vector product ``M · v``.
        
        The vector is treated as a column; its size must equal the number
        of columns. Returns a vector with one element per row.
        
        ```
        Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) * Vector([1, 10, 100])  # => (321, 654, 987)
        ```
        """
        check_inner_dimensions(self.shape, vector.shape)
        if wrap:
            product = wrapping(np.matmul, self._data, vector._data)
        else:
            product = checked(np.matmul, self._data, vector._data, name="multiply")
        return Vector._from_array(np.array(product))

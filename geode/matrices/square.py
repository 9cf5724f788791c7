"""
Operations applicable to square matrices.

Intended to be used as a mix-in on ``Matrix``. Every method checks that
the matrix is square on entry and raises DimensionError otherwise; none
of them ever returns a result for a non-square matrix.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from geode.core.arithmetic import exact_sum, to_scalar
from geode.core.tolerances import MAX_COFACTOR_SIDE
from geode.core.validation import check_square
from geode.matrices.iterators import DiagonalTraversal


class SquareMatrix:
    """Diagonal, trace and determinant."""

    __slots__ = ()

    def diagonal(self):
        """
        Elements of the main diagonal as a vector.
        
        ```
        Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).diagonal()  # => (1, 5, 9)
        ```
        """
        from geode.vectors.vector import Vector

        check_square(self.shape, "diagonal")
        return Vector._from_array(np.diagonal(self._data).copy())

    def each_diagonal(self) -> DiagonalTraversal:
        """Restartable traversal of the main diagonal."""
        check_square(self.shape, "each_diagonal")
        return DiagonalTraversal(self)

    def trace(self) -> Any:
        """
        Sum of the elements along the main diagonal.
        
        ```
        Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).trace()  # => 15
        ```
        """
        check_square(self.shape, "trace")
        return exact_sum(np.diagonal(self._data), name="trace")

    def determinant(self) -> Any:
        """
        Determinant by cofactor expansion along the first row.
        
        The expansion is exponential in the side length. It is meant for
        the small matrices this library targets (up to 4x4); larger
        matrices trigger a warning and should use an LU-based method.
        Integer determinants are exact and checked against the dtype.
        
        ```
        Matrix([[9, 3, 6], [5, 1, 8], [2, 7, 4]]).determinant()  # => -282
        ```
        """
        check_square(self.shape, "determinant")
        if self.rows > MAX_COFACTOR_SIDE:
            warnings.warn(
                f"determinant of a {self.rows}x{self.columns} matrix uses cofactor "
                f"expansion, which is exponential in size; use an LU-based method "
                f"for matrices larger than {MAX_COFACTOR_SIDE}x{MAX_COFACTOR_SIDE}",
                stacklevel=2,
            )
        return to_scalar(_cofactor_expansion(self), self.dtype, name="determinant")


def _cofactor_expansion(matrix: Any) -> Any:
    # Works on Python scalars so integer results are exact
    side = matrix.rows
    if side == 1:
        return matrix._data[0, 0].item()
    if side == 2:
        (a, b), (c, d) = matrix._data.tolist()
        return a * d - b * c

    total = 0
    for j, element in enumerate(matrix._data[0].tolist()):
        cofactor = _cofactor_expansion(matrix.sub(0, j))
        total += element * cofactor if j % 2 == 0 else -element * cofactor
    return total

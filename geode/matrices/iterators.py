"""
Lazy, restartable traversals over a matrix.

Each ``each_*`` method returns a small iterable object rather than a
generator, so the same traversal can be iterated any number of times and
reports its length up front. Indices and elements are produced in
row-major order; rows and columns in ascending index order.

    matrix = Matrix([[0, 1], [2, 3]])
    list(matrix.each_indices())        # [(0, 0), (0, 1), (1, 0), (1, 1)]
    list(matrix.each_with_indices())   # [(0, 0, 0), (1, 0, 1), (2, 1, 0), (3, 1, 1)]
    list(matrix.each_row_with_index(1))  # [((0, 1), 1), ((2, 3), 2)]
"""

from __future__ import annotations

from typing import Any, Iterator


class MatrixTraversal:
    """Base for the restartable traversals; holds the matrix being walked."""

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Any):
        self._matrix = matrix

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        rows, columns = self._matrix.shape
        return f"{type(self).__name__}({rows}x{columns})"


class IndicesTraversal(MatrixTraversal):
    """Yields ``(i, j)`` for every position."""

    __slots__ = ()

    def __iter__(self) -> Iterator[tuple[int, int]]:
        rows, columns = self._matrix.shape
        for i in range(rows):
            for j in range(columns):
                yield i, j

    def __len__(self) -> int:
        return self._matrix.size


class ElementsWithIndicesTraversal(MatrixTraversal):
    """Yields ``(element, i, j)`` for every position."""

    __slots__ = ()

    def __iter__(self) -> Iterator[tuple[Any, int, int]]:
        for i, row in enumerate(self._matrix._data):
            for j, element in enumerate(row):
                yield element, i, j

    def __len__(self) -> int:
        return self._matrix.size


class RowTraversal(MatrixTraversal):
    """
    Yields each row as a vector.
    
    With an offset, yields ``(row, offset + i)`` pairs instead. The offset
    only shifts the reported index; iteration always starts at row 0.
    """

    __slots__ = ("_offset",)

    def __init__(self, matrix: Any, offset: int | None = None):
        super().__init__(matrix)
        self._offset = offset

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._matrix.rows):
            row = self._matrix.unsafe_fetch_row(i)
            yield row if self._offset is None else (row, self._offset + i)

    def __len__(self) -> int:
        return self._matrix.rows


class ColumnTraversal(MatrixTraversal):
    """
    Yields each column as a vector.
    
    With an offset, yields ``(column, offset + j)`` pairs instead.
    """

    __slots__ = ("_offset",)

    def __init__(self, matrix: Any, offset: int | None = None):
        super().__init__(matrix)
        self._offset = offset

    def __iter__(self) -> Iterator[Any]:
        for j in range(self._matrix.columns):
            column = self._matrix.unsafe_fetch_column(j)
            yield column if self._offset is None else (column, self._offset + j)

    def __len__(self) -> int:
        return self._matrix.columns


class DiagonalTraversal(MatrixTraversal):
    """Yields the elements of the main diagonal of a square matrix."""

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        flat = self._matrix._data.reshape(-1)
        step = self._matrix.columns + 1
        for index in range(0, flat.size, step):
            yield flat[index]

    def __len__(self) -> int:
        return self._matrix.rows


class MatrixIterators:
    """Mix-in exposing the traversals on ``Matrix``."""

    __slots__ = ()

    def each_indices(self) -> IndicesTraversal:
        """Every ``(i, j)`` index pair, row-major."""
        return IndicesTraversal(self)

    def each_with_indices(self) -> ElementsWithIndicesTraversal:
        """Every ``(element, i, j)`` triple, row-major."""
        return ElementsWithIndicesTraversal(self)

    def each_row(self) -> RowTraversal:
        """Every row as a vector of size ``columns``."""
        return RowTraversal(self)

    def each_row_with_index(self, offset: int = 0) -> RowTraversal:
        """Every ``(row, offset + i)`` pair."""
        return RowTraversal(self, offset)

    def each_column(self) -> ColumnTraversal:
        """Every column as a vector of size ``rows``."""
        return ColumnTraversal(self)

    def each_column_with_index(self, offset: int = 0) -> ColumnTraversal:
        """Every ``(column, offset + j)`` pair."""
        return ColumnTraversal(self, offset)

"""
Matrix: fixed-size grid of scalars in row-major order.

There are two indexing schemes. Two-dimensional indexing takes a row
index *i* (0 to rows - 1) and a column index *j* (0 to columns - 1).
Flat indexing takes a single *index* from 0 to rows * columns - 1, where
``index == i * columns + j``. Unless noted otherwise, all traversals are
row-major.

Construction:
    Matrix([[1, 2], [3, 4]])
    Matrix.from_elements([1, 2, 3, 4], 2, 2)
    Matrix.from_rows([Vector([1, 2]), Vector([3, 4])])
    Matrix.generate(2, 3, lambda i, j: i * 3 + j)
    Matrix.zero(2, 3)
    Matrix.identity(3)
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from geode.common.base import FixedContainer
from geode.common.comparison import ElementwiseComparison
from geode.common.operations import ElementwiseOperations
from geode.core.arithmetic import checked, wrapping
from geode.core.exceptions import DimensionError, IndexOutOfRangeError
from geode.core.validation import (
    check_components,
    check_index,
    check_integer,
    check_inner_dimensions,
    check_ndim,
    check_positive_size,
)
from geode.matrices.iterators import MatrixIterators
from geode.matrices.square import SquareMatrix
from geode.matrices.vectors import MatrixVectors
from geode.vectors.vector import Vector


class Matrix(
    SquareMatrix,
    MatrixVectors,
    MatrixIterators,
    ElementwiseOperations,
    ElementwiseComparison,
    FixedContainer,
):
    """
    Fixed-size matrix of scalars.
    
    The shape is fixed at construction. Matrices of different shapes are
    never equal; element-wise operations require identical shapes and
    products require matching inner dimensions, raising DimensionError
    otherwise. Rows and columns are returned as vector copies that share
    no storage with the matrix.
    """

    __slots__ = ()

    _kind = "Matrices"

    def __init__(self, rows: ArrayLike | Matrix, dtype: DTypeLike = None):
        """
        Create a matrix from a list of rows.
        
        Args:
            rows: Nested sequence (or 2D array) of rows, vectors allowed,
                  or another matrix to copy
            dtype: Optional scalar type; inferred from the elements if omitted
            
        Raises:
            DimensionError: If rows differ in size, or the input is not 2D
            ValidationError: If the elements are not numeric
        """
        if isinstance(rows, Matrix):
            rows = rows._data
        elif isinstance(rows, (list, tuple)):
            rows = [row._data if isinstance(row, Vector) else row for row in rows]
        data = check_components(rows, "rows", dtype)
        check_ndim(data, 2, "rows")
        check_positive_size(data, "rows")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def from_elements(
        cls,
        elements: ArrayLike,
        rows: int,
        columns: int,
        dtype: DTypeLike = None,
    ) -> Matrix:
        """
        Create a matrix from a flat, row-major list of elements.
        
        Raises:
            DimensionError: If the number of elements is not rows * columns
        """
        data = check_components(elements, "elements", dtype)
        check_ndim(data, 1, "elements")
        if data.size != rows * columns:
            raise DimensionError(
                f"elements: expected {rows * columns} elements for a {rows}x{columns} "
                f"matrix, got {data.size}",
                expected=(rows * columns,),
                actual=(data.size,),
            )
        return cls(data.reshape(rows, columns))

    @classmethod
    def from_rows(cls, rows: Iterable[Vector], dtype: DTypeLike = None) -> Matrix:
        """Create a matrix whose rows are the given vectors."""
        return cls(list(rows), dtype=dtype)

    @classmethod
    def from_columns(cls, columns: Iterable[Vector], dtype: DTypeLike = None) -> Matrix:
        """Create a matrix whose columns are the given vectors."""
        return cls(cls(list(columns), dtype=dtype)._data.T)

    @classmethod
    def generate(
        cls,
        rows: int,
        columns: int,
        fn: Callable[[int, int], Any],
        dtype: DTypeLike = None,
    ) -> Matrix:
        """
        Create a matrix by calling *fn* with each ``(i, j)``.
        
        ```
        Matrix.generate(2, 3, lambda i, j: i * 3 + j)  # => [[0, 1, 2], [3, 4, 5]]
        ```
        """
        return cls([[fn(i, j) for j in range(columns)] for i in range(rows)], dtype=dtype)

    @classmethod
    def zero(cls, rows: int, columns: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Create a matrix filled with zeroes."""
        if rows < 1 or columns < 1:
            raise DimensionError(
                f"dimensions must be positive, got {rows}x{columns}",
                actual=(rows, columns),
            )
        return cls._from_array(np.zeros((rows, columns), dtype=dtype))

    @classmethod
    def identity(
        cls,
        rows: int,
        columns: int | None = None,
        dtype: DTypeLike = np.float64,
    ) -> Matrix:
        """
        Create an identity matrix: ones on the diagonal, zeroes elsewhere.
        
        Raises:
            DimensionError: If *columns* is given and differs from *rows*
        """
        if columns is not None and columns != rows:
            raise DimensionError(
                f"Identity matrix must be a square matrix ({rows}x{columns})",
                expected=(rows, rows),
                actual=(rows, columns),
            )
        if rows < 1:
            raise DimensionError(f"dimensions must be positive, got {rows}x{rows}")
        return cls._from_array(np.eye(rows, dtype=dtype))

    def _is_same_family(self, other: Any) -> bool:
        return isinstance(other, Matrix)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    def is_square(self) -> bool:
        """True if rows == columns."""
        return self.rows == self.columns

    # ─── element access ────────────────────────────────────────────────

    def get(self, i: int, j: int | None = None) -> Any:
        """
        Element at ``(i, j)``, or at flat index *i* when *j* is omitted.
        
        Raises:
            IndexOutOfRangeError: If the indices are outside the matrix
        """
        if j is None:
            return self._data.reshape(-1)[check_index(i, self.size, "index")]
        if not self._in_range(i, j):
            raise IndexOutOfRangeError(
                f"indices ({i}, {j}) out of range for {self.rows}x{self.columns} matrix",
                index=(i, j),
                bounds=self.shape,
            )
        return self._data[i, j]

    def get_or_none(self, i: int, j: int | None = None) -> Any | None:
        """Like ``get``, but returns None instead of raising."""
        if j is None:
            i = check_integer(i, "index")
            return self._data.reshape(-1)[i] if 0 <= i < self.size else None
        return self._data[i, j] if self._in_range(i, j) else None

    def unsafe_fetch(self, i: int, j: int | None = None) -> Any:
        """
        Element without bounds checks, by ``(i, j)`` or flat index.
        
        Only for call sites that have already validated the indices.
        """
        if j is None:
            return self._data.reshape(-1)[i]
        return self._data[i, j]

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def _in_range(self, i: int, j: int) -> bool:
        i, j = check_integer(i, "row index"), check_integer(j, "column index")
        return 0 <= i < self.rows and 0 <= j < self.columns

    # ─── rows and columns ──────────────────────────────────────────────

    def row(self, i: int) -> Vector:
        """
        Row *i* as a vector of size ``columns``.
        
        Raises:
            IndexOutOfRangeError: If *i* is out of range
        """
        return self.unsafe_fetch_row(check_index(i, self.rows, "row index"))

    def row_or_none(self, i: int) -> Vector | None:
        """Row *i*, or None if out of range."""
        i = check_integer(i, "row index")
        return self.unsafe_fetch_row(i) if 0 <= i < self.rows else None

    def unsafe_fetch_row(self, i: int) -> Vector:
        """Row *i* without a bounds check."""
        return Vector._from_array(self._data[i].copy())

    def column(self, j: int) -> Vector:
        """
        Column *j* as a vector of size ``rows``.
        
        Raises:
            IndexOutOfRangeError: If *j* is out of range
        """
        return self.unsafe_fetch_column(check_index(j, self.columns, "column index"))

    def column_or_none(self, j: int) -> Vector | None:
        """Column *j*, or None if out of range."""
        j = check_integer(j, "column index")
        return self.unsafe_fetch_column(j) if 0 <= j < self.columns else None

    def unsafe_fetch_column(self, j: int) -> Vector:
        """Column *j* without a bounds check."""
        return Vector._from_array(self._data[:, j].copy())

    def rows_at(self, *indices: int) -> tuple[Vector, ...]:
        """
        Several rows, in the order given (duplicates allowed).
        
        ```
        Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).rows_at(2, 0)  # => ((7, 8, 9), (1, 2, 3))
        ```
        """
        return tuple(self.row(i) for i in indices)

    def columns_at(self, *indices: int) -> tuple[Vector, ...]:
        """Several columns, in the order given (duplicates allowed)."""
        return tuple(self.column(j) for j in indices)

    def to_rows(self) -> list[Vector]:
        """All rows as a list of vectors."""
        return [self.unsafe_fetch_row(i) for i in range(self.rows)]

    def to_columns(self) -> list[Vector]:
        """All columns as a list of vectors."""
        return [self.unsafe_fetch_column(j) for j in range(self.columns)]

    # ─── shape transforms ──────────────────────────────────────────────

    def transpose(self) -> Matrix:
        """Matrix with rows and columns swapped; ``(i, j)`` becomes ``(j, i)``."""
        return self._wrap(self._data.T.copy())

    def sub(self, i: int, j: int) -> Matrix:
        """
        Minor with row *i* and column *j* removed.
        
        Raises:
            DimensionError: If the matrix has a single row or column
            IndexOutOfRangeError: If *i* or *j* is out of range
        """
        if self.rows < 2 or self.columns < 2:
            raise DimensionError(
                f"sub requires at least 2 rows and 2 columns "
                f"(matrix is {self.rows}x{self.columns})",
                actual=self.shape,
            )
        i = check_index(i, self.rows, "row index")
        j = check_index(j, self.columns, "column index")
        return self._wrap(np.delete(np.delete(self._data, i, axis=0), j, axis=1))

    # ─── mapping ───────────────────────────────────────────────────────

    def map(self, fn: Callable[[Any], Any]) -> Matrix:
        """
        New matrix with *fn* applied to each element.
        
        ```
        Matrix([[1, 2], [3, 4]]).map(lambda e: e * 2)  # => [[2, 4], [6, 8]]
        ```
        """
        return self._mapped([fn(e) for e in self._data.reshape(-1)])

    def map_with_index(self, fn: Callable[[Any, int], Any], offset: int = 0) -> Matrix:
        """
        Like ``map``, but *fn* also receives the flat index plus *offset*.
        
        ```
        matrix = Matrix([[1, 2], [3, 4]])
        matrix.map_with_index(lambda e, i: e * i)     # => [[0, 2], [6, 12]]
        matrix.map_with_index(lambda e, i: e + i, 3)  # => [[4, 6], [8, 10]]
        ```
        """
        flat = self._data.reshape(-1)
        return self._mapped([fn(e, offset + index) for index, e in enumerate(flat)])

    def map_with_indices(self, fn: Callable[[Any, int, int], Any]) -> Matrix:
        """
        Like ``map``, but *fn* also receives the row and column index.
        
        ```
        Matrix([[1, 2], [3, 4]]).map_with_indices(lambda e, i, j: e * i + j)  # => [[0, 1], [3, 5]]
        ```
        """
        return self._mapped([fn(e, i, j) for e, i, j in self.each_with_indices()])

    def zip_map(self, other: Matrix, fn: Callable[[Any, Any], Any]) -> Matrix:
        """
        New matrix from *fn* applied to matching elements of both matrices.
        
        Raises:
            DimensionError: If the shapes differ
        """
        other_data = self._same_shape_data(other, "zip_map").reshape(-1)
        return self._mapped([fn(a, b) for a, b in zip(self._data.reshape(-1), other_data)])

    def _mapped(self, values: list[Any]) -> Matrix:
        data = check_components(values, "mapped values")
        check_ndim(data, 1, "mapped values")
        return type(self)._from_array(data.reshape(self.shape))

    # ─── products ──────────────────────────────────────────────────────

    def __mul__(self, other: Any):
        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=False)
        if isinstance(other, Vector):
            return self._times_vector(other, wrap=False)
        return super().__mul__(other)

    def __matmul__(self, other: Any):
        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=False)
        if isinstance(other, Vector):
            return self._times_vector(other, wrap=False)
        return NotImplemented

    def mul_wrapping(self, other: Any):
        """
        Multiply by a scalar, matrix or vector, wrapping integer overflow.
        """
        if isinstance(other, Matrix):
            return self._times_matrix(other, wrap=True)
        if isinstance(other, Vector):
            return self._times_vector(other, wrap=True)
        return super().mul_wrapping(other)

    def _times_matrix(self, other: Matrix, wrap: bool) -> Matrix:
        """
        Matrix product: rows of this matrix dotted with columns of *other*.
        
        *other* must have as many rows as this matrix has columns. The
        result has this matrix's row count and *other*'s column count.
        
        ```
        Matrix([[3, 5], [7, 9]]) * Matrix([[1], [2]])  # => [[13], [25]]
        ```
        """
        check_inner_dimensions(self.shape, other.shape)
        if wrap:
            return self._wrap(wrapping(np.matmul, self._data, other._data))
        return self._wrap(checked(np.matmul, self._data, other._data, name="multiply"))

    # ─── formatting ────────────────────────────────────────────────────

    def __str__(self) -> str:
        rows = ("[" + ", ".join(str(e) for e in row) + "]" for row in self._data)
        return "[" + ", ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r}, dtype={self.dtype})"

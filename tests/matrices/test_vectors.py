"""
Tests for matrices converting to vectors.
"""

import pytest

from geode import DimensionError, Matrix, Vector


class TestRowColumnPredicates:

    def test_is_row(self):
        assert Matrix([[1, 2, 3]]).is_row()
        assert not Matrix([[1], [2]]).is_row()

    def test_is_column(self):
        assert Matrix([[1], [2]]).is_column()
        assert not Matrix([[1, 2, 3]]).is_column()

    def test_single_element_is_both(self):
        matrix = Matrix([[5]])
        assert matrix.is_row() and matrix.is_column()


class TestToVector:

    def test_row_to_vector(self):
        assert Matrix([[1, 2, 3]]).to_vector() == Vector([1, 2, 3])

    def test_column_to_vector(self):
        assert Matrix([[1], [2], [3]]).to_vector() == Vector([1, 2, 3])

    def test_general_matrix_rejected(self, matrix3):
        with pytest.raises(DimensionError, match="one row or one column"):
            matrix3.to_vector()

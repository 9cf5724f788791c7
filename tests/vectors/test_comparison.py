"""
Tests for element-wise comparison and zero predicates.
"""

import numpy as np
import pytest

from geode import DimensionError, Vector


class TestCompare:

    def test_three_way(self):
        assert Vector([1, 2, 3]).compare(Vector([3, 2, 1])) == Vector([-1, 0, 1])

    def test_result_is_integer(self):
        result = Vector([1.5, 2.5]).compare(Vector([2.5, 1.5]))
        assert np.issubdtype(result.dtype, np.integer)

    def test_nan_compares_as_equal(self):
        assert Vector([np.nan, 1.0]).compare(Vector([0.0, 1.0])) == Vector([0, 0])

    def test_size_mismatch(self):
        with pytest.raises(DimensionError):
            Vector([1, 2]).compare(Vector([1, 2, 3]))


class TestRelational:

    def test_eq(self):
        assert Vector([1, 2, 3]).eq(Vector([3, 2, 1])) == Vector([False, True, False])

    def test_lt_le(self):
        a, b = Vector([1, 2, 3]), Vector([3, 2, 1])
        assert a.lt(b) == Vector([True, False, False])
        assert a.le(b) == Vector([True, True, False])

    def test_gt_ge(self):
        a, b = Vector([1, 2, 3]), Vector([3, 2, 1])
        assert a.gt(b) == Vector([False, False, True])
        assert a.ge(b) == Vector([False, True, True])

    def test_relational_result_is_bool(self):
        assert Vector([1, 2]).lt(Vector([2, 1])).dtype == np.bool_


class TestZeroPredicates:

    def test_is_zero(self):
        assert Vector([0, 0, 0]).is_zero()
        assert not Vector([1, 0, 2]).is_zero()

    def test_is_near_zero(self):
        assert Vector([0.0, 0.01, 0.001]).is_near_zero(0.01)
        assert not Vector([0.1, 0.0, 0.01]).is_near_zero(0.01)

    def test_is_near_zero_uses_dtype_tolerance(self):
        assert Vector([1e-13, -1e-13]).is_near_zero()
        assert not Vector([1e-6]).is_near_zero()
        assert Vector([1e-6], dtype=np.float32).is_near_zero()

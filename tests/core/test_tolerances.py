"""
Tests for tolerance tiers, numeric constants and the AngleLike protocol.
"""

import dataclasses
import math

import numpy as np
import pytest

from geode.core.protocols import AngleLike
from geode.core.tolerances import (
    ANGLE_EPSILON,
    FP32,
    FP64,
    MAX_COFACTOR_SIDE,
    ToleranceTier,
    select_tolerance,
)


class TestToleranceTiers:

    def test_fp32_is_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol

    def test_tiers_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FP64.rtol = 1.0

    def test_custom_tier(self):
        tier = ToleranceTier(rtol=1e-3, atol=1e-3, name="loose", description="test")
        assert tier.name == "loose"


class TestSelectTolerance:

    @pytest.mark.parametrize("dtype", [np.float32, np.float16])
    def test_single_precision(self, dtype):
        assert select_tolerance(dtype) is FP32

    @pytest.mark.parametrize("dtype", [np.float64, np.int32, np.int64, np.complex128])
    def test_double_precision(self, dtype):
        assert select_tolerance(dtype) is FP64


class TestConstants:

    def test_angle_epsilon_is_machine_epsilon(self):
        assert ANGLE_EPSILON == np.finfo(np.float64).eps

    def test_max_cofactor_side(self):
        assert MAX_COFACTOR_SIDE == 4


class _Degrees:
    def __init__(self, value):
        self.value = value

    def to_radians(self):
        return math.radians(self.value)


class TestAngleLike:

    def test_object_with_to_radians_matches(self):
        assert isinstance(_Degrees(90), AngleLike)

    def test_plain_number_does_not_match(self):
        assert not isinstance(1.5, AngleLike)

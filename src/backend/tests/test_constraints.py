"""Tests for the provider constraint rules and rounding primitives."""

import pytest

from tiercalc.services.constraints import (
    is_valid,
    is_valid_vcpu,
    max_ratio_ram,
    min_ratio_ram,
    round_down_256,
    round_up_256,
    trunc_to_int,
)


class TestRoundingPrimitives:
    @pytest.mark.parametrize(
        "value,expected", [(0, 0), (1, 256), (255, 256), (256, 256), (257, 512), (7372, 7424)]
    )
    def test_round_up_256(self, value, expected):
        assert round_up_256(value) == expected

    @pytest.mark.parametrize(
        "value,expected", [(0, 0), (255, 0), (256, 256), (26624, 26624), (26879, 26624)]
    )
    def test_round_down_256(self, value, expected):
        assert round_down_256(value) == expected

    def test_trunc_to_int_truncates_toward_zero(self):
        assert trunc_to_int(7372.8) == 7372
        assert trunc_to_int(-1.5) == -1


class TestRatioBounds:
    def test_min_ratio_ram_truncates(self):
        # 0.9 * 8 * 1024 = 7372.8
        assert min_ratio_ram(8) == 7372

    def test_max_ratio_ram(self):
        assert max_ratio_ram(4) == 26624
        assert max_ratio_ram(96) == 638976


class TestIsValidVcpu:
    @pytest.mark.parametrize("vcpu", [1, 2, 4, 64, 96])
    def test_accepted(self, vcpu):
        assert is_valid_vcpu(vcpu)

    @pytest.mark.parametrize("vcpu", [-2, 0, 3, 95, 97, 98])
    def test_rejected(self, vcpu):
        assert not is_valid_vcpu(vcpu)


class TestIsValid:
    def test_smallest_tier(self):
        assert is_valid(1, 3840)

    def test_two_vcpus_at_memory_floor(self):
        # minimum for 2 vCPUs is trunc(1843.2) = 1843, so the 3840 floor dominates
        assert is_valid(2, 3840)

    def test_odd_vcpu_rejected(self):
        assert not is_valid(3, 6144)

    def test_vcpu_out_of_range_rejected(self):
        assert not is_valid(0, 3840)
        assert not is_valid(98, 98304)

    def test_memory_not_multiple_of_256_rejected(self):
        assert not is_valid(4, 15000)

    def test_memory_below_floor_rejected(self):
        assert not is_valid(1, 3584)

    def test_max_ratio_is_inclusive(self):
        assert is_valid(1, 6656)
        assert not is_valid(1, 6912)

    def test_min_ratio_is_inclusive(self):
        # 0.9 * 10 * 1024 = 9216 exactly
        assert is_valid(10, 9216)
        assert not is_valid(10, 8960)

    def test_min_ratio_boundary_with_truncation(self):
        # lower bound 7372; 7168 is below it, 7424 above
        assert not is_valid(8, 7168)
        assert is_valid(8, 7424)

    def test_largest_tier(self):
        assert is_valid(96, 638976)
        assert not is_valid(96, 639232)

    def test_arbitrary_multiple_of_256(self):
        # 32000 = 125 * 256 and sits inside the 8 vCPU band
        assert is_valid(8, 32000)

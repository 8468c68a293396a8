"""Tests for the `tiercalc` command shell."""

import pytest

from tiercalc.cli import main


def _run(capsys, *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out


class TestCpuMode:
    def test_recommends_tier(self, capsys):
        code, out = _run(capsys, "--cpu", "24")
        assert code == 0
        assert "Tier: db-custom-24-36864" in out
        assert "Memory: 36864 MB (36.00 GB)" in out
        assert "Memory per vCPU: 1.50 GB" in out

    def test_zero_cpu_fails(self, capsys):
        code, out = _run(capsys, "--cpu", "0")
        assert code == 1
        assert "greater than 0" in out


class TestMemMode:
    def test_recommends_tier(self, capsys):
        code, out = _run(capsys, "--mem", "6G")
        assert code == 0
        assert "vCPUs: 4" in out
        assert "Tier: db-custom-4-6144" in out
        assert "Warning" not in out

    def test_invalid_derivation_warns(self, capsys):
        code, out = _run(capsys, "--mem", "4608")
        assert code == 0
        assert out.startswith("Warning: The calculated tier may not be valid.")
        assert "Tier: db-custom-3-4608" in out

    def test_bad_unit_fails(self, capsys):
        code, out = _run(capsys, "--mem", "6T")
        assert code == 1
        assert "invalid unit: T" in out


class TestTierMode:
    def test_next_known_tier(self, capsys):
        code, out = _run(capsys, "-t", "db-custom-1-3840")
        assert code == 0
        assert "Parsed tier: CPUs=1, RAM=3840 MB" in out
        assert "Next known working custom tier: db-custom-2-7680" in out

    def test_computed_tier_beyond_table(self, capsys):
        code, out = _run(capsys, "--tier", "db-custom-96-638976")
        assert code == 0
        assert "Next valid custom tier: db-custom-416-638976" in out

    def test_already_valid(self, capsys):
        code, out = _run(capsys, "-t", "db-custom-416-638976")
        assert code == 0
        assert "This is already a valid custom tier." in out

    def test_malformed_tier_fails(self, capsys):
        code, out = _run(capsys, "-t", "db-custom-4")
        assert code == 1
        assert "Invalid tier format" in out


class TestBumpMemMode:
    def test_bumped(self, capsys):
        code, out = _run(capsys, "--bump-mem", "db-custom-4-3840")
        assert code == 0
        assert "Bumping memory for tier db-custom-4-3840:" in out
        assert "New Tier: db-custom-4-26624" in out

    def test_already_max(self, capsys):
        code, out = _run(capsys, "--bump-mem", "db-custom-4-26624")
        assert code == 0
        assert "already at the maximum memory level of 26.00 GB" in out

    def test_already_exceeds(self, capsys):
        code, out = _run(capsys, "--bump-mem", "db-custom-2-20480")
        assert code == 0
        assert "already exceeds the maximum standard memory" in out


class TestCheckDowngradeMode:
    def test_valid_downgrade_two_arguments(self, capsys):
        code, out = _run(capsys, "--check-downgrade", "db-custom-8-53248", "db-custom-8-32000")
        assert code == 0
        assert "Valid downgrade: Yes" in out

    def test_single_quoted_argument(self, capsys):
        code, out = _run(capsys, "--check-downgrade", "db-custom-8-53248 db-custom-8-32100")
        assert code == 0
        assert "Valid downgrade: No" in out
        assert "Nearest valid tier: db-custom-8-32256" in out
        assert "This adjusted tier is a valid downgrade." in out
        assert "Suggested known lower tier: db-custom-8-30720" in out

    def test_not_lower(self, capsys):
        code, out = _run(capsys, "--check-downgrade", "db-custom-1-3840", "db-custom-2-7680")
        assert code == 0
        assert "Recommended tier is not lower than the current tier." in out
        assert "No lower tier found in known list." in out

    def test_wrong_number_of_tiers_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--check-downgrade", "db-custom-8-53248"])
        assert exc_info.value.code == 2


class TestDowngradeMode:
    def test_suggests_lower_tier(self, capsys):
        code, out = _run(capsys, "--downgrade", "db-custom-8-53248")
        assert code == 0
        assert "Suggested downgrade tier: db-custom-8-30720" in out
        assert "Memory per vCPU: 3.75 GB" in out

    def test_lowest_tier(self, capsys):
        code, out = _run(capsys, "--downgrade", "db-custom-1-3840")
        assert code == 0
        assert "Already at the lowest known tier." in out


class TestUsage:
    def test_no_mode_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_conflicting_modes_are_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--cpu", "4", "--mem", "6G"])
        assert exc_info.value.code == 2


class TestOutOfRangeInput:
    def test_zero_vcpu_downgrade(self, capsys):
        code, out = _run(capsys, "--downgrade", "db-custom-0-3840")
        assert code == 0
        assert "Valid: False" in out
        assert "Memory per vCPU: inf GB" in out
        assert "Already at the lowest known tier." in out

    def test_zero_vcpu_bump(self, capsys):
        code, out = _run(capsys, "--bump-mem", "db-custom-0-4096")
        assert code == 0
        assert "already exceeds the maximum standard memory" in out
        assert "[inf GB/vCPU]" in out

    def test_huge_memory_fails_cleanly(self, capsys):
        code, out = _run(capsys, "--mem", "9" * 400)
        assert code == 1
        assert "memory out of range" in out

    def test_huge_cpu_fails_cleanly(self, capsys):
        code, out = _run(capsys, "--cpu", "9" * 400)
        assert code == 1
        assert "vcpu must be at most" in out

    def test_huge_tier_fails_cleanly(self, capsys):
        code, out = _run(capsys, "-t", f"db-custom-1-{'9' * 400}")
        assert code == 1
        assert "out of range" in out

    def test_zero_memory_floors_with_warning(self, capsys):
        code, out = _run(capsys, "--mem", "0")
        assert code == 0
        assert out.startswith("Warning: The calculated tier may not be valid.")
        assert "Tier: db-custom-3-3840" in out

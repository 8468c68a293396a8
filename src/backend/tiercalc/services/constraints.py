"""Provider constraints for custom tiers.

A tier (vcpu, memory_mb) is accepted when all of these hold:
  1 <= vcpu <= 96, and vcpu is 1 or even
  memory_mb is a multiple of 256 and at least 3840
  trunc(0.9 * vcpu * 1024) <= memory_mb <= trunc(6.5 * vcpu * 1024)

The ratio bounds truncate toward zero. Boundary tiers depend on this, so all
call sites go through trunc_to_int / round_up_256 / round_down_256 instead of
doing their own arithmetic.
"""

MIN_VCPU = 1
MAX_VCPU = 96
MEMORY_STEP_MB = 256
MIN_MEMORY_MB = 3840
MIN_GB_PER_VCPU = 0.9
MAX_GB_PER_VCPU = 6.5

# Largest count that survives the float ratio arithmetic exactly
MAX_EXACT_COUNT = 2**53


def trunc_to_int(value: float) -> int:
    return int(value)


def round_up_256(value: int) -> int:
    return ((value + MEMORY_STEP_MB - 1) // MEMORY_STEP_MB) * MEMORY_STEP_MB


def round_down_256(value: int) -> int:
    return (value // MEMORY_STEP_MB) * MEMORY_STEP_MB


def min_ratio_ram(vcpu: int) -> int:
    return trunc_to_int(MIN_GB_PER_VCPU * vcpu * 1024)


def max_ratio_ram(vcpu: int) -> int:
    return trunc_to_int(MAX_GB_PER_VCPU * vcpu * 1024)


def is_valid_vcpu(vcpu: int) -> bool:
    if vcpu < MIN_VCPU or vcpu > MAX_VCPU:
        return False
    return vcpu == 1 or vcpu % 2 == 0


def is_valid(vcpu: int, memory_mb: int) -> bool:
    """Return True if (vcpu, memory_mb) satisfies every provider rule."""
    if not is_valid_vcpu(vcpu):
        return False
    if memory_mb % MEMORY_STEP_MB != 0 or memory_mb < MIN_MEMORY_MB:
        return False
    return min_ratio_ram(vcpu) <= memory_mb <= max_ratio_ram(vcpu)

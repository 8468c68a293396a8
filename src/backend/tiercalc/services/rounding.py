"""Tier rounding engine.

nearest_valid_tier() turns any (vcpu, memory_mb) request into the closest tier
the provider accepts. Steps run in order, each feeding the next:
  1. clamp vcpu to [1, 96], bump odd counts above 1 to the next even number
  2. round memory up to a multiple of 256, floor at 3840
  3. clamp memory into [round_up_256(min ratio), round_down_256(max ratio)]
"""

import logging
import math

from tiercalc.config import settings
from tiercalc.models.tier import Tier
from tiercalc.services.constraints import (
    MAX_VCPU,
    MIN_MEMORY_MB,
    MIN_VCPU,
    max_ratio_ram,
    min_ratio_ram,
    round_down_256,
    round_up_256,
    trunc_to_int,
)

log = logging.getLogger(__name__)


def _nearest_vcpu(vcpu: int) -> int:
    if vcpu < MIN_VCPU:
        return MIN_VCPU
    if vcpu > MAX_VCPU:
        return MAX_VCPU
    if vcpu != 1 and vcpu % 2 != 0:
        # MAX_VCPU is even, so this never leaves the valid range
        return vcpu + 1
    return vcpu


def nearest_valid_tier(vcpu: int, memory_mb: int) -> Tier:
    cpu = _nearest_vcpu(vcpu)
    if cpu != vcpu:
        log.debug("vCPU %d adjusted to %d", vcpu, cpu)

    ram = max(round_up_256(memory_mb), MIN_MEMORY_MB)
    min_ram = round_up_256(min_ratio_ram(cpu))
    max_ram = round_down_256(max_ratio_ram(cpu))
    clamped = min(max(ram, min_ram), max_ram)
    if clamped != ram:
        log.debug("memory %d MB clamped to %d MB for %d vCPUs", ram, clamped, cpu)

    return Tier(vcpu=cpu, memory_mb=clamped)


def suggest_minimal_tier(vcpu: int, memory_mb: int) -> Tier:
    """Size a tier around the target ratio for an existing memory amount.

    The incoming vcpu is ignored: the CPU count is derived from memory_mb so
    that the memory lands at TARGET_GB_PER_VCPU per vCPU.
    """
    ratio_mb = settings.TARGET_GB_PER_VCPU * 1024
    cpus_needed = max(MIN_VCPU, math.ceil(memory_mb / ratio_mb))
    ram_needed = round_up_256(max(MIN_MEMORY_MB, trunc_to_int(cpus_needed * ratio_mb)))
    return Tier(vcpu=cpus_needed, memory_mb=ram_needed)

"""Tier identifier and memory quantity parsing.

Tier identifier:  <prefix>-<vcpu>-<memory_mb>, e.g. db-custom-4-15360
Memory quantity:  <number>[unit], unit G/g (x1024) or M/m/absent (x1)
"""

import math
import re
from functools import lru_cache

from tiercalc.config import settings
from tiercalc.errors import MemoryFormatError, TierFormatError
from tiercalc.models.tier import Tier
from tiercalc.services.constraints import MAX_EXACT_COUNT

_MB_PER_UNIT = {"": 1, "M": 1, "m": 1, "G": 1024, "g": 1024}
_MEMORY_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(.*)")
_MAX_COUNT_DIGITS = len(str(MAX_EXACT_COUNT))


@lru_cache(maxsize=8)
def _tier_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(prefix)}-(\d+)-(\d+)")


def _count(digits: str, field: str, value: str) -> int:
    # checked on the string first: int() refuses very long digit strings
    if len(digits.lstrip("0")) > _MAX_COUNT_DIGITS or int(digits) > MAX_EXACT_COUNT:
        raise TierFormatError(f"Invalid tier '{value}': {field} is out of range")
    return int(digits)


def parse_tier(value: str, prefix: str | None = None) -> Tier:
    prefix = prefix or settings.TIER_PREFIX
    match = _tier_pattern(prefix).fullmatch(value.strip())
    if match is None:
        raise TierFormatError(
            f"Invalid tier format '{value}'. Use: {prefix}-<cpus>-<ram_mb>"
        )
    return Tier(
        vcpu=_count(match.group(1), "vcpu", value),
        memory_mb=_count(match.group(2), "memory", value),
    )


def format_tier(tier: Tier, prefix: str | None = None) -> str:
    return f"{prefix or settings.TIER_PREFIX}-{tier.vcpu:d}-{tier.memory_mb:d}"


def parse_memory(value: str) -> float:
    """Parse a memory quantity and return it in MB (not yet rounded)."""
    if not value:
        raise MemoryFormatError("empty memory string")
    match = _MEMORY_RE.fullmatch(value)
    if match is None:
        raise MemoryFormatError(f"invalid memory format: {value}")
    number, unit = match.groups()
    if unit not in _MB_PER_UNIT:
        raise MemoryFormatError(f"invalid unit: {unit}")
    memory_mb = float(number) * _MB_PER_UNIT[unit]
    if not math.isfinite(memory_mb):
        raise MemoryFormatError(f"memory out of range: {value}")
    return memory_mb

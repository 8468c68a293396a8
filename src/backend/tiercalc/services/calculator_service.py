"""Tier calculator service -- stateless, pure functions over Tier values.

Derivations:
  cpu    → tier:  memory = round_up_256(vcpu * target ratio), floor 3840
  memory → tier:  vcpu = round_half_away(memory / target ratio), floor 1
  bump memory:    memory = round_down_256(trunc(6.5 * vcpu * 1024)), floor 3840
  downgrade:      previous known tier below the current one
"""

import logging
import math

from tiercalc.config import settings
from tiercalc.errors import ValidationError
from tiercalc.models.tier import (
    BumpRelation,
    BumpResult,
    DowngradeReport,
    DowngradeSuggestion,
    NextTierResult,
    Recommendation,
    Tier,
)
from tiercalc.services.constraints import (
    MAX_EXACT_COUNT,
    MIN_MEMORY_MB,
    MIN_VCPU,
    is_valid,
    max_ratio_ram,
    round_down_256,
    round_up_256,
    trunc_to_int,
)
from tiercalc.services.known_tiers import find_next_above, find_next_below
from tiercalc.services.rounding import nearest_valid_tier, suggest_minimal_tier

log = logging.getLogger(__name__)

_INVALID_WARNING = "The calculated tier may not be valid. Please check the constraints."


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _recommendation(tier: Tier) -> Recommendation:
    if is_valid(tier.vcpu, tier.memory_mb):
        return Recommendation(tier=tier, valid=True)
    log.info("Derived tier %d vCPU / %d MB fails validation", tier.vcpu, tier.memory_mb)
    return Recommendation(tier=tier, valid=False, warning=_INVALID_WARNING)


def recommend_from_cpu(vcpu: int) -> Recommendation:
    if vcpu < MIN_VCPU:
        raise ValidationError("vcpu must be greater than 0")
    if vcpu > MAX_EXACT_COUNT:
        raise ValidationError(f"vcpu must be at most {MAX_EXACT_COUNT}")
    ram = trunc_to_int(vcpu * settings.TARGET_GB_PER_VCPU * 1024)
    ram = max(round_up_256(ram), MIN_MEMORY_MB)
    return _recommendation(Tier(vcpu=vcpu, memory_mb=ram))


def recommend_from_memory(memory_mb: float) -> Recommendation:
    """Recommend a tier for a memory amount.

    The ratio-based CPU count is not guaranteed to land inside the
    0.9-6.5 GB/vCPU band (e.g. 4608 MB → 3 vCPUs, which is odd). Such results
    are returned with valid=False and a warning instead of being corrected.
    Amounts at or below zero fall through to the 3840 MB floor.
    """
    ram = max(round_up_256(trunc_to_int(memory_mb)), MIN_MEMORY_MB)
    cpus = _round_half_away_from_zero(ram / settings.TARGET_GB_PER_VCPU / 1024)
    return _recommendation(Tier(vcpu=max(cpus, MIN_VCPU), memory_mb=ram))


def next_tier(current: Tier) -> NextTierResult:
    above = find_next_above(current.vcpu, current.memory_mb)
    if above is not None:
        return NextTierResult(current=current, tier=above, source="known")

    computed = suggest_minimal_tier(current.vcpu, current.memory_mb)
    return NextTierResult(
        current=current,
        tier=computed,
        source="computed",
        already_valid=computed == current,
    )


def bump_memory_to_max(current: Tier) -> BumpResult:
    max_ram = max(round_down_256(max_ratio_ram(current.vcpu)), MIN_MEMORY_MB)
    if max_ram == current.memory_mb:
        relation = BumpRelation.ALREADY_MAX
    elif max_ram < current.memory_mb:
        relation = BumpRelation.ALREADY_EXCEEDS_MAX
    else:
        relation = BumpRelation.BUMPED
    return BumpResult(
        current=current,
        new_tier=Tier(vcpu=current.vcpu, memory_mb=max_ram),
        relation=relation,
    )


def check_downgrade(current: Tier, recommended: Tier) -> DowngradeReport:
    current_valid = is_valid(current.vcpu, current.memory_mb)
    recommended_valid = is_valid(recommended.vcpu, recommended.memory_mb)
    is_lower = recommended < current

    if recommended_valid and is_lower:
        return DowngradeReport(
            current=current,
            recommended=recommended,
            current_valid=current_valid,
            recommended_valid=True,
            is_lower=True,
        )

    nearest = None
    adjusted_is_lower = False
    if not recommended_valid:
        nearest = nearest_valid_tier(recommended.vcpu, recommended.memory_mb)
        adjusted_is_lower = nearest < current

    return DowngradeReport(
        current=current,
        recommended=recommended,
        current_valid=current_valid,
        recommended_valid=recommended_valid,
        is_lower=is_lower,
        nearest_valid=nearest,
        adjusted_is_lower=adjusted_is_lower,
        known_lower=find_next_below(current.vcpu, current.memory_mb),
    )


def suggest_downgrade(current: Tier) -> DowngradeSuggestion:
    return DowngradeSuggestion(
        current=current,
        current_valid=is_valid(current.vcpu, current.memory_mb),
        suggested=find_next_below(current.vcpu, current.memory_mb),
    )

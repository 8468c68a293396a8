"""Tier value type and derivation results.

Tier is a plain frozen dataclass with field order (vcpu, memory_mb), so the
generated comparison operators give the tuple order used by the known-tier
table and by downgrade checks. No ORM, no identity beyond the two fields.
"""

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Tier:
    vcpu: int
    memory_mb: int

    @property
    def memory_gb(self) -> float:
        return self.memory_mb / 1024

    @property
    def gb_per_vcpu(self) -> float:
        if self.vcpu == 0:
            return math.inf
        return self.memory_mb / 1024 / self.vcpu


@dataclass(frozen=True)
class Recommendation:
    """A derived tier plus its validity; warning is set when valid is False."""

    tier: Tier
    valid: bool
    warning: str | None = None


class BumpRelation(str, Enum):
    ALREADY_MAX = "already_max"
    ALREADY_EXCEEDS_MAX = "already_exceeds_max"
    BUMPED = "bumped"


@dataclass(frozen=True)
class BumpResult:
    current: Tier
    new_tier: Tier
    relation: BumpRelation


@dataclass(frozen=True)
class NextTierResult:
    """Next tier above a given one.

    source is "known" when the tier came from the known-tier table and
    "computed" when the table was exhausted and the tier was sized around the
    target ratio instead. already_valid is only ever True for computed tiers
    equal to the input.
    """

    current: Tier
    tier: Tier
    source: str
    already_valid: bool = False


@dataclass(frozen=True)
class DowngradeReport:
    current: Tier
    recommended: Tier
    current_valid: bool
    recommended_valid: bool
    is_lower: bool
    # Fallbacks, only filled in when the recommendation is not a valid downgrade
    nearest_valid: Tier | None = None
    adjusted_is_lower: bool = False
    known_lower: Tier | None = None

    @property
    def is_valid_downgrade(self) -> bool:
        return self.recommended_valid and self.is_lower


@dataclass(frozen=True)
class DowngradeSuggestion:
    current: Tier
    current_valid: bool
    suggested: Tier | None

    @property
    def found(self) -> bool:
        return self.suggested is not None

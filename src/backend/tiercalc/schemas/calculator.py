"""Pydantic request/response schemas for the calculator API."""

from __future__ import annotations

from pydantic import BaseModel

from tiercalc.models.tier import (
    BumpResult,
    DowngradeReport,
    DowngradeSuggestion,
    NextTierResult,
    Recommendation,
    Tier,
)
from tiercalc.services.constraints import is_valid
from tiercalc.services.identifier import format_tier

# ── Request schemas ────────────────────────────────────────────────────────────


class CheckDowngradeRequest(BaseModel):
    current: str
    recommended: str


# ── Response schemas ───────────────────────────────────────────────────────────


class TierResponse(BaseModel):
    name: str
    vcpu: int
    memory_mb: int
    memory_gb: float
    gb_per_vcpu: float | None
    valid: bool

    @classmethod
    def from_tier(cls, tier: Tier) -> TierResponse:
        return cls(
            name=format_tier(tier),
            vcpu=tier.vcpu,
            memory_mb=tier.memory_mb,
            memory_gb=round(tier.memory_gb, 2),
            gb_per_vcpu=round(tier.gb_per_vcpu, 2) if tier.vcpu else None,
            valid=is_valid(tier.vcpu, tier.memory_mb),
        )


class RecommendationResponse(BaseModel):
    tier: TierResponse
    valid: bool
    warning: str | None

    @classmethod
    def from_result(cls, result: Recommendation) -> RecommendationResponse:
        return cls(
            tier=TierResponse.from_tier(result.tier),
            valid=result.valid,
            warning=result.warning,
        )


class NextTierResponse(BaseModel):
    current: TierResponse
    tier: TierResponse
    source: str
    already_valid: bool

    @classmethod
    def from_result(cls, result: NextTierResult) -> NextTierResponse:
        return cls(
            current=TierResponse.from_tier(result.current),
            tier=TierResponse.from_tier(result.tier),
            source=result.source,
            already_valid=result.already_valid,
        )


class BumpMemoryResponse(BaseModel):
    current: TierResponse
    new_tier: TierResponse
    relation: str

    @classmethod
    def from_result(cls, result: BumpResult) -> BumpMemoryResponse:
        return cls(
            current=TierResponse.from_tier(result.current),
            new_tier=TierResponse.from_tier(result.new_tier),
            relation=result.relation.value,
        )


class DowngradeReportResponse(BaseModel):
    current: TierResponse
    recommended: TierResponse
    is_lower: bool
    is_valid_downgrade: bool
    nearest_valid: TierResponse | None
    adjusted_is_lower: bool
    known_lower: TierResponse | None

    @classmethod
    def from_result(cls, result: DowngradeReport) -> DowngradeReportResponse:
        return cls(
            current=TierResponse.from_tier(result.current),
            recommended=TierResponse.from_tier(result.recommended),
            is_lower=result.is_lower,
            is_valid_downgrade=result.is_valid_downgrade,
            nearest_valid=_optional(result.nearest_valid),
            adjusted_is_lower=result.adjusted_is_lower,
            known_lower=_optional(result.known_lower),
        )


class DowngradeSuggestionResponse(BaseModel):
    current: TierResponse
    found: bool
    suggested: TierResponse | None

    @classmethod
    def from_result(cls, result: DowngradeSuggestion) -> DowngradeSuggestionResponse:
        return cls(
            current=TierResponse.from_tier(result.current),
            found=result.found,
            suggested=_optional(result.suggested),
        )


def _optional(tier: Tier | None) -> TierResponse | None:
    return TierResponse.from_tier(tier) if tier is not None else None

"""Tier calculator endpoints (no auth, no state).

GET  /api/v1/calculator/tiers/{tier}               parse and validate a tier
GET  /api/v1/calculator/tiers/{tier}/next          next known (or computed) tier
GET  /api/v1/calculator/tiers/{tier}/bump-memory   same vCPUs, maximum memory
GET  /api/v1/calculator/tiers/{tier}/downgrade     previous known tier
POST /api/v1/calculator/check-downgrade            validate a proposed downgrade
GET  /api/v1/calculator/recommend/cpu/{vcpu}       recommendation from vCPUs
GET  /api/v1/calculator/recommend/memory?mem=6G    recommendation from memory
GET  /api/v1/calculator/nearest?vcpu=&memory_mb=   nearest valid tier
GET  /api/v1/calculator/known-tiers                known-tier table
"""

from fastapi import APIRouter, Query

from tiercalc.schemas.calculator import (
    BumpMemoryResponse,
    CheckDowngradeRequest,
    DowngradeReportResponse,
    DowngradeSuggestionResponse,
    NextTierResponse,
    RecommendationResponse,
    TierResponse,
)
from tiercalc.services.calculator_service import (
    bump_memory_to_max,
    check_downgrade,
    next_tier,
    recommend_from_cpu,
    recommend_from_memory,
    suggest_downgrade,
)
from tiercalc.services.identifier import parse_memory, parse_tier
from tiercalc.services.known_tiers import KNOWN_TIERS
from tiercalc.services.rounding import nearest_valid_tier

router = APIRouter(prefix="/api/v1/calculator", tags=["calculator"])


@router.get("/tiers/{tier}", response_model=TierResponse)
async def describe(tier: str) -> TierResponse:
    return TierResponse.from_tier(parse_tier(tier))


@router.get("/tiers/{tier}/next", response_model=NextTierResponse)
async def next_known(tier: str) -> NextTierResponse:
    return NextTierResponse.from_result(next_tier(parse_tier(tier)))


@router.get("/tiers/{tier}/bump-memory", response_model=BumpMemoryResponse)
async def bump_memory(tier: str) -> BumpMemoryResponse:
    return BumpMemoryResponse.from_result(bump_memory_to_max(parse_tier(tier)))


@router.get("/tiers/{tier}/downgrade", response_model=DowngradeSuggestionResponse)
async def downgrade(tier: str) -> DowngradeSuggestionResponse:
    return DowngradeSuggestionResponse.from_result(suggest_downgrade(parse_tier(tier)))


@router.post("/check-downgrade", response_model=DowngradeReportResponse)
async def downgrade_check(body: CheckDowngradeRequest) -> DowngradeReportResponse:
    report = check_downgrade(parse_tier(body.current), parse_tier(body.recommended))
    return DowngradeReportResponse.from_result(report)


@router.get("/recommend/cpu/{vcpu}", response_model=RecommendationResponse)
async def recommend_cpu(vcpu: int) -> RecommendationResponse:
    return RecommendationResponse.from_result(recommend_from_cpu(vcpu))


@router.get("/recommend/memory", response_model=RecommendationResponse)
async def recommend_memory(mem: str = Query(...)) -> RecommendationResponse:
    return RecommendationResponse.from_result(recommend_from_memory(parse_memory(mem)))


@router.get("/nearest", response_model=TierResponse)
async def nearest(vcpu: int = Query(...), memory_mb: int = Query(...)) -> TierResponse:
    return TierResponse.from_tier(nearest_valid_tier(vcpu, memory_mb))


@router.get("/known-tiers", response_model=list[TierResponse])
async def known_tiers() -> list[TierResponse]:
    return [TierResponse.from_tier(t) for t in KNOWN_TIERS]

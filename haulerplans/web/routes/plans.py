"""Plan catalog and tier comparison routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from haulerplans.billing.catalog import SUBSCRIPTION_TIERS, get_tier_info
from haulerplans.billing.plans import compare_tiers, get_tier_features, parse_tier
from haulerplans.exceptions import UnknownTierError
from haulerplans.models.api import PlanResponse, TierComparisonResponse, plan_response

router = APIRouter(prefix="/api", tags=["plans"])


@router.get("/plans")
async def list_plans() -> list[PlanResponse]:
    return [plan_response(info, get_tier_features(info.tier)) for info in SUBSCRIPTION_TIERS]


@router.get("/plans/{tier}")
async def get_plan(tier: str) -> PlanResponse:
    try:
        info = get_tier_info(tier)
    except UnknownTierError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return plan_response(info, get_tier_features(info.tier))


@router.get("/tiers/compare")
async def compare(a: str, b: str) -> TierComparisonResponse:
    comparison = compare_tiers(a, b)
    return TierComparisonResponse(
        a=parse_tier(a),
        b=parse_tier(b),
        comparison=comparison,
        is_higher=comparison > 0,
    )

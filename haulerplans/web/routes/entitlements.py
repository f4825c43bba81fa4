"""Entitlement gate routes."""

from __future__ import annotations

from fastapi import APIRouter

from haulerplans.billing.access import (
    Usage,
    can_access_feature,
    can_add_service_area,
    can_request_job,
    get_upgrade_suggestion,
)
from haulerplans.config.settings import get_settings
from haulerplans.models.api import (
    FeatureAccessResponse,
    FeatureCheckRequest,
    UpgradeSuggestionRequest,
    UpgradeSuggestionResponse,
    UsageCheckRequest,
)

router = APIRouter(prefix="/api/entitlements", tags=["entitlements"])


@router.post("/feature")
async def check_feature(body: FeatureCheckRequest) -> FeatureAccessResponse:
    return FeatureAccessResponse.from_access(can_access_feature(body.tier, body.feature))


@router.post("/service-areas")
async def check_service_area(body: UsageCheckRequest) -> FeatureAccessResponse:
    return FeatureAccessResponse.from_access(can_add_service_area(body.tier, body.current_count))


@router.post("/job-requests")
async def check_job_request(body: UsageCheckRequest) -> FeatureAccessResponse:
    return FeatureAccessResponse.from_access(can_request_job(body.tier, body.current_count))


@router.post("/upgrade-suggestion")
async def upgrade_suggestion(body: UpgradeSuggestionRequest) -> UpgradeSuggestionResponse:
    usage = Usage(service_areas=body.service_areas, job_requests=body.job_requests)
    suggestion = get_upgrade_suggestion(
        body.tier, usage, threshold=get_settings().upgrade_threshold
    )
    return UpgradeSuggestionResponse.from_suggestion(suggestion)

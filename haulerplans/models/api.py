"""API request/response schemas for FastAPI endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from haulerplans.types import BillingPeriod, SubscriptionTier

if TYPE_CHECKING:
    from haulerplans.billing.access import FeatureAccess, UpgradeSuggestion
    from haulerplans.billing.catalog import TierInfo
    from haulerplans.billing.plans import TierFeatures


class FeatureCheckRequest(BaseModel):
    tier: str
    feature: str


class UsageCheckRequest(BaseModel):
    tier: str
    current_count: int = Field(ge=0)


class UpgradeSuggestionRequest(BaseModel):
    tier: str
    service_areas: int = Field(default=0, ge=0)
    job_requests: int = Field(default=0, ge=0)


class FeatureAccessResponse(BaseModel):
    can_access: bool
    reason: str | None = None
    required_tier: SubscriptionTier | None = None

    @classmethod
    def from_access(cls, result: FeatureAccess) -> FeatureAccessResponse:
        return cls(
            can_access=result.can_access,
            reason=result.reason,
            required_tier=result.required_tier,
        )


class UpgradeSuggestionResponse(BaseModel):
    should_upgrade: bool
    reason: str | None = None
    suggested_tier: SubscriptionTier | None = None

    @classmethod
    def from_suggestion(cls, result: UpgradeSuggestion) -> UpgradeSuggestionResponse:
        return cls(
            should_upgrade=result.should_upgrade,
            reason=result.reason,
            suggested_tier=result.suggested_tier,
        )


class TierFeaturesResponse(BaseModel):
    max_service_areas: int | None  # None = unlimited
    max_job_requests: int | None
    flags: dict[str, bool]

    @classmethod
    def from_features(cls, features: TierFeatures) -> TierFeaturesResponse:
        return cls(
            max_service_areas=features.max_service_areas.maximum,
            max_job_requests=features.max_job_requests.maximum,
            flags={feature.value: enabled for feature, enabled in features.flags().items()},
        )


class PlanResponse(BaseModel):
    tier: SubscriptionTier
    name: str
    monthly_price: int
    annual_price: int
    monthly_label: str
    annual_label: str
    service_areas_allowed: str
    highlights: list[str]
    color: str
    features: TierFeaturesResponse


class TierComparisonResponse(BaseModel):
    a: SubscriptionTier
    b: SubscriptionTier
    comparison: int
    is_higher: bool


def plan_response(info: TierInfo, features: TierFeatures) -> PlanResponse:
    return PlanResponse(
        tier=info.tier,
        name=info.name,
        monthly_price=info.monthly_price,
        annual_price=info.annual_price,
        monthly_label=info.format_price(BillingPeriod.MONTHLY),
        annual_label=info.format_price(BillingPeriod.ANNUAL),
        service_areas_allowed=info.service_areas_allowed,
        highlights=list(info.features),
        color=info.color,
        features=TierFeaturesResponse.from_features(features),
    )

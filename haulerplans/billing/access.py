"""Access decisions gating hauler actions against their tier's entitlements.

Every function here is pure: it reads the static tier table and the
caller-supplied counters, and returns a value. A denial is an ordinary
``FeatureAccess(can_access=False, ...)``, never an exception; exceptions are
reserved for input that names no known tier or feature.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from haulerplans.billing.plans import (
    TOP_TIER,
    get_tier_features,
    parse_tier,
    tiers_above,
)
from haulerplans.exceptions import FeatureUnavailableError, UnknownFeatureError
from haulerplans.types import SubscriptionTier, TierFeature, UsageAxis

logger = structlog.get_logger(__name__)

UPGRADE_THRESHOLD = 0.8

UPGRADE_REASON = "You are approaching your plan limits. Consider upgrading for more capacity."


@dataclass(frozen=True, slots=True)
class FeatureAccess:
    """Outcome of a gate check."""

    can_access: bool
    reason: str | None = None
    required_tier: SubscriptionTier | None = None


@dataclass(frozen=True, slots=True)
class Usage:
    """Caller-supplied usage counters."""

    service_areas: int = 0
    job_requests: int = 0

    def count_for(self, axis: UsageAxis) -> int:
        if axis is UsageAxis.SERVICE_AREAS:
            return self.service_areas
        return self.job_requests


@dataclass(frozen=True, slots=True)
class UpgradeSuggestion:
    should_upgrade: bool
    reason: str | None = None
    suggested_tier: SubscriptionTier | None = None


def parse_feature(value: TierFeature | str) -> TierFeature:
    if isinstance(value, TierFeature):
        return value
    try:
        return TierFeature(value)
    except ValueError as e:
        msg = f"Unknown tier feature: {value!r}"
        raise UnknownFeatureError(msg) from e


def can_access_feature(
    tier: SubscriptionTier | str, feature: TierFeature | str
) -> FeatureAccess:
    """Check a boolean capability, naming the lowest tier that grants it on denial."""
    tier = parse_tier(tier)
    feature = parse_feature(feature)

    if get_tier_features(tier).has(feature):
        return FeatureAccess(can_access=True)

    for candidate in tiers_above(tier):
        if get_tier_features(candidate).has(feature):
            logger.debug(
                "feature_access_denied",
                tier=tier.value,
                feature=feature.value,
                required_tier=candidate.value,
            )
            return FeatureAccess(
                can_access=False,
                reason=f"This feature requires the {candidate.upper()} plan.",
                required_tier=candidate,
            )

    msg = f"No subscription tier grants {feature.value!r}"
    raise FeatureUnavailableError(msg)


def can_add_service_area(tier: SubscriptionTier | str, current_count: int) -> FeatureAccess:
    """Check whether one more service area fits under the tier's cap."""
    tier = parse_tier(tier)
    limit = get_tier_features(tier).max_service_areas
    if limit.allows(current_count):
        return FeatureAccess(can_access=True)

    logger.debug(
        "service_area_limit_reached",
        tier=tier.value,
        current=current_count,
        limit=limit.maximum,
    )
    return FeatureAccess(
        can_access=False,
        reason=(
            f"You have reached the maximum number of service areas ({limit}) "
            f"for your {tier.upper()} plan. Upgrade to add more."
        ),
        required_tier=_lowest_tier_allowing(tier, UsageAxis.SERVICE_AREAS, current_count),
    )


def can_request_job(tier: SubscriptionTier | str, current_count: int) -> FeatureAccess:
    """Check whether one more job request fits under the tier's cap."""
    tier = parse_tier(tier)
    limit = get_tier_features(tier).max_job_requests
    if limit.allows(current_count):
        return FeatureAccess(can_access=True)

    logger.debug(
        "job_request_limit_reached",
        tier=tier.value,
        current=current_count,
        limit=limit.maximum,
    )
    return FeatureAccess(
        can_access=False,
        reason=(
            f"You have reached the maximum number of job requests ({limit}) "
            f"for your {tier.upper()} plan. Upgrade to request more jobs."
        ),
        required_tier=_lowest_tier_allowing(tier, UsageAxis.JOB_REQUESTS, current_count),
    )


def get_upgrade_suggestion(
    tier: SubscriptionTier | str,
    usage: Usage,
    threshold: float = UPGRADE_THRESHOLD,
) -> UpgradeSuggestion:
    """Suggest an upgrade once usage on either axis reaches ``threshold`` of its cap.

    Free tiers are pointed at pro, everything else at premier, regardless of
    which axis is under pressure.
    """
    tier = parse_tier(tier)
    if tier is TOP_TIER:
        return UpgradeSuggestion(should_upgrade=False)

    features = get_tier_features(tier)
    pressured = [
        axis
        for axis in UsageAxis
        if features.limit_for(axis).utilization(usage.count_for(axis)) >= threshold
    ]
    if not pressured:
        return UpgradeSuggestion(should_upgrade=False)

    suggested = SubscriptionTier.PRO if tier is SubscriptionTier.FREE else SubscriptionTier.PREMIER
    logger.info(
        "upgrade_suggested",
        tier=tier.value,
        suggested_tier=suggested.value,
        axes=[axis.value for axis in pressured],
    )
    return UpgradeSuggestion(
        should_upgrade=True,
        reason=UPGRADE_REASON,
        suggested_tier=suggested,
    )


def _lowest_tier_allowing(
    tier: SubscriptionTier, axis: UsageAxis, current_count: int
) -> SubscriptionTier | None:
    for candidate in tiers_above(tier):
        if get_tier_features(candidate).limit_for(axis).allows(current_count):
            return candidate
    return None

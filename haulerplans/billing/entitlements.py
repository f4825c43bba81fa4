"""Entitlement checks bound to a single user's effective tier."""

from __future__ import annotations

from typing import TYPE_CHECKING

from haulerplans.billing import access, plans
from haulerplans.models.domain import Hauler
from haulerplans.types import SubscriptionTier

if TYPE_CHECKING:
    from haulerplans.billing.access import FeatureAccess, UpgradeSuggestion, Usage
    from haulerplans.billing.plans import TierFeatures
    from haulerplans.models.domain import User
    from haulerplans.types import TierFeature


def resolve_tier(user: User | None) -> SubscriptionTier:
    """Haulers use their subscription tier; customers and anonymous users are free."""
    if isinstance(user, Hauler):
        return user.subscription_tier
    return SubscriptionTier.FREE


class HaulerEntitlements:
    """Engine calls pre-bound to one user's tier."""

    def __init__(self, user: User | None) -> None:
        self.tier = resolve_tier(user)
        self.features: TierFeatures = plans.get_tier_features(self.tier)

    def can_access_feature(self, feature: TierFeature | str) -> FeatureAccess:
        return access.can_access_feature(self.tier, feature)

    def can_add_service_area(self, current_count: int) -> FeatureAccess:
        return access.can_add_service_area(self.tier, current_count)

    def can_request_job(self, current_count: int) -> FeatureAccess:
        return access.can_request_job(self.tier, current_count)

    def get_upgrade_suggestion(self, usage: Usage) -> UpgradeSuggestion:
        return access.get_upgrade_suggestion(self.tier, usage)

    def is_higher_tier(self, other: SubscriptionTier | str) -> bool:
        """Whether ``other`` ranks above this user's tier."""
        return plans.is_higher_tier(other, self.tier)

"""Subscription tier definitions with concrete limits."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from haulerplans.exceptions import UnknownTierError
from haulerplans.types import SubscriptionTier, TierFeature, UsageAxis

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Limit:
    """A usage cap: either a finite maximum or unlimited.

    ``maximum is None`` is the unlimited variant. Callers go through
    ``allows``/``utilization``/``covers`` instead of comparing ``maximum``.
    """

    maximum: int | None = None

    def __post_init__(self) -> None:
        if self.maximum is not None and self.maximum < 0:
            msg = f"Limit maximum must be >= 0, got {self.maximum}"
            raise ValueError(msg)

    @classmethod
    def finite(cls, maximum: int) -> Limit:
        return cls(maximum=maximum)

    @property
    def is_unlimited(self) -> bool:
        return self.maximum is None

    def allows(self, count: int) -> bool:
        """Whether one more item fits on top of ``count`` existing ones."""
        if self.maximum is None:
            return True
        return count < self.maximum

    def utilization(self, count: int) -> float:
        """Fraction of the limit consumed; 0.0 when there is no finite cap."""
        if self.maximum is None or self.maximum == 0:
            return 0.0
        return count / self.maximum

    def covers(self, other: Limit) -> bool:
        """True when this limit is at least as generous as ``other``."""
        if self.maximum is None:
            return True
        if other.maximum is None:
            return False
        return self.maximum >= other.maximum

    def __str__(self) -> str:
        return "unlimited" if self.maximum is None else str(self.maximum)


UNLIMITED = Limit()


@dataclass(frozen=True, slots=True)
class TierFeatures:
    """Limits and capability flags granted by a subscription tier."""

    max_service_areas: Limit
    max_job_requests: Limit
    has_ad_free_experience: bool = False
    has_priority_assignment: bool = False
    has_advanced_analytics: bool = False
    has_premium_support: bool = False
    has_dedicated_account_manager: bool = False
    has_custom_service_areas: bool = False

    def has(self, feature: TierFeature) -> bool:
        return bool(getattr(self, feature.value))

    def limit_for(self, axis: UsageAxis) -> Limit:
        if axis is UsageAxis.SERVICE_AREAS:
            return self.max_service_areas
        return self.max_job_requests

    def flags(self) -> dict[TierFeature, bool]:
        return {feature: self.has(feature) for feature in TierFeature}


TIER_FEATURES: Mapping[SubscriptionTier, TierFeatures] = MappingProxyType(
    {
        SubscriptionTier.FREE: TierFeatures(
            max_service_areas=Limit.finite(1),
            max_job_requests=Limit.finite(5),
        ),
        SubscriptionTier.PRO: TierFeatures(
            max_service_areas=Limit.finite(5),
            max_job_requests=Limit.finite(50),
            has_ad_free_experience=True,
            has_priority_assignment=True,
        ),
        SubscriptionTier.PREMIER: TierFeatures(
            max_service_areas=UNLIMITED,
            max_job_requests=UNLIMITED,
            has_ad_free_experience=True,
            has_priority_assignment=True,
            has_advanced_analytics=True,
            has_premium_support=True,
            has_dedicated_account_manager=True,
            has_custom_service_areas=True,
        ),
    }
)

# Ascending; rank is the index.
_TIER_ORDER: tuple[SubscriptionTier, ...] = tuple(SubscriptionTier)
_TIER_RANK = {tier: rank for rank, tier in enumerate(_TIER_ORDER)}

TOP_TIER = _TIER_ORDER[-1]


def parse_tier(value: SubscriptionTier | str) -> SubscriptionTier:
    """Resolve a tier value, rejecting anything outside the known tiers."""
    if isinstance(value, SubscriptionTier):
        return value
    try:
        return SubscriptionTier(value)
    except ValueError as e:
        msg = f"Unknown subscription tier: {value!r}"
        raise UnknownTierError(msg) from e


def get_tier_features(tier: SubscriptionTier | str) -> TierFeatures:
    """Get the feature table for a tier."""
    return TIER_FEATURES[parse_tier(tier)]


def tier_rank(tier: SubscriptionTier | str) -> int:
    return _TIER_RANK[parse_tier(tier)]


def compare_tiers(a: SubscriptionTier | str, b: SubscriptionTier | str) -> int:
    """Negative, zero or positive as ``a`` ranks below, equal to or above ``b``."""
    return tier_rank(a) - tier_rank(b)


def is_higher_tier(a: SubscriptionTier | str, b: SubscriptionTier | str) -> bool:
    return compare_tiers(a, b) > 0


def tiers_above(tier: SubscriptionTier | str) -> list[SubscriptionTier]:
    """Tiers strictly higher than ``tier``, lowest first."""
    return list(_TIER_ORDER[tier_rank(tier) + 1 :])

"""Display catalog for the subscription tiers offered to haulers."""

from __future__ import annotations

from dataclasses import dataclass

from haulerplans.billing.plans import parse_tier
from haulerplans.types import BillingPeriod, SubscriptionTier

_PERIOD_SUFFIX = {BillingPeriod.MONTHLY: "mo", BillingPeriod.ANNUAL: "yr"}


@dataclass(frozen=True, slots=True)
class TierInfo:
    """Pricing and marketing copy for a tier."""

    tier: SubscriptionTier
    name: str
    monthly_price: int
    annual_price: int
    service_areas_allowed: str
    features: tuple[str, ...]
    color: str

    def price_for(self, period: BillingPeriod) -> int:
        if period is BillingPeriod.ANNUAL:
            return self.annual_price
        return self.monthly_price

    def format_price(self, period: BillingPeriod) -> str:
        """Render as ``Free`` or ``$5/mo`` style labels."""
        price = self.price_for(period)
        if price == 0:
            return "Free"
        return f"${price}/{_PERIOD_SUFFIX[period]}"


SUBSCRIPTION_TIERS: tuple[TierInfo, ...] = (
    TierInfo(
        tier=SubscriptionTier.FREE,
        name="Free",
        monthly_price=0,
        annual_price=0,
        service_areas_allowed="Limited area coverage",
        features=("Basic job browsing", "Limited access", "Community support"),
        color="#757575",
    ),
    TierInfo(
        tier=SubscriptionTier.PRO,
        name="Pro",
        monthly_price=5,
        annual_price=50,
        service_areas_allowed="Expanded regional coverage",
        features=(
            "Ad-free experience",
            "Higher job request limits",
            "Priority job assignment",
            "Email support",
        ),
        color="#2962ff",
    ),
    TierInfo(
        tier=SubscriptionTier.PREMIER,
        name="Premier",
        monthly_price=15,
        annual_price=150,
        service_areas_allowed="Full city/county coverage",
        features=(
            "All Pro benefits",
            "Premium support",
            "Advanced analytics",
            "Dedicated account manager",
            "Custom service areas",
        ),
        color="#ffca28",
    ),
)

_BY_TIER = {info.tier: info for info in SUBSCRIPTION_TIERS}


def get_tier_info(tier: SubscriptionTier | str) -> TierInfo:
    return _BY_TIER[parse_tier(tier)]

"""Health check endpoint logic."""

from __future__ import annotations

from haulerplans import __version__
from haulerplans.billing.plans import TIER_FEATURES


async def check_health() -> dict[str, object]:
    """Return service health status."""
    return {
        "status": "healthy",
        "version": __version__,
        "tiers": [tier.value for tier in TIER_FEATURES],
    }

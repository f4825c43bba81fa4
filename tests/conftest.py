"""Shared test fixtures."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient

from haulerplans.config.settings import get_settings
from haulerplans.models.domain import Customer, Hauler
from haulerplans.types import HaulerStatus, SubscriptionTier
from haulerplans.web.app import create_app


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def app():
    """Create a fresh app instance for tests."""
    return create_app()


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture()
def make_hauler():
    """Build an active hauler on the given tier."""

    def _make(tier: SubscriptionTier | str = SubscriptionTier.FREE) -> Hauler:
        return Hauler(
            id="h-1",
            email="hauler@example.com",
            first_name="Dana",
            last_name="Reyes",
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
            status=HaulerStatus.ACTIVE,
            subscription_tier=tier,
        )

    return _make


@pytest.fixture()
def customer() -> Customer:
    return Customer(
        id="c-1",
        email="customer@example.com",
        first_name="Sam",
        last_name="Okafor",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )

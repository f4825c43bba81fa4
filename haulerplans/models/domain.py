"""User account models consumed by the entitlement layer (not persisted here)."""

from datetime import datetime

from pydantic import BaseModel

from haulerplans.types import HaulerStatus, SubscriptionTier, UserRole


class User(BaseModel):
    id: str
    email: str
    role: UserRole
    first_name: str
    last_name: str
    phone: str | None = None
    created_at: datetime


class Customer(User):
    role: UserRole = UserRole.CUSTOMER
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class Hauler(User):
    role: UserRole = UserRole.HAULER
    status: HaulerStatus = HaulerStatus.PENDING_BACKGROUND_CHECK
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    subscription_expires_at: datetime | None = None
    business_name: str | None = None
    service_areas: list[str] = []
    background_check_id: str | None = None
    background_check_status: str | None = None

"""Enums and type aliases for haulerplans."""

from enum import StrEnum


class SubscriptionTier(StrEnum):
    """Hauler subscription levels, declared lowest first."""

    FREE = "free"
    PRO = "pro"
    PREMIER = "premier"


class TierFeature(StrEnum):
    HAS_AD_FREE_EXPERIENCE = "has_ad_free_experience"
    HAS_PRIORITY_ASSIGNMENT = "has_priority_assignment"
    HAS_ADVANCED_ANALYTICS = "has_advanced_analytics"
    HAS_PREMIUM_SUPPORT = "has_premium_support"
    HAS_DEDICATED_ACCOUNT_MANAGER = "has_dedicated_account_manager"
    HAS_CUSTOM_SERVICE_AREAS = "has_custom_service_areas"


class UsageAxis(StrEnum):
    SERVICE_AREAS = "service_areas"
    JOB_REQUESTS = "job_requests"


class UserRole(StrEnum):
    CUSTOMER = "customer"
    HAULER = "hauler"


class HaulerStatus(StrEnum):
    PENDING_BACKGROUND_CHECK = "pending_background_check"
    BACKGROUND_CHECK_IN_PROGRESS = "background_check_in_progress"
    BACKGROUND_CHECK_APPROVED = "background_check_approved"
    BACKGROUND_CHECK_DENIED = "background_check_denied"
    PENDING_DOCUMENTS = "pending_documents"
    DOCUMENTS_SUBMITTED = "documents_submitted"
    PENDING_ONBOARDING = "pending_onboarding"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class BillingPeriod(StrEnum):
    MONTHLY = "monthly"
    ANNUAL = "annual"

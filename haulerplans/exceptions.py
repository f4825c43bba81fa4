"""Exception hierarchy for haulerplans."""


class HaulerPlansError(Exception):
    """Base exception for all haulerplans errors."""


class EntitlementError(HaulerPlansError):
    """Raised when an entitlement lookup receives input it cannot resolve."""


class UnknownTierError(EntitlementError):
    """Raised when a tier value is outside the known subscription tiers."""


class UnknownFeatureError(EntitlementError):
    """Raised when a capability name is not a known tier feature."""


class FeatureUnavailableError(EntitlementError):
    """Raised when no subscription tier grants the requested feature."""


class ConfigError(HaulerPlansError):
    """Raised when configuration is invalid."""

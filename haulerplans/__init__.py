"""Subscription entitlement engine for the hauler marketplace."""

__version__ = "0.1.0"

"""Service settings via Pydantic BaseSettings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from haulerplans.billing.access import UPGRADE_THRESHOLD
from haulerplans.exceptions import ConfigError


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: list[str] = ["http://localhost:8081"]

    # Entitlements
    upgrade_threshold: float = UPGRADE_THRESHOLD


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    settings = Settings()
    if not 0 < settings.upgrade_threshold <= 1:
        msg = f"UPGRADE_THRESHOLD must be in (0, 1], got {settings.upgrade_threshold}"
        raise ConfigError(msg)
    return settings

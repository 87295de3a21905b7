"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Derivation constants loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Readiness
    packing_complete_threshold_pct: int = 80

    # Trip status buckets (percent, exclusive upper bounds)
    early_planning_below_pct: int = 30
    planning_below_pct: int = 70

    # Completion tracking
    next_steps_limit: int = 3

    # Itinerary default times (HH:MM)
    check_in_time: str = "15:00"
    check_out_time: str = "11:00"

    # Packing
    home_country: str = "United States"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from health_metrics.analytics.charts import DEFAULT_HEIGHT_CM
from health_metrics.analytics.time_slots import DISTINCT_HOUR_RATIO, MIN_DISTINCT_HOURS
from health_metrics.domain.records import FEMALE, MALE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    log_level: str = "INFO"
    supabase_page_size: int = 1000
    default_height_cm: float = DEFAULT_HEIGHT_CM
    time_slot_min_distinct_hours: int = MIN_DISTINCT_HOURS
    time_slot_distinct_hour_ratio: float = DISTINCT_HOUR_RATIO
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_gender(raw: str | None) -> str | None:
    """Normalize a stored gender value; unknown values become None."""
    if raw is None:
        return None
    cleaned = raw.strip().lower()
    if cleaned in {MALE, "m"}:
        return MALE
    if cleaned in {FEMALE, "f"}:
        return FEMALE
    return None

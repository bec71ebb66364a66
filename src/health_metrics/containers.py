"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_metrics.adapters.supabase_health_repository import (
    SupabaseHealthRecordRepository,
)
from health_metrics.app_logging import configure_logging
from health_metrics.config import Settings
from health_metrics.services.analytics import AnalyticsService, HealthRecordRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    repository: HealthRecordRepository
    analytics_service: AnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    repository = SupabaseHealthRecordRepository(
        supabase_client, page_size=resolved_settings.supabase_page_size
    )
    analytics_service = AnalyticsService(
        repository=repository,
        default_height_cm=resolved_settings.default_height_cm,
        min_distinct_hours=resolved_settings.time_slot_min_distinct_hours,
        distinct_hour_ratio=resolved_settings.time_slot_distinct_hour_ratio,
    )
    return AppContainer(
        settings=resolved_settings,
        repository=repository,
        analytics_service=analytics_service,
    )

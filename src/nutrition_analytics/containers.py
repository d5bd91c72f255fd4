"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_analytics.adapters.supabase_log_repository import SupabaseLogRepository
from nutrition_analytics.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_analytics.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from nutrition_analytics.config import Settings
from nutrition_analytics.services.analytics import HistoricalAnalyticsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analytics_service: HistoricalAnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    analytics_service = HistoricalAnalyticsService(
        log_repository=SupabaseLogRepository(supabase_client),
        profile_repository=SupabaseProfileRepository(supabase_client),
        settings_repository=SupabaseUserSettingsRepository(supabase_client),
        default_timezone=resolved_settings.default_timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        analytics_service=analytics_service,
    )

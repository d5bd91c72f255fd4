"""Shared test fixtures."""

from uuid import UUID, uuid4

import pytest

from nutrition_analytics.config import Settings
from nutrition_analytics.containers import AppContainer
from nutrition_analytics.domain.logs import GoalProfile
from nutrition_analytics.services.analytics import HistoricalAnalyticsService
from tests.fakes import (
    InMemoryLogRepository,
    InMemoryProfileRepository,
    InMemoryUserSettingsRepository,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def profile() -> GoalProfile:
    return GoalProfile(
        daily_calorie_target=2000,
        protein_target_g=150,
        carb_target_g=200,
        fat_target_g=70,
    )


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def profile_repository(
    user_id: UUID, profile: GoalProfile
) -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profiles={user_id: profile})


@pytest.fixture
def settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository()


@pytest.fixture
def analytics_service(
    log_repository: InMemoryLogRepository,
    profile_repository: InMemoryProfileRepository,
    settings_repository: InMemoryUserSettingsRepository,
) -> HistoricalAnalyticsService:
    return HistoricalAnalyticsService(
        log_repository=log_repository,
        profile_repository=profile_repository,
        settings_repository=settings_repository,
    )


@pytest.fixture
def container(
    settings: Settings, analytics_service: HistoricalAnalyticsService
) -> AppContainer:
    return AppContainer(settings=settings, analytics_service=analytics_service)

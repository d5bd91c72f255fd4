"""Tests for the historical analytics service."""

from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from nutrition_analytics.domain.analytics import MetricsOptions, TimePeriod
from nutrition_analytics.domain.logs import DateRange, GoalType, NutritionLogEntry
from nutrition_analytics.services.analytics import (
    AnalyticsRequest,
    HistoricalAnalyticsService,
)
from tests.fakes import InMemoryLogRepository, InMemoryUserSettingsRepository

AS_OF = date(2026, 10, 18)


def test_get_metrics_uses_user_timezone_window(
    user_id: UUID,
    analytics_service: HistoricalAnalyticsService,
    log_repository: InMemoryLogRepository,
    settings_repository: InMemoryUserSettingsRepository,
) -> None:
    settings_repository.timezones[user_id] = "America/Los_Angeles"
    log_repository.logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 10, 19, 5, 0, tzinfo=UTC), calories=2000
        )
    ]

    metrics = analytics_service.get_metrics(
        user_id, AnalyticsRequest(period=TimePeriod.WEEK), AS_OF
    )

    assert log_repository.windows == [
        (
            datetime(2026, 10, 11, 7, 0, tzinfo=UTC),
            datetime(2026, 10, 19, 7, 0, tzinfo=UTC),
        )
    ]
    assert metrics.date_range == DateRange(start=date(2026, 10, 11), end=AS_OF)
    assert metrics.daily_goals[-1].calories.actual == 2000
    assert metrics.period is TimePeriod.WEEK


def test_timezone_defaults_when_unset(
    user_id: UUID, analytics_service: HistoricalAnalyticsService
) -> None:
    assert analytics_service.get_timezone(user_id) == "UTC"


def test_missing_profile_means_no_goals(
    analytics_service: HistoricalAnalyticsService,
    log_repository: InMemoryLogRepository,
) -> None:
    log_repository.logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 10, 18, 12, tzinfo=UTC), calories=2000
        )
    ]

    metrics = analytics_service.get_metrics(uuid4(), AnalyticsRequest(), AS_OF)

    assert all(day.overall_score == 0 for day in metrics.daily_goals)
    assert all(score.total_days == 0 for score in metrics.consistency)


def test_comparisons_fetch_previous_period(
    user_id: UUID,
    analytics_service: HistoricalAnalyticsService,
    log_repository: InMemoryLogRepository,
) -> None:
    request = AnalyticsRequest(
        period=TimePeriod.CUSTOM,
        custom_range=DateRange(start=date(2026, 10, 12), end=date(2026, 10, 18)),
        goal_types=(GoalType.CALORIES,),
        options=MetricsOptions(include_comparisons=True),
    )

    metrics = analytics_service.get_metrics(user_id, request, AS_OF)

    assert len(log_repository.windows) == 2
    assert log_repository.windows[1][0] == datetime(2026, 10, 5, tzinfo=UTC)
    assert [c.metric for c in metrics.comparisons] == ["overall_score", "calories"]


def test_inverted_custom_range_skips_fetch(
    user_id: UUID,
    analytics_service: HistoricalAnalyticsService,
    log_repository: InMemoryLogRepository,
) -> None:
    request = AnalyticsRequest(
        period=TimePeriod.CUSTOM,
        custom_range=DateRange(start=date(2026, 10, 18), end=date(2026, 10, 1)),
    )

    metrics = analytics_service.get_metrics(user_id, request, AS_OF)

    assert metrics.daily_goals == []
    assert log_repository.windows == []

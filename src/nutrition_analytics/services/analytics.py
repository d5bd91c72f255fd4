"""Historical analytics service backed by log and profile stores."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_analytics.domain.analytics import (
    HistoricalMetrics,
    MetricsOptions,
    TimePeriod,
)
from nutrition_analytics.domain.logs import (
    ALL_GOAL_TYPES,
    DateRange,
    GoalProfile,
    GoalType,
    NutritionLogEntry,
)
from nutrition_analytics.services.dates import (
    previous_range,
    resolve_period,
    resolve_timezone,
    utc_window,
)
from nutrition_analytics.services.engine import compute_historical_metrics

_logger = logging.getLogger(__name__)


class LogRepository(Protocol):
    """Read interface for nutrition logs."""

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[NutritionLogEntry]:
        """Return logs with start <= logged_at < end, oldest first."""


class ProfileRepository(Protocol):
    """Read interface for goal profiles."""

    def get_profile(self, user_id: UUID) -> GoalProfile | None:
        """Return the user's goal profile if one exists."""


class UserSettingsRepository(Protocol):
    """Read interface for user settings."""

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""


@dataclass(frozen=True)
class AnalyticsRequest:
    """Parameters for a historical analytics query."""

    period: TimePeriod = TimePeriod.MONTH
    custom_range: DateRange | None = None
    goal_types: tuple[GoalType, ...] = ALL_GOAL_TYPES
    options: MetricsOptions = MetricsOptions()


@dataclass
class HistoricalAnalyticsService:
    """Fetches a user's logs and targets and runs the analytics engine."""

    log_repository: LogRepository
    profile_repository: ProfileRepository
    settings_repository: UserSettingsRepository
    default_timezone: str = "UTC"

    def get_timezone(self, user_id: UUID) -> str:
        """Return the user timezone or the configured default."""
        return self.settings_repository.get_timezone(user_id) or self.default_timezone

    def get_metrics(
        self, user_id: UUID, request: AnalyticsRequest, as_of: date
    ) -> HistoricalMetrics:
        """Return historical metrics for the period ending at ``as_of``."""
        timezone_name = self.get_timezone(user_id)
        tz = resolve_timezone(timezone_name)
        date_range = resolve_period(request.period, as_of, request.custom_range)
        profile = self.profile_repository.get_profile(user_id) or GoalProfile()

        logs = self._fetch_logs(user_id, date_range, tz)
        previous_logs = None
        if request.options.include_comparisons:
            previous_logs = self._fetch_logs(user_id, previous_range(date_range), tz)

        metrics = compute_historical_metrics(
            date_range,
            logs,
            profile,
            request.goal_types,
            request.options,
            period=request.period,
            timezone_name=timezone_name,
            previous_logs=previous_logs,
        )
        _logger.info(
            "Historical metrics: user_id=%s period=%s range=%s..%s logs=%s",
            user_id,
            request.period.value,
            date_range.start,
            date_range.end,
            len(logs),
        )
        return metrics

    def _fetch_logs(
        self, user_id: UUID, date_range: DateRange, tz: ZoneInfo
    ) -> list[NutritionLogEntry]:
        if not len(date_range):
            return []
        start, end = utc_window(date_range, tz)
        return self.log_repository.list_logs(user_id, start, end)

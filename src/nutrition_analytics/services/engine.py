"""Entry point that runs the analytics pipeline for one date range."""

import logging

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
from nutrition_analytics.services.aggregation import aggregate_daily_achievements
from nutrition_analytics.services.comparisons import compare_periods
from nutrition_analytics.services.consistency import calculate_consistency_score
from nutrition_analytics.services.dates import previous_range
from nutrition_analytics.services.insights import generate_insights
from nutrition_analytics.services.patterns import analyze_patterns
from nutrition_analytics.services.streaks import calculate_streak_data
from nutrition_analytics.services.trends import calculate_trend_analysis

_logger = logging.getLogger(__name__)


def compute_historical_metrics(  # noqa: PLR0913
    date_range: DateRange,
    logs: list[NutritionLogEntry],
    profile: GoalProfile,
    goal_types: tuple[GoalType, ...] | list[GoalType] = ALL_GOAL_TYPES,
    options: MetricsOptions | None = None,
    *,
    period: TimePeriod = TimePeriod.CUSTOM,
    timezone_name: str = "UTC",
    previous_logs: list[NutritionLogEntry] | None = None,
) -> HistoricalMetrics:
    """Compute the requested analytics from logs and targets.

    Pure and deterministic: the only notion of time is ``date_range``.
    Insights draw on streaks, consistency and patterns, so those are computed
    whenever insights are requested even if they are left out of the result.
    """
    resolved = options or MetricsOptions()
    daily_goals = aggregate_daily_achievements(
        date_range, logs, profile, timezone_name
    )

    streaks = []
    if resolved.include_streaks or resolved.include_insights:
        streaks = [calculate_streak_data(goal, daily_goals) for goal in goal_types]

    consistency = []
    if resolved.include_consistency or resolved.include_insights:
        consistency = [
            calculate_consistency_score(goal, daily_goals, period)
            for goal in goal_types
        ]

    trends = []
    if resolved.include_trends:
        trends = [calculate_trend_analysis(daily_goals, goal) for goal in goal_types]

    patterns = None
    if resolved.include_patterns or resolved.include_insights:
        patterns = analyze_patterns(daily_goals)

    insights = []
    if resolved.include_insights:
        insights = generate_insights(
            streaks, consistency, daily_goals, patterns, goal_types
        )

    comparisons = []
    if resolved.include_comparisons and previous_logs is not None:
        earlier = previous_range(date_range)
        earlier_goals = aggregate_daily_achievements(
            earlier, previous_logs, profile, timezone_name
        )
        comparisons = compare_periods(
            date_range, daily_goals, earlier, earlier_goals, goal_types
        )

    _logger.debug(
        "Computed historical metrics: days=%s goals=%s insights=%s",
        len(daily_goals),
        len(goal_types),
        len(insights),
    )
    return HistoricalMetrics(
        date_range=date_range,
        period=period,
        daily_goals=daily_goals,
        streaks=streaks if resolved.include_streaks else [],
        consistency=consistency if resolved.include_consistency else [],
        trends=trends,
        patterns=patterns if resolved.include_patterns else None,
        comparisons=comparisons,
        insights=insights,
    )

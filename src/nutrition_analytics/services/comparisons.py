"""Comparison of a period with the one immediately before it."""

from nutrition_analytics.domain.analytics import (
    ComparativeData,
    DailyAchievement,
    PeriodChange,
    PeriodValue,
)
from nutrition_analytics.domain.logs import DateRange, GoalType

OVERALL_METRIC = "overall_score"


def compare_periods(
    current_range: DateRange,
    current: list[DailyAchievement],
    previous_range: DateRange,
    previous: list[DailyAchievement],
    goal_types: tuple[GoalType, ...] | list[GoalType],
) -> list[ComparativeData]:
    """Compare average overall score and per-goal achievement rates."""
    comparisons = [
        _compare(
            OVERALL_METRIC,
            current_range,
            _average_score(current),
            previous_range,
            _average_score(previous),
        )
    ]
    for goal_type in goal_types:
        comparisons.append(
            _compare(
                goal_type.value,
                current_range,
                achievement_rate(current, goal_type),
                previous_range,
                achievement_rate(previous, goal_type),
            )
        )
    return comparisons


def achievement_rate(
    daily_achievements: list[DailyAchievement], goal_type: GoalType
) -> float:
    """Return the percentage of targeted days on which a goal was achieved."""
    targeted = [a for a in daily_achievements if a.goal(goal_type).target > 0]
    if not targeted:
        return 0.0
    return sum(1 for a in targeted if a.goal(goal_type).achieved) / len(targeted) * 100


def _average_score(daily_achievements: list[DailyAchievement]) -> float:
    if not daily_achievements:
        return 0.0
    return sum(a.overall_score for a in daily_achievements) / len(daily_achievements)


def _compare(
    metric: str,
    current_range: DateRange,
    current_value: float,
    previous_range: DateRange,
    previous_value: float,
) -> ComparativeData:
    absolute = current_value - previous_value
    percentage = absolute / previous_value * 100 if previous_value else 0.0
    return ComparativeData(
        metric=metric,
        current=PeriodValue(
            label="Current period", value=current_value, date_range=current_range
        ),
        previous=PeriodValue(
            label="Previous period", value=previous_value, date_range=previous_range
        ),
        change=PeriodChange(
            absolute=absolute, percentage=percentage, is_improvement=absolute > 0
        ),
    )

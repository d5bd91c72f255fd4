"""Daily aggregation of nutrition logs against goal targets."""

from collections import defaultdict
from datetime import date

from nutrition_analytics.domain.analytics import DailyAchievement, GoalAchievement
from nutrition_analytics.domain.logs import (
    ALL_GOAL_TYPES,
    DateRange,
    GoalProfile,
    GoalType,
    NutritionLogEntry,
)
from nutrition_analytics.services.dates import local_date, resolve_timezone

ACHIEVEMENT_THRESHOLD = 0.9


class InvalidLogEntryError(ValueError):
    """Raised when a log entry cannot be placed on a calendar day."""


def aggregate_daily_achievements(
    date_range: DateRange,
    logs: list[NutritionLogEntry],
    profile: GoalProfile,
    timezone_name: str = "UTC",
) -> list[DailyAchievement]:
    """Return one achievement record per local date in the range."""
    days = date_range.days()
    if not days:
        return []

    tz = resolve_timezone(timezone_name)
    totals: dict[date, dict[GoalType, float]] = defaultdict(
        lambda: dict.fromkeys(ALL_GOAL_TYPES, 0.0)
    )
    for log in logs:
        if log.logged_at is None:
            raise InvalidLogEntryError("Log entry is missing logged_at")
        bucket = totals[local_date(log.logged_at, tz)]
        for goal_type in ALL_GOAL_TYPES:
            bucket[goal_type] += log.amount(goal_type)

    empty = dict.fromkeys(ALL_GOAL_TYPES, 0.0)
    return [
        calculate_daily_achievement(day, totals.get(day, empty), profile)
        for day in days
    ]


def calculate_daily_achievement(
    day: date, totals: dict[GoalType, float], profile: GoalProfile
) -> DailyAchievement:
    """Compare a day's nutrient totals with the profile targets."""
    goals = {
        goal_type: _goal_achievement(
            profile.target(goal_type), totals.get(goal_type, 0.0)
        )
        for goal_type in ALL_GOAL_TYPES
    }
    targeted = [goal for goal in goals.values() if goal.target > 0]
    achieved = [goal for goal in targeted if goal.achieved]
    overall_score = len(achieved) / len(targeted) * 100 if targeted else 0.0
    return DailyAchievement(
        day=day,
        calories=goals[GoalType.CALORIES],
        protein=goals[GoalType.PROTEIN],
        carbs=goals[GoalType.CARBS],
        fat=goals[GoalType.FAT],
        overall_score=overall_score,
    )


def _goal_achievement(target: float, actual: float) -> GoalAchievement:
    if target <= 0:
        return GoalAchievement(
            target=0.0, actual=actual, percentage=0.0, achieved=False
        )
    return GoalAchievement(
        target=target,
        actual=actual,
        percentage=actual / target * 100,
        achieved=actual >= target * ACHIEVEMENT_THRESHOLD,
    )

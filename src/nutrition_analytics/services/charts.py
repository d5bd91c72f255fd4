"""Chart series and summary statistics for daily achievements."""

from dataclasses import dataclass

from nutrition_analytics.domain.analytics import DailyAchievement
from nutrition_analytics.domain.logs import ALL_GOAL_TYPES, GoalType

_HEATMAP_LEVELS = ((90, 4), (75, 3), (50, 2), (25, 1))


@dataclass
class AnalyticsSummary:
    """Headline numbers for a date range."""

    total_days: int
    days_with_data: int
    average_overall_score: int
    best_day: DailyAchievement | None
    average_calories: int
    data_completeness: int


def goal_achievement_series(
    daily_achievements: list[DailyAchievement],
) -> list[dict[str, object]]:
    """Return rounded per-goal percentages for each day."""
    series = []
    for day in daily_achievements:
        point: dict[str, object] = {"date": day.day.isoformat()}
        for goal_type in ALL_GOAL_TYPES:
            point[goal_type.value] = round(day.goal(goal_type).percentage)
        point["overall"] = round(day.overall_score)
        series.append(point)
    return series


def macro_trends_series(
    daily_achievements: list[DailyAchievement],
) -> list[dict[str, object]]:
    """Return target and actual grams for each macro per day."""
    series = []
    for day in daily_achievements:
        point: dict[str, object] = {"date": day.day.isoformat()}
        for goal_type in (GoalType.PROTEIN, GoalType.CARBS, GoalType.FAT):
            goal = day.goal(goal_type)
            point[f"{goal_type.value}_target"] = goal.target
            point[f"{goal_type.value}_actual"] = goal.actual
        series.append(point)
    return series


def heatmap_series(
    daily_achievements: list[DailyAchievement],
) -> list[dict[str, object]]:
    """Return overall scores bucketed into five intensity levels."""
    return [
        {
            "date": day.day.isoformat(),
            "value": day.overall_score,
            "level": heatmap_level(day.overall_score),
        }
        for day in daily_achievements
    ]


def heatmap_level(score: float) -> int:
    """Return the 0-4 intensity level for an overall score."""
    for threshold, level in _HEATMAP_LEVELS:
        if score >= threshold:
            return level
    return 0


def summarize(daily_achievements: list[DailyAchievement]) -> AnalyticsSummary:
    """Return totals, averages and completeness for a date range."""
    total_days = len(daily_achievements)
    with_data = [
        day
        for day in daily_achievements
        if any(day.goal(goal_type).actual > 0 for goal_type in ALL_GOAL_TYPES)
    ]

    best_day = None
    for day in daily_achievements:
        if best_day is None or day.overall_score > best_day.overall_score:
            best_day = day

    average_score = (
        sum(day.overall_score for day in daily_achievements) / total_days
        if total_days
        else 0.0
    )
    average_calories = (
        sum(day.calories.actual for day in with_data) / len(with_data)
        if with_data
        else 0.0
    )
    return AnalyticsSummary(
        total_days=total_days,
        days_with_data=len(with_data),
        average_overall_score=round(average_score),
        best_day=best_day,
        average_calories=round(average_calories),
        data_completeness=round(len(with_data) / total_days * 100) if total_days else 0,
    )

"""Weekday and month patterns in daily achievements."""

from collections import defaultdict

from nutrition_analytics.domain.analytics import (
    DailyAchievement,
    MonthlyTrend,
    PatternAnalysis,
    WeekdayPattern,
)
from nutrition_analytics.domain.logs import ALL_GOAL_TYPES, GoalType
from nutrition_analytics.services.dates import MONTH_NAMES, WEEKDAY_NAMES
from nutrition_analytics.services.regression import fit_linear

MIN_MONTHLY_TREND_DAYS = 14
PROBLEM_DAY_SCORE = 60
STRONG_DAY_SCORE = 75
CONSISTENT_GOAL_RATE = 0.8
CONSISTENT_GOAL_MIN_WEEKDAYS = 5
# date.weekday() indexes, Sunday first
_WEEKDAY_ORDER = (6, 0, 1, 2, 3, 4, 5)


def analyze_patterns(daily_achievements: list[DailyAchievement]) -> PatternAnalysis:
    """Aggregate achievements by weekday and month."""
    ordered = sorted(daily_achievements, key=lambda a: a.day)

    by_weekday: dict[int, list[DailyAchievement]] = defaultdict(list)
    by_month: dict[str, list[DailyAchievement]] = defaultdict(list)
    for achievement in ordered:
        by_weekday[achievement.day.weekday()].append(achievement)
        month_key = (
            f"{MONTH_NAMES[achievement.day.month - 1]} {achievement.day.year}"
        )
        by_month[month_key].append(achievement)

    weekday_patterns = {
        WEEKDAY_NAMES[weekday]: _weekday_pattern(by_weekday[weekday])
        for weekday in _WEEKDAY_ORDER
        if by_weekday[weekday]
    }
    month_averages = {
        month: _average([a.overall_score for a in days])
        for month, days in by_month.items()
    }
    problem_days = [
        name
        for name, pattern in weekday_patterns.items()
        if pattern.average_score < PROBLEM_DAY_SCORE
    ]

    return PatternAnalysis(
        weekday_patterns=weekday_patterns,
        monthly_trend=monthly_trend(ordered),
        month_averages=month_averages,
        problem_days=problem_days,
        success_factors=_success_factors(weekday_patterns, by_weekday),
    )


def monthly_trend(daily_achievements: list[DailyAchievement]) -> MonthlyTrend:
    """Return the slope of raw overall scores, neutral below two weeks."""
    if len(daily_achievements) < MIN_MONTHLY_TREND_DAYS:
        return MonthlyTrend(improving=False, slope=0.0)
    ordered = sorted(daily_achievements, key=lambda a: a.day)
    slope = fit_linear([a.overall_score for a in ordered]).slope
    return MonthlyTrend(improving=slope > 0, slope=slope)


def _weekday_pattern(days: list[DailyAchievement]) -> WeekdayPattern:
    goal_scores = {
        goal_type: _average([a.goal(goal_type).percentage for a in days])
        for goal_type in ALL_GOAL_TYPES
    }
    best = worst = GoalType.CALORIES
    for goal_type, score in goal_scores.items():
        if score > goal_scores[best]:
            best = goal_type
        if score < goal_scores[worst]:
            worst = goal_type
    return WeekdayPattern(
        average_score=_average([a.overall_score for a in days]),
        best_goal=best,
        worst_goal=worst,
    )


def _success_factors(
    weekday_patterns: dict[str, WeekdayPattern],
    by_weekday: dict[int, list[DailyAchievement]],
) -> list[str]:
    factors = []

    best_day = ""
    best_score = 0.0
    for name, pattern in weekday_patterns.items():
        if pattern.average_score > best_score:
            best_day, best_score = name, pattern.average_score
    if best_score > STRONG_DAY_SCORE:
        factors.append(f"{best_day}s are your strongest days")

    consistent_weekdays = dict.fromkeys(ALL_GOAL_TYPES, 0)
    for days in by_weekday.values():
        if not days:
            continue
        for goal_type in ALL_GOAL_TYPES:
            rate = sum(1 for a in days if a.goal(goal_type).achieved) / len(days)
            if rate > CONSISTENT_GOAL_RATE:
                consistent_weekdays[goal_type] += 1

    most_consistent = max(ALL_GOAL_TYPES, key=lambda g: consistent_weekdays[g])
    if consistent_weekdays[most_consistent] >= CONSISTENT_GOAL_MIN_WEEKDAYS:
        factors.append(f"{most_consistent.value} is your most consistent goal")
    return factors


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0

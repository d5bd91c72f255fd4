"""Consistency scoring for a goal type over a period."""

import math

from nutrition_analytics.domain.analytics import (
    ConsistencyScore,
    ConsistencyTrend,
    DailyAchievement,
    TimePeriod,
)
from nutrition_analytics.domain.logs import GoalType

RATE_WEIGHT = 0.7
CONSISTENCY_WEIGHT = 0.3
TREND_WINDOW_DAYS = 7
TREND_THRESHOLD = 0.1


def calculate_consistency_score(
    goal_type: GoalType,
    daily_achievements: list[DailyAchievement],
    period: TimePeriod,
) -> ConsistencyScore:
    """Blend achievement rate and day-to-day variability into a 0-100 score.

    Only days with a target for the goal type are counted.
    """
    targeted = [
        achievement
        for achievement in sorted(daily_achievements, key=lambda a: a.day)
        if achievement.goal(goal_type).target > 0
    ]
    total_days = len(targeted)
    achieved_days = sum(1 for a in targeted if a.goal(goal_type).achieved)
    percentages = [a.goal(goal_type).percentage for a in targeted]

    average = sum(percentages) / total_days if total_days else 0.0
    variance = (
        sum((p - average) ** 2 for p in percentages) / total_days if total_days else 0.0
    )
    standard_deviation = math.sqrt(variance)

    if total_days:
        achievement_rate = achieved_days / total_days * 100
        consistency_factor = max(0.0, 100 - standard_deviation)
        score = achievement_rate * RATE_WEIGHT + consistency_factor * CONSISTENCY_WEIGHT
    else:
        score = 0.0

    recent = targeted[-TREND_WINDOW_DAYS:]
    older = targeted[-2 * TREND_WINDOW_DAYS : -TREND_WINDOW_DAYS]
    return ConsistencyScore(
        goal_type=goal_type,
        period=period,
        score=score,
        total_days=total_days,
        achieved_days=achieved_days,
        average_percentage=average,
        standard_deviation=standard_deviation,
        trend=_trend(
            _achieved_rate(recent, goal_type), _achieved_rate(older, goal_type)
        ),
    )


def _achieved_rate(days: list[DailyAchievement], goal_type: GoalType) -> float:
    if not days:
        return 0.0
    return sum(1 for a in days if a.goal(goal_type).achieved) / len(days)


def _trend(recent_rate: float, older_rate: float) -> ConsistencyTrend:
    if recent_rate > older_rate + TREND_THRESHOLD:
        return ConsistencyTrend.IMPROVING
    if recent_rate < older_rate - TREND_THRESHOLD:
        return ConsistencyTrend.DECLINING
    return ConsistencyTrend.STABLE

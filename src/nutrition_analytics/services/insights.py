"""Natural-language insights composed from analytics results."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from nutrition_analytics.domain.analytics import (
    ConsistencyScore,
    ConsistencyTrend,
    DailyAchievement,
    PatternAnalysis,
    StreakData,
)
from nutrition_analytics.domain.logs import ALL_GOAL_TYPES, GoalType

MAX_INSIGHTS = 8
EXCELLENT_CONSISTENCY = 80
RECENT_DAYS = 7
GOOD_DAY_SCORE = 75
GREAT_WEEK_RATE = 75
CHALLENGING_WEEK_RATE = 50
DECLINING_SLOPE = -0.5
STRONG_GOAL_RATE = 80
WEAK_GOAL_RATE = 50

T = TypeVar("T")


def generate_insights(
    streaks: list[StreakData],
    consistency: list[ConsistencyScore],
    daily_achievements: list[DailyAchievement],
    patterns: PatternAnalysis | None,
    goal_types: tuple[GoalType, ...] | list[GoalType] = ALL_GOAL_TYPES,
) -> list[str]:
    """Return up to eight insights in fixed priority order."""
    insights: list[str] = []
    insights.extend(_streak_insights(streaks))
    insights.extend(_consistency_insights(consistency))
    insights.extend(_recent_week_insights(daily_achievements))
    if patterns is not None:
        insights.extend(_pattern_insights(patterns))
    insights.extend(_goal_insights(daily_achievements, goal_types))
    return insights[:MAX_INSIGHTS]


def _streak_insights(streaks: list[StreakData]) -> list[str]:
    insights = []
    longest = _first_max(streaks, lambda s: s.longest_streak)
    if longest is not None and longest.longest_streak > 0:
        insights.append(
            f"Your longest streak was {longest.longest_streak} days "
            f"for {longest.goal_type.value}!"
        )
    active = _first_max(
        [s for s in streaks if s.current_streak > 0], lambda s: s.current_streak
    )
    if active is not None:
        insights.append(
            f"You're currently on a {active.current_streak}-day "
            f"{active.goal_type.value} streak!"
        )
    return insights


def _consistency_insights(consistency: list[ConsistencyScore]) -> list[str]:
    insights = []
    best = _first_max(consistency, lambda c: c.score)
    if best is not None and best.score > EXCELLENT_CONSISTENCY:
        insights.append(
            f"Excellent consistency in {best.goal_type.value} - "
            f"{round(best.score)}% score!"
        )
    improving = _goal_names(consistency, ConsistencyTrend.IMPROVING)
    if improving:
        insights.append(f"You're improving in {improving}. Keep it up!")
    declining = _goal_names(consistency, ConsistencyTrend.DECLINING)
    if declining:
        insights.append(
            f"Consider focusing on {declining} - showing declining trend"
        )
    return insights


def _recent_week_insights(daily_achievements: list[DailyAchievement]) -> list[str]:
    recent = sorted(daily_achievements, key=lambda a: a.day)[-RECENT_DAYS:]
    if not recent:
        return []
    good_days = sum(1 for a in recent if a.overall_score >= GOOD_DAY_SCORE)
    rate = good_days / len(recent) * 100
    if rate >= GREAT_WEEK_RATE:
        return [f"Great week! You hit your goals {round(rate)}% of the time."]
    if rate < CHALLENGING_WEEK_RATE:
        return [
            f"This week was challenging - only {round(rate)}% goal achievement. "
            "Tomorrow is a fresh start!"
        ]
    return []


def _pattern_insights(patterns: PatternAnalysis) -> list[str]:
    insights = []
    if patterns.problem_days:
        insights.append(
            f"{' and '.join(patterns.problem_days)} tend to be challenging days for you"
        )
    insights.extend(patterns.success_factors)
    if patterns.monthly_trend.improving:
        insights.append(
            "Your performance is trending upward overall - excellent progress!"
        )
    elif patterns.monthly_trend.slope < DECLINING_SLOPE:
        insights.append(
            "Performance has been declining recently - consider reviewing your approach"
        )
    return insights


def _goal_insights(
    daily_achievements: list[DailyAchievement],
    goal_types: tuple[GoalType, ...] | list[GoalType],
) -> list[str]:
    performance = []
    for goal_type in goal_types:
        total = sum(1 for a in daily_achievements if a.goal(goal_type).target > 0)
        achieved = sum(1 for a in daily_achievements if a.goal(goal_type).achieved)
        if total:
            performance.append((goal_type, achieved / total * 100))
    if not performance:
        return []

    insights = []
    best = _first_max(performance, lambda item: item[1])
    worst = _first_max(performance, lambda item: -item[1])
    if best is not None and best[1] > STRONG_GOAL_RATE:
        goal_type, rate = best
        insights.append(
            f"{goal_type.value} is your strongest area with {round(rate)}% achievement"
        )
    if worst is not None and worst[1] < WEAK_GOAL_RATE:
        goal_type, rate = worst
        insights.append(
            f"{goal_type.value} needs attention - only {round(rate)}% achievement rate"
        )
    return insights


def _goal_names(consistency: list[ConsistencyScore], trend: ConsistencyTrend) -> str:
    return ", ".join(c.goal_type.value for c in consistency if c.trend is trend)


def _first_max(items: Iterable[T], key: Callable[[T], float]) -> T | None:
    best = None
    for item in items:
        if best is None or key(item) > key(best):
            best = item
    return best

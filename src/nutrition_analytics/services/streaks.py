"""Streak calculation over a dense daily achievement series."""

from datetime import date, timedelta

from nutrition_analytics.domain.analytics import (
    DailyAchievement,
    StreakData,
    StreakPeriod,
)
from nutrition_analytics.domain.logs import GoalType


def calculate_streak_data(
    goal_type: GoalType, daily_achievements: list[DailyAchievement]
) -> StreakData:
    """Return current, longest and historical streaks for a goal type.

    Expects one record per calendar day. Records are sorted by date first;
    two achieved records more than a day apart never share a streak.
    """
    ordered = sorted(daily_achievements, key=lambda achievement: achievement.day)

    history: list[StreakPeriod] = []
    last_achieved: date | None = None
    streak_start: date | None = None
    streak_length = 0
    previous_day: date | None = None

    for achievement in ordered:
        if achievement.goal(goal_type).achieved:
            last_achieved = achievement.day
            is_adjacent = previous_day is not None and (
                achievement.day - previous_day == timedelta(days=1)
            )
            if streak_start is not None and not is_adjacent:
                history.append(_close(streak_start, previous_day, streak_length))
                streak_start = None
            if streak_start is None:
                streak_start = achievement.day
                streak_length = 1
            else:
                streak_length += 1
        elif streak_start is not None:
            history.append(_close(streak_start, previous_day, streak_length))
            streak_start = None
            streak_length = 0
        previous_day = achievement.day

    current_streak = 0
    if streak_start is not None:
        history.append(_close(streak_start, previous_day, streak_length))
        current_streak = streak_length

    longest_period: StreakPeriod | None = None
    for period in history:
        if longest_period is None or period.length > longest_period.length:
            longest_period = period

    return StreakData(
        goal_type=goal_type,
        current_streak=current_streak,
        longest_streak=longest_period.length if longest_period else 0,
        last_achieved_date=last_achieved,
        streak_history=history,
        longest_streak_period=longest_period,
    )


def _close(start: date, end: date | None, length: int) -> StreakPeriod:
    return StreakPeriod(start_date=start, end_date=end or start, length=length)

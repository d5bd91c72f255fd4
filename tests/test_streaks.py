"""Tests for streak calculation."""

from datetime import date, timedelta

from nutrition_analytics.domain.analytics import StreakPeriod
from nutrition_analytics.domain.logs import GoalType
from nutrition_analytics.services.streaks import calculate_streak_data
from tests.fakes import calorie_days

START = date(2026, 1, 1)


def test_dip_day_splits_streaks() -> None:
    days = calorie_days(START, [2000, 2000, 2000, 1500, 2000, 2000, 2000])

    streaks = calculate_streak_data(GoalType.CALORIES, days)

    assert days[3].calories.achieved is False
    assert streaks.current_streak == 3
    assert streaks.longest_streak == 3
    assert streaks.last_achieved_date == date(2026, 1, 7)
    assert streaks.streak_history == [
        StreakPeriod(start_date=date(2026, 1, 1), end_date=date(2026, 1, 3), length=3),
        StreakPeriod(start_date=date(2026, 1, 5), end_date=date(2026, 1, 7), length=3),
    ]


def test_longest_streak_period_keeps_first_tie() -> None:
    days = calorie_days(START, [2000, 2000, 2000, 1500, 2000, 2000, 2000])

    streaks = calculate_streak_data(GoalType.CALORIES, days)

    assert streaks.longest_streak_period == streaks.streak_history[0]


def test_unsorted_input_is_sorted() -> None:
    days = calorie_days(START, [2000, 2000, 1000, 2000])

    forward = calculate_streak_data(GoalType.CALORIES, days)
    shuffled = calculate_streak_data(GoalType.CALORIES, list(reversed(days)))

    assert forward == shuffled


def test_failing_last_day_clears_current_streak() -> None:
    days = calorie_days(START, [2000, 2000, 2000, 2000, 0])

    streaks = calculate_streak_data(GoalType.CALORIES, days)

    assert streaks.current_streak == 0
    assert streaks.longest_streak == 4
    assert streaks.last_achieved_date == date(2026, 1, 4)
    assert streaks.streak_history[0].end_date == date(2026, 1, 4)


def test_calendar_gap_breaks_streak() -> None:
    days = calorie_days(START, [2000, 2000, 2000])
    sparse = [days[0], days[1]] + calorie_days(START + timedelta(days=3), [2000])

    streaks = calculate_streak_data(GoalType.CALORIES, sparse)

    assert streaks.streak_history == [
        StreakPeriod(start_date=date(2026, 1, 1), end_date=date(2026, 1, 2), length=2),
        StreakPeriod(start_date=date(2026, 1, 4), end_date=date(2026, 1, 4), length=1),
    ]
    assert streaks.current_streak == 1
    assert streaks.longest_streak == 2


def test_goal_without_target_has_no_streaks() -> None:
    days = calorie_days(START, [2000] * 10)

    streaks = calculate_streak_data(GoalType.PROTEIN, days)

    assert streaks.current_streak == 0
    assert streaks.longest_streak == 0
    assert streaks.last_achieved_date is None
    assert streaks.streak_history == []
    assert streaks.longest_streak_period is None


def test_history_entries_are_maximal_runs() -> None:
    calories = [2000, 0, 2000, 2000, 0, 0, 2000, 2000, 2000, 0, 2000]
    days = calorie_days(START, calories)
    by_day = {day.day: day.calories.achieved for day in days}

    streaks = calculate_streak_data(GoalType.CALORIES, days)

    assert sum(period.length for period in streaks.streak_history) == sum(
        by_day.values()
    )
    for period in streaks.streak_history:
        assert not by_day.get(period.start_date - timedelta(days=1), False)
        assert not by_day.get(period.end_date + timedelta(days=1), False)
        assert (period.end_date - period.start_date).days + 1 == period.length
    assert streaks.current_streak == 1
    assert days[-1].calories.achieved is True


def test_empty_input() -> None:
    streaks = calculate_streak_data(GoalType.CALORIES, [])

    assert streaks.current_streak == 0
    assert streaks.streak_history == []

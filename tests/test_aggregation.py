"""Tests for daily aggregation."""

from datetime import UTC, date, datetime

import pytest

from nutrition_analytics.domain.logs import DateRange, GoalProfile, NutritionLogEntry
from nutrition_analytics.services.aggregation import (
    InvalidLogEntryError,
    aggregate_daily_achievements,
)


def test_every_date_in_range_has_a_record(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 10))

    days = aggregate_daily_achievements(date_range, [], profile)

    assert len(days) == 10
    assert [day.day for day in days] == date_range.days()
    assert all(day.calories.actual == 0 for day in days)


def test_single_day_without_logs_is_explicit_zero(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))

    days = aggregate_daily_achievements(date_range, [], profile)

    assert len(days) == 1
    day = days[0]
    assert day.calories.actual == 0
    assert day.protein.actual == 0
    assert day.carbs.actual == 0
    assert day.fat.actual == 0
    assert day.overall_score == 0


def test_inverted_range_returns_empty(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 10), end=date(2026, 3, 1))

    assert aggregate_daily_achievements(date_range, [], profile) == []


def test_logs_are_bucketed_by_local_date(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 2))
    logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 2, 3, 0, tzinfo=UTC), calories=500
        )
    ]

    days = aggregate_daily_achievements(
        date_range, logs, profile, "America/New_York"
    )

    assert days[0].calories.actual == 500
    assert days[1].calories.actual == 0


def test_naive_timestamps_are_treated_as_utc(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 2))
    logs = [NutritionLogEntry(logged_at=datetime(2026, 3, 2, 3, 0), calories=500)]

    days = aggregate_daily_achievements(date_range, logs, profile, "Asia/Tokyo")

    assert days[0].calories.actual == 0
    assert days[1].calories.actual == 500


def test_duplicates_are_summed_and_missing_nutrients_count_as_zero(
    profile: GoalProfile,
) -> None:
    logged_at = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))
    logs = [
        NutritionLogEntry(logged_at=logged_at, calories=600, protein_g=40),
        NutritionLogEntry(logged_at=logged_at, calories=600, protein_g=40),
        NutritionLogEntry(logged_at=logged_at, calories=None, fat_g=20),
    ]

    day = aggregate_daily_achievements(date_range, logs, profile)[0]

    assert day.calories.actual == 1200
    assert day.protein.actual == 80
    assert day.carbs.actual == 0
    assert day.fat.actual == 20


def test_achievement_threshold_is_ninety_percent() -> None:
    profile = GoalProfile(daily_calorie_target=2000)
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 2))
    logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 1, 12, tzinfo=UTC), calories=1800
        ),
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 2, 12, tzinfo=UTC), calories=1799
        ),
    ]

    first, second = aggregate_daily_achievements(date_range, logs, profile)

    assert first.calories.achieved is True
    assert first.calories.percentage == pytest.approx(90)
    assert second.calories.achieved is False


def test_goals_without_target_are_never_achieved() -> None:
    profile = GoalProfile(daily_calorie_target=2000, protein_target_g=0)
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))
    logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 1, 12, tzinfo=UTC),
            calories=1900,
            protein_g=300,
        )
    ]

    day = aggregate_daily_achievements(date_range, logs, profile)[0]

    assert day.protein.target == 0
    assert day.protein.percentage == 0
    assert day.protein.achieved is False
    assert day.overall_score == 100


def test_overall_score_counts_only_targeted_goals(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))
    logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 1, 12, tzinfo=UTC),
            calories=2000,
            protein_g=150,
            carbs_g=50,
            fat_g=10,
        )
    ]

    day = aggregate_daily_achievements(date_range, logs, profile)[0]

    assert day.overall_score == 50


def test_no_targets_gives_zero_overall_score() -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))
    logs = [
        NutritionLogEntry(
            logged_at=datetime(2026, 3, 1, 12, tzinfo=UTC), calories=2000
        )
    ]

    day = aggregate_daily_achievements(date_range, logs, GoalProfile())[0]

    assert day.overall_score == 0


def test_log_without_timestamp_raises(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))

    with pytest.raises(InvalidLogEntryError):
        aggregate_daily_achievements(
            date_range, [NutritionLogEntry(logged_at=None, calories=100)], profile
        )


def test_unknown_timezone_raises(profile: GoalProfile) -> None:
    date_range = DateRange(start=date(2026, 3, 1), end=date(2026, 3, 1))

    with pytest.raises(ValueError, match="Unknown timezone"):
        aggregate_daily_achievements(date_range, [], profile, "Mars/Olympus")

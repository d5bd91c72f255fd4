"""Trend analysis on smoothed achievement percentages."""

from datetime import timedelta

from nutrition_analytics.domain.analytics import (
    DailyAchievement,
    TrendAnalysis,
    TrendDirection,
    TrendPrediction,
    TrendStrength,
)
from nutrition_analytics.domain.logs import GoalType
from nutrition_analytics.services.regression import fit_linear

MIN_TREND_DAYS = 7
MAX_WINDOW = 7
DIRECTION_THRESHOLD = 0.5
STRONG_SLOPE = 1.5
FORECAST_DAYS = 7
FORECAST_CONFIDENCE_DECAY = 5
FORECAST_CEILING = 150.0


def calculate_trend_analysis(
    daily_achievements: list[DailyAchievement], goal_type: GoalType
) -> TrendAnalysis:
    """Fit a line to the trailing moving average of a goal's percentages."""
    targeted = sorted(
        (a for a in daily_achievements if a.goal(goal_type).target > 0),
        key=lambda a: a.day,
    )
    if len(targeted) < MIN_TREND_DAYS:
        return TrendAnalysis(
            metric=goal_type,
            direction=TrendDirection.STABLE,
            strength=TrendStrength.WEAK,
            change_percentage=0.0,
            moving_average=[],
            confidence=0.0,
        )

    percentages = [a.goal(goal_type).percentage for a in targeted]
    window = min(MAX_WINDOW, len(percentages) // 3)
    moving_average = moving_averages(percentages, window)

    fit = fit_linear(moving_average)
    magnitude = abs(fit.slope)
    confidence = max(0.0, min(100.0, fit.r_squared * 100))

    last_day = targeted[-1].day
    predictions = []
    for offset in range(1, FORECAST_DAYS + 1):
        predicted = fit.predict(len(moving_average) + offset - 1)
        predictions.append(
            TrendPrediction(
                day=last_day + timedelta(days=offset),
                predicted=max(0.0, min(FORECAST_CEILING, predicted)),
                confidence=max(0.0, confidence - offset * FORECAST_CONFIDENCE_DECAY),
            )
        )

    return TrendAnalysis(
        metric=goal_type,
        direction=_direction(fit.slope),
        strength=_strength(magnitude),
        change_percentage=magnitude * 100,
        moving_average=moving_average,
        confidence=confidence,
        slope=fit.slope,
        intercept=fit.intercept,
        predictions=predictions,
    )


def moving_averages(values: list[float], window: int) -> list[float]:
    """Return trailing averages for indices window-1 .. n-1."""
    if window <= 0:
        return []
    return [
        sum(values[index - window + 1 : index + 1]) / window
        for index in range(window - 1, len(values))
    ]


def _direction(slope: float) -> TrendDirection:
    if slope > DIRECTION_THRESHOLD:
        return TrendDirection.UP
    if slope < -DIRECTION_THRESHOLD:
        return TrendDirection.DOWN
    return TrendDirection.STABLE


def _strength(magnitude: float) -> TrendStrength:
    if magnitude < DIRECTION_THRESHOLD:
        return TrendStrength.WEAK
    if magnitude < STRONG_SLOPE:
        return TrendStrength.MODERATE
    return TrendStrength.STRONG

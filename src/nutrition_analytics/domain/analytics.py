"""Domain models for historical analytics."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from nutrition_analytics.domain.logs import DateRange, GoalType


class TimePeriod(Enum):
    """Named reporting periods."""

    WEEK = "7d"
    MONTH = "30d"
    QUARTER = "90d"
    HALF_YEAR = "6m"
    YEAR = "1y"
    CUSTOM = "custom"


class ConsistencyTrend(Enum):
    """Recent direction of a goal's achievement rate."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class TrendDirection(Enum):
    """Direction of a fitted trend line."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class TrendStrength(Enum):
    """Magnitude bucket of a fitted trend slope."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


@dataclass(frozen=True)
class GoalAchievement:
    """Target versus actual for one goal on one day."""

    target: float
    actual: float
    percentage: float
    achieved: bool


@dataclass(frozen=True)
class DailyAchievement:
    """Per-day nutrient totals compared with the user's targets."""

    day: date
    calories: GoalAchievement
    protein: GoalAchievement
    carbs: GoalAchievement
    fat: GoalAchievement
    overall_score: float

    def goal(self, goal_type: GoalType) -> GoalAchievement:
        """Return the achievement record for a goal type."""
        return getattr(self, goal_type.value)


@dataclass(frozen=True)
class StreakPeriod:
    """A maximal run of consecutive achieved days."""

    start_date: date
    end_date: date
    length: int


@dataclass(frozen=True)
class StreakData:
    """Current and historical streaks for one goal type."""

    goal_type: GoalType
    current_streak: int
    longest_streak: int
    last_achieved_date: date | None
    streak_history: list[StreakPeriod]
    longest_streak_period: StreakPeriod | None = None


@dataclass(frozen=True)
class ConsistencyScore:
    """Adherence score for one goal type over a period."""

    goal_type: GoalType
    period: TimePeriod
    score: float
    total_days: int
    achieved_days: int
    average_percentage: float
    standard_deviation: float
    trend: ConsistencyTrend


@dataclass(frozen=True)
class TrendPrediction:
    """Projected achievement percentage for a future day."""

    day: date
    predicted: float
    confidence: float


@dataclass(frozen=True)
class TrendAnalysis:
    """Linear trend fitted to a goal's smoothed achievement percentages."""

    metric: GoalType
    direction: TrendDirection
    strength: TrendStrength
    change_percentage: float
    moving_average: list[float]
    confidence: float
    slope: float = 0.0
    intercept: float = 0.0
    predictions: list[TrendPrediction] = field(default_factory=list)


@dataclass(frozen=True)
class WeekdayPattern:
    """Average performance for one weekday."""

    average_score: float
    best_goal: GoalType
    worst_goal: GoalType


@dataclass(frozen=True)
class MonthlyTrend:
    """Direction of the raw overall score across the range."""

    improving: bool
    slope: float


@dataclass(frozen=True)
class PatternAnalysis:
    """Recurring weekday and month patterns."""

    weekday_patterns: dict[str, WeekdayPattern]
    monthly_trend: MonthlyTrend
    month_averages: dict[str, float]
    problem_days: list[str]
    success_factors: list[str]


@dataclass(frozen=True)
class PeriodValue:
    """Value of a metric over one date range."""

    label: str
    value: float
    date_range: DateRange


@dataclass(frozen=True)
class PeriodChange:
    """Change of a metric between two periods."""

    absolute: float
    percentage: float
    is_improvement: bool


@dataclass(frozen=True)
class ComparativeData:
    """Current period compared with the preceding one."""

    metric: str
    current: PeriodValue
    previous: PeriodValue
    change: PeriodChange


@dataclass(frozen=True)
class MetricsOptions:
    """Selects which analytics to compute."""

    include_streaks: bool = True
    include_consistency: bool = True
    include_trends: bool = True
    include_patterns: bool = True
    include_insights: bool = True
    include_comparisons: bool = False


@dataclass(frozen=True)
class HistoricalMetrics:
    """All analytics computed for a date range."""

    date_range: DateRange
    period: TimePeriod
    daily_goals: list[DailyAchievement]
    streaks: list[StreakData]
    consistency: list[ConsistencyScore]
    trends: list[TrendAnalysis]
    patterns: PatternAnalysis | None
    comparisons: list[ComparativeData]
    insights: list[str]

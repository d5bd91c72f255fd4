"""Domain models for nutrition logs and goal profiles."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


class GoalType(Enum):
    """Nutrition goal tracked against a daily target."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"


ALL_GOAL_TYPES: tuple[GoalType, ...] = tuple(GoalType)


@dataclass(frozen=True)
class NutritionLogEntry:
    """A single logged meal with nullable nutrient totals."""

    logged_at: datetime | None
    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None

    def amount(self, goal_type: GoalType) -> float:
        """Return the logged amount for a goal type, treating missing as zero."""
        value = {
            GoalType.CALORIES: self.calories,
            GoalType.PROTEIN: self.protein_g,
            GoalType.CARBS: self.carbs_g,
            GoalType.FAT: self.fat_g,
        }[goal_type]
        return value or 0.0


@dataclass(frozen=True)
class GoalProfile:
    """Daily macro and calorie targets for a user."""

    daily_calorie_target: float | None = None
    protein_target_g: float | None = None
    carb_target_g: float | None = None
    fat_target_g: float | None = None

    def target(self, goal_type: GoalType) -> float:
        """Return the target for a goal type, 0 when no goal is set."""
        value = {
            GoalType.CALORIES: self.daily_calorie_target,
            GoalType.PROTEIN: self.protein_target_g,
            GoalType.CARBS: self.carb_target_g,
            GoalType.FAT: self.fat_target_g,
        }[goal_type]
        return value or 0.0


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of local calendar dates."""

    start: date
    end: date

    def days(self) -> list[date]:
        """Return every date from start to end, empty when inverted."""
        count = (self.end - self.start).days + 1
        return [self.start + timedelta(days=offset) for offset in range(count)]

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

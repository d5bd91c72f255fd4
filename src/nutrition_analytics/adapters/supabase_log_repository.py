"""Supabase repository for nutrition logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrition_analytics.domain.logs import NutritionLogEntry
from nutrition_analytics.services.analytics import LogRepository

_LOG_COLUMNS = (
    "logged_at, calories_consumed, protein_consumed, carbs_consumed, fat_consumed"
)


@dataclass
class SupabaseLogRepository(LogRepository):
    """Supabase implementation for nutrition log queries."""

    client: Client

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[NutritionLogEntry]:
        """Return logs in the UTC window, oldest first."""
        response = (
            self.client.table("food_logs")
            .select(_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> NutritionLogEntry:
    return NutritionLogEntry(
        logged_at=_optional_timestamp(row.get("logged_at")),
        calories=_optional_float(row.get("calories_consumed")),
        protein_g=_optional_float(row.get("protein_consumed")),
        carbs_g=_optional_float(row.get("carbs_consumed")),
        fat_g=_optional_float(row.get("fat_consumed")),
    )


def _optional_timestamp(value: object) -> datetime | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise RuntimeError(f"Unexpected logged_at in food log: {value!r}")
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise RuntimeError(f"Invalid logged_at in food log: {value!r}") from exc


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, (int, float, str)):
        try:
            return float(value)
        except ValueError as exc:
            raise RuntimeError(
                f"Invalid nutrient value in food log: {value!r}"
            ) from exc
    raise RuntimeError(f"Unexpected nutrient value in food log: {value!r}")

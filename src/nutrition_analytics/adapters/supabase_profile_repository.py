"""Supabase repository for goal profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_analytics.domain.logs import GoalProfile
from nutrition_analytics.services.analytics import ProfileRepository

_PROFILE_COLUMNS = "daily_calorie_target, protein_target_g, carb_target_g, fat_target_g"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for goal profile lookups."""

    client: Client

    def get_profile(self, user_id: UUID) -> GoalProfile | None:
        """Return the stored targets for a user."""
        response = (
            self.client.table("profiles")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return GoalProfile(
            daily_calorie_target=_target(row.get("daily_calorie_target")),
            protein_target_g=_target(row.get("protein_target_g")),
            carb_target_g=_target(row.get("carb_target_g")),
            fat_target_g=_target(row.get("fat_target_g")),
        )


def _target(value: object) -> float | None:
    if not isinstance(value, (int, float, str)):
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise RuntimeError(f"Invalid target in profile: {value!r}") from exc

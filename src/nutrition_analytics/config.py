"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_analytics.domain.logs import ALL_GOAL_TYPES, GoalType

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    default_timezone: str = "UTC"
    default_period: str = "30d"
    default_goal_types: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_goal_types(raw: str | None) -> tuple[GoalType, ...]:
    """Parse a comma-separated list of goal types, all of them when unset."""
    if raw is None:
        return ALL_GOAL_TYPES
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ALL_GOAL_TYPES
    goal_types: list[GoalType] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().lower()
        if not value:
            continue
        try:
            goal_type = GoalType(value)
        except ValueError as exc:
            raise ValueError(f"Unknown goal type: {value}") from exc
        if goal_type not in goal_types:
            goal_types.append(goal_type)
    return tuple(goal_types) or ALL_GOAL_TYPES

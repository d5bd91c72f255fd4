"""Analytics API endpoints with token auth."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

from nutrition_analytics.config import parse_goal_types
from nutrition_analytics.domain.analytics import MetricsOptions, TimePeriod
from nutrition_analytics.domain.logs import DateRange
from nutrition_analytics.services.aggregation import InvalidLogEntryError
from nutrition_analytics.services.analytics import AnalyticsRequest
from nutrition_analytics.services.charts import (
    goal_achievement_series,
    heatmap_series,
    macro_trends_series,
    summarize,
)
from nutrition_analytics.services.dates import (
    parse_period,
    period_label,
    resolve_timezone,
)

if TYPE_CHECKING:
    from nutrition_analytics.containers import AppContainer

router = APIRouter(prefix="/analytics", tags=["analytics"])
_logger = logging.getLogger(__name__)


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/users/{user_id}", dependencies=[Depends(require_api_token)])
def user_metrics(  # noqa: PLR0913
    user_id: UUID,
    request: Request,
    period: str | None = None,
    start: date | None = None,
    end: date | None = None,
    as_of: date | None = None,
    goal_types: str | None = None,
    include_streaks: bool = True,
    include_consistency: bool = True,
    include_trends: bool = True,
    include_patterns: bool = True,
    include_insights: bool = True,
    include_comparisons: bool = False,
    include_charts: bool = True,
) -> dict[str, object]:
    """Return historical analytics for a user.

    Either ``period`` or both ``start`` and ``end`` select the range.
    """
    container: AppContainer = request.app.state.container
    service = container.analytics_service
    try:
        analytics_request = AnalyticsRequest(
            period=_resolve_period(
                period, start, end, container.settings.default_period
            ),
            custom_range=DateRange(start=start, end=end) if start and end else None,
            goal_types=parse_goal_types(
                goal_types or container.settings.default_goal_types
            ),
            options=MetricsOptions(
                include_streaks=include_streaks,
                include_consistency=include_consistency,
                include_trends=include_trends,
                include_patterns=include_patterns,
                include_insights=include_insights,
                include_comparisons=include_comparisons,
            ),
        )
        if as_of is None:
            tz = resolve_timezone(service.get_timezone(user_id))
            as_of = datetime.now(tz=tz).date()
        metrics = service.get_metrics(user_id, analytics_request, as_of)
    except InvalidLogEntryError:
        _logger.exception("Stored logs are malformed: user_id=%s", user_id)
        raise
    except ValueError as exc:
        _logger.warning("Rejected analytics request: user_id=%s error=%s", user_id, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    payload: dict[str, object] = {
        "label": period_label(metrics.period),
        "metrics": jsonable_encoder(metrics),
        "summary": jsonable_encoder(summarize(metrics.daily_goals)),
    }
    if include_charts:
        payload["charts"] = {
            "goal_achievement": goal_achievement_series(metrics.daily_goals),
            "macro_trends": macro_trends_series(metrics.daily_goals),
            "heatmap": heatmap_series(metrics.daily_goals),
        }
    return payload


def _resolve_period(
    raw: str | None, start: date | None, end: date | None, default: str
) -> TimePeriod:
    if (start is None) != (end is None):
        raise ValueError("Both start and end are required for a custom range")
    if start is not None:
        if raw is not None and parse_period(raw) is not TimePeriod.CUSTOM:
            raise ValueError("Use either a period or start and end, not both")
        return TimePeriod.CUSTOM
    period = parse_period(raw or default)
    if period is TimePeriod.CUSTOM:
        raise ValueError("A custom period requires start and end")
    return period

"""Calendar helpers for local date ranges and reporting periods."""

import calendar
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nutrition_analytics.domain.analytics import TimePeriod
from nutrition_analytics.domain.logs import DateRange

_PERIOD_DAYS = {
    TimePeriod.WEEK: 7,
    TimePeriod.MONTH: 30,
    TimePeriod.QUARTER: 90,
}

_PERIOD_LABELS = {
    TimePeriod.WEEK: "Last 7 days",
    TimePeriod.MONTH: "Last 30 days",
    TimePeriod.QUARTER: "Last 90 days",
    TimePeriod.HALF_YEAR: "Last 6 months",
    TimePeriod.YEAR: "Last year",
    TimePeriod.CUSTOM: "Custom range",
}

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def resolve_timezone(timezone_name: str) -> ZoneInfo:
    """Return a ZoneInfo, raising ValueError for unknown names."""
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {timezone_name}") from exc


def local_date(moment: datetime, tz: ZoneInfo) -> date:
    """Return the calendar date of a timestamp in the given timezone.

    Naive timestamps are treated as UTC, matching how logs are stored.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(tz).date()


def utc_window(date_range: DateRange, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return the half-open UTC window covering a local date range."""
    start = datetime.combine(date_range.start, time.min, tzinfo=tz)
    end = datetime.combine(date_range.end + timedelta(days=1), time.min, tzinfo=tz)
    return start.astimezone(UTC), end.astimezone(UTC)


def previous_range(date_range: DateRange) -> DateRange:
    """Return the range of equal length immediately before ``date_range``."""
    length = max(len(date_range), 1)
    end = date_range.start - timedelta(days=1)
    return DateRange(start=end - timedelta(days=length - 1), end=end)


def resolve_period(
    period: TimePeriod, as_of: date, custom_range: DateRange | None = None
) -> DateRange:
    """Return the local date range a period covers, ending at ``as_of``."""
    if period is TimePeriod.CUSTOM:
        if custom_range is None:
            raise ValueError("A custom period requires an explicit date range")
        return custom_range
    if period in _PERIOD_DAYS:
        return DateRange(start=as_of - timedelta(days=_PERIOD_DAYS[period]), end=as_of)
    months = 6 if period is TimePeriod.HALF_YEAR else 12
    return DateRange(start=_subtract_months(as_of, months), end=as_of)


def parse_period(raw: str) -> TimePeriod:
    """Parse a period code such as ``30d``."""
    try:
        return TimePeriod(raw)
    except ValueError as exc:
        raise ValueError(f"Unknown period: {raw}") from exc


def period_label(period: TimePeriod) -> str:
    """Return a human-readable label for a period."""
    return _PERIOD_LABELS[period]


def _subtract_months(day: date, months: int) -> date:
    month_index = day.year * 12 + day.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))

"""
Dashboard filters.

Immutable filter values chosen in the sidebar, plus the explicit parsers
that turn raw widget input into them. Invalid input raises
InvalidFilterError; nothing is silently replaced by a default.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from tradeboard.domain.trading.entities import Granularity
from tradeboard.domain.trading.errors import InvalidFilterError

MIN_SIZE_PRESETS = (0, 50, 100, 200, 300, 500, 750, 1000)


class TimeRange(str, Enum):
    """Preset look-back windows offered by the time range picker."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    YEAR_TO_DATE = "YTD"
    CUSTOM = "Custom"


class ChartType(str, Enum):
    """Chart used to render aggregated periods."""

    BAR_CHART = "BarChart"
    TREE_MAP = "TreeMap"


TIME_RANGE_DAYS = {
    TimeRange.ONE_DAY: 1,
    TimeRange.ONE_WEEK: 7,
    TimeRange.ONE_MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.SIX_MONTHS: 180,
    TimeRange.ONE_YEAR: 365,
}

TIME_RANGE_HINTS = {
    TimeRange.ONE_DAY: "Last 24 hours",
    TimeRange.ONE_WEEK: "Last 7 days",
    TimeRange.ONE_MONTH: "Last 30 days",
    TimeRange.THREE_MONTHS: "Last 90 days",
    TimeRange.SIX_MONTHS: "Last 180 days",
    TimeRange.ONE_YEAR: "Last 365 days",
    TimeRange.YEAR_TO_DATE: "Year to date",
    TimeRange.CUSTOM: "Select custom date",
}


@dataclass(frozen=True)
class DashboardFilters:
    """Everything the user picked in the sidebar.

    Attributes:
        start_timestamp: Earliest trade time to fetch (UTC).
        min_size: Minimum trade size to fetch.
        granularity: Period used to aggregate the fetched trades.
        chart: Chart used to render the aggregated periods.
    """

    start_timestamp: datetime
    min_size: int
    granularity: Granularity = Granularity.DAILY
    chart: ChartType = ChartType.BAR_CHART


def resolve_start_timestamp(
    time_range: Union[TimeRange, str],
    today: date,
    custom_date: Optional[date] = None,
) -> datetime:
    """Turn a time range preset into the UTC midnight it starts at.

    Raises:
        InvalidFilterError: For an unknown preset, or Custom without a date
            or with a date in the future.
    """
    try:
        time_range = TimeRange(time_range)
    except ValueError:
        raise InvalidFilterError("time range", time_range, "unknown preset")

    if time_range is TimeRange.CUSTOM:
        if custom_date is None:
            raise InvalidFilterError("time range", time_range.value, "a start date is required")
        if custom_date > today:
            raise InvalidFilterError("start date", custom_date.isoformat(), "is in the future")
        start = custom_date
    elif time_range is TimeRange.YEAR_TO_DATE:
        start = date(today.year, 1, 1)
    else:
        start = today - timedelta(days=TIME_RANGE_DAYS[time_range])

    return datetime.combine(start, time.min, tzinfo=timezone.utc)


def parse_min_size(raw: Union[str, int]) -> int:
    """Parse the minimum trade size typed by the user.

    Accepts thousands separators ("1,000").

    Raises:
        InvalidFilterError: If the value is empty, not a number,
            negative or fractional.
    """
    if isinstance(raw, bool):
        raise InvalidFilterError("minimum size", raw, "must be a number")
    if isinstance(raw, int):
        value = Decimal(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            raise InvalidFilterError("minimum size", raw, "a value is required")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidFilterError("minimum size", raw, "must be a number")

    if not value.is_finite():
        raise InvalidFilterError("minimum size", raw, "must be a number")
    if value < 0:
        raise InvalidFilterError("minimum size", raw, "must not be negative")
    if value != value.to_integral_value():
        raise InvalidFilterError("minimum size", raw, "must be a whole number of shares")
    return int(value)


def format_min_size(size: int) -> str:
    """Format a share count with thousands separators."""
    return f"{size:,}"

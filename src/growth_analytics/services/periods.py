"""Local calendar windows used to bucket records."""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from growth_analytics.errors import InvalidDateError

DECEMBER = 12
DAYS_PER_WEEK = 7
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
UTC_ZONE = ZoneInfo("UTC")


def local_now(as_of: datetime, tz: ZoneInfo) -> datetime:
    """Return the reference timestamp on the local wall clock."""
    if as_of.tzinfo is None:
        return as_of
    return as_of.astimezone(tz)


def as_instant(moment: datetime, tz: ZoneInfo) -> datetime:
    """Return an aware timestamp, reading naive values as local wall-clock time."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment


def local_day(moment: date | datetime, tz: ZoneInfo) -> date:
    """Return the local calendar day of a timestamp.

    Naive timestamps are taken to already be local.
    """
    if isinstance(moment, datetime):
        return local_now(moment, tz).date()
    return moment


def start_of_week(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    days_since_sunday = (day.weekday() + 1) % DAYS_PER_WEEK
    return day - timedelta(days=days_since_sunday)


def days_in_month(year: int, month: int) -> int:
    _validate_month(month)
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month."""
    last = days_in_month(year, month)
    return date(year, month, 1), date(year, month, last)


def ordinal_week_bounds(year: int, week: int) -> tuple[date, date]:
    """Return the 7-day window for week ``week`` counted from January 1.

    Week 1 starts on January 1 whatever weekday it falls on; this is not an
    ISO week.
    """
    if week < 1:
        raise InvalidDateError(f"Week number must be at least 1, got {week}")
    start = date(year, 1, 1) + timedelta(days=(week - 1) * DAYS_PER_WEEK)
    return start, start + timedelta(days=DAYS_PER_WEEK - 1)


def shift_months(moment: datetime, months: int) -> datetime:
    """Move a timestamp by whole calendar months, clamping the day."""
    index = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(index, 12)
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def _validate_month(month: int) -> None:
    if not 1 <= month <= DECEMBER:
        raise InvalidDateError(f"Month must be between 1 and 12, got {month}")

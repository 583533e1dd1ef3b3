"""Age calculations."""

import math
from datetime import date, datetime, time

from growth_analytics.errors import InvalidDateError

MEAN_MONTH_DAYS = 30.44
_MEAN_MONTH_SECONDS = MEAN_MONTH_DAYS * 24 * 60 * 60
MONTHS_PER_YEAR = 12


def age_in_months(birth_date: date, reference_date: date) -> int:
    """Return completed months between birth and the reference date.

    A month is a fixed 30.44 days. The birth date must not be after the
    reference date; callers validate this before asking, and a violation
    raises ``InvalidDateError``.
    """
    birth = _as_datetime(birth_date, reference_date)
    reference = _as_datetime(reference_date, birth_date)
    try:
        elapsed = reference - birth
    except TypeError as exc:
        raise InvalidDateError(
            "Cannot compare naive and timezone-aware dates"
        ) from exc
    if elapsed.total_seconds() < 0:
        raise InvalidDateError(
            f"Birth date {birth_date} is after reference date {reference_date}"
        )
    return math.floor(elapsed.total_seconds() / _MEAN_MONTH_SECONDS)


def age_display(months: int) -> str:
    """Format an age in months as years and months."""
    if months < MONTHS_PER_YEAR:
        return _plural(months, "month")
    years, remainder = divmod(months, MONTHS_PER_YEAR)
    if remainder == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(remainder, 'month')}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _as_datetime(value: date, other: date) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, date):
        raise InvalidDateError(f"Expected a date, got {value!r}")
    tzinfo = other.tzinfo if isinstance(other, datetime) else None
    return datetime.combine(value, time.min, tzinfo=tzinfo)

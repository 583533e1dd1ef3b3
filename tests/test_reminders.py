"""Tests for reminder scheduling."""

from datetime import datetime

import pytest

from growth_analytics.errors import InvalidDateError
from growth_analytics.services.reminders import (
    minute_of_day,
    next_reminder,
    upcoming_reminders,
)
from tests.conftest import make_reminder


def test_minute_of_day_parses_24_hour_times() -> None:
    assert minute_of_day("07:30") == 450
    assert minute_of_day("7:05") == 425
    assert minute_of_day("23:59") == 1439


@pytest.mark.parametrize("value", ["24:00", "12:60", "noon", ""])
def test_minute_of_day_rejects_malformed_times(value: str) -> None:
    with pytest.raises(InvalidDateError):
        minute_of_day(value)


def test_upcoming_reminders_use_half_open_window() -> None:
    now = datetime(2024, 3, 20, 10, 0)
    at_now = make_reminder("10:00", title="now")
    inside = make_reminder("11:59", title="inside")
    edge = make_reminder("12:00", title="edge")
    passed = make_reminder("09:59", title="passed")
    inactive = make_reminder("10:30", title="inactive", is_active=False)

    upcoming = upcoming_reminders([inside, edge, passed, inactive, at_now], now)

    assert [reminder.title for reminder in upcoming] == ["now", "inside"]


def test_upcoming_reminders_wrap_past_midnight() -> None:
    now = datetime(2024, 3, 20, 23, 30)
    after_midnight = make_reminder("00:30")

    assert upcoming_reminders([after_midnight], now) == [after_midnight]
    assert upcoming_reminders([after_midnight], now, horizon_minutes=60) == []


def test_next_reminder_picks_smallest_forward_distance() -> None:
    now = datetime(2024, 3, 20, 10, 0)
    reminders = [
        make_reminder("12:00", title="lunch"),
        make_reminder("08:00", title="breakfast"),
        make_reminder("11:15", title="vitamin"),
    ]

    soonest = next_reminder(reminders, now)

    assert soonest is not None
    assert soonest.reminder.title == "vitamin"
    assert soonest.hours_part == 1
    assert soonest.minutes_part == 15


def test_next_reminder_wraps_to_tomorrow_and_breaks_ties_by_order() -> None:
    now = datetime(2024, 3, 20, 22, 0)
    first = make_reminder("07:00", title="first")
    second = make_reminder("07:00", title="second")

    soonest = next_reminder([first, second], now)

    assert soonest is not None
    assert soonest.reminder is first
    assert soonest.minutes_until == 540


def test_next_reminder_without_active_reminders() -> None:
    now = datetime(2024, 3, 20, 22, 0)

    assert next_reminder([], now) is None
    assert next_reminder([make_reminder("07:00", is_active=False)], now) is None

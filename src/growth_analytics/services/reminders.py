"""Reminder scheduling on a 24-hour wraparound clock."""

import re
from collections.abc import Iterable
from datetime import datetime

from growth_analytics.domain.dashboard import NextReminder
from growth_analytics.domain.models import ReminderEntry
from growth_analytics.errors import InvalidDateError

MINUTES_PER_DAY = 24 * 60
DEFAULT_HORIZON_MINUTES = 120

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")


def minute_of_day(value: str) -> int:
    """Parse an ``HH:MM`` 24-hour time into minutes after midnight."""
    match = _TIME_PATTERN.match(value)
    if match is None:
        raise InvalidDateError(f"Reminder time must be HH:MM, got {value!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_until(reminder: ReminderEntry, now: datetime) -> int:
    """Return forward minutes from ``now`` to the reminder's time of day."""
    current = now.hour * 60 + now.minute
    return (minute_of_day(reminder.time) - current) % MINUTES_PER_DAY


def upcoming_reminders(
    reminders: Iterable[ReminderEntry],
    now: datetime,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
) -> list[ReminderEntry]:
    """Return active reminders due in ``[now, now + horizon)``, soonest first.

    Only the time of day is compared; ``now`` must already be local time.
    """
    due = [
        (minutes_until(reminder, now), index, reminder)
        for index, reminder in enumerate(reminders)
        if reminder.is_active
    ]
    return [
        reminder
        for distance, _, reminder in sorted(due, key=lambda item: item[:2])
        if distance < horizon_minutes
    ]


def next_reminder(
    reminders: Iterable[ReminderEntry], now: datetime
) -> NextReminder | None:
    """Return the active reminder with the smallest forward distance.

    Ties go to the reminder encountered first.
    """
    best: NextReminder | None = None
    for reminder in reminders:
        if not reminder.is_active:
            continue
        distance = minutes_until(reminder, now)
        if best is None or distance < best.minutes_until:
            best = NextReminder(reminder=reminder, minutes_until=distance)
    return best

"""Domain models for dashboard status and reminders."""

from dataclasses import dataclass
from enum import Enum

from growth_analytics.domain.models import ReminderEntry


class OverallStatusLevel(str, Enum):
    """Overall tracking rating shown on the dashboard."""

    NEEDS_ATTENTION = "needs_attention"
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


class Priority(str, Enum):
    """How urgently the parent should act."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class OverallStatus:
    """Rating with a human-readable message."""

    status: OverallStatusLevel
    message: str
    priority: Priority


@dataclass(frozen=True)
class NextReminder:
    """The reminder due soonest and how long until it fires."""

    reminder: ReminderEntry
    minutes_until: int

    @property
    def hours_part(self) -> int:
        return self.minutes_until // 60

    @property
    def minutes_part(self) -> int:
        return self.minutes_until % 60

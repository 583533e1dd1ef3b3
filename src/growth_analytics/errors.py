"""Errors raised by the analytics engine."""


class GrowthAnalyticsError(Exception):
    """Base class for engine errors."""


class InvalidDateError(GrowthAnalyticsError, ValueError):
    """A date input is malformed or violates the caller's ordering contract."""


class MissingGrowthDataError(GrowthAnalyticsError, LookupError):
    """A computation needs at least one growth record and none was supplied."""

    def __init__(self, child_id: object) -> None:
        super().__init__(f"No growth records found for child {child_id}")
        self.child_id = child_id

"""Domain models for growth trends."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TrendDirection(str, Enum):
    """Direction of change of a metric."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendResult:
    """Direction and first-to-last delta for a metric."""

    direction: TrendDirection
    delta: float


@dataclass(frozen=True)
class GrowthTrend:
    """Trend results for each tracked growth metric."""

    weight: TrendResult
    height: TrendResult
    bmi: TrendResult
    records_count: int


@dataclass(frozen=True)
class GrowthPoint:
    """Chart point for a growth record."""

    record_date: datetime
    age_in_months: int
    weight: float
    height: float
    bmi: float

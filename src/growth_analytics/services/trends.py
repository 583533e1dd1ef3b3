"""Growth trend direction and deltas."""

from collections.abc import Iterable
from zoneinfo import ZoneInfo

from growth_analytics.domain.models import GrowthRecord
from growth_analytics.domain.trends import (
    GrowthPoint,
    GrowthTrend,
    TrendDirection,
    TrendResult,
)
from growth_analytics.rounding import round_half_up
from growth_analytics.services.growth import sort_chronologically
from growth_analytics.services.periods import UTC_ZONE

WEIGHT_EPSILON_KG = 0.2
MIN_TREND_RECORDS = 2

STABLE_TREND = TrendResult(direction=TrendDirection.STABLE, delta=0.0)


def trend_direction(first: float, last: float, epsilon: float = 0.0) -> TrendDirection:
    """Classify movement from ``first`` to ``last`` outside a +/- epsilon band."""
    if last > first + epsilon:
        return TrendDirection.INCREASING
    if last < first - epsilon:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def metric_delta(first: float, last: float) -> float:
    return round_half_up(last - first, 2)


def metric_trend(first: float, last: float, epsilon: float = 0.0) -> TrendResult:
    return TrendResult(
        direction=trend_direction(first, last, epsilon),
        delta=metric_delta(first, last),
    )


def analyze_growth(
    records: Iterable[GrowthRecord],
    weight_epsilon: float = WEIGHT_EPSILON_KG,
    tz: ZoneInfo = UTC_ZONE,
) -> GrowthTrend:
    """Compare the first and last record of a window for each metric.

    Records are sorted by date here, so callers may pass them in any order.
    Fewer than two records is reported as stable with a zero delta.
    """
    ordered = sort_chronologically(records, tz)
    if len(ordered) < MIN_TREND_RECORDS:
        return GrowthTrend(
            weight=STABLE_TREND,
            height=STABLE_TREND,
            bmi=STABLE_TREND,
            records_count=len(ordered),
        )
    first, last = ordered[0], ordered[-1]
    return GrowthTrend(
        weight=metric_trend(first.weight, last.weight, weight_epsilon),
        height=metric_trend(first.height, last.height),
        bmi=metric_trend(first.bmi, last.bmi),
        records_count=len(ordered),
    )


def growth_series(
    records: Iterable[GrowthRecord], tz: ZoneInfo = UTC_ZONE
) -> list[GrowthPoint]:
    """Return chart points in chronological order."""
    return [
        GrowthPoint(
            record_date=record.record_date,
            age_in_months=record.age_in_months,
            weight=record.weight,
            height=record.height,
            bmi=record.bmi,
        )
        for record in sort_chronologically(records, tz)
    ]

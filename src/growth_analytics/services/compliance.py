"""Intake aggregation and compliance against targets."""

from collections.abc import Iterable
from datetime import date
from zoneinfo import ZoneInfo

from growth_analytics.domain.models import FoodLogEntry, MealTime
from growth_analytics.domain.nutrition import NutrientTotals, NutritionTarget
from growth_analytics.domain.stats import (
    ComplianceSnapshot,
    DailyCompliance,
    DailyTotals,
    MealSlotSummary,
    WindowCompliance,
)
from growth_analytics.rounding import round_int
from growth_analytics.services.periods import local_day

DEFAULT_TARGET_MEALS = 4
FULL_COMPLIANCE = 100.0


def entry_totals(entry: FoodLogEntry) -> NutrientTotals:
    """Return an entry's nutrients with missing values as zero."""
    return NutrientTotals(
        calories=entry.calories or 0.0,
        protein=entry.protein or 0.0,
        carbs=entry.carbs or 0.0,
        fat=entry.fat or 0.0,
        fiber=entry.fiber or 0.0,
        sugar=entry.sugar or 0.0,
        sodium=entry.sodium or 0.0,
    )


def daily_totals(entries: Iterable[FoodLogEntry]) -> NutrientTotals:
    """Sum nutrients across entries."""
    total = NutrientTotals()
    for entry in entries:
        total = total + entry_totals(entry)
    return total


def compliance(actual: float, target: float) -> float:
    """Return intake as a percent of target, clamped to [0, 100].

    A target of zero yields zero rather than an error.
    """
    if target <= 0:
        return 0.0
    return max(0.0, min(actual / target * 100, FULL_COMPLIANCE))


def meal_frequency_compliance(
    meal_count: int, target_meals: int = DEFAULT_TARGET_MEALS
) -> float:
    return compliance(meal_count, target_meals)


def compliance_snapshot(
    totals: NutrientTotals,
    target: NutritionTarget,
    meal_count: int,
    target_meals: int = DEFAULT_TARGET_MEALS,
) -> ComplianceSnapshot:
    """Return compliance for one day of intake."""
    return ComplianceSnapshot(
        calories=compliance(totals.calories, target.calories),
        protein=compliance(totals.protein, target.protein),
        meal_frequency=meal_frequency_compliance(meal_count, target_meals),
    )


def entries_between(
    entries: Iterable[FoodLogEntry], start: date, end: date, tz: ZoneInfo
) -> list[FoodLogEntry]:
    """Return entries whose local log day falls in ``[start, end]``."""
    return [entry for entry in entries if start <= local_day(entry.log_date, tz) <= end]


def totals_by_day(
    entries: Iterable[FoodLogEntry], tz: ZoneInfo
) -> dict[date, DailyTotals]:
    """Group entries by local day, ordered by day."""
    grouped: dict[date, list[FoodLogEntry]] = {}
    for entry in entries:
        grouped.setdefault(local_day(entry.log_date, tz), []).append(entry)
    return {
        day: DailyTotals(day=day, totals=daily_totals(items), meal_count=len(items))
        for day, items in sorted(grouped.items())
    }


def window_compliance(
    entries: Iterable[FoodLogEntry],
    target: NutritionTarget,
    tz: ZoneInfo,
    target_meals: int = DEFAULT_TARGET_MEALS,
    days: Iterable[date] | None = None,
) -> WindowCompliance:
    """Score each day separately and average the per-day percentages.

    Without ``days`` only days that have entries are scored. With ``days``
    every listed day is scored, so untracked days count as zero, and
    ``days_tracked`` counts only listed days that have entries.
    """
    by_day = totals_by_day(entries, tz)
    scored_days = sorted(by_day) if days is None else sorted(set(days))
    daily = []
    for day in scored_days:
        totals = by_day.get(day) or DailyTotals(
            day=day, totals=NutrientTotals(), meal_count=0
        )
        daily.append(
            DailyCompliance(
                day=day,
                compliance=compliance_snapshot(
                    totals.totals, target, totals.meal_count, target_meals
                ),
            )
        )
    return WindowCompliance(
        daily=daily,
        average=_average_snapshot([entry.compliance for entry in daily]),
        days_tracked=sum(1 for day in scored_days if day in by_day),
    )


def tracking_consistency(
    days_with_logs: int, days_in_period: int, days_elapsed: int
) -> int:
    """Return the percent of elapsed days in a period with at least one log."""
    denominator = min(days_in_period, days_elapsed)
    if denominator <= 0:
        return 0
    return round_int(days_with_logs / denominator * 100)


def meal_frequency(entries: Iterable[FoodLogEntry]) -> dict[MealTime, int]:
    """Count entries per meal time."""
    counts = dict.fromkeys(MealTime, 0)
    for entry in entries:
        counts[entry.meal_time] += 1
    return counts


def meal_breakdown(entries: Iterable[FoodLogEntry]) -> dict[MealTime, MealSlotSummary]:
    """Return entry count and calories per meal time."""
    counts = dict.fromkeys(MealTime, 0)
    calories = dict.fromkeys(MealTime, 0.0)
    for entry in entries:
        counts[entry.meal_time] += 1
        calories[entry.meal_time] += entry.calories or 0.0
    return {
        meal: MealSlotSummary(count=counts[meal], calories=calories[meal])
        for meal in MealTime
    }


def _average_snapshot(snapshots: list[ComplianceSnapshot]) -> ComplianceSnapshot:
    if not snapshots:
        return ComplianceSnapshot(calories=0.0, protein=0.0, meal_frequency=0.0)
    count = len(snapshots)
    return ComplianceSnapshot(
        calories=sum(item.calories for item in snapshots) / count,
        protein=sum(item.protein for item in snapshots) / count,
        meal_frequency=sum(item.meal_frequency for item in snapshots) / count,
    )

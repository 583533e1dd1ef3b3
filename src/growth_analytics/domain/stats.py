"""Domain models for compliance statistics."""

from dataclasses import dataclass
from datetime import date

from growth_analytics.domain.nutrition import NutrientTotals


@dataclass(frozen=True)
class DailyTotals:
    """Nutrient totals and meal count for one local calendar day."""

    day: date
    totals: NutrientTotals
    meal_count: int


@dataclass(frozen=True)
class ComplianceSnapshot:
    """Percent compliance per metric, each clamped to [0, 100]."""

    calories: float
    protein: float
    meal_frequency: float


@dataclass(frozen=True)
class DailyCompliance:
    """Compliance for a single day."""

    day: date
    compliance: ComplianceSnapshot


@dataclass(frozen=True)
class WindowCompliance:
    """Per-day compliance across a window and its average of ratios."""

    daily: list[DailyCompliance]
    average: ComplianceSnapshot
    days_tracked: int


@dataclass(frozen=True)
class MealSlotSummary:
    """Count and calories logged for one meal time."""

    count: int
    calories: float

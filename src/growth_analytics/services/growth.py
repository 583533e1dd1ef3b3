"""BMI computation, nutrition status classification and record enrichment."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime
from zoneinfo import ZoneInfo

from growth_analytics.config import StatusTable
from growth_analytics.domain.models import (
    GrowthMeasurement,
    GrowthRecord,
    NutritionStatus,
)
from growth_analytics.rounding import round_half_up
from growth_analytics.services.age import age_in_months
from growth_analytics.services.periods import UTC_ZONE, as_instant

TODDLER_AGE_LIMIT_MONTHS = 24

# Upper bounds (exclusive); anything at or above the last bound is obese.
_UNDER_TWO_THRESHOLDS = (
    (14.0, NutritionStatus.SEVERELY_UNDERWEIGHT),
    (16.0, NutritionStatus.UNDERWEIGHT),
    (19.0, NutritionStatus.NORMAL),
    (21.0, NutritionStatus.OVERWEIGHT),
)
_TWO_AND_OVER_THRESHOLDS = (
    (15.0, NutritionStatus.SEVERELY_UNDERWEIGHT),
    (17.0, NutritionStatus.UNDERWEIGHT),
    (25.0, NutritionStatus.NORMAL),
    (30.0, NutritionStatus.OVERWEIGHT),
)
_FLAT_THRESHOLDS = (
    (16.0, NutritionStatus.SEVERELY_UNDERWEIGHT),
    (17.0, NutritionStatus.UNDERWEIGHT),
    (25.0, NutritionStatus.NORMAL),
    (30.0, NutritionStatus.OVERWEIGHT),
)


def compute_bmi(weight: float, height: float) -> float:
    """Return BMI from weight in kg and height in cm, rounded to 2 decimals."""
    height_m = height / 100
    return round_half_up(weight / (height_m * height_m), 2)


def classify_nutrition_status(bmi: float, age_months: int) -> NutritionStatus:
    """Classify BMI-for-age with separate tables below and from 24 months."""
    if age_months < TODDLER_AGE_LIMIT_MONTHS:
        return _bucket(bmi, _UNDER_TWO_THRESHOLDS)
    return _bucket(bmi, _TWO_AND_OVER_THRESHOLDS)


def classify_nutrition_status_flat(bmi: float) -> NutritionStatus:
    """Classify BMI with a single age-blind table."""
    return _bucket(bmi, _FLAT_THRESHOLDS)


def classify(
    bmi: float,
    age_months: int,
    table: StatusTable = StatusTable.AGE_BRACKETED,
) -> NutritionStatus:
    """Classify BMI using the selected threshold table."""
    if table is StatusTable.FLAT:
        return classify_nutrition_status_flat(bmi)
    return classify_nutrition_status(bmi, age_months)


def sort_chronologically(
    records: Iterable[GrowthRecord], tz: ZoneInfo = UTC_ZONE
) -> list[GrowthRecord]:
    """Return records ordered by record date, oldest first.

    Naive record dates are read as wall-clock time in ``tz``.
    """
    return sorted(records, key=lambda record: as_instant(record.record_date, tz))


def latest_growth_record(
    records: Iterable[GrowthRecord], tz: ZoneInfo = UTC_ZONE
) -> GrowthRecord | None:
    """Return the most recent record by record date."""
    return max(
        records,
        key=lambda record: as_instant(record.record_date, tz),
        default=None,
    )


def records_as_of(
    records: Iterable[GrowthRecord], as_of: datetime, tz: ZoneInfo = UTC_ZONE
) -> list[GrowthRecord]:
    """Return records dated at or before ``as_of``, oldest first."""
    reference = as_instant(as_of, tz)
    return [
        record
        for record in sort_chronologically(records, tz)
        if as_instant(record.record_date, tz) <= reference
    ]


def _bucket(
    bmi: float, thresholds: tuple[tuple[float, NutritionStatus], ...]
) -> NutritionStatus:
    for upper, status in thresholds:
        if bmi < upper:
            return status
    return NutritionStatus.OBESE


@dataclass
class GrowthService:
    """Derives the computed fields of growth records.

    The storage layer calls this before persisting a measurement and again
    whenever weight or height is edited, so BMI and status never go stale.
    """

    status_table: StatusTable = StatusTable.AGE_BRACKETED

    def derive_growth_fields(
        self, measurement: GrowthMeasurement, birth_date: date
    ) -> GrowthRecord:
        """Enrich a raw measurement with age, BMI and nutrition status."""
        age_months = age_in_months(birth_date, measurement.record_date)
        bmi = compute_bmi(measurement.weight, measurement.height)
        return GrowthRecord(
            id=measurement.id,
            child_id=measurement.child_id,
            record_date=measurement.record_date,
            weight=measurement.weight,
            height=measurement.height,
            age_in_months=age_months,
            bmi=bmi,
            nutrition_status=classify(bmi, age_months, self.status_table),
            head_circumference=measurement.head_circumference,
            notes=measurement.notes,
        )

    def update_measurements(
        self,
        record: GrowthRecord,
        *,
        weight: float | None = None,
        height: float | None = None,
    ) -> GrowthRecord:
        """Return a copy with new weight/height and recomputed BMI and status.

        The stored age is kept as it was when the record was created.
        """
        new_weight = record.weight if weight is None else weight
        new_height = record.height if height is None else height
        bmi = compute_bmi(new_weight, new_height)
        return replace(
            record,
            weight=new_weight,
            height=new_height,
            bmi=bmi,
            nutrition_status=classify(bmi, record.age_in_months, self.status_table),
        )

    def classify(self, bmi: float, age_months: int) -> NutritionStatus:
        """Classify BMI with the configured table."""
        return classify(bmi, age_months, self.status_table)

"""Tests for BMI and nutrition status classification."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo
from uuid import uuid4

from growth_analytics.config import StatusTable
from growth_analytics.domain.models import GrowthMeasurement, NutritionStatus
from growth_analytics.rounding import format_number, round_half_up, round_int
from growth_analytics.services.growth import (
    GrowthService,
    classify,
    classify_nutrition_status,
    classify_nutrition_status_flat,
    compute_bmi,
    latest_growth_record,
    records_as_of,
    sort_chronologically,
)
from tests.conftest import CHILD_ID, make_record

_SEVERITY = list(NutritionStatus)


def test_compute_bmi_rounds_to_two_decimals() -> None:
    assert compute_bmi(12, 85) == 16.61
    assert compute_bmi(15, 90) == 18.52


def test_toddler_bmi_scenario_is_normal() -> None:
    assert classify_nutrition_status(compute_bmi(12, 85), 18) is NutritionStatus.NORMAL


def test_boundaries_land_on_documented_side() -> None:
    assert classify_nutrition_status(14.99, 30) is NutritionStatus.SEVERELY_UNDERWEIGHT
    assert classify_nutrition_status(15.0, 30) is NutritionStatus.UNDERWEIGHT
    assert classify_nutrition_status(16.0, 30) is NutritionStatus.UNDERWEIGHT
    assert classify_nutrition_status(16.999, 30) is NutritionStatus.UNDERWEIGHT
    assert classify_nutrition_status(17.0, 30) is NutritionStatus.NORMAL
    assert classify_nutrition_status(25.0, 30) is NutritionStatus.OVERWEIGHT
    assert classify_nutrition_status(30.0, 30) is NutritionStatus.OBESE
    assert classify_nutrition_status(13.99, 12) is NutritionStatus.SEVERELY_UNDERWEIGHT
    assert classify_nutrition_status(19.0, 12) is NutritionStatus.OVERWEIGHT
    assert classify_nutrition_status(21.0, 12) is NutritionStatus.OBESE


def test_table_switches_at_24_months() -> None:
    assert classify_nutrition_status(16.5, 23) is NutritionStatus.NORMAL
    assert classify_nutrition_status(16.5, 24) is NutritionStatus.UNDERWEIGHT


def test_classification_is_monotonic_in_bmi() -> None:
    for age in (6, 23, 24, 60):
        ranks = [
            _SEVERITY.index(classify_nutrition_status(tenths / 10, age))
            for tenths in range(100, 360)
        ]
        assert ranks == sorted(ranks)


def test_classification_is_idempotent() -> None:
    first = classify(compute_bmi(13.2, 91.4), 30)
    second = classify(compute_bmi(13.2, 91.4), 30)

    assert first is second


def test_flat_table_ignores_age() -> None:
    assert classify_nutrition_status_flat(15.5) is NutritionStatus.SEVERELY_UNDERWEIGHT
    assert classify(15.5, 12, StatusTable.FLAT) is NutritionStatus.SEVERELY_UNDERWEIGHT
    assert classify(15.5, 12) is NutritionStatus.UNDERWEIGHT


def test_derive_growth_fields_uses_record_date_for_age() -> None:
    measurement = GrowthMeasurement(
        id=uuid4(),
        child_id=CHILD_ID,
        record_date=datetime(2022, 9, 1, tzinfo=UTC),
        weight=12,
        height=85,
        notes="clinic visit",
    )

    record = GrowthService().derive_growth_fields(measurement, date(2021, 3, 1))

    assert record.age_in_months == 18
    assert record.bmi == 16.61
    assert record.nutrition_status is NutritionStatus.NORMAL
    assert record.notes == "clinic visit"


def test_derive_growth_fields_with_flat_table() -> None:
    record = GrowthService(StatusTable.FLAT).derive_growth_fields(
        GrowthMeasurement(
            id=uuid4(),
            child_id=CHILD_ID,
            record_date=datetime(2022, 9, 1, tzinfo=UTC),
            weight=9.5,
            height=80,
        ),
        date(2021, 3, 1),
    )

    assert record.bmi == 14.84
    assert record.nutrition_status is NutritionStatus.SEVERELY_UNDERWEIGHT


def test_update_measurements_recomputes_status_and_keeps_age() -> None:
    record = make_record(datetime(2022, 9, 1, tzinfo=UTC), weight=12, height=85)

    updated = GrowthService().update_measurements(record, weight=15)

    assert updated.age_in_months == record.age_in_months
    assert updated.height == 85
    assert updated.bmi == 20.76
    assert updated.nutrition_status is NutritionStatus.OVERWEIGHT
    assert record.bmi == 16.61


def test_latest_and_sorted_records() -> None:
    older = make_record(datetime(2023, 1, 1, tzinfo=UTC), weight=12, height=88)
    newer = make_record(datetime(2023, 6, 1, tzinfo=UTC), weight=13, height=91)

    assert latest_growth_record([newer, older]) is newer
    assert latest_growth_record([]) is None
    assert sort_chronologically([newer, older]) == [older, newer]


def test_rounding_helpers_round_half_away_from_zero() -> None:
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(-1.005, 2) == -1.01
    assert round_int(2.5) == 3
    assert round_int(-2.5) == -3
    assert format_number(15.0) == "15"
    assert format_number(14.25) == "14.25"


def test_naive_record_dates_are_read_as_local_time() -> None:
    jakarta = ZoneInfo("Asia/Jakarta")
    naive = make_record(datetime(2024, 3, 1, 12, 0), weight=14.0, height=96)
    aware = make_record(datetime(2024, 3, 1, 6, 0, tzinfo=UTC), weight=14.2, height=96)

    assert sort_chronologically([aware, naive], jakarta) == [naive, aware]
    assert latest_growth_record([naive, aware], jakarta) is aware
    assert sort_chronologically([aware, naive]) == [aware, naive]


def test_records_as_of_drops_later_records() -> None:
    earlier = make_record(datetime(2024, 3, 1, tzinfo=UTC), weight=14.0, height=96)
    later = make_record(datetime(2024, 6, 1, tzinfo=UTC), weight=16.0, height=100)
    naive = make_record(datetime(2024, 2, 1), weight=13.8, height=95)

    kept = records_as_of([later, earlier, naive], datetime(2024, 3, 20, tzinfo=UTC))

    assert kept == [naive, earlier]

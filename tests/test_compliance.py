"""Tests for compliance calculations."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from growth_analytics.domain.models import MealTime, Sex
from growth_analytics.services.compliance import (
    compliance,
    compliance_snapshot,
    daily_totals,
    meal_breakdown,
    meal_frequency_compliance,
    totals_by_day,
    tracking_consistency,
    window_compliance,
)
from growth_analytics.services.targets import nutrition_target
from tests.conftest import make_log

UTC_ZONE = ZoneInfo("UTC")


def test_daily_totals_treat_missing_values_as_zero() -> None:
    entries = [
        make_log(datetime(2024, 3, 20, 8, tzinfo=UTC), calories=300, protein=8),
        make_log(datetime(2024, 3, 20, 12, tzinfo=UTC), calories=200, fiber=3),
    ]

    totals = daily_totals(entries)

    assert totals.calories == 500
    assert totals.protein == 8
    assert totals.fiber == 3
    assert totals.carbs == 0
    assert totals.sodium == 0


def test_compliance_is_clamped() -> None:
    assert compliance(600, 1200) == 50
    assert compliance(1500, 1200) == 100
    assert compliance(0, 1200) == 0
    assert compliance(300, 0) == 0
    for actual in (0, 1, 50, 999, 10_000):
        for target in (0, 1, 35, 1200):
            assert 0 <= compliance(actual, target) <= 100


def test_zero_logs_give_zero_calorie_compliance() -> None:
    target = nutrition_target(18, Sex.FEMALE, 10.0)

    snapshot = compliance_snapshot(daily_totals([]), target, meal_count=0)

    assert snapshot.calories == 0
    assert snapshot.protein == 0
    assert snapshot.meal_frequency == 0


def test_meal_frequency_compliance() -> None:
    assert meal_frequency_compliance(2) == 50
    assert meal_frequency_compliance(6) == 100
    assert meal_frequency_compliance(3, target_meals=3) == 100


def test_window_compliance_averages_daily_ratios() -> None:
    target = nutrition_target(18, Sex.FEMALE, 10.0)
    entries = [
        make_log(datetime(2024, 3, 18, 12, tzinfo=UTC), calories=2250),
        make_log(datetime(2024, 3, 19, 12, tzinfo=UTC), calories=281.25),
    ]

    window = window_compliance(entries, target, UTC_ZONE)

    assert [item.day for item in window.daily] == [date(2024, 3, 18), date(2024, 3, 19)]
    assert window.daily[0].compliance.calories == 100
    assert window.daily[1].compliance.calories == pytest.approx(25)
    assert window.average.calories == pytest.approx(62.5)
    assert window.average.meal_frequency == pytest.approx(25)
    assert window.days_tracked == 2


def test_window_compliance_scores_untracked_days_when_listed() -> None:
    target = nutrition_target(18, Sex.FEMALE, 10.0)
    entries = [make_log(datetime(2024, 3, 18, 12, tzinfo=UTC), calories=1125)]

    window = window_compliance(
        entries,
        target,
        UTC_ZONE,
        days=[date(2024, 3, 18), date(2024, 3, 19)],
    )

    assert window.average.calories == pytest.approx(50)
    assert window.days_tracked == 1


def test_totals_by_day_uses_local_calendar() -> None:
    entries = [
        make_log(datetime(2024, 3, 19, 20, tzinfo=UTC), calories=100),
        make_log(datetime(2024, 3, 20, 2, tzinfo=UTC), calories=200),
    ]

    by_day = totals_by_day(entries, ZoneInfo("Asia/Jakarta"))

    assert list(by_day) == [date(2024, 3, 20)]
    assert by_day[date(2024, 3, 20)].totals.calories == 300
    assert by_day[date(2024, 3, 20)].meal_count == 2


def test_tracking_consistency() -> None:
    assert tracking_consistency(10, 31, 20) == 50
    assert tracking_consistency(3, 31, 20) == 15
    assert tracking_consistency(30, 30, 31) == 100
    assert tracking_consistency(0, 30, 0) == 0


def test_meal_breakdown_counts_every_slot() -> None:
    entries = [
        make_log(datetime(2024, 3, 20, 7, tzinfo=UTC), MealTime.BREAKFAST, 250),
        make_log(datetime(2024, 3, 20, 10, tzinfo=UTC), MealTime.SNACK, 80),
        make_log(datetime(2024, 3, 20, 15, tzinfo=UTC), MealTime.SNACK),
    ]

    breakdown = meal_breakdown(entries)

    assert breakdown[MealTime.BREAKFAST].count == 1
    assert breakdown[MealTime.BREAKFAST].calories == 250
    assert breakdown[MealTime.SNACK].count == 2
    assert breakdown[MealTime.SNACK].calories == 80
    assert breakdown[MealTime.DINNER].count == 0


def test_window_compliance_counts_tracked_days_among_listed_days_only() -> None:
    target = nutrition_target(18, Sex.FEMALE, 10.0)
    entries = [
        make_log(datetime(2024, 3, 17, 12, tzinfo=UTC), calories=1125),
        make_log(datetime(2024, 3, 18, 12, tzinfo=UTC), calories=1125),
    ]

    window = window_compliance(
        entries,
        target,
        UTC_ZONE,
        days=[date(2024, 3, 18), date(2024, 3, 19)],
    )

    assert [item.day for item in window.daily] == [
        date(2024, 3, 18),
        date(2024, 3, 19),
    ]
    assert window.days_tracked == 1

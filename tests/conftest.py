"""Shared test fixtures."""

from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from growth_analytics.config import Settings
from growth_analytics.containers import AppContainer, build_container
from growth_analytics.domain.models import (
    ChildProfile,
    FoodLogEntry,
    GrowthMeasurement,
    GrowthRecord,
    MealTime,
    ReminderEntry,
    ReminderType,
    Sex,
)
from growth_analytics.services.growth import GrowthService

AS_OF = datetime(2024, 3, 20, 10, 0, tzinfo=UTC)
CHILD_ID = UUID("00000000-0000-0000-0000-000000000001")


def make_child(
    birth_date: date = date(2021, 3, 1),
    sex: Sex = Sex.MALE,
    name: str = "Ayu",
) -> ChildProfile:
    return ChildProfile(id=CHILD_ID, name=name, birth_date=birth_date, sex=sex)


def make_record(
    record_date: datetime,
    weight: float,
    height: float,
    child: ChildProfile | None = None,
) -> GrowthRecord:
    """Build a growth record the way the storage layer would."""
    profile = child or make_child()
    measurement = GrowthMeasurement(
        id=uuid4(),
        child_id=profile.id,
        record_date=record_date,
        weight=weight,
        height=height,
    )
    return GrowthService().derive_growth_fields(measurement, profile.birth_date)


def make_log(  # noqa: PLR0913
    log_date: datetime,
    meal_time: MealTime = MealTime.LUNCH,
    calories: float | None = None,
    protein: float | None = None,
    carbs: float | None = None,
    fat: float | None = None,
    fiber: float | None = None,
) -> FoodLogEntry:
    return FoodLogEntry(
        id=uuid4(),
        child_id=CHILD_ID,
        meal_time=meal_time,
        log_date=log_date,
        food_name="Rice porridge",
        portion="1 bowl",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
    )


def make_reminder(
    time: str,
    title: str = "Lunch",
    is_active: bool = True,
    reminder_type: ReminderType = ReminderType.MEAL,
) -> ReminderEntry:
    return ReminderEntry(
        id=uuid4(),
        child_id=CHILD_ID,
        type=reminder_type,
        title=title,
        time=time,
        is_active=is_active,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone_name="UTC")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def child() -> ChildProfile:
    return make_child()

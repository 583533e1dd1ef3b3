"""Domain models for children and their tracked records."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class Sex(str, Enum):
    """Biological sex used by the calorie tables."""

    MALE = "male"
    FEMALE = "female"


class MealTime(str, Enum):
    """Meal slot a food log belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class NutritionStatus(str, Enum):
    """BMI-for-age category, ordered from most to least underweight."""

    SEVERELY_UNDERWEIGHT = "severely_underweight"
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class ReminderType(str, Enum):
    """Kind of reminder a parent configured."""

    MEAL = "meal"
    VITAMIN = "vitamin"
    CHECKUP = "checkup"
    MEDICATION = "medication"
    EXERCISE = "exercise"


@dataclass(frozen=True)
class ChildProfile:
    """A tracked child."""

    id: UUID
    name: str
    birth_date: date
    sex: Sex


@dataclass(frozen=True)
class GrowthMeasurement:
    """Raw weight and height reading before derived fields are filled in."""

    id: UUID
    child_id: UUID
    record_date: datetime
    weight: float
    height: float
    head_circumference: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class GrowthRecord:
    """Growth measurement enriched with age, BMI and nutrition status."""

    id: UUID
    child_id: UUID
    record_date: datetime
    weight: float
    height: float
    age_in_months: int
    bmi: float
    nutrition_status: NutritionStatus
    head_circumference: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class FoodLogEntry:
    """A single logged food item.

    Nutrient fields are optional; aggregation treats a missing value as zero.
    """

    id: UUID
    child_id: UUID
    meal_time: MealTime
    log_date: datetime
    food_name: str | None = None
    portion: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


@dataclass(frozen=True)
class ReminderEntry:
    """A recurring reminder at a fixed time of day."""

    id: UUID
    child_id: UUID
    type: ReminderType
    title: str
    time: str
    is_active: bool = True
    days: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ChildRecords:
    """A child together with the records a storage layer loaded for it."""

    child: ChildProfile
    growth_records: tuple[GrowthRecord, ...] = ()
    food_logs: tuple[FoodLogEntry, ...] = ()
    reminders: tuple[ReminderEntry, ...] = ()

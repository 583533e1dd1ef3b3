"""Age-appropriate calorie, protein and macro targets."""

from collections.abc import Sequence
from datetime import datetime
from zoneinfo import ZoneInfo

from growth_analytics.documents.reports import (
    NeedsChildInfo,
    NutritionNeeds,
    NutritionNeedsDocument,
    Recommendation,
)
from growth_analytics.domain.models import ChildProfile, GrowthRecord, Sex
from growth_analytics.domain.nutrition import FoodRecommendation, NutritionTarget
from growth_analytics.errors import MissingGrowthDataError
from growth_analytics.rounding import round_int
from growth_analytics.services.age import MONTHS_PER_YEAR, age_in_months
from growth_analytics.services.growth import records_as_of
from growth_analytics.services.periods import UTC_ZONE

CARBS_CALORIE_SHARE = 0.6
FAT_CALORIE_SHARE = 0.25
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9
INFANT_FIBER_G = 5
INFANT_WATER_ML = 800
WATER_ML_PER_MONTH = 50

# (upper age bound in months, male kcal, female kcal); ages 12 months and over.
_CALORIE_BRACKETS = (
    (24, 1125, 1125),
    (36, 1250, 1250),
    (60, 1400, 1300),
    (120, 1650, 1550),
)
_CALORIES_OLDER = {Sex.MALE: 2000, Sex.FEMALE: 1800}

_PROTEIN_BRACKETS = (
    (24, 20),
    (36, 25),
    (60, 35),
    (120, 40),
)
_PROTEIN_OLDER = 50


def calorie_needs(age_months: int, sex: Sex, weight: float) -> float:
    """Return daily calorie needs in kcal.

    Infants are weight-based; older children use flat age brackets, split by
    sex from 36 months.
    """
    if age_months < 6:
        return 108 * weight
    if age_months < MONTHS_PER_YEAR:
        return 98 * weight
    for upper, male, female in _CALORIE_BRACKETS:
        if age_months < upper:
            return float(male if sex is Sex.MALE else female)
    return float(_CALORIES_OLDER[sex])


def protein_needs(age_months: int, weight: float) -> float:
    """Return daily protein needs in grams."""
    if age_months < 6:
        return 2.2 * weight
    if age_months < MONTHS_PER_YEAR:
        return 1.6 * weight
    for upper, grams in _PROTEIN_BRACKETS:
        if age_months < upper:
            return float(grams)
    return float(_PROTEIN_OLDER)


def carbs_target(calories: float) -> float:
    return calories * CARBS_CALORIE_SHARE / KCAL_PER_GRAM_CARBS


def fat_target(calories: float) -> float:
    return calories * FAT_CALORIE_SHARE / KCAL_PER_GRAM_FAT


def fiber_target(age_months: int) -> float:
    if age_months < MONTHS_PER_YEAR:
        return float(INFANT_FIBER_G)
    return age_months / MONTHS_PER_YEAR + INFANT_FIBER_G


def water_target(age_months: int) -> float:
    if age_months < MONTHS_PER_YEAR:
        return float(INFANT_WATER_ML)
    return float(age_months * WATER_ML_PER_MONTH)


def nutrition_target(age_months: int, sex: Sex, weight: float) -> NutritionTarget:
    """Return the full set of daily targets."""
    calories = calorie_needs(age_months, sex, weight)
    return NutritionTarget(
        calories=calories,
        protein=protein_needs(age_months, weight),
        carbs=carbs_target(calories),
        fat=fat_target(calories),
        fiber=fiber_target(age_months),
        water=water_target(age_months),
    )


def food_recommendations(
    age_months: int, calories: float, protein: float
) -> list[FoodRecommendation]:
    """Return feeding guidance for the child's age band."""
    if age_months < 6:
        return [
            FoodRecommendation(
                category="Exclusive breastfeeding",
                items=[
                    "Breast milk on demand (8-12 times a day)",
                    "No other food or drink needed",
                ],
            )
        ]
    if age_months < MONTHS_PER_YEAR:
        return [
            FoodRecommendation(
                category="Complementary feeding with breast milk",
                items=[
                    "Smooth rice porridge with vegetables (spinach, carrot, pumpkin)",
                    "Fruit puree (banana, avocado, papaya)",
                    "Soft protein (boiled egg, boneless fish, minced chicken)",
                    "Continue breastfeeding",
                    "Start with 2-3 tablespoons per meal",
                ],
            )
        ]
    if age_months < 24:
        return [
            FoodRecommendation(
                category="Soft family food",
                items=[
                    "Soft rice with protein (fish, chicken, egg, tofu)",
                    "Finely chopped greens (spinach, water spinach, broccoli)",
                    "Fresh fruit in small pieces (banana, orange, papaya)",
                    "Formula or breast milk (500ml per day)",
                    "Healthy snacks: baby biscuits, soft fruit",
                ],
            )
        ]
    return [
        FoodRecommendation(
            category="Balanced family diet",
            items=[
                f"Carbohydrates: {round_int(carbs_target(calories))}g "
                "(rice, bread, pasta, potatoes)",
                f"Protein: {round_int(protein)}g "
                "(fish, chicken, egg, tempeh, tofu, meat)",
                f"Fat: {round_int(fat_target(calories))}g (oil, avocado, nuts)",
                "Vegetables: 3-4 servings a day (varied colours)",
                "Fruit: 2-3 servings a day (rich in vitamin C)",
                "Milk: 2-3 glasses a day (calcium and protein)",
                "Water: 6-8 glasses a day",
            ],
        )
    ]


def target_for_child(
    child: ChildProfile,
    growth_records: Sequence[GrowthRecord],
    as_of: datetime,
    tz: ZoneInfo = UTC_ZONE,
) -> NutritionTarget:
    """Return targets from the child's age at ``as_of`` and latest weight.

    Records dated after ``as_of`` are ignored. Raises ``MissingGrowthDataError``
    when no growth record is left.
    """
    latest = _latest_record(child, growth_records, as_of, tz)
    age_months = age_in_months(child.birth_date, as_of)
    return nutrition_target(age_months, child.sex, latest.weight)


def nutrition_needs(
    child: ChildProfile,
    growth_records: Sequence[GrowthRecord],
    as_of: datetime,
    tz: ZoneInfo = UTC_ZONE,
) -> NutritionNeedsDocument:
    """Return the child's current targets and feeding guidance."""
    latest = _latest_record(child, growth_records, as_of, tz)
    age_months = age_in_months(child.birth_date, as_of)
    target = nutrition_target(age_months, child.sex, latest.weight)
    recommendations = food_recommendations(age_months, target.calories, target.protein)
    return NutritionNeedsDocument(
        child_info=NeedsChildInfo(
            name=child.name,
            age_in_months=age_months,
            weight=latest.weight,
            height=latest.height,
            bmi=latest.bmi,
            nutrition_status=latest.nutrition_status,
        ),
        nutrition_needs=NutritionNeeds(**target.rounded()),
        food_recommendations=[
            Recommendation(category=entry.category, items=entry.items)
            for entry in recommendations
        ],
    )


def _latest_record(
    child: ChildProfile,
    growth_records: Sequence[GrowthRecord],
    as_of: datetime,
    tz: ZoneInfo,
) -> GrowthRecord:
    records = records_as_of(growth_records, as_of, tz)
    if not records:
        raise MissingGrowthDataError(child.id)
    return records[-1]

"""Nutrition domain models."""

from dataclasses import dataclass

from growth_analytics.rounding import round_int


@dataclass(frozen=True)
class NutritionTarget:
    """Daily intake targets for a child at a point in time."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    water: float

    def rounded(self) -> dict[str, int]:
        """Return targets rounded to whole units for display."""
        return {
            "calories": round_int(self.calories),
            "protein": round_int(self.protein),
            "carbs": round_int(self.carbs),
            "fat": round_int(self.fat),
            "fiber": round_int(self.fiber),
            "water": round_int(self.water),
        }


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrient intake."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
            sugar=self.sugar + other.sugar,
            sodium=self.sodium + other.sodium,
        )


@dataclass(frozen=True)
class FoodRecommendation:
    """Feeding guidance for an age band."""

    category: str
    items: list[str]

"""Pydantic documents for reports, exports and nutrition needs."""

import datetime as dt

from pydantic import BaseModel

from growth_analytics.domain.models import MealTime, NutritionStatus, Sex
from growth_analytics.domain.trends import TrendDirection


class ChildInfo(BaseModel):
    """Child header of a report."""

    name: str
    age_in_months: int


class GrowthRecordRow(BaseModel):
    """Growth record as it appears in reports and exports."""

    date: dt.datetime
    weight: float
    height: float
    bmi: float
    nutrition_status: NutritionStatus
    age_in_months: int


class GrowthAnalysis(BaseModel):
    """Change between the first and last record of a period."""

    records_count: int
    weight_change: float
    height_change: float
    bmi_change: float


class AverageDailyNutrition(BaseModel):
    """Average nutrient intake per day with data."""

    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    fiber: int = 0
    sugar: int = 0
    sodium: int = 0
    meals: int = 0


class MonthlyReport(BaseModel):
    """Calendar month progress report."""

    period: str
    child_info: ChildInfo
    growth_records: list[GrowthRecordRow]
    growth_analysis: GrowthAnalysis
    avg_daily_nutrition: AverageDailyNutrition
    meal_distribution: dict[MealTime, int]
    total_food_logs: int
    days_with_logs: int
    total_days: int
    compliance_rate: int


class WeekdayNutrition(BaseModel):
    """Totals for one day of a weekly report."""

    date: dt.date
    calories: float
    protein: float
    carbs: float
    fat: float
    meal_count: int


class WeeklyReport(BaseModel):
    """Seven-day summary grouped by weekday name."""

    period: str
    start_date: dt.date
    end_date: dt.date
    daily_data: dict[str, WeekdayNutrition]
    total_logs: int


class CompliancePoint(BaseModel):
    """Compliance value for one day."""

    date: dt.date
    value: float


class ComplianceSeries(BaseModel):
    """Per-day compliance series for each metric."""

    calorie: list[CompliancePoint]
    protein: list[CompliancePoint]
    meal_frequency: list[CompliancePoint]


class AverageCompliance(BaseModel):
    """Average of per-day compliance values."""

    calorie: float
    protein: float
    meal_frequency: float


class ComplianceTargets(BaseModel):
    """Targets used for a compliance report."""

    calories: float
    protein: float
    meals: int


class ComplianceReport(BaseModel):
    """Rolling N-day compliance report."""

    period: str
    targets: ComplianceTargets
    compliance: ComplianceSeries
    average_compliance: AverageCompliance
    days_tracked: int
    total_logs: int


class TrendPoint(BaseModel):
    """Chart point for one metric."""

    date: dt.datetime
    age: int
    value: float


class MetricTrend(BaseModel):
    """Series and direction for one metric."""

    data: list[TrendPoint]
    trend: TrendDirection
    delta: float


class GrowthTrendReport(BaseModel):
    """Growth trends over the last N months."""

    child_name: str
    period: str
    records_count: int
    trends: dict[str, MetricTrend]


class ExportChild(BaseModel):
    """Child details included in an export."""

    name: str
    birth_date: dt.date
    sex: Sex
    current_age: int


class ExportPeriod(BaseModel):
    """Inclusive export range."""

    start: dt.datetime
    end: dt.datetime


class NutritionLogRow(BaseModel):
    """Food log as it appears in exports."""

    date: dt.datetime
    meal_time: MealTime
    food_name: str | None = None
    portion: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class ExportSummary(BaseModel):
    """Totals of an export."""

    total_growth_records: int
    total_food_logs: int
    avg_calories_per_day: float
    avg_protein_per_day: float


class ExportDocument(BaseModel):
    """Growth and nutrition history for sharing with a healthcare provider."""

    child: ExportChild
    period: ExportPeriod
    growth_records: list[GrowthRecordRow]
    nutrition_logs: list[NutritionLogRow]
    summary: ExportSummary
    generated_at: dt.datetime


class NeedsChildInfo(BaseModel):
    """Child details used to derive nutrition needs."""

    name: str
    age_in_months: int
    weight: float
    height: float
    bmi: float
    nutrition_status: NutritionStatus


class NutritionNeeds(BaseModel):
    """Rounded daily targets."""

    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int
    water: int


class Recommendation(BaseModel):
    """Feeding guidance for the child's age band."""

    category: str
    items: list[str]


class NutritionNeedsDocument(BaseModel):
    """Targets and feeding guidance for a child."""

    child_info: NeedsChildInfo
    nutrition_needs: NutritionNeeds
    food_recommendations: list[Recommendation]

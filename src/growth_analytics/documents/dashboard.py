"""Pydantic documents for dashboard snapshots."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from growth_analytics.domain.dashboard import OverallStatusLevel, Priority
from growth_analytics.domain.models import NutritionStatus, ReminderType
from growth_analytics.domain.trends import TrendDirection


class ChildSummary(BaseModel):
    """Child header of the dashboard."""

    id: UUID
    name: str
    age_in_months: int
    age_display: str


class CurrentGrowth(BaseModel):
    """Latest growth measurement."""

    weight: float
    height: float
    bmi: float
    nutrition_status: NutritionStatus
    record_date: datetime


class GrowthSection(BaseModel):
    """Growth status and recent trend."""

    current: CurrentGrowth | None = None
    trend: TrendDirection
    days_since_last_record: int | None = None
    needs_update: bool
    total_records: int


class ConsumedNutrients(BaseModel):
    """Macronutrients consumed today."""

    calories: float
    protein: float
    carbs: float
    fat: float


class TodayTargets(BaseModel):
    """Calorie and protein targets for today."""

    calories: int
    protein: float


class TodayCompliance(BaseModel):
    """Rounded compliance percentages for today."""

    calories: int
    protein: int


class TodayNutrition(BaseModel):
    """Today's intake against targets."""

    consumed: ConsumedNutrients
    targets: TodayTargets
    compliance: TodayCompliance
    meals_logged: int
    meal_frequency: dict[str, int]


class WeeklyNutrition(BaseModel):
    """Week-to-date daily averages."""

    avg_calories: int
    avg_protein: int
    total_logs: int


class MonthlyNutrition(BaseModel):
    """Month-to-date tracking consistency."""

    total_logs: int
    tracking_consistency: int
    days_with_logs: int


class NutritionSection(BaseModel):
    """Nutrition figures for today, this week and this month."""

    today: TodayNutrition
    weekly: WeeklyNutrition
    monthly: MonthlyNutrition


class ReminderSummary(BaseModel):
    """A reminder as shown in lists."""

    id: UUID
    title: str
    time: str
    type: ReminderType


class NextReminderSummary(ReminderSummary):
    """The next reminder with time remaining."""

    hours_until: int
    minutes_until: int


class RemindersSection(BaseModel):
    """Active reminders due soon."""

    total: int
    upcoming: list[ReminderSummary]
    next_reminder: NextReminderSummary | None = None


class OverallStatusSummary(BaseModel):
    """Overall rating."""

    status: OverallStatusLevel
    message: str
    priority: Priority


class SummarySection(BaseModel):
    """Totals and overall rating."""

    total_food_logs: int
    last_updated: datetime
    overall_status: OverallStatusSummary


class DashboardSnapshot(BaseModel):
    """Point-in-time dashboard for one child."""

    child: ChildSummary
    growth: GrowthSection
    nutrition: NutritionSection
    reminders: RemindersSection
    summary: SummarySection


class ChildOverview(BaseModel):
    """Compact per-child row of the multi-child overview."""

    id: UUID
    name: str
    age_in_months: int
    today_logs: int
    active_reminders: int
    last_growth_record: datetime | None = None
    nutrition_status: str


class DashboardOverview(BaseModel):
    """Overview across all of a parent's children."""

    total_children: int
    children: list[ChildOverview]
    last_updated: datetime

"""Periodic reports and data exports."""

import csv
import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from growth_analytics.documents.reports import (
    AverageCompliance,
    AverageDailyNutrition,
    ChildInfo,
    CompliancePoint,
    ComplianceReport,
    ComplianceSeries,
    ComplianceTargets,
    ExportChild,
    ExportDocument,
    ExportPeriod,
    ExportSummary,
    GrowthAnalysis,
    GrowthRecordRow,
    GrowthTrendReport,
    MetricTrend,
    MonthlyReport,
    NutritionLogRow,
    TrendPoint,
    WeekdayNutrition,
    WeeklyReport,
)
from growth_analytics.domain.models import (
    ChildProfile,
    FoodLogEntry,
    GrowthRecord,
)
from growth_analytics.domain.nutrition import NutrientTotals
from growth_analytics.domain.trends import GrowthPoint, TrendResult
from growth_analytics.errors import InvalidDateError
from growth_analytics.rounding import format_number, round_int
from growth_analytics.services.age import age_in_months
from growth_analytics.services.compliance import (
    DEFAULT_TARGET_MEALS,
    entries_between,
    meal_frequency,
    totals_by_day,
    window_compliance,
)
from growth_analytics.services.growth import records_as_of, sort_chronologically
from growth_analytics.services.periods import (
    as_instant,
    local_day,
    month_bounds,
    ordinal_week_bounds,
    shift_months,
    weekday_name,
)
from growth_analytics.services.targets import target_for_child
from growth_analytics.services.trends import (
    WEIGHT_EPSILON_KG,
    analyze_growth,
    growth_series,
)

CSV_HEADER = ("Date", "Weight(kg)", "Height(cm)", "BMI", "Status", "Age(months)")

_logger = logging.getLogger(__name__)


@dataclass
class ReportService:
    """Builds report documents over custom date windows."""

    timezone_name: str = "UTC"
    target_meals_per_day: int = DEFAULT_TARGET_MEALS
    weight_trend_epsilon: float = WEIGHT_EPSILON_KG
    compliance_report_days: int = 30
    export_default_days: int = 90
    trend_report_months: int = 12
    debug: bool = False

    def monthly_report(  # noqa: PLR0913
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        food_logs: Sequence[FoodLogEntry],
        year: int,
        month: int,
        as_of: datetime,
    ) -> MonthlyReport:
        """Summarise one calendar month of growth and nutrition.

        Nutrient averages are taken over days that have logs, while the
        compliance rate is days with logs over all days of the month.
        """
        tz = self._tz()
        first_day, last_day = month_bounds(year, month)
        records = [
            record
            for record in sort_chronologically(growth_records, tz)
            if first_day <= local_day(record.record_date, tz) <= last_day
        ]
        logs = entries_between(food_logs, first_day, last_day, tz)
        by_day = totals_by_day(logs, tz)
        days_with_logs = len(by_day)
        total_days = last_day.day

        totals = NutrientTotals()
        meals = 0
        for day_totals in by_day.values():
            totals = totals + day_totals.totals
            meals += day_totals.meal_count

        trend = analyze_growth(records, self.weight_trend_epsilon, tz)
        if self.debug:
            _logger.info(
                "Monthly report: child_id=%s period=%s-%02d logs=%s",
                child.id,
                year,
                month,
                len(logs),
            )
        return MonthlyReport(
            period=f"{year}-{month:02d}",
            child_info=ChildInfo(
                name=child.name,
                age_in_months=age_in_months(child.birth_date, as_of),
            ),
            growth_records=[_growth_row(record) for record in records],
            growth_analysis=GrowthAnalysis(
                records_count=len(records),
                weight_change=trend.weight.delta,
                height_change=trend.height.delta,
                bmi_change=trend.bmi.delta,
            ),
            avg_daily_nutrition=_average_nutrition(totals, meals, days_with_logs),
            meal_distribution=meal_frequency(logs),
            total_food_logs=len(logs),
            days_with_logs=days_with_logs,
            total_days=total_days,
            compliance_rate=round_int(days_with_logs / total_days * 100),
        )

    def weekly_report(
        self, food_logs: Sequence[FoodLogEntry], year: int, week: int
    ) -> WeeklyReport:
        """Summarise week ``week`` of ``year`` counted in 7-day blocks from Jan 1."""
        tz = self._tz()
        start, end = ordinal_week_bounds(year, week)
        logs = entries_between(food_logs, start, end, tz)
        daily_data = {
            weekday_name(day): WeekdayNutrition(
                date=day,
                calories=day_totals.totals.calories,
                protein=day_totals.totals.protein,
                carbs=day_totals.totals.carbs,
                fat=day_totals.totals.fat,
                meal_count=day_totals.meal_count,
            )
            for day, day_totals in totals_by_day(logs, tz).items()
        }
        return WeeklyReport(
            period=f"Week {week}, {year}",
            start_date=start,
            end_date=end,
            daily_data=daily_data,
            total_logs=len(logs),
        )

    def compliance_report(
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        food_logs: Sequence[FoodLogEntry],
        as_of: datetime,
        days: int | None = None,
    ) -> ComplianceReport:
        """Return per-day compliance over the ``days`` before ``as_of``.

        Raises ``MissingGrowthDataError`` when the child has no growth records.
        """
        window_days = self.compliance_report_days if days is None else days
        tz = self._tz()
        target = target_for_child(child, growth_records, as_of, tz)
        end = as_instant(as_of, tz)
        start = end - timedelta(days=window_days)
        logs = [
            log for log in food_logs if start <= as_instant(log.log_date, tz) <= end
        ]
        window = window_compliance(
            logs, target, tz, target_meals=self.target_meals_per_day
        )
        return ComplianceReport(
            period=f"{window_days} days",
            targets=ComplianceTargets(
                calories=target.calories,
                protein=target.protein,
                meals=self.target_meals_per_day,
            ),
            compliance=ComplianceSeries(
                calorie=[
                    CompliancePoint(date=item.day, value=item.compliance.calories)
                    for item in window.daily
                ],
                protein=[
                    CompliancePoint(date=item.day, value=item.compliance.protein)
                    for item in window.daily
                ],
                meal_frequency=[
                    CompliancePoint(
                        date=item.day, value=item.compliance.meal_frequency
                    )
                    for item in window.daily
                ],
            ),
            average_compliance=AverageCompliance(
                calorie=window.average.calories,
                protein=window.average.protein,
                meal_frequency=window.average.meal_frequency,
            ),
            days_tracked=window.days_tracked,
            total_logs=len(logs),
        )

    def growth_trend_report(
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        as_of: datetime,
        months: int | None = None,
    ) -> GrowthTrendReport:
        """Return weight, height and BMI series and trends over recent months."""
        window_months = self.trend_report_months if months is None else months
        tz = self._tz()
        start = shift_months(as_instant(as_of, tz), -window_months)
        records = [
            record
            for record in records_as_of(growth_records, as_of, tz)
            if as_instant(record.record_date, tz) >= start
        ]
        points = growth_series(records, tz)
        trend = analyze_growth(records, self.weight_trend_epsilon, tz)
        return GrowthTrendReport(
            child_name=child.name,
            period=f"{window_months} months",
            records_count=len(records),
            trends={
                "weight": _metric_trend(points, "weight", trend.weight),
                "height": _metric_trend(points, "height", trend.height),
                "bmi": _metric_trend(points, "bmi", trend.bmi),
            },
        )

    def export(  # noqa: PLR0913
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        food_logs: Sequence[FoodLogEntry],
        as_of: datetime,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> ExportDocument:
        """Return growth and food history in ``[start, end]``.

        Defaults to the ``export_default_days`` ending at ``as_of``.
        """
        tz = self._tz()
        period_end = as_instant(end or as_of, tz)
        period_start = (
            as_instant(start, tz)
            if start
            else period_end - timedelta(days=self.export_default_days)
        )
        if period_start > period_end:
            raise InvalidDateError(
                f"Export start {period_start} is after export end {period_end}"
            )
        records = [
            record
            for record in sort_chronologically(growth_records, tz)
            if period_start <= as_instant(record.record_date, tz) <= period_end
        ]
        logs = sorted(
            (
                log
                for log in food_logs
                if period_start <= as_instant(log.log_date, tz) <= period_end
            ),
            key=lambda log: as_instant(log.log_date, tz),
        )
        by_day = totals_by_day(logs, tz)
        tracked_days = max(len(by_day), 1)
        totals = NutrientTotals()
        for day_totals in by_day.values():
            totals = totals + day_totals.totals
        if self.debug:
            _logger.info(
                "Export built: child_id=%s records=%s logs=%s",
                child.id,
                len(records),
                len(logs),
            )
        return ExportDocument(
            child=ExportChild(
                name=child.name,
                birth_date=child.birth_date,
                sex=child.sex,
                current_age=age_in_months(child.birth_date, as_of),
            ),
            period=ExportPeriod(start=period_start, end=period_end),
            growth_records=[_growth_row(record) for record in records],
            nutrition_logs=[_log_row(log) for log in logs],
            summary=ExportSummary(
                total_growth_records=len(records),
                total_food_logs=len(logs),
                avg_calories_per_day=totals.calories / tracked_days,
                avg_protein_per_day=totals.protein / tracked_days,
            ),
            generated_at=as_of,
        )

    def export_csv(self, growth_records: Sequence[GrowthRecord]) -> str:
        """Return growth records as CSV with a header row, oldest first."""
        tz = self._tz()
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for record in sort_chronologically(growth_records, tz):
            writer.writerow(
                (
                    local_day(record.record_date, tz).isoformat(),
                    format_number(record.weight),
                    format_number(record.height),
                    f"{record.bmi:.2f}",
                    record.nutrition_status.value,
                    record.age_in_months,
                )
            )
        return buffer.getvalue()

    def _tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)


def _growth_row(record: GrowthRecord) -> GrowthRecordRow:
    return GrowthRecordRow(
        date=record.record_date,
        weight=record.weight,
        height=record.height,
        bmi=record.bmi,
        nutrition_status=record.nutrition_status,
        age_in_months=record.age_in_months,
    )


def _log_row(log: FoodLogEntry) -> NutritionLogRow:
    return NutritionLogRow(
        date=log.log_date,
        meal_time=log.meal_time,
        food_name=log.food_name,
        portion=log.portion,
        calories=log.calories,
        protein=log.protein,
        carbs=log.carbs,
        fat=log.fat,
    )


def _metric_trend(
    points: Sequence[GrowthPoint], metric: str, result: TrendResult
) -> MetricTrend:
    return MetricTrend(
        data=[
            TrendPoint(
                date=point.record_date,
                age=point.age_in_months,
                value=getattr(point, metric),
            )
            for point in points
        ],
        trend=result.direction,
        delta=result.delta,
    )


def _average_nutrition(
    totals: NutrientTotals, meals: int, days_with_logs: int
) -> AverageDailyNutrition:
    if days_with_logs == 0:
        return AverageDailyNutrition()
    return AverageDailyNutrition(
        calories=round_int(totals.calories / days_with_logs),
        protein=round_int(totals.protein / days_with_logs),
        carbs=round_int(totals.carbs / days_with_logs),
        fat=round_int(totals.fat / days_with_logs),
        fiber=round_int(totals.fiber / days_with_logs),
        sugar=round_int(totals.sugar / days_with_logs),
        sodium=round_int(totals.sodium / days_with_logs),
        meals=round_int(meals / days_with_logs),
    )

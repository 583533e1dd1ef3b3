"""Point-in-time dashboard for a child."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from growth_analytics.documents.dashboard import (
    ChildOverview,
    ChildSummary,
    ConsumedNutrients,
    CurrentGrowth,
    DashboardOverview,
    DashboardSnapshot,
    GrowthSection,
    MonthlyNutrition,
    NextReminderSummary,
    NutritionSection,
    OverallStatusSummary,
    ReminderSummary,
    RemindersSection,
    SummarySection,
    TodayCompliance,
    TodayNutrition,
    TodayTargets,
    WeeklyNutrition,
)
from growth_analytics.domain.dashboard import (
    OverallStatus,
    OverallStatusLevel,
    Priority,
)
from growth_analytics.domain.models import (
    ChildProfile,
    ChildRecords,
    FoodLogEntry,
    GrowthRecord,
    ReminderEntry,
)
from growth_analytics.domain.nutrition import NutritionTarget
from growth_analytics.domain.trends import GrowthTrend
from growth_analytics.errors import MissingGrowthDataError
from growth_analytics.rounding import round_int
from growth_analytics.services.age import age_display, age_in_months
from growth_analytics.services.compliance import (
    compliance,
    daily_totals,
    entries_between,
    meal_frequency,
    tracking_consistency,
)
from growth_analytics.services.growth import records_as_of
from growth_analytics.services.periods import (
    UTC_ZONE,
    as_instant,
    days_in_month,
    local_day,
    local_now,
    start_of_week,
)
from growth_analytics.services.reminders import next_reminder, upcoming_reminders
from growth_analytics.services.targets import target_for_child
from growth_analytics.services.trends import (
    MIN_TREND_RECORDS,
    STABLE_TREND,
    WEIGHT_EPSILON_KG,
    analyze_growth,
)

STALE_GROWTH_DAYS = 60
EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60
SECONDS_PER_DAY = 24 * 60 * 60

_logger = logging.getLogger(__name__)

_ZERO_TARGET = NutritionTarget(
    calories=0.0, protein=0.0, carbs=0.0, fat=0.0, fiber=0.0, water=0.0
)


def overall_status(
    calorie_compliance: float,
    protein_compliance: float,
    consistency: float,
    days_since_last_growth: int | None,
    stale_growth_days: int = STALE_GROWTH_DAYS,
) -> OverallStatus:
    """Rate tracking quality; rules are checked in order and the first match wins.

    Stale growth data outranks any nutrition score.
    """
    stale = days_since_last_growth is not None and (
        days_since_last_growth > stale_growth_days
    )
    if stale:
        return OverallStatus(
            status=OverallStatusLevel.NEEDS_ATTENTION,
            message="Growth data needs an update",
            priority=Priority.HIGH,
        )
    average = (calorie_compliance + protein_compliance) / 2
    if average >= EXCELLENT_THRESHOLD and consistency >= EXCELLENT_THRESHOLD:
        return OverallStatus(
            status=OverallStatusLevel.EXCELLENT,
            message="Tracking and nutrition are excellent",
            priority=Priority.LOW,
        )
    if average >= GOOD_THRESHOLD and consistency >= GOOD_THRESHOLD:
        return OverallStatus(
            status=OverallStatusLevel.GOOD,
            message="Tracking and nutrition are good",
            priority=Priority.LOW,
        )
    return OverallStatus(
        status=OverallStatusLevel.NEEDS_IMPROVEMENT,
        message="Track meals more consistently",
        priority=Priority.MEDIUM,
    )


def growth_trend_from_recent(
    records: Sequence[GrowthRecord],
    as_of: datetime,
    lookback_days: int = 90,
    min_records: int = MIN_TREND_RECORDS,
    limit: int = 10,
    weight_epsilon: float = WEIGHT_EPSILON_KG,
    tz: ZoneInfo = UTC_ZONE,
) -> GrowthTrend:
    """Return the trend over the most recent records inside the lookback window."""
    cutoff = as_instant(as_of, tz) - timedelta(days=lookback_days)
    in_window = [
        record
        for record in records_as_of(records, as_of, tz)
        if as_instant(record.record_date, tz) >= cutoff
    ]
    recent = in_window[max(len(in_window) - limit, 0) :]
    if len(recent) < min_records:
        return GrowthTrend(
            weight=STABLE_TREND,
            height=STABLE_TREND,
            bmi=STABLE_TREND,
            records_count=len(recent),
        )
    return analyze_growth(recent, weight_epsilon, tz)


def days_since(moment: datetime, as_of: datetime, tz: ZoneInfo = UTC_ZONE) -> int:
    """Return whole days elapsed from ``moment`` to ``as_of``.

    Naive timestamps are read as wall-clock time in ``tz``.
    """
    elapsed = as_instant(as_of, tz) - as_instant(moment, tz)
    return math.floor(elapsed.total_seconds() / SECONDS_PER_DAY)


@dataclass
class DashboardService:
    """Builds dashboard snapshots from a child's records."""

    timezone_name: str = "UTC"
    reminder_horizon_minutes: int = 120
    growth_lookback_days: int = 90
    growth_recent_limit: int = 10
    stale_growth_days: int = STALE_GROWTH_DAYS
    growth_update_days: int = 30
    weight_trend_epsilon: float = WEIGHT_EPSILON_KG
    debug: bool = False

    def build_snapshot(  # noqa: PLR0913
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        food_logs: Sequence[FoodLogEntry],
        reminders: Sequence[ReminderEntry],
        as_of: datetime,
    ) -> DashboardSnapshot:
        """Return the child's dashboard as of ``as_of``."""
        tz = ZoneInfo(self.timezone_name)
        now = local_now(as_of, tz)
        today = now.date()
        week_start = start_of_week(today)
        month_start = today.replace(day=1)

        age_months = age_in_months(child.birth_date, as_of)
        known_records = records_as_of(growth_records, as_of, tz)
        latest = known_records[-1] if known_records else None
        target = self._target(child, known_records, as_of, tz)

        today_logs = entries_between(food_logs, today, today, tz)
        week_logs = entries_between(food_logs, week_start, today, tz)
        month_logs = entries_between(food_logs, month_start, today, tz)

        consumed = daily_totals(today_logs)
        week_totals = daily_totals(week_logs)
        days_this_week = (today - week_start).days + 1
        calorie_compliance = compliance(consumed.calories, target.calories)
        protein_compliance = compliance(consumed.protein, target.protein)

        days_with_logs = len({local_day(log.log_date, tz) for log in month_logs})
        consistency = tracking_consistency(
            days_with_logs, days_in_month(today.year, today.month), today.day
        )

        trend = growth_trend_from_recent(
            known_records,
            as_of,
            lookback_days=self.growth_lookback_days,
            limit=self.growth_recent_limit,
            weight_epsilon=self.weight_trend_epsilon,
            tz=tz,
        )
        since_growth = days_since(latest.record_date, as_of, tz) if latest else None
        status = overall_status(
            calorie_compliance,
            protein_compliance,
            consistency,
            since_growth,
            self.stale_growth_days,
        )

        active = [reminder for reminder in reminders if reminder.is_active]
        upcoming = upcoming_reminders(active, now, self.reminder_horizon_minutes)
        soonest = next_reminder(active, now)

        if self.debug:
            _logger.info(
                "Dashboard built: child_id=%s status=%s logs_today=%s",
                child.id,
                status.status.value,
                len(today_logs),
            )

        return DashboardSnapshot(
            child=ChildSummary(
                id=child.id,
                name=child.name,
                age_in_months=age_months,
                age_display=age_display(age_months),
            ),
            growth=GrowthSection(
                current=_current_growth(latest),
                trend=trend.weight.direction,
                days_since_last_record=since_growth,
                needs_update=(
                    since_growth is not None and since_growth > self.growth_update_days
                ),
                total_records=trend.records_count,
            ),
            nutrition=NutritionSection(
                today=TodayNutrition(
                    consumed=ConsumedNutrients(
                        calories=consumed.calories,
                        protein=consumed.protein,
                        carbs=consumed.carbs,
                        fat=consumed.fat,
                    ),
                    targets=TodayTargets(
                        calories=round_int(target.calories),
                        protein=target.protein,
                    ),
                    compliance=TodayCompliance(
                        calories=round_int(calorie_compliance),
                        protein=round_int(protein_compliance),
                    ),
                    meals_logged=len(today_logs),
                    meal_frequency={
                        meal.value: count
                        for meal, count in meal_frequency(today_logs).items()
                    },
                ),
                weekly=WeeklyNutrition(
                    avg_calories=round_int(week_totals.calories / days_this_week),
                    avg_protein=round_int(week_totals.protein / days_this_week),
                    total_logs=len(week_logs),
                ),
                monthly=MonthlyNutrition(
                    total_logs=len(month_logs),
                    tracking_consistency=consistency,
                    days_with_logs=days_with_logs,
                ),
            ),
            reminders=RemindersSection(
                total=len(active),
                upcoming=[_reminder_summary(reminder) for reminder in upcoming],
                next_reminder=(
                    NextReminderSummary(
                        **_reminder_summary(soonest.reminder).model_dump(),
                        hours_until=soonest.hours_part,
                        minutes_until=soonest.minutes_part,
                    )
                    if soonest
                    else None
                ),
            ),
            summary=SummarySection(
                total_food_logs=len(food_logs),
                last_updated=as_of,
                overall_status=OverallStatusSummary(
                    status=status.status,
                    message=status.message,
                    priority=status.priority,
                ),
            ),
        )

    def build_overview(
        self, children: Sequence[ChildRecords], as_of: datetime
    ) -> DashboardOverview:
        """Return a compact summary row per child."""
        tz = ZoneInfo(self.timezone_name)
        today = local_now(as_of, tz).date()
        rows = []
        for bundle in children:
            known_records = records_as_of(bundle.growth_records, as_of, tz)
            latest = known_records[-1] if known_records else None
            rows.append(
                ChildOverview(
                    id=bundle.child.id,
                    name=bundle.child.name,
                    age_in_months=age_in_months(bundle.child.birth_date, as_of),
                    today_logs=len(
                        entries_between(bundle.food_logs, today, today, tz)
                    ),
                    active_reminders=sum(
                        1 for reminder in bundle.reminders if reminder.is_active
                    ),
                    last_growth_record=latest.record_date if latest else None,
                    nutrition_status=(
                        latest.nutrition_status.value if latest else "unknown"
                    ),
                )
            )
        return DashboardOverview(
            total_children=len(rows), children=rows, last_updated=as_of
        )

    def _target(
        self,
        child: ChildProfile,
        growth_records: Sequence[GrowthRecord],
        as_of: datetime,
        tz: ZoneInfo,
    ) -> NutritionTarget:
        try:
            return target_for_child(child, growth_records, as_of, tz)
        except MissingGrowthDataError:
            _logger.warning(
                "Dashboard targets unavailable without growth data: child_id=%s",
                child.id,
            )
            return _ZERO_TARGET


def _current_growth(record: GrowthRecord | None) -> CurrentGrowth | None:
    if record is None:
        return None
    return CurrentGrowth(
        weight=record.weight,
        height=record.height,
        bmi=record.bmi,
        nutrition_status=record.nutrition_status,
        record_date=record.record_date,
    )


def _reminder_summary(reminder: ReminderEntry) -> ReminderSummary:
    return ReminderSummary(
        id=reminder.id,
        title=reminder.title,
        time=reminder.time,
        type=reminder.type,
    )

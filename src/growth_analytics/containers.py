"""Dependency container wiring for the analytics engine."""

from dataclasses import dataclass

from growth_analytics.config import Settings
from growth_analytics.services.dashboard import DashboardService
from growth_analytics.services.growth import GrowthService
from growth_analytics.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds engine-wide services built from one set of settings."""

    settings: Settings
    growth_service: GrowthService
    dashboard_service: DashboardService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default service container."""
    resolved_settings = settings or Settings()
    growth_service = GrowthService(status_table=resolved_settings.status_table)
    dashboard_service = DashboardService(
        timezone_name=resolved_settings.timezone_name,
        reminder_horizon_minutes=resolved_settings.reminder_horizon_minutes,
        growth_lookback_days=resolved_settings.growth_lookback_days,
        growth_recent_limit=resolved_settings.growth_recent_limit,
        stale_growth_days=resolved_settings.stale_growth_days,
        growth_update_days=resolved_settings.growth_update_days,
        weight_trend_epsilon=resolved_settings.weight_trend_epsilon,
        debug=resolved_settings.debug,
    )
    report_service = ReportService(
        timezone_name=resolved_settings.timezone_name,
        target_meals_per_day=resolved_settings.target_meals_per_day,
        weight_trend_epsilon=resolved_settings.weight_trend_epsilon,
        compliance_report_days=resolved_settings.compliance_report_days,
        export_default_days=resolved_settings.export_default_days,
        trend_report_months=resolved_settings.trend_report_months,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        growth_service=growth_service,
        dashboard_service=dashboard_service,
        report_service=report_service,
    )

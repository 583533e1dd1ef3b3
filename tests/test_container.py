"""Tests for the service container."""

from growth_analytics.config import Settings, StatusTable
from growth_analytics.containers import AppContainer, build_container


def test_build_container_wires_settings(container: AppContainer) -> None:
    assert container.settings.timezone_name == "UTC"
    assert container.growth_service.status_table is StatusTable.AGE_BRACKETED
    assert container.dashboard_service.reminder_horizon_minutes == 120
    assert container.dashboard_service.growth_update_days == 30
    assert container.report_service.compliance_report_days == 30
    assert container.report_service.export_default_days == 90


def test_build_container_passes_overrides_to_services() -> None:
    settings = Settings(
        timezone_name="Asia/Jakarta",
        status_table=StatusTable.FLAT,
        reminder_horizon_minutes=60,
        target_meals_per_day=5,
        debug=True,
    )

    container = build_container(settings)

    assert container.settings is settings
    assert container.growth_service.status_table is StatusTable.FLAT
    assert container.dashboard_service.timezone_name == "Asia/Jakarta"
    assert container.dashboard_service.reminder_horizon_minutes == 60
    assert container.dashboard_service.debug is True
    assert container.report_service.timezone_name == "Asia/Jakarta"
    assert container.report_service.target_meals_per_day == 5

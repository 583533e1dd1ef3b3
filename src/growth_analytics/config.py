"""Application configuration."""

import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class StatusTable(str, Enum):
    """BMI threshold table used to classify nutrition status."""

    AGE_BRACKETED = "age_bracketed"
    FLAT = "flat"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    timezone_name: str = "UTC"
    status_table: StatusTable = StatusTable.AGE_BRACKETED
    reminder_horizon_minutes: int = 120
    growth_lookback_days: int = 90
    growth_recent_limit: int = 10
    stale_growth_days: int = 60
    growth_update_days: int = 30
    target_meals_per_day: int = 4
    weight_trend_epsilon: float = 0.2
    compliance_report_days: int = 30
    export_default_days: int = 90
    trend_report_months: int = 12
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="GROWTH_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

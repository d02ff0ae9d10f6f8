from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Forecast Builder"
    log_level: str = "INFO"
    fallback_annual_salary: float = 80000.0
    budget_warning_percent: float = 85.0

    model_config = SettingsConfigDict(env_prefix="FORECAST_BUILDER_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Configuration settings for the application."""
from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through HOLICAL_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="HOLICAL_", env_file=".env", case_sensitive=False)

    app_name: str = "HOLICAL"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "info"

    default_country: str = "US"
    holiday_source: str = "python-holidays"
    cors_origins: List[str] = ["*"]

    # Countries offered in the calendar dropdown
    countries: Dict[str, str] = {
        "US": "United States",
        "IN": "India",
        "GB": "United Kingdom",
        "FR": "France",
        "DE": "Germany",
        "JP": "Japan",
    }


settings = Settings()

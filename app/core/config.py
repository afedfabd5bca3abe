"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Sleep Consistency Tracker"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Roberto Martelloni"]
    AUTHORS_EMAILS: List[str] = ["rmartelloni@gmail.com"]
    PROJECT_URL: str = "https://github.com/boos/sleep-tracker"

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Tracker defaults (hours)
    TARGET_SLEEP_DURATION: float = 8.0
    MIN_SLEEP_DURATION: float = 6.0
    MAX_WEEKEND_CATCHUP_HOURS: float = 3.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()

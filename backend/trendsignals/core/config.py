"""
Application Configuration

All settings loaded from environment variables.
"""

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "TrendSignals Engine"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # SuperTrend defaults (used when a request carries no config)
    supertrend_period: int = 10
    supertrend_multiplier: float = 3.0
    warmup_bars: int = 10  # Extra bars beyond period before a signal is trusted

    # Bar history
    default_lookback: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = None) -> None:
    """Configure root logging once for scripts and services."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


settings = get_settings()

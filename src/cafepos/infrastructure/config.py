"""Application configuration.

Values come from ``CAFEPOS_``-prefixed environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Fields are type-checked and validated. Defaults are provided where
    appropriate.
    """

    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    # Storage
    database_url: str = "sqlite:///cafepos.db"
    seed_sample_products: bool = True

    # Reporting
    timezone: str = "UTC"
    recent_orders_limit: int = Field(default=5, ge=1)
    top_products_limit: int = Field(default=5, ge=1)
    revenue_trend_days: int = Field(default=7, ge=1)
    popular_window_days: int = Field(default=30, ge=1)
    performance_default_limit: int = Field(default=10, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="CAFEPOS_", env_file=".env", env_file_encoding="utf-8"
    )

    @property
    def exposes_error_details(self) -> bool:
        """Whether storage error messages may be shown to API callers."""
        return self.app_env.lower() in ("local", "development")


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def set_config_for_test(**kwargs) -> AppConfig:
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
    return _config

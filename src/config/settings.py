"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Live Series Chart"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_positive(self) -> "Settings":
        for field_name in (
            "poll_interval_seconds",
            "fetch_timeout",
            "canvas_width",
            "canvas_height",
            "sample_point_count",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_sample_range(self) -> "Settings":
        if self.sample_value_min > self.sample_value_max:
            raise ValueError(
                f"sample_value_min ({self.sample_value_min}) must not exceed "
                f"sample_value_max ({self.sample_value_max})"
            )
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting in production"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Series source
    data_url: str = "http://localhost:8000/api/data"
    local_data_url: str = "http://localhost:8000/api/data"
    anychart_data_url: str = "http://static.anychart.com/cdn/anydata/common/11.json"
    fetch_timeout: float = 10.0

    # Polling
    poll_interval_seconds: int = 5
    poll_on_startup: bool = True

    # Rendering surface
    canvas_width: int = 800
    canvas_height: int = 400

    # Sample data endpoint
    sample_point_count: int = 10
    sample_value_min: int = -100
    sample_value_max: int = 99

    @property
    def poll_interval_ms(self) -> int:
        """Poll interval converted for the poller."""
        return self.poll_interval_seconds * 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

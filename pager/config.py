"""Configuration management for the pager library."""

import logging
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process-wide pagination defaults with environment variable support.

    Every field can be overridden per call through a ``LimitConfig``; these
    values are only consulted when the caller leaves a field unset.
    """

    # Limit settings
    default_limit: int = Field(default=25, ge=1, description="Page size when none is requested")
    max_limit: int = Field(default=100, ge=1, description="Largest page size allowed")
    min_limit: int = Field(default=1, ge=1, description="Smallest page size allowed")
    overflow: Literal["saturate", "default"] = "saturate"
    underflow: Literal["saturate", "default"] = "saturate"

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("overflow", "underflow", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        """Accept boundary modes in any case."""
        if isinstance(v, str):
            return v.lower()
        return v

    @model_validator(mode="after")
    def validate_limit_range(self):
        """Ensure the configured limits describe a usable range."""
        if self.min_limit > self.max_limit:
            raise ValueError(
                f"min_limit ({self.min_limit}) cannot exceed max_limit ({self.max_limit})"
            )
        return self

    model_config = {
        "env_prefix": "PAGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "frozen": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get library settings."""
    return settings


def configure_logging(app_settings: Settings | None = None) -> None:
    """Apply the configured log level and format to the root logger."""
    app_settings = app_settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level),
        format=app_settings.log_format
    )
    logging.getLogger().setLevel(getattr(logging, app_settings.log_level))

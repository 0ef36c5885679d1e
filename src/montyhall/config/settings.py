"""Application configuration schema and validation."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MONTYHALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_n_games: int = Field(
        default=100,
        ge=1,
        description="Default number of games played by a batch run",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the batch random generator (None = fresh entropy)",
    )
    round_digits: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places used for the proportion table",
    )
    confidence_level: float = Field(
        default=0.95,
        gt=0.0,
        lt=1.0,
        description="Confidence level for win-rate intervals",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the singleton AppConfig instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reset_config() -> None:
    """Drop the cached AppConfig so the next get_config() re-reads the environment."""
    global _config
    _config = None

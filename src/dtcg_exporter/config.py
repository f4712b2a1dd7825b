"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dtcg_exporter.domain.value_objects import ColorFormat, DimensionUnit


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with DTCG_) or .env file.

    Examples:
        DTCG_COLOR_FORMAT=oklch
        DTCG_DEFAULT_UNIT=rem
        DTCG_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="DTCG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "DTCG Token Exporter"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] = Field(
        default=None,
        validate_default=True,
        description="Log output format; unset means json in production, console otherwise",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # API Server
    api_host: str = "127.0.0.1"
    api_port: int = Field(default=8000, ge=1, le=65535)

    # Export defaults (CLI flags and request configs take precedence)
    default_unit: DimensionUnit = DimensionUnit.PX
    color_format: ColorFormat = ColorFormat.HEX
    include_descriptions: bool = True
    resolve_references: bool = False
    output_dir: Path = Field(
        default=Path("tokens"),
        description="Directory the CLI writes token files into",
    )
    json_indent: int = Field(default=2, ge=0, le=8)

    @field_validator("log_format", mode="before")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        if v:
            return v
        if info.data.get("environment") == Environment.PRODUCTION:
            return "json"
        return "console"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()

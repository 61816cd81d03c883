"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables and an optional ``.env``
file. The only configuration group today is logging:

- LoggingConfig: console/file levels and the optional log file
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    # No file sink unless a path is configured
    log_file: Path | None = None
    real_time_debug: bool = True


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, FILE_LOG_LEVEL, LOG_FILE
    - Nested: LOGGING__CONSOLE_LEVEL, LOGGING__LOG_FILE
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat logging env vars (CONSOLE_LOG_LEVEL) onto ``logging.*``.

        Flat names are not fields, so they are read from the environment
        directly; nested ``LOGGING__*`` values win over them.
        """
        if not isinstance(data, dict):
            return data

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        nested = {}
        for env_key, field_key in log_mapping.items():
            value = data.pop(env_key, None) or os.environ.get(env_key.upper())
            if value is not None:
                nested[field_key] = value

        if nested:
            existing = data.get("logging")
            if isinstance(existing, dict):
                nested = {**nested, **existing}
            data["logging"] = nested

        return data


# Singleton instance for application use
settings = Settings()

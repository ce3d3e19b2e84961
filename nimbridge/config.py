"""Centralized configuration for nimbridge.

Uses pydantic-settings for environment variable loading and validation.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NimbridgeSettings(BaseSettings):
    """Settings for nimbridge.

    Environment variables:
        NIMBRIDGE_NIM_PATH: Explicit path to the `nim` executable
        NIMBRIDGE_LOG_LEVEL: Logging level
        NIMBRIDGE_LOG_JSON: Enable JSON log format
        NIMBRIDGE_LOG_FILE: Optional JSON log file
    """

    model_config = SettingsConfigDict(
        env_prefix="NIMBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    nim_path: Path | None = Field(
        default=None,
        description="Path to the nim executable (defaults to ~/.nimbella/cli/bin/nim)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Enable JSON log format",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file (always JSON)",
    )


settings = NimbridgeSettings()

# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EXPLORER__API_URL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "ledger-history"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/ledger_history.log"
    # Rotated daily at UTC midnight; number of rotated files kept
    log_file_backup_count: int = Field(default=30, ge=0)

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ExplorerSettings(BaseSettings):
    """Block explorer API (Etherscan-compatible txlist endpoint)."""

    model_config = SettingsConfigDict(extra="ignore")

    api_url: str = Field(
        default="https://api.etherscan.io/api",
        description="Explorer API endpoint (queried with module/action params).",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Optional API key, sent as apikey when set.",
    )
    call_interval_seconds: float = Field(
        default=0.21,
        gt=0.0,
        le=60.0,
        description="Minimum spacing between two calls; etherscan allows one call per 0.2s.",
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        ge=1.0,
        le=300.0,
        description="Total HTTP timeout in seconds. Unset means no client-side deadline.",
    )


class HistorySettings(BaseSettings):
    """Account whose history the CLI fetches (HISTORY__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    address: str = Field(default="", description="Account address (0x...). Env: HISTORY__ADDRESS.")
    end_block: int = Field(
        default=99999999,
        ge=0,
        description="Upper block bound; the default is the explorer's 'latest' sentinel.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EXPLORER__API_KEY.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    explorer: ExplorerSettings = Field(default_factory=ExplorerSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(explorer={"call_interval_seconds": 0.5}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from ledger_history.config import get_settings

        settings = get_settings()
        interval = settings.explorer.call_interval_seconds
    """
    return Settings()

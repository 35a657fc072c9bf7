"""Configuration subpackage."""

from ledger_history.config.config import (
    AppSettings,
    ExplorerSettings,
    HistorySettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ExplorerSettings",
    "HistorySettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]

"""Configuration module for the AnkiTrans application"""

from .settings import (
    AnkiSettings,
    AppSettings,
    DictionarySettings,
    LoggingSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "AnkiSettings",
    "DictionarySettings",
    "LoggingSettings",
    "settings",
]

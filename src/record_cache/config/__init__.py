"""Configuration module for record-cache."""

from .settings import RecordCacheSettings, get_settings
from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "RecordCacheSettings",
    "get_settings",
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]

"""Centralized logging configuration for record-cache.

Provides consistent, configurable logging with environment-based control
over verbosity and log format.
"""

import json
import logging
import logging.config
import os
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


def get_format_string(log_format: str) -> str:
    """Map a text log format name to a logging format string."""
    if log_format == LogFormat.DETAILED.value:
        return "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    return "%(asctime)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Formatter writing each record as one JSON object per line."""
    
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Package loggers configured on setup
    PACKAGE_LOGGERS = [
        "record_cache",
    ]
    
    @classmethod
    def build_config(cls, log_verbosity: str, log_format: str) -> dict:
        """Build a dictConfig mapping for the given verbosity and format."""
        effective_log_level = get_log_level_from_verbosity(log_verbosity)
        
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": cls._formatter_config(log_format),
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {},
        }
        
        for module in cls.PACKAGE_LOGGERS:
            logging_config["loggers"][module] = {
                "level": effective_log_level,
                "handlers": ["console"],
                "propagate": True,
            }
        
        return logging_config
    
    @staticmethod
    def _formatter_config(log_format: str) -> Dict[str, Any]:
        if log_format == LogFormat.JSON.value:
            return {"()": JSONFormatter}
        return {
            "format": get_format_string(log_format),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
    
    @classmethod
    def configure(
        cls,
        log_verbosity: Optional[str] = None,
        log_format: Optional[str] = None
    ) -> None:
        """Configure logging, falling back to environment variables."""
        log_verbosity = (log_verbosity or os.getenv("LOG_VERBOSITY", "NORMAL")).upper()
        log_format = (log_format or os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value)).lower()
        
        logging.config.dictConfig(cls.build_config(log_verbosity, log_format))
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: verbosity={log_verbosity}, format={log_format}")
    
    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.
        
        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logger = logging.getLogger(module_name)
        logger.setLevel(getattr(logging, level.upper()))


def setup_logging(settings=None) -> None:
    """Setup logging configuration.
    
    Uses the given RecordCacheSettings when provided, environment variables
    otherwise. It should be called once at application startup.
    """
    if settings is None:
        LoggingConfig.configure()
    else:
        LoggingConfig.configure(settings.log_verbosity, settings.log_format)

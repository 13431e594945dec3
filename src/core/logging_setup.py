"""
Logging configuration.
JSON-formatted records for the API and its libraries.
"""
import logging
import logging.config
from typing import Any, Dict
from src.core.config import settings


def build_logging_config(level: str) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "level": level,
            },
        },
        "loggers": {
            "src": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        },
    }


def setup_logging(level: str = None) -> None:
    """Apply the logging configuration; defaults to the configured log level."""
    logging.config.dictConfig(build_logging_config((level or settings.log_level).upper()))

"""Application logging setup.

Call ``configure_logging()`` once at process start, then take module loggers
from ``get_logger(__name__)``.

Example:
    >>> from src.core.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

from src.core.config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds application context."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["environment"] = settings.ENVIRONMENT
        log_record["app"] = settings.PROJECT_NAME


def build_formatter() -> logging.Formatter:
    if settings.is_production:
        # JSON format for production (easier to parse in log aggregation systems)
        return CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
    return logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def configure_logging():
    """Configure application-wide logging settings with JSON format for production."""

    log_level = logging.WARNING if settings.is_production else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,  # Override any existing configuration
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper level configuration.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    # Child loggers inherit handlers from root, so we only need to set level
    logger.setLevel(logging.DEBUG if not settings.is_production else logging.INFO)

    return logger

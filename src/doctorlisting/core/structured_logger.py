"""
Structured logging utilities for application-wide logging
"""

import json
import logging
import sys
from datetime import datetime

from .config import Settings

LOGGER_NAME = "doctorlisting"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process": record.process,
        }

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)

        return json.dumps(log_obj, default=str)


def configure_logging(settings: Settings) -> logging.Logger:
    """Install a stdout handler on the service logger per LOG_FORMAT / LOG_LEVEL.

    Safe to call more than once; the handler is only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.logging.level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if settings.logging.format == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(TEXT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger in the service namespace."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)

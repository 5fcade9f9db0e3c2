"""Logging infrastructure for Pantry Chef.

Provides centralized logging with configurable format (text/JSON) and level.
Configured via environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_TYPE: text, json (default: text)
"""

import json
import logging
import os
import sys
from typing import Any


# Optional LogRecord attributes passed through `extra=` by the generation pipeline
EXTRA_FIELDS = ("outcome", "recipe_id", "ingredient_count")


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string with timestamp, level, logger name, message, generation
            extras when present, and optional traceback.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ColorTextFormatter(logging.Formatter):
    """Formatter that outputs a single colored console line per record."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as colored text.

        Args:
            record: Log record to format.

        Returns:
            "<time> <LEVEL> <logger> <message>" wrapped in the level's color,
            followed by `key=value` pairs for any generation extras.
        """
        level = record.levelname
        color = self.COLORS.get(level, "")
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")

        extras = " ".join(
            f"{field}={getattr(record, field)}" for field in EXTRA_FIELDS if hasattr(record, field)
        )
        message = f"{timestamp} {level:<8} {record.name:<12} {record.getMessage()}"
        if extras:
            message = f"{message} [{extras}]"
        message = f"{color}{message}{self.RESET}" if color else message

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def get_logger(name: str) -> logging.Logger:
    """Create and configure logger instance.

    Args:
        name: Logger name, typically module name.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)

    # Return existing logger if already configured
    if logger_instance.handlers:
        return logger_instance

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_type = os.getenv("LOG_TYPE", "text").lower()

    log_level = getattr(logging, log_level_str, logging.INFO)
    logger_instance.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if log_type == "json" else ColorTextFormatter())
    logger_instance.addHandler(handler)

    return logger_instance


# Create module-level logger instance
logger = get_logger("pantry_chef")

# Keep SDK and server chatter out of the service log
logging.getLogger("google_genai").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Logger configuration for conform.

This module configures the standard ``logging`` package for the ``conform``
logger hierarchy, with a formatter that renders ``extra`` context either as
``key=value`` pairs or as JSON lines.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
import threading
import uuid
from logging import StreamHandler
from typing import Any

from conform.logging.config import LoggingSettings
from conform.logging.level import LogLevel

ROOT_LOGGER_NAME = "conform"

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_configure_lock = threading.Lock()

# records propagate to the host application until configure_logging is called
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(name)s: %(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **{key: self._json_value(value) for key, value in extra.items()},
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])
        return json.dumps(log_data)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _json_value(self, value: Any) -> Any:
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            return self._format_value(value)
        return value

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, type):
            return value.__qualname__
        if isinstance(value, dict | list | tuple):
            try:
                return json.dumps(value)
            except TypeError:
                return str(value)
        return str(value)


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Configure the ``conform`` logger hierarchy.

    Applications and the CLI call this explicitly; importing conform never
    installs handlers. Existing handlers on the package logger are replaced,
    so calling this again with different settings reconfigures logging.

    Args:
        settings: Logging settings (loaded from the environment if None)

    Returns:
        The configured package logger
    """
    settings = settings or LoggingSettings.load()
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    with _configure_lock:
        logger.setLevel(LogLevel.from_string(settings.level).to_stdlib_level())

        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        if settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(
                StructuredFormatter(
                    json_format=settings.json_format,
                    include_timestamp=settings.include_timestamp,
                    include_level=settings.include_level,
                )
            )
            logger.addHandler(console)

        logger.propagate = settings.propagate

    return logger


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a logger within the ``conform`` hierarchy.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.to_stdlib_level())
    return logger

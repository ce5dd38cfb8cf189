# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform

"""
Public API for conform logging.

Loggers are standard-library loggers under the ``conform`` hierarchy,
configured from ``LoggingSettings``.
"""

from __future__ import annotations

from conform.logging.config import LoggingSettings
from conform.logging.level import LogLevel
from conform.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]

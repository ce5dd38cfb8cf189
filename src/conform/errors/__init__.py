# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform

"""
Error handling for conform.
"""

from __future__ import annotations

from conform.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ConformError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

__all__ = [
    "INTERNAL",
    "INTERNAL_ERROR",
    "ConformError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
]

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Base error classes and utilities for the conform error handling system.

This module provides the foundation for structured error handling with
error codes, contextual information, and error categories.
"""

from __future__ import annotations

import threading
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar, Final


class ErrorSeverity(str, Enum):
    """Severity levels for errors raised by conform."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    FATAL = "fatal"


_registry_lock = threading.Lock()


class ErrorCategory:
    """Named group of error codes.

    Categories are interned by name: ``get_or_create`` always returns the
    same instance for a given name.
    """

    _registered: ClassVar[dict[str, ErrorCategory]] = {}

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def get_or_create(cls, name: str) -> ErrorCategory:
        """Get the registered category with this name, registering it if new."""
        with _registry_lock:
            if name not in cls._registered:
                cls._registered[name] = cls(name)
            return cls._registered[name]


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode:
    """Error code associated with a category."""

    _registered: ClassVar[dict[str, ErrorCode]] = {}

    def __init__(self, code: str, category: ErrorCategory = INTERNAL) -> None:
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, code: str, category: ErrorCategory) -> ErrorCode:
        """Get the registered code, registering it under ``category`` if new.

        Raises:
            ValueError: If the code is already registered under another category
        """
        with _registry_lock:
            existing = cls._registered.get(code)
            if existing is None:
                existing = cls._registered[code] = cls(code, category)
            elif existing.category != category:
                raise ValueError(
                    f"Error code '{code}' is already registered under "
                    f"category '{existing.category}'"
                )
            return existing


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class ConformError(Exception):
    """
    Base error class for conform errors.
    Should only be subclassed for package-specific errors, not instantiated directly.
    """

    message: str
    code: ErrorCode
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> ConformError:
        if cls is ConformError:
            raise TypeError(
                "Do not instantiate ConformError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error (never instantiate ConformError directly).

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys merged into ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.code = code
        self.message = message
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format 'code: message'
        """
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error.

        Returns:
            Dictionary with all error properties
        """
        return {
            "code": str(self.code),
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Template-specific error classes for conform.

Configuration errors describe type definitions that cannot be turned into a
template (missing subtype tags, inconsistent discriminators, and so on).
Internal errors signal states the extraction logic should never reach.
"""

from __future__ import annotations

from typing import Any, Final

from conform.errors.base import (
    INTERNAL,
    ConformError,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
)

TEMPLATE = ErrorCategory.get_or_create("TEMPLATE")
TEMPLATE_ERROR: Final = ErrorCode.get_or_create("TEMPLATE_ERROR", TEMPLATE)
TEMPLATE_CONFIGURATION_ERROR: Final = ErrorCode.get_or_create(
    "TEMPLATE_CONFIGURATION_ERROR", TEMPLATE
)
TEMPLATE_NO_VARIANTS: Final = ErrorCode.get_or_create("TEMPLATE_NO_VARIANTS", TEMPLATE)
TEMPLATE_DISCRIMINATOR_MISMATCH: Final = ErrorCode.get_or_create(
    "TEMPLATE_DISCRIMINATOR_MISMATCH", TEMPLATE
)
TEMPLATE_MISSING_MATCH_RULE: Final = ErrorCode.get_or_create(
    "TEMPLATE_MISSING_MATCH_RULE", TEMPLATE
)
TEMPLATE_MISSING_SUBTYPE: Final = ErrorCode.get_or_create(
    "TEMPLATE_MISSING_SUBTYPE", TEMPLATE
)
TEMPLATE_RECURSIVE_TYPE: Final = ErrorCode.get_or_create(
    "TEMPLATE_RECURSIVE_TYPE", TEMPLATE
)
TEMPLATE_UNRESOLVED_PROPERTY_TYPE: Final = ErrorCode.get_or_create(
    "TEMPLATE_UNRESOLVED_PROPERTY_TYPE", INTERNAL
)


def type_name(tp: Any) -> str:
    """Readable name of a type for error messages and context."""
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


class TemplateError(ConformError):
    """Base class for all template generation errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = TEMPLATE_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class TemplateConfigurationError(TemplateError):
    """Raised when a type definition cannot be turned into template properties.

    These errors are fatal for the extraction call that detected them.
    """

    def __init__(
        self,
        message: str,
        type_: Any | None = None,
        variant: Any | None = None,
        field_name: str | None = None,
        code: ErrorCode = TEMPLATE_CONFIGURATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.FATAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        config_kwargs = kwargs.copy()
        if type_ is not None:
            config_kwargs["type"] = type_name(type_)
        if variant is not None:
            config_kwargs["variant"] = type_name(variant)
        if field_name:
            config_kwargs["field_name"] = field_name

        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **config_kwargs,
        )


class TemplateInternalError(TemplateError):
    """Raised when extraction reaches a state its own logic should rule out."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = TEMPLATE_UNRESOLVED_PROPERTY_TYPE,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""Template generation settings.

Values are read from ``CONFORM_TEMPLATE_*`` environment variables.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DISCRIMINATOR_GROUP = "settings"


class TemplateSettings(BaseSettings):
    """Settings that influence how template properties are derived."""

    model_config = SettingsConfigDict(
        env_prefix="CONFORM_TEMPLATE_",
        extra="ignore",
        case_sensitive=False,
    )

    discriminator_group: str = Field(
        default=DEFAULT_DISCRIMINATOR_GROUP,
        description="Group assigned to synthesized discriminator properties",
    )
    enum_choice_source: Literal["name", "value"] = Field(
        default="name",
        description="Enum member attribute used as the dropdown choice value",
    )

    @field_validator("discriminator_group")
    @classmethod
    def validate_group(cls, v: str) -> str:
        """Reject blank group identifiers."""
        if not v.strip():
            raise ValueError("discriminator_group must not be blank")
        return v

    @classmethod
    def load(cls) -> TemplateSettings:
        """Load template settings from the environment or defaults."""
        return cls()

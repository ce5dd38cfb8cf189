# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
import pytest
from pydantic import ValidationError

from conform.config import DEFAULT_DISCRIMINATOR_GROUP, TemplateSettings


def test_defaults() -> None:
    settings = TemplateSettings.load()
    assert settings.discriminator_group == DEFAULT_DISCRIMINATOR_GROUP == "settings"
    assert settings.enum_choice_source == "name"


def test_environment(monkeypatch) -> None:
    monkeypatch.setenv("CONFORM_TEMPLATE_DISCRIMINATOR_GROUP", "authentication")
    monkeypatch.setenv("CONFORM_TEMPLATE_ENUM_CHOICE_SOURCE", "value")

    settings = TemplateSettings.load()

    assert settings.discriminator_group == "authentication"
    assert settings.enum_choice_source == "value"


def test_blank_group_rejected() -> None:
    with pytest.raises(ValidationError):
        TemplateSettings(discriminator_group="  ")


def test_unknown_choice_source_rejected() -> None:
    with pytest.raises(ValidationError):
        TemplateSettings(enum_choice_source="label")

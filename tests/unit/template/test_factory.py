# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
from enum import Enum
from typing import Literal, Optional

import pytest

from conform.config.settings import TemplateSettings
from conform.template.dsl import (
    BooleanProperty,
    DropdownChoice,
    DropdownProperty,
    HiddenProperty,
    StringProperty,
    TextProperty,
)
from conform.template.errors import (
    TEMPLATE_UNRESOLVED_PROPERTY_TYPE,
    TemplateInternalError,
)
from conform.template.factory import _build, create_property
from conform.template.metadata import PropertyType, TemplateProperty


class QueueType(Enum):
    standard = "STANDARD"
    fifo = "FIFO"


def test_bool_becomes_boolean() -> None:
    prop = create_property(bool)
    assert isinstance(prop, BooleanProperty)
    assert prop.type == "Boolean"


def test_optional_bool_becomes_boolean() -> None:
    assert isinstance(create_property(Optional[bool]), BooleanProperty)


@pytest.mark.parametrize("tp", [str, int, float, list[str], dict[str, str]])
def test_other_types_become_string(tp) -> None:
    assert isinstance(create_property(tp), StringProperty)


def test_draft_has_no_id_or_label() -> None:
    prop = create_property(str)
    assert prop.id == ""
    assert prop.label == ""


def test_enum_becomes_dropdown_of_member_names() -> None:
    prop = create_property(QueueType)
    assert isinstance(prop, DropdownProperty)
    assert prop.choices == (
        DropdownChoice(label="Standard", value="standard"),
        DropdownChoice(label="Fifo", value="fifo"),
    )


def test_enum_values_when_configured() -> None:
    prop = create_property(
        QueueType, settings=TemplateSettings(enum_choice_source="value")
    )
    assert [choice.value for choice in prop.choices] == ["STANDARD", "FIFO"]


def test_literal_becomes_dropdown() -> None:
    prop = create_property(Literal["eu", "us"])
    assert isinstance(prop, DropdownProperty)
    assert [(c.label, c.value) for c in prop.choices] == [("Eu", "eu"), ("Us", "us")]


class TestExplicitKind:
    def test_explicit_kind_wins_over_inference(self) -> None:
        prop = create_property(bool, TemplateProperty(type=PropertyType.STRING))
        assert isinstance(prop, StringProperty)

    def test_text(self) -> None:
        prop = create_property(str, TemplateProperty(type=PropertyType.TEXT))
        assert isinstance(prop, TextProperty)

    def test_hidden(self) -> None:
        prop = create_property(str, TemplateProperty(type=PropertyType.HIDDEN))
        assert isinstance(prop, HiddenProperty)

    def test_boolean_on_string_field(self) -> None:
        prop = create_property(str, TemplateProperty(type=PropertyType.BOOLEAN))
        assert isinstance(prop, BooleanProperty)

    def test_dropdown_with_explicit_choices(self) -> None:
        metadata = TemplateProperty(
            type=PropertyType.DROPDOWN, choices=("GET", "post", "")
        )
        prop = create_property(str, metadata)
        assert isinstance(prop, DropdownProperty)
        assert prop.choices == (
            DropdownChoice(label="G e t", value="GET"),
            DropdownChoice(label="Post", value="post"),
            DropdownChoice(label="", value=""),
        )

    def test_explicit_choices_replace_enum_members(self) -> None:
        prop = create_property(QueueType, TemplateProperty(choices=("fifo",)))
        assert isinstance(prop, DropdownProperty)
        assert [choice.value for choice in prop.choices] == ["fifo"]

    def test_dropdown_without_choices_on_enum_uses_members(self) -> None:
        prop = create_property(QueueType, TemplateProperty(type=PropertyType.DROPDOWN))
        assert [choice.value for choice in prop.choices] == ["standard", "fifo"]

    def test_dropdown_without_choices_on_string_is_empty(self) -> None:
        prop = create_property(str, TemplateProperty(type=PropertyType.DROPDOWN))
        assert prop.choices == ()


def test_fresh_instance_per_call() -> None:
    assert create_property(QueueType) is not create_property(QueueType)


def test_unresolved_kind_is_an_internal_error() -> None:
    with pytest.raises(TemplateInternalError) as exc_info:
        _build(PropertyType.UNKNOWN, [], str)
    assert exc_info.value.code == TEMPLATE_UNRESOLVED_PROPERTY_TYPE
    assert exc_info.value.context["property_type"] == "Unknown"


def test_unresolved_string_kind_is_an_internal_error() -> None:
    with pytest.raises(TemplateInternalError) as exc_info:
        _build("Bogus", [], str)
    assert exc_info.value.context["property_type"] == "Bogus"


class TestStringKinds:
    def test_unknown_string_kind_is_inferred(self) -> None:
        prop = create_property(bool, TemplateProperty(type="Unknown", group="g"))
        assert isinstance(prop, BooleanProperty)

    def test_text_string_kind(self) -> None:
        assert isinstance(create_property(str, TemplateProperty(type="Text")), TextProperty)

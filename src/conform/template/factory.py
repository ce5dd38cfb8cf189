# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""Choose the property kind for a single leaf field."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Literal, get_args, get_origin

from conform.config.settings import TemplateSettings
from conform.template.dsl import (
    BooleanProperty,
    DropdownChoice,
    DropdownProperty,
    HiddenProperty,
    Property,
    StringProperty,
    TextProperty,
)
from conform.template.errors import TemplateInternalError
from conform.template.introspection import unwrap_type
from conform.template.labels import transform_id_into_label
from conform.template.metadata import PropertyType, TemplateProperty


def _enum_choices(enum_type: type[Enum], source: str) -> list[str]:
    if source == "value":
        return [str(member.value) for member in enum_type]
    return [member.name for member in enum_type]


def create_property(
    field_type: Any,
    metadata: TemplateProperty | None = None,
    settings: TemplateSettings | None = None,
) -> Property:
    """Create a draft property (no id or label yet) for a leaf field.

    An explicit kind in the metadata wins. Otherwise ``bool`` becomes a
    Boolean, enums and string literals become a Dropdown over their members,
    and everything else a String. Explicit choices, when given, replace the
    members of an enum or literal.

    Args:
        field_type: Declared type of the field
        metadata: Template metadata of the field, if any
        settings: Template settings (defaults used if None)

    Returns:
        A fresh draft property

    Raises:
        TemplateInternalError: If no kind could be resolved
    """
    settings = settings or TemplateSettings()
    property_type = metadata.type if metadata else PropertyType.UNKNOWN
    choices: list[str] | None = list(metadata.choices) if metadata and metadata.choices else None

    core, _ = unwrap_type(field_type)
    member_choices: list[str] | None = None
    if isinstance(core, type) and issubclass(core, Enum):
        member_choices = _enum_choices(core, settings.enum_choice_source)
    elif get_origin(core) is Literal:
        member_choices = [str(arg) for arg in get_args(core)]

    if property_type is PropertyType.UNKNOWN:
        if core is bool:
            property_type = PropertyType.BOOLEAN
        elif member_choices is not None:
            property_type = PropertyType.DROPDOWN
        else:
            property_type = PropertyType.STRING

    if choices is None:
        choices = member_choices or []

    return _build(property_type, choices, field_type)


def _build(property_type: PropertyType, choices: Sequence[str], field_type: Any) -> Property:
    match property_type:
        case PropertyType.BOOLEAN:
            return BooleanProperty()
        case PropertyType.DROPDOWN:
            return DropdownProperty(
                choices=tuple(
                    DropdownChoice(
                        label=transform_id_into_label(choice) if choice else choice,
                        value=choice,
                    )
                    for choice in choices
                )
            )
        case PropertyType.HIDDEN:
            return HiddenProperty()
        case PropertyType.STRING:
            return StringProperty()
        case PropertyType.TEXT:
            return TextProperty()
    kind = property_type.value if isinstance(property_type, PropertyType) else str(property_type)
    raise TemplateInternalError(
        f"Unresolved property type {kind!r}",
        field_type=repr(field_type),
        property_type=kind,
    )

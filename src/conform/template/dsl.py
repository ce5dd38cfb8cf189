# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Template property value objects.

Properties are frozen pydantic models. Extraction builds a draft property
for a field, then derives updated copies (id, label, condition, path
prefix) with ``model_copy`` instead of mutating shared objects.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from conform.template.bindings import PropertyBinding


class FeelMode(str, Enum):
    """Whether a property accepts FEEL expressions."""

    OPTIONAL = "optional"
    REQUIRED = "required"


class Equals(BaseModel):
    """Show a property when another property has exactly this value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["equals"] = "equals"
    property: str
    equals: str

    def with_path_prefix(self, prefix: str) -> Equals:
        return self.model_copy(update={"property": f"{prefix}.{self.property}"})

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "property": self.property, "value": self.equals}


class OneOf(BaseModel):
    """Show a property when another property has one of these values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["oneOf"] = "oneOf"
    property: str
    one_of: tuple[str, ...]

    def with_path_prefix(self, prefix: str) -> OneOf:
        return self.model_copy(update={"property": f"{prefix}.{self.property}"})

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "property": self.property,
            "values": list(self.one_of),
        }


PropertyCondition = Annotated[Union[Equals, OneOf], Field(discriminator="kind")]


class DropdownChoice(BaseModel):
    """One entry of a dropdown."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class Property(BaseModel):
    """A single template property.

    ``id`` is a dot-separated path for properties of nested fields. Drafts
    produced by the property factory have an empty ``id`` and ``label``
    until extraction names them.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    id: str = ""
    label: str = ""
    description: str | None = None
    group: str | None = None
    optional: bool | None = None
    value: Any = None
    feel: FeelMode | None = None
    condition: PropertyCondition | None = None
    binding: PropertyBinding | None = None

    def with_path_prefix(self, prefix: str) -> Property:
        """Return a copy relocated under the field ``prefix``.

        The id and the property referenced by the condition (if any) are
        both prefixed, so the condition still points at a property on the
        same or an enclosing level.
        """
        update: dict[str, Any] = {"id": f"{prefix}.{self.id}"}
        if self.condition is not None:
            update["condition"] = self.condition.with_path_prefix(prefix)
        return self.model_copy(update=update)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the template document shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "group": self.group,
            "condition": self.condition.to_dict() if self.condition else None,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.optional is not None:
            data["optional"] = self.optional
        if self.value is not None:
            data["value"] = self.value
        if self.feel is not None:
            data["feel"] = self.feel.value
        if self.binding is not None:
            data["binding"] = self.binding.model_dump()
        return data


class BooleanProperty(Property):
    type: Literal["Boolean"] = "Boolean"


class DropdownProperty(Property):
    type: Literal["Dropdown"] = "Dropdown"
    choices: tuple[DropdownChoice, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["choices"] = [choice.model_dump() for choice in self.choices]
        return data


class HiddenProperty(Property):
    type: Literal["Hidden"] = "Hidden"


class StringProperty(Property):
    type: Literal["String"] = "String"


class TextProperty(Property):
    type: Literal["Text"] = "Text"


class PropertyGroup(BaseModel):
    """Named group of properties shown together."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    properties: tuple[SerializeAsAny[Property], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label}

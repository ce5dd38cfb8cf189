# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Metadata declarations for template generation.

Fields are described with ``TemplateProperty``, attached either through
``TemplateField`` (pydantic models), ``template_metadata`` (dataclasses) or
by placing a ``TemplateProperty`` inside ``typing.Annotated``. Variants of a
polymorphic type are tagged with ``@template_subtype`` and a base class whose
direct subclasses form a closed set of variants is marked with ``@sealed``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from pydantic import Field, TypeAdapter

from conform.template.dsl import FeelMode, Property, PropertyCondition

T = TypeVar("T", bound=type)

TEMPLATE_PROPERTY_KEY = "x-template-property"
TEMPLATE_SUBTYPE_ATTR = "__template_subtype__"
TEMPLATE_SEALED_ATTR = "__template_sealed__"

_condition_adapter: TypeAdapter[Any] = TypeAdapter(PropertyCondition)


class PropertyType(str, Enum):
    """Explicit kind of a template property."""

    UNKNOWN = "Unknown"  # infer from the field type
    BOOLEAN = "Boolean"
    DROPDOWN = "Dropdown"
    HIDDEN = "Hidden"
    STRING = "String"
    TEXT = "Text"


@dataclass(frozen=True)
class TemplateProperty:
    """Per-field template metadata.

    ``type`` and ``choices`` drive the choice of property kind; the other
    attributes are display hints applied once the property is named.
    """

    id: str | None = None
    label: str | None = None
    description: str | None = None
    type: PropertyType = PropertyType.UNKNOWN
    group: str | None = None
    optional: bool = False
    default_value: str | None = None
    feel: FeelMode | None = None
    choices: tuple[str, ...] = ()
    condition: PropertyCondition | None = None
    ignore: bool = False

    def __post_init__(self) -> None:
        # accept the string forms of the enums, e.g. type="Boolean"
        object.__setattr__(self, "type", PropertyType(self.type))
        if self.feel is not None:
            object.__setattr__(self, "feel", FeelMode(self.feel))
        object.__setattr__(self, "choices", tuple(self.choices))

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form, as stored in ``json_schema_extra``."""
        data: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "type": self.type.value,
            "group": self.group,
            "optional": self.optional,
            "default_value": self.default_value,
            "feel": self.feel.value if self.feel else None,
            "choices": list(self.choices),
            "condition": self.condition.model_dump(mode="json") if self.condition else None,
            "ignore": self.ignore,
        }
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TemplateProperty:
        condition = data.get("condition")
        feel = data.get("feel")
        return cls(
            id=data.get("id"),
            label=data.get("label"),
            description=data.get("description"),
            type=PropertyType(data.get("type", PropertyType.UNKNOWN)),
            group=data.get("group"),
            optional=bool(data.get("optional", False)),
            default_value=data.get("default_value"),
            feel=FeelMode(feel) if feel else None,
            choices=tuple(data.get("choices", ())),
            condition=(
                _condition_adapter.validate_python(condition) if condition else None
            ),
            ignore=bool(data.get("ignore", False)),
        )


@dataclass(frozen=True)
class TemplateSubType:
    """Match rule of one variant of a polymorphic type.

    ``equals`` (blank means unset) and ``one_of`` (empty means unset) name
    the discriminator values that select the variant.
    """

    discriminator_property: str
    equals: str = ""
    one_of: tuple[str, ...] = ()


def TemplateField(
    default: Any = ...,
    *,
    property_id: str | None = None,
    label: str | None = None,
    description: str | None = None,
    property_type: PropertyType = PropertyType.UNKNOWN,
    group: str | None = None,
    optional: bool = False,
    default_value: str | None = None,
    feel: FeelMode | None = None,
    choices: Sequence[str] | None = None,
    condition: PropertyCondition | None = None,
    ignore: bool = False,
    **kwargs: Any,
) -> Any:
    """Create a pydantic field carrying template metadata.

    Args:
        default: Default value for the field
        property_id: Identifier to use instead of the field name
        label: Label to use instead of the one derived from the field name
        description: Human-readable description
        property_type: Explicit property kind (inferred when UNKNOWN)
        group: Group the property is shown in
        optional: Whether the property may be left empty
        default_value: Value pre-filled in the template
        feel: FEEL expression support
        choices: Dropdown values
        condition: Visibility condition
        ignore: Leave the field out of the template
        **kwargs: Additional field parameters passed to Field

    Returns:
        Field with template metadata
    """
    metadata = TemplateProperty(
        id=property_id,
        label=label,
        description=description,
        type=property_type,
        group=group,
        optional=optional,
        default_value=default_value,
        feel=feel,
        choices=tuple(choices or ()),
        condition=condition,
        ignore=ignore,
    )

    json_schema_extra = dict(kwargs.pop("json_schema_extra", None) or {})
    json_schema_extra[TEMPLATE_PROPERTY_KEY] = metadata.to_dict()

    return Field(
        default,
        description=description,
        json_schema_extra=json_schema_extra,
        **kwargs,
    )


def template_metadata(**kwargs: Any) -> dict[str, TemplateProperty]:
    """Build a ``dataclasses.field(metadata=...)`` mapping.

    Example:
        queue_url: str = field(metadata=template_metadata(group="queue"))
    """
    return {TEMPLATE_PROPERTY_KEY: TemplateProperty(**kwargs)}


def read_template_property(raw: Any) -> TemplateProperty | None:
    """Coerce stored metadata (instance or dumped mapping) into a TemplateProperty."""
    if raw is None or isinstance(raw, TemplateProperty):
        return raw
    return TemplateProperty.from_dict(raw)


def template_subtype(
    discriminator_property: str,
    *,
    equals: str = "",
    one_of: Sequence[str] = (),
) -> Callable[[T], T]:
    """Tag a class as a variant of a polymorphic type.

    The tag is stored on the decorated class only; subclasses do not
    inherit it.
    """
    subtype = TemplateSubType(
        discriminator_property=discriminator_property,
        equals=equals,
        one_of=tuple(one_of),
    )

    def decorator(cls: T) -> T:
        setattr(cls, TEMPLATE_SUBTYPE_ATTR, subtype)
        return cls

    return decorator


def sealed(cls: T) -> T:
    """Mark a base class whose direct subclasses are its only variants."""
    setattr(cls, TEMPLATE_SEALED_ATTR, True)
    return cls


def apply_template_property(
    prop: Property, metadata: TemplateProperty | None
) -> Property:
    """Apply display hints from field metadata to a named property."""
    if metadata is None:
        return prop

    update: dict[str, Any] = {}
    if metadata.id:
        update["id"] = metadata.id
    if metadata.label:
        update["label"] = metadata.label
    if metadata.description:
        update["description"] = metadata.description
    if metadata.group:
        update["group"] = metadata.group
    if metadata.optional:
        update["optional"] = True
    if metadata.default_value is not None:
        update["value"] = metadata.default_value
    if metadata.feel is not None:
        update["feel"] = metadata.feel
    if metadata.condition is not None:
        update["condition"] = metadata.condition

    return prop.model_copy(update=update) if update else prop

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Property bindings.

A binding tells the runtime where a property value ends up (an input
variable, a task header, an extension property). Extraction never sets a
binding; callers assign one according to the connector type.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from conform.template.dsl import Property


class ZeebeInput(BaseModel):
    """Map the property to an input variable of the task."""

    model_config = ConfigDict(frozen=True)

    type: Literal["zeebe:input"] = "zeebe:input"
    name: str


class ZeebeTaskHeader(BaseModel):
    """Map the property to a static task header."""

    model_config = ConfigDict(frozen=True)

    type: Literal["zeebe:taskHeader"] = "zeebe:taskHeader"
    key: str


class ZeebeProperty(BaseModel):
    """Map the property to an extension property (used by inbound connectors)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["zeebe:property"] = "zeebe:property"
    name: str


class ZeebeSubscriptionProperty(BaseModel):
    """Map the property to a message subscription property."""

    model_config = ConfigDict(frozen=True)

    type: Literal["bpmn:Message#zeebe:subscription#property"] = (
        "bpmn:Message#zeebe:subscription#property"
    )
    name: str


PropertyBinding = Annotated[
    Union[ZeebeInput, ZeebeTaskHeader, ZeebeProperty, ZeebeSubscriptionProperty],
    Field(discriminator="type"),
]


class BindingType(str, Enum):
    """Kinds of binding that can be derived from a property id."""

    INPUT = "input"
    TASK_HEADER = "task_header"
    PROPERTY = "property"
    SUBSCRIPTION_PROPERTY = "subscription_property"


def create_binding(binding_type: BindingType | str, property_id: str) -> Any:
    """Create the binding of the given kind for a property id.

    Args:
        binding_type: Kind of binding
        property_id: Dot-separated property id

    Returns:
        The binding value object

    Raises:
        ValueError: If the binding type is not known
    """
    binding_type = BindingType(binding_type)
    if binding_type is BindingType.INPUT:
        return ZeebeInput(name=property_id)
    if binding_type is BindingType.TASK_HEADER:
        return ZeebeTaskHeader(key=property_id)
    if binding_type is BindingType.PROPERTY:
        return ZeebeProperty(name=property_id)
    return ZeebeSubscriptionProperty(name=property_id)


def apply_bindings(
    properties: Iterable[Property], binding_type: BindingType | str
) -> list[Property]:
    """Return copies of the properties bound by their id.

    Properties that already carry a binding are returned unchanged.
    """
    return [
        prop
        if prop.binding is not None
        else prop.model_copy(update={"binding": create_binding(binding_type, prop.id)})
        for prop in properties
    ]

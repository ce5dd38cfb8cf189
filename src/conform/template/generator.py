# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Element template assembly.

Runs extraction, binds the properties and groups them into a template
document ready to be serialized.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializeAsAny

from conform.config.settings import TemplateSettings
from conform.logging import get_logger
from conform.template.bindings import BindingType, apply_bindings
from conform.template.dsl import Property, PropertyGroup
from conform.template.extractor import TemplatePropertyExtractor
from conform.template.grouping import group_properties
from conform.template.introspection import TypeIntrospector

ELEMENT_TEMPLATE_SCHEMA = (
    "https://unpkg.com/@camunda/zeebe-element-templates-json-schema/resources/schema.json"
)

logger = get_logger(__name__)


class ElementTemplate(BaseModel):
    """A generated template document."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    version: int | None = None
    description: str | None = None
    groups: tuple[PropertyGroup, ...] = ()
    properties: tuple[SerializeAsAny[Property], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "$schema": ELEMENT_TEMPLATE_SCHEMA,
            "id": self.id,
            "name": self.name,
        }
        if self.version is not None:
            data["version"] = self.version
        if self.description:
            data["description"] = self.description
        data["groups"] = [group.to_dict() for group in self.groups]
        data["properties"] = [prop.to_dict() for prop in self.properties]
        return data


class TemplateGenerator:
    """Builds element templates from data classes."""

    def __init__(
        self,
        introspector: TypeIntrospector | None = None,
        settings: TemplateSettings | None = None,
    ) -> None:
        self._extractor = TemplatePropertyExtractor(introspector, settings)

    def generate(
        self,
        tp: Any,
        *,
        template_id: str | None = None,
        name: str | None = None,
        version: int | None = None,
        description: str | None = None,
        binding_type: BindingType | str | None = BindingType.INPUT,
    ) -> ElementTemplate:
        """Generate a template for a type.

        Args:
            tp: The type describing the connector configuration
            template_id: Template id (defaults to the qualified type name)
            name: Display name (defaults to the type name)
            version: Template version
            description: Template description
            binding_type: Binding assigned to unbound properties; None leaves
                properties unbound

        Returns:
            The template document

        Raises:
            TemplateConfigurationError: If the type cannot be described
        """
        type_label = getattr(tp, "__qualname__", repr(tp))
        template_id = template_id or f"{getattr(tp, '__module__', 'template')}.{type_label}"

        properties = self._extractor.extract(tp)
        if binding_type is not None:
            properties = apply_bindings(properties, binding_type)

        groups = group_properties(properties)
        logger.info(
            "Generated template",
            extra={
                "template_id": template_id,
                "properties": len(properties),
                "groups": len(groups),
            },
        )
        return ElementTemplate(
            id=template_id,
            name=name or type_label,
            version=version,
            description=description,
            groups=tuple(groups),
            properties=tuple(properties),
        )

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Element template generation from data classes.

This package derives template properties (id, label, kind, visibility
condition, group) from pydantic models, dataclasses and annotated classes,
including polymorphic hierarchies.
"""

from conform.template.bindings import (
    BindingType,
    PropertyBinding,
    ZeebeInput,
    ZeebeProperty,
    ZeebeSubscriptionProperty,
    ZeebeTaskHeader,
    apply_bindings,
    create_binding,
)
from conform.template.dsl import (
    BooleanProperty,
    DropdownChoice,
    DropdownProperty,
    Equals,
    FeelMode,
    HiddenProperty,
    OneOf,
    Property,
    PropertyCondition,
    PropertyGroup,
    StringProperty,
    TextProperty,
)
from conform.template.errors import (
    TemplateConfigurationError,
    TemplateError,
    TemplateInternalError,
)
from conform.template.extractor import (
    TemplatePropertyExtractor,
    extract_template_properties,
)
from conform.template.factory import create_property
from conform.template.generator import ElementTemplate, TemplateGenerator
from conform.template.grouping import group_properties
from conform.template.introspection import (
    FieldDescriptor,
    ModelIntrospector,
    TypeIntrospector,
    is_container_type,
)
from conform.template.labels import transform_id_into_label
from conform.template.metadata import (
    PropertyType,
    TemplateField,
    TemplateProperty,
    TemplateSubType,
    sealed,
    template_metadata,
    template_subtype,
)

__all__ = [
    # Metadata
    "PropertyType",
    "TemplateField",
    "TemplateProperty",
    "TemplateSubType",
    "sealed",
    "template_metadata",
    "template_subtype",
    # Properties
    "BooleanProperty",
    "DropdownChoice",
    "DropdownProperty",
    "Equals",
    "FeelMode",
    "HiddenProperty",
    "OneOf",
    "Property",
    "PropertyCondition",
    "PropertyGroup",
    "StringProperty",
    "TextProperty",
    # Bindings
    "BindingType",
    "PropertyBinding",
    "ZeebeInput",
    "ZeebeProperty",
    "ZeebeSubscriptionProperty",
    "ZeebeTaskHeader",
    "apply_bindings",
    "create_binding",
    # Extraction
    "FieldDescriptor",
    "ModelIntrospector",
    "TypeIntrospector",
    "TemplatePropertyExtractor",
    "create_property",
    "extract_template_properties",
    "group_properties",
    "is_container_type",
    "transform_id_into_label",
    # Assembly
    "ElementTemplate",
    "TemplateGenerator",
    # Errors
    "TemplateConfigurationError",
    "TemplateError",
    "TemplateInternalError",
]

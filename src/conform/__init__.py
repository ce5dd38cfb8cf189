# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
conform: element template properties from Python types.

Most users only need ``TemplateGenerator`` or ``extract_template_properties``
together with the metadata helpers (``TemplateField``, ``TemplateProperty``,
``template_subtype`` and ``sealed``).
"""

from conform.template import (
    ElementTemplate,
    PropertyType,
    TemplateConfigurationError,
    TemplateError,
    TemplateField,
    TemplateGenerator,
    TemplateProperty,
    extract_template_properties,
    group_properties,
    sealed,
    template_metadata,
    template_subtype,
    transform_id_into_label,
)

__version__ = "0.1.0"

__all__ = [
    "ElementTemplate",
    "PropertyType",
    "TemplateConfigurationError",
    "TemplateError",
    "TemplateField",
    "TemplateGenerator",
    "TemplateProperty",
    "extract_template_properties",
    "group_properties",
    "sealed",
    "template_metadata",
    "template_subtype",
    "transform_id_into_label",
]

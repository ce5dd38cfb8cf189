# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Extraction of template properties from data classes.

Capabilities:

* scalar fields are mapped to properties according to their type
  (see ``conform.template.factory``)
* nested types are handled recursively; the properties of a nested field get
  the field name as id prefix, and so do the properties their conditions
  refer to
* ``TemplateProperty`` metadata is applied to every leaf property
* polymorphic types (unions or ``@sealed`` bases) get an extra Dropdown
  discriminator property, and each variant's properties are only visible
  when the discriminator selects that variant

Bindings are never set here. The caller assigns them according to the
connector type (see ``conform.template.bindings``).
"""

from __future__ import annotations

from typing import Any

from conform.config.settings import TemplateSettings
from conform.logging import get_logger
from conform.template.dsl import DropdownChoice, DropdownProperty, Equals, OneOf, Property
from conform.template.errors import (
    TEMPLATE_DISCRIMINATOR_MISMATCH,
    TEMPLATE_MISSING_MATCH_RULE,
    TEMPLATE_NO_VARIANTS,
    TEMPLATE_RECURSIVE_TYPE,
    TemplateConfigurationError,
    type_name,
)
from conform.template.factory import create_property
from conform.template.introspection import (
    FieldDescriptor,
    ModelIntrospector,
    TypeIntrospector,
    is_container_type,
)
from conform.template.labels import transform_id_into_label
from conform.template.metadata import TemplateSubType, apply_template_property

logger = get_logger(__name__)


def condition_from_subtype(subtype: TemplateSubType, variant: Any) -> Equals | OneOf:
    """Visibility condition selecting a variant.

    ``equals`` takes precedence when both rules are declared.

    Raises:
        TemplateConfigurationError: If the variant declares neither rule
    """
    if subtype.equals.strip():
        return Equals(property=subtype.discriminator_property, equals=subtype.equals)
    if subtype.one_of:
        return OneOf(property=subtype.discriminator_property, one_of=subtype.one_of)
    raise TemplateConfigurationError(
        f"Subtype {type_name(variant)} must declare either 'equals' or 'one_of'",
        variant=variant,
        code=TEMPLATE_MISSING_MATCH_RULE,
        discriminator_property=subtype.discriminator_property,
    )


class TemplatePropertyExtractor:
    """Derives an ordered list of template properties from a type."""

    def __init__(
        self,
        introspector: TypeIntrospector | None = None,
        settings: TemplateSettings | None = None,
    ) -> None:
        self._introspector = introspector or ModelIntrospector()
        self._settings = settings or TemplateSettings.load()

    def extract(self, tp: Any) -> list[Property]:
        """Analyze a type and return its template properties.

        Args:
            tp: The type to analyze

        Returns:
            Properties in field declaration order, discriminators first

        Raises:
            TemplateConfigurationError: If the type cannot be described
        """
        return self._extract(tp, ())

    def _extract(self, tp: Any, ancestors: tuple[Any, ...]) -> list[Property]:
        if tp in ancestors:
            chain = " -> ".join(type_name(t) for t in (*ancestors, tp))
            logger.error("Recursive type reference", extra={"chain": chain})
            raise TemplateConfigurationError(
                f"Type {type_name(tp)} refers to itself: {chain}",
                type_=tp,
                code=TEMPLATE_RECURSIVE_TYPE,
                chain=chain,
            )
        ancestors = (*ancestors, tp)

        if self._introspector.is_polymorphic(tp):
            return self._extract_polymorphic(tp, ancestors)

        properties: list[Property] = []
        for field in self._introspector.get_fields(tp):
            if field.metadata is not None and field.metadata.ignore:
                continue
            if is_container_type(field.type):
                logger.debug(
                    "Descending into nested field",
                    extra={"type": type_name(tp), "field": field.name},
                )
                nested = self._extract(field.type, ancestors)
                properties.extend(prop.with_path_prefix(field.name) for prop in nested)
            else:
                properties.append(self._build_property(field))
        return properties

    def _build_property(self, field: FieldDescriptor) -> Property:
        draft = create_property(field.type, field.metadata, self._settings)
        named = draft.model_copy(
            update={"id": field.name, "label": transform_id_into_label(field.name)}
        )
        return apply_template_property(named, field.metadata)

    def _extract_polymorphic(self, tp: Any, ancestors: tuple[Any, ...]) -> list[Property]:
        variants = self._introspector.get_variants(tp)
        if not variants:
            logger.error("Polymorphic type has no variants", extra={"type": type_name(tp)})
            raise TemplateConfigurationError(
                f"Sealed type {type_name(tp)} has no subtypes",
                type_=tp,
                code=TEMPLATE_NO_VARIANTS,
            )

        discriminator: str | None = None
        # insertion-ordered set of discriminator values
        values: dict[str, None] = {}
        properties: list[Property] = []

        for variant in variants:
            subtype = self._introspector.get_required_subtype(variant)

            if discriminator is None:
                discriminator = subtype.discriminator_property
            elif subtype.discriminator_property != discriminator:
                logger.error(
                    "Inconsistent discriminator property",
                    extra={
                        "type": type_name(tp),
                        "variant": type_name(variant),
                        "expected": discriminator,
                        "found": subtype.discriminator_property,
                    },
                )
                raise TemplateConfigurationError(
                    f"Subtype {type_name(variant)} of sealed type {type_name(tp)} "
                    f"uses discriminator property '{subtype.discriminator_property}', "
                    f"expected '{discriminator}'",
                    type_=tp,
                    variant=variant,
                    code=TEMPLATE_DISCRIMINATOR_MISMATCH,
                    expected=discriminator,
                    found=subtype.discriminator_property,
                )

            values.setdefault(subtype.equals)
            for value in subtype.one_of:
                values.setdefault(value)

            condition = condition_from_subtype(subtype, variant)
            logger.debug(
                "Extracting variant",
                extra={"type": type_name(tp), "variant": type_name(variant)},
            )
            properties.extend(
                prop.model_copy(update={"condition": condition})
                for prop in self._extract(variant, ancestors)
            )

        assert discriminator is not None
        discriminator_property = DropdownProperty(
            id=discriminator,
            label=transform_id_into_label(discriminator),
            optional=False,
            group=self._settings.discriminator_group,
            choices=tuple(
                DropdownChoice(label=transform_id_into_label(value), value=value)
                for value in values
                if value and value.strip()
            ),
        )
        logger.debug(
            "Synthesized discriminator",
            extra={
                "type": type_name(tp),
                "discriminator": discriminator,
                "choices": [choice.value for choice in discriminator_property.choices],
            },
        )
        return [discriminator_property, *properties]


def extract_template_properties(
    tp: Any,
    *,
    introspector: TypeIntrospector | None = None,
    settings: TemplateSettings | None = None,
) -> list[Property]:
    """Analyze a type and return its template properties.

    See ``TemplatePropertyExtractor.extract``.
    """
    return TemplatePropertyExtractor(introspector, settings).extract(tp)

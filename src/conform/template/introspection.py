# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""
Type introspection for template extraction.

The extraction engine only talks to a ``TypeIntrospector``. The default
``ModelIntrospector`` understands pydantic models, dataclasses and plain
classes with annotations, ``typing.Union`` based polymorphism and classes
marked ``@sealed``.
"""

from __future__ import annotations

import array
import dataclasses
import datetime
import inspect
import types
import uuid
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal,
    Protocol,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel

from conform.template.errors import TEMPLATE_MISSING_SUBTYPE, TemplateConfigurationError
from conform.template.metadata import (
    TEMPLATE_PROPERTY_KEY,
    TEMPLATE_SEALED_ATTR,
    TEMPLATE_SUBTYPE_ATTR,
    TemplateProperty,
    TemplateSubType,
    read_template_property,
)

_NONE_TYPE = type(None)

# Leaf types: scalars and anything collection- or map-like
_SCALAR_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    str,
    bytes,
    bytearray,
    Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    PurePath,
)
_COLLECTION_TYPES: tuple[type, ...] = (
    list,
    tuple,
    set,
    frozenset,
    dict,
    array.array,
    Sequence,
    Set,
    Mapping,
)


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a compound type as seen by the extractor."""

    name: str
    type: Any
    metadata: TemplateProperty | None = None


class TypeIntrospector(Protocol):
    """Read-only view of a type graph used by the extraction engine."""

    def get_fields(self, tp: Any) -> list[FieldDescriptor]:
        """Fields of a compound type (inherited ones included) in declaration order."""
        ...

    def is_polymorphic(self, tp: Any) -> bool:
        """Whether the type is a closed set of variants."""
        ...

    def get_variants(self, tp: Any) -> list[Any]:
        """Variants of a polymorphic type in a stable order."""
        ...

    def get_required_subtype(self, variant: Any) -> TemplateSubType:
        """Subtype tag of a variant; raises if the variant carries none."""
        ...


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def unwrap_type(tp: Any) -> tuple[Any, list[Any]]:
    """Strip ``Annotated`` and ``Optional`` wrappers from a declared type.

    Returns:
        The core type and the ``Annotated`` metadata found on the way
    """
    extras: list[Any] = []
    while True:
        if get_origin(tp) is Annotated:
            tp, *metadata = get_args(tp)
            extras.extend(metadata)
            continue
        if _is_union(tp):
            members = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
            if len(members) == 1:
                tp = members[0]
                continue
        return tp, extras


def is_container_type(tp: Any) -> bool:
    """Decide whether a type is recursed into rather than rendered as one property.

    Scalars, strings, enums, literals and anything sequence-, set- or
    map-like are leaves. A union is compound only when all of its members
    are. Every other class is compound.
    """
    tp, _ = unwrap_type(tp)
    if tp is Any or tp is None or tp is _NONE_TYPE:
        return False

    if _is_union(tp):
        return all(
            is_container_type(arg) for arg in get_args(tp) if arg is not _NONE_TYPE
        )

    origin = get_origin(tp)
    if origin is Literal:
        return False
    if origin is not None:
        tp = origin

    if not inspect.isclass(tp):
        return False
    if issubclass(tp, _SCALAR_TYPES) or issubclass(tp, _COLLECTION_TYPES):
        return False
    return True


def _annotated_template_property(extras: list[Any]) -> TemplateProperty | None:
    for extra in extras:
        if isinstance(extra, TemplateProperty):
            return extra
    return None


class ModelIntrospector:
    """Introspector for pydantic models, dataclasses and annotated classes."""

    def get_fields(self, tp: Any) -> list[FieldDescriptor]:
        tp, _ = unwrap_type(tp)
        if inspect.isclass(tp) and issubclass(tp, BaseModel):
            return self._pydantic_fields(tp)
        if dataclasses.is_dataclass(tp):
            return self._dataclass_fields(tp)
        return self._annotated_fields(tp)

    def is_polymorphic(self, tp: Any) -> bool:
        tp, _ = unwrap_type(tp)
        if _is_union(tp):
            return True
        return inspect.isclass(tp) and bool(vars(tp).get(TEMPLATE_SEALED_ATTR, False))

    def get_variants(self, tp: Any) -> list[Any]:
        tp, _ = unwrap_type(tp)
        if _is_union(tp):
            return [unwrap_type(arg)[0] for arg in get_args(tp) if arg is not _NONE_TYPE]
        # direct subclasses, in definition order
        return list(tp.__subclasses__())

    def get_required_subtype(self, variant: Any) -> TemplateSubType:
        subtype = vars(variant).get(TEMPLATE_SUBTYPE_ATTR) if inspect.isclass(variant) else None
        if subtype is None:
            raise TemplateConfigurationError(
                f"Variant {variant!r} is missing a @template_subtype declaration",
                variant=variant,
                code=TEMPLATE_MISSING_SUBTYPE,
            )
        return subtype

    def _pydantic_fields(self, model: type[BaseModel]) -> list[FieldDescriptor]:
        fields = []
        for name, info in model.model_fields.items():
            core, extras = unwrap_type(info.annotation)
            metadata = _annotated_template_property([*info.metadata, *extras])
            if metadata is None and isinstance(info.json_schema_extra, dict):
                metadata = read_template_property(
                    info.json_schema_extra.get(TEMPLATE_PROPERTY_KEY)
                )
            fields.append(FieldDescriptor(name=name, type=core, metadata=metadata))
        return fields

    def _dataclass_fields(self, cls: type) -> list[FieldDescriptor]:
        hints = get_type_hints(cls, include_extras=True)
        fields = []
        for field in dataclasses.fields(cls):
            core, extras = unwrap_type(hints.get(field.name, field.type))
            metadata = _annotated_template_property(extras)
            if metadata is None:
                metadata = read_template_property(field.metadata.get(TEMPLATE_PROPERTY_KEY))
            fields.append(FieldDescriptor(name=field.name, type=core, metadata=metadata))
        return fields

    def _annotated_fields(self, cls: Any) -> list[FieldDescriptor]:
        if not inspect.isclass(cls):
            return []
        hints = get_type_hints(cls, include_extras=True)
        names: dict[str, None] = {}
        for klass in reversed(cls.__mro__):
            for name in inspect.get_annotations(klass):
                if not name.startswith("_"):
                    names.setdefault(name)

        fields = []
        for name in names:
            declared = hints.get(name)
            if declared is None or get_origin(declared) is ClassVar or declared is ClassVar:
                continue
            core, extras = unwrap_type(declared)
            fields.append(
                FieldDescriptor(
                    name=name,
                    type=core,
                    metadata=_annotated_template_property(extras),
                )
            )
        return fields

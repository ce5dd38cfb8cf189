# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""Group template properties for display."""

from __future__ import annotations

from collections.abc import Iterable

from conform.template.dsl import Property, PropertyGroup
from conform.template.labels import transform_id_into_label


def group_properties(properties: Iterable[Property]) -> list[PropertyGroup]:
    """Create property groups from the ``group`` of each property.

    Groups appear in the order their id is first seen and keep the relative
    order of their members. Properties without a group (or with a blank one)
    are left out.
    """
    members: dict[str, list[Property]] = {}
    for prop in properties:
        if not prop.group:
            continue
        members.setdefault(prop.group, []).append(prop)

    return [
        PropertyGroup(
            id=group_id,
            label=transform_id_into_label(group_id),
            properties=tuple(group_members),
        )
        for group_id, group_members in members.items()
    ]

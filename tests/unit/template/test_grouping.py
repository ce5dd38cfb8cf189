# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
from conform.template.dsl import BooleanProperty, StringProperty
from conform.template.grouping import group_properties


def test_ungrouped_properties_are_excluded() -> None:
    x = StringProperty(id="x", label="X")
    y = StringProperty(id="y", label="Y", group="g1")
    z = BooleanProperty(id="z", label="Z", group="g1")

    groups = group_properties([x, y, z])

    assert len(groups) == 1
    assert groups[0].id == "g1"
    assert groups[0].label == "G 1"
    assert groups[0].properties == (y, z)


def test_groups_in_first_seen_order() -> None:
    properties = [
        StringProperty(id="a", group="queue"),
        StringProperty(id="b", group="authentication"),
        StringProperty(id="c", group="queue"),
        StringProperty(id="d", group="messageAttributes"),
    ]

    groups = group_properties(properties)

    assert [(g.id, g.label) for g in groups] == [
        ("queue", "Queue"),
        ("authentication", "Authentication"),
        ("messageAttributes", "Message attributes"),
    ]
    assert [p.id for p in groups[0].properties] == ["a", "c"]


def test_member_kind_is_kept() -> None:
    groups = group_properties([BooleanProperty(id="flag", group="options")])
    assert isinstance(groups[0].properties[0], BooleanProperty)


def test_no_properties() -> None:
    assert group_properties([]) == []


def test_group_to_dict() -> None:
    groups = group_properties([StringProperty(id="a", group="queue")])
    assert groups[0].to_dict() == {"id": "queue", "label": "Queue"}


def test_blank_group_counts_as_ungrouped() -> None:
    properties = [StringProperty(id="a", group=""), StringProperty(id="b", group="g")]
    assert [g.id for g in group_properties(properties)] == ["g"]

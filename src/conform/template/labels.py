# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: conform
"""Turn property identifiers into human-readable labels."""

from __future__ import annotations


def transform_id_into_label(identifier: str) -> str:
    """Transform a camelCase identifier into a sentence-style label.

    The first character is capitalized. Every later uppercase character, and
    every digit that follows a non-digit, starts a new word: a space is
    emitted before it and uppercase characters are lowered. Runs of capitals
    are split letter by letter, so ``"ID"`` becomes ``"I d"``.

    Examples:
        >>> transform_id_into_label("queueUrl")
        'Queue url'
        >>> transform_id_into_label("retries2x")
        'Retries 2x'

    Args:
        identifier: Non-empty identifier

    Returns:
        The label

    Raises:
        ValueError: If the identifier is empty
    """
    if not identifier:
        raise ValueError("Cannot derive a label from an empty identifier")

    label = [identifier[0].upper()]
    for previous, char in zip(identifier, identifier[1:]):
        if char.isupper():
            label.append(" " + char.lower())
        elif char.isdigit() and not previous.isdigit():
            label.append(" " + char)
        else:
            label.append(char)
    return "".join(label)

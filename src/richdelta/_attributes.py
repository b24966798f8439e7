"""Attribute map algebra used by compose and diff."""

from __future__ import annotations

from ._ops import AttributeMap


def compose(a: AttributeMap | None, b: AttributeMap | None) -> dict[str, str]:
    """Apply format change `b` on top of existing format `a`.

    `b` wins on overlapping keys; keys only present in `a` are carried through.
    """
    a = a or {}
    attributes = dict(b or {})
    for key, value in a.items():
        if key not in attributes:
            attributes[key] = value
    return attributes


def diff(a: AttributeMap | None, b: AttributeMap | None) -> dict[str, str]:
    """Return the key/value writes that turn attribute state `a` into `b`.

    Keys present in `a` but missing from `b` produce no entry.
    """
    a = a or {}
    b = b or {}
    changes: dict[str, str] = {}
    for key in dict.fromkeys([*a, *b]):
        if key in b and a.get(key) != b[key]:
            changes[key] = b[key]
    return changes

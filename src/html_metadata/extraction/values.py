"""
Value shapes used by every dialect result and the rules for combining them.

A property value is one of:
- a scalar string
- a group: a dict of sub-fields (e.g. an OpenGraph image with url/width)
- a list of scalars and/or groups, once a property has repeated
"""

from typing import Any, Union

Value = Union[str, dict[str, Any], list[Any]]
MetadataMap = dict[str, Value]


def is_group(value: Any) -> bool:
    """True for a sub-property group."""
    return isinstance(value, dict)


def upgrade(existing: Value | None, incoming: Value) -> Value:
    """
    Combine the current value of a property with a new occurrence.

    The first occurrence is stored as-is; the second turns the value into
    a list; later ones are appended. A list never collapses back to a
    scalar. Group objects keep their identity inside the list so callers
    holding a reference can still attach sub-fields to them.
    """
    if existing is None:
        return incoming
    if isinstance(existing, list):
        return existing + [incoming]
    return [existing, incoming]


def merge_property(meta: MetadataMap, prop: str, value: Value) -> None:
    """Store value under prop using the scalar-to-list upgrade."""
    meta[prop] = upgrade(meta.get(prop), value)


def lower_first(value: str) -> str:
    """Lowercase the first character only: "Title" -> "title"."""
    return value[:1].lower() + value[1:]


def lower_value(value: Value) -> Value:
    """Lowercase a scalar, or each string item of a repeated value."""
    if isinstance(value, list):
        return [item.lower() if isinstance(item, str) else item for item in value]
    return value.lower() if isinstance(value, str) else value

"""Shared helpers for value-object hashing and debug rendering."""

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import fields
from typing import Any

INDENT = "    "
UNHASHABLE = "<unhashable>"


def freeze(value: Any) -> Any:
    """
    Convert mappings, sets and sequences into hashable equivalents.

    Equal inputs always freeze to equal outputs. Anything else that cannot
    be hashed collapses to a single marker, which only adds collisions.
    """
    if isinstance(value, Mapping):
        return frozenset((freeze(k), freeze(v)) for k, v in value.items())
    if isinstance(value, AbstractSet):
        return frozenset(freeze(v) for v in value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(freeze(v) for v in value)
    try:
        hash(value)
    except TypeError:
        return UNHASHABLE
    return value


def value_equals(obj: Any, other: Any) -> bool:
    """
    Field-by-field equality for dataclass value objects.

    An object of any other class is never equal, even one whose own
    __eq__ would claim otherwise.
    """
    if obj is other:
        return True
    if type(other) is not type(obj):
        return False
    return all(getattr(obj, f.name) == getattr(other, f.name) for f in fields(obj))


def value_hash(obj: Any) -> int:
    """Hash a dataclass instance over all of its fields, in declaration order."""
    return hash(tuple(freeze(getattr(obj, f.name)) for f in fields(obj)))


def camel_case(name: str) -> str:
    """event_source_url -> eventSourceUrl"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _plain(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_plain(v) for v in value) + "]"
    return str(value)


def to_indented_string(value: Any) -> str:
    """
    Render a value for debug output.

    Every line after the first is indented by four spaces so nested
    multi-line renderings stay aligned under their parent field.
    """
    return _plain(value).replace("\n", "\n" + INDENT)


def describe(obj: Any) -> str:
    """Multi-line debug rendering of a dataclass value object."""
    lines = [f"class {type(obj).__name__} {{"]
    for f in fields(obj):
        lines.append(
            f"{INDENT}{camel_case(f.name)}: {to_indented_string(getattr(obj, f.name))}"
        )
    lines.append("}")
    return "\n".join(lines)

"""Runtime type tags used by the primitive and sequence checks.

Python has no ``typeof``; these tags classify a value into the small set
of buckets the schema constructors reason about.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum


class TypeTag(StrEnum):
    """Coarse runtime classification of a value."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OBJECT = "object"


SCALAR_TAGS: frozenset[TypeTag] = frozenset(
    {TypeTag.NUMBER, TypeTag.STRING, TypeTag.BOOLEAN, TypeTag.NULL}
)

# Sequences in the abc sense that are treated as scalars, not containers.
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def type_tag(value: object) -> TypeTag:
    """Return the :class:`TypeTag` of *value*.

    ``bool`` is checked before ``int`` because it subclasses it.

    Examples:
        >>> type_tag(True)
        <TypeTag.BOOLEAN: 'boolean'>
        >>> type_tag(1.5)
        <TypeTag.NUMBER: 'number'>
        >>> type_tag("abc")
        <TypeTag.STRING: 'string'>
        >>> type_tag([1, 2])
        <TypeTag.SEQUENCE: 'sequence'>
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return TypeTag.SEQUENCE
    return TypeTag.OBJECT


def is_sequence(value: object) -> bool:
    """Check whether *value* is a non-text sequence (list, tuple, ...)."""
    return type_tag(value) is TypeTag.SEQUENCE

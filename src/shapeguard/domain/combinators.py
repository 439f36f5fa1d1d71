"""Composite combinators: object_, array, tuple_, union, intersection.

Each combinator closes over its child schemas and delegates to their
``validate`` at check time. Children are referenced, not copied, so one
schema may sit inside many composites. Nothing is cached between calls.

Composites report pass/fail only. A failing child never contributes its
own message; the composite raises its fixed message instead.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from shapeguard.domain.errors import (
    ARRAY_FAILED,
    INTERSECTION_FAILED,
    OBJECT_FAILED,
    TUPLE_FAILED,
    UNION_FAILED,
)
from shapeguard.domain.schema import CreateOptions, Schema, from_options
from shapeguard.domain.tags import SCALAR_TAGS, TypeTag, is_sequence, type_tag

_MISSING = object()


def _field(value: object, key: str) -> object:
    """Return ``value[key]`` for mappings, ``value.key`` otherwise, or ``_MISSING``."""
    try:
        if type_tag(value) is TypeTag.MAPPING:
            assert isinstance(value, Mapping)
            return value[key] if key in value else _MISSING
        return getattr(value, key, _MISSING)
    except Exception:
        # Predicates are total: a raising lookup counts as an absent key.
        return _MISSING


def object_(schema_map: Mapping[str, Schema[Any]]) -> Schema[Any]:
    """Schema matching any non-scalar value that carries every declared key.

    Callables (functions, classes, instances defining ``__call__``) never match.
    Mappings are checked by key, other objects by attribute. Keys that are
    not declared in *schema_map* are ignored. The map is snapshotted so
    later changes to the caller's dict do not alter the schema.

    Examples:
        >>> point = object_({"x": number(), "y": number()})
        >>> point.validate({"x": 1, "y": 2, "label": "origin"})
        True
        >>> point.validate({"x": 1})
        False
    """
    fields = dict(schema_map)

    def predicate(value: object) -> bool:
        if type_tag(value) in SCALAR_TAGS or callable(value):
            return False
        for key, child in fields.items():
            field = _field(value, key)
            if field is _MISSING or not child.validate(field):
                return False
        return True

    return from_options(CreateOptions(predicate=predicate, message=OBJECT_FAILED))


def array[T](schema: Schema[T]) -> Schema[Sequence[T]]:
    """Schema matching a sequence whose every element matches *schema*.

    Empty sequences always match. ``str`` and ``bytes`` are not sequences here.
    """

    def predicate(value: object) -> bool:
        if not is_sequence(value):
            return False
        assert isinstance(value, Sequence)
        return all(schema.validate(item) for item in value)

    return from_options(CreateOptions(predicate=predicate, message=ARRAY_FAILED))


def tuple_(*schemas: Schema[Any]) -> Schema[Sequence[Any]]:
    """Schema matching a sequence of exactly ``len(schemas)`` positional elements."""

    def predicate(value: object) -> bool:
        if not is_sequence(value):
            return False
        assert isinstance(value, Sequence)
        if len(value) != len(schemas):
            return False
        return all(child.validate(item) for child, item in zip(schemas, value, strict=True))

    return from_options(CreateOptions(predicate=predicate, message=TUPLE_FAILED))


def union[T](*schemas: Schema[T]) -> Schema[T]:
    """Schema matching a value accepted by at least one of *schemas*.

    ``union()`` matches nothing.
    """

    def predicate(value: object) -> bool:
        return any(child.validate(value) for child in schemas)

    return from_options(CreateOptions(predicate=predicate, message=UNION_FAILED))


def intersection(*schemas: Schema[Any]) -> Schema[Any]:
    """Schema matching a value accepted by every one of *schemas*.

    ``intersection()`` matches everything. Python has no intersection type,
    so the result is typed ``Schema[Any]``; annotate the ``as_`` result at
    the call site.
    """

    def predicate(value: object) -> bool:
        return all(child.validate(value) for child in schemas)

    return from_options(CreateOptions(predicate=predicate, message=INTERSECTION_FAILED))

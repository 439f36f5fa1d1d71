"""Primitive schema constructors: exact value, class membership, scalars."""

from __future__ import annotations

from types import GenericAlias

from shapeguard.domain.errors import EXPECTED_BOOLEAN, EXPECTED_NUMBER, EXPECTED_STRING
from shapeguard.domain.schema import CreateOptions, Schema, from_options
from shapeguard.domain.tags import SCALAR_TAGS, TypeTag, type_tag


def _strictly_equal(candidate: object, expected: object) -> bool:
    """Equality without cross-type coercion.

    Scalars must share a :class:`TypeTag` and compare equal, so ``5`` and
    ``5.0`` match but ``1`` and ``True`` do not. Anything else is compared
    by identity.
    """
    expected_tag = type_tag(expected)
    if expected_tag not in SCALAR_TAGS:
        return candidate is expected
    if type_tag(candidate) is not expected_tag:
        return False
    return bool(candidate == expected)


def of[T](value: T) -> Schema[T]:
    """Schema matching exactly *value*.

    Examples:
        >>> of(5).validate(5)
        True
        >>> of(5).validate("5")
        False
    """
    return from_options(
        CreateOptions(
            predicate=lambda v: _strictly_equal(v, value),
            message=f"Expected {value}",
        )
    )


def instance_of[T](cls: type[T]) -> Schema[T]:
    """Schema matching instances of *cls* (subclasses included).

    Raises:
        TypeError: If *cls* is not a class. Parameterized generics such as
            ``list[int]`` cannot back an ``isinstance`` check.
    """
    if not isinstance(cls, type) or isinstance(cls, GenericAlias):
        raise TypeError(f"instance_of() expects a class, got {cls!r}")
    return from_options(
        CreateOptions(
            predicate=lambda v: isinstance(v, cls),
            message=f"Expected instance of {cls.__name__}",
        )
    )


def number() -> Schema[int | float]:
    """Schema matching ``int`` and ``float``, but not ``bool``."""
    return from_options(
        CreateOptions(
            predicate=lambda v: type_tag(v) is TypeTag.NUMBER,
            message=EXPECTED_NUMBER,
        )
    )


def string() -> Schema[str]:
    """Schema matching ``str``."""
    return from_options(
        CreateOptions(
            predicate=lambda v: type_tag(v) is TypeTag.STRING,
            message=EXPECTED_STRING,
        )
    )


def boolean() -> Schema[bool]:
    """Schema matching ``True`` and ``False``."""
    return from_options(
        CreateOptions(
            predicate=lambda v: type_tag(v) is TypeTag.BOOLEAN,
            message=EXPECTED_BOOLEAN,
        )
    )

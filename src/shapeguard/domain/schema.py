"""The Schema contract and the factory that implements it.

Every schema exposes three operations over a target type ``T``:

- ``validate(value)``: total predicate, never raises.
- ``assert_type(value)``: raises :class:`SchemaValidationError` on mismatch.
- ``as_(value)``: same check, returns *value* typed as ``T``.

INVARIANT: ``assert_type`` and ``as_`` call ``validate`` exactly once and
raise the schema's fixed message on ``False``. :func:`from_options` is the
only place that contract is implemented; every constructor just supplies a
(predicate, message) pair.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeGuard, runtime_checkable

from pydantic import BaseModel, ConfigDict, GetCoreSchemaHandler
from pydantic_core import core_schema

from shapeguard.domain.errors import SchemaValidationError


@runtime_checkable
class Schema[T](Protocol):
    """Capability set shared by every schema."""

    def validate(self, value: object) -> TypeGuard[T]:
        """Return whether *value* conforms. Never raises."""
        ...

    def assert_type(self, value: object) -> None:
        """Raise :class:`SchemaValidationError` unless *value* conforms."""
        ...

    def as_(self, value: object) -> T:
        """Return *value* typed as ``T``, or raise :class:`SchemaValidationError`."""
        ...


class CreateOptions(BaseModel):
    """Construction-time inputs for :func:`from_options`.

    Attributes:
        predicate: Total, deterministic check deciding conformance.
        message: Fixed message carried by every failure of the schema.
    """

    model_config = ConfigDict(frozen=True)

    predicate: Callable[[Any], bool]
    message: str


class PredicateSchema[T]:
    """Schema backed by a single predicate and a fixed failure message.

    Instances are immutable and hold no per-call state, so one instance may
    be shared by any number of composites and threads.

    Usable as pydantic field metadata::

        class Point(BaseModel):
            x: Annotated[Any, number()]
    """

    __slots__ = ("_predicate", "_message")

    _predicate: Callable[[Any], bool]
    _message: str

    def __init__(self, options: CreateOptions) -> None:
        object.__setattr__(self, "_predicate", options.predicate)
        object.__setattr__(self, "_message", options.message)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._message!r}>"

    def __copy__(self) -> PredicateSchema[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> PredicateSchema[T]:
        return self

    def validate(self, value: object) -> TypeGuard[T]:
        return self._predicate(value)

    def assert_type(self, value: object) -> None:
        if not self.validate(value):
            raise SchemaValidationError(self._message)

    def as_(self, value: object) -> T:
        if not self.validate(value):
            raise SchemaValidationError(self._message)
        return value

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate the annotated field with :meth:`as_`, passing values through."""
        return core_schema.no_info_plain_validator_function(self.as_)


def from_options(options: CreateOptions) -> PredicateSchema[Any]:
    """Build a full schema from a predicate and a fixed message.

    Nothing is evaluated here; the predicate runs on every call.
    """
    return PredicateSchema(options)

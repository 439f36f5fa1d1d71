"""Law self-check — executable statements of how the engine must behave.

Each :class:`Law` is a zero-argument check over the public constructors.
:func:`run_laws` executes a set of laws and collects a :class:`LawReport`.

INVARIANT: A law that raises is recorded as failed, never propagated.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from shapeguard.domain.assertions import assert_type
from shapeguard.domain.combinators import array, intersection, object_, tuple_, union
from shapeguard.domain.errors import ASSERTION_FAILED_MESSAGE, SchemaValidationError
from shapeguard.domain.primitives import boolean, instance_of, number, of, string
from shapeguard.domain.schema import Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Law:
    """A named behavioural check over the schema engine."""

    name: str
    description: str
    check: Callable[[], bool]


class LawCheck(BaseModel):
    """Outcome of running one :class:`Law`."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    passed: bool
    duration_ms: float = 0.0
    detail: str | None = None


class LawReport(BaseModel):
    """Outcome of running a set of laws."""

    model_config = ConfigDict(frozen=True)

    checks: list[LawCheck] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.checks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> list[str]:
        return [check.name for check in self.checks if not check.passed]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.failed


def agrees(schema: Schema[Any], value: object) -> bool:
    """Return whether ``schema.as_(value)`` hands back *value* unchanged."""
    try:
        return schema.as_(value) is value
    except SchemaValidationError:
        return False


# ── Sample data ──────────────────────────────────────────────────────


class _Marker:
    pass


class _BrokenMapping(Mapping[str, object]):
    """Advertises key ``a`` but raises when it is read."""

    def __getitem__(self, key: str) -> object:
        raise LookupError(key)

    def __contains__(self, key: object) -> bool:
        return key == "a"

    def __iter__(self) -> Iterator[str]:
        return iter(["a"])

    def __len__(self) -> int:
        return 1


_SAMPLE_VALUES: tuple[object, ...] = (
    None,
    True,
    False,
    0,
    5,
    5.0,
    float("nan"),
    "",
    "5",
    b"bytes",
    [],
    [1, 2],
    [1, "x"],
    (1, "x"),
    {},
    {"a": 1},
    {"a": 1, "b": "x"},
    {"b": 2},
    _Marker(),
    _BrokenMapping(),
    len,
)


def _sample_schemas() -> list[Schema[Any]]:
    return [
        of(5),
        of("5"),
        of(None),
        instance_of(_Marker),
        number(),
        string(),
        boolean(),
        object_({"a": number()}),
        object_({}),
        array(number()),
        tuple_(number(), string()),
        tuple_(),
        union(number(), string()),
        union(),
        intersection(object_({"a": number()}), object_({"b": string()})),
        intersection(),
    ]


# ── Laws ─────────────────────────────────────────────────────────────


def _agreement() -> bool:
    return all(
        schema.validate(value) == agrees(schema, value)
        for schema in _sample_schemas()
        for value in _SAMPLE_VALUES
    )


def _object_openness() -> bool:
    schema = object_({"a": number()})
    return schema.validate({"a": 1, "b": 2}) and not schema.validate({"b": 2})


def _tuple_exactness() -> bool:
    schema = tuple_(number(), string())
    return (
        schema.validate([1, "x"])
        and not schema.validate([1, "x", True])
        and not schema.validate([1, 2])
    )


def _union_intersection_duality() -> bool:
    either = union(number(), string())
    both = intersection(object_({"a": number()}), object_({"b": string()}))
    return (
        not either.validate(True)
        and either.validate(5)
        and both.validate({"a": 1, "b": "x"})
        and not both.validate({"a": 1})
    )


def _degenerate_combinators() -> bool:
    nothing = union()
    anything = intersection()
    return not any(nothing.validate(v) for v in _SAMPLE_VALUES) and all(
        anything.validate(v) for v in _SAMPLE_VALUES
    )


def _primitive_boundary() -> bool:
    five = of(5)
    return five.validate(5) and not five.validate("5") and not of(1).validate(True)


def _array_vacuous_truth() -> bool:
    return array(number()).validate([])


def _helper_message() -> bool:
    schema = number()
    try:
        assert_type("x", schema)
    except SchemaValidationError as exc:
        helper_message = exc.message
    else:
        return False
    try:
        schema.assert_type("x")
    except SchemaValidationError as exc:
        return helper_message == ASSERTION_FAILED_MESSAGE and exc.message != helper_message
    return False


DEFAULT_LAWS: tuple[Law, ...] = (
    Law("agreement", "validate(v) agrees with as_(v) succeeding", _agreement),
    Law("object-openness", "extra keys are ignored, missing keys fail", _object_openness),
    Law("tuple-exactness", "tuples require exact length and positional types", _tuple_exactness),
    Law(
        "union-intersection",
        "union is logical OR, intersection is logical AND",
        _union_intersection_duality,
    ),
    Law(
        "degenerate",
        "union() rejects everything, intersection() accepts everything",
        _degenerate_combinators,
    ),
    Law("primitive-boundary", "of() uses strict, non-coercing equality", _primitive_boundary),
    Law("array-vacuous", "empty sequences satisfy any array schema", _array_vacuous_truth),
    Law("helper-message", "free assert_type raises the generic message", _helper_message),
)


def select_laws(names: Iterable[str], laws: Sequence[Law] = DEFAULT_LAWS) -> tuple[Law, ...]:
    """Return the laws named in *names*, in registry order.

    Raises:
        ValueError: If any name is not a known law.
    """
    wanted = set(names)
    known = {law.name for law in laws}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown law(s): {', '.join(unknown)}")
    return tuple(law for law in laws if law.name in wanted)


def run_laws(laws: Sequence[Law] = DEFAULT_LAWS) -> LawReport:
    """Execute *laws* and collect their outcomes."""
    checks: list[LawCheck] = []
    for law in laws:
        detail: str | None = None
        start = time.perf_counter()
        try:
            passed = bool(law.check())
        except Exception as exc:
            logger.warning("Law %s raised", law.name, exc_info=True, extra={"law": law.name})
            passed = False
            detail = f"{type(exc).__name__}: {exc}"
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        if passed:
            logger.debug(
                "Law %s held", law.name, extra={"law": law.name, "duration_ms": duration_ms}
            )
        elif detail is None:
            logger.warning("Law %s failed", law.name, extra={"law": law.name})

        checks.append(
            LawCheck(
                name=law.name,
                description=law.description,
                passed=passed,
                duration_ms=duration_ms,
                detail=detail,
            )
        )
    return LawReport(checks=checks)

"""Tests for the package-level exports."""

from __future__ import annotations

import pytest

import shapeguard
from shapeguard import (
    SchemaValidationError,
    array,
    assert_type,
    boolean,
    instance_of,
    intersection,
    number,
    object_,
    of,
    string,
    tuple_,
    union,
)


def test_all_names_resolve() -> None:
    for name in shapeguard.__all__:
        assert hasattr(shapeguard, name)


def test_end_to_end() -> None:
    event = object_(
        {
            "kind": union(of("click"), of("key")),
            "at": tuple_(number(), number()),
            "modifiers": array(string()),
            "handled": boolean(),
            "target": intersection(instance_of(dict), object_({"id": string()})),
        }
    )
    payload = {
        "kind": "click",
        "at": (10, 20),
        "modifiers": ["shift"],
        "handled": False,
        "target": {"id": "btn"},
    }
    assert event.as_(payload) is payload
    assert_type(payload, event)

    with pytest.raises(SchemaValidationError, match="^Object validation failed$"):
        event.as_({**payload, "handled": "no"})

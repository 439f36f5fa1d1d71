"""Tests for the free-function assert_type helper."""

from __future__ import annotations

import pytest

from shapeguard.domain.assertions import assert_type
from shapeguard.domain.combinators import object_
from shapeguard.domain.errors import ASSERTION_FAILED_MESSAGE, SchemaValidationError
from shapeguard.domain.primitives import number


class TestAssertType:
    def test_passes(self) -> None:
        assert assert_type(1, number()) is None

    def test_generic_message(self) -> None:
        with pytest.raises(SchemaValidationError, match="^Type assertion failed$"):
            assert_type("1", number())

    def test_differs_from_schema_message(self) -> None:
        """The helper drops the schema's descriptive message."""
        schema = object_({"a": number()})
        with pytest.raises(SchemaValidationError) as helper_exc:
            assert_type({}, schema)
        with pytest.raises(SchemaValidationError) as method_exc:
            schema.assert_type({})
        assert helper_exc.value.message == ASSERTION_FAILED_MESSAGE
        assert method_exc.value.message == "Object validation failed"

    def test_agrees_with_validate(self) -> None:
        schema = number()
        for value in (1, "1", None, 2.0, True):
            try:
                assert_type(value, schema)
                raised = False
            except SchemaValidationError:
                raised = True
            assert raised == (not schema.validate(value))

"""Free-function assertion helper.

Unlike :meth:`Schema.assert_type`, this raises the generic
``"Type assertion failed"`` message rather than the schema's own.
Callers that want the descriptive message should use the method.
"""

from __future__ import annotations

from typing import Any

from shapeguard.domain.errors import ASSERTION_FAILED_MESSAGE, SchemaValidationError
from shapeguard.domain.schema import Schema


def assert_type(value: object, schema: Schema[Any]) -> None:
    """Raise :class:`SchemaValidationError` unless *schema* accepts *value*."""
    if not schema.validate(value):
        raise SchemaValidationError(ASSERTION_FAILED_MESSAGE)

"""The single error kind raised by the schema engine.

INVARIANT: A failure carries only its fixed message. Composites never
forward the failing child's message.
"""

from __future__ import annotations

EXPECTED_NUMBER = "Expected number"
EXPECTED_STRING = "Expected string"
EXPECTED_BOOLEAN = "Expected boolean"
OBJECT_FAILED = "Object validation failed"
ARRAY_FAILED = "Array validation failed"
TUPLE_FAILED = "Tuple validation failed"
UNION_FAILED = "Union validation failed"
INTERSECTION_FAILED = "Intersection validation failed"
ASSERTION_FAILED_MESSAGE = "Type assertion failed"


class SchemaValidationError(ValueError):
    """Raised when a value does not conform to a schema.

    Subclasses :class:`ValueError` so pydantic validators translate it
    into a ``ValidationError`` without extra wiring.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

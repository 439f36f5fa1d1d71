"""shapeguard — composable runtime schemas for untyped values.

Build a schema once, then ``validate`` (bool), ``assert_type`` (raise) or
``as_`` (raise, else return the value typed as the schema's target).
"""

from __future__ import annotations

from shapeguard.domain.assertions import assert_type
from shapeguard.domain.combinators import array, intersection, object_, tuple_, union
from shapeguard.domain.errors import SchemaValidationError
from shapeguard.domain.primitives import boolean, instance_of, number, of, string
from shapeguard.domain.schema import CreateOptions, PredicateSchema, Schema, from_options

__version__ = "0.1.0"

__all__ = [
    "CreateOptions",
    "PredicateSchema",
    "Schema",
    "SchemaValidationError",
    "__version__",
    "array",
    "assert_type",
    "boolean",
    "from_options",
    "instance_of",
    "intersection",
    "number",
    "object_",
    "of",
    "string",
    "tuple_",
    "union",
]

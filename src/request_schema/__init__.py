"""Input schema generation for request dataclasses."""

import logging

from .schema_generation import (
    Byte,
    Property,
    RawLiteral,
    Schema,
    SchemaGenerationError,
    SchemaType,
    generate_schema,
    schema_field,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Byte",
    "Property",
    "RawLiteral",
    "Schema",
    "SchemaGenerationError",
    "SchemaType",
    "generate_schema",
    "schema_field",
]

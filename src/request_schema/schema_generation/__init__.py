"""Schema generation exports."""

from .errors import (
    FieldTagError,
    MalformedDefaultLiteralError,
    MalformedEnumLiteralError,
    NameCollisionError,
    RecursiveRecordTypeError,
    SchemaGenerationError,
    UnsupportedDefaultFieldTypeError,
    UnsupportedEnumFieldTypeError,
    UnsupportedFieldTypeError,
    UnsupportedRootTypeError,
)
from .field_tags import FieldTags, parse_field_tags, schema_field
from .schema_builder import describe_record, generate_schema
from .schema_models import Property, RawLiteral, Schema, SchemaType
from .type_mapping import Byte, FieldKind, resolve_type, schema_type_for

__all__ = [
    "Byte",
    "FieldKind",
    "FieldTags",
    "Property",
    "RawLiteral",
    "Schema",
    "SchemaType",
    "SchemaGenerationError",
    "UnsupportedRootTypeError",
    "NameCollisionError",
    "UnsupportedFieldTypeError",
    "UnsupportedEnumFieldTypeError",
    "MalformedEnumLiteralError",
    "UnsupportedDefaultFieldTypeError",
    "MalformedDefaultLiteralError",
    "RecursiveRecordTypeError",
    "FieldTagError",
    "describe_record",
    "generate_schema",
    "parse_field_tags",
    "resolve_type",
    "schema_field",
    "schema_type_for",
]

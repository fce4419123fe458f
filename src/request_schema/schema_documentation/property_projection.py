"""Schema flattening into dotted property paths."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from request_schema.schema_generation.schema_models import Property, Schema, SchemaType

from .documentation_models import FlattenedProperty


class SchemaDocumentationError(Exception):
    """Raised for schema flattening or documentation failures."""


def flatten_properties(schema: Schema) -> list[FlattenedProperty]:
    """Return deterministic flattened properties.

    Nested records are descended into; arrays and opaque mappings are leaves.
    """
    fields: list[FlattenedProperty] = []
    seen_paths: set[str] = set()
    _flatten_object(
        schema.properties, schema.required, prefix="", fields=fields, seen_paths=seen_paths
    )
    return fields


def _flatten_object(
    properties: Mapping[str, Property],
    required: Sequence[str],
    *,
    prefix: str,
    fields: list[FlattenedProperty],
    seen_paths: set[str],
) -> None:
    required_names = set(required)
    for name, child in properties.items():
        child_path = name if not prefix else f"{prefix}.{name}"
        _register_field(child_path, child, name in required_names, fields, seen_paths)
        if child.type is SchemaType.OBJECT and child.properties is not None:
            _flatten_object(
                child.properties,
                child.required or (),
                prefix=child_path,
                fields=fields,
                seen_paths=seen_paths,
            )


def _register_field(
    path: str,
    definition: Property,
    required: bool,
    fields: list[FlattenedProperty],
    seen_paths: set[str],
) -> None:
    if path in seen_paths:
        raise SchemaDocumentationError(f"Duplicate flattened property detected: {path}")
    seen_paths.add(path)
    fields.append(FlattenedProperty(path=path, definition=definition, required=required))

"""Request record to schema tree generation."""

from __future__ import annotations

import dataclasses
import functools
import logging
import typing
from dataclasses import dataclass
from typing import Any

from .errors import (
    NameCollisionError,
    RecursiveRecordTypeError,
    UnsupportedFieldTypeError,
    UnsupportedRootTypeError,
)
from .field_tags import FieldTags, parse_field_tags
from .literal_coercion import coerce_default_literal, coerce_enum_literals
from .schema_models import Property, Schema
from .type_mapping import FieldKind, ResolvedType, resolve_type, schema_type_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved annotation and parsed tags of one record field."""

    attribute: str
    annotation: Any
    tags: FieldTags


def generate_schema(source: Any) -> Schema:
    """Derive the input schema of a request record.

    Args:
      source: A dataclass type or a dataclass instance.

    Returns:
      The assembled schema tree.

    Raises:
      SchemaGenerationError: On any failure; no partial schema is returned.
    """
    record_type = _resolve_root(source)
    root = _ObjectNode()
    _walk_record(record_type, root, prefix="", active=frozenset())
    logger.debug(
        "Generated schema for %s with %d properties", record_type.__qualname__, len(root.properties)
    )
    return Schema(properties=root.properties, required=tuple(root.required))


@functools.lru_cache(maxsize=None)
def describe_record(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Return the public fields of a dataclass in declaration order.

    String annotations resolve against the module globals and the record's own
    name. Names local to the function that declared the record are out of
    reach, so records it references must then be declared at module level.
    """
    localns = {record_type.__name__: record_type}
    try:
        hints = typing.get_type_hints(record_type, localns=localns, include_extras=True)
    except NameError as exc:
        raise UnsupportedFieldTypeError(
            f"Cannot resolve field annotations of {record_type.__qualname__}: {exc}. "
            "Declare referenced record types at module level.",
            {"record": record_type.__qualname__},
        ) from exc
    except TypeError as exc:
        raise UnsupportedFieldTypeError(
            f"Cannot resolve field annotations of {record_type.__qualname__}: {exc}",
            {"record": record_type.__qualname__},
        ) from exc
    return tuple(
        FieldDescriptor(
            attribute=record_field.name,
            annotation=hints.get(record_field.name, record_field.type),
            tags=parse_field_tags(record_field),
        )
        for record_field in dataclasses.fields(record_type)
        if not record_field.name.startswith("_")
    )


class _ObjectNode:
    """Properties and required names of one object level under construction."""

    def __init__(self) -> None:
        self.properties: dict[str, Property] = {}
        self.required: list[str] = []

    def add(self, name: str, prop: Property, *, required: bool, field_path: str) -> None:
        if name in self.properties:
            raise NameCollisionError(
                f"Duplicate property name '{name}' at '{field_path}'.",
                {"field": field_path, "name": name},
            )
        self.properties[name] = prop
        if required:
            self.required.append(name)


def _resolve_root(source: Any) -> type:
    if isinstance(source, type):
        if dataclasses.is_dataclass(source):
            return source
    elif dataclasses.is_dataclass(source):
        return type(source)
    raise UnsupportedRootTypeError(
        f"Unsupported root type: {type(source).__qualname__}; expected a dataclass.",
        {"root_type": type(source).__qualname__},
    )


def _walk_record(
    record_type: type, node: _ObjectNode, *, prefix: str, active: frozenset[type]
) -> None:
    if record_type in active:
        raise RecursiveRecordTypeError(
            f"Recursive record type: {record_type.__qualname__}",
            {"record": record_type.__qualname__, "field": prefix},
        )
    active = active | {record_type}

    for descriptor in describe_record(record_type):
        tags = descriptor.tags
        if tags.ignored:
            continue
        field_path = f"{prefix}.{tags.name}" if prefix else tags.name

        if tags.embedded:
            resolved = _resolve_field_type(descriptor.annotation, field_path)
            if resolved.kind is FieldKind.RECORD:
                _walk_record(resolved.annotation, node, prefix=prefix, active=active)
                continue

        prop = _build_property(descriptor.annotation, field_path, active, tags)
        node.add(tags.name, prop, required=not tags.omit_empty, field_path=field_path)


def _build_property(
    annotation: Any, field_path: str, active: frozenset[type], tags: FieldTags | None = None
) -> Property:
    resolved = _resolve_field_type(annotation, field_path)

    enum = None
    default = None
    if tags is not None and tags.enum_literals:
        enum = coerce_enum_literals(tags.enum_literals, resolved.kind, field_path=field_path)
    if tags is not None and tags.default_literal is not None:
        default = coerce_default_literal(
            tags.default_literal, resolved.kind, field_path=field_path
        )

    properties = None
    required = None
    items = None
    if resolved.kind is FieldKind.RECORD:
        child = _ObjectNode()
        _walk_record(resolved.annotation, child, prefix=field_path, active=active)
        properties, required = child.properties, tuple(child.required)
    elif resolved.kind is FieldKind.SEQUENCE:
        items = _build_property(resolved.element, f"{field_path}[]", active)

    return Property(
        type=schema_type_for(resolved.kind),
        description=tags.description if tags is not None else "",
        properties=properties,
        items=items,
        required=required,
        enum=enum,
        default=default,
    )


def _resolve_field_type(annotation: Any, field_path: str) -> ResolvedType:
    try:
        return resolve_type(annotation)
    except UnsupportedFieldTypeError as exc:
        raise UnsupportedFieldTypeError(
            f"Field '{field_path}': {exc.message}", {**exc.context, "field": field_path}
        ) from exc

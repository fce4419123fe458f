"""Field annotation classification and schema type mapping."""

from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, NewType, Union

from .errors import UnsupportedFieldTypeError
from .schema_models import SchemaType

Byte = NewType("Byte", int)
"""Single raw byte. Integer-like, but cannot carry enum or default annotations."""


class FieldKind(Enum):
    """Underlying kind of a record field."""

    TEXT = "text"
    INTEGER = "integer"
    BYTE = "byte"
    FLOAT = "float"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"


_SCHEMA_TYPES: dict[FieldKind, SchemaType] = {
    FieldKind.TEXT: SchemaType.STRING,
    FieldKind.INTEGER: SchemaType.INTEGER,
    FieldKind.BYTE: SchemaType.INTEGER,
    FieldKind.FLOAT: SchemaType.NUMBER,
    FieldKind.BOOLEAN: SchemaType.BOOLEAN,
    FieldKind.SEQUENCE: SchemaType.ARRAY,
    FieldKind.MAPPING: SchemaType.OBJECT,
    FieldKind.RECORD: SchemaType.OBJECT,
}

_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_RAW_BYTE_SEQUENCES = (bytes, bytearray)


@dataclass(frozen=True)
class ResolvedType:
    """Classified field annotation.

    ``annotation`` is the unwrapped type; for sequences ``element`` holds the
    element annotation.
    """

    kind: FieldKind
    annotation: Any
    element: Any = None


def schema_type_for(kind: FieldKind) -> SchemaType:
    """Map a field kind to its schema type."""
    return _SCHEMA_TYPES[kind]


def resolve_type(annotation: Any) -> ResolvedType:
    """Classify a field annotation.

    ``Annotated`` wrappers are dropped and one level of ``Optional`` is unwrapped.

    Raises:
      UnsupportedFieldTypeError: If the annotation has no schema type.
    """
    annotation = _strip_optional(_strip_annotated(annotation))

    if annotation is Byte:
        return ResolvedType(FieldKind.BYTE, annotation)
    if isinstance(annotation, NewType):
        return resolve_type(annotation.__supertype__)
    if isinstance(annotation, type):
        return _resolve_class(annotation)

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin in _MAPPING_ORIGINS:
        return ResolvedType(FieldKind.MAPPING, annotation)
    if origin in _SEQUENCE_ORIGINS:
        return ResolvedType(FieldKind.SEQUENCE, annotation, args[0] if args else str)
    if origin is tuple:
        return ResolvedType(FieldKind.SEQUENCE, annotation, _tuple_element(annotation, args))
    raise UnsupportedFieldTypeError(
        f"Unsupported field type: {annotation!r}", {"annotation": repr(annotation)}
    )


def _resolve_class(annotation: type) -> ResolvedType:
    # bool subclasses int, str subclasses Sequence
    if issubclass(annotation, bool):
        return ResolvedType(FieldKind.BOOLEAN, annotation)
    if issubclass(annotation, str):
        return ResolvedType(FieldKind.TEXT, annotation)
    if issubclass(annotation, int):
        return ResolvedType(FieldKind.INTEGER, annotation)
    if issubclass(annotation, float):
        return ResolvedType(FieldKind.FLOAT, annotation)
    if issubclass(annotation, _RAW_BYTE_SEQUENCES):
        return ResolvedType(FieldKind.SEQUENCE, annotation, Byte)
    if dataclasses.is_dataclass(annotation):
        return ResolvedType(FieldKind.RECORD, annotation)
    if issubclass(annotation, dict):
        return ResolvedType(FieldKind.MAPPING, annotation)
    if issubclass(annotation, (list, tuple, set, frozenset)):
        return ResolvedType(FieldKind.SEQUENCE, annotation, str)
    raise UnsupportedFieldTypeError(
        f"Unsupported field type: {annotation.__qualname__}",
        {"annotation": annotation.__qualname__},
    )


def _tuple_element(annotation: Any, args: tuple[Any, ...]) -> Any:
    if not args:
        return str
    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    if all(arg == args[0] for arg in args):
        return args[0]
    raise UnsupportedFieldTypeError(
        f"Heterogeneous tuple fields are not supported: {annotation!r}",
        {"annotation": repr(annotation)},
    )


def _strip_annotated(annotation: Any) -> Any:
    while typing.get_origin(annotation) is Annotated:
        annotation = typing.get_args(annotation)[0]
    return annotation


def _strip_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) not in (Union, types.UnionType):
        return annotation
    members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(members) != 1:
        raise UnsupportedFieldTypeError(
            f"Union fields are not supported: {annotation!r}", {"annotation": repr(annotation)}
        )
    return _strip_annotated(members[0])

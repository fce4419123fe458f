"""Enum and default literal coercion."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from .errors import (
    MalformedDefaultLiteralError,
    MalformedEnumLiteralError,
    UnsupportedDefaultFieldTypeError,
    UnsupportedEnumFieldTypeError,
)
from .schema_models import LiteralValue, RawLiteral
from .type_mapping import FieldKind

_INTEGER_LITERAL = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_LITERAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_BOOLEAN_LITERALS = {"true": True, "false": False}

_ENUM_KINDS = (FieldKind.TEXT, FieldKind.INTEGER, FieldKind.FLOAT)


def coerce_enum_literals(
    literals: Sequence[str], kind: FieldKind, *, field_path: str
) -> tuple[LiteralValue, ...]:
    """Parse enum literals into values of the field kind, preserving order."""
    if kind not in _ENUM_KINDS:
        raise UnsupportedEnumFieldTypeError(
            f"Field '{field_path}': enum is not supported for {kind.value} fields.",
            {"field": field_path, "kind": kind.value},
        )
    values: list[LiteralValue] = []
    for literal in literals:
        value = _parse_scalar(literal, kind)
        if value is None:
            raise MalformedEnumLiteralError(
                f"Field '{field_path}': enum literal '{literal}' is not a valid {kind.value}.",
                {"field": field_path, "kind": kind.value, "literal": literal},
            )
        values.append(value)
    return tuple(values)


def coerce_default_literal(literal: str, kind: FieldKind, *, field_path: str) -> LiteralValue:
    """Parse a default literal into a value of the field kind.

    Sequence defaults are kept verbatim as :class:`RawLiteral` text.
    """
    if kind is FieldKind.SEQUENCE:
        return RawLiteral(literal)
    if kind is FieldKind.BOOLEAN:
        flag = _BOOLEAN_LITERALS.get(literal)
        if flag is None:
            raise MalformedDefaultLiteralError(
                f"Field '{field_path}': default '{literal}' is not a valid boolean.",
                {"field": field_path, "kind": kind.value, "literal": literal},
            )
        return flag
    if kind not in _ENUM_KINDS:
        raise UnsupportedDefaultFieldTypeError(
            f"Field '{field_path}': default is not supported for {kind.value} fields.",
            {"field": field_path, "kind": kind.value},
        )
    value = _parse_scalar(literal, kind)
    if value is None:
        raise MalformedDefaultLiteralError(
            f"Field '{field_path}': default '{literal}' is not a valid {kind.value}.",
            {"field": field_path, "kind": kind.value, "literal": literal},
        )
    return value


def _parse_scalar(literal: str, kind: FieldKind) -> LiteralValue | None:
    if kind is FieldKind.TEXT:
        return literal
    candidate = literal.strip()
    if kind is FieldKind.INTEGER:
        return int(candidate) if _INTEGER_LITERAL.match(candidate) else None
    if not _FLOAT_LITERAL.match(candidate):
        return None
    value = float(candidate)
    return value if math.isfinite(value) else None

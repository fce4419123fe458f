"""Field metadata ("tag") parsing."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import FieldTagError

JSON_TAG = "json"
DESCRIPTION_TAG = "description"
ENUM_TAG = "enum"
DEFAULT_TAG = "default"
EMBEDDED_TAG = "embedded"

IGNORE_NAME = "-"
OMIT_EMPTY_OPTION = "omitempty"


@dataclass(frozen=True)
class FieldTags:  # pylint: disable=too-many-instance-attributes
    """Normalized annotations of one record field."""

    name: str
    omit_empty: bool = False
    ignored: bool = False
    embedded: bool = False
    description: str = ""
    enum_literals: tuple[str, ...] = ()
    default_literal: str | None = None


def schema_field(
    *,
    json: str | None = None,
    description: str | None = None,
    enum: str | Sequence[str] | None = None,
    default: str | None = None,
    embedded: bool = False,
    value: Any = dataclasses.MISSING,
    **field_kwargs: Any,
) -> Any:
    """Build a dataclass field carrying schema annotations.

    Args:
      json: Serialized name and options, e.g. ``"name,omitempty"`` or ``"-"``.
      description: Human readable description.
      enum: Comma separated literals or a sequence of literals.
      default: Default literal, parsed against the field type during generation.
      embedded: Flatten the fields of this record into the enclosing record.
      value: Dataclass default of the attribute itself.
      **field_kwargs: Forwarded to :func:`dataclasses.field`.

    Returns:
      The dataclass field definition.
    """
    metadata: dict[str, Any] = dict(field_kwargs.pop("metadata", None) or {})
    for key, tag_value in (
        (JSON_TAG, json),
        (DESCRIPTION_TAG, description),
        (ENUM_TAG, enum),
        (DEFAULT_TAG, default),
    ):
        if tag_value is not None:
            metadata[key] = tag_value
    if embedded:
        metadata[EMBEDDED_TAG] = True
    if value is not dataclasses.MISSING:
        field_kwargs["default"] = value
    return dataclasses.field(metadata=metadata, **field_kwargs)


def parse_field_tags(record_field: dataclasses.Field[Any]) -> FieldTags:
    """Extract name, optionality, description, enum and default annotations."""
    metadata: Mapping[str, Any] = record_field.metadata
    name, omit_empty, ignored = _parse_json_tag(metadata.get(JSON_TAG), record_field.name)
    embedded = metadata.get(EMBEDDED_TAG, False)
    if not isinstance(embedded, bool):
        raise FieldTagError(
            f"Field '{record_field.name}': '{EMBEDDED_TAG}' must be a boolean.",
            {"field": record_field.name},
        )
    return FieldTags(
        name=name,
        omit_empty=omit_empty,
        ignored=ignored,
        embedded=embedded,
        description=_optional_text(metadata.get(DESCRIPTION_TAG), DESCRIPTION_TAG, record_field)
        or "",
        enum_literals=_parse_enum_tag(metadata.get(ENUM_TAG), record_field),
        default_literal=_optional_text(metadata.get(DEFAULT_TAG), DEFAULT_TAG, record_field)
        or None,
    )


def _parse_json_tag(value: Any, field_name: str) -> tuple[str, bool, bool]:
    if value is None:
        return field_name, False, False
    if not isinstance(value, str):
        raise FieldTagError(
            f"Field '{field_name}': '{JSON_TAG}' must be a string.", {"field": field_name}
        )
    if value == IGNORE_NAME:
        return field_name, False, True
    name, _, options = value.partition(",")
    omit_empty = OMIT_EMPTY_OPTION in (option.strip() for option in options.split(","))
    return name.strip() or field_name, omit_empty, False


def _parse_enum_tag(value: Any, record_field: dataclasses.Field[Any]) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        if not value.strip():
            return ()
        return tuple(value.split(","))
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise FieldTagError(
        f"Field '{record_field.name}': '{ENUM_TAG}' must be a string or a list of strings.",
        {"field": record_field.name},
    )


def _optional_text(value: Any, tag: str, record_field: dataclasses.Field[Any]) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldTagError(
            f"Field '{record_field.name}': '{tag}' must be a string.",
            {"field": record_field.name},
        )
    return value

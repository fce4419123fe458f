"""Schema tree entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaType(str, Enum):
    """Primitive and composite schema types."""

    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"


class RawLiteral(str):
    """Annotation literal kept as raw text instead of a decoded value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RawLiteral({str.__repr__(self)})"


LiteralValue = str | int | float | bool


@dataclass(frozen=True)
class Property:  # pylint: disable=too-many-instance-attributes
    """One node of a schema tree."""

    type: SchemaType
    description: str = ""
    properties: Mapping[str, Property] | None = None
    items: Property | None = None
    required: tuple[str, ...] | None = None
    enum: tuple[LiteralValue, ...] | None = None
    default: LiteralValue | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the property as a JSON-Schema-style mapping."""
        rendered: dict[str, Any] = {"type": self.type.value}
        if self.description:
            rendered["description"] = self.description
        if self.properties is not None:
            rendered["properties"] = {
                name: child.to_dict() for name, child in self.properties.items()
            }
        if self.required is not None:
            rendered["required"] = list(self.required)
        if self.items is not None:
            rendered["items"] = self.items.to_dict()
        if self.enum is not None:
            rendered["enum"] = list(self.enum)
        if self.default is not None:
            rendered["default"] = (
                str(self.default) if isinstance(self.default, RawLiteral) else self.default
            )
        return rendered


@dataclass(frozen=True)
class Schema:
    """Top-level object schema derived from a request record."""

    properties: Mapping[str, Property] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    type: SchemaType = SchemaType.OBJECT

    def to_dict(self) -> dict[str, Any]:
        """Render the schema as a JSON-Schema-style mapping."""
        return {
            "type": self.type.value,
            "properties": {name: child.to_dict() for name, child in self.properties.items()},
            "required": list(self.required),
        }

"""Schema generation error hierarchy."""

from __future__ import annotations

from typing import Any


class SchemaGenerationError(Exception):
    """Base error for every schema generation failure."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a structured mapping."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class UnsupportedRootTypeError(SchemaGenerationError):
    """Raised when the generation source is not a dataclass or dataclass instance."""


class NameCollisionError(SchemaGenerationError):
    """Raised when two fields resolve to the same property name on one object level."""


class UnsupportedFieldTypeError(SchemaGenerationError):
    """Raised when a field annotation has no schema type."""


class UnsupportedEnumFieldTypeError(SchemaGenerationError):
    """Raised when an enum is declared on a field that cannot hold enum members."""


class MalformedEnumLiteralError(SchemaGenerationError):
    """Raised when an enum literal does not parse as the field type."""


class UnsupportedDefaultFieldTypeError(SchemaGenerationError):
    """Raised when a default is declared on a field that cannot hold a default."""


class MalformedDefaultLiteralError(SchemaGenerationError):
    """Raised when a default literal does not parse as the field type."""


class RecursiveRecordTypeError(SchemaGenerationError):
    """Raised when a record type contains itself."""


class FieldTagError(SchemaGenerationError):
    """Raised when field metadata holds values of the wrong shape."""

"""Operation registry entities."""

from __future__ import annotations

from dataclasses import dataclass

from request_schema.schema_generation.schema_models import Schema


@dataclass(frozen=True)
class OperationDefinition:
    """Registered operation with its derived input schema."""

    name: str
    description: str
    request_type: type
    input_schema: Schema

"""Schema documentation entities."""

from __future__ import annotations

from dataclasses import dataclass

from request_schema.schema_generation.schema_models import Property


@dataclass(frozen=True)
class FlattenedProperty:
    """Schema property addressed by its dotted path."""

    path: str
    definition: Property
    required: bool

"""Operation registration service."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator
from typing import Any

from request_schema.schema_generation import SchemaGenerationError, generate_schema
from request_schema.schema_generation.schema_models import Schema

from .registry_models import OperationDefinition

logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Raised when an operation cannot be registered."""


class OperationRegistry:
    """Registered operations keyed by name, in registration order."""

    def __init__(self) -> None:
        self._definitions: dict[str, OperationDefinition] = {}
        self._schemas: dict[type, Schema] = {}

    def register(self, name: str, request_type: Any, description: str = "") -> OperationDefinition:
        """Derive the input schema of ``request_type`` and register it under ``name``.

        Raises:
          RegistrationError: If the name is empty or taken, or schema generation fails.
        """
        if not isinstance(name, str) or not name.strip():
            raise RegistrationError("Operation name must be a non-empty string.")
        name = name.strip()
        if name in self._definitions:
            raise RegistrationError(f"Operation already registered: {name}")

        record_type = request_type if isinstance(request_type, type) else type(request_type)
        schema = self._schemas.get(record_type)
        if schema is None:
            try:
                schema = generate_schema(request_type)
            except SchemaGenerationError as exc:
                raise RegistrationError(f"Operation '{name}': {exc}") from exc
            self._schemas[record_type] = schema

        definition = OperationDefinition(
            name=name,
            description=description,
            request_type=record_type,
            input_schema=schema,
        )
        self._definitions[name] = definition
        logger.info(
            "Registered operation %s (%s, %d properties)",
            name,
            record_type.__qualname__,
            len(schema.properties),
        )
        return definition

    def get(self, name: str) -> OperationDefinition:
        """Return the definition registered under ``name``."""
        try:
            return self._definitions[name]
        except KeyError as exc:
            raise RegistrationError(f"Unknown operation: {name}") from exc

    def definitions(self) -> tuple[OperationDefinition, ...]:
        """Return all definitions in registration order."""
        return tuple(self._definitions.values())

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[OperationDefinition]:
        return iter(self._definitions.values())


def resolve_request_type(reference: str) -> type:
    """Import a class from a ``package.module:ClassName`` reference."""
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise RegistrationError(
            f"Invalid request reference '{reference}'; expected 'package.module:ClassName'."
        )
    try:
        target: Any = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise RegistrationError(f"Cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.strip().split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise RegistrationError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    if not isinstance(target, type):
        raise RegistrationError(f"Request reference '{reference}' is not a class.")
    return target

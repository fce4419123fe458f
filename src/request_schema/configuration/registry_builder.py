"""Operation registry assembly from configuration."""

from __future__ import annotations

from request_schema.operation_registry import (
    OperationRegistry,
    RegistrationError,
    resolve_request_type,
)

from .loader import ConfigurationError
from .runtime_settings import Configuration


def build_registry(configuration: Configuration) -> OperationRegistry:
    """Register every configured operation.

    Raises:
      ConfigurationError: If a request reference or schema is invalid.
    """
    registry = OperationRegistry()
    for operation in configuration.operations:
        try:
            request_type = resolve_request_type(operation.request)
            registry.register(operation.name, request_type, operation.description)
        except RegistrationError as exc:
            raise ConfigurationError(str(exc)) from exc
    return registry

"""Operation registry exports."""

from .operation_registry import OperationRegistry, RegistrationError, resolve_request_type
from .registry_models import OperationDefinition

__all__ = [
    "OperationDefinition",
    "OperationRegistry",
    "RegistrationError",
    "resolve_request_type",
]

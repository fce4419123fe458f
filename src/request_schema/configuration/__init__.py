"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .registry_builder import build_registry
from .runtime_settings import Configuration, OperationConfig, OutputSettings

__all__ = [
    "Configuration",
    "OperationConfig",
    "OutputSettings",
    "ConfigurationError",
    "load_configuration",
    "build_registry",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]

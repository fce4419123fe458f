"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, OperationConfig, OutputSettings

_REQUIRED_PLACEHOLDER = "<REQUIRED>"
_OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the operations manifest."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    operations = _parse_operations_section(parsed.get("operations"))
    output = _parse_output_section(parsed.get("output"))

    return Configuration(path=path, operations=operations, output=output)


def _parse_operations_section(value: Any) -> tuple[OperationConfig, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError("Configuration section 'operations' must be a list.")
    if not value:
        raise ConfigurationError("Configuration section 'operations' must not be empty.")

    operations: list[OperationConfig] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value):
        label = f"operations[{index}]"
        section = _require_mapping(entry, label)
        name = _require_non_empty_string(section.get("name"), f"{label}.name")
        if name in seen_names:
            raise ConfigurationError(f"Duplicate operation name: {name}")
        seen_names.add(name)
        request = _require_non_empty_string(section.get("request"), f"{label}.request")
        description = _optional_string(section.get("description"), f"{label}.description")
        operations.append(
            OperationConfig(name=name, request=request, description=description or "")
        )
    return tuple(operations)


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    indent = _require_positive_int(section.get("indent", 2), "output.indent")
    return OutputSettings(indent=indent)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == _REQUIRED_PLACEHOLDER:
        raise ConfigurationError(
            f"{field_name} still holds the {_REQUIRED_PLACEHOLDER} placeholder."
        )
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == _OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value

"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from request_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_placeholder_configuration,
    load_configuration,
    write_placeholder_configuration,
)


def test_placeholder_configuration_is_valid_yaml_with_guidance() -> None:
    text = build_placeholder_configuration()
    parsed = yaml.safe_load(text)

    assert "# Operations manifest" in text
    assert parsed["operations"][0]["name"] == "<REQUIRED>"
    assert parsed["output"]["indent"] == 2


def test_writes_placeholder_configuration(tmp_path: Path) -> None:
    destination = tmp_path / DEFAULT_CONFIG_FILENAME

    resolved = write_placeholder_configuration(destination)

    assert resolved == destination.resolve()
    assert destination.read_text(encoding="utf-8") == build_placeholder_configuration()


def test_refuses_to_overwrite_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / DEFAULT_CONFIG_FILENAME
    destination.write_text("keep", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(destination)
    assert destination.read_text(encoding="utf-8") == "keep"


def test_unfilled_placeholder_configuration_is_rejected(tmp_path: Path) -> None:
    destination = write_placeholder_configuration(tmp_path / DEFAULT_CONFIG_FILENAME)

    with pytest.raises(ConfigurationError, match="<REQUIRED>"):
        load_configuration(destination)

"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "operations.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Operations manifest for request-schema.
# Replace every <REQUIRED> placeholder before running export or document.
# Replace <OPTIONAL> placeholders only when your setup needs them.

operations:
  # One entry per operation. request points at a dataclass: "package.module:ClassName".
  - name: "<REQUIRED>"
    request: "<REQUIRED>"
    description: "<OPTIONAL>"

output:
  # Indentation of exported JSON schema documents.
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML operations manifest with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder operations manifest to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Operations manifest already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

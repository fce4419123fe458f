"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from request_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_registry,
    load_configuration,
    write_placeholder_configuration,
)
from request_schema.operation_registry import (
    OperationDefinition,
    RegistrationError,
    resolve_request_type,
)
from request_schema.schema_documentation import (
    SchemaDocumentationError,
    generate_documentation_workbook,
)
from request_schema.schema_generation import SchemaGenerationError, generate_schema


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="request-schema")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Derive input schemas for operations from request dataclasses."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate")
@click.option(
    "--request",
    "request_reference",
    required=True,
    help="Request dataclass reference, e.g. 'package.module:ClassName'",
)
@click.option(
    "--indent",
    required=False,
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="JSON indentation",
)
def generate(request_reference: str, indent: int) -> None:
    """Print the input schema of one request dataclass as JSON."""
    try:
        schema = generate_schema(resolve_request_type(request_reference))
    except (RegistrationError, SchemaGenerationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(schema.to_dict(), indent=indent))


@cli.command(name="export")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON operations manifest",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON schema document to write",
)
def export(config_path: str, output_path: str) -> None:
    """Write the input schemas of all configured operations to a JSON document."""
    try:
        configuration = load_configuration(config_path)
        registry = build_registry(configuration)
        document = _render_operations(registry.definitions())
        destination = Path(output_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(
            json.dumps(document, indent=configuration.output.indent) + "\n", encoding="utf-8"
        )
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="document")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON operations manifest",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the documentation workbook to write",
)
def document(config_path: str, output_path: str) -> None:
    """Write an Excel workbook documenting all configured operation inputs."""
    try:
        configuration = load_configuration(config_path)
        registry = build_registry(configuration)
        resolved_output = generate_documentation_workbook(registry.definitions(), output_path)
    except (ConfigurationError, SchemaDocumentationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML operations manifest template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML operations manifest with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _render_operations(definitions: tuple[OperationDefinition, ...]) -> dict[str, Any]:
    return {
        definition.name: {
            "description": definition.description,
            "input_schema": definition.input_schema.to_dict(),
        }
        for definition in definitions
    }


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

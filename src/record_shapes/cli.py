"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
import yaml

from record_shapes.declarations import (
    DEFAULT_DECLARATION_FILENAME,
    DeclarationFileError,
    load_registry,
    write_placeholder_declaration,
)
from record_shapes.instances import create, get_data
from record_shapes.leaf_setters import TypeMismatch
from record_shapes.population import populate
from record_shapes.schema_registry import (
    Schema,
    SchemaDeclarationError,
    UnknownSchemaError,
    flatten_schema,
)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CliError(Exception):
    """Custom CLI error."""


def _registry_option(function: Any) -> Any:
    return click.option(
        "--registry",
        "registry_path",
        required=True,
        type=click.Path(path_type=str),
        help="Path to the YAML/JSON schema declaration file",
    )(function)


def _schema_option(function: Any) -> Any:
    return click.option(
        "--schema",
        "schema_name",
        required=True,
        help="Name of a schema declared in the registry file",
    )(function)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="record-shapes")
@click.option("--verbose", is_flag=True, default=False, help="Log diagnostics to stderr.")
def cli(verbose: bool) -> None:
    """Schema-shaped record utility."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, stream=sys.stderr)


@cli.command(name="generate-registry")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_DECLARATION_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the example schema declaration file to write",
)
def generate_registry(output_path: str) -> None:
    """Generate an example schema declaration file with guidance comments."""
    try:
        resolved_output = write_placeholder_declaration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="defaults")
@_registry_option
@_schema_option
def defaults(registry_path: str, schema_name: str) -> None:
    """Print the all-defaults data tree of a schema as JSON."""
    schema = _load_schema(registry_path, schema_name)
    click.echo(_to_json(get_data(create(schema))))


@cli.command(name="fields")
@_registry_option
@_schema_option
def fields(registry_path: str, schema_name: str) -> None:
    """Print the flattened field paths of a schema with their kinds."""
    schema = _load_schema(registry_path, schema_name)
    for field in flatten_schema(schema):
        kind = field.kind
        if field.element_schema_name is not None:
            kind = f"{kind}<{field.element_schema_name}>"
        click.echo(f"{field.path}\t{kind}")


@cli.command(name="build")
@_registry_option
@_schema_option
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON file with the values to apply",
)
def build(registry_path: str, schema_name: str, input_path: str) -> None:
    """Apply a values file to a fresh instance and print the result as JSON."""
    schema = _load_schema(registry_path, schema_name)
    values = _load_values(input_path)
    try:
        instance = populate(create(schema), values)
    except TypeMismatch as exc:
        raise CliError(str(exc)) from exc
    click.echo(_to_json(get_data(instance)))


def _load_schema(registry_path: str, schema_name: str) -> Schema:
    try:
        return load_registry(registry_path).get(schema_name)
    except (DeclarationFileError, SchemaDeclarationError, UnknownSchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _load_values(input_path: str) -> Mapping[str, Any]:
    path = Path(input_path)
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise CliError(f"Failed to read values file: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise CliError("Values file root must be a mapping.")
    return parsed


def _to_json(data: Any) -> str:
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str, allow_nan=False)
    except ValueError as exc:
        raise CliError(f"Cannot render data as JSON: {exc}") from exc


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

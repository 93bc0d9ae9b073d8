"""Validate command for checking project configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.config import ConfigError, apply_config, load_config
from wardrobes.domain import ValidationStatus


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a project configuration file.

    Loads the file, builds the project and reports structural issues and
    warnings.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        wardrobes validate my-wardrobe.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        configurator = apply_config(load_config(config_file))
    except ConfigError as e:
        display_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    status = configurator.derived.validation
    _display_status(status)
    if status.issues:
        raise typer.Exit(code=1)
    if status.warnings:
        raise typer.Exit(code=2)


def display_config_error(error: ConfigError) -> None:
    """Display a configuration loading or application error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "apply"):
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_status(status: ValidationStatus) -> None:
    if status.issues:
        typer.echo("Errors:", err=True)
        for issue in status.issues:
            typer.echo(f"  {issue}", err=True)
        typer.echo()

    if status.warnings:
        typer.echo("Warnings:")
        for warning in status.warnings:
            typer.echo(f"  {warning}")
        typer.echo()

    if status.issues:
        typer.echo(
            f"Validation failed: {len(status.issues)} error(s), "
            f"{len(status.warnings)} warning(s)",
            err=True,
        )
    elif status.warnings:
        typer.echo(f"Validation passed with {len(status.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")

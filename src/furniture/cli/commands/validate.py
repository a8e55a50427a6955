"""Validate command for checking furniture request files.

This module provides the `validate` command that checks a JSON request
file for errors and warnings, including engineering advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from furniture.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _display_load_error(error: ConfigError) -> None:
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
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON request file to validate"),
    ],
) -> None:
    """Validate a furniture request file.

    Checks the file for JSON syntax errors, schema errors (unknown
    furniture types, out-of-range dimensions, bad ratios) and engineering
    advisories (tipping risk, crowded dividers, ignored options).

    Exit codes:
        0 - Request is valid with no warnings
        1 - Request has errors (cannot be used)
        2 - Request is valid but has warnings

    Example:
        furniture validate bookshelf.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)

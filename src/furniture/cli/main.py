"""Typer CLI for furniture generation."""

import logging
import random
from pathlib import Path
from typing import Annotated

import typer

from furniture.application import GenerateDesignCommand, InvalidRequestError
from furniture.application.config import ConfigError, config_to_request, load_config
from furniture.cli.commands import validate_command
from furniture.infrastructure import ExporterRegistry, format_design

app = typer.Typer(
    name="furniture",
    help="Generate parametric furniture designs from JSON requests.",
)

app.command(name="validate")(validate_command)

TEXT_FORMAT = "text"


def available_output_formats() -> list[str]:
    """Text plus every format registered with the exporter registry."""
    return [TEXT_FORMAT, *ExporterRegistry.available_formats()]


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON request file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or a registered exporter"),
    ] = TEXT_FORMAT,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for random partition layouts"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline progress to stderr"),
    ] = False,
) -> None:
    """Generate a furniture design from a request file.

    Example:
        furniture generate bookshelf.json --format scene -o scene.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    formats = available_output_formats()
    if output_format not in formats:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(formats)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = GenerateDesignCommand(rng=random.Random(seed))
    try:
        design = command.execute(config_to_request(config))
    except InvalidRequestError as e:
        for error in e.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == TEXT_FORMAT:
        content = format_design(design)
    else:
        content = ExporterRegistry.get(output_format)().export_string(design)

    if output is None:
        typer.echo(content)
        return

    output.write_text(content)
    typer.echo(f"Wrote {output_format} output to {output}")


if __name__ == "__main__":
    app()

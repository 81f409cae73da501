"""Command-line interface for svg-prune."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from svg_prune.core.cleaner import CleanStats, clean_document, clean_file, default_output_path
from svg_prune.core.importer.svg_reader import read_svg_file
from svg_prune.logging_config import configure_logging

app = typer.Typer(help="svg-prune: remove SVG elements that can never be visible.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _stats_json(stats: CleanStats, **extra: str) -> str:
    data = {
        "elements_before": stats.elements_before,
        "elements_after": stats.elements_after,
        "elements_removed": stats.elements_removed,
        **extra,
    }
    return json.dumps(data, indent=2)


@app.command()
def clean(
    input_path: Path = typer.Argument(..., help="SVG file to clean"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: <name>.clean.svg)"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output statistics as JSON"),
) -> None:
    """Remove invisible elements from an SVG file."""
    target = output or default_output_path(input_path)

    if not input_path.exists():
        logger.error("Input file not found: {}", input_path)
        raise typer.Exit(1)

    try:
        stats = clean_file(input_path, target, dry_run=dry_run)
    except (OSError, ValueError) as e:
        logger.error("Cannot clean {}: {}", input_path, e)
        raise typer.Exit(1) from e

    if output_json:
        typer.echo(_stats_json(stats, output=str(target)))
    else:
        summary = f"Removed {stats.elements_removed} of {stats.elements_before} elements"
        typer.echo(f"{summary} (dry run)" if dry_run else f"{summary}, wrote {target}")


@app.command()
def stats(
    input_path: Path = typer.Argument(..., help="SVG file to inspect"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Report what cleaning would remove, without writing anything."""
    try:
        doc = read_svg_file(input_path)
    except (OSError, ValueError) as e:
        logger.error("Cannot read {}: {}", input_path, e)
        raise typer.Exit(1) from e

    result = clean_document(doc)
    if output_json:
        typer.echo(_stats_json(result))
    else:
        typer.echo(f"{input_path}: {result.elements_before} elements")
        typer.echo(f"  invisible: {result.elements_removed}")
        typer.echo(f"  remaining: {result.elements_after}")

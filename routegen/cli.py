from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .codegen import generate
from .context_builder import build_context
from .errors import RoutegenError, UsageError
from .loader import load_spec

app = typer.Typer(
    name="routegen",
    help="Generate gin route registrations from an OpenAPI YAML/JSON spec.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"routegen {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(file: Optional[Path], out: Optional[Path], pkg: str) -> Optional[Path]:
    """Load the spec, build the context and write the generated file."""
    if file is None:
        raise UsageError("You must provide --file")

    spec = load_spec(file)
    context = build_context(spec, package_name=pkg)
    written = generate(context, out)

    if written is not None:
        typer.echo(
            f"Generated {written} ({context['route_count']} routes,"
            f" {context['registration_count']} registrations)",
            err=True,
        )
    return written


@app.command()
def main_command(
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Path to OpenAPI YAML or JSON input file."
    ),
    out: Optional[Path] = typer.Option(
        None, "--out", "-o", help="Output Go filename. Prints to stdout if omitted."
    ),
    pkg: str = typer.Option("main", "--pkg", "-p", help="Package name for generated Go code."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Generate RegisterRoutes() for a gin.Engine from an OpenAPI spec."""
    _configure_logging(verbose)
    try:
        run(file, out, pkg)
    except RoutegenError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(exc.exit_code) from exc


def main() -> None:
    """Console script entry point."""
    app()

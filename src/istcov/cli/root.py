from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from istcov._meta import __version__
from istcov.cli import report
from istcov.cli._shared import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"istcov {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Summarise Istanbul coverage-final.json reports with optional location remapping.")

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit", callback=_version_callback, is_eager=True),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("-q", "--quiet", help="Suppress INFO logs, emit only errors"),
        ] = False,
    ) -> None:
        configure_logging(quiet=quiet, verbose=verbose)

    report.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]

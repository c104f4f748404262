from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from istcov.cli._shared import resolve_use_color
from istcov.cli.errors import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GENERIC,
    EXIT_NOINPUT,
    EXIT_OK,
)
from istcov.config import CoverageOptions, merge_options, read_pyproject_options
from istcov.engine.mapping import remap_root
from istcov.errors import InvalidOptionError
from istcov.io import write_output
from istcov.model.path_filter import PathFilter
from istcov.output.render import Format, RenderOptions
from istcov.pipeline import (
    DataError,
    NoInputError,
    UnexpectedError,
    build_and_render_text,
)

if TYPE_CHECKING:
    from istcov.model.report import CoverageReport

_BOOL_FALSE = False


def _parse_map_root(value: str) -> tuple[Path, Path]:
    old, sep, new = value.partition("=")
    if not sep or not old or not new:
        msg = f"--map-root expects OLD=NEW, got {value!r}"
        raise InvalidOptionError(msg)
    return Path(old), Path(new)


def _resolve_options(
    *,
    boolean_counts: bool | None,
    remove_data: bool | None,
    map_root: str | None,
) -> CoverageOptions:
    # Unlike the library default, the CLI keeps the coverage directory unless asked.
    options = CoverageOptions(remove_data_at_end_of_run=False)
    options = merge_options(options, read_pyproject_options(Path.cwd() / "pyproject.toml"))
    overrides: dict[str, object] = {
        "boolean_counts": boolean_counts,
        "remove_data_at_end_of_run": remove_data,
    }
    if map_root:
        old, new = _parse_map_root(map_root)
        overrides["map_file_uri"] = remap_root(old, new)
    return merge_options(options, overrides)


def _build_report_and_text(
    *,
    coverage_dir: Path,
    options: CoverageOptions,
    filters: PathFilter | None,
    want_details: bool,
    fmt: Format,
    use_color: bool,
) -> tuple[CoverageReport, str]:
    try:
        return build_and_render_text(
            coverage_dir=coverage_dir,
            options=options,
            filters=filters,
            want_details=want_details,
            render_fmt=fmt.value,
            render_options=RenderOptions(color=use_color, base=Path.cwd()),
        )
    except NoInputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except DataError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except UnexpectedError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc


def report_cmd(
    coverage_dir: Annotated[
        Path,
        typer.Argument(help="Directory containing Istanbul's coverage-final.json."),
    ],
    fmt: Annotated[
        Format,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = Format.HUMAN,
    details: Annotated[
        bool,
        typer.Option("--details/--no-details", help="Resolve per-statement, branch and function details."),
    ] = _BOOL_FALSE,
    boolean_counts: Annotated[
        bool | None,
        typer.Option(
            "--boolean-counts/--raw-counts",
            help="Report detail hits as covered/not covered instead of counts.",
            show_default=False,
        ),
    ] = None,
    remove_data: Annotated[
        bool | None,
        typer.Option(
            "--remove-data/--keep-data",
            help="Delete the coverage directory once the report is produced.",
            show_default=False,
        ),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option("-i", "--include", help="Include glob patterns (repeatable)."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("-x", "--exclude", help="Exclude glob patterns (repeatable)."),
    ] = None,
    map_root: Annotated[
        str | None,
        typer.Option("--map-root", metavar="OLD=NEW", help="Report files under OLD as if they lived under NEW."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Summarise a coverage directory, optionally with resolved detail records."""
    try:
        options = _resolve_options(boolean_counts=boolean_counts, remove_data=remove_data, map_root=map_root)
    except InvalidOptionError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc

    filters = (
        PathFilter(include=tuple(include or ()), exclude=tuple(exclude or ()), base=Path.cwd())
        if (include or exclude)
        else None
    )

    to_stdout = output is None or output == Path("-")
    use_color = fmt is Format.HUMAN and resolve_use_color(color=color, no_color=no_color, to_stdout=to_stdout)

    _report, text = _build_report_and_text(
        coverage_dir=coverage_dir,
        options=options,
        filters=filters,
        want_details=details,
        fmt=fmt,
        use_color=use_color,
    )
    write_output(text, output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["register"]

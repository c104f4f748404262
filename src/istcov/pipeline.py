"""Load, apply and render a coverage directory in one call (used by the CLI)."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

from istcov._meta import logger
from istcov.context import IstanbulCoverageContext
from istcov.errors import ReportUnavailableError
from istcov.model.report import CoverageReport, FileReport
from istcov.output.render import RenderOptions, render
from istcov.run import CoverageRun

if TYPE_CHECKING:
    from pathlib import Path

    from istcov.config import CoverageOptions
    from istcov.model.path_filter import PathFilter


class PipelineError(Exception):
    """Base class for errors emitted by the pipeline."""


class NoInputError(PipelineError):
    """The coverage report was missing or could not be read."""


class DataError(PipelineError):
    """The coverage report is malformed."""


class UnexpectedError(PipelineError):
    """Unexpected failure while building or rendering."""


async def build_report(
    *,
    coverage_dir: Path,
    options: CoverageOptions,
    filters: PathFilter | None,
    want_details: bool,
    run: CoverageRun,
) -> CoverageReport:
    context = IstanbulCoverageContext(options)
    try:
        files = await context.apply(run, coverage_dir)
    except ReportUnavailableError as exc:
        raise NoInputError(str(exc)) from exc
    except json.JSONDecodeError as exc:
        msg = f"failed to parse coverage JSON: {exc}"
        raise DataError(msg) from exc
    except (KeyError, TypeError, AttributeError) as exc:
        msg = f"unexpected coverage report shape: {exc!r}"
        raise DataError(msg) from exc

    if filters is not None:
        files = [f for f in files if filters.allow(f.compiled_uri)]

    if not want_details:
        return CoverageReport(
            coverage_dir=coverage_dir,
            files=tuple(FileReport(f) for f in files),
            boolean_counts=options.boolean_counts,
        )

    try:
        details = await asyncio.gather(*(context.load_detailed_coverage(run, f) for f in files))
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        msg = f"unexpected coverage report shape: {exc!r}"
        raise DataError(msg) from exc
    return CoverageReport(
        coverage_dir=coverage_dir,
        files=tuple(FileReport(f, tuple(d)) for f, d in zip(files, details, strict=True)),
        boolean_counts=options.boolean_counts,
    )


def build_and_render_text(
    *,
    coverage_dir: Path,
    options: CoverageOptions,
    filters: PathFilter | None,
    want_details: bool,
    render_fmt: str,
    render_options: RenderOptions,
) -> tuple[CoverageReport, str]:
    """Build the report, render it and dispose the run afterwards."""
    run = CoverageRun(name=str(coverage_dir))
    try:
        try:
            report = asyncio.run(
                build_report(
                    coverage_dir=coverage_dir,
                    options=options,
                    filters=filters,
                    want_details=want_details,
                    run=run,
                )
            )
            text = render(report, fmt=render_fmt, options=render_options)
        except PipelineError:
            raise
        except Exception as exc:
            logger.exception("unexpected failure")
            raise UnexpectedError(str(exc)) from exc
    finally:
        run.dispose()
    return report, text


__all__ = [
    "DataError",
    "NoInputError",
    "PipelineError",
    "UnexpectedError",
    "build_and_render_text",
    "build_report",
]

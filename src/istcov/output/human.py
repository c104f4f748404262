"""Rich tables for terminal output.

Line numbers are shown 1-based here, the way editors display them; every other
output keeps the package's 0-based positions.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from istcov.io import display_path
from istcov.model.detail import DeclarationCoverage
from istcov.model.metrics import pct

if TYPE_CHECKING:
    from istcov.model.detail import Executed, FileCoverageDetail, SummaryCount
    from istcov.model.report import CoverageReport, FileReport
    from istcov.model.types import Range
    from istcov.output.render import RenderOptions


def _render_table(table: Table, *, color: bool) -> str:
    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        width=sys.maxsize,
        color_system="standard" if color else None,
        no_color=not color,
    )
    console.print(table)
    return buf.getvalue().rstrip()


def _count_cell(count: SummaryCount) -> str:
    if count.total == 0:
        return "-"
    return f"{count.covered}/{count.total} ({pct(count.covered, count.total):.1f}%)"


def _range_cell(rng: Range) -> str:
    return f"{rng.start.line + 1}:{rng.start.column}-{rng.end.line + 1}:{rng.end.column}"


def _executed_cell(executed: Executed) -> str:
    if isinstance(executed, bool):
        return "yes" if executed else "no"
    return str(executed)


def _summary_table(report: CoverageReport, options: RenderOptions) -> Table:
    table = Table(title="Coverage summary", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("File", justify="left")
    for header in ("Statements", "Branches", "Functions"):
        table.add_column(header, justify="right")

    for f in sorted(report.files, key=lambda fr: fr.coverage.uri.as_posix()):
        cov = f.coverage
        table.add_row(
            display_path(cov.uri, base=options.base),
            _count_cell(cov.statement_coverage),
            _count_cell(cov.branch_coverage),
            _count_cell(cov.declaration_coverage),
        )
    table.add_section()
    table.add_row(
        "TOTAL",
        _count_cell(report.statements),
        _count_cell(report.branches),
        _count_cell(report.functions),
        style="bold",
    )
    return table


def _detail_rows(detail: FileCoverageDetail) -> list[tuple[str, str, str, str]]:
    if isinstance(detail, DeclarationCoverage):
        return [("function", _range_cell(detail.location), _executed_cell(detail.executed), detail.name)]
    kind = "branch" if detail.branches else "statement"
    rows = [(kind, _range_cell(detail.location), _executed_cell(detail.executed), "")]
    rows.extend(
        ("  outcome", _range_cell(b.location), _executed_cell(b.executed), b.label or "")
        for b in detail.branches
    )
    return rows


def _detail_table(file: FileReport, options: RenderOptions) -> Table:
    table = Table(title=display_path(file.coverage.uri, base=options.base), box=box.SIMPLE, header_style="bold")
    table.add_column("Kind", justify="left")
    table.add_column("Range", justify="left")
    table.add_column("Executed", justify="right")
    table.add_column("Label", justify="left")
    for detail in file.details or ():
        for row in _detail_rows(detail):
            table.add_row(*row)
    return table


def format_human(report: CoverageReport, options: RenderOptions) -> str:
    if not report.files:
        return "No coverage data."
    parts = [_render_table(_summary_table(report, options), color=options.color)]
    for f in sorted(report.files, key=lambda fr: fr.coverage.uri.as_posix()):
        if f.details is None:
            continue
        parts.append(_render_table(_detail_table(f, options), color=options.color))
    return "\n\n".join(parts)


__all__ = ["format_human"]

"""Structured JSON output.

The payload is described by pydantic models and checked against the packaged
JSON schema before it is emitted. Positions are 0-based lines and columns.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from jsonschema import validate
from pydantic import BaseModel, Field

from istcov._meta import __version__
from istcov.config import get_schema
from istcov.io import display_path
from istcov.model.detail import DeclarationCoverage

if TYPE_CHECKING:
    from istcov.model.detail import FileCoverageDetail, SummaryCount
    from istcov.model.report import CoverageReport, FileReport
    from istcov.model.types import Range
    from istcov.output.render import RenderOptions

SCHEMA_ID = "https://example.com/istcov.schema.json"

# --------------------------------------------------------------------------- #
# Payload models                                                              #
# --------------------------------------------------------------------------- #


class PositionModel(BaseModel):
    line: int
    column: int


class RangeModel(BaseModel):
    start: PositionModel
    end: PositionModel


class CountModel(BaseModel):
    covered: int = Field(ge=0)
    total: int = Field(ge=0)


class BranchModel(BaseModel):
    executed: bool | int
    range: RangeModel
    label: str | None = None


class DetailModel(BaseModel):
    kind: str
    executed: bool | int
    range: RangeModel
    name: str | None = None
    branches: list[BranchModel] | None = None


class FileModel(BaseModel):
    file: str
    compiled: str
    statements: CountModel
    branches: CountModel
    functions: CountModel
    details: list[DetailModel] | None = None


class TotalsModel(BaseModel):
    statements: CountModel
    branches: CountModel
    functions: CountModel


class ToolModel(BaseModel):
    name: str = "istcov"
    version: str = __version__


class ReportModel(BaseModel):
    """Machine-readable coverage payload."""

    schema_: str = Field(default=SCHEMA_ID, alias="schema")
    tool: ToolModel = Field(default_factory=ToolModel)
    coverage_dir: str
    boolean_counts: bool
    files: list[FileModel]
    totals: TotalsModel


# --------------------------------------------------------------------------- #
# Conversion                                                                  #
# --------------------------------------------------------------------------- #


def _range(rng: Range) -> RangeModel:
    return RangeModel(
        start=PositionModel(line=rng.start.line, column=rng.start.column),
        end=PositionModel(line=rng.end.line, column=rng.end.column),
    )


def _count(count: SummaryCount) -> CountModel:
    return CountModel(covered=count.covered, total=count.total)


def _detail(detail: FileCoverageDetail) -> DetailModel:
    if isinstance(detail, DeclarationCoverage):
        return DetailModel(kind=detail.kind, executed=detail.executed, range=_range(detail.location), name=detail.name)
    return DetailModel(
        kind=detail.kind,
        executed=detail.executed,
        range=_range(detail.location),
        branches=[
            BranchModel(executed=b.executed, range=_range(b.location), label=b.label) for b in detail.branches
        ],
    )


def _file(file: FileReport, options: RenderOptions) -> FileModel:
    cov = file.coverage
    return FileModel(
        file=display_path(cov.uri, base=options.base),
        compiled=display_path(cov.compiled_uri, base=options.base),
        statements=_count(cov.statement_coverage),
        branches=_count(cov.branch_coverage),
        functions=_count(cov.declaration_coverage),
        details=None if file.details is None else [_detail(d) for d in file.details],
    )


def build_payload(report: CoverageReport, options: RenderOptions) -> dict[str, object]:
    model = ReportModel(
        coverage_dir=report.coverage_dir.as_posix(),
        boolean_counts=report.boolean_counts,
        files=[_file(f, options) for f in sorted(report.files, key=lambda fr: fr.coverage.uri.as_posix())],
        totals=TotalsModel(
            statements=_count(report.statements),
            branches=_count(report.branches),
            functions=_count(report.functions),
        ),
    )
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_json(report: CoverageReport, options: RenderOptions) -> str:
    payload = build_payload(report, options)
    validate(payload, get_schema())
    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["ReportModel", "build_payload", "format_json"]

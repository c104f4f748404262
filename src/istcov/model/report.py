from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from istcov.model.detail import SummaryCount

if TYPE_CHECKING:
    from pathlib import Path

    from istcov.engine.file import IstanbulFileCoverage
    from istcov.model.detail import FileCoverageDetail


@dataclass(frozen=True, slots=True)
class FileReport:
    """A file's coverage plus its detail records when they were requested."""

    coverage: IstanbulFileCoverage
    details: tuple[FileCoverageDetail, ...] | None = None


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Everything a renderer needs for one ``coverage-final.json``."""

    coverage_dir: Path
    files: tuple[FileReport, ...]
    boolean_counts: bool = False

    @property
    def statements(self) -> SummaryCount:
        return sum((f.coverage.statement_coverage for f in self.files), SummaryCount())

    @property
    def branches(self) -> SummaryCount:
        return sum((f.coverage.branch_coverage for f in self.files), SummaryCount())

    @property
    def functions(self) -> SummaryCount:
        return sum((f.coverage.declaration_coverage for f in self.files), SummaryCount())


__all__ = ["CoverageReport", "FileReport"]

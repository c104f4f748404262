from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from istcov.engine.summary import summarize_counts

if TYPE_CHECKING:
    from istcov.config import CoverageOptions
    from istcov.model.detail import SummaryCount
    from istcov.model.istanbul import FileCoverageData
    from istcov.model.types import FileUri


@dataclass(frozen=True, slots=True)
class IstanbulFileCoverage:
    """Coverage for one report entry, registered with a run.

    Summary counts are computed when the object is built; detail records are
    only produced on request (see :func:`istcov.engine.detail.load_detailed_coverage`).

    Parameters
    ----------
    uri:
        File the coverage is reported against, after ``map_file_uri``.
    original:
        The raw report entry.
    compiled_uri:
        The file path recorded in the report; location mapping starts here.
    options:
        Effective options of the ``apply`` call that produced this file.
    """

    uri: FileUri
    original: FileCoverageData
    compiled_uri: FileUri
    options: CoverageOptions
    statement_coverage: SummaryCount = field(init=False)
    branch_coverage: SummaryCount = field(init=False)
    declaration_coverage: SummaryCount = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "statement_coverage", summarize_counts(self.original.s))
        object.__setattr__(self, "branch_coverage", summarize_counts(self.original.b))
        object.__setattr__(self, "declaration_coverage", summarize_counts(self.original.f))


__all__ = ["IstanbulFileCoverage"]

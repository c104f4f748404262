"""Domain model for istcov (pure types; no IO)."""

from .detail import BranchCoverage, DeclarationCoverage, FileCoverageDetail, StatementCoverage, SummaryCount
from .istanbul import BranchGroup, FileCoverageData, FunctionEntry, RawPosition, RawRange, parse_report
from .metrics import pct
from .path_filter import PathFilter
from .types import BranchLabel, DetailKind, FileUri, MappedLocation, Position, Range

__all__ = [
    "BranchCoverage",
    "BranchGroup",
    "BranchLabel",
    "DeclarationCoverage",
    "DetailKind",
    "FileCoverageData",
    "FileCoverageDetail",
    "FileUri",
    "FunctionEntry",
    "MappedLocation",
    "PathFilter",
    "Position",
    "Range",
    "RawPosition",
    "RawRange",
    "StatementCoverage",
    "SummaryCount",
    "parse_report",
    "pct",
]

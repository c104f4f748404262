from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from istcov.model.types import BranchLabel, DetailKind, Range

Executed: TypeAlias = int | bool
"""Raw hit count, or ``count > 0`` when boolean counts are requested."""


# -----------------------------------------------------------------------------
# Summary counts
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SummaryCount:
    """Covered/total pair for one category (statements, branches or functions)."""

    covered: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        """Validate that counts are non-negative and consistent."""
        if self.covered < 0 or self.total < 0:
            msg = "SummaryCount.covered/total must be >= 0"
            raise ValueError(msg)
        if self.covered > self.total:
            msg = "SummaryCount.covered must be <= total"
            raise ValueError(msg)

    def __add__(self, other: SummaryCount) -> SummaryCount:
        return SummaryCount(self.covered + other.covered, self.total + other.total)


# -----------------------------------------------------------------------------
# Detail records
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BranchCoverage:
    """One outcome of a branch group."""

    executed: Executed
    location: Range
    label: BranchLabel | None = None

    kind = DetailKind.BRANCH


@dataclass(frozen=True, slots=True)
class StatementCoverage:
    """A statement, or the controlling construct of a branch group.

    ``branches`` is empty for a plain statement.
    """

    executed: Executed
    location: Range
    branches: tuple[BranchCoverage, ...] = ()

    kind = DetailKind.STATEMENT


@dataclass(frozen=True, slots=True)
class DeclarationCoverage:
    """A function declaration and how often it was entered."""

    name: str
    executed: Executed
    location: Range

    kind = DetailKind.FUNCTION


FileCoverageDetail: TypeAlias = StatementCoverage | DeclarationCoverage


__all__ = [
    "BranchCoverage",
    "DeclarationCoverage",
    "Executed",
    "FileCoverageDetail",
    "StatementCoverage",
    "SummaryCount",
]

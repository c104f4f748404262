"""Shared coordinate types and enumerations used across istcov.

All positions are 0-based in both lines and columns. The Istanbul report stores
1-based lines; the conversion happens exactly once, when a raw report position
is turned into a :class:`Position`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

FileUri: TypeAlias = Path
"""Identity of a source file, either as compiled or after remapping."""


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A 0-based ``(line, column)`` point in a file."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions, keeping the report's own end semantics."""

    start: Position
    end: Position

    @classmethod
    def empty(cls, position: Position) -> Range:
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class MappedLocation:
    """Result of a location mapping: a range inside a (possibly different) file."""

    uri: FileUri
    range: Range


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BranchLabel(StrEnum):
    """Labels given to the outcomes of an ``if`` branch group."""

    IF = "if"
    ELSE = "else"


class DetailKind(StrEnum):
    STATEMENT = "statement"
    BRANCH = "branch"
    FUNCTION = "function"


__all__ = [
    "BranchLabel",
    "DetailKind",
    "FileUri",
    "MappedLocation",
    "Position",
    "Range",
]

"""Typed views over Istanbul ``coverage-final.json`` entries.

The report is trusted: these helpers only reshape dictionaries into frozen
records, they do not validate the report grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RawPosition:
    """Report position: 1-based line, 0-based column.

    ``line`` is ``None`` for the implicit outcome of a branch group (for
    example the missing ``else`` of an ``if``).
    """

    line: int | None
    column: int | None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RawPosition:
        data = data or {}
        return cls(line=data.get("line"), column=data.get("column"))


@dataclass(frozen=True, slots=True)
class RawRange:
    start: RawPosition
    end: RawPosition

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RawRange:
        data = data or {}
        return cls(start=RawPosition.from_dict(data.get("start")), end=RawPosition.from_dict(data.get("end")))

    @property
    def is_implicit(self) -> bool:
        return self.start.line is None


@dataclass(frozen=True, slots=True)
class BranchGroup:
    """One decision construct and its measured outcomes."""

    loc: RawRange
    type: str
    locations: tuple[RawRange, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BranchGroup:
        return cls(
            loc=RawRange.from_dict(data.get("loc")),
            type=str(data.get("type", "")),
            locations=tuple(RawRange.from_dict(loc) for loc in data.get("locations", ())),
        )


@dataclass(frozen=True, slots=True)
class FunctionEntry:
    name: str
    loc: RawRange

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FunctionEntry:
        return cls(name=str(data.get("name", "")), loc=RawRange.from_dict(data.get("loc")))


@dataclass(frozen=True, slots=True)
class FileCoverageData:
    """Per-file Istanbul data: range maps keyed by id plus their hit-count tables."""

    path: str
    statement_map: dict[str, RawRange] = field(default_factory=dict)
    s: dict[str, int] = field(default_factory=dict)
    branch_map: dict[str, BranchGroup] = field(default_factory=dict)
    b: dict[str, list[int]] = field(default_factory=dict)
    fn_map: dict[str, FunctionEntry] = field(default_factory=dict)
    f: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileCoverageData:
        return cls(
            path=str(data["path"]),
            statement_map={k: RawRange.from_dict(v) for k, v in data.get("statementMap", {}).items()},
            s=dict(data.get("s", {})),
            branch_map={k: BranchGroup.from_dict(v) for k, v in data.get("branchMap", {}).items()},
            b={k: list(v) for k, v in data.get("b", {}).items()},
            fn_map={k: FunctionEntry.from_dict(v) for k, v in data.get("fnMap", {}).items()},
            f=dict(data.get("f", {})),
        )


def parse_report(files: Mapping[str, Mapping[str, Any] | FileCoverageData]) -> dict[str, FileCoverageData]:
    """Return typed entries for a decoded ``coverage-final.json`` mapping."""
    return {
        key: entry if isinstance(entry, FileCoverageData) else FileCoverageData.from_dict(entry)
        for key, entry in files.items()
    }


__all__ = [
    "BranchGroup",
    "FileCoverageData",
    "FunctionEntry",
    "RawPosition",
    "RawRange",
    "parse_report",
]

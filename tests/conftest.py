from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from istcov.model.types import FileUri, MappedLocation, Position, Range


def pos(line: int, column: int) -> dict[str, int]:
    return {"line": line, "column": column}


def rng(start_line: int, start_col: int, end_line: int, end_col: int) -> dict[str, dict[str, int]]:
    return {"start": pos(start_line, start_col), "end": pos(end_line, end_col)}


IMPLICIT: dict[str, dict[str, int]] = {"start": {}, "end": {}}

MATH_JS: dict[str, Any] = {
    "path": "/project/dist/math.js",
    "statementMap": {
        "0": rng(1, 0, 1, 20),
        "1": rng(2, 2, 2, 15),
        "2": rng(5, 0, 5, 25),
        "3": rng(6, 2, 6, 15),
    },
    "s": {"0": 10, "1": 8, "2": 5, "3": 0},
    "branchMap": {
        "0": {"loc": rng(2, 2, 4, 3), "type": "if", "locations": [rng(2, 2, 4, 3), IMPLICIT]},
        "1": {"loc": rng(6, 9, 6, 20), "type": "binary-expr", "locations": [rng(6, 9, 6, 13), rng(6, 17, 6, 20)]},
    },
    "b": {"0": [8, 0], "1": [3, 2]},
    "fnMap": {
        "0": {"name": "add", "loc": rng(1, 0, 3, 1)},
        "1": {"name": "multiply", "loc": rng(5, 0, 7, 1)},
    },
    "f": {"0": 10, "1": 0},
}

UTILS_JS: dict[str, Any] = {
    "path": "/project/dist/utils.js",
    "statementMap": {"0": rng(1, 0, 1, 30)},
    "s": {"0": 0},
    "branchMap": {},
    "b": {},
    "fnMap": {"0": {"name": "noop", "loc": rng(1, 0, 1, 30)}},
    "f": {"0": 0},
}


def sample_report() -> dict[str, dict[str, Any]]:
    return copy.deepcopy({MATH_JS["path"]: MATH_JS, UTILS_JS["path"]: UTILS_JS})


@pytest.fixture
def report_data() -> dict[str, dict[str, Any]]:
    """A decoded coverage-final.json with two files."""
    return sample_report()


@pytest.fixture
def math_entry() -> dict[str, Any]:
    return copy.deepcopy(MATH_JS)


@pytest.fixture
def coverage_dir_factory(tmp_path: Path) -> Callable[..., Path]:
    def write(
        data: Mapping[str, Any] | None = None,
        *,
        name: str = "coverage",
        raw: str | None = None,
    ) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        text = raw if raw is not None else json.dumps(sample_report() if data is None else data)
        (directory / "coverage-final.json").write_text(text, encoding="utf-8")
        return directory

    return write


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


async def unmapped(uri: FileUri, position: Position) -> MappedLocation | None:
    return None


def mapper_dropping(lines: set[int]) -> Callable[[FileUri, Position], Any]:
    """Return a location mapper that has no mapping for the given 0-based lines."""

    async def _map(uri: FileUri, position: Position) -> MappedLocation | None:
        if position.line in lines:
            return None
        return MappedLocation(uri, Range.empty(position))

    return _map

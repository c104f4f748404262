from __future__ import annotations

from typing import Any

from istcov.model.istanbul import FileCoverageData, RawPosition, RawRange, parse_report
from istcov.model.types import Position, Range


def test_from_dict_keeps_ids_and_counts(math_entry: dict[str, Any]) -> None:
    data = FileCoverageData.from_dict(math_entry)

    assert data.path == "/project/dist/math.js"
    assert list(data.statement_map) == ["0", "1", "2", "3"]
    assert data.statement_map["1"] == RawRange(RawPosition(2, 2), RawPosition(2, 15))
    assert data.b == {"0": [8, 0], "1": [3, 2]}
    assert data.fn_map["1"].name == "multiply"
    assert data.branch_map["0"].type == "if"


def test_implicit_outcome_detection(math_entry: dict[str, Any]) -> None:
    group = FileCoverageData.from_dict(math_entry).branch_map["0"]
    assert [loc.is_implicit for loc in group.locations] == [False, True]
    assert group.locations[1].start == RawPosition(None, None)


def test_missing_tables_default_to_empty() -> None:
    data = FileCoverageData.from_dict({"path": "/x.js"})
    assert data.statement_map == {}
    assert data.s == {}
    assert data.branch_map == {}
    assert data.fn_map == {}


def test_parse_report_accepts_parsed_entries(report_data: dict[str, Any]) -> None:
    parsed = parse_report(report_data)
    again = parse_report(parsed)
    assert again == parsed
    assert list(parsed) == list(report_data)


def test_range_helpers() -> None:
    p = Position(3, 1)
    assert Range.empty(p).is_empty
    assert not Range(p, Position(3, 2)).is_empty
    assert Position(1, 9) < Position(2, 0)

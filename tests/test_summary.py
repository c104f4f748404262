from __future__ import annotations

import pytest

from istcov.engine.summary import summarize_counts
from istcov.model.detail import SummaryCount


@pytest.mark.parametrize(
    ("table", "expected"),
    [
        ({}, SummaryCount(0, 0)),
        ({"0": 1, "1": 0}, SummaryCount(1, 2)),
        ({"0": 5, "1": 7, "2": 0, "3": 0}, SummaryCount(2, 4)),
        ({"0": [1, 0, 3]}, SummaryCount(2, 3)),
        ({"0": [0, 0], "1": [4, 1], "2": []}, SummaryCount(2, 4)),
        ({"0": 2, "1": [0, 9]}, SummaryCount(2, 3)),
    ],
)
def test_summarize_counts(table: dict[str, int | list[int]], expected: SummaryCount) -> None:
    assert summarize_counts(table) == expected


def test_total_counts_scalars_and_array_elements() -> None:
    table = {"a": 3, "b": 0, "c": [0, 1, 2, 0], "d": [5]}
    result = summarize_counts(table)
    assert result.total == 2 + 4 + 1
    assert result.covered == 1 + 2 + 1


def test_summary_count_rejects_inconsistent_values() -> None:
    with pytest.raises(ValueError, match="covered must be <= total"):
        SummaryCount(covered=3, total=2)
    with pytest.raises(ValueError, match=">= 0"):
        SummaryCount(covered=-1, total=2)


def test_summary_count_addition() -> None:
    assert SummaryCount(1, 2) + SummaryCount(3, 5) == SummaryCount(4, 7)

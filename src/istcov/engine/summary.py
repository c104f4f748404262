from __future__ import annotations

from typing import TYPE_CHECKING

from istcov.model.detail import SummaryCount

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def summarize_counts(table: Mapping[str, int | Sequence[int]]) -> SummaryCount:
    """Reduce a hit-count table to a covered/total pair.

    Scalars count once each; every element of an array value (branch outcomes)
    counts on its own. Nonzero means covered.
    """
    covered = 0
    total = 0
    for count in table.values():
        if isinstance(count, int):
            covered += 1 if count else 0
            total += 1
        else:
            for c in count:
                covered += 1 if c else 0
                total += 1
    return SummaryCount(covered=covered, total=total)


__all__ = ["summarize_counts"]

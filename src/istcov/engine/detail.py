"""Lazy detail resolution for a single :class:`IstanbulFileCoverage`.

Every statement, branch group and function is resolved as its own task and all
of them are joined before returning. Entries whose ranges cannot be mapped are
dropped from the detail list; they still count towards the file summaries.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from istcov._meta import logger
from istcov.engine.mapping import map_range
from istcov.model.detail import BranchCoverage, DeclarationCoverage, StatementCoverage
from istcov.model.istanbul import RawRange
from istcov.model.types import BranchLabel

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from istcov.engine.file import IstanbulFileCoverage
    from istcov.model.detail import FileCoverageDetail
    from istcov.model.istanbul import BranchGroup, FunctionEntry


def _branch_label(kind: str, index: int) -> BranchLabel | None:
    if kind != "if":
        return None
    return BranchLabel.IF if index == 0 else BranchLabel.ELSE


async def _branch_detail(file: IstanbulFileCoverage, key: str, group: BranchGroup) -> StatementCoverage | None:
    opts = file.options
    # The implicit "else" of an `if` has no range of its own; it is shown as a
    # zero-length range at the end of the conditional.
    implicit = RawRange(start=group.loc.end, end=group.loc.end)
    loc, *branches = await asyncio.gather(
        map_range(opts.map_location, file.compiled_uri, group.loc),
        *(
            map_range(opts.map_location, file.compiled_uri, implicit if outcome.is_implicit else outcome)
            for outcome in group.locations
        ),
    )
    if loc is None or any(b is None for b in branches):
        return None

    counts = file.original.b[key]
    hits = 0
    branch_coverage: list[BranchCoverage] = []
    for i, location in enumerate(branches):
        branch_hit = counts[i]
        hits += branch_hit
        branch_coverage.append(BranchCoverage(opts.count(branch_hit), location, _branch_label(group.type, i)))
    return StatementCoverage(opts.count(hits), loc, tuple(branch_coverage))


async def _statement_detail(file: IstanbulFileCoverage, key: str, stmt: RawRange) -> StatementCoverage | None:
    loc = await map_range(file.options.map_location, file.compiled_uri, stmt)
    if loc is None:
        return None
    return StatementCoverage(file.options.count(file.original.s[key]), loc)


async def _declaration_detail(
    file: IstanbulFileCoverage, key: str, fn: FunctionEntry
) -> DeclarationCoverage | None:
    loc = await map_range(file.options.map_location, file.compiled_uri, fn.loc)
    if loc is None:
        return None
    return DeclarationCoverage(fn.name, file.options.count(file.original.f[key]), loc)


async def load_detailed_coverage(file: IstanbulFileCoverage) -> list[FileCoverageDetail]:
    """Resolve the statement, branch and function details of *file*.

    Results are ordered branch groups first, then statements, then functions,
    each in report order.
    """
    data = file.original
    todo: list[Awaitable[FileCoverageDetail | None]] = [
        *(_branch_detail(file, key, group) for key, group in data.branch_map.items()),
        *(_statement_detail(file, key, stmt) for key, stmt in data.statement_map.items()),
        *(_declaration_detail(file, key, fn) for key, fn in data.fn_map.items()),
    ]
    results = await asyncio.gather(*todo)
    details = [d for d in results if d is not None]
    logger.debug("%s: resolved %d of %d detail records", file.compiled_uri, len(details), len(todo))
    return details


__all__ = ["load_detailed_coverage"]

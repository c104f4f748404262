"""Location remapping: the pluggable mapper contract and range reconstruction.

A mapper translates one point of the compiled file into a location in some
(possibly different) source file, e.g. by consulting a source map. Mappers are
asynchronous and may return ``None`` when a point has no usable mapping; that
is a soft failure local to the point and is never retried or raised.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from istcov.model.types import FileUri, MappedLocation, Position, Range

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from istcov.model.istanbul import RawPosition, RawRange


class LocationMapper(Protocol):
    def __call__(self, uri: FileUri, position: Position, /) -> Awaitable[MappedLocation | None]: ...


class FileUriMapper(Protocol):
    def __call__(self, uri: FileUri, /) -> Awaitable[FileUri | None]: ...


# --------------------------- Defaults ----------------------------------------
async def identity_location(uri: FileUri, position: Position) -> MappedLocation | None:
    """Return *position* unchanged as a zero-width location in *uri*."""
    return MappedLocation(uri=uri, range=Range.empty(position))


async def identity_file_uri(uri: FileUri) -> FileUri | None:
    return uri


def remap_root(old: Path, new: Path) -> FileUriMapper:
    """Return a file mapper that moves paths under *old* to the same place under *new*.

    Paths outside *old* map to ``None`` so the compiled path is kept.
    """

    async def _map(uri: FileUri) -> FileUri | None:
        try:
            rel = Path(uri).relative_to(old)
        except ValueError:
            return None
        return new / rel

    return _map


# --------------------------- Resolution --------------------------------------
def to_position(raw: RawPosition) -> Position:
    """Convert a report position (1-based line) into a 0-based :class:`Position`.

    Implicit positions carry no line and must be resolved by the caller first.
    """
    if raw.line is None:
        msg = "cannot convert a position without a line"
        raise ValueError(msg)
    return Position(line=raw.line - 1, column=raw.column or 0)


def map_location(mapper: LocationMapper, uri: FileUri, raw: RawPosition) -> Awaitable[MappedLocation | None]:
    return mapper(uri, to_position(raw))


async def map_range(mapper: LocationMapper, uri: FileUri, raw: RawRange) -> Range | None:
    """Map both endpoints of *raw* together and rebuild a range from them.

    When only one endpoint maps, that endpoint's own range stands in for the
    whole span. ``None`` means neither endpoint mapped.
    """
    start, end = await asyncio.gather(
        map_location(mapper, uri, raw.start),
        map_location(mapper, uri, raw.end),
    )
    if start and end:
        return Range(start.range.start, end.range.end)
    some = start or end
    if some:
        return some.range
    return None


__all__ = [
    "FileUriMapper",
    "LocationMapper",
    "identity_file_uri",
    "identity_location",
    "map_location",
    "map_range",
    "remap_root",
    "to_position",
]

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from istcov._meta import logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for it in items:
        if it not in seen:
            seen.add(it)
            out.append(it)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class PathFilter:
    """Include/exclude filter for the file paths recorded in a report.

    Patterns use gitwildmatch syntax and are matched against:
      - the base-relative posix path (preferred)
      - the raw posix path (fallback)
    """

    include: tuple[str, ...]
    exclude: tuple[str, ...]
    base: Path
    _include_spec: PathSpec
    _exclude_spec: PathSpec

    def __init__(
        self,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
        *,
        base: Path,
    ) -> None:
        inc = _dedupe(p.replace("\\", "/") for p in include)
        exc = _dedupe(p.replace("\\", "/") for p in exclude)
        object.__setattr__(self, "include", inc)
        object.__setattr__(self, "exclude", exc)
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "_include_spec", PathSpec.from_lines("gitwildmatch", inc))
        object.__setattr__(self, "_exclude_spec", PathSpec.from_lines("gitwildmatch", exc))

    def _labels(self, path: str | Path) -> tuple[str, str]:
        p = Path(path)
        try:
            rel = p if p.is_absolute() else (self.base / p)
            rel_s = rel.resolve().relative_to(self.base.resolve()).as_posix()
        except (OSError, RuntimeError, ValueError):
            rel_s = p.as_posix()
        return rel_s, p.as_posix()

    def allow(self, path: str | Path) -> bool:
        rel_s, raw = self._labels(path)

        # includes: if specified, must match at least one
        inc = not self.include or any(self._include_spec.match_file(s) for s in (rel_s, raw))
        exc = bool(self.exclude) and any(self._exclude_spec.match_file(s) for s in (rel_s, raw))
        logger.debug("path filter %s include=%s exclude=%s", raw, inc, exc)
        return inc and not exc


__all__ = ["PathFilter"]

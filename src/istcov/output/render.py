from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from istcov._meta import logger
from istcov.output.human import format_human
from istcov.output.json import format_json

if TYPE_CHECKING:
    from istcov.model.report import CoverageReport


class Format(StrEnum):
    """Supported output formats."""

    HUMAN = "human"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    color: bool = False
    base: Path = field(default_factory=Path.cwd)


def render(report: CoverageReport, *, fmt: str, options: RenderOptions) -> str:
    fmt_resolved = Format(fmt)
    logger.debug("selected formatter %s", fmt_resolved.value)
    if fmt_resolved is Format.JSON:
        return format_json(report, options)
    return format_human(report, options)


__all__ = ["Format", "RenderOptions", "render"]

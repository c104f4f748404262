"""Locate and decode ``coverage-final.json`` from a coverage directory."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from istcov._meta import logger
from istcov.errors import FINAL_COVERAGE_FILE_NAME, ReportUnavailableError


def report_path(coverage_dir: Path) -> Path:
    return coverage_dir / FINAL_COVERAGE_FILE_NAME


async def read_coverage_report(coverage_dir: str | Path) -> dict[str, Any]:
    """Return the decoded report stored in *coverage_dir*.

    Raises
    ------
    ReportUnavailableError
        The report file is missing or cannot be read.
    json.JSONDecodeError
        The report exists but is not valid JSON. Propagated unchanged.
    """
    coverage_dir = Path(coverage_dir)
    path = report_path(coverage_dir)
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportUnavailableError(coverage_dir, exc) from exc
    logger.debug("read %s (%d bytes)", path, len(text))
    return json.loads(text)


__all__ = ["read_coverage_report", "report_path"]

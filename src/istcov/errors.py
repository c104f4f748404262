"""Centralised exception hierarchy for istcov."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

FINAL_COVERAGE_FILE_NAME = "coverage-final.json"


class IstcovError(Exception):
    """Base class for all custom istcov exceptions."""


class CoverageReportError(IstcovError):
    """Base class for errors related to Istanbul report handling."""


class ReportUnavailableError(CoverageReportError):
    """``coverage-final.json`` could not be read from the coverage directory."""

    def __init__(self, directory: Path, cause: BaseException) -> None:
        super().__init__(
            f"Could not read {FINAL_COVERAGE_FILE_NAME} in {directory}. "
            f'Make sure the test was run with "json" coverage enabled: {cause}'
        )
        self.directory = directory
        self.cause = cause


class InvalidOptionError(IstcovError):
    """A configuration value has the wrong type or shape."""


__all__ = [
    "FINAL_COVERAGE_FILE_NAME",
    "CoverageReportError",
    "InvalidOptionError",
    "IstcovError",
    "ReportUnavailableError",
]

"""Apply Istanbul coverage reports to a test run."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any

from istcov._meta import logger
from istcov.config import CoverageOptions, merge_options
from istcov.engine.detail import load_detailed_coverage
from istcov.engine.file import IstanbulFileCoverage
from istcov.inputs.report import read_coverage_report
from istcov.model.istanbul import FileCoverageData, parse_report
from istcov.run import remove_on_dispose

if TYPE_CHECKING:
    from collections.abc import Mapping

    from istcov.model.detail import FileCoverageDetail
    from istcov.run import RunLike

OptionsLike = CoverageOptions | dict[str, Any] | None


class IstanbulCoverageContext:
    """Maps Istanbul coverage onto a run and answers lazy detail requests.

    *defaults* are merged over :class:`CoverageOptions` once; every call may
    override them again.
    """

    def __init__(self, defaults: OptionsLike = None) -> None:
        self.default_options = merge_options(CoverageOptions(), defaults)

    async def apply(
        self,
        run: RunLike,
        coverage_dir: str | Path,
        opts: OptionsLike = None,
    ) -> list[IstanbulFileCoverage]:
        """Apply the ``coverage-final.json`` written to *coverage_dir* to *run*.

        The tests must have been run with Istanbul's "json" reporter.

        Raises
        ------
        ReportUnavailableError
            The coverage file could not be read.
        json.JSONDecodeError
            The coverage file is not valid JSON.
        """
        coverage_dir = Path(coverage_dir)
        coverage = await read_coverage_report(coverage_dir)

        options = merge_options(self.default_options, opts)
        if options.remove_data_at_end_of_run:
            remove_on_dispose(run, coverage_dir)

        return await self.apply_json(run, coverage, options)

    async def apply_json(
        self,
        run: RunLike,
        files: Mapping[str, Mapping[str, Any] | FileCoverageData],
        opts: OptionsLike = None,
    ) -> list[IstanbulFileCoverage]:
        """Add one :class:`IstanbulFileCoverage` per report entry to *run*."""
        options = merge_options(self.default_options, opts)

        async def _build(entry: FileCoverageData) -> IstanbulFileCoverage:
            compiled_uri = Path(entry.path)
            original_uri = await options.map_file_uri(compiled_uri) or compiled_uri
            return IstanbulFileCoverage(original_uri, entry, compiled_uri, options)

        built = await asyncio.gather(*(_build(entry) for entry in parse_report(files).values()))
        for file in built:
            run.add_coverage(file)
        logger.debug("applied coverage for %d file(s)", len(built))
        return list(built)

    async def load_detailed_coverage(self, run: RunLike, file: object) -> list[FileCoverageDetail]:
        """Return the detail records of *file*; files from other sources yield ``[]``."""
        if not isinstance(file, IstanbulFileCoverage):
            return []
        return await load_detailed_coverage(file)


__all__ = ["IstanbulCoverageContext"]

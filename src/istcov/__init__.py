from istcov._meta import __version__, logger
from istcov.config import CoverageOptions, merge_options
from istcov.context import IstanbulCoverageContext
from istcov.engine.file import IstanbulFileCoverage
from istcov.errors import CoverageReportError, IstcovError, ReportUnavailableError
from istcov.run import CoverageRun

__all__ = [
    "CoverageOptions",
    "CoverageReportError",
    "CoverageRun",
    "IstanbulCoverageContext",
    "IstanbulFileCoverage",
    "IstcovError",
    "ReportUnavailableError",
    "__version__",
    "logger",
    "merge_options",
]

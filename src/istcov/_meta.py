from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("istcov")

logger = logging.getLogger("istcov")

__all__ = ["__version__", "logger"]

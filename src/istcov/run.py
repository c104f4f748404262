"""Test-run lifecycle host: the object coverage is registered with.

:class:`RunLike` is the interface the coverage context depends on;
:class:`CoverageRun` is a small in-memory implementation of it.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from istcov._meta import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from istcov.engine.file import IstanbulFileCoverage


class Disposable:
    """Handle that undoes a registration when disposed (at most once)."""

    def __init__(self, on_dispose: Callable[[], None]) -> None:
        self._on_dispose = on_dispose
        self._disposed = False

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._on_dispose()


class RunLike(Protocol):
    def add_coverage(self, file: IstanbulFileCoverage) -> None: ...

    def on_did_dispose(self, listener: Callable[[], None]) -> Disposable: ...


class CoverageRun:
    """In-memory run that collects file coverage and fires disposal listeners."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self.coverage: list[IstanbulFileCoverage] = []
        self._listeners: list[Callable[[], None]] = []
        self.disposed = False

    def add_coverage(self, file: IstanbulFileCoverage) -> None:
        self.coverage.append(file)

    def on_did_dispose(self, listener: Callable[[], None]) -> Disposable:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Disposable(_remove)

    def dispose(self) -> None:
        """End the run and notify every registered listener once."""
        if self.disposed:
            return
        self.disposed = True
        for listener in list(self._listeners):
            listener()
        self._listeners.clear()


# --------------------------- Coverage directory cleanup ----------------------
def _remove_quietly(directory: Path) -> None:
    try:
        shutil.rmtree(directory)
    except OSError as exc:
        logger.debug("could not remove coverage directory %s: %s", directory, exc)


def _schedule_removal(directory: Path) -> None:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        _remove_quietly(directory)
        return
    loop.run_in_executor(None, _remove_quietly, directory)


def remove_on_dispose(run: RunLike, directory: str | Path) -> Disposable:
    """Delete *directory* once *run* is disposed; removal errors are swallowed."""
    directory = Path(directory)

    def _on_dispose() -> None:
        registration.dispose()
        _schedule_removal(directory)

    registration = run.on_did_dispose(_on_dispose)
    return registration


__all__ = ["CoverageRun", "Disposable", "RunLike", "remove_on_dispose"]

"""Central configuration and constants for ``istcov``."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, fields, replace
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING, Any

from istcov.engine.mapping import identity_file_uri, identity_location
from istcov.errors import InvalidOptionError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from istcov.engine.mapping import FileUriMapper, LocationMapper

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


@dataclass(frozen=True, slots=True)
class CoverageOptions:
    """Options controlling how an Istanbul report is applied to a run.

    Parameters
    ----------
    remove_data_at_end_of_run:
        Remove the coverage directory once the run is disposed.
    boolean_counts:
        Report detail hits as covered/not-covered booleans instead of raw
        execution counts. Summary counts are unaffected.
    map_file_uri:
        Transform the file path recorded in the report, e.g. to point at the
        original source of a compiled file.
    map_location:
        Transform a single position of the compiled file, e.g. by applying a
        source map.
    """

    remove_data_at_end_of_run: bool = True
    boolean_counts: bool = False
    map_file_uri: FileUriMapper = identity_file_uri
    map_location: LocationMapper = identity_location

    def count(self, n: int) -> int | bool:
        """Apply the configured count mode to a raw hit count."""
        return n > 0 if self.boolean_counts else n


_OPTION_NAMES = frozenset(f.name for f in fields(CoverageOptions))
_BASELINE = CoverageOptions()


def merge_options(
    defaults: CoverageOptions,
    overrides: CoverageOptions | Mapping[str, Any] | None = None,
) -> CoverageOptions:
    """Return *defaults* updated with the non-``None`` entries of *overrides*.

    A :class:`CoverageOptions` override contributes only the fields that differ
    from a default-constructed instance, so it layers onto *defaults* instead
    of replacing them.
    """
    if overrides is None:
        return defaults
    if isinstance(overrides, CoverageOptions):
        # only fields set away from their defaults override
        overrides = {
            f.name: value
            for f in fields(CoverageOptions)
            if (value := getattr(overrides, f.name)) != getattr(_BASELINE, f.name)
        }
    unknown = set(overrides) - _OPTION_NAMES
    if unknown:
        msg = f"Unknown coverage option(s): {', '.join(sorted(unknown))}"
        raise InvalidOptionError(msg)
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(defaults, **changes)


# --------------------------- pyproject ---------------------------------------
_PYPROJECT_KEYS: dict[str, str] = {
    "remove-data-at-end-of-run": "remove_data_at_end_of_run",
    "boolean-counts": "boolean_counts",
}


def read_pyproject_options(pyproject: Path) -> dict[str, bool]:
    """Return option overrides from ``[tool.istcov]`` in *pyproject*.

    Missing files or tables yield an empty mapping; unknown keys are ignored.
    """
    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        msg = f"{pyproject}: invalid TOML: {exc}"
        raise InvalidOptionError(msg) from exc

    table = data.get("tool", {}).get("istcov", {})
    if not isinstance(table, dict):
        msg = f"{pyproject}: [tool.istcov] must be a table"
        raise InvalidOptionError(msg)

    out: dict[str, bool] = {}
    for key, name in _PYPROJECT_KEYS.items():
        if key not in table:
            continue
        value = table[key]
        if not isinstance(value, bool):
            msg = f"{pyproject}: tool.istcov.{key} must be a boolean, got {value!r}"
            raise InvalidOptionError(msg)
        out[name] = value
    return out


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for structured output."""
    return json.loads(resources.files("istcov.data").joinpath("schema.json").read_text(encoding="utf-8"))


__all__ = [
    "LOG_FORMAT",
    "CoverageOptions",
    "get_schema",
    "merge_options",
    "read_pyproject_options",
]

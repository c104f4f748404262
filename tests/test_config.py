"""Tests for option merging, pyproject defaults and module side-effect behavior."""

from __future__ import annotations

import importlib
import logging
import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

from istcov.config import CoverageOptions, merge_options, read_pyproject_options
from istcov.engine.mapping import identity_file_uri, identity_location
from istcov.errors import InvalidOptionError
from tests.conftest import unmapped

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.monkeypatch import MonkeyPatch


def test_defaults() -> None:
    opts = CoverageOptions()
    assert opts.remove_data_at_end_of_run is True
    assert opts.boolean_counts is False
    assert opts.map_file_uri is identity_file_uri
    assert opts.map_location is identity_location


def test_merge_ignores_none_and_keeps_defaults() -> None:
    base = CoverageOptions(boolean_counts=True)
    merged = merge_options(base, {"remove_data_at_end_of_run": False, "boolean_counts": None})
    assert merged.boolean_counts is True
    assert merged.remove_data_at_end_of_run is False
    assert base.remove_data_at_end_of_run is True


def test_merge_with_options_object_layers_onto_defaults() -> None:
    base = CoverageOptions(remove_data_at_end_of_run=False, map_location=unmapped)
    merged = merge_options(base, CoverageOptions(boolean_counts=True))
    assert merged.boolean_counts is True
    assert merged.remove_data_at_end_of_run is False
    assert merged.map_location is unmapped
    assert merge_options(base, None) is base


def test_merge_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidOptionError, match="removeCoverageData"):
        merge_options(CoverageOptions(), {"removeCoverageData": False})


def test_count_mode() -> None:
    assert CoverageOptions().count(5) == 5
    assert CoverageOptions(boolean_counts=True).count(5) is True
    assert CoverageOptions(boolean_counts=True).count(0) is False


def test_read_pyproject_options(tmp_path: Path) -> None:
    py = tmp_path / "pyproject.toml"
    py.write_text(
        textwrap.dedent(
            """
            [tool.istcov]
            boolean-counts = true
            remove-data-at-end-of-run = false
            unrelated = "ignored"
            """
        ),
        encoding="utf-8",
    )
    assert read_pyproject_options(py) == {"boolean_counts": True, "remove_data_at_end_of_run": False}


def test_read_pyproject_options_missing_file_or_table(tmp_path: Path) -> None:
    assert read_pyproject_options(tmp_path / "pyproject.toml") == {}
    py = tmp_path / "pyproject.toml"
    py.write_text("[tool.other]\nx = 1\n", encoding="utf-8")
    assert read_pyproject_options(py) == {}


def test_read_pyproject_options_wrong_type(tmp_path: Path) -> None:
    py = tmp_path / "pyproject.toml"
    py.write_text('[tool.istcov]\nboolean-counts = "yes"\n', encoding="utf-8")
    with pytest.raises(InvalidOptionError, match="must be a boolean"):
        read_pyproject_options(py)


def test_read_pyproject_options_invalid_toml(tmp_path: Path) -> None:
    py = tmp_path / "pyproject.toml"
    py.write_text("[tool.istcov\n", encoding="utf-8")
    with pytest.raises(InvalidOptionError, match="invalid TOML"):
        read_pyproject_options(py)


def test_get_schema_cached(monkeypatch: MonkeyPatch) -> None:
    """``get_schema`` should load the schema once and cache the result."""
    from istcov import config

    config.get_schema.cache_clear()
    calls = 0
    original = config.resources.files

    def tracking_files(package: str):
        nonlocal calls
        calls += 1
        return original(package)

    monkeypatch.setattr(config.resources, "files", tracking_files)

    schema1 = config.get_schema()
    schema2 = config.get_schema()

    assert schema1 == schema2
    assert calls == 1


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args, **kwargs):
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)

    for name in [m for m in sys.modules if m == "istcov" or m.startswith("istcov.")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("istcov.output")

    assert not basic_called

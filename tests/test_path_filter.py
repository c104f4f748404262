from __future__ import annotations

from pathlib import Path

from istcov.model.path_filter import PathFilter


def test_include_and_exclude(tmp_path: Path) -> None:
    pf = PathFilter(include=["dist/"], exclude=["vendor/"], base=tmp_path)
    assert pf.allow(tmp_path / "dist" / "a.js")
    assert not pf.allow(tmp_path / "dist" / "vendor" / "b.js")
    assert not pf.allow(tmp_path / "lib" / "c.js")


def test_no_patterns_allows_everything(tmp_path: Path) -> None:
    pf = PathFilter(base=tmp_path)
    assert pf.allow("/anywhere/x.js")
    assert pf.allow(tmp_path / "x.js")


def test_raw_path_fallback_outside_base(tmp_path: Path) -> None:
    pf = PathFilter(include=["*.ts"], base=tmp_path)
    assert pf.allow("/elsewhere/src/a.ts")
    assert not pf.allow("/elsewhere/src/a.js")


def test_patterns_are_deduplicated(tmp_path: Path) -> None:
    pf = PathFilter(include=["*.js", "*.js"], exclude=["x\\y.js"], base=tmp_path)
    assert pf.include == ("*.js",)
    assert pf.exclude == ("x/y.js",)

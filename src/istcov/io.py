from __future__ import annotations

from pathlib import Path


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")


def display_path(path: str | Path, *, base: Path) -> str:
    """Return *path* relative to *base* when it lives underneath it."""
    p = Path(path)
    if p.is_absolute():
        try:
            return p.resolve().relative_to(base.resolve()).as_posix()
        except (OSError, RuntimeError, ValueError):
            return p.as_posix()
    return p.as_posix()


__all__ = ["display_path", "write_output"]

"""Filesystem helpers used by the CLI commands."""

from __future__ import annotations

from pathlib import Path


def read_source(path: Path) -> str:
    """Return the decoded content of a source document."""
    return path.read_text(encoding="utf-8")


def write_output_file(target: Path, content: str) -> None:
    """Persist LaTeX content to disk, creating parent directories as needed.

    ``OSError`` propagates unchanged so callers keep its errno and filename.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def output_target_for(source: Path, output_dir: Path) -> Path:
    """Return the ``.tex`` path written for ``source`` inside ``output_dir``."""
    return output_dir / f"{source.stem}.tex"


__all__ = ["output_target_for", "read_source", "write_output_file"]

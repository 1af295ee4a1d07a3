"""CLI command implementations exposed via `pretex.ui.cli`."""

from __future__ import annotations

from .convert import convert


__all__ = ["convert"]

"""Rendering context handed to block handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:  # pragma: no cover - typing only
    from pretex.adapters.latex.formatter import LaTeXFormatter

    from .config import PretexConfig


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Configuration and partial formatter shared by every handler call."""

    config: PretexConfig
    formatter: LaTeXFormatter


__all__ = ["RenderContext"]

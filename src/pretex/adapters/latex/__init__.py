"""LaTeX adapter layer: partial formatter and block renderer."""

from __future__ import annotations

from .formatter import LaTeXFormatter
from .renderer import LaTeXRenderer


__all__ = ["LaTeXFormatter", "LaTeXRenderer"]

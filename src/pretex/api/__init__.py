"""High-level API for converting source text into LaTeX."""

from __future__ import annotations

from .document import Document
from .pipeline import transpile


__all__ = ["Document", "transpile"]

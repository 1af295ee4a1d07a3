"""Primary public API for pretex."""

from __future__ import annotations

from pretex.adapters.latex import LaTeXFormatter, LaTeXRenderer
from pretex.api import Document, transpile
from pretex.core.blocks import Block, segment
from pretex.core.config import DocumentTemplate, PretexConfig, load_config
from pretex.core.exceptions import (
    ConfigError,
    EmptyBlockError,
    PretexError,
    UnrecoverableError,
    UnsupportedHeaderLevelError,
)
from pretex.core.lines import LineKind, LineType, classify, classify_line
from pretex.core.rules import renders
from pretex.version import get_version


__version__ = get_version()

__all__ = [
    "Block",
    "ConfigError",
    "Document",
    "DocumentTemplate",
    "EmptyBlockError",
    "LaTeXFormatter",
    "LaTeXRenderer",
    "LineKind",
    "LineType",
    "PretexConfig",
    "PretexError",
    "UnrecoverableError",
    "UnsupportedHeaderLevelError",
    "__version__",
    "classify",
    "classify_line",
    "get_version",
    "load_config",
    "renders",
    "segment",
    "transpile",
]

"""Core primitives of the pretex pipeline: lines, blocks, rules and errors."""

from __future__ import annotations

from .blocks import Block, segment
from .config import DocumentTemplate, PretexConfig, load_config
from .context import RenderContext
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    ConfigError,
    EmptyBlockError,
    PretexError,
    UnrecoverableError,
    UnsupportedHeaderLevelError,
)
from .lines import (
    AlignLine,
    HeaderLine,
    Line,
    LineKind,
    LineType,
    NormalLine,
    classify,
    classify_line,
    split_source_lines,
)
from .rules import RenderRegistry, renders


__all__ = [
    "AlignLine",
    "Block",
    "ConfigError",
    "DiagnosticEmitter",
    "DocumentTemplate",
    "EmptyBlockError",
    "HeaderLine",
    "Line",
    "LineKind",
    "LineType",
    "LoggingEmitter",
    "NormalLine",
    "NullEmitter",
    "PretexConfig",
    "PretexError",
    "RenderContext",
    "RenderRegistry",
    "UnrecoverableError",
    "UnsupportedHeaderLevelError",
    "classify",
    "classify_line",
    "load_config",
    "renders",
    "segment",
    "split_source_lines",
]

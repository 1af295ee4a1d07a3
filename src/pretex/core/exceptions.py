"""Exception hierarchy for the pretex conversion pipeline.

Two families coexist. :class:`PretexError` covers recoverable failures that a
caller can report and move past (an unreadable configuration file, for
instance). :class:`UnrecoverableError` marks structurally impossible states
reached inside the core; correct usage never triggers them and callers are
expected to abort the whole run.
"""

from __future__ import annotations


class PretexError(RuntimeError):
    """Base exception for recoverable pretex failures."""


class ConfigError(PretexError):
    """Raised when a configuration file cannot be loaded or validated."""


class UnrecoverableError(Exception):
    """Base exception for fatal conditions raised by the core pipeline."""


class EmptyBlockError(UnrecoverableError):
    """Raised when a block is built or rendered without any content line."""

    def __init__(self, message: str = "block buffer is empty") -> None:
        super().__init__(message)


class UnsupportedHeaderLevelError(UnrecoverableError):
    """Raised when a header block carries a level outside the supported range."""

    def __init__(self, level: int, maximum: int) -> None:
        self.level = level
        self.maximum = maximum
        super().__init__(f"unsupported header level {level} (supported: 1-{maximum})")


__all__ = [
    "ConfigError",
    "EmptyBlockError",
    "PretexError",
    "UnrecoverableError",
    "UnsupportedHeaderLevelError",
]

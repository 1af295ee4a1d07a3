"""Public CLI exports for pretex."""

from __future__ import annotations

from .app import app, main
from .commands import convert
from .state import emit_error


__all__ = [
    "app",
    "convert",
    "emit_error",
    "main",
]

"""Pipeline event receiver printing progress at ``-v``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pretex.core.diagnostics import format_event_message

from .state import CLIState, render_message


class CliEmitter:
    """Show known pipeline events on stderr once verbosity reaches 1."""

    def __init__(self, state: CLIState) -> None:
        self._state = state

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]

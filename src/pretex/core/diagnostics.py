"""Progress events raised while a document moves through the pipeline.

The core never prints. It hands named events with a small payload to a
:class:`DiagnosticEmitter`; the library default forwards them to ``logging``
and the CLI shows them on stderr when asked to be verbose.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receiver for pipeline events."""

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter dropping every event."""

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter writing event summaries to a logger at INFO level."""

    def __init__(self, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        summary = format_event_message(name, payload)
        if summary is None:
            self._logger.debug("%s: %r", name, dict(payload))
        else:
            self._logger.info(summary)


def _describe_kinds(kinds: Mapping[str, int]) -> str:
    if not kinds:
        return ""
    parts = [f"{kind}={kinds[kind]}" for kind in sorted(kinds)]
    return " (" + ", ".join(parts) + ")"


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Summarise a known event in one line, ``None`` for unknown events."""
    if name == "document_segmented":
        return (
            f"Segmented {payload.get('lines', 0)} line(s) into "
            f"{payload.get('blocks', 0)} block(s)"
            f"{_describe_kinds(payload.get('kinds') or {})}"
        )
    if name == "document_transpiled":
        source = payload.get("source") or "<text>"
        return f"Transpiled {source} ({payload.get('characters', 0)} characters)"
    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]

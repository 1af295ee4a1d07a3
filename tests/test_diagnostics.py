from collections.abc import Mapping
import logging
from typing import Any

import pytest

from pretex.api import transpile
from pretex.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    format_event_message,
)


class RecordingEmitter:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)
    assert isinstance(RecordingEmitter(), DiagnosticEmitter)


def test_pipeline_events() -> None:
    emitter = RecordingEmitter()
    output = transpile("# T\nbody\nmore\n>x", emitter=emitter, source="doc.pre")
    names = [name for name, _ in emitter.events]
    assert names == ["document_segmented", "document_transpiled"]
    segmented = emitter.events[0][1]
    assert segmented == {
        "lines": 4,
        "blocks": 3,
        "kinds": {"header(1)": 1, "normal": 1, "align": 1},
    }
    assert emitter.events[1][1] == {"source": "doc.pre", "characters": len(output)}


def test_format_event_message() -> None:
    message = format_event_message(
        "document_segmented", {"lines": 2, "blocks": 1, "kinds": {"normal": 1}}
    )
    assert message == "Segmented 2 line(s) into 1 block(s) (normal=1)"
    assert format_event_message("document_transpiled", {"characters": 10}) == (
        "Transpiled <text> (10 characters)"
    )
    assert format_event_message("unknown", {}) is None


def test_logging_emitter_forwards_events(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(logger_obj=logging.getLogger("pretex.test"))
    with caplog.at_level(logging.DEBUG, logger="pretex.test"):
        emitter.event("document_transpiled", {"source": "a.pre", "characters": 3})
        emitter.event("custom", {"value": 1})
    levels = {record.getMessage(): record.levelno for record in caplog.records}
    assert levels["Transpiled a.pre (3 characters)"] == logging.INFO
    assert levels["custom: {'value': 1}"] == logging.DEBUG


def test_transpile_logs_progress_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="pretex"):
        transpile("hello", source="note.pre")
    assert "Segmented 1 line(s) into 1 block(s) (normal=1)" in caplog.text
    assert "Transpiled note.pre" in caplog.text

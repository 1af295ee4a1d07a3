"""Functional entry point converting source text into a LaTeX document."""

from __future__ import annotations

from pretex.adapters.latex.renderer import LaTeXRenderer
from pretex.core.config import PretexConfig
from pretex.core.diagnostics import DiagnosticEmitter, LoggingEmitter

from .document import Document


def transpile(
    text: str,
    config: PretexConfig | None = None,
    *,
    renderer: LaTeXRenderer | None = None,
    emitter: DiagnosticEmitter | None = None,
    source: str | None = None,
) -> str:
    """Convert ``text`` into a complete LaTeX document.

    Raises :class:`~pretex.core.exceptions.UnrecoverableError` subclasses when
    a block cannot be rendered; no other failure is expected here. Progress
    events go to ``emitter``, or to the ``pretex`` logger when none is given.
    """
    active_emitter = emitter or LoggingEmitter()
    active_config = config or (renderer.config if renderer is not None else PretexConfig())
    document = Document.from_text(text, active_config, emitter=active_emitter)
    output = document.transpile(renderer)
    active_emitter.event(
        "document_transpiled",
        {"source": source, "characters": len(output)},
    )
    return output


__all__ = ["transpile"]

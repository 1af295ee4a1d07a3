"""Document model assembling rendered blocks between header and footer."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging

from pretex.adapters.latex.renderer import LaTeXRenderer
from pretex.core.blocks import Block, segment
from pretex.core.config import PretexConfig
from pretex.core.diagnostics import DiagnosticEmitter, NullEmitter
from pretex.core.lines import classify


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Document:
    """Segmented source document ready to be transpiled once."""

    blocks: tuple[Block, ...]
    config: PretexConfig = field(default_factory=PretexConfig)

    @classmethod
    def from_text(
        cls,
        text: str,
        config: PretexConfig | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> Document:
        """Classify and segment ``text`` into a document."""
        active_config = config or PretexConfig()
        lines = classify(text, active_config)
        blocks = tuple(segment(lines))
        kinds = Counter(str(block.kind) for block in blocks)
        (emitter or NullEmitter()).event(
            "document_segmented",
            {"lines": len(lines), "blocks": len(blocks), "kinds": dict(kinds)},
        )
        logger.debug("segmented %d line(s) into %d block(s)", len(lines), len(blocks))
        return cls(blocks=blocks, config=active_config)

    def transpile(self, renderer: LaTeXRenderer | None = None) -> str:
        """Return header, the blocks rendered inside the flow environment, then footer."""
        active_renderer = renderer or LaTeXRenderer(config=self.config)
        template = self.config.document
        body = active_renderer.render_body(self.blocks, template.flow_environment)
        return template.header + body + template.footer


__all__ = ["Document"]

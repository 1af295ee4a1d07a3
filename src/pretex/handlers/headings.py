"""Handlers for heading blocks.

Levels 1 to 3 map to the sectioning commands. Level 4 typesets a centered
title, which requires leaving the ambient flow environment and entering it
again afterwards so the next block still starts inside it. Level 5 is a bold
run-in line.
"""

from __future__ import annotations

from ..core.blocks import Block
from ..core.context import RenderContext
from ..core.exceptions import UnsupportedHeaderLevelError
from ..core.lines import LineType
from ..core.rules import renders


SECTIONING_TEMPLATES: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
}


def heading_text(block: Block) -> str:
    """Return the heading text of ``block`` as a single trimmed line."""
    return " ".join(block.content).strip()


@renders(LineType.HEADER, name="headings")
def render_heading(block: Block, context: RenderContext) -> str:
    """Convert a heading block into LaTeX according to its level."""
    level = block.kind.level or 0
    maximum = context.config.max_header_level
    if not 1 <= level <= maximum:
        raise UnsupportedHeaderLevelError(level, maximum)

    text = heading_text(block)
    formatter = context.formatter

    template = SECTIONING_TEMPLATES.get(level)
    if template is not None:
        return formatter.render(template, text=text) + "\n"

    if level == 4:
        environment = context.config.document.flow_environment
        return formatter.centered_title(text=text, environment=environment) + "\n"

    if level == 5:
        return formatter.strong_line(text=text) + "\n"

    raise UnsupportedHeaderLevelError(level, maximum)

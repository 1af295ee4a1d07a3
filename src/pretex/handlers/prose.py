"""Handler for prose blocks."""

from __future__ import annotations

from ..core.blocks import Block
from ..core.context import RenderContext
from ..core.lines import LineType
from ..core.rules import renders


@renders(LineType.NORMAL, name="prose")
def render_prose(block: Block, context: RenderContext) -> str:
    """Join prose lines, turning line-break sentinels into paragraph breaks."""
    sentinel = context.config.line_break_sentinel
    paragraph_break = context.formatter.paragraph_break()
    lines = [
        paragraph_break if line.strip() == sentinel else line for line in block.content
    ]
    return "\n".join(lines).strip() + "\n"

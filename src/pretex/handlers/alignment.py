"""Handler for alignment (equation) blocks."""

from __future__ import annotations

from ..core.blocks import Block
from ..core.context import RenderContext
from ..core.lines import LineType
from ..core.rules import renders


QUAD_PLACEHOLDER = r"\quad"


def is_commented(block: Block, sentinel: str) -> bool:
    """Return True when any row of ``block`` carries an inline comment."""
    return any(sentinel in line for line in block.content)


def split_row(line: str, sentinel: str) -> tuple[str, str | None]:
    """Split ``line`` into its formula and the verbatim comment, if any."""
    formula, found, comment = line.partition(sentinel)
    if not found:
        return line, None
    return formula.strip(), comment


@renders(LineType.ALIGN, name="alignment")
def render_alignment(block: Block, context: RenderContext) -> str:
    """Render an ``align`` environment with one or two columns per row.

    The column count is decided for the whole block before any row is
    emitted: a single commented row gives every row a text column, padded
    with a quad where the row has no comment of its own.
    """
    sentinel = context.config.comment_sentinel
    commented = is_commented(block, sentinel)
    formatter = context.formatter

    rows: list[str] = []
    for line in block.content:
        formula, comment = split_row(line, sentinel)
        if comment is None and commented:
            comment = QUAD_PLACEHOLDER
        rows.append(formatter.align_row(formula, comment))

    return formatter.align(rows, environment=context.config.align_environment) + "\n"

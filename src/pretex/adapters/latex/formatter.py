"""Jinja2 rendering of the LaTeX partials shipped in ``partials/``.

Partials use LaTeX-friendly delimiters (``\\VAR{...}`` for values,
``\\BLOCK{...}`` for statements) so that braces in the markup stay literal.
Jinja drops the final newline of each partial; callers add line endings.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound


TEMPLATE_DIR = Path(__file__).resolve().parent / "partials"


class LaTeXFormatter:
    """Typed access to the partials used by the block handlers."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self.env = Environment(
            block_start_string=r"\BLOCK{",
            block_end_string=r"}",
            variable_start_string=r"\VAR{",
            variable_end_string=r"}",
            comment_start_string=r"\COMMENT{",
            comment_end_string=r"}",
            loader=FileSystemLoader(template_dir),
            undefined=StrictUndefined,
        )
        self._overrides: dict[str, Template] = {}

    @property
    def template_names(self) -> set[str]:
        """Return the partial names available to :meth:`render`."""
        shipped = {Path(name).stem for name in self.env.list_templates(extensions=["tex"])}
        return shipped | set(self._overrides)

    def render(self, name: str, **values: Any) -> str:
        """Render the partial ``name`` with ``values``."""
        template = self._overrides.get(name)
        if template is None:
            try:
                template = self.env.get_template(f"{name}.tex")
            except TemplateNotFound:
                raise KeyError(name) from None
        return template.render(**values)

    def override(self, name: str, source: str | Path) -> None:
        """Replace partial ``name`` with inline source or the content of a file."""
        if isinstance(source, Path):
            source = source.read_text(encoding="utf-8")
        self._overrides[name] = self.env.from_string(source)

    def paragraph_break(self) -> str:
        return self.render("paragraph_break")

    def strong_line(self, text: str) -> str:
        return self.render("strong_line", text=text)

    def centered_title(self, text: str, environment: str) -> str:
        return self.render("centered_title", text=text, environment=environment)

    def align_row(self, formula: str, comment: str | None = None) -> str:
        """Render one row, with a text column when ``comment`` is given."""
        if comment is None:
            return self.render("align_row_plain", formula=formula)
        return self.render("align_row", formula=formula, comment=comment)

    def align(self, rows: Iterable[str], environment: str = "align*") -> str:
        return self.render("align", environment=environment, body="\n".join(rows))

    def flow(self, body: str, environment: str) -> str:
        """Wrap rendered fragments into the ambient text-flow environment."""
        return self.render("flow", environment=environment, body=body)


__all__ = ["TEMPLATE_DIR", "LaTeXFormatter"]

"""Block renderer turning segmented source blocks into LaTeX fragments."""

from __future__ import annotations

from collections.abc import Iterable
from types import ModuleType

from pretex.core.blocks import Block
from pretex.core.config import PretexConfig
from pretex.core.context import RenderContext
from pretex.core.exceptions import EmptyBlockError
from pretex.core.rules import Handler, RenderRegistry, module_rules, rule_of

from .formatter import LaTeXFormatter


class LaTeXRenderer:
    """Render blocks by dispatching on their kind to registered handlers."""

    def __init__(
        self,
        config: PretexConfig | None = None,
        formatter: LaTeXFormatter | None = None,
    ) -> None:
        self.config = config or PretexConfig()
        self.formatter = formatter or LaTeXFormatter()
        self.context = RenderContext(config=self.config, formatter=self.formatter)
        self.registry = RenderRegistry()

        from pretex.handlers import alignment, headings, prose

        for module in (prose, headings, alignment):
            self.register(module)

    def register(self, handler: Handler | ModuleType) -> None:
        """Register a ``@renders`` handler or every handler of a module."""
        if isinstance(handler, ModuleType):
            for rule in module_rules(handler):
                self.registry.register(rule)
            return
        rule = rule_of(handler)
        if rule is None:
            raise TypeError(f"{handler!r} is not decorated with @renders")
        self.registry.register(rule)

    def render(self, block: Block) -> str:
        """Render a single block into its LaTeX fragment."""
        if not block.content:
            raise EmptyBlockError("cannot render a block without content")
        rule = self.registry.resolve(block.kind.type)
        return rule.handler(block, self.context)

    def render_body(self, blocks: Iterable[Block], environment: str | None = None) -> str:
        """Render ``blocks`` in order inside the ambient flow environment.

        Every block starts and ends with the environment open; level-4
        headings rely on it to close and reopen the environment around
        their centered title.
        """
        fragments = "".join(self.render(block) for block in blocks)
        environment = environment or self.config.document.flow_environment
        return self.formatter.flow(fragments, environment) + "\n"

    def describe_registered_rules(self) -> list[dict[str, object]]:
        return self.registry.describe()


__all__ = ["LaTeXRenderer"]

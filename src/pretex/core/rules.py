"""Registration of block handlers.

A handler is a callable ``(block, context) -> str`` tagged with ``@renders``
for the :class:`~pretex.core.lines.LineType` values it handles. The registry
keeps every registration; lookups return the highest priority rule, the
latest registration winning ties, so a caller can shadow a built-in handler
by registering its own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from types import ModuleType
from typing import TYPE_CHECKING, Any

from .lines import LineType


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .blocks import Block
    from .context import RenderContext


Handler = Callable[["Block", "RenderContext"], str]

RULE_ATTRIBUTE = "__pretex_rule__"


@dataclass(frozen=True)
class RenderRule:
    """Handler together with the block types it renders."""

    types: tuple[LineType, ...]
    name: str
    priority: int = 0
    handler: Handler | None = None


def renders(*types: LineType, priority: int = 0, name: str | None = None) -> Callable[[Handler], Handler]:
    """Tag a handler with the block types it renders."""
    if not types:
        raise TypeError("@renders requires at least one LineType")

    def decorator(handler: Handler) -> Handler:
        rule = RenderRule(types=types, name=name or handler.__name__, priority=priority)
        setattr(handler, RULE_ATTRIBUTE, rule)
        return handler

    return decorator


def rule_of(handler: Any) -> RenderRule | None:
    """Return the rule bound to a ``@renders`` handler, ``None`` otherwise."""
    rule = getattr(handler, RULE_ATTRIBUTE, None)
    if not isinstance(rule, RenderRule):
        return None
    return replace(rule, handler=handler)


def module_rules(module: ModuleType) -> Iterator[RenderRule]:
    """Yield the rules of every tagged handler defined in ``module``."""
    for value in vars(module).values():
        rule = rule_of(value)
        if rule is not None:
            yield rule


class RenderRegistry:
    """Rules grouped by block type, best candidate first."""

    def __init__(self) -> None:
        self._rules: dict[LineType, list[RenderRule]] = {line_type: [] for line_type in LineType}

    def register(self, rule: RenderRule) -> None:
        if rule.handler is None:
            raise TypeError(f"rule '{rule.name}' has no handler")
        for line_type in rule.types:
            candidates = self._rules[line_type]
            candidates.insert(0, rule)
            candidates.sort(key=lambda candidate: -candidate.priority)

    def resolve(self, line_type: LineType) -> RenderRule:
        candidates = self._rules[line_type]
        if not candidates:
            raise LookupError(f"No render rule registered for '{line_type.value}' blocks")
        return candidates[0]

    def describe(self) -> list[dict[str, object]]:
        """List registrations as plain mappings, in lookup order per type."""
        return [
            {"type": line_type.value, "name": rule.name, "priority": rule.priority, "order": order}
            for line_type, candidates in self._rules.items()
            for order, rule in enumerate(candidates)
        ]


__all__ = [
    "Handler",
    "RenderRegistry",
    "RenderRule",
    "module_rules",
    "renders",
    "rule_of",
]

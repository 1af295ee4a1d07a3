"""Line classification for the line-oriented source markup.

Every raw line maps to exactly one :data:`Line` value. The leading character
decides the variant: the alignment marker yields an :class:`AlignLine`, a run
of header markers yields a :class:`HeaderLine` whose level is the run length,
and anything else is prose (:class:`NormalLine`).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import PretexConfig


class LineType(Enum):
    """Outer tag of a classified line."""

    NORMAL = "normal"
    HEADER = "header"
    ALIGN = "align"


@dataclass(frozen=True, slots=True)
class LineKind:
    """Grouping key comparing the tag together with the header level."""

    type: LineType
    level: int | None = None

    def __str__(self) -> str:
        if self.type is LineType.HEADER:
            return f"header({self.level})"
        return self.type.value


NORMAL = LineKind(LineType.NORMAL)
ALIGN = LineKind(LineType.ALIGN)


def header_kind(level: int) -> LineKind:
    """Return the grouping key for a heading of ``level``."""
    return LineKind(LineType.HEADER, level)


@dataclass(frozen=True, slots=True)
class NormalLine:
    """Prose line kept verbatim."""

    text: str

    @property
    def kind(self) -> LineKind:
        return NORMAL


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """Heading line stripped of its marker run."""

    text: str
    level: int

    @property
    def kind(self) -> LineKind:
        return header_kind(self.level)


@dataclass(frozen=True, slots=True)
class AlignLine:
    """Alignment line stripped of its single leading marker."""

    text: str

    @property
    def kind(self) -> LineKind:
        return ALIGN


Line = NormalLine | HeaderLine | AlignLine


def split_source_lines(text: str) -> list[str]:
    """Split decoded text into lines without their terminators.

    Lines break on ``\\n`` only; a single trailing ``\\r`` is dropped from each
    line and a trailing newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def classify_line(raw: str, *, header_marker: str = "#", align_marker: str = ">") -> Line:
    """Classify a single raw line."""
    if raw.startswith(align_marker):
        return AlignLine(raw[len(align_marker) :])
    if raw.startswith(header_marker):
        stripped = raw.lstrip(header_marker)
        return HeaderLine(stripped, len(raw) - len(stripped))
    return NormalLine(raw)


def iter_lines(text: str, config: PretexConfig) -> Iterator[Line]:
    """Yield classified lines for ``text`` in source order."""
    for raw in split_source_lines(text):
        yield classify_line(
            raw,
            header_marker=config.header_marker,
            align_marker=config.align_marker,
        )


def classify(text: str, config: PretexConfig) -> list[Line]:
    """Classify every line of ``text``."""
    return list(iter_lines(text, config))


__all__ = [
    "ALIGN",
    "NORMAL",
    "AlignLine",
    "HeaderLine",
    "Line",
    "LineKind",
    "LineType",
    "NormalLine",
    "classify",
    "classify_line",
    "header_kind",
    "iter_lines",
    "split_source_lines",
]

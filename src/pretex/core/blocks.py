"""Segmentation of classified lines into same-kind blocks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .exceptions import EmptyBlockError
from .lines import Line, LineKind


@dataclass(frozen=True, slots=True)
class Block:
    """Maximal run of consecutive lines sharing the same :class:`LineKind`."""

    kind: LineKind
    content: tuple[str, ...]

    @classmethod
    def from_lines(cls, lines: Sequence[Line]) -> Block:
        """Build a block from a buffer of lines sharing one kind."""
        if not lines:
            raise EmptyBlockError()
        kind = lines[0].kind
        for line in lines[1:]:
            if line.kind != kind:
                raise ValueError(f"cannot mix {line.kind} line into {kind} block")
        return cls(kind=kind, content=tuple(line.text for line in lines))

    def __len__(self) -> int:
        return len(self.content)


def segment(lines: Iterable[Line]) -> list[Block]:
    """Group ``lines`` into blocks, splitting wherever the kind changes."""
    blocks: list[Block] = []
    buffer: list[Line] = []
    current: LineKind | None = None

    for line in lines:
        kind = line.kind
        if current is not None and kind != current:
            blocks.append(Block.from_lines(buffer))
            buffer = []
        current = kind
        buffer.append(line)

    if buffer:
        blocks.append(Block.from_lines(buffer))
    return blocks


__all__ = ["Block", "segment"]

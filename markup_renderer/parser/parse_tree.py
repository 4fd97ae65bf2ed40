"""Parse tree produced by the markup grammar."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from markup_renderer.errors import SourcePosition


@dataclass(slots=True)
class CommandNode:
    """``\\name{argument}``; ``name`` and ``argument`` are raw source text."""

    name: Optional[str]
    argument: Optional[str]
    position: SourcePosition


@dataclass(slots=True)
class ParagraphNode:
    """Free-running text, trimmed of leading and trailing whitespace."""

    text: str
    position: SourcePosition


ParseNode = CommandNode | ParagraphNode


@dataclass(slots=True)
class ParseTree:
    """Top-level constructs in source order."""

    nodes: List[ParseNode] = field(default_factory=list)

    def __iter__(self) -> Iterator[ParseNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

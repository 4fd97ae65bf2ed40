"""In-memory representation of interpreted document content and layout."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from markup_renderer.model.style_model import Style


@dataclass(slots=True)
class Section:
    """Top-level heading."""

    title: str
    elements: List["DocumentElement"] = field(default_factory=list)
    label: Optional[str] = None


@dataclass(slots=True)
class Subsection:
    """Second-level heading."""

    title: str
    elements: List["DocumentElement"] = field(default_factory=list)
    label: Optional[str] = None


@dataclass(slots=True)
class Paragraph:
    """Block of running text."""

    text: str
    style: Optional[Style] = None


DocumentElement = Section | Subsection | Paragraph


@dataclass(slots=True)
class LayoutLine:
    """A single positioned run of text to be consumed by renderers.

    ``x`` and ``y`` are millimetres measured from the bottom-left corner of
    the page; ``font_size`` is in points.
    """

    page: int
    x: float
    y: float
    text: str
    font_size: float
    role: str
    style: Optional[Style] = None


@dataclass(slots=True)
class LayoutPage:
    """Lines placed on one physical page."""

    index: int
    lines: List[LayoutLine] = field(default_factory=list)


@dataclass(slots=True)
class LayoutModel:
    """Ordered draw instructions with page segmentation."""

    page_width: float
    page_height: float
    pages: Sequence[LayoutPage] = field(default_factory=list)

    @property
    def lines(self) -> List[LayoutLine]:
        """Return all lines from all pages in draw order."""
        all_lines: List[LayoutLine] = []
        for page in self.pages:
            all_lines.extend(page.lines)
        return all_lines

    @property
    def page_count(self) -> int:
        return len(self.pages)

"""Convert a document into positioned, paginated lines of text."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from markup_renderer.model.document_model import Document
from markup_renderer.model.elements import (
    DocumentElement,
    LayoutLine,
    LayoutModel,
    LayoutPage,
    Paragraph,
    Section,
    Subsection,
)
from markup_renderer.model.render_config import RenderConfig
from markup_renderer.model.style_model import Style
from markup_renderer.renderer.measure import EstimatedTextMeasurer, TextMeasurer
from markup_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class LayoutContext:
    """Mutable state for a single layout pass."""

    page_index: int
    cursor_y: float
    pages: List[LayoutPage]

    @property
    def current_page(self) -> LayoutPage:
        return self.pages[-1]


class LayoutCalculator:
    """Greedy word-wrap and top-to-bottom pagination.

    The cursor starts at ``start_y`` and moves down the page. Before anything
    is drawn the cursor is compared with ``bottom_margin``; once it has
    dropped below, a new page is started and the cursor returns to
    ``start_y``. Lines are never moved after they have been placed.
    """

    def __init__(self, config: Optional[RenderConfig] = None, measurer: Optional[TextMeasurer] = None) -> None:
        self._config = config or RenderConfig()
        self._measurer = measurer or EstimatedTextMeasurer()

    # ------------------------------------------------------------------
    # Public API
    def calculate(self, document: Document) -> LayoutModel:
        """Return the draw instructions for ``document``."""
        config = self._config
        context = LayoutContext(page_index=1, cursor_y=config.start_y, pages=[LayoutPage(index=1)])

        self._layout_metadata(document, context)
        for element in document.elements:
            self._layout_element(element, context)

        LOGGER.debug("Layout finished with %d page(s)", len(context.pages))
        return LayoutModel(page_width=config.page_width, page_height=config.page_height, pages=context.pages)

    def wrap_text(self, text: str, max_width: float, font_size: float) -> List[str]:
        """Greedily pack whitespace-separated words into lines.

        Words are never split: a word wider than ``max_width`` sits alone on
        its own line.
        """
        words = text.split()
        lines: List[str] = []
        current_line: List[str] = []
        current_width = 0.0
        space_width = self._measurer.measure(" ", font_size)

        for word in words:
            word_width = self._measurer.measure(word, font_size)
            projected = current_width + (space_width if current_line else 0.0) + word_width

            if current_line and projected > max_width:
                lines.append(" ".join(current_line))
                current_line = [word]
                current_width = word_width
            else:
                current_line.append(word)
                current_width = projected

        if current_line:
            lines.append(" ".join(current_line))

        return lines

    # ------------------------------------------------------------------
    # Metadata
    def _layout_metadata(self, document: Document, context: LayoutContext) -> None:
        config = self._config
        if document.title is not None:
            self._draw(context, document.title, config.title_font_size, config.margin_left, "title")
            context.cursor_y -= config.title_font_size + config.title_gap
        if document.author is not None:
            self._draw(context, f"Author: {document.author}", config.font_size, config.margin_left, "author")
            context.cursor_y -= config.font_size + config.author_gap
        if document.date is not None:
            self._draw(context, f"Date: {document.date}", config.font_size, config.margin_left, "date")
            context.cursor_y -= config.font_size + config.date_gap

    # ------------------------------------------------------------------
    # Elements
    def _layout_element(self, element: DocumentElement, context: LayoutContext) -> None:
        if isinstance(element, Section):
            self._layout_section(element, context)
        elif isinstance(element, Subsection):
            self._layout_subsection(element, context)
        elif isinstance(element, Paragraph):
            self._layout_paragraph(element, context)
        else:
            raise TypeError(f"Unsupported document element: {type(element).__name__}")

    def _layout_section(self, section: Section, context: LayoutContext) -> None:
        config = self._config
        context.cursor_y -= config.section_spacing
        self._draw(context, section.title, config.section_font_size, config.margin_left, "section")
        context.cursor_y -= config.section_font_size + config.paragraph_spacing

    def _layout_subsection(self, subsection: Subsection, context: LayoutContext) -> None:
        config = self._config
        context.cursor_y -= config.subsection_spacing
        self._draw(
            context,
            subsection.title,
            config.subsection_font_size,
            config.margin_left + config.subsection_indent,
            "subsection",
        )
        context.cursor_y -= config.subsection_font_size + config.paragraph_spacing

    def _layout_paragraph(self, paragraph: Paragraph, context: LayoutContext) -> None:
        config = self._config
        font_size = self._resolve_font_size(paragraph.style)
        for line in self.wrap_text(paragraph.text, config.line_width, font_size):
            self._draw(context, line, font_size, config.margin_left, "paragraph", paragraph.style)
            context.cursor_y -= font_size + config.line_spacing
        context.cursor_y -= config.paragraph_spacing

    def _resolve_font_size(self, style: Optional[Style]) -> float:
        if style is not None and style.font_size:
            return float(style.font_size)
        return self._config.font_size

    # ------------------------------------------------------------------
    # Pagination
    def _draw(
        self,
        context: LayoutContext,
        text: str,
        font_size: float,
        x: float,
        role: str,
        style: Optional[Style] = None,
    ) -> None:
        if context.cursor_y < self._config.bottom_margin:
            self._start_new_page(context)
        context.current_page.lines.append(
            LayoutLine(
                page=context.page_index,
                x=x,
                y=context.cursor_y,
                text=text,
                font_size=font_size,
                role=role,
                style=style,
            )
        )
        LOGGER.debug("Placed %s line on page %d at y=%.2f: %s", role, context.page_index, context.cursor_y, text)

    def _start_new_page(self, context: LayoutContext) -> None:
        context.page_index += 1
        context.cursor_y = self._config.start_y
        context.pages.append(LayoutPage(index=context.page_index))
        LOGGER.debug("Started page %d", context.page_index)

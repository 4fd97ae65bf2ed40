"""Render configuration consumed by the layout engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from markup_renderer.utils.logger import get_logger
from markup_renderer.utils.units import DEFAULT_MARGIN_MM, parse_margin

LOGGER = get_logger(__name__)

A4_SIZE_MM = (210.0, 297.0)
LETTER_SIZE_MM = (215.9, 279.4)

PAPER_SIZES_MM: Dict[str, Tuple[float, float]] = {
    "A4": A4_SIZE_MM,
    "LETTER": LETTER_SIZE_MM,
}

DEFAULT_FONT = "Times"
DEFAULT_FONT_SIZE = 12.0
TITLE_FONT_SIZE = 20.0
SECTION_FONT_SIZE = 16.0
SUBSECTION_FONT_SIZE = 14.0
DEFAULT_LINE_GAP = 4.0
PARAGRAPH_SPACING = 10.0
SECTION_SPACING = 15.0
SUBSECTION_SPACING = 10.0
SUBSECTION_INDENT = 10.0
TITLE_GAP = 10.0
AUTHOR_GAP = 5.0
DATE_GAP = 15.0


def resolve_paper_size(name: Optional[str]) -> Tuple[float, float]:
    """Return ``(width, height)`` in millimetres, falling back to A4."""
    if not name:
        return A4_SIZE_MM
    size = PAPER_SIZES_MM.get(name.strip().upper())
    if size is None:
        LOGGER.warning("Unknown paper size %r; using A4", name)
        return A4_SIZE_MM
    return size


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Page geometry, font sizes and spacing constants.

    Geometry and spacing are millimetres measured from the bottom edge of the
    page. Font sizes are points; the layout engine adds them to the cursor
    unchanged.
    """

    page_width: float = A4_SIZE_MM[0]
    page_height: float = A4_SIZE_MM[1]
    margin_left: float = 10.0
    margin_right: float = 10.0
    margin_top: float = 10.0
    margin_bottom: float = 10.0
    start_y: float = 280.0
    bottom_margin: float = 20.0
    font: str = DEFAULT_FONT
    font_size: float = DEFAULT_FONT_SIZE
    title_font_size: float = TITLE_FONT_SIZE
    section_font_size: float = SECTION_FONT_SIZE
    subsection_font_size: float = SUBSECTION_FONT_SIZE
    line_width: float = 190.0
    line_spacing: float = DEFAULT_LINE_GAP
    paragraph_spacing: float = PARAGRAPH_SPACING
    section_spacing: float = SECTION_SPACING
    subsection_spacing: float = SUBSECTION_SPACING
    subsection_indent: float = SUBSECTION_INDENT
    title_gap: float = TITLE_GAP
    author_gap: float = AUTHOR_GAP
    date_gap: float = DATE_GAP

    @classmethod
    def from_options(
        cls,
        paper_size: Optional[str] = "A4",
        margins: Optional[str] = "1in",
        font: str = DEFAULT_FONT,
        font_size: float = DEFAULT_FONT_SIZE,
        line_spacing: float = 1.5,
    ) -> "RenderConfig":
        """Derive a configuration from command-line style options.

        ``line_spacing`` is a multiplier of the base font size; the layout
        engine works with the additive gap between consecutive lines.
        """
        page_width, page_height = resolve_paper_size(paper_size)
        margin = parse_margin(margins, DEFAULT_MARGIN_MM)
        line_gap = max(font_size * (line_spacing - 1.0), 0.0)

        return cls(
            page_width=page_width,
            page_height=page_height,
            margin_left=margin,
            margin_right=margin,
            margin_top=margin,
            margin_bottom=margin,
            start_y=page_height - margin,
            bottom_margin=margin,
            font=font,
            font_size=float(font_size),
            line_width=max(page_width - 2 * margin, 0.0),
            line_spacing=line_gap,
        )

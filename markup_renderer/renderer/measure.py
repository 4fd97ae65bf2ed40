"""Text measurement capabilities used by the layout engine."""
from __future__ import annotations

from typing import Dict, Optional, Protocol

from reportlab.pdfbase import pdfmetrics

from markup_renderer.utils.units import points_to_mm

BUILTIN_FONTS: Dict[str, str] = {
    "times": "Times-Roman",
    "times-roman": "Times-Roman",
    "times new roman": "Times-Roman",
    "helvetica": "Helvetica",
    "arial": "Helvetica",
    "courier": "Courier",
    "courier new": "Courier",
}
DEFAULT_BUILTIN_FONT = "Times-Roman"


def resolve_builtin_font(family: Optional[str]) -> str:
    """Map a font family name to one of the PDF standard Type-1 fonts."""
    if not family:
        return DEFAULT_BUILTIN_FONT
    return BUILTIN_FONTS.get(family.strip().lower(), DEFAULT_BUILTIN_FONT)


class TextMeasurer(Protocol):
    """Anything able to report the width of ``text`` in layout units."""

    def measure(self, text: str, font_size: float) -> float:
        ...


class EstimatedTextMeasurer:
    """Average-glyph approximation: half the font size per character."""

    def __init__(self, width_factor: float = 0.5) -> None:
        self._width_factor = width_factor

    def measure(self, text: str, font_size: float) -> float:
        if not text:
            return 0.0
        return len(text) * font_size * self._width_factor


class ReportLabTextMeasurer:
    """Measure with the metrics of a standard PDF font, in millimetres."""

    def __init__(self, font_family: Optional[str] = None) -> None:
        self.font_name = resolve_builtin_font(font_family)

    def measure(self, text: str, font_size: float) -> float:
        if not text:
            return 0.0
        return points_to_mm(pdfmetrics.stringWidth(text, self.font_name, font_size))

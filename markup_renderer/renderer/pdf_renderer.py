"""Render the layout model into a PDF file using ReportLab."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from markup_renderer.errors import RenderError
from markup_renderer.model.elements import LayoutLine, LayoutModel
from markup_renderer.model.style_model import Style
from markup_renderer.renderer.measure import resolve_builtin_font
from markup_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

# (bold, italic) variants of the standard Type-1 families.
FONT_VARIANTS: Dict[str, Dict[Tuple[bool, bool], str]] = {
    "Times-Roman": {
        (True, False): "Times-Bold",
        (False, True): "Times-Italic",
        (True, True): "Times-BoldItalic",
    },
    "Helvetica": {
        (True, False): "Helvetica-Bold",
        (False, True): "Helvetica-Oblique",
        (True, True): "Helvetica-BoldOblique",
    },
    "Courier": {
        (True, False): "Courier-Bold",
        (False, True): "Courier-Oblique",
        (True, True): "Courier-BoldOblique",
    },
}


class PdfRenderer:
    """Write each layout page as one PDF page with standard fonts."""

    def __init__(self, output_path: Path, font_family: str = "Times") -> None:
        self._output_path = output_path
        self._font_name = resolve_builtin_font(font_family)

    def render(self, layout: LayoutModel, title: Optional[str] = None) -> None:
        try:
            pdf = canvas.Canvas(str(self._output_path), pagesize=(layout.page_width * mm, layout.page_height * mm))
            if title:
                pdf.setTitle(title)
            for page in layout.pages:
                for line in page.lines:
                    self._draw_line(pdf, line)
                pdf.showPage()
            pdf.save()
        except (OSError, ValueError, UnicodeError) as exc:
            raise RenderError(f"Could not write PDF to {self._output_path}: {exc}") from exc
        LOGGER.info("Wrote %d page(s) to %s", layout.page_count, self._output_path)

    def _draw_line(self, pdf: canvas.Canvas, line: LayoutLine) -> None:
        pdf.setFont(self._font_for(line.style), line.font_size)
        pdf.setFillColor(self._color_for(line.style))
        pdf.drawString(line.x * mm, line.y * mm, line.text)

    def _font_for(self, style: Optional[Style]) -> str:
        base = resolve_builtin_font(style.font) if style is not None and style.font else self._font_name
        if style is None or not (style.bold or style.italic):
            return base
        return FONT_VARIANTS.get(base, {}).get((style.bold, style.italic), base)

    def _color_for(self, style: Optional[Style]):
        if style is None or not style.color:
            return colors.black
        try:
            return colors.toColor(style.color)
        except ValueError:
            LOGGER.warning("Unrecognised color %r; using black", style.color)
            return colors.black

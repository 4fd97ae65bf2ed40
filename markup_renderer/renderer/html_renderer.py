"""Render the layout model into an HTML document."""
from __future__ import annotations

from html import escape
from pathlib import Path

from markup_renderer.errors import RenderError
from markup_renderer.model.elements import LayoutLine, LayoutModel, LayoutPage
from markup_renderer.renderer.utils import style_to_css
from markup_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


class HtmlRenderer:
    """Produce an absolutely positioned HTML representation of the pages."""

    def __init__(self, output_path: Path, font_family: str = "Times") -> None:
        self._output_path = output_path
        self._font_family = font_family

    def render(self, layout: LayoutModel, title: str = "Document") -> None:
        html = self._build_html(layout, title)
        try:
            self._output_path.write_text(html, encoding="utf-8")
        except (OSError, UnicodeError) as exc:
            raise RenderError(f"Could not write HTML to {self._output_path}: {exc}") from exc
        LOGGER.info("Wrote %d page(s) to %s", layout.page_count, self._output_path)

    def _build_html(self, layout: LayoutModel, title: str) -> str:
        pages = "\n".join(self._page_to_div(page, layout) for page in layout.pages)
        return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>{escape(title)}</title>
  <style>
    body {{ margin: 0; padding: 0; background: #eee; font-family: {escape(self._font_family)}; }}
    .page {{ position: relative; margin: 10mm auto; background: #fff; }}
    .line {{ position: absolute; white-space: pre; }}
  </style>
</head>
<body>
{pages}
</body>
</html>
"""

    def _page_to_div(self, page: LayoutPage, layout: LayoutModel) -> str:
        lines = "\n".join(self._line_to_div(line) for line in page.lines)
        return (
            f"  <div class=\"page\" data-page=\"{page.index}\" "
            f"style=\"width: {layout.page_width}mm; height: {layout.page_height}mm\">\n{lines}\n  </div>"
        )

    def _line_to_div(self, line: LayoutLine) -> str:
        # Layout y is the baseline measured from the bottom edge.
        style = {
            "left": f"{line.x:.2f}mm",
            "bottom": f"{line.y:.2f}mm",
            "font-size": f"{line.font_size}pt",
        }
        style.update(style_to_css(line.style))
        style_str = "; ".join(f"{k}: {v}" for k, v in style.items())
        return f"    <div class=\"line {line.role}\" style=\"{style_str}\">{escape(line.text)}</div>"


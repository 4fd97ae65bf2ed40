"""Tests for the HTML and PDF writers and text measurement."""
import tempfile
import unittest
from pathlib import Path

from markup_renderer.errors import RenderError
from markup_renderer.model.document_model import Document
from markup_renderer.model.elements import LayoutLine, LayoutModel, LayoutPage, Paragraph
from markup_renderer.model.render_config import RenderConfig
from markup_renderer.model.style_model import Style
from markup_renderer.parser.layout_calculator import LayoutCalculator
from markup_renderer.renderer.html_renderer import HtmlRenderer
from markup_renderer.renderer.measure import (
    EstimatedTextMeasurer,
    ReportLabTextMeasurer,
    resolve_builtin_font,
)
from markup_renderer.renderer.pdf_renderer import PdfRenderer
from markup_renderer.renderer.utils import style_to_css


def _two_page_layout() -> LayoutModel:
    return LayoutModel(
        page_width=210.0,
        page_height=297.0,
        pages=[
            LayoutPage(index=1, lines=[LayoutLine(1, 10.0, 280.0, "Hello", 20.0, "title")]),
            LayoutPage(
                index=2,
                lines=[LayoutLine(2, 10.0, 280.0, "a < b & c", 12.0, "paragraph", Style(bold=True, color="red"))],
            ),
        ],
    )


class StyleToCssTest(unittest.TestCase):
    """Style fields map onto CSS properties."""

    def test_full_style(self) -> None:
        css = style_to_css(Style(font="Courier", font_size=9, color="#336699", bold=True, italic=True))

        self.assertEqual(
            css,
            {
                "font-weight": "700",
                "font-style": "italic",
                "color": "#336699",
                "font-family": "Courier",
                "font-size": "9pt",
            },
        )

    def test_missing_or_plain_style(self) -> None:
        self.assertEqual(style_to_css(None), {})
        self.assertEqual(style_to_css(Style()), {})
        self.assertTrue(Style().is_plain())
        self.assertFalse(Style(italic=True).is_plain())


class MeasurerTest(unittest.TestCase):
    """Measurement capabilities used by layout."""

    def test_builtin_font_resolution(self) -> None:
        self.assertEqual(resolve_builtin_font("Times"), "Times-Roman")
        self.assertEqual(resolve_builtin_font("arial"), "Helvetica")
        self.assertEqual(resolve_builtin_font("Courier"), "Courier")
        self.assertEqual(resolve_builtin_font("Comic Sans"), "Times-Roman")
        self.assertEqual(resolve_builtin_font(None), "Times-Roman")

    def test_estimated_width(self) -> None:
        measurer = EstimatedTextMeasurer()

        self.assertEqual(measurer.measure("abcd", 10), 20.0)
        self.assertEqual(measurer.measure("", 10), 0.0)

    def test_reportlab_width_in_millimetres(self) -> None:
        measurer = ReportLabTextMeasurer("Courier")

        # Courier glyphs are 600/1000 em wide: 10 chars at 12pt = 72pt = 25.4mm.
        self.assertAlmostEqual(measurer.measure("abcdefghij", 12), 25.4, places=3)
        self.assertEqual(measurer.measure("", 12), 0.0)

    def test_reportlab_wrap_respects_width(self) -> None:
        measurer = ReportLabTextMeasurer("Times")
        calculator = LayoutCalculator(RenderConfig(), measurer)
        text = "The quick brown fox jumps over the lazy dog " * 10

        for line in calculator.wrap_text(text, 60.0, 12):
            if " " in line:
                self.assertLessEqual(measurer.measure(line, 12), 60.0 + 1e-6)


class HtmlRendererTest(unittest.TestCase):
    """HTML output groups lines per page."""

    def test_render_writes_pages_and_escapes_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.html"
            HtmlRenderer(target).render(_two_page_layout(), title="Hello")
            html = target.read_text(encoding="utf-8")

        self.assertIn("<title>Hello</title>", html)
        self.assertEqual(html.count('class="page"'), 2)
        self.assertIn('data-page="2"', html)
        self.assertIn('class="line title"', html)
        self.assertIn("a &lt; b &amp; c", html)
        self.assertIn("font-weight: 700", html)
        self.assertIn("color: red", html)

    def test_unwritable_target_raises_render_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "missing" / "out.html"
            with self.assertRaises(RenderError):
                HtmlRenderer(target).render(_two_page_layout())


class PdfRendererTest(unittest.TestCase):
    """PDF output through ReportLab."""

    def test_render_writes_pdf(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.pdf"
            PdfRenderer(target).render(_two_page_layout(), title="Hello")
            data = target.read_bytes()

        self.assertTrue(data.startswith(b"%PDF"))
        self.assertIn(b"/Count 2", data)

    def test_render_layout_from_document(self) -> None:
        document = Document(title="T", elements=[Paragraph(text="word " * 400)])
        layout = LayoutCalculator().calculate(document)

        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "long.pdf"
            PdfRenderer(target, font_family="Helvetica").render(layout)
            self.assertGreater(target.stat().st_size, 0)
        self.assertGreater(layout.page_count, 1)

    def test_font_variants(self) -> None:
        renderer = PdfRenderer(Path("unused.pdf"), font_family="Helvetica")

        self.assertEqual(renderer._font_for(None), "Helvetica")
        self.assertEqual(renderer._font_for(Style(bold=True)), "Helvetica-Bold")
        self.assertEqual(renderer._font_for(Style(font="Times", italic=True)), "Times-Italic")
        self.assertEqual(renderer._font_for(Style(font="Courier", bold=True, italic=True)), "Courier-BoldOblique")

    def test_unwritable_target_raises_render_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "missing" / "out.pdf"
            with self.assertRaises(RenderError):
                PdfRenderer(target).render(_two_page_layout())


if __name__ == "__main__":
    unittest.main()

"""Entry-point for the markup renderer pipeline."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from markup_renderer.errors import MarkupError, MarkupIOError
from markup_renderer.model.document_model import Document
from markup_renderer.model.elements import LayoutModel
from markup_renderer.model.render_config import RenderConfig
from markup_renderer.parser.interpreter import parse_document, parse_macro_definitions
from markup_renderer.parser.layout_calculator import LayoutCalculator
from markup_renderer.renderer.html_renderer import HtmlRenderer
from markup_renderer.renderer.measure import ReportLabTextMeasurer, TextMeasurer
from markup_renderer.renderer.pdf_renderer import PdfRenderer
from markup_renderer.utils.debug import DebugDumper
from markup_renderer.utils.logger import get_logger, set_verbose

LOGGER = get_logger(__name__)

DEFAULT_OUTPUT_DIR = "./output"
DEFAULT_OUTPUT_NAME = "output.pdf"

# Accepted for compatibility; none of them changes the output yet.
NO_OP_OPTIONS: Dict[str, object] = {
    "toc": False,
    "hyperlinks": False,
    "bibliography": None,
    "citation_style": "APA",
    "table_numbers": False,
    "figure_numbers": False,
    "header": None,
    "footer": None,
    "syntax_highlighting": False,
    "theme": "light",
    "page_numbering": "arabic",
    "watermark": None,
    "image_dpi": 300,
    "draft": False,
    "columns": 1,
    "hyphenation": False,
    "styles_file": None,
    "bookmarks": False,
    "language": "en",
    "compression": False,
}


def read_markup(input_path: Path) -> str:
    """Read a UTF-8 markup file."""
    try:
        return input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MarkupIOError(f"Could not read input file ({exc})", input_path) from exc


def build_document(text: str, macros: Optional[Mapping[str, str]] = None) -> Document:
    """Parse and interpret markup text into a document."""
    document = parse_document(text, macros)
    LOGGER.info("Interpreted %d element(s)", len(document.elements))
    return document


def layout_document(
    document: Document,
    config: Optional[RenderConfig] = None,
    measurer: Optional[TextMeasurer] = None,
) -> LayoutModel:
    """Word-wrap and paginate the document."""
    return LayoutCalculator(config, measurer).calculate(document)


def render_outputs(document: Document, layout: LayoutModel, output_path: Path, *, font: str = "Times") -> None:
    """Write the layout to ``output_path``; ``.html`` selects the HTML writer."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MarkupIOError(f"Could not create output directory ({exc})", output_path.parent) from exc

    if output_path.suffix.lower() in {".html", ".htm"}:
        HtmlRenderer(output_path, font_family=font).render(layout, title=document.title or "Document")
    else:
        PdfRenderer(output_path, font_family=font).render(layout, title=document.title)


def resolve_output_path(args: argparse.Namespace) -> Path:
    if args.pdf:
        return Path(args.pdf)
    if args.html:
        return Path(args.html)
    return Path(args.output_dir) / DEFAULT_OUTPUT_NAME


def report_no_op_options(args: argparse.Namespace) -> None:
    for name, default in NO_OP_OPTIONS.items():
        value = getattr(args, name)
        if value != default:
            LOGGER.info("Option --%s=%s has no effect", name.replace("_", "-"), value)


def run(args: argparse.Namespace) -> Path:
    """Execute the whole pipeline for parsed command-line arguments."""
    input_path = Path(args.input).resolve()
    macros = parse_macro_definitions(args.macro_def)
    report_no_op_options(args)

    LOGGER.info("Building document for %s", input_path.name)
    document = build_document(read_markup(input_path), macros)

    config = RenderConfig.from_options(
        paper_size=args.paper_size,
        margins=args.margins,
        font=args.font,
        font_size=args.font_size,
        line_spacing=args.line_spacing,
    )
    layout = layout_document(document, config, ReportLabTextMeasurer(args.font))

    output_path = resolve_output_path(args).resolve()
    LOGGER.info("Rendering %d page(s) into %s", layout.page_count, output_path)
    render_outputs(document, layout, output_path, font=args.font)

    if args.debug:
        DebugDumper(output_path.parent / "debug").dump(document, layout)
    return output_path


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markup-renderer",
        description="Compile lightweight markup into paginated PDF or HTML",
    )
    parser.add_argument("-i", "--input", required=True, metavar="FILE", help="Input markup file")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-p", "--pdf", metavar="PDF_FILE", help="Output PDF file")
    output.add_argument("--html", metavar="HTML_FILE", help="Output HTML file")
    parser.add_argument("-o", "--output-dir", default=DEFAULT_OUTPUT_DIR, metavar="DIR", help="Output directory")
    parser.add_argument("--paper-size", default="A4", metavar="SIZE", help="Paper size (A4, Letter)")
    parser.add_argument("--font", default="Times", help="Font family (Times, Helvetica, Courier)")
    parser.add_argument("--font-size", type=float, default=12.0, metavar="SIZE", help="Base font size in points")
    parser.add_argument("--line-spacing", type=float, default=1.5, metavar="SPACING", help="Line spacing multiplier")
    parser.add_argument("--margins", default="1in", help="Margin size, e.g. 1in or 2.5cm")
    parser.add_argument(
        "-m",
        "--macro",
        dest="macro_def",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Define a macro before parsing (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-d", "--debug", action="store_true", help="Dump intermediate JSON next to the output")

    extensions = parser.add_argument_group("extension points", "Accepted but currently without effect")
    extensions.add_argument("-c", "--toc", action="store_true")
    extensions.add_argument("--hyperlinks", action="store_true")
    extensions.add_argument("-b", "--bibliography", metavar="BIB_FILE")
    extensions.add_argument("--citation-style", default="APA")
    extensions.add_argument("--table-numbers", action="store_true")
    extensions.add_argument("--figure-numbers", action="store_true")
    extensions.add_argument("--header")
    extensions.add_argument("--footer")
    extensions.add_argument("--syntax-highlighting", action="store_true")
    extensions.add_argument("--theme", default="light")
    extensions.add_argument("--page-numbering", default="arabic")
    extensions.add_argument("--watermark", metavar="TEXT")
    extensions.add_argument("--image-dpi", type=int, default=300)
    extensions.add_argument("--draft", action="store_true")
    extensions.add_argument("--columns", type=int, default=1)
    extensions.add_argument("--hyphenation", action="store_true")
    extensions.add_argument("--styles-file")
    extensions.add_argument("--bookmarks", action="store_true")
    extensions.add_argument("--language", default="en")
    extensions.add_argument("--compression", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the markup → document → layout → renderer pipeline."""
    args = build_arg_parser().parse_args(argv)
    set_verbose(args.verbose)
    try:
        output_path = run(args)
    except MarkupError as exc:
        LOGGER.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Document generated successfully at {output_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""Unit tests for the recursive-descent markup parser."""
import unittest

from markup_renderer.errors import MarkupSyntaxError
from markup_renderer.parser.markup_parser import MarkupParser, parse_markup
from markup_renderer.parser.parse_tree import CommandNode, ParagraphNode


class MarkupParserTest(unittest.TestCase):
    """Check the tree shape and source positions produced by the grammar."""

    def test_commands_and_trailing_paragraph(self) -> None:
        text = "\\title{Hello}\n\\author{Ada}\n\\section{Intro}\nThis is a paragraph with some words."
        tree = parse_markup(text)

        self.assertEqual(len(tree), 4)
        title, author, section, paragraph = tree.nodes
        self.assertIsInstance(title, CommandNode)
        self.assertEqual((title.name, title.argument), ("title", "Hello"))
        self.assertEqual((author.name, author.argument), ("author", "Ada"))
        self.assertEqual((section.name, section.argument), ("section", "Intro"))
        self.assertEqual(section.position.line, 3)
        self.assertEqual(section.position.column, 1)
        self.assertIsInstance(paragraph, ParagraphNode)
        self.assertEqual(paragraph.text, "This is a paragraph with some words.")
        self.assertEqual(paragraph.position.line, 4)

    def test_blank_line_separates_paragraphs(self) -> None:
        tree = parse_markup("First line\nsecond line\n\n   \nNext para\n")

        texts = [node.text for node in tree]
        self.assertEqual(texts, ["First line\nsecond line", "Next para"])

    def test_macro_reference_is_paragraph_text(self) -> None:
        tree = parse_markup("\\name opens this line\nand \\other continues it")

        self.assertEqual(len(tree), 1)
        node = tree.nodes[0]
        self.assertIsInstance(node, ParagraphNode)
        self.assertEqual(node.text, "\\name opens this line\nand \\other continues it")

    def test_command_terminates_paragraph_mid_line(self) -> None:
        tree = parse_markup("Intro text \\section{A} tail")

        kinds = [type(node).__name__ for node in tree]
        self.assertEqual(kinds, ["ParagraphNode", "CommandNode", "ParagraphNode"])
        self.assertEqual(tree.nodes[0].text, "Intro text")
        self.assertEqual(tree.nodes[1].argument, "A")
        self.assertEqual(tree.nodes[1].position.column, 12)
        self.assertEqual(tree.nodes[2].text, "tail")

    def test_any_identifier_is_accepted(self) -> None:
        tree = parse_markup("\\whatever2{x}")

        self.assertEqual(tree.nodes[0].name, "whatever2")

    def test_argument_may_span_lines_and_escape_braces(self) -> None:
        tree = parse_markup("\\paragraph{a \\} b\nc \\{ d}")

        self.assertEqual(tree.nodes[0].argument, "a } b\nc { d")

    def test_empty_argument(self) -> None:
        tree = parse_markup("\\section{}")

        self.assertEqual(tree.nodes[0].argument, "")

    def test_empty_input(self) -> None:
        self.assertEqual(len(parse_markup("")), 0)
        self.assertEqual(len(parse_markup(" \n\n\t")), 0)

    def test_unterminated_argument_reports_position(self) -> None:
        with self.assertRaises(MarkupSyntaxError) as ctx:
            parse_markup("Intro\n\n\\section{Unclosed")

        position = ctx.exception.position
        self.assertIsNotNone(position)
        assert position
        self.assertEqual((position.offset, position.line, position.column), (7, 3, 1))
        self.assertIn("line 3, column 1", str(ctx.exception))

    def test_missing_identifier_is_syntax_error(self) -> None:
        with self.assertRaises(MarkupSyntaxError) as ctx:
            parse_markup("text\n\n  \\{oops}")

        assert ctx.exception.position
        self.assertEqual(ctx.exception.position.line, 3)
        self.assertEqual(ctx.exception.position.column, 3)

    def test_position_at_translates_offsets(self) -> None:
        parser = MarkupParser("ab\ncd\n")

        self.assertEqual(parser.position_at(0).line, 1)
        self.assertEqual(parser.position_at(4).line, 2)
        self.assertEqual(parser.position_at(4).column, 2)


if __name__ == "__main__":
    unittest.main()

"""Walk the parse tree and build a :class:`Document`."""
from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from markup_renderer.errors import InvalidSyntaxError, SourcePosition, UnknownCommandError
from markup_renderer.model.document_model import Document
from markup_renderer.model.elements import Paragraph, Section, Subsection
from markup_renderer.parser.markup_parser import MarkupParser
from markup_renderer.parser.parse_tree import CommandNode, ParagraphNode, ParseTree
from markup_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

MACRO_REFERENCE = re.compile(r"\\(\w+)")


def substitute_macros(text: str, macros: Mapping[str, str]) -> str:
    """Replace every ``\\name`` whose name is a known macro.

    Unknown references are left untouched and replacement values are not
    scanned again.
    """

    def _replace(match: re.Match) -> str:
        value = macros.get(match.group(1))
        return match.group(0) if value is None else value

    return MACRO_REFERENCE.sub(_replace, text)


def parse_macro_definition(definition: str, position: Optional[SourcePosition] = None) -> Tuple[str, str]:
    """Split ``name=value`` into a trimmed ``(name, value)`` pair."""
    parts = definition.split("=")
    if len(parts) != 2:
        raise InvalidSyntaxError(f"Invalid macro definition '{definition}'", position)
    return parts[0].strip(), parts[1].strip()


def parse_macro_definitions(definitions: Iterable[str]) -> Dict[str, str]:
    """Parse externally supplied ``name=value`` pairs, in order."""
    macros: Dict[str, str] = {}
    for definition in definitions:
        name, value = parse_macro_definition(definition)
        macros[name] = value
        LOGGER.debug("Pre-seeded macro: %s = %s", name, value)
    return macros


class CommandInterpreter:
    """Apply parse tree nodes to a document in source order."""

    def __init__(self, document: Optional[Document] = None) -> None:
        self._document = document if document is not None else Document()
        self._handlers: Dict[str, Callable[[str, SourcePosition], None]] = {
            "section": self._handle_section,
            "subsection": self._handle_subsection,
            "paragraph": self._handle_paragraph,
            "macro": self._handle_macro,
            "title": self._handle_title,
            "author": self._handle_author,
            "date": self._handle_date,
        }

    @property
    def document(self) -> Document:
        return self._document

    def interpret(self, tree: ParseTree) -> Document:
        """Apply every node of ``tree`` and return the document."""
        for node in tree:
            if isinstance(node, CommandNode):
                self._apply_command(node)
            elif isinstance(node, ParagraphNode):
                LOGGER.debug("Adding paragraph at %s", node.position)
                self._document.add_element(Paragraph(text=self._substitute(node.text)))
            else:
                raise InvalidSyntaxError(f"Unexpected parse node: {type(node).__name__}")
        return self._document

    def _apply_command(self, node: CommandNode) -> None:
        if not node.name:
            raise InvalidSyntaxError("Missing command identifier", node.position)
        if node.argument is None:
            raise InvalidSyntaxError(f"Missing argument for command '{node.name}'", node.position)

        handler = self._handlers.get(node.name)
        if handler is None:
            LOGGER.error("Unknown command '%s' at %s", node.name, node.position)
            raise UnknownCommandError(node.name, node.position)
        LOGGER.debug("Applying command \\%s at %s", node.name, node.position)
        handler(node.argument, node.position)

    def _substitute(self, text: str) -> str:
        return substitute_macros(text, self._document.macros)

    # ------------------------------------------------------------------
    # Command handlers
    def _handle_section(self, argument: str, position: SourcePosition) -> None:
        self._document.add_element(Section(title=self._substitute(argument)))

    def _handle_subsection(self, argument: str, position: SourcePosition) -> None:
        self._document.add_element(Subsection(title=self._substitute(argument)))

    def _handle_paragraph(self, argument: str, position: SourcePosition) -> None:
        self._document.add_element(Paragraph(text=self._substitute(argument)))

    def _handle_macro(self, argument: str, position: SourcePosition) -> None:
        try:
            name, value = parse_macro_definition(argument, position)
        except InvalidSyntaxError:
            LOGGER.error("Invalid macro definition at %s: %s", position, argument)
            raise
        self._document.define_macro(name, value)
        LOGGER.debug("Defined macro: %s = %s", name, value)

    def _handle_title(self, argument: str, position: SourcePosition) -> None:
        self._document.set_title(self._substitute(argument))

    def _handle_author(self, argument: str, position: SourcePosition) -> None:
        self._document.set_author(self._substitute(argument))

    def _handle_date(self, argument: str, position: SourcePosition) -> None:
        self._document.set_date(self._substitute(argument))


def parse_document(text: str, macros: Optional[Mapping[str, str]] = None) -> Document:
    """Parse markup text into a document, seeding ``macros`` beforehand."""
    document = Document.with_macros(macros or {})
    tree = MarkupParser(text).parse()
    return CommandInterpreter(document).interpret(tree)

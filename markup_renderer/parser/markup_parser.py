"""Recursive-descent parser for the markup grammar.

Grammar::

    document   := (command | paragraph)* EOI
    command    := "\\" identifier "{" argument "}"
    identifier := letter (letter | digit)*
    argument   := any-char-except-unescaped-closing-brace*
    paragraph  := text-line (text-line)*

A paragraph ends at a blank line, at the start of a command or at the end of
input. A backslash followed by an identifier that is *not* followed by ``{``
is ordinary paragraph text (a macro reference). The parser accepts any
identifier; command semantics belong to the interpreter.
"""
from __future__ import annotations

from bisect import bisect_right
from typing import List, Optional

from markup_renderer.errors import MarkupSyntaxError, SourcePosition
from markup_renderer.parser.parse_tree import CommandNode, ParagraphNode, ParseTree
from markup_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

BACKSLASH = "\\"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"


class MarkupParser:
    """Turns raw markup into a :class:`ParseTree`."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line_starts = self._index_lines(text)

    def parse(self) -> ParseTree:
        """Parse the whole input or raise :class:`MarkupSyntaxError`."""
        tree = ParseTree()
        while True:
            self._skip_whitespace()
            if self._at_end():
                break
            if self._peek() == BACKSLASH and self._command_ahead(self._pos):
                tree.nodes.append(self._parse_command())
            elif self._peek() == BACKSLASH and self._peek(1) == OPEN_BRACE:
                raise MarkupSyntaxError("Missing command identifier", self.position_at(self._pos))
            else:
                tree.nodes.append(self._parse_paragraph())
        LOGGER.debug("Parsed %d top-level nodes", len(tree))
        return tree

    # ------------------------------------------------------------------
    # Positions
    @staticmethod
    def _index_lines(text: str) -> List[int]:
        starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                starts.append(index + 1)
        return starts

    def position_at(self, offset: int) -> SourcePosition:
        """Translate a character offset into a 1-based line/column position."""
        line_index = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index] + 1
        return SourcePosition(offset=offset, line=line_index + 1, column=column)

    # ------------------------------------------------------------------
    # Cursor helpers
    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self, ahead: int = 0) -> Optional[str]:
        index = self._pos + ahead
        if index < len(self._text):
            return self._text[index]
        return None

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._text[self._pos].isspace():
            self._pos += 1

    def _identifier_end(self, start: int) -> int:
        """Return the offset just past an identifier starting at ``start``.

        Returns ``start`` when no identifier begins there.
        """
        text = self._text
        if start >= len(text) or not text[start].isalpha():
            return start
        end = start + 1
        while end < len(text) and (text[end].isalpha() or text[end].isdigit()):
            end += 1
        return end

    def _command_ahead(self, offset: int) -> bool:
        """True when ``\\identifier{`` starts at ``offset``."""
        if self._text[offset] != BACKSLASH:
            return False
        end = self._identifier_end(offset + 1)
        return end > offset + 1 and end < len(self._text) and self._text[end] == OPEN_BRACE

    # ------------------------------------------------------------------
    # Productions
    def _parse_command(self) -> CommandNode:
        start = self._pos
        name_end = self._identifier_end(start + 1)
        name = self._text[start + 1 : name_end]
        self._pos = name_end + 1  # past the opening brace
        argument = self._parse_argument(name, start)
        return CommandNode(name=name, argument=argument, position=self.position_at(start))

    def _parse_argument(self, name: str, command_start: int) -> str:
        chars: List[str] = []
        text = self._text
        while self._pos < len(text):
            char = text[self._pos]
            if char == BACKSLASH and self._pos + 1 < len(text) and text[self._pos + 1] in (OPEN_BRACE, CLOSE_BRACE):
                chars.append(text[self._pos + 1])
                self._pos += 2
                continue
            if char == CLOSE_BRACE:
                self._pos += 1
                return "".join(chars)
            chars.append(char)
            self._pos += 1
        raise MarkupSyntaxError(
            f"Unterminated argument for command '{name}'", self.position_at(command_start)
        )

    def _parse_paragraph(self) -> ParagraphNode:
        start = self._pos
        text = self._text
        while self._pos < len(text):
            char = text[self._pos]
            if char == BACKSLASH and self._command_ahead(self._pos):
                break
            if char == "\n" and self._blank_line_follows(self._pos + 1):
                break
            self._pos += 1
        return ParagraphNode(text=text[start : self._pos].strip(), position=self.position_at(start))

    def _blank_line_follows(self, offset: int) -> bool:
        """True when the line starting at ``offset`` holds only whitespace."""
        text = self._text
        while offset < len(text) and text[offset] != "\n":
            if not text[offset].isspace():
                return False
            offset += 1
        return True


def parse_markup(text: str) -> ParseTree:
    """Convenience wrapper around :class:`MarkupParser`."""
    return MarkupParser(text).parse()

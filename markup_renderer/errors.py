"""Error taxonomy shared by the parser, interpreter and renderers."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Location inside the markup source (line and column are 1-based)."""

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class MarkupError(Exception):
    """Base class for every fatal pipeline error."""

    def __init__(self, message: str, position: Optional[SourcePosition] = None) -> None:
        self.message = message
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at {self.position}"


class MarkupSyntaxError(MarkupError):
    """The markup text does not follow the grammar."""


class UnknownCommandError(MarkupError):
    """A well-formed command uses an unrecognised identifier."""

    def __init__(self, command: str, position: Optional[SourcePosition] = None) -> None:
        self.command = command
        super().__init__(f"Unknown command '{command}'", position)


class InvalidSyntaxError(MarkupError):
    """A grammatically valid construct is semantically malformed."""


class MarkupIOError(MarkupError):
    """Reading the input or preparing the output location failed."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class RenderError(MarkupError):
    """Writing the final artifact failed."""

"""Document aggregate built by the interpreter and consumed by layout."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional

from markup_renderer.model.elements import DocumentElement


@dataclass(slots=True)
class Document:
    """Ordered element sequence plus metadata and the macro table.

    The macro table belongs to this instance only, so documents processed
    side by side never see each other's definitions.
    """

    elements: List[DocumentElement] = field(default_factory=list)
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    macros: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def with_macros(cls, macros: Mapping[str, str]) -> "Document":
        """Create an empty document pre-seeded with macro definitions."""
        return cls(macros=dict(macros))

    def add_element(self, element: DocumentElement) -> None:
        self.elements.append(element)

    def set_title(self, title: str) -> None:
        self.title = title

    def set_author(self, author: str) -> None:
        self.author = author

    def set_date(self, date: str) -> None:
        self.date = date

    def define_macro(self, name: str, value: str) -> None:
        """Define or overwrite a macro."""
        self.macros[name] = value

    def get_macro(self, name: str) -> Optional[str]:
        return self.macros.get(name)

    def __iter__(self) -> Iterator[DocumentElement]:
        return iter(self.elements)

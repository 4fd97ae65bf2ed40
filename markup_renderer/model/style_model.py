"""Style model describing optional inline presentation of a paragraph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Style:
    """Presentation hints; ``None`` fields inherit the renderer defaults."""

    font: Optional[str] = None
    font_size: Optional[int] = None
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False

    def is_plain(self) -> bool:
        """Return True when the style does not override anything."""
        return (
            self.font is None
            and self.font_size is None
            and self.color is None
            and not self.bold
            and not self.italic
        )

"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from typing import Dict, Optional

from markup_renderer.model.style_model import Style


def style_to_css(style: Optional[Style]) -> Dict[str, str]:
    """Convert a paragraph style into CSS properties."""
    css: Dict[str, str] = {}
    if style is None:
        return css
    if style.bold:
        css["font-weight"] = "700"
    if style.italic:
        css["font-style"] = "italic"
    if style.color:
        css["color"] = style.color
    if style.font:
        css["font-family"] = style.font
    if style.font_size:
        css["font-size"] = f"{style.font_size}pt"
    return css

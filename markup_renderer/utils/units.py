"""Unit conversion helpers for page geometry and font measurements."""
from __future__ import annotations

import re
from typing import Optional

MM_PER_INCH = 25.4
MM_PER_CM = 10.0
POINTS_PER_INCH = 72
DEFAULT_MARGIN_MM = MM_PER_INCH

_MARGIN_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(in|cm)$", re.IGNORECASE)


def inches_to_mm(value: float) -> float:
    """Convert inches to millimetres."""
    return value * MM_PER_INCH


def cm_to_mm(value: float) -> float:
    """Convert centimetres to millimetres."""
    return value * MM_PER_CM


def points_to_mm(value: float) -> float:
    """Convert typographic points to millimetres."""
    return (value / POINTS_PER_INCH) * MM_PER_INCH


def mm_to_points(value: float) -> float:
    """Convert millimetres to typographic points."""
    return (value / MM_PER_INCH) * POINTS_PER_INCH


def parse_margin(value: Optional[str], default: float = DEFAULT_MARGIN_MM) -> float:
    """Parse a margin such as ``1in`` or ``2.5cm`` into millimetres.

    Anything that does not match ``<number>in`` or ``<number>cm`` falls back
    to ``default`` (one inch).
    """
    if not value:
        return default
    match = _MARGIN_PATTERN.match(value.strip())
    if match is None:
        return default
    amount = float(match.group(1))
    if match.group(2).lower() == "in":
        return inches_to_mm(amount)
    return cm_to_mm(amount)

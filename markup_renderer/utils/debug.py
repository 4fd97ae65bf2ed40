"""Helpers to persist intermediate representations for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

from markup_renderer.model.document_model import Document
from markup_renderer.model.elements import LayoutModel


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, document: Document, layout: LayoutModel | None = None) -> None:
        """Persist the document tree and, when given, the layout as JSON."""
        self.directory.mkdir(parents=True, exist_ok=True)
        self._write("document.json", document)
        if layout is not None:
            self._write("layout.json", layout)

    def _write(self, filename: str, value: Any) -> None:
        payload = self._serialize(value)
        (self.directory / filename).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value):
            # Element variants are tagged with their class name.
            payload = {"type": type(value).__name__}
            payload.update({f.name: self._serialize(getattr(value, f.name)) for f in fields(value)})
            return payload
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value

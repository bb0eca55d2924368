"""Helpers to persist intermediate representations for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

from docx_pdf.exceptions import OutputWriteError
from docx_pdf.model.document_model import ExtractionResult


class DebugDumper:
    """Writes the extraction result onto disk for inspection."""

    FILENAME = "extraction.json"

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def dump(self, result: ExtractionResult) -> Path:
        """Persist styled lines and media names as JSON for offline analysis."""
        payload = self._serialize(result)
        target = self.directory / self.FILENAME
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"failed to write debug dump {target}: {exc}") from exc
        return target

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value):
            return {f.name: self._serialize(getattr(value, f.name)) for f in fields(value)}
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value

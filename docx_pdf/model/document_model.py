"""Aggregate models produced by the extraction step."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from docx_pdf.model.elements import Paragraph, Run, StyledLine


@dataclass(slots=True)
class DocumentBody:
    """Paragraphs of the main document part in document order."""

    paragraphs: List[Paragraph] = field(default_factory=list)

    def iter_runs(self) -> Iterator[Run]:
        for paragraph in self.paragraphs:
            yield from paragraph.runs

    def styled_lines(self) -> List[StyledLine]:
        """Flatten every run into a styled line, paragraph by paragraph."""
        return [StyledLine(text=run.text, style=run.style) for run in self.iter_runs()]


@dataclass(slots=True)
class ExtractionResult:
    """Styled lines and media entry names read from one DOCX package."""

    lines: List[StyledLine] = field(default_factory=list)
    media: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Newline-joined styled text with the format tag prefixed to each line."""
        return "\n".join(line.encoded for line in self.lines)

    @property
    def plain_text(self) -> str:
        """Newline-joined run texts without any formatting tags."""
        return "\n".join(line.text for line in self.lines)

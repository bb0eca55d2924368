"""In-memory representation of parsed paragraphs and runs."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class RunStyle:
    """Run-level formatting flags carried alongside text."""

    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def tag(self) -> str:
        """Format tag in fixed B, I, U order; absent flags are omitted."""
        tag = ""
        if self.bold:
            tag += "B"
        if self.italic:
            tag += "I"
        if self.underline:
            tag += "U"
        return tag


PLAIN = RunStyle()


@dataclass(slots=True)
class Run:
    """A contiguous piece of text sharing one formatting state."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @property
    def style(self) -> RunStyle:
        return RunStyle(bold=self.bold, italic=self.italic, underline=self.underline)


@dataclass(slots=True)
class Paragraph:
    """Ordered runs of a single ``w:p`` element."""

    runs: List[Run] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StyledLine:
    """One run handed from the extractor to the renderer.

    The style is kept as a structured value next to the text so the renderer
    never has to guess formatting from the characters of the line itself.
    """

    text: str
    style: RunStyle = PLAIN

    @property
    def encoded(self) -> str:
        """Flattened ``tag + text`` form, e.g. ``"BIHi"`` for bold italic "Hi"."""
        return f"{self.style.tag}{self.text}"

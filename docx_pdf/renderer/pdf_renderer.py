"""Render styled lines and embedded images into a PDF file using ReportLab."""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from reportlab.lib.fonts import tt2ps
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from docx_pdf.exceptions import MediaReadError, PdfWriteError
from docx_pdf.model.elements import RunStyle, StyledLine
from docx_pdf.parser.media_extractor import is_raster_image
from docx_pdf.utils.logger import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]

_TOKENS = re.compile(r"\s+|\S+")


@dataclass(frozen=True)
class RenderOptions:
    """Page geometry and typography for the PDF output. Lengths are in points."""

    page_size: Tuple[float, float] = A4
    font_family: str = "Helvetica"
    font_size: float = 12
    margin_left: float = 10 * mm
    margin_top: float = 10 * mm
    margin_bottom: float = 20 * mm
    cell_width: float = 190 * mm
    row_height: float = 10 * mm
    image_width: float = 100 * mm
    image_height: float = 100 * mm
    image_spacing: float = 5 * mm
    underline_offset: float = 1.5


class PdfRenderer:
    """Lays styled lines out top to bottom, then stacks images below them."""

    def __init__(
        self,
        output_path: PathLike,
        options: Optional[RenderOptions] = None,
        media_root: Optional[PathLike] = None,
    ) -> None:
        self._output_path = Path(output_path)
        self._options = options or RenderOptions()
        self._media_root = Path(media_root) if media_root is not None else Path(".")
        self._canvas: Optional[canvas.Canvas] = None
        self._cursor = 0.0

    def render(self, lines: Iterable[StyledLine], media: Sequence[str] = ()) -> None:
        """Write the PDF, replacing any file already at the output path."""
        opts = self._options
        self._canvas = canvas.Canvas(str(self._output_path), pagesize=opts.page_size)
        self._cursor = self._top

        count = 0
        for line in lines:
            self._draw_line(line)
            count += 1
        for name in media:
            self._draw_image(name)

        # Flush the current page so even an empty document has one page.
        self._canvas.showPage()
        try:
            self._canvas.save()
        except OSError as exc:
            raise PdfWriteError(f"failed to save PDF {self._output_path}: {exc}") from exc
        LOGGER.debug("Wrote %d lines and %d media references to %s", count, len(media), self._output_path)

    @property
    def _top(self) -> float:
        return self._options.page_size[1] - self._options.margin_top

    def font_for(self, style: RunStyle) -> str:
        """Return the PostScript font name for a run style."""
        return tt2ps(self._options.font_family, int(style.bold), int(style.italic))

    def _draw_line(self, line: StyledLine) -> None:
        opts = self._options
        font_name = self.font_for(line.style)
        for row in wrap_text(line.text, font_name, opts.font_size, opts.cell_width):
            self._ensure_room(opts.row_height)
            baseline = self._cursor - (opts.row_height + opts.font_size * 0.7) / 2
            self._canvas.setFont(font_name, opts.font_size)
            self._canvas.drawString(opts.margin_left, baseline, row)
            if line.style.underline and row:
                width = stringWidth(row, font_name, opts.font_size)
                rule_y = baseline - opts.underline_offset
                self._canvas.line(opts.margin_left, rule_y, opts.margin_left + width, rule_y)
            self._cursor -= opts.row_height

    def _draw_image(self, name: str) -> None:
        opts = self._options
        path = self._media_root / name
        if not is_raster_image(name):
            LOGGER.warning("Skipping media %s: not a raster image", name)
            return
        if not path.is_file():
            LOGGER.warning("Skipping media %s: %s does not exist", name, path)
            return

        self._ensure_room(opts.image_height)
        # Pillow decodes pixel data lazily, inside drawImage
        try:
            self._canvas.drawImage(
                ImageReader(str(path)),
                opts.margin_left,
                self._cursor - opts.image_height,
                width=opts.image_width,
                height=opts.image_height,
                preserveAspectRatio=True,
                anchor="nw",
            )
        except (OSError, ValueError) as exc:
            raise MediaReadError(f"failed to read image {path}: {exc}") from exc
        self._cursor -= opts.image_height + opts.image_spacing

    def _ensure_room(self, height: float) -> None:
        """Start a new page when ``height`` would cross the bottom margin."""
        if self._cursor - height < self._options.margin_bottom and self._cursor < self._top:
            self._canvas.showPage()
            self._cursor = self._top


def wrap_text(text: str, font_name: str, font_size: float, width: float) -> List[str]:
    """Break text into rows no wider than ``width``.

    Rows break at whitespace where possible; a word wider than the row is
    split between characters. Spacing inside a row is kept as written, the
    whitespace at a break is dropped. Always returns at least one row.
    """
    rows: List[str] = []
    for hard_line in text.split("\n"):
        row = ""
        for token in _TOKENS.findall(hard_line):
            if stringWidth(row + token, font_name, font_size) <= width:
                row += token
                continue
            if row.strip():
                rows.append(row.rstrip())
            row = ""
            if token.isspace():
                continue
            for char in token:
                if row and stringWidth(row + char, font_name, font_size) > width:
                    rows.append(row)
                    row = ""
                row += char
        rows.append(row)
    return rows


def as_lines(text: Union[str, Iterable[StyledLine]]) -> List[StyledLine]:
    """Accept plain text or styled lines; plain text is split into unstyled lines."""
    if isinstance(text, str):
        return [StyledLine(text=row) for row in text.split("\n")]
    return list(text)


def generate_pdf(
    text: Union[str, Iterable[StyledLine]],
    pdf_path: PathLike,
    media: Optional[Sequence[str]] = None,
    *,
    options: Optional[RenderOptions] = None,
    media_root: Optional[PathLike] = None,
) -> Path:
    """Render text (or styled lines) and optional media names into ``pdf_path``."""
    pdf_path = Path(pdf_path)
    PdfRenderer(pdf_path, options=options, media_root=media_root).render(as_lines(text), media or ())
    return pdf_path

"""Entry-point for the DOCX to PDF pipeline."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from docx_pdf.exceptions import DocxPdfError
from docx_pdf.model.document_model import ExtractionResult
from docx_pdf.parser.docx_loader import DocxPackage, PathLike
from docx_pdf.parser.document_parser import DocumentParser
from docx_pdf.parser.media_extractor import MediaExtractor
from docx_pdf.renderer.pdf_renderer import generate_pdf
from docx_pdf.utils.debug import DebugDumper
from docx_pdf.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)


def extract_text_with_formatting(docx_path: PathLike) -> ExtractionResult:
    """Load a DOCX package and flatten its runs into styled lines plus media names."""
    package = DocxPackage.load(docx_path)
    body = DocumentParser(package.document_xml).parse()
    result = ExtractionResult(lines=body.styled_lines(), media=list(package.media_names))
    LOGGER.debug("Extracted %d runs from %d paragraphs", len(result.lines), len(body.paragraphs))
    return result


def extract_text(docx_path: PathLike) -> str:
    """Return the document's run texts joined by newlines, without formatting."""
    return extract_text_with_formatting(docx_path).plain_text


def convert(
    docx_path: PathLike,
    pdf_path: PathLike,
    *,
    with_formatting: bool = False,
    media_dir: Optional[PathLike] = None,
) -> Path:
    """Convert a DOCX file into a PDF, overwriting ``pdf_path`` if it exists.

    By default only plain text is carried over. With ``with_formatting`` the
    bold/italic/underline flags are rendered, and when ``media_dir`` is given
    the embedded media is unpacked there and placed after the text.
    """
    docx_path = Path(docx_path)
    LOGGER.info("Converting %s", docx_path.name)
    if not with_formatting:
        return generate_pdf(extract_text(docx_path), pdf_path)

    result = extract_text_with_formatting(docx_path)
    media = []
    if media_dir is not None:
        MediaExtractor(docx_path).extract_to(media_dir)
        media = result.media
    return generate_pdf(result.lines, pdf_path, media, media_root=media_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docx-pdf", description="Convert DOCX files into PDF")
    parser.add_argument("docx_file", help="Path to the input .docx file")
    parser.add_argument("-o", "--output", help="Path of the PDF to write (defaults to the input name with .pdf)")
    parser.add_argument("--formatting", action="store_true", help="Render bold, italic and underline runs")
    parser.add_argument("--media-dir", help="Unpack embedded images here and place them in the PDF (implies --formatting)")
    parser.add_argument("--debug-dir", help="Directory to dump the extraction result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Run the converter from the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    docx_path = Path(args.docx_file)
    output = Path(args.output) if args.output else docx_path.with_suffix(".pdf")
    try:
        if args.debug_dir:
            DebugDumper(Path(args.debug_dir)).dump(extract_text_with_formatting(docx_path))
        pdf_path = convert(
            docx_path,
            output,
            with_formatting=args.formatting or args.media_dir is not None,
            media_dir=args.media_dir,
        )
    except DocxPdfError as exc:
        print(f"docx-pdf: {exc}", file=sys.stderr)
        return 1

    LOGGER.info("Wrote %s", pdf_path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())

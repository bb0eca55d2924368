"""Exceptions raised by the DOCX to PDF pipeline."""
from __future__ import annotations


class DocxPdfError(RuntimeError):
    """Base class for all conversion failures."""


class ArchiveOpenError(DocxPdfError):
    """Raised when the input cannot be opened as a zip container."""


class EntryReadError(DocxPdfError):
    """Raised when a located archive entry cannot be fully read."""


class XmlParseError(DocxPdfError):
    """Raised when the document part is malformed or has an unexpected root."""


class OutputWriteError(DocxPdfError):
    """Raised when a file produced by the pipeline cannot be written."""


class PdfWriteError(OutputWriteError):
    """Raised when the output PDF cannot be created or written."""


class MediaReadError(DocxPdfError):
    """Raised when an embedded image exists on disk but cannot be decoded."""

"""DOCX package loader responsible for reading the main part and media names."""
from __future__ import annotations

import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from docx_pdf.exceptions import ArchiveOpenError, EntryReadError
from docx_pdf.utils.logger import get_logger

LOGGER = get_logger(__name__)

DOCUMENT_XML_PATH = "word/document.xml"
MEDIA_PREFIX = "word/media/"

PathLike = Union[str, Path]


@dataclass(slots=True)
class DocxPackage:
    """Main document part bytes and media entry names of a DOCX archive."""

    document_xml: Optional[bytes] = None
    media_names: List[str] = field(default_factory=list)

    @classmethod
    def load(cls, docx_path: PathLike) -> "DocxPackage":
        """Open a DOCX archive and scan its entries in a single pass.

        The archive handle is closed before this method returns, on success
        and on failure alike. A package without ``word/document.xml`` loads
        with ``document_xml`` set to ``None``.
        """
        docx_path = Path(docx_path)
        try:
            docx_zip = zipfile.ZipFile(docx_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveOpenError(f"failed to open DOCX {docx_path}: {exc}") from exc

        package = cls()
        with docx_zip:
            for info in docx_zip.infolist():
                if info.filename == DOCUMENT_XML_PATH:
                    package.document_xml = read_entry(docx_zip, info)
                if info.filename.startswith(MEDIA_PREFIX) and not info.is_dir():
                    package.media_names.append(info.filename)

        if package.document_xml is None:
            LOGGER.warning("%s has no %s; treating it as empty", docx_path.name, DOCUMENT_XML_PATH)
        LOGGER.debug("Scanned %s: %d media entries", docx_path.name, len(package.media_names))
        return package


def read_entry(docx_zip: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    """Read the full decompressed payload of one entry."""
    try:
        return docx_zip.read(info)
    except (OSError, RuntimeError, zipfile.BadZipFile, zlib.error) as exc:
        raise EntryReadError(f"failed to read {info.filename}: {exc}") from exc

"""
DOCX media unpacking.

Writes the entries under ``word/media/`` to a directory on disk so that the
names reported by the extractor resolve against that directory when the
renderer places images.
"""
from __future__ import annotations

import mimetypes
import posixpath
import zipfile
from pathlib import Path, PurePosixPath
from typing import List

from docx_pdf.exceptions import ArchiveOpenError, EntryReadError, OutputWriteError
from docx_pdf.parser.docx_loader import MEDIA_PREFIX, PathLike, read_entry
from docx_pdf.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Common DOCX media types, checked before the mimetypes registry
_FALLBACK_TYPES = {
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.bmp': 'image/bmp',
    '.tif': 'image/tiff',
    '.tiff': 'image/tiff',
    '.svg': 'image/svg+xml',
    '.emf': 'image/x-emf',
    '.wmf': 'image/x-wmf',
    '.mp3': 'audio/mpeg',
    '.wav': 'audio/wav',
    '.mp4': 'video/mp4',
}

# Types the PDF canvas can draw directly
RASTER_TYPES = frozenset({'image/png', 'image/jpeg', 'image/gif', 'image/bmp', 'image/tiff'})


def media_type_for(name: str) -> str:
    """Determine MIME type from the file extension."""
    ext = PurePosixPath(name).suffix.lower()
    if ext in _FALLBACK_TYPES:
        return _FALLBACK_TYPES[ext]
    mime_type, _ = mimetypes.guess_type(name)
    return mime_type or 'application/octet-stream'


def is_raster_image(name: str) -> bool:
    return media_type_for(name) in RASTER_TYPES


class MediaExtractor:
    """Unpacks embedded media from a DOCX archive."""

    def __init__(self, docx_path: PathLike) -> None:
        self.docx_path = Path(docx_path)

    def extract_to(self, directory: PathLike) -> List[Path]:
        """Write every media entry below ``directory``, keeping archive-relative paths."""
        directory = Path(directory)
        try:
            docx_zip = zipfile.ZipFile(self.docx_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveOpenError(f"failed to open DOCX {self.docx_path}: {exc}") from exc

        written: List[Path] = []
        with docx_zip:
            for info in docx_zip.infolist():
                if not info.filename.startswith(MEDIA_PREFIX) or info.is_dir():
                    continue
                target = directory / self._safe_relative(info.filename)
                payload = read_entry(docx_zip, info)
                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_bytes(payload)
                except OSError as exc:
                    raise OutputWriteError(f"failed to write media {target}: {exc}") from exc
                written.append(target)

        LOGGER.debug("Unpacked %d media entries from %s into %s", len(written), self.docx_path.name, directory)
        return written

    @staticmethod
    def _safe_relative(name: str) -> PurePosixPath:
        normalized = posixpath.normpath(name)
        if normalized.startswith(("../", "/")) or normalized == "..":
            raise EntryReadError(f"refusing to unpack entry outside the target directory: {name}")
        return PurePosixPath(normalized)

"""Helper functions to work with WordprocessingML namespaces and parsing."""
from __future__ import annotations

from xml.etree import ElementTree as ET

from docx_pdf.exceptions import XmlParseError


def parse_xml(data: bytes, part_name: str = "document part") -> ET.Element:
    """Parse raw bytes into an element tree root, wrapping syntax errors."""
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise XmlParseError(f"failed to parse {part_name}: {exc}") from exc


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    return tag.split("}", 1)[-1]

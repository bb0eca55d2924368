"""Parse document.xml into paragraphs and runs."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_pdf.exceptions import XmlParseError
from docx_pdf.model.document_model import DocumentBody
from docx_pdf.model.elements import Paragraph, Run
from docx_pdf.utils.logger import get_logger
from docx_pdf.utils.xml_utils import local_name, parse_xml

LOGGER = get_logger(__name__)

# rPr child element -> Run field
_FORMAT_FLAGS = {"b": "bold", "i": "italic", "u": "underline"}


class DocumentParser:
    """Walks the body markup and maps elements onto Paragraph and Run.

    Elements are matched by local name only, so the parser accepts the
    main WordprocessingML namespace as well as unqualified markup.
    """

    def __init__(self, document_xml: Optional[bytes]) -> None:
        self._document_xml = document_xml

    def parse(self) -> DocumentBody:
        """Parse the document part into a body of paragraphs."""
        if self._document_xml is None:
            return DocumentBody()

        root = parse_xml(self._document_xml, "document.xml")
        if local_name(root.tag) != "document":
            raise XmlParseError(f"unexpected root element in document.xml: {local_name(root.tag)}")

        body = self._find_child(root, "body")
        if body is None:
            LOGGER.warning("document.xml missing body element")
            return DocumentBody()

        paragraphs = []
        for child in body:
            tag = local_name(child.tag)
            if tag == "p":
                paragraphs.append(self._parse_paragraph(child))
            else:
                LOGGER.debug("Skipping unsupported body element: %s", tag)
        return DocumentBody(paragraphs=paragraphs)

    def _parse_paragraph(self, paragraph_el: ET.Element) -> Paragraph:
        runs: List[Run] = []
        for child in paragraph_el:
            tag = local_name(child.tag)
            if tag == "r":
                runs.append(self._parse_run(child))
            elif tag == "hyperlink":
                runs.extend(self._parse_run(run_el) for run_el in self._find_children(child, "r"))
        return Paragraph(runs=runs)

    def _parse_run(self, run_el: ET.Element) -> Run:
        run = Run(text="".join(t.text or "" for t in self._find_children(run_el, "t")))
        rpr = self._find_child(run_el, "rPr")
        if rpr is not None:
            for child in rpr:
                flag = _FORMAT_FLAGS.get(local_name(child.tag))
                if flag:
                    setattr(run, flag, True)
        return run

    @staticmethod
    def _find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
        for child in element:
            if local_name(child.tag) == name:
                return child
        return None

    @staticmethod
    def _find_children(element: ET.Element, name: str) -> List[ET.Element]:
        return [child for child in element if local_name(child.tag) == name]

"""Tests for document parser functionality."""
import unittest

from docx_pdf.exceptions import XmlParseError
from docx_pdf.parser.document_parser import DocumentParser


def parse(xml: str):
    return DocumentParser(xml.encode("utf-8")).parse()


class DocumentParserTest(unittest.TestCase):
    """Test paragraph and run extraction from document.xml."""

    def test_parse_basic_paragraph(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body>
            <w:p>
              <w:r>
                <w:t>Hello World</w:t>
              </w:r>
            </w:p>
          </w:body>
        </w:document>
        """
        body = parse(xml)

        self.assertEqual(len(body.paragraphs), 1)
        paragraph = body.paragraphs[0]
        self.assertEqual(len(paragraph.runs), 1)
        self.assertEqual(paragraph.runs[0].text, "Hello World")
        self.assertFalse(paragraph.runs[0].bold)
        self.assertFalse(paragraph.runs[0].italic)
        self.assertFalse(paragraph.runs[0].underline)

    def test_parse_run_with_formatting(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body>
            <w:p>
              <w:pPr>
                <w:pStyle w:val="Heading1"/>
              </w:pPr>
              <w:r>
                <w:rPr>
                  <w:b/>
                  <w:i/>
                </w:rPr>
                <w:t>Formatted Text</w:t>
              </w:r>
              <w:r>
                <w:rPr>
                  <w:u w:val="single"/>
                </w:rPr>
                <w:t>Underlined</w:t>
              </w:r>
            </w:p>
          </w:body>
        </w:document>
        """
        runs = parse(xml).paragraphs[0].runs

        self.assertEqual(len(runs), 2)
        self.assertEqual(runs[0].text, "Formatted Text")
        self.assertTrue(runs[0].bold)
        self.assertTrue(runs[0].italic)
        self.assertFalse(runs[0].underline)
        self.assertEqual(runs[1].style.tag, "U")

    def test_flags_come_only_from_run_properties(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body>
            <w:p>
              <w:pPr>
                <w:rPr><w:b/></w:rPr>
              </w:pPr>
              <w:r>
                <w:t>Not bold</w:t>
              </w:r>
            </w:p>
          </w:body>
        </w:document>
        """
        run = parse(xml).paragraphs[0].runs[0]
        self.assertFalse(run.bold)

    def test_tables_are_skipped(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body>
            <w:p>
              <w:r>
                <w:t>First paragraph</w:t>
              </w:r>
            </w:p>
            <w:tbl>
              <w:tr>
                <w:tc>
                  <w:p>
                    <w:r>
                      <w:t>Table content</w:t>
                    </w:r>
                  </w:p>
                </w:tc>
              </w:tr>
            </w:tbl>
            <w:p>
              <w:r>
                <w:t>Second paragraph</w:t>
              </w:r>
            </w:p>
            <w:sectPr/>
          </w:body>
        </w:document>
        """
        body = parse(xml)

        self.assertEqual(len(body.paragraphs), 2)
        self.assertEqual(body.paragraphs[0].runs[0].text, "First paragraph")
        self.assertEqual(body.paragraphs[1].runs[0].text, "Second paragraph")

    def test_hyperlink_runs_keep_document_order(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"
                    xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">
          <w:body>
            <w:p>
              <w:r><w:t>See </w:t></w:r>
              <w:hyperlink r:id="rId7">
                <w:r><w:rPr><w:u/></w:rPr><w:t>the site</w:t></w:r>
              </w:hyperlink>
              <w:r><w:t> for details</w:t></w:r>
            </w:p>
          </w:body>
        </w:document>
        """
        runs = parse(xml).paragraphs[0].runs

        self.assertEqual([run.text for run in runs], ["See ", "the site", " for details"])
        self.assertTrue(runs[1].underline)

    def test_multiple_text_children_are_concatenated(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body>
            <w:p>
              <w:r><w:t>Split</w:t><w:tab/><w:t xml:space="preserve"> text</w:t></w:r>
              <w:r><w:lastRenderedPageBreak/></w:r>
            </w:p>
          </w:body>
        </w:document>
        """
        runs = parse(xml).paragraphs[0].runs

        self.assertEqual(runs[0].text, "Split text")
        self.assertEqual(runs[1].text, "")

    def test_unqualified_markup_is_accepted(self) -> None:
        xml = "<document><body><p><r><rPr><b/></rPr><t>Plain</t></r></p></body></document>"
        run = parse(xml).paragraphs[0].runs[0]

        self.assertEqual(run.text, "Plain")
        self.assertTrue(run.bold)

    def test_empty_body(self) -> None:
        xml = """
        <w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:body/>
        </w:document>
        """
        body = parse(xml)
        self.assertEqual(body.paragraphs, [])
        self.assertEqual(body.styled_lines(), [])

    def test_missing_body_yields_empty_document(self) -> None:
        xml = '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"/>'
        with self.assertLogs("docx_pdf.parser.document_parser", level="WARNING"):
            body = parse(xml)
        self.assertEqual(body.paragraphs, [])

    def test_missing_part_yields_empty_document(self) -> None:
        self.assertEqual(DocumentParser(None).parse().paragraphs, [])

    def test_malformed_xml_raises(self) -> None:
        with self.assertRaises(XmlParseError) as ctx:
            parse("<w:document><w:body>")
        self.assertIn("document.xml", str(ctx.exception))

    def test_unexpected_root_raises(self) -> None:
        with self.assertRaises(XmlParseError):
            parse("<styles><p/></styles>")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

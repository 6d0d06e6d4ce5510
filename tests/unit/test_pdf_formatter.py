"""Tests for the PDFFormatter."""

from __future__ import annotations

from datetime import date

import pymupdf
import pytest

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.formatters.pdf_formatter import PDFFormatter
from paf_builder.layout.context import LayoutContext
from paf_builder.layout.document import AssembledDocument, TextOp


def _make_document(png: bytes | None = None, pages: int = 2) -> AssembledDocument:
    layout = LayoutContext(PDFFormattingConfig())
    for number in range(1, pages + 1):
        layout.new_page(f"Section {number}")
        layout.mark_section(f"section_{number}", f"Section {number}")
        layout.write_paragraph(f"Body text for section {number}.")
    if png is not None:
        layout.new_page("Attachment", running=False)
        layout.place_image(png, "PNG", 120, 60)
    layout.finalize()
    return AssembledDocument(
        pages=layout.pages,
        sections=layout.sections,
        title="Public Access File",
        employer_name="Acme Analytics, Inc.",
        generated_on=date(2025, 9, 1),
    )


class TestPDFFormatter:
    def test_returns_pdf_bytes(self) -> None:
        result = PDFFormatter().format(_make_document())
        assert result.startswith(b"%PDF")

    def test_page_count_matches_document(self, png_bytes) -> None:
        document = _make_document(png=png_bytes)
        with pymupdf.open(stream=PDFFormatter().format(document), filetype="pdf") as pdf:
            assert pdf.page_count == document.page_count == 3

    def test_text_and_page_stamps_are_painted(self) -> None:
        with pymupdf.open(stream=PDFFormatter().format(_make_document()), filetype="pdf") as pdf:
            first = pdf[0].get_text()
            second = pdf[1].get_text()
        assert "Body text for section 1." in first
        assert "Page 1 of 2" in first
        assert "Page 2 of 2" in second

    def test_image_is_drawn(self, png_bytes) -> None:
        document = _make_document(png=png_bytes, pages=1)
        with pymupdf.open(stream=PDFFormatter().format(document), filetype="pdf") as pdf:
            assert pdf[1].get_images()

    def test_metadata(self) -> None:
        with pymupdf.open(stream=PDFFormatter().format(_make_document()), filetype="pdf") as pdf:
            assert pdf.metadata["title"] == "Public Access File"
            assert pdf.metadata["author"] == "Acme Analytics, Inc."

    def test_title_override(self) -> None:
        data = PDFFormatter().format(_make_document(), title="Custom Title")
        with pymupdf.open(stream=data, filetype="pdf") as pdf:
            assert pdf.metadata["title"] == "Custom Title"

    def test_unknown_draw_operation_rejected(self) -> None:
        document = _make_document(pages=1)
        document.pages[0].ops.append(object())
        with pytest.raises(TypeError, match="Unknown draw operation"):
            PDFFormatter().format(document)

    def test_format_to_file(self, tmp_path) -> None:
        path = PDFFormatter().format_to_file(_make_document(), tmp_path / "out.pdf")
        assert path.read_bytes().startswith(b"%PDF")

    def test_text_is_sanitized_for_base_fonts(self) -> None:
        document = _make_document(pages=1)
        page = document.pages[0]
        page.ops.append(TextOp(x=36, y=400, text="Level II ← selected", font="Helvetica", size=10))
        with pymupdf.open(stream=PDFFormatter().format(document), filetype="pdf") as pdf:
            assert "Level II <- selected" in pdf[0].get_text()

    def test_content_type(self) -> None:
        assert PDFFormatter().content_type == "application/pdf"

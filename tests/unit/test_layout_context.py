"""Tests for the layout context: pagination, headers and text primitives."""

from __future__ import annotations

from datetime import date

import pytest

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.layout.context import LayoutContext
from paf_builder.layout.document import AssembledDocument, ImageOp, TextOp
from paf_builder.layout.styles import HEADER_BAND_HEIGHT, font_variants
from paf_builder.layout.text import sanitize_text, truncate_to_width, wrap_text


class TestGeometry:
    def test_letter_default(self) -> None:
        layout = LayoutContext()
        assert (layout.page_width, layout.page_height) == (612.0, 792.0)
        assert layout.margin == 36.0
        assert layout.content_width == 540.0

    def test_a4(self) -> None:
        layout = LayoutContext(PDFFormattingConfig(page_size="a4"))
        assert layout.page_width == pytest.approx(595.2756, abs=0.01)

    def test_font_family_variants(self) -> None:
        layout = LayoutContext(PDFFormattingConfig(font_family="Times-Roman"))
        assert layout.font == "Times-Roman"
        assert layout.bold_font == "Times-Bold"

    def test_registered_family_variants_are_guessed(self) -> None:
        assert font_variants("DejaVuSans")[1] == "DejaVuSans-Bold"


class TestPagination:
    def test_page_property_creates_first_page(self) -> None:
        layout = LayoutContext()
        assert layout.page is layout.pages[0]

    def test_header_band_moves_cursor(self) -> None:
        layout = LayoutContext()
        layout.new_page("Benefits Summary")
        assert layout.y == layout.content_top
        assert layout.page.header == "Benefits Summary"
        assert "Benefits Summary" in layout.page.texts()
        assert layout.content_top > HEADER_BAND_HEIGHT

    def test_overflow_repeats_running_header(self) -> None:
        layout = LayoutContext()
        layout.new_page("Actual Wage Standards")
        for _ in range(120):
            layout.write_paragraph("A line of policy text.")
        assert len(layout.pages) > 1
        assert all(page.header == "Actual Wage Standards" for page in layout.pages)

    def test_non_running_header_is_not_repeated(self) -> None:
        layout = LayoutContext()
        layout.new_page("Section")
        layout.new_page("Attachment - Page 1 of 1", running=False)
        assert layout.running_header == "Section"
        layout.y = layout.bottom
        layout.ensure_space(20)
        assert layout.page.header == "Section"

    def test_ensure_space_without_break(self) -> None:
        layout = LayoutContext()
        layout.new_page("X")
        assert layout.ensure_space(10) is False
        assert len(layout.pages) == 1

    def test_long_paragraph_flows_across_pages(self) -> None:
        layout = LayoutContext()
        layout.new_page("X")
        layout.write_paragraph("\n".join(f"line {i}" for i in range(200)))
        text = "\n".join(page.text() for page in layout.pages)
        assert "line 0" in text and "line 199" in text
        assert len(layout.pages) >= 3

    def test_finalize_stamps_page_numbers(self) -> None:
        layout = LayoutContext()
        layout.new_page("A")
        layout.new_page("B")
        layout.new_page()
        layout.finalize()
        assert [p.page_number_stamp for p in layout.pages] == [
            "Page 1 of 3",
            "Page 2 of 3",
            "Page 3 of 3",
        ]

    def test_mark_section_records_first_page(self) -> None:
        layout = LayoutContext()
        layout.new_page("A")
        layout.mark_section("a", "A")
        layout.new_page("B")
        layout.new_page("B")
        layout.mark_section("b", "B")
        assert [(m.key, m.first_page) for m in layout.sections] == [("a", 0), ("b", 2)]


class TestTextPrimitives:
    def test_label_value_skips_empty_values(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_label_value("Trade Name/DBA", "")
        layout.write_label_value("Address 2", None)
        layout.write_label_value("Full-Time Position", True)
        assert layout.page.texts() == ["Full-Time Position:", "Yes"]

    def test_numbered_list_markers(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_numbered(["LinkedIn", "Indeed"])
        assert layout.page.texts() == ["1.", "LinkedIn", "2.", "Indeed"]

    def test_numbered_bold_items(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_numbered(["LinkedIn"], bold_items=True)
        item = [op for op in layout.page.ops if isinstance(op, TextOp) and op.text == "LinkedIn"][0]
        assert item.font == layout.bold_font

    def test_table_rows_in_order(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_table([["Wage Type", "Amount"], ["Prevailing Wage", "$85,000"]], [0.5, 0.5])
        assert layout.page.texts() == ["Wage Type", "Amount", "Prevailing Wage", "$85,000"]

    def test_box_title_precedes_lines(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_box(["Job Title: Data Engineer"], title="POSITION IDENTIFICATION")
        assert layout.page.texts() == ["POSITION IDENTIFICATION", "Job Title: Data Engineer"]

    def test_text_is_sanitized_on_write(self) -> None:
        layout = LayoutContext()
        layout.new_page()
        layout.write_paragraph("Level II ← selected — ok")
        assert layout.page.texts() == ["Level II <- selected - ok"]


class TestPlaceImage:
    def test_small_image_is_not_enlarged(self) -> None:
        layout = LayoutContext()
        layout.new_page("X")
        width, height = layout.place_image(b"img", "PNG", 100, 50)
        assert (width, height) == (100, 50)
        image = layout.page.images[0]
        assert image.x == pytest.approx((612 - 100) / 2)

    def test_large_image_is_shrunk_to_fit(self) -> None:
        layout = LayoutContext()
        layout.new_page("X")
        available = layout.bottom - layout.y
        width, height = layout.place_image(b"img", "JPEG", 1224, 1584)
        assert width <= layout.content_width + 1e-6
        assert height <= available + 1e-6
        assert width / height == pytest.approx(1224 / 1584)
        assert isinstance(layout.page.ops[-1], ImageOp)


class TestTextHelpers:
    def test_sanitize_replaces_smart_quotes(self) -> None:
        assert sanitize_text("“quoted” ‘x’") == "\"quoted\" 'x'"

    def test_wrap_keeps_blank_lines(self) -> None:
        assert wrap_text("a\n\nb", "Helvetica", 10, 500) == ["a", "", "b"]

    def test_wrap_splits_long_text(self) -> None:
        lines = wrap_text("word " * 100, "Helvetica", 10, 200)
        assert len(lines) > 1

    def test_truncate_adds_ellipsis(self) -> None:
        result = truncate_to_width("x" * 300, "Helvetica", 10, 100)
        assert result.endswith("...")
        assert len(result) < 300


class TestAssembledDocument:
    def test_section_pages_span_until_next_section(self) -> None:
        layout = LayoutContext()
        layout.new_page("A")
        layout.mark_section("a", "A")
        layout.new_page("A2")
        layout.mark_section("a_sub", "A2")
        layout.new_page("B")
        layout.mark_section("b", "B")
        document = AssembledDocument(
            pages=layout.pages,
            sections=layout.sections,
            title="t",
            employer_name="e",
            generated_on=date(2025, 1, 1),
        )
        assert len(document.section_pages("a")) == 1
        assert len(document.section_pages("a_sub")) == 1
        assert document.section_keys == ["a", "a_sub", "b"]
        with pytest.raises(KeyError):
            document.section_pages("missing")

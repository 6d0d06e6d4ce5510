"""Tests for attachment embedding and its degradation paths."""

from __future__ import annotations

import pytest

from paf_builder.core.config import EmbeddingConfig
from paf_builder.embedding.embedder import (
    EMBED_FAILED_NOTICE,
    UNSUPPORTED_NOTICE,
    AttachmentEmbedder,
    detect_kind,
    image_format_for,
)
from paf_builder.embedding.images import encode_image, looks_like_pdf
from paf_builder.layout.context import LayoutContext
from paf_builder.models import Attachment
from tests.fakes.documents import make_pdf, make_png


def _attachment(data: bytes, content_type: str, filename: str = "upload") -> Attachment:
    return Attachment(filename=filename, content_type=content_type, data=data)


class TestDetectKind:
    def test_by_mime_type(self) -> None:
        assert detect_kind("application/pdf") == "pdf"
        assert detect_kind("image/png; charset=binary") == "image"
        assert detect_kind("application/msword") == "other"

    def test_generic_mime_sniffs_signature(self) -> None:
        assert detect_kind("application/octet-stream", b"%PDF-1.4 ...") == "pdf"
        assert detect_kind("", make_png()) == "image"
        assert detect_kind("application/octet-stream", b"plain text") == "other"

    def test_image_format(self) -> None:
        assert image_format_for("image/png") == "PNG"
        assert image_format_for("image/gif") == "JPEG"

    def test_pdf_signature_allows_leading_whitespace(self) -> None:
        assert looks_like_pdf(b"\n %PDF-1.7")
        assert not looks_like_pdf(b"PK\x03\x04")


class TestEncodeImage:
    def test_reads_dpi_and_size(self) -> None:
        image = encode_image(make_png(192, 96), "PNG")
        assert (image.width_px, image.height_px) == (192, 96)
        assert image.width_pt == pytest.approx(144.0, abs=0.5)

    def test_jpeg_conversion(self) -> None:
        image = encode_image(make_png(), "JPEG")
        assert image.fmt == "JPEG"
        assert image.data[:3] == b"\xff\xd8\xff"

    def test_garbage_raises(self) -> None:
        with pytest.raises(Exception):
            encode_image(b"not an image")


class TestEmbedPDF:
    @pytest.mark.asyncio
    async def test_one_page_per_source_page(self) -> None:
        layout = LayoutContext()
        pages = await AttachmentEmbedder().embed(
            layout, _attachment(make_pdf(3), "application/pdf"), "Certified LCA"
        )
        assert len(pages) == 3
        assert [p.header for p in pages] == [
            "Certified LCA - Page 1 of 3",
            "Certified LCA - Page 2 of 3",
            "Certified LCA - Page 3 of 3",
        ]
        assert all(len(p.images) == 1 and p.images[0].fmt == "JPEG" for p in pages)

    @pytest.mark.asyncio
    async def test_embedded_pages_do_not_become_running_header(self) -> None:
        layout = LayoutContext()
        layout.new_page("Labor Condition Application")
        await AttachmentEmbedder().embed(
            layout, _attachment(make_pdf(1), "application/pdf"), "Certified LCA"
        )
        assert layout.running_header == "Labor Condition Application"

    @pytest.mark.asyncio
    async def test_page_cap_notes_skipped_pages(self) -> None:
        layout = LayoutContext()
        embedder = AttachmentEmbedder(EmbeddingConfig(max_pages=2))
        pages = await embedder.embed(
            layout, _attachment(make_pdf(4), "application/pdf"), "Benefits Documentation"
        )
        assert len([p for p in pages if p.images]) == 2
        assert "2 additional page(s)" in pages[-1].text()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [b"", b"this is not a pdf"])
    async def test_empty_or_unsigned_pdf_yields_one_fallback_page(self, payload: bytes) -> None:
        layout = LayoutContext()
        pages = await AttachmentEmbedder().embed(
            layout, _attachment(payload, "application/pdf", "lca.pdf"), "Proof of LCA Posting"
        )
        assert len(pages) == 1
        text = pages[0].text()
        assert "Proof of LCA Posting" in text
        assert EMBED_FAILED_NOTICE in text
        assert "File: lca.pdf" in text

    @pytest.mark.asyncio
    async def test_corrupt_pdf_body_yields_fallback(self) -> None:
        layout = LayoutContext()
        pages = await AttachmentEmbedder().embed(
            layout, _attachment(b"%PDF-1.7 garbage garbage", "application/pdf"), "Certified LCA"
        )
        assert len(pages) == 1
        assert EMBED_FAILED_NOTICE in pages[0].text()

    @pytest.mark.asyncio
    async def test_unreadable_path_yields_fallback(self, tmp_path) -> None:
        attachment = Attachment(
            filename="gone.pdf", content_type="application/pdf", path=tmp_path / "gone.pdf"
        )
        pages = await AttachmentEmbedder().embed(LayoutContext(), attachment, "Certified LCA")
        assert len(pages) == 1
        assert EMBED_FAILED_NOTICE in pages[0].text()


class TestEmbedOther:
    @pytest.mark.asyncio
    async def test_image_single_page(self) -> None:
        layout = LayoutContext()
        pages = await AttachmentEmbedder().embed(
            layout, _attachment(make_png(), "image/png"), "Proof of LCA Posting"
        )
        assert len(pages) == 1
        assert pages[0].header == "Proof of LCA Posting"
        assert pages[0].images[0].fmt == "PNG"

    @pytest.mark.asyncio
    async def test_broken_image_yields_fallback(self) -> None:
        pages = await AttachmentEmbedder().embed(
            LayoutContext(), _attachment(b"\x89PNG broken", "image/png"), "Benefits Documentation"
        )
        assert len(pages) == 1
        assert EMBED_FAILED_NOTICE in pages[0].text()

    @pytest.mark.asyncio
    async def test_word_document_gets_reference_page(self) -> None:
        pages = await AttachmentEmbedder().embed(
            LayoutContext(),
            _attachment(b"PK\x03\x04", "application/msword", "benefits.docx"),
            "Benefits Documentation",
        )
        assert len(pages) == 1
        text = pages[0].text()
        assert "Attached document: benefits.docx" in text
        assert UNSUPPORTED_NOTICE in text

    @pytest.mark.asyncio
    async def test_existing_pages_are_untouched_by_failure(self) -> None:
        layout = LayoutContext()
        layout.new_page("Before")
        await AttachmentEmbedder().embed(layout, _attachment(b"", "application/pdf"), "Certified LCA")
        assert len(layout.pages) == 2
        assert layout.pages[0].header == "Before"

"""Attachment embedder: rasterize uploaded PDFs and images into document pages.

A bad attachment never aborts assembly. Any failure on the PDF or image
path is logged and replaced by a single placeholder page that tells the
reader to obtain the document separately.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import pymupdf

from paf_builder.core.config import EmbeddingConfig
from paf_builder.embedding.images import (
    JPEG_SIGNATURE,
    PNG_SIGNATURE,
    TIFF_SIGNATURES,
    EncodedImage,
    encode_image,
    looks_like_pdf,
)
from paf_builder.exceptions import EmbeddingError
from paf_builder.layout.context import LayoutContext
from paf_builder.layout.document import Page
from paf_builder.layout.styles import GRAY, WARNING_BG, WARNING_BORDER, WARNING_TEXT
from paf_builder.models import Attachment

log = logging.getLogger(__name__)

EMBED_FAILED_NOTICE = "Unable to embed document. Please attach separately."
UNSUPPORTED_NOTICE = "(Document type cannot be embedded - please attach separately)"

_GENERIC_MIME_TYPES = {"", "application/octet-stream", "binary/octet-stream"}


@dataclass(frozen=True)
class _Rasterized:
    images: list[EncodedImage]
    source_pages: int


def detect_kind(content_type: str, payload: bytes | None = None) -> str:
    """Classify an attachment as ``pdf``, ``image`` or ``other``.

    Generic MIME types fall back to sniffing the file signature.
    """
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime == "application/pdf":
        return "pdf"
    if mime.startswith("image/"):
        return "image"
    if mime in _GENERIC_MIME_TYPES and payload:
        if looks_like_pdf(payload):
            return "pdf"
        if payload.startswith((PNG_SIGNATURE, JPEG_SIGNATURE, *TIFF_SIGNATURES)):
            return "image"
    return "other"


def image_format_for(content_type: str) -> str:
    return "PNG" if content_type.split(";")[0].strip().lower() == "image/png" else "JPEG"


class AttachmentEmbedder:
    """Turns an :class:`Attachment` into one or more pages on a layout."""

    def __init__(self, config: EmbeddingConfig | None = None) -> None:
        self._config = config or EmbeddingConfig()

    async def embed(
        self,
        layout: LayoutContext,
        attachment: Attachment,
        section_title: str,
    ) -> list[Page]:
        """Append pages reproducing *attachment* and return them.

        PDFs produce one page per source page, images a single page, and
        anything else (or any failure) exactly one placeholder page.
        """
        first_index = len(layout.pages)
        try:
            payload = await attachment.read()
            if not payload:
                raise EmbeddingError("attachment is empty")
            kind = detect_kind(attachment.content_type, payload)
            if kind == "pdf":
                rasterized = await asyncio.to_thread(self._rasterize_pdf, payload)
                self._place_pdf_pages(layout, rasterized, section_title)
            elif kind == "image":
                image = await asyncio.to_thread(
                    encode_image,
                    payload,
                    image_format_for(attachment.content_type),
                    default_dpi=self._config.default_image_dpi,
                    jpeg_quality=self._config.jpeg_quality,
                )
                self._place_image_page(layout, image, section_title)
            else:
                log.info(
                    "Attachment %s has non-embeddable type %s",
                    attachment.filename,
                    attachment.content_type,
                )
                self._reference_page(layout, attachment, section_title)
        except Exception as exc:
            log.warning(
                "Could not embed %s into %r, writing placeholder page: %s",
                attachment.filename,
                section_title,
                exc,
            )
            del layout.pages[first_index:]
            self._fallback_page(layout, attachment, section_title)
        return layout.pages[first_index:]

    # ── Rasterization (runs off the event loop) ──────────────────────

    def _rasterize_pdf(self, payload: bytes) -> _Rasterized:
        if not looks_like_pdf(payload):
            raise EmbeddingError("payload does not carry a %PDF- signature")
        scale = self._config.render_scale
        matrix = pymupdf.Matrix(scale, scale)
        images: list[EncodedImage] = []
        with pymupdf.open(stream=payload, filetype="pdf") as document:
            if document.page_count == 0:
                raise EmbeddingError("PDF has no pages")
            for index, page in enumerate(document):
                if index >= self._config.max_pages:
                    break
                pixmap = page.get_pixmap(matrix=matrix, alpha=False)
                images.append(
                    EncodedImage(
                        data=pixmap.tobytes("jpeg", jpg_quality=self._config.jpeg_quality),
                        fmt="JPEG",
                        width_px=pixmap.width,
                        height_px=pixmap.height,
                        dpi=72.0 * scale,
                    )
                )
            source_pages = document.page_count
        return _Rasterized(images=images, source_pages=source_pages)

    # ── Placement ────────────────────────────────────────────────────

    def _place_pdf_pages(
        self, layout: LayoutContext, rasterized: _Rasterized, section_title: str
    ) -> None:
        total = rasterized.source_pages
        for number, image in enumerate(rasterized.images, start=1):
            layout.new_page(f"{section_title} - Page {number} of {total}", running=False)
            self._place_centered(layout, image)
        skipped = total - len(rasterized.images)
        if skipped > 0:
            layout.write_paragraph(
                f"{skipped} additional page(s) of this document are not reproduced here; "
                "refer to the original filing.",
                size=9,
                italic=True,
                color=GRAY,
            )

    def _place_image_page(
        self, layout: LayoutContext, image: EncodedImage, section_title: str
    ) -> None:
        layout.new_page(section_title, running=False)
        self._place_centered(layout, image)

    @staticmethod
    def _place_centered(layout: LayoutContext, image: EncodedImage) -> None:
        layout.place_image(image.data, image.fmt, image.width_pt, image.height_pt)

    # ── Placeholders ─────────────────────────────────────────────────

    @staticmethod
    def _reference_page(
        layout: LayoutContext, attachment: Attachment, section_title: str
    ) -> None:
        layout.new_page(section_title, running=False)
        layout.write_paragraph(f"Attached document: {attachment.filename}", bold=True)
        layout.write_paragraph(UNSUPPORTED_NOTICE, italic=True, color=GRAY)

    @staticmethod
    def _fallback_page(
        layout: LayoutContext, attachment: Attachment, section_title: str
    ) -> None:
        layout.new_page(section_title, running=False)
        layout.write_box(
            [f"File: {attachment.filename}", EMBED_FAILED_NOTICE],
            title=f"{section_title}: document could not be embedded",
            fill=WARNING_BG,
            stroke=WARNING_BORDER,
            text_color=WARNING_TEXT,
        )

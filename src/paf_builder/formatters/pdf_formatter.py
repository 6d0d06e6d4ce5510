"""PDF output formatter using reportlab.

Replays the positioned draw operations of an :class:`AssembledDocument` onto
a reportlab canvas. Layout decisions were all made during assembly; this
module only converts the top-left coordinate system to PDF space and paints.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any

from reportlab.lib.colors import HexColor
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.layout.document import (
    AssembledDocument,
    DrawOp,
    ImageOp,
    LineOp,
    Page,
    RectOp,
    TextOp,
)
from paf_builder.layout.styles import (
    GRAY,
    PAGE_NUMBER_FONT_SIZE,
    PAGE_NUMBER_OFFSET,
    font_variants,
)
from paf_builder.layout.text import sanitize_text

log = logging.getLogger(__name__)


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


class PDFFormatter:
    """Renders an :class:`AssembledDocument` to PDF bytes."""

    def __init__(self, config: PDFFormattingConfig | None = None) -> None:
        self._config = config or PDFFormattingConfig()

    # ── Public API ───────────────────────────────────────────────────

    def format(self, document: AssembledDocument, **kwargs: Any) -> bytes:
        """Render *document* to PDF bytes."""
        buffer = BytesIO()
        canvas = Canvas(buffer)
        canvas.setTitle(kwargs.get("title") or document.title or self._config.title)
        canvas.setAuthor(document.employer_name)
        canvas.setSubject(f"Public Access File generated {document.generated_on.isoformat()}")
        canvas.setCreator("paf-builder")
        for page in document.pages:
            self._draw_page(canvas, page)
            canvas.showPage()
        canvas.save()
        log.debug("Rendered %d page(s) to PDF", document.page_count)
        return buffer.getvalue()

    def format_to_file(self, document: AssembledDocument, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.format(document, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"

    # ── Page painting ────────────────────────────────────────────────

    def _draw_page(self, canvas: Canvas, page: Page) -> None:
        canvas.setPageSize((page.width, page.height))
        for op in page.ops:
            self._draw_op(canvas, op, page.height)
        if page.page_number_stamp:
            canvas.setFont(font_variants(self._config.font_family)[0], PAGE_NUMBER_FONT_SIZE)
            canvas.setFillColor(_hex(GRAY))
            canvas.drawCentredString(page.width / 2, PAGE_NUMBER_OFFSET, page.page_number_stamp)

    def _draw_op(self, canvas: Canvas, op: DrawOp, height: float) -> None:
        if isinstance(op, TextOp):
            canvas.setFont(op.font, op.size)
            canvas.setFillColor(_hex(op.color))
            text = sanitize_text(op.text)
            baseline = height - op.y
            if op.align == "center":
                canvas.drawCentredString(op.x, baseline, text)
            elif op.align == "right":
                canvas.drawRightString(op.x, baseline, text)
            else:
                canvas.drawString(op.x, baseline, text)
        elif isinstance(op, RectOp):
            if op.fill is None and op.stroke is None:
                return
            if op.fill is not None:
                canvas.setFillColor(_hex(op.fill))
            if op.stroke is not None:
                canvas.setStrokeColor(_hex(op.stroke))
                canvas.setLineWidth(op.line_width)
            bottom = height - op.y - op.height
            fill, stroke = int(op.fill is not None), int(op.stroke is not None)
            if op.radius:
                canvas.roundRect(op.x, bottom, op.width, op.height, op.radius, stroke=stroke, fill=fill)
            else:
                canvas.rect(op.x, bottom, op.width, op.height, stroke=stroke, fill=fill)
        elif isinstance(op, LineOp):
            canvas.setStrokeColor(_hex(op.color))
            canvas.setLineWidth(op.width)
            canvas.line(op.x1, height - op.y1, op.x2, height - op.y2)
        elif isinstance(op, ImageOp):
            canvas.drawImage(
                ImageReader(BytesIO(op.data)),
                op.x,
                height - op.y - op.height,
                width=op.width,
                height=op.height,
                mask="auto" if op.fmt == "PNG" else None,
            )
        else:
            raise TypeError(f"Unknown draw operation: {type(op).__name__}")

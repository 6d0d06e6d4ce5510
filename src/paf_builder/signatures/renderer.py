"""Signature blocks in full and compact layouts.

Each layout has an image-backed style (for signatories with a registered
signature image) and a stylized-text style. An image that cannot be decoded
is rendered in the text style, so a block is always produced.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.embedding.images import EncodedImage, encode_image
from paf_builder.layout.context import LayoutContext
from paf_builder.layout.styles import BLACK, BORDER_GRAY, GRAY, SIGNATURE_BOX_BG, SIGNATURE_NAVY
from paf_builder.signatures.models import ImageSignatory, Signatory, TextSignatory

log = logging.getLogger(__name__)

VERIFICATION_NOTE = "This document was digitally signed by an authorized representative."

_FULL_BOX_WIDTH = 300.0
_FULL_IMAGE_HEIGHT = 44.0
_COMPACT_IMAGE_HEIGHT = 34.0


class SignatureRenderer:
    """Draws signature blocks onto a :class:`LayoutContext`."""

    def __init__(
        self,
        config: PDFFormattingConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config or PDFFormattingConfig()
        self._clock = clock

    # ── Full block ───────────────────────────────────────────────────

    def render_full(
        self,
        layout: LayoutContext,
        signatory: Signatory,
        company_name: Optional[str] = None,
        include_date: bool = False,
    ) -> None:
        """Boxed "Digitally signed by" block followed by a verification note."""
        image = self._decode(signatory)
        detail_lines = self._detail_lines(signatory, company_name, include_date, full=True)
        mark_height = _FULL_IMAGE_HEIGHT if image else 26.0
        box_height = 16 + mark_height + 6 + len(detail_lines) * 13 + 8
        layout.ensure_space(box_height + 36)
        layout.skip(8)

        box_width = min(_FULL_BOX_WIDTH, layout.content_width)
        top = layout.y
        x = layout.margin
        layout.draw_rect(
            x, top, box_width, box_height, fill=SIGNATURE_BOX_BG, stroke=BORDER_GRAY, radius=4
        )
        layout.draw_text(x + 10, top + 12, "Digitally signed by:", size=8, color=GRAY)
        cursor = top + 16
        if image is not None:
            self._draw_signature_image(layout, image, x + 10, cursor, box_width - 20, mark_height)
        else:
            layout.draw_text(
                x + 10,
                cursor + 20,
                signatory.name,
                font=self._config.signature_font,
                size=18,
                color=SIGNATURE_NAVY,
            )
        cursor += mark_height + 6
        for index, line in enumerate(detail_lines):
            layout.draw_text(
                x + 10,
                cursor + 10,
                line,
                font=layout.bold_font if index == 0 else layout.font,
                size=10 if index == 0 else 9,
            )
            cursor += 13
        layout.y = top + box_height + 6
        layout.draw_text(
            layout.margin, layout.y + 8, VERIFICATION_NOTE, font=layout.italic_font, size=8, color=GRAY
        )
        layout.skip(20)

    # ── Compact block ────────────────────────────────────────────────

    def render_compact(
        self,
        layout: LayoutContext,
        signatory: Signatory,
        company_name: Optional[str] = None,
        include_date: bool = False,
    ) -> None:
        """Signature over a rule, then name, title, company and optional date."""
        image = self._decode(signatory)
        detail_lines = self._detail_lines(signatory, company_name, include_date, full=False)
        mark_height = _COMPACT_IMAGE_HEIGHT if image else 22.0
        block_height = mark_height + 6 + len(detail_lines) * 13 + 6
        layout.ensure_space(block_height + 10)
        layout.skip(6)

        x = layout.margin
        top = layout.y
        if image is not None:
            self._draw_signature_image(layout, image, x, top, 180.0, mark_height)
        else:
            layout.draw_text(
                x,
                top + 17,
                signatory.name,
                font=self._config.signature_font,
                size=15,
                color=SIGNATURE_NAVY,
            )
        rule_y = top + mark_height + 2
        layout.draw_line(x, rule_y, x + 200, rule_y, color=BLACK, width=0.5)
        cursor = rule_y + 4
        for index, line in enumerate(detail_lines):
            if index == 0:
                font = layout.bold_font
            elif index == 1:
                font = layout.italic_font
            else:
                font = layout.font
            layout.draw_text(x, cursor + 10, line, font=font, size=10 if index == 0 else 9)
            cursor += 13
        layout.y = cursor + 6

    # ── Helpers ──────────────────────────────────────────────────────

    def _decode(self, signatory: Signatory) -> EncodedImage | None:
        if isinstance(signatory, TextSignatory):
            return None
        if isinstance(signatory, ImageSignatory):
            try:
                return encode_image(signatory.image, "PNG")
            except Exception as exc:
                log.warning(
                    "Signature image for %s could not be decoded (%s); using text style",
                    signatory.id,
                    exc,
                )
                return None
        raise TypeError(f"Unknown signatory variant: {type(signatory).__name__}")

    def _detail_lines(
        self,
        signatory: Signatory,
        company_name: Optional[str],
        include_date: bool,
        *,
        full: bool,
    ) -> list[str]:
        lines = [signatory.name, signatory.title]
        if company_name:
            lines.append(company_name)
        if include_date:
            now = self._clock()
            if full:
                lines.append(f"Date: {now:%Y.%m.%d %H:%M:%S}")
            else:
                lines.append(f"Date: {now:%B} {now.day}, {now.year}")
        return lines

    @staticmethod
    def _draw_signature_image(
        layout: LayoutContext,
        image: EncodedImage,
        x: float,
        y: float,
        max_width: float,
        max_height: float,
    ) -> None:
        factor = min(max_width / image.width_pt, max_height / image.height_pt)
        layout.draw_image(
            x, y, image.width_pt * factor, image.height_pt * factor, image.data, image.fmt
        )

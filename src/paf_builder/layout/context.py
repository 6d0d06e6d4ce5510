"""Layout context: the single-writer cursor and page list for one assembly.

Every section writes through one :class:`LayoutContext`. The context owns
the vertical cursor, the list of pages, and the running header that is
repainted whenever a write forces a page break. Nothing here is idempotent:
replaying a section appends its pages a second time.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import inch

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.layout.document import ImageOp, LineOp, Page, RectOp, SectionMark, TextOp
from paf_builder.layout.styles import (
    BANNER_HEIGHT,
    BLACK,
    CONTENT_TOP_GAP,
    HEADER_BAND_HEIGHT,
    HEADER_FONT_SIZE,
    LIGHT_GRAY,
    LINE_SPACING,
    NAVY,
    WHITE,
    font_variants,
)
from paf_builder.layout.text import sanitize_text, truncate_to_width, wrap_text

log = logging.getLogger(__name__)

_PAGE_SIZES = {"letter": LETTER, "a4": A4}


class LayoutContext:
    """Cursor, page geometry and text primitives shared by every section."""

    def __init__(self, config: PDFFormattingConfig | None = None) -> None:
        self._config = config or PDFFormattingConfig()
        width, height = _PAGE_SIZES.get(self._config.page_size, LETTER)
        self.page_width: float = float(width)
        self.page_height: float = float(height)
        self.margin: float = self._config.margin_inches * inch
        self.body_size: float = float(self._config.body_font_size)
        self.heading_size: float = float(self._config.heading_font_size)
        regular, bold, italic, bold_italic = font_variants(self._config.font_family)
        self.font = regular
        self.bold_font = bold
        self.italic_font = italic
        self.bold_italic_font = bold_italic

        self.pages: list[Page] = []
        self.sections: list[SectionMark] = []
        self.y: float = self.margin
        self._running_header: Optional[str] = None

    # ── Geometry ─────────────────────────────────────────────────────

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def bottom(self) -> float:
        """Lowest y a block may reach before a page break is required."""
        return self.page_height - self.margin

    @property
    def content_top(self) -> float:
        return HEADER_BAND_HEIGHT + CONTENT_TOP_GAP

    @property
    def usable_height(self) -> float:
        return self.bottom - self.content_top

    @property
    def remaining(self) -> float:
        return self.bottom - self.y

    @property
    def page(self) -> Page:
        if not self.pages:
            self.new_page()
        return self.pages[-1]

    @property
    def running_header(self) -> Optional[str]:
        return self._running_header

    def line_height(self, size: float | None = None) -> float:
        return (size or self.body_size) * LINE_SPACING

    def font_for(self, bold: bool = False, italic: bool = False) -> str:
        if bold and italic:
            return self.bold_italic_font
        if bold:
            return self.bold_font
        if italic:
            return self.italic_font
        return self.font

    # ── Pagination ───────────────────────────────────────────────────

    def new_page(self, header: str | None = None, *, running: bool = True) -> Page:
        """Start a fresh page, optionally painting a header band on it."""
        page = Page(width=self.page_width, height=self.page_height)
        self.pages.append(page)
        self.y = self.margin
        if header is not None:
            self.write_header(header, running=running)
        return page

    def ensure_space(self, height: float) -> bool:
        """Break to a new page if *height* points will not fit below the cursor.

        The new page repeats the running header. Returns True when a break
        happened.
        """
        if not self.pages:
            self.new_page(self._running_header)
            return True
        if self.y + height <= self.bottom:
            return False
        log.debug("Page break before %.1fpt block on page %d", height, len(self.pages))
        self.new_page(self._running_header)
        return True

    def mark_section(self, key: str, title: str) -> None:
        first_page = len(self.pages) - 1 if self.pages else 0
        self.sections.append(SectionMark(key=key, title=title, first_page=first_page))

    def finalize(self) -> None:
        """Stamp ``Page i of N`` on every page."""
        total = len(self.pages)
        for index, page in enumerate(self.pages, start=1):
            page.page_number_stamp = f"Page {index} of {total}"

    # ── Low-level drawing ────────────────────────────────────────────

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        *,
        font: str | None = None,
        size: float | None = None,
        color: str = BLACK,
        align: str = "left",
    ) -> None:
        self.page.ops.append(
            TextOp(
                x=x,
                y=y,
                text=sanitize_text(text),
                font=font or self.font,
                size=size or self.body_size,
                color=color,
                align=align,
            )
        )

    def draw_rect(self, x: float, y: float, width: float, height: float, **style: Any) -> None:
        self.page.ops.append(RectOp(x=x, y=y, width=width, height=height, **style))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, **style: Any) -> None:
        self.page.ops.append(LineOp(x1=x1, y1=y1, x2=x2, y2=y2, **style))

    def draw_image(
        self, x: float, y: float, width: float, height: float, data: bytes, fmt: str
    ) -> None:
        self.page.ops.append(ImageOp(x=x, y=y, width=width, height=height, data=data, fmt=fmt))

    def skip(self, dy: float) -> None:
        self.y += dy

    def place_image(
        self,
        data: bytes,
        fmt: str,
        native_width: float,
        native_height: float,
        *,
        max_height: float | None = None,
    ) -> tuple[float, float]:
        """Center an image below the cursor, shrinking it to fit but never enlarging.

        Returns the placed (width, height).
        """
        box_height = self.bottom - self.y
        if max_height is not None:
            box_height = min(box_height, max_height)
        factor = min(self.content_width / native_width, box_height / native_height, 1.0)
        width, height = native_width * factor, native_height * factor
        self.draw_image((self.page_width - width) / 2, self.y, width, height, data, fmt)
        self.y += height + 6
        return width, height

    # ── Headers ──────────────────────────────────────────────────────

    def write_header(self, title: str, *, running: bool = True) -> None:
        """Paint the navy page header band and move the cursor below it."""
        if running:
            self._running_header = title
        page = self.page
        page.header = title
        self.draw_rect(0, 0, self.page_width, HEADER_BAND_HEIGHT, fill=NAVY)
        label = truncate_to_width(title, self.bold_font, HEADER_FONT_SIZE, self.content_width)
        self.draw_text(
            self.margin,
            HEADER_BAND_HEIGHT / 2 + HEADER_FONT_SIZE / 3,
            label,
            font=self.bold_font,
            size=HEADER_FONT_SIZE,
            color=WHITE,
        )
        self.y = self.content_top

    def write_section_banner(self, text: str) -> None:
        self.ensure_space(BANNER_HEIGHT + self.line_height())
        self.draw_rect(self.margin, self.y, self.content_width, BANNER_HEIGHT, fill=NAVY)
        self.draw_text(
            self.margin + 6,
            self.y + BANNER_HEIGHT / 2 + 4,
            truncate_to_width(text, self.bold_font, 11, self.content_width - 12),
            font=self.bold_font,
            size=11,
            color=WHITE,
        )
        self.y += BANNER_HEIGHT + 8

    def write_subheading(self, text: str, *, size: float = 11, color: str = NAVY) -> None:
        lines = wrap_text(text, self.bold_font, size, self.content_width)
        self.ensure_space(len(lines) * self.line_height(size) + self.line_height())
        for line in lines:
            self.draw_text(self.margin, self.y + size, line, font=self.bold_font, size=size, color=color)
            self.y += self.line_height(size)
        self.y += 4

    def write_centered_title(self, text: str, size: float = 14, *, color: str = NAVY) -> None:
        lines = wrap_text(text, self.bold_font, size, self.content_width)
        self.ensure_space(len(lines) * self.line_height(size))
        for line in lines:
            self.draw_text(
                self.page_width / 2,
                self.y + size,
                line,
                font=self.bold_font,
                size=size,
                color=color,
                align="center",
            )
            self.y += self.line_height(size)

    # ── Body text ────────────────────────────────────────────────────

    def write_paragraph(
        self,
        text: str,
        size: float | None = None,
        *,
        bold: bool = False,
        italic: bool = False,
        color: str = BLACK,
        indent: float = 0.0,
        spacing_after: float = 4.0,
    ) -> None:
        """Word-wrap *text* to the content width and write it at the cursor.

        A paragraph that fits on one page is kept together; a longer one flows
        line by line across page breaks.
        """
        size = size or self.body_size
        font = self.font_for(bold, italic)
        lines = wrap_text(text, font, size, self.content_width - indent)
        line_height = self.line_height(size)
        block = len(lines) * line_height
        if block <= self.usable_height:
            self.ensure_space(block)
        for line in lines:
            self.ensure_space(line_height)
            if line:
                self.draw_text(
                    self.margin + indent, self.y + size, line, font=font, size=size, color=color
                )
            self.y += line_height
        self.y += spacing_after

    def write_label_value(
        self,
        label: str,
        value: Any,
        label_width: float = 150.0,
        size: float | None = None,
    ) -> None:
        """Write a ``Label: value`` row; empty or missing values write nothing."""
        if value is None:
            return
        if isinstance(value, bool):
            value = "Yes" if value else "No"
        value = str(value)
        if not value.strip():
            return
        size = size or self.body_size
        line_height = self.line_height(size)
        label_lines = wrap_text(f"{label}:", self.bold_font, size, label_width - 6)
        value_lines = wrap_text(value, self.font, size, self.content_width - label_width)
        rows = max(len(label_lines), len(value_lines))
        self.ensure_space(rows * line_height)
        for i, line in enumerate(label_lines):
            self.draw_text(
                self.margin, self.y + size + i * line_height, line, font=self.bold_font, size=size
            )
        for i, line in enumerate(value_lines):
            self.draw_text(
                self.margin + label_width, self.y + size + i * line_height, line, size=size
            )
        self.y += rows * line_height

    def write_numbered(
        self,
        items: Iterable[str],
        *,
        indent: float = 8.0,
        size: float | None = None,
        bold_items: bool = False,
    ) -> None:
        self._write_list(
            items, lambda i: f"{i}.", indent=indent, size=size, bold_items=bold_items
        )

    def write_bullets(self, items: Iterable[str], *, indent: float = 8.0, size: float | None = None) -> None:
        self._write_list(items, lambda _i: "•", indent=indent, size=size)

    def _write_list(
        self,
        items: Iterable[str],
        marker: Any,
        *,
        indent: float,
        size: float | None,
        bold_items: bool = False,
    ) -> None:
        size = size or self.body_size
        line_height = self.line_height(size)
        text_x = self.margin + indent + 16
        font = self.bold_font if bold_items else self.font
        for number, item in enumerate(items, start=1):
            lines = wrap_text(item, font, size, self.margin + self.content_width - text_x)
            self.ensure_space(len(lines) * line_height)
            self.draw_text(
                self.margin + indent, self.y + size, marker(number), font=self.bold_font, size=size
            )
            for line in lines:
                self.draw_text(text_x, self.y + size, line, font=font, size=size)
                self.y += line_height
            self.y += 3

    def write_titled_items(self, items: Sequence[tuple[str, str]], *, size: float | None = None) -> None:
        """Numbered ``Title:`` lines each followed by an indented description."""
        size = size or self.body_size
        line_height = self.line_height(size)
        for number, (title, description) in enumerate(items, start=1):
            lines = wrap_text(description, self.font, size, self.content_width - 12)
            self.ensure_space((len(lines) + 1) * line_height)
            self.draw_text(
                self.margin, self.y + size, f"{number}. {title}:", font=self.bold_font, size=size
            )
            self.y += line_height
            for line in lines:
                self.draw_text(self.margin + 12, self.y + size, line, size=size)
                self.y += line_height
            self.y += 4

    # ── Blocks ───────────────────────────────────────────────────────

    def write_box(
        self,
        lines: Sequence[str],
        *,
        fill: Optional[str] = LIGHT_GRAY,
        stroke: Optional[str] = None,
        text_color: str = BLACK,
        bold: bool = False,
        size: float | None = None,
        padding: float = 8.0,
        title: str | None = None,
    ) -> None:
        """Write wrapped lines inside a filled (optionally bordered) box."""
        size = size or self.body_size
        line_height = self.line_height(size)
        font = self.font_for(bold=bold)
        inner_width = self.content_width - 2 * padding
        wrapped: list[tuple[str, str]] = []
        if title:
            wrapped.extend((line, self.bold_font) for line in wrap_text(title, self.bold_font, size, inner_width))
        for line in lines:
            wrapped.extend((part, font) for part in wrap_text(line, font, size, inner_width))
        height = len(wrapped) * line_height + 2 * padding
        self.ensure_space(height)
        self.draw_rect(self.margin, self.y, self.content_width, height, fill=fill, stroke=stroke)
        cursor = self.y + padding
        for line, line_font in wrapped:
            self.draw_text(
                self.margin + padding,
                cursor + size,
                line,
                font=line_font,
                size=size,
                color=text_color,
            )
            cursor += line_height
        self.y += height + 6

    def write_table(
        self,
        rows: Sequence[Sequence[str]],
        col_widths: Sequence[float],
        *,
        header: bool = True,
        zebra: bool = False,
        size: float | None = None,
    ) -> None:
        """Write a simple grid; column widths are fractions of the content width."""
        size = size or self.body_size
        line_height = self.line_height(size)
        widths = [fraction * self.content_width for fraction in col_widths]
        for row_index, row in enumerate(rows):
            is_header = header and row_index == 0
            font = self.bold_font if is_header else self.font
            cells = [
                wrap_text(str(cell), font, size, width - 6) for cell, width in zip(row, widths)
            ]
            height = max(len(cell) for cell in cells) * line_height + 4
            self.ensure_space(height)
            if zebra and row_index % 2 == 0:
                self.draw_rect(self.margin, self.y, self.content_width, height, fill=LIGHT_GRAY)
            x = self.margin
            for cell, width in zip(cells, widths):
                for i, line in enumerate(cell):
                    self.draw_text(x + 3, self.y + 2 + size + i * line_height, line, font=font, size=size)
                x += width
            self.y += height

    def write_signature_line(self, label: str, *, width: float = 220.0) -> None:
        """A blank line to sign on with a caption below it."""
        self.ensure_space(40)
        self.y += 24
        self.draw_line(self.margin, self.y, self.margin + width, self.y, color=BLACK, width=0.75)
        self.y += 4
        self.draw_text(self.margin, self.y + self.body_size, label)
        self.y += self.line_height() + 8

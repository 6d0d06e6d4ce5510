"""Assembled document model: pages of positioned draw operations.

Coordinates are PDF points with a top-left origin; ``y`` grows downward.
Text operations store the baseline position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from paf_builder.layout.styles import BLACK


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: str = BLACK
    align: str = "left"


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    radius: float = 0.0
    line_width: float = 0.5


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str = BLACK
    width: float = 0.5


@dataclass(frozen=True)
class ImageOp:
    x: float
    y: float
    width: float
    height: float
    data: bytes = field(repr=False)
    fmt: str = "PNG"


DrawOp = Union[TextOp, RectOp, LineOp, ImageOp]


@dataclass
class Page:
    """A single output page and the operations drawn on it."""

    width: float
    height: float
    header: Optional[str] = None
    ops: list[DrawOp] = field(default_factory=list)
    page_number_stamp: Optional[str] = None

    def texts(self) -> list[str]:
        lines = [op.text for op in self.ops if isinstance(op, TextOp)]
        if self.page_number_stamp:
            lines.append(self.page_number_stamp)
        return lines

    def text(self) -> str:
        return "\n".join(self.texts())

    @property
    def images(self) -> list[ImageOp]:
        return [op for op in self.ops if isinstance(op, ImageOp)]


@dataclass(frozen=True)
class SectionMark:
    """Where a catalogue section (or sub-report) begins in the page list."""

    key: str
    title: str
    first_page: int


@dataclass
class AssembledDocument:
    """The engine's output: ordered pages plus the section index."""

    pages: list[Page]
    sections: list[SectionMark]
    title: str
    employer_name: str
    generated_on: date

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def section_keys(self) -> list[str]:
        return [mark.key for mark in self.sections]

    def has_section(self, key: str) -> bool:
        return key in self.section_keys

    def section_pages(self, key: str) -> list[Page]:
        """Pages from the start of *key* up to the next section that starts later."""
        for index, mark in enumerate(self.sections):
            if mark.key != key:
                continue
            end = len(self.pages)
            for later in self.sections[index + 1 :]:
                if later.first_page > mark.first_page:
                    end = later.first_page
                    break
            return self.pages[mark.first_page : end]
        raise KeyError(f"Section {key!r} not in document")

    def section_text(self, key: str) -> str:
        return "\n".join(page.text() for page in self.section_pages(key))

    def text(self) -> str:
        return "\n".join(page.text() for page in self.pages)

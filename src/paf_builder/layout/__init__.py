"""Page layout primitives and the assembled document model."""

from __future__ import annotations

from paf_builder.layout.context import LayoutContext
from paf_builder.layout.document import (
    AssembledDocument,
    ImageOp,
    LineOp,
    Page,
    RectOp,
    SectionMark,
    TextOp,
)

__all__ = [
    "AssembledDocument",
    "ImageOp",
    "LayoutContext",
    "LineOp",
    "Page",
    "RectOp",
    "SectionMark",
    "TextOp",
]

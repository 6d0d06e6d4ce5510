"""Centralized style constants for PAF pages.

Colors are plain hex strings so the renderer can convert them to whatever
color object the drawing library needs (e.g. reportlab ``HexColor``).
"""

from __future__ import annotations

# ── Palette ──────────────────────────────────────────────────────────

NAVY = "#0F2942"
SIGNATURE_NAVY = "#003366"
BLACK = "#000000"
WHITE = "#FFFFFF"
GRAY = "#808080"
LIGHT_GRAY = "#F0F0F0"
BORDER_GRAY = "#C8C8C8"
SIGNATURE_BOX_BG = "#FCFCFC"

SUCCESS = "#228B22"
ERROR = "#C81E1E"

CONFIRM_BG = "#DCF5DC"
CONFIRM_BORDER = "#228B22"
CONFIRM_TEXT = "#006400"

WARNING_BG = "#FDECEA"
WARNING_BORDER = "#C81E1E"
WARNING_TEXT = "#B91C1C"

# ── Geometry (points) ────────────────────────────────────────────────

HEADER_BAND_HEIGHT = 30.0
HEADER_FONT_SIZE = 10
CONTENT_TOP_GAP = 22.0
BANNER_HEIGHT = 20.0
LINE_SPACING = 1.4
PAGE_NUMBER_FONT_SIZE = 8
PAGE_NUMBER_OFFSET = 18.0

# ── Font families ────────────────────────────────────────────────────
# Standard PDF Type 1 families: (regular, bold, italic, bold-italic).

FONT_VARIANTS: dict[str, tuple[str, str, str, str]] = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Times-Roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}


def font_variants(family: str) -> tuple[str, str, str, str]:
    """Return the four face names for *family*, guessing for registered TTF families."""
    if family in FONT_VARIANTS:
        return FONT_VARIANTS[family]
    return (family, f"{family}-Bold", f"{family}-Italic", f"{family}-BoldItalic")

"""Text sanitization and word-wrapping against reportlab font metrics."""

from __future__ import annotations

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

# ── Unicode sanitization ────────────────────────────────────────────
# The standard Type 1 fonts only carry WinAnsi glyphs, so anything outside
# that set is folded to an ASCII look-alike before measuring or drawing.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u2015": "-",       # horizontal bar
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u200a": " ",       # hair space
    # Quotes
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    # Misc
    "\u2026": "...",
    "\u2190": "<-",      # leftwards arrow (selected wage level marker)
    "\u2192": "->",
    "\u2264": "<=",
    "\u2265": ">=",
    "\u2713": "x",       # check mark
}


def sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def wrap_text(text: str, font: str, size: float, width: float) -> list[str]:
    """Split *text* into lines no wider than *width* points.

    Explicit newlines are kept as line breaks; a blank line yields an empty
    string so paragraph spacing survives.
    """
    lines: list[str] = []
    for raw in sanitize_text(text).split("\n"):
        if not raw.strip():
            lines.append("")
            continue
        lines.extend(simpleSplit(raw, font, size, width) or [""])
    return lines


def text_width(text: str, font: str, size: float) -> float:
    return stringWidth(sanitize_text(text), font, size)


def truncate_to_width(text: str, font: str, size: float, width: float) -> str:
    """Shorten *text* with an ellipsis until it fits on one line."""
    text = sanitize_text(text)
    if stringWidth(text, font, size) <= width:
        return text
    while text and stringWidth(text + "...", font, size) > width:
        text = text[:-1]
    return text.rstrip() + "..."

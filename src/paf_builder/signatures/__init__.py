"""Signatory lookup and signature block rendering."""

from __future__ import annotations

from paf_builder.signatures.directory import (
    FileSignatoryDirectory,
    ISignatoryDirectory,
    MemorySignatoryDirectory,
)
from paf_builder.signatures.models import ImageSignatory, TextSignatory
from paf_builder.signatures.resolution import resolve_signatory

__all__ = [
    "FileSignatoryDirectory",
    "ISignatoryDirectory",
    "ImageSignatory",
    "MemorySignatoryDirectory",
    "TextSignatory",
    "resolve_signatory",
]

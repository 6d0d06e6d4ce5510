"""LCA extraction: scan results and how they fold into case data."""

from __future__ import annotations

from paf_builder.extraction.merge import (
    apply_scan_to_supporting_docs,
    merge_scan_into_draft,
    scan_attachment,
)
from paf_builder.extraction.models import LCAScanResult
from paf_builder.extraction.protocols import ILCAScanner

__all__ = [
    "ILCAScanner",
    "LCAScanResult",
    "apply_scan_to_supporting_docs",
    "merge_scan_into_draft",
    "scan_attachment",
]

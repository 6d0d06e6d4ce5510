"""Renderers for assembled documents."""

from __future__ import annotations

from paf_builder.formatters.pdf_formatter import PDFFormatter
from paf_builder.formatters.protocols import IOutputFormatter

__all__ = ["IOutputFormatter", "PDFFormatter"]

"""Tests that formatter implementations satisfy the IOutputFormatter protocol."""

from __future__ import annotations

from paf_builder import formatters
from paf_builder.formatters.pdf_formatter import PDFFormatter
from paf_builder.formatters.protocols import IOutputFormatter


class TestPDFFormatterSatisfiesProtocol:
    def test_isinstance_check(self) -> None:
        assert isinstance(PDFFormatter(), IOutputFormatter)

    def test_package_exports(self) -> None:
        assert formatters.PDFFormatter is PDFFormatter
        assert formatters.IOutputFormatter is IOutputFormatter

    def test_plain_object_is_not_a_formatter(self) -> None:
        assert not isinstance(object(), IOutputFormatter)

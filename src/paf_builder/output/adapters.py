"""Output adapters: blob, file and print hand-off for an assembled document."""

from __future__ import annotations

import logging
import re
import tempfile
import webbrowser
from pathlib import Path
from typing import Callable, Optional

from paf_builder.core.config import PDFFormattingConfig
from paf_builder.exceptions import OutputError
from paf_builder.formatters.pdf_formatter import PDFFormatter
from paf_builder.layout.document import AssembledDocument

log = logging.getLogger(__name__)

Launcher = Callable[[str], object]


def default_filename(document: AssembledDocument) -> str:
    """``PAF_<employer with non-alphanumerics as underscores>_<YYYYMMDD>.pdf``."""
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", document.employer_name)
    return f"PAF_{safe_name}_{document.generated_on:%Y%m%d}.pdf"


def to_blob(document: AssembledDocument, config: PDFFormattingConfig | None = None) -> bytes:
    """Render the document to PDF bytes."""
    return PDFFormatter(config).format(document)


def save_to_file(
    document: AssembledDocument,
    filename: Optional[str] = None,
    directory: Path | str = ".",
    config: PDFFormattingConfig | None = None,
) -> Path:
    """Write the PDF into *directory* and return its path."""
    target = Path(directory) / (filename or default_filename(document))
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        PDFFormatter(config).format_to_file(document, target)
    except OSError as exc:
        raise OutputError(f"Could not write {target}: {exc}") from exc
    log.info("Saved PAF to %s (%d pages)", target, document.page_count)
    return target


def open_for_print(
    document: AssembledDocument,
    launcher: Launcher = webbrowser.open,
    config: PDFFormattingConfig | None = None,
) -> Path:
    """Write the PDF to a temporary file and hand its URI to *launcher* for printing."""
    try:
        with tempfile.NamedTemporaryFile(
            prefix="paf_", suffix=".pdf", delete=False
        ) as handle:
            handle.write(to_blob(document, config))
            path = Path(handle.name)
    except OSError as exc:
        raise OutputError(f"Could not write temporary PDF: {exc}") from exc
    try:
        launcher(path.resolve().as_uri())
    except Exception as exc:
        raise OutputError(f"Could not open {path} for printing: {exc}") from exc
    log.info("Opened %s for printing", path)
    return path

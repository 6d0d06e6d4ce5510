"""What a renderer of an assembled Public Access File has to provide."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from paf_builder.layout.document import AssembledDocument


@runtime_checkable
class IOutputFormatter(Protocol):
    """Turns the page-ordered draw ops of a document into a file format."""

    @property
    def content_type(self) -> str: ...

    def format(self, document: AssembledDocument, **options: Any) -> bytes:
        """Encode every page of *document*, stamps included."""
        ...

    def format_to_file(self, document: AssembledDocument, path: Path, **options: Any) -> Path:
        """Encode *document* to *path*, creating parent directories; returns *path*."""
        ...


__all__ = ["IOutputFormatter"]

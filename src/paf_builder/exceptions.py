"""Exception hierarchy for paf-builder."""

from __future__ import annotations


class PAFError(Exception):
    """Base exception for all paf-builder errors."""


class StructuralError(PAFError):
    """Raised when a case record is missing data the engine cannot default."""


class MissingRecordError(StructuralError):
    """One or more required sub-records are absent from the case record."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Case record is missing required sub-record(s): " + ", ".join(self.missing)
        )


class EmbeddingError(PAFError):
    """Raised internally when an attachment cannot be rasterized."""


class SignatoryLookupError(PAFError):
    """Raised by a signatory directory backend when a lookup fails."""


class AssemblyError(PAFError, ValueError):
    """Raised when the section plan itself is unusable, e.g. an unknown toggle key."""


class SectionRenderError(AssemblyError):
    """A planned section failed while writing its pages; the document is discarded."""

    def __init__(self, section: str, cause: BaseException) -> None:
        self.section = section
        super().__init__(f"Section {section!r} could not be rendered: {cause}")


class OutputError(PAFError):
    """Raised when a finished document cannot be written or launched."""


class ConfigurationError(PAFError):
    """Raised when settings or rule files are malformed."""


__all__ = [
    "PAFError",
    "StructuralError",
    "MissingRecordError",
    "EmbeddingError",
    "SignatoryLookupError",
    "AssemblyError",
    "SectionRenderError",
    "OutputError",
    "ConfigurationError",
]

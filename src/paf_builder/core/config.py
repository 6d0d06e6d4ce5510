"""Nested pydantic-settings configuration for the assembly engine.

Each sub-config reads its own ``PAF_<GROUP>_*`` env vars::

    export PAF_PDF_PAGE_SIZE=a4
    export PAF_EMBED_RENDER_SCALE=3
    export PAF_SIGNATORY_DEFAULT_ID=jane-doe
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class PDFFormattingConfig(BaseSettings):
    """Page geometry and typography.

    Env vars use ``PAF_PDF_`` prefix.
    """

    model_config = {"env_prefix": "PAF_PDF_"}

    page_size: Literal["letter", "a4"] = "letter"
    margin_inches: float = Field(default=0.5, gt=0.0, le=2.0)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=24)
    heading_font_size: int = Field(default=14, ge=8, le=36)
    signature_font: str = "Times-BoldItalic"
    title: str = "Public Access File"


class EmbeddingConfig(BaseSettings):
    """Attachment rasterization settings.

    Env vars use ``PAF_EMBED_`` prefix.
    """

    model_config = {"env_prefix": "PAF_EMBED_"}

    render_scale: float = Field(default=2.0, gt=0.0, le=6.0)
    jpeg_quality: int = Field(default=90, ge=10, le=100)
    max_pages: int = Field(default=200, ge=1)
    default_image_dpi: float = Field(default=96.0, gt=0.0)


class SignatoryConfig(BaseSettings):
    """Signatory resolution defaults.

    Env vars use ``PAF_SIGNATORY_`` prefix.
    """

    model_config = {"env_prefix": "PAF_SIGNATORY_"}

    default_id: Optional[str] = None
    fallback_name: str = "Authorized Signatory"
    fallback_title: str = "Authorized Representative"
    directory_path: Optional[Path] = None


class ValidationConfig(BaseSettings):
    """Pre-assembly rule checks.

    Env vars use ``PAF_VALIDATION_`` prefix. When ``rules_path`` is unset the
    built-in ruleset is used.
    """

    model_config = {"env_prefix": "PAF_VALIDATION_"}

    enabled: bool = True
    rules_path: Optional[Path] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``PAF_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "PAF_OBSERVABILITY_"}

    log_level: str = "INFO"
    log_format: str = "auto"  # auto, console or json


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    pdf: PDFFormattingConfig = Field(default_factory=PDFFormattingConfig)
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    signatory: SignatoryConfig = Field(default_factory=SignatoryConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

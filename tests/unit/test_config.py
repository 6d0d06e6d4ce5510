"""Tests for pydantic-settings configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from paf_builder.core.config import (
    AppSettings,
    EmbeddingConfig,
    PDFFormattingConfig,
    SignatoryConfig,
    ValidationConfig,
)


class TestDefaults:
    def test_pdf_defaults(self) -> None:
        config = PDFFormattingConfig()
        assert config.page_size == "letter"
        assert config.margin_inches == 0.5
        assert config.font_family == "Helvetica"

    def test_app_settings_aggregates_sub_configs(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.embedding, EmbeddingConfig)
        assert isinstance(settings.signatory, SignatoryConfig)
        assert settings.validation.enabled is True
        assert settings.validation.rules_path is None

    def test_sub_configs_are_not_shared(self) -> None:
        first, second = AppSettings(), AppSettings()
        first.signatory.default_id = "jane"
        assert second.signatory.default_id is None


class TestEnvOverrides:
    def test_pdf_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAF_PDF_PAGE_SIZE", "a4")
        monkeypatch.setenv("PAF_PDF_BODY_FONT_SIZE", "11")
        config = PDFFormattingConfig()
        assert config.page_size == "a4"
        assert config.body_font_size == 11

    def test_nested_settings_read_env_at_construction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAF_SIGNATORY_DEFAULT_ID", "jane-doe")
        monkeypatch.setenv("PAF_VALIDATION_RULES_PATH", "/tmp/rules.json")
        settings = AppSettings()
        assert settings.signatory.default_id == "jane-doe"
        assert settings.validation.rules_path == Path("/tmp/rules.json")

    def test_embed_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAF_EMBED_RENDER_SCALE", "3")
        assert EmbeddingConfig().render_scale == 3.0


class TestBounds:
    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValidationError):
            PDFFormattingConfig(page_size="legal")  # type: ignore[arg-type]

    def test_margin_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PDFFormattingConfig(margin_inches=0)

    def test_jpeg_quality_bounds(self) -> None:
        with pytest.raises(ValidationError):
            EmbeddingConfig(jpeg_quality=5)

    def test_validation_can_be_disabled(self) -> None:
        assert ValidationConfig(enabled=False).enabled is False

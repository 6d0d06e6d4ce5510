"""Tests for the paf CLI commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from paf_builder import composer
from paf_builder.cli.main import app
from paf_builder.sections import SectionName

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    package = logging.getLogger("paf_builder")
    package_level = package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)


@pytest.fixture
def case_file(tmp_path: Path, case) -> Path:
    path = tmp_path / "case.json"
    path.write_text(case.model_dump_json())
    return path


@pytest.fixture
def supporting_file(tmp_path: Path) -> Path:
    path = tmp_path / "supporting.json"
    path.write_text(
        json.dumps(
            {
                "comparable_workers_count": 3,
                "comparable_wage_min": 88000,
                "comparable_wage_max": 98000,
            }
        )
    )
    return path


class TestBuildCommand:
    def test_writes_pdf(self, tmp_path: Path, case_file: Path, supporting_file: Path) -> None:
        output = tmp_path / "out" / "paf.pdf"
        result = runner.invoke(
            app, ["build", str(case_file), "--supporting", str(supporting_file), "-o", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert "Public Access File saved" in result.output
        assert output.read_bytes().startswith(b"%PDF")

    def test_embeds_lca_file(
        self, tmp_path: Path, case_file: Path, supporting_file: Path, pdf_bytes: bytes
    ) -> None:
        lca = tmp_path / "lca.pdf"
        lca.write_bytes(pdf_bytes)
        output = tmp_path / "paf.pdf"
        result = runner.invoke(
            app,
            [
                "build",
                str(case_file),
                "--supporting",
                str(supporting_file),
                "--lca",
                str(lca),
                "-o",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_validation_errors_stop_build(self, tmp_path: Path, employer) -> None:
        case_file = tmp_path / "case.json"
        case_file.write_text(json.dumps({"employer": employer.model_dump(mode="json")}))
        output = tmp_path / "paf.pdf"
        result = runner.invoke(app, ["build", str(case_file), "-o", str(output)])
        assert result.exit_code == 1
        assert "ST-001" in result.output
        assert not output.exists()

    def test_skip_validation_still_reports_missing_records(
        self, tmp_path: Path, employer
    ) -> None:
        case_file = tmp_path / "case.json"
        case_file.write_text(json.dumps({"employer": employer.model_dump(mode="json")}))
        result = runner.invoke(
            app, ["build", str(case_file), "--skip-validation", "-o", str(tmp_path / "paf.pdf")]
        )
        assert result.exit_code == 1
        assert "Failed to generate" in result.output

    def test_section_failure_reported(
        self, tmp_path: Path, case_file: Path, supporting_file: Path, monkeypatch
    ) -> None:
        def broken(ctx):
            raise RuntimeError("font table exhausted")

        monkeypatch.setitem(composer.SECTION_RENDERERS, SectionName.BENEFITS, broken)
        result = runner.invoke(
            app,
            ["build", str(case_file), "--supporting", str(supporting_file), "-o", str(tmp_path / "p.pdf")],
        )
        assert result.exit_code == 1
        assert "Failed to generate" in result.output
        assert "benefits" in result.output
        assert "try again" in result.output
        assert not (tmp_path / "p.pdf").exists()

    def test_unexpected_error_while_saving(
        self, tmp_path: Path, case_file: Path, supporting_file: Path, monkeypatch
    ) -> None:
        def disk_full(*args, **kwargs):
            raise RuntimeError("disk full")

        monkeypatch.setattr("paf_builder.cli.main.save_to_file", disk_full)
        result = runner.invoke(app, ["build", str(case_file), "--supporting", str(supporting_file)])
        assert result.exit_code == 1
        assert "Failed to generate" in result.output
        assert "disk full" in result.output
        assert not isinstance(result.exception, RuntimeError)

    def test_unknown_disable_value(self, tmp_path: Path, case_file: Path) -> None:
        result = runner.invoke(
            app, ["build", str(case_file), "--disable", "appendix", "-o", str(tmp_path / "x.pdf")]
        )
        assert result.exit_code != 0

    def test_unreadable_case_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["build", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestValidateCommand:
    def test_clean_case(self, case_file: Path, supporting_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(case_file), "--supporting", str(supporting_file)])
        assert result.exit_code == 0, result.output
        assert "No validation issues found" in result.output

    def test_warnings_only_exit_zero(self, case_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(case_file)])
        assert result.exit_code == 0
        assert "SD-001" in result.output

    def test_errors_exit_one(self, tmp_path: Path, employer) -> None:
        case_file = tmp_path / "case.json"
        case_file.write_text(json.dumps({"employer": employer.model_dump(mode="json")}))
        result = runner.invoke(app, ["validate", str(case_file)])
        assert result.exit_code == 1
        assert "ST-001" in result.output

    def test_custom_rules_file(self, tmp_path: Path, case_file: Path) -> None:
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"version": 2, "rules": []}))
        result = runner.invoke(app, ["validate", str(case_file), "--rules", str(rules)])
        assert result.exit_code == 0
        assert "No validation issues found" in result.output

    def test_missing_rules_file(self, tmp_path: Path, case_file: Path) -> None:
        result = runner.invoke(
            app, ["validate", str(case_file), "--rules", str(tmp_path / "none.json")]
        )
        assert result.exit_code == 1
        assert "Could not load validation rules" in result.output

    def test_disabled_by_environment(self, case_file: Path, monkeypatch) -> None:
        monkeypatch.setenv("PAF_VALIDATION_ENABLED", "false")
        result = runner.invoke(app, ["validate", str(case_file)])
        assert result.exit_code == 0
        assert "Validation is disabled" in result.output


class TestSectionsCommand:
    def test_lists_planned_sections(self, case_file: Path) -> None:
        result = runner.invoke(app, ["sections", str(case_file)])
        assert result.exit_code == 0, result.output
        assert "cover" in result.output
        assert "worker_receipt" in result.output
        assert "Omitted: recruitment_summary" in result.output

    def test_dependent_non_exempt_includes_recruitment(
        self, tmp_path: Path, case
    ) -> None:
        case_file = tmp_path / "case.json"
        case_file.write_text(case.model_copy(update={"is_h1b_dependent": True}).model_dump_json())
        supporting = tmp_path / "supporting.json"
        supporting.write_text(json.dumps({"exemption_type": "none"}))
        result = runner.invoke(app, ["sections", str(case_file), "--supporting", str(supporting)])
        assert result.exit_code == 0
        assert "recruitment_summary" in result.output
        assert "Omitted" not in result.output

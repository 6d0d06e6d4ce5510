"""CLI for paf-builder: build / validate / sections commands."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from paf_builder.composer import assemble
from paf_builder.core.config import AppSettings
from paf_builder.exceptions import PAFError
from paf_builder.hooks.logging_config import case_context, setup_logging
from paf_builder.models import Attachment, CaseRecord, SupportingDocs
from paf_builder.output import save_to_file
from paf_builder.sections import SECTION_TITLES, SectionName, plan_sections
from paf_builder.signatures.directory import FileSignatoryDirectory
from paf_builder.validation import IssueSeverity, ValidationReport, create_rules_engine

log = logging.getLogger(__name__)

app = typer.Typer(name="paf", help="Assemble H-1B Public Access File PDFs")
console = Console()

_SEVERITY_STYLES = {
    IssueSeverity.ERROR: "bold red",
    IssueSeverity.WARNING: "yellow",
    IssueSeverity.INFO: "cyan",
}


def _load_case(case_file: Path) -> CaseRecord:
    """Load a case record from a JSON file."""
    try:
        return CaseRecord.model_validate_json(case_file.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise typer.BadParameter(f"Could not load case record from {case_file}: {exc}") from exc


def _load_supporting(supporting_file: Optional[Path], **attachments: Optional[Path]) -> SupportingDocs:
    """Load supporting documents, attaching any files given on the command line."""
    raw: dict = {}
    if supporting_file is not None:
        try:
            raw = json.loads(supporting_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise typer.BadParameter(f"Could not read {supporting_file}: {exc}") from exc
    for field, path in attachments.items():
        if path is not None:
            raw[field] = Attachment.from_path(path)
    try:
        return SupportingDocs.model_validate(raw)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid supporting documents: {exc}") from exc


def _report_build_failure(exc: BaseException) -> None:
    console.print(f"[red]Failed to generate the Public Access File: {exc}[/red]")
    console.print("Please check the inputs and try again.")


def _print_report(report: ValidationReport) -> None:
    if not report.issues:
        console.print("[green]No validation issues found[/green]")
        return

    table = Table(title=f"Validation Issues ({report.total_issues})")
    table.add_column("Rule", style="cyan")
    table.add_column("Severity")
    table.add_column("Field")
    table.add_column("Message", max_width=70)
    for issue in report.issues:
        style = _SEVERITY_STYLES.get(issue.severity, "")
        table.add_row(
            issue.rule_id,
            f"[{style}]{issue.severity.value}[/{style}]" if style else issue.severity.value,
            issue.field_path,
            issue.message,
        )
    console.print(table)
    console.print(
        f"{report.error_count} error(s), {report.warning_count} warning(s), {report.info_count} info"
    )


@app.command()
def build(
    case_file: Path = typer.Argument(..., help="JSON file with the LCA case record"),
    supporting: Optional[Path] = typer.Option(None, "--supporting", help="JSON file with supporting documents"),
    lca: Optional[Path] = typer.Option(None, "--lca", help="Certified LCA (PDF or image)"),
    posting_proof: Optional[Path] = typer.Option(None, "--posting-proof", help="Proof of notice posting"),
    benefits: Optional[Path] = typer.Option(None, "--benefits", help="Benefits documentation"),
    signatories: Optional[Path] = typer.Option(None, "--signatories", help="JSON signatory directory"),
    signatory_id: Optional[str] = typer.Option(None, "--signatory-id", help="Default signatory ID"),
    disable: list[str] = typer.Option([], "--disable", help="Section to leave out (repeatable)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PDF path"),
    skip_validation: bool = typer.Option(False, "--skip-validation", help="Build even if validation fails"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a case and assemble its Public Access File."""
    settings = AppSettings()
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)

    if signatories is not None:
        settings.signatory.directory_path = signatories
    if signatory_id is not None:
        settings.signatory.default_id = signatory_id
    try:
        toggles = {SectionName(name): False for name in disable}
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--disable") from exc

    case = _load_case(case_file)
    docs = _load_supporting(
        supporting,
        lca_file=lca,
        notice_posting_proof=posting_proof,
        benefits_file=benefits,
    )

    engine = create_rules_engine(settings)
    if engine is not None:
        try:
            report = engine.validate(case, docs)
        except (FileNotFoundError, PAFError) as exc:
            console.print(f"[red]Could not load validation rules: {exc}[/red]")
            raise typer.Exit(code=1) from exc
        _print_report(report)
        if report.has_errors() and not skip_validation:
            console.print("[red]Validation failed; fix the errors above or pass --skip-validation[/red]")
            raise typer.Exit(code=1)

    directory = None
    if settings.signatory.directory_path is not None:
        directory = FileSignatoryDirectory(settings.signatory.directory_path)

    try:
        with case_context(docs.lca_case_number or case.case_number):
            document = asyncio.run(
                assemble(case, docs, toggles, directory=directory, settings=settings)
            )
            if output is not None:
                path = save_to_file(document, output.name, output.parent, config=settings.pdf)
            else:
                path = save_to_file(document, config=settings.pdf)
    except PAFError as exc:
        _report_build_failure(exc)
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        log.exception("Unexpected failure while building the Public Access File")
        _report_build_failure(exc)
        raise typer.Exit(code=1) from exc

    console.print(
        f"[green]Public Access File saved to {path}[/green] "
        f"({document.page_count} pages, {len(document.sections)} sections)"
    )


@app.command()
def validate(
    case_file: Path = typer.Argument(..., help="JSON file with the LCA case record"),
    supporting: Optional[Path] = typer.Option(None, "--supporting", help="JSON file with supporting documents"),
    rules: Optional[Path] = typer.Option(None, "--rules", help="JSON rules file replacing the built-in rules"),
) -> None:
    """Check a case against the validation rules without building a PDF."""
    settings = AppSettings()
    setup_logging(settings.observability)
    if rules is not None:
        settings.validation.rules_path = rules

    case = _load_case(case_file)
    docs = _load_supporting(supporting)
    engine = create_rules_engine(settings)
    if engine is None:
        console.print("[yellow]Validation is disabled (PAF_VALIDATION_ENABLED=false)[/yellow]")
        return

    try:
        report = engine.validate(case, docs)
    except (FileNotFoundError, PAFError) as exc:
        console.print(f"[red]Could not load validation rules: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    _print_report(report)
    if report.has_errors():
        raise typer.Exit(code=1)


@app.command()
def sections(
    case_file: Path = typer.Argument(..., help="JSON file with the LCA case record"),
    supporting: Optional[Path] = typer.Option(None, "--supporting", help="JSON file with supporting documents"),
) -> None:
    """List the sections that would be rendered for a case, in order."""
    case = _load_case(case_file)
    docs = _load_supporting(supporting)
    planned = plan_sections(case, docs)

    table = Table(title="Planned Sections")
    table.add_column("#", justify="right")
    table.add_column("Section", style="cyan")
    table.add_column("Title", style="green")
    for number, section in enumerate(planned, start=1):
        table.add_row(str(number), section.value, SECTION_TITLES[section])
    console.print(table)

    omitted = [s.value for s in SectionName if s not in planned]
    if omitted:
        console.print(f"Omitted: {', '.join(omitted)}")


if __name__ == "__main__":
    app()

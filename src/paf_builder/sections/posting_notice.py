"""LCA posting documentation: display certification, proof of posting and notice pages."""

from __future__ import annotations

from datetime import date, timedelta

from paf_builder.compliance.wages import format_date, parse_iso_date
from paf_builder.sections.base import (
    POSTING_NOTICE_PAGE,
    SectionContext,
    SectionName,
    format_address,
)
from paf_builder.sections.lca import offered_wage_display

POSTING_WINDOW_DAYS = 14
POSTING_PROOF_TITLE = "Proof of LCA Posting"
NOTICE_PAGE_TITLE = "LCA Posting Notice"

WAGE_HOUR_COMPLAINTS = (
    "Complaints alleging misrepresentations of material facts in the labor condition "
    "application and/or failure to comply with terms of the labor condition application may be "
    "filed using the WH-4 Form with any office of the Wage and Hour Division, Employment "
    "Standards Administration, U.S. Department of Labor."
)
SPECIAL_COUNSEL_COMPLAINTS = (
    "Complaints alleging failure to offer employment to an equally or better qualified U.S. "
    "worker or an employer's misrepresentation regarding such offers of employment may be filed "
    "with the Office of Special Counsel for Immigration Related Unfair Employment Practices, "
    "Civil Rights Division, Department of Justice."
)
NOTICE_COMPLAINTS = (
    "Complaints alleging misrepresentation of material facts in the Labor Condition Application "
    "and/or failure to comply with the terms of the Labor Condition Application may be filed "
    "with any office of the Wage & Hour Division of the United States Department of Labor."
)


def posting_window(start: str, end: str, today: date) -> tuple[date, date]:
    """Resolve the posting period; a missing end is the start plus the standard window."""
    start_date = _parse_or(start, today)
    if end:
        return start_date, _parse_or(end, start_date + timedelta(days=POSTING_WINDOW_DAYS))
    return start_date, start_date + timedelta(days=POSTING_WINDOW_DAYS)


def _parse_or(value: str, default: date) -> date:
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        return default


def display_areas(ctx: SectionContext) -> list[str]:
    areas = [area.strip() for area in ctx.docs.notice_posting_locations if area.strip()][:4]
    if areas:
        return areas
    return [f"{ctx.company} Notice Board", "Company Intranet / Electronic Posting"]


def _write_notice_page(ctx: SectionContext, location: str, label: str) -> None:
    layout = ctx.layout
    job = ctx.job
    layout.new_page(f"{NOTICE_PAGE_TITLE} - {label}")
    layout.mark_section(POSTING_NOTICE_PAGE, f"{NOTICE_PAGE_TITLE} - {label}")
    layout.skip(6)
    layout.write_centered_title("LCA POSTING NOTICE", 14)
    layout.skip(8)
    layout.write_subheading("Notice to All Employees:")
    layout.write_paragraph(
        "Notice is hereby given to all employees that a Labor Condition Application (ETA Form "
        "9035 & 9035E) will be filed with the United States Department of Labor, Office of "
        "Foreign Labor Certification for a H-1B non-immigrant worker with the following details:"
    )
    layout.skip(4)
    layout.write_table(
        [
            ["Number of H-1B non-immigrant workers included in LCA:", str(job.workers_needed)],
            ["Job Position:", job.title],
            ["Wages Offered:", offered_wage_display(job)],
            [
                "Period of Employment:",
                f"{format_date(job.begin_date)} to {format_date(job.end_date)} (As per LCA)",
            ],
            ["Location where H-1B non-immigrant worker will work:", location],
        ],
        [0.42, 0.58],
        header=False,
    )
    layout.skip(8)
    layout.write_paragraph(NOTICE_COMPLAINTS)
    layout.write_paragraph(
        "The verification of Labor Condition Application (ETA Form 9035 & 9035E) will be "
        "available for all to review."
    )


async def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    docs, worksite = ctx.docs, ctx.worksite

    ctx.begin(SectionName.POSTING_NOTICE)
    layout.skip(6)
    layout.write_centered_title("LCA DISPLAY DETAILS", 14)
    layout.skip(8)
    if ctx.case_number:
        layout.write_paragraph(f"ETA Case Number: {ctx.case_number}", size=11, bold=True)

    start, end = posting_window(
        docs.notice_posting_start_date, docs.notice_posting_end_date, ctx.today
    )
    layout.write_paragraph(
        f"This is to certify that Labor Condition Application for the position of "
        f"{ctx.job.title} was posted for 10 business days from {start:%m/%d/%Y} to "
        f"{end:%m/%d/%Y} in the below mentioned place of employment."
    )
    layout.skip(4)

    primary_location = format_address(worksite)
    layout.write_subheading("Worksite Location(s)")
    layout.write_label_value("Primary Worksite", primary_location)
    secondary = worksite.secondary
    if secondary is not None:
        layout.write_label_value("Secondary Worksite", format_address(secondary))
        layout.write_label_value("Secondary County", secondary.county)
    layout.skip(4)

    layout.write_subheading("Display Areas")
    for index, area in enumerate(display_areas(ctx), start=1):
        layout.write_label_value(f"Display Area {index}", area)
    layout.skip(8)

    layout.write_subheading("Complaints")
    layout.write_paragraph(WAGE_HOUR_COMPLAINTS)
    layout.write_paragraph(SPECIAL_COUNSEL_COMPLAINTS)
    layout.skip(8)
    ctx.signatures.render_compact(layout, ctx.signatory, ctx.company, include_date=False)

    if docs.notice_posting_proof is not None:
        await ctx.embedder.embed(layout, docs.notice_posting_proof, POSTING_PROOF_TITLE)

    _write_notice_page(ctx, primary_location, "Primary Worksite")
    if secondary is not None:
        _write_notice_page(ctx, format_address(secondary), "Secondary Worksite")

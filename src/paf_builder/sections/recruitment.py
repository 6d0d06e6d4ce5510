"""Recruitment summary for dependent employers filing for non-exempt workers (20 CFR 655.739)."""

from __future__ import annotations

from datetime import timedelta

from paf_builder.compliance.wages import format_date, parse_iso_date
from paf_builder.sections.base import SectionContext, SectionName, split_platforms

DEFAULT_PLATFORMS = "LinkedIn, Indeed, Company Website"
RECRUITMENT_LEAD_DAYS = 60

RECRUITMENT_RESULTS: list[str] = [
    "Good faith steps were taken to recruit U.S. workers for the job opportunity using "
    "recruitment methods and procedures that are standard for the occupation.",
    "Compensation offered met or exceeded the prevailing wage and actual wage requirements.",
    "All U.S. workers who applied and were equally or better qualified for the position were "
    "given full consideration.",
    "No qualified U.S. worker was rejected for reasons other than lawful, job-related criteria.",
]

DISPLACEMENT_ATTESTATIONS: list[str] = [
    "No similarly employed U.S. worker has been or will be displaced within 90 days before or "
    "after the filing of an H-1B petition supported by this LCA.",
    "Before placing the H-1B worker at another employer's worksite, the employer has made a "
    "bona fide inquiry as to whether the other employer has or will displace a similarly "
    "employed U.S. worker within 90 days before or after the placement.",
    "Where applicable, written confirmation has been obtained from the secondary employer "
    "(client site) that no displacement will occur.",
]


def recruitment_platforms(raw: str) -> list[str]:
    """Platforms as listed, or the standard set when none were given."""
    return split_platforms(raw) or split_platforms(DEFAULT_PLATFORMS)


def recruitment_period(start: str, end: str, begin_date: str) -> tuple[str, str]:
    """Display dates for the recruitment window.

    A missing start defaults to sixty days before employment begins and a
    missing end reads "Present".
    """
    if start:
        start_text = format_date(start)
    else:
        try:
            fallback = parse_iso_date(begin_date) - timedelta(days=RECRUITMENT_LEAD_DAYS)
        except ValueError:
            start_text = ""
        else:
            start_text = format_date(fallback.isoformat())
    return start_text, format_date(end) if end else "Present"


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    job, docs = ctx.job, ctx.docs

    ctx.begin(SectionName.RECRUITMENT_SUMMARY)
    layout.skip(6)
    layout.write_centered_title("SUMMARY OF RECRUITMENT METHODS", 14)
    layout.skip(8)
    layout.write_paragraph(
        f'This recruitment summary is prepared by {ctx.company} ("Employer") pursuant to '
        "20 CFR 655.739 as an H-1B dependent employer filing a Labor Condition Application for "
        f"the position of {job.title}."
    )
    layout.skip(4)

    layout.write_section_banner("1. Position Information")
    layout.write_label_value("Job Title", job.title)
    layout.write_label_value("SOC Code", f"{job.soc_code} - {job.soc_title}")
    layout.write_label_value("Number of Positions", job.workers_needed)
    layout.write_label_value(
        "Employment Period", f"{format_date(job.begin_date)} to {format_date(job.end_date)}"
    )
    layout.skip(8)

    layout.write_section_banner("2. Recruitment Timeframe")
    start, end = recruitment_period(
        docs.recruitment_start_date, docs.recruitment_end_date, job.begin_date
    )
    layout.write_paragraph(
        f"Recruitment efforts for this position were conducted from {start} through {end}, in "
        "accordance with 20 CFR 655.739."
    )
    layout.skip(4)

    layout.write_section_banner("3. Recruitment Methods Used")
    layout.write_paragraph(
        "The employer used the following industry-wide recruitment methods to recruit U.S. "
        "workers for this position:"
    )
    layout.write_numbered(recruitment_platforms(docs.recruitment_platforms), bold_items=True)
    layout.skip(4)

    layout.write_section_banner("4. Recruitment Results")
    layout.write_label_value(
        "Number of U.S. Applicants Reviewed", docs.us_applicants_count, label_width=200
    )
    layout.write_paragraph("The employer certifies that:")
    layout.write_numbered(RECRUITMENT_RESULTS)
    reasons = docs.non_selection_reasons.strip()
    if reasons:
        layout.skip(4)
        layout.write_subheading("Lawful Job-Related Reasons for Non-Selection of U.S. Applicants")
        layout.write_paragraph(reasons, indent=6)
    layout.skip(8)

    layout.write_section_banner("5. Non-Displacement Attestation")
    layout.write_paragraph("The employer further attests that:")
    layout.write_numbered(DISPLACEMENT_ATTESTATIONS)
    layout.skip(8)

    layout.write_paragraph("EMPLOYER CERTIFICATION:", size=11, bold=True)
    layout.write_paragraph(
        f"I hereby certify that {ctx.company} has complied with all recruitment requirements "
        "applicable to H-1B dependent employers under 20 CFR 655.739. The information provided "
        "in this summary is true and correct to the best of my knowledge."
    )
    ctx.signatures.render_full(layout, ctx.signatory, ctx.company, include_date=False)

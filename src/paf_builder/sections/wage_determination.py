"""Position-specific Actual Wage Determination memo."""

from __future__ import annotations

from paf_builder.compliance.wages import format_currency, format_date
from paf_builder.layout.styles import (
    CONFIRM_BG,
    CONFIRM_BORDER,
    CONFIRM_TEXT,
    WARNING_BG,
    WARNING_BORDER,
    WARNING_TEXT,
)
from paf_builder.models import ComparableWageState, WageUnit
from paf_builder.sections.base import SectionContext, SectionName, area_label, format_address

MISSING_COMPARABLE_NOTICE = (
    "COMPARABLE WAGE INFORMATION MISSING: The number of similarly employed workers and their "
    "wage range, or a statement that no comparable workers are employed, must be provided "
    "before this determination is complete."
)
CONFLICTING_COMPARABLE_NOTICE = (
    "COMPARABLE WAGE INFORMATION CONFLICTING: Both a comparable wage range and a statement "
    "that no comparable workers are employed were provided. Exactly one must apply."
)


def _comparable_statement(ctx: SectionContext) -> None:
    layout = ctx.layout
    docs = ctx.docs
    state = docs.comparable_wage_state()
    layout.write_subheading("COMPARABLE WORKERS")
    if state is ComparableWageState.RANGE:
        layout.write_paragraph(
            f"The Company employs {docs.comparable_workers_count} worker(s) in the same "
            f"occupational classification with similar experience and qualifications. Their "
            f"wages range from {format_currency(docs.comparable_wage_min, WageUnit.YEAR)} to "
            f"{format_currency(docs.comparable_wage_max, WageUnit.YEAR)}."
        )
    elif state is ComparableWageState.NONE_COMPARABLE:
        layout.write_paragraph(
            "There are no comparable workers employed by the Company in this occupational "
            "classification. The actual wage is therefore the wage offered for this position."
        )
    else:
        notice = (
            MISSING_COMPARABLE_NOTICE
            if state is ComparableWageState.UNSET
            else CONFLICTING_COMPARABLE_NOTICE
        )
        layout.write_box(
            [notice], fill=WARNING_BG, stroke=WARNING_BORDER, text_color=WARNING_TEXT, bold=True
        )


def _position_factors(ctx: SectionContext) -> list[tuple[str, str]]:
    job, wage, worker = ctx.job, ctx.wage, ctx.worker_name
    if job.onet_code:
        skills = (
            f"The position aligns with O*NET {job.onet_code} ({job.onet_title}), which defines "
            "the specialized knowledge and skills required for this role."
        )
    else:
        skills = (
            f"The technical skills and specialized knowledge required for the {job.soc_title} "
            "classification were assessed."
        )
    return [
        (
            "Experience Requirements",
            f"The position of {job.title} requires experience commensurate with a "
            f"{wage.wage_level} wage level. {worker}'s prior experience in similar roles was "
            "evaluated against the requirements.",
        ),
        (
            "Educational Qualifications",
            f"Educational credentials appropriate for the {job.soc_title} occupational "
            f"classification (SOC {job.soc_code}) were verified and considered in the wage "
            "determination.",
        ),
        (
            "Job Responsibility",
            f"The duties and responsibilities of the {job.title} position, including the level "
            "of autonomy and decision-making authority, support the determined wage rate.",
        ),
        ("Specialized Skills", skills),
        (
            "Comparable Employees",
            "The wage was compared against rates paid to similarly employed U.S. workers in "
            "comparable positions within the Company to ensure internal equity.",
        ),
    ]


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    job, wage, worksite = ctx.job, ctx.wage, ctx.worksite
    worker = ctx.worker_name
    summary = ctx.wages
    binding = format_currency(summary.binding, WageUnit.YEAR)

    ctx.begin(SectionName.WAGE_DETERMINATION)
    layout.skip(6)
    layout.write_centered_title("ACTUAL WAGE DETERMINATION", 14)
    layout.write_centered_title("Position-Specific Wage Analysis", 11)
    layout.skip(10)

    position = [f"Job Title: {job.title}", f"SOC Code: {job.soc_code} - {job.soc_title}"]
    if job.onet_code:
        position.append(
            f"O*NET Code: {job.onet_code}" + (f" - {job.onet_title}" if job.onet_title else "")
        )
    position.append(f"Worker: {worker}")
    layout.write_box(position, title="POSITION IDENTIFICATION")

    layout.write_subheading("I. DETERMINATION SUMMARY")
    site = f"{worksite.name}, " if worksite.name else ""
    layout.write_paragraph(
        f"This Actual Wage Determination is prepared for the position of {job.title} "
        f"(SOC {job.soc_code}) in accordance with 20 CFR 655.731 and the Company's Actual Wage "
        f"Standards policy. This determination applies specifically to {worker} for employment "
        f"at {site}{format_address(worksite)}."
    )

    layout.write_box(
        [
            f"WAGE CONFIRMATION: {worker} will be paid at least {binding}, which is the HIGHER "
            "of the actual wage or the prevailing wage, as required by 20 CFR 655.731(a)."
        ],
        fill=CONFIRM_BG,
        stroke=CONFIRM_BORDER,
        text_color=CONFIRM_TEXT,
        bold=True,
    )
    if summary.offered_below_binding:
        layout.write_box(
            [
                f"COMPLIANCE WARNING: The offered wage of "
                f"{format_currency(summary.offered, WageUnit.YEAR)} is below the required "
                f"wage of {binding} set by the {summary.binding_source}. The worker must be "
                "paid the required wage."
            ],
            fill=WARNING_BG,
            stroke=WARNING_BORDER,
            text_color=WARNING_TEXT,
            bold=True,
        )

    layout.write_subheading("II. EMPLOYMENT DETAILS")
    layout.write_label_value(
        "Employment Period", f"{format_date(job.begin_date)} to {format_date(job.end_date)}"
    )
    layout.write_label_value("Employment Type", "Full-Time" if job.is_full_time else "Part-Time")
    layout.write_label_value("Workers Needed", job.workers_needed)
    layout.write_label_value("Worksite", f"{worksite.city}, {worksite.state}")
    layout.write_label_value("Wage Area", worksite.area_name)
    layout.skip(5)

    layout.write_subheading("III. WAGE ANALYSIS")
    rows = [
        ["Wage Type", "Amount", "Source"],
        [
            "Prevailing Wage",
            format_currency(wage.prevailing_wage, wage.prevailing_wage_unit),
            wage.wage_source,
        ],
        ["Wage Level", wage.wage_level, f"As of {format_date(wage.wage_source_date)}"],
    ]
    if summary.secondary_prevailing is not None and wage.secondary_wage is not None:
        secondary = wage.secondary_wage
        rows.append(
            [
                "Secondary Prevailing Wage",
                format_currency(secondary.prevailing_wage, secondary.prevailing_wage_unit),
                secondary.wage_source,
            ]
        )
    rows.append(
        [
            "Actual Wage Offered",
            format_currency(job.wage_rate_from, job.wage_unit),
            "Employer Determination",
        ]
    )
    if summary.actual:
        rows.append(
            [
                "Actual Wage (Comparable Workers)",
                format_currency(wage.actual_wage, wage.actual_wage_unit),
                "Employer Payroll",
            ]
        )
    rows.append(
        ["Required Wage (Higher Of)", binding, f"{summary.binding_source.capitalize()} Applied"]
    )
    layout.write_table(rows, [0.34, 0.3, 0.36], zebra=True)
    layout.skip(8)

    _comparable_statement(ctx)
    layout.skip(4)

    layout.write_subheading("IV. FACTORS APPLIED TO THIS POSITION")
    layout.write_paragraph(
        f"In determining the wage for the {job.title} position, the following factors from "
        "our Actual Wage Standards policy were evaluated:"
    )
    layout.write_titled_items(_position_factors(ctx))

    layout.write_subheading("V. DETERMINATION CONCLUSION")
    layout.write_paragraph(
        f"Based on the application of the Company's Actual Wage Standards to this specific "
        f"position, it is determined that {worker} shall be compensated at a rate of at least "
        f"{binding} for the position of {job.title}. This rate equals or exceeds both the "
        f"actual wage paid to similarly employed workers and the {wage.wage_level} prevailing "
        f"wage of {format_currency(wage.prevailing_wage, wage.prevailing_wage_unit)} for SOC "
        f"{job.soc_code} in the {area_label(worksite)} area."
    )

    notes = ctx.docs.actual_wage_memo.strip()
    if notes:
        layout.skip(6)
        layout.write_subheading("VI. ADDITIONAL NOTES")
        layout.write_paragraph(notes, size=9)

    layout.skip(10)
    ctx.signatures.render_compact(layout, ctx.signatory, ctx.company, include_date=False)

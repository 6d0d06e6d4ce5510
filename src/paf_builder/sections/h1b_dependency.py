"""H-1B dependency and willful violator attestation."""

from __future__ import annotations

from paf_builder.compliance.dependency import (
    THRESHOLD_DESCRIPTIONS,
    WAGE_EXEMPTION_THRESHOLD,
    assess_dependency,
    evaluate_exemption,
)
from paf_builder.compliance.wages import format_currency, format_date
from paf_builder.layout.styles import ERROR, SUCCESS, WARNING_BG, WARNING_BORDER, WARNING_TEXT
from paf_builder.sections.base import SectionContext, SectionName

DEPENDENT_ATTESTATIONS: list[str] = [
    "The employer will not displace any similarly employed U.S. worker within 90 days before or "
    "after filing an H-1B petition.",
    "The employer will not place the H-1B worker at another employer's worksite unless the "
    "employer has inquired whether the other employer has displaced or will displace a "
    "similarly employed U.S. worker within 90 days before or after the placement.",
    "The employer has taken good faith steps to recruit U.S. workers for the job using "
    "industry-wide standards and offering compensation at least as great as required by the LCA.",
    "The employer has offered the job to any U.S. worker who applies and is equally or better "
    "qualified for the job.",
]


def _write_status(ctx: SectionContext, text: str, adverse: bool) -> None:
    ctx.layout.write_paragraph(f"Status: {text}", size=12, bold=True, color=ERROR if adverse else SUCCESS)


def _write_assessment(ctx: SectionContext) -> None:
    layout = ctx.layout
    docs = ctx.docs
    if docs.total_fte_count is None or docs.total_h1b_count is None:
        return
    assessment = assess_dependency(
        docs.total_fte_count, docs.total_h1b_count, ctx.case.is_h1b_dependent
    )
    layout.write_subheading("Dependency Worksheet")
    layout.write_label_value("Total FTE Employees", assessment.total_fte)
    layout.write_label_value("H-1B Employees", assessment.total_h1b)
    layout.write_label_value("H-1B Percentage", f"{assessment.percentage:.1f}%")
    layout.write_label_value("Applicable Threshold", assessment.band)
    layout.write_label_value("Meets Threshold", assessment.meets_threshold)
    layout.write_label_value("Calculation Date", format_date(docs.dependency_calculation_date))
    if assessment.discrepancy:
        stated = "H-1B dependent" if assessment.stated_dependent else "not H-1B dependent"
        computed = "meet" if assessment.meets_threshold else "do not meet"
        layout.write_box(
            [
                f"NOTE: The employer has declared itself {stated}, but the worksheet counts "
                f"{computed} the dependency threshold. The declared status governs this LCA; "
                "the counts should be reviewed."
            ],
            fill=WARNING_BG,
            stroke=WARNING_BORDER,
            text_color=WARNING_TEXT,
        )
    layout.skip(4)


def _write_exemption(ctx: SectionContext) -> None:
    layout = ctx.layout
    exemption_type = ctx.docs.exemption_type
    if exemption_type is None:
        return
    result = evaluate_exemption(exemption_type, ctx.wages.binding)
    layout.write_subheading("Exempt H-1B Worker Evaluation")
    layout.write_label_value("Worker", ctx.worker_name)
    layout.write_label_value("Annualized Wage", format_currency(result.annualized_wage))
    layout.write_label_value(
        "Exemption Claimed",
        {"wage": "Wage-based", "degree": "Degree-based", "none": "None"}[exemption_type],
    )
    layout.write_label_value("LCA Exempt Box", ctx.docs.h1b_exemption_checked)
    exempt = f"Yes ({result.basis})" if result.is_exempt else "No"
    layout.write_paragraph(f"Exempt: {exempt}", bold=True)
    if result.is_wage_exempt:
        layout.write_paragraph(
            f"The worker is paid an annual wage of at least "
            f"{format_currency(WAGE_EXEMPTION_THRESHOLD)} and is therefore an exempt H-1B "
            "nonimmigrant under 20 CFR 655.737."
        )
    elif result.is_degree_exempt:
        layout.write_paragraph(
            "The worker holds a master's or higher degree (or its equivalent) in a specialty "
            "related to the intended employment and is therefore an exempt H-1B nonimmigrant "
            "under 20 CFR 655.737."
        )
    elif exemption_type == "wage":
        layout.write_paragraph(
            f"A wage-based exemption was claimed, but the annual wage is below "
            f"{format_currency(WAGE_EXEMPTION_THRESHOLD)}. The worker is not exempt.",
            color=ERROR,
        )
    else:
        layout.write_paragraph(
            "The worker is not exempt. The recruitment and displacement attestations apply."
        )
    layout.skip(4)


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    employer = ctx.employer
    dependent = ctx.case.is_h1b_dependent
    willful = ctx.case.is_willful_violator

    ctx.begin(SectionName.H1B_DEPENDENCY)
    layout.skip(6)
    layout.write_centered_title("H-1B DEPENDENCY ATTESTATION", 14)
    layout.skip(8)
    layout.write_paragraph(
        f'This attestation is made by {ctx.company} ("Employer") pursuant to 20 CFR 655.736 '
        "regarding the employer's H-1B dependency status and willful violator status as required "
        "for the Labor Condition Application (LCA)."
    )
    layout.skip(4)

    layout.write_section_banner("1. H-1B Dependency Status Declaration")
    _write_status(ctx, "H-1B DEPENDENT" if dependent else "NOT H-1B DEPENDENT", dependent)
    layout.write_subheading("H-1B Dependency Calculation Method")
    layout.write_paragraph(
        'Under 20 CFR 655.736, an employer is considered "H-1B dependent" if it meets one of the '
        "following thresholds based on full-time equivalent (FTE) employees:"
    )
    layout.write_table(
        [["Employer Size", "Dependency Threshold"]]
        + [description.split(": ", 1) for description in THRESHOLD_DESCRIPTIONS],
        [0.35, 0.65],
        zebra=True,
    )
    layout.skip(6)
    _write_assessment(ctx)
    _write_exemption(ctx)

    if dependent:
        layout.write_paragraph(
            "As an H-1B dependent employer, the following additional attestations apply to this LCA:",
            bold=True,
        )
        layout.write_numbered(DEPENDENT_ATTESTATIONS)
    else:
        layout.write_paragraph(
            "The employer is not H-1B dependent and therefore is not subject to the additional "
            "attestation requirements regarding displacement and recruitment under "
            "20 CFR 655.738-739."
        )
    layout.skip(8)

    layout.write_section_banner("2. Willful Violator Status Declaration")
    _write_status(ctx, "WILLFUL VIOLATOR" if willful else "NOT A WILLFUL VIOLATOR", willful)
    if willful:
        layout.write_paragraph(
            "The employer has been found to have willfully violated the H-1B program requirements "
            "and is subject to additional attestation requirements under 20 CFR 655.738-739."
        )
    else:
        layout.write_paragraph(
            "The employer attests that it has not been found by the Department of Labor to have "
            "willfully violated the terms and conditions of the H-1B program within the past 5 "
            "years."
        )
    layout.skip(8)

    layout.write_section_banner("3. Corporate Information")
    layout.write_label_value("Legal Business Name", employer.legal_name)
    layout.write_label_value("Trade Name/DBA", employer.trade_name)
    layout.write_label_value("Federal EIN", employer.fein)
    layout.write_label_value("NAICS Code", employer.naics_code)
    layout.skip(8)

    layout.write_paragraph("EMPLOYER CERTIFICATION:", size=11, bold=True)
    layout.write_paragraph(
        f"I hereby certify that the information provided above regarding {ctx.company}'s H-1B "
        "dependency status and willful violator status is true and correct to the best of my "
        "knowledge. I understand that providing false information may result in civil and/or "
        "criminal penalties under 18 U.S.C. 1546."
    )
    ctx.signatures.render_full(layout, ctx.signatory, ctx.company, include_date=False)

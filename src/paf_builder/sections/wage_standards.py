"""Company-wide Actual Wage Standards policy, identical for every position."""

from __future__ import annotations

from paf_builder.sections.base import SectionContext, SectionName

WAGE_FACTORS: list[tuple[str, str]] = [
    (
        "Experience",
        "The length, depth, and type of relevant work experience, including prior employment "
        "in similar positions, supervisory experience, and industry-specific knowledge.",
    ),
    (
        "Education",
        "Educational credentials including degree level, field of study, academic achievements, "
        "certifications, and reputation of educational institutions attended.",
    ),
    (
        "Job Responsibility and Function",
        "The nature and complexity of duties and responsibilities, degree of supervision "
        "exercised or received, decision-making authority, and scope of impact on business "
        "operations.",
    ),
    (
        "Specialized Knowledge and Skills",
        "Possession of unique technical skills, proprietary knowledge, language capabilities, "
        "specialized training, and industry certifications relevant to the position.",
    ),
    (
        "Performance Indicators",
        "Job references, performance evaluations, professional awards, publications, patents, "
        "and other documented achievements demonstrating exceptional ability.",
    ),
    (
        "Market Conditions",
        "Current market rates for comparable positions in the geographic area, supply and "
        "demand factors for specific skill sets, and competitive compensation benchmarking.",
    ),
]

CERTIFICATION = (
    "CERTIFICATION: This Actual Wage Standards policy has been adopted by the Company and "
    "applies to all wage determinations for positions covered by Labor Condition Applications."
)


def _policy_parts(company: str) -> list[tuple[str, str]]:
    return [
        (
            "I. POLICY STATEMENT",
            f'{company} ("the Company") is committed to maintaining a fair and equitable wage '
            "system that complies with all applicable federal, state, and local laws, including "
            "the requirements set forth in 20 CFR 655.731 for H-1B nonimmigrant workers. This "
            "document establishes the Company's standards and methodology for determining actual "
            "wages for all positions.",
        ),
        (
            "II. REGULATORY COMPLIANCE",
            "The Company maintains actual wage rates that meet or exceed the higher of: (a) the "
            "actual wage paid by the employer to other workers with similar experience and "
            "qualifications for the specific employment in question, or (b) the prevailing wage "
            "level for the occupational classification in the geographic area of intended "
            "employment, as required by 20 CFR 655.731(a).",
        ),
    ]


def _closing_parts() -> list[tuple[str, str]]:
    return [
        (
            "IV. WAGE STRUCTURE",
            "The Company maintains a documented wage system that ensures internal pay equity "
            "across similar positions. Wage differentials between employees in comparable roles "
            "are based on objective, non-discriminatory factors as outlined in Section III above. "
            "The Company regularly reviews and updates its wage scales to ensure compliance with "
            "prevailing wage requirements and market conditions.",
        ),
        (
            "V. NON-DISCRIMINATION",
            "The Company's wage determination practices do not discriminate based on race, color, "
            "religion, sex, national origin, age, disability, genetic information, or any other "
            "protected characteristic. Wage decisions are made solely on the basis of job-related "
            "qualifications and the factors set forth in this policy.",
        ),
        (
            "VI. DOCUMENTATION",
            "For each LCA filed, the Company prepares an individual Actual Wage Determination that "
            "documents how these standards were applied to determine the specific wage for that "
            "position. These determinations are maintained in the Public Access File and available "
            "for inspection as required by DOL regulations.",
        ),
    ]


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    employer = ctx.employer

    ctx.begin(SectionName.WAGE_STANDARDS)
    layout.skip(6)
    layout.write_centered_title("ACTUAL WAGE STANDARDS", 14)
    layout.write_centered_title("Company-Wide Wage Determination Policy", 11)
    layout.skip(10)

    layout.write_subheading("EMPLOYER INFORMATION")
    layout.write_label_value("Legal Business Name", employer.legal_name)
    layout.write_label_value("Trade Name (DBA)", employer.trade_name)
    layout.write_label_value("FEIN", employer.fein)
    layout.write_label_value("NAICS Code", employer.naics_code)
    layout.skip(8)

    for heading, body in _policy_parts(ctx.company):
        layout.write_subheading(heading)
        layout.write_paragraph(body)
        layout.skip(4)

    layout.write_subheading("III. WAGE DETERMINATION FACTORS")
    layout.write_paragraph(
        "The Company considers the following factors when determining actual wages for all "
        "positions:"
    )
    layout.write_titled_items(WAGE_FACTORS)
    layout.skip(4)

    for heading, body in _closing_parts():
        layout.write_subheading(heading)
        layout.write_paragraph(body)
        layout.skip(4)

    layout.write_box([CERTIFICATION], bold=True)
    layout.skip(10)
    ctx.signatures.render_compact(layout, ctx.signatory, ctx.company, include_date=False)

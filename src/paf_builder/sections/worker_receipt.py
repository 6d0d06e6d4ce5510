"""Worker acknowledgment of receiving the certified LCA, with the payroll statement."""

from __future__ import annotations

from paf_builder.compliance.wages import format_currency
from paf_builder.sections.base import SectionContext, SectionName

WORKER_PLACEHOLDER = "[Worker Name]"
PAYROLL_CYCLE = "monthly"


def worker_label(ctx: SectionContext) -> str | None:
    """The single worker's name (or placeholder); None when the LCA covers several workers."""
    if ctx.job.workers_needed > 1:
        return None
    return ctx.employer.worker_name.strip() or WORKER_PLACEHOLDER


def receipt_text(company: str, worker: str | None) -> str:
    if worker is None:
        return (
            "By signing this form, each H-1B worker covered under this LCA affirms that on or "
            f"before the day he/she began work as an H-1B employee for {company}, he/she was "
            "provided with a copy of the Labor Condition Application as certified by the "
            "Department of Labor that was filed in support of his/her H-1B nonimmigrant petition."
        )
    return (
        f"By signing this form, {worker} affirms that on or before the day he/she began work as "
        f"an H-1B employee for {company}, he/she was provided with a copy of the Labor Condition "
        "Application as certified by the Department of Labor that was filed in support of "
        f"{worker}'s H-1B nonimmigrant petition."
    )


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    worker = worker_label(ctx)

    ctx.begin(SectionName.WORKER_RECEIPT)
    layout.skip(10)
    layout.write_centered_title("STATEMENT OF RECEIPT OF CERTIFIED LABOR CONDITION", 13)
    layout.write_centered_title("APPLICATION BY H-1B NONIMMIGRANT WORKER", 13)
    layout.skip(12)
    layout.write_paragraph(receipt_text(ctx.company, worker))
    layout.skip(8)

    layout.write_subheading("Payroll Statement")
    layout.write_paragraph(
        "The Company compensates H-1B employees at or above the required wage listed on the "
        "certified Labor Condition Application for this position, consistent with 20 CFR 655.731."
    )
    layout.write_paragraph(
        f"{worker or 'The employee'} will be paid {format_currency(ctx.wages.binding)} annually "
        f"through the Company's regular {PAYROLL_CYCLE} payroll cycle, which is applied "
        "consistently to similarly situated employees."
    )
    layout.write_paragraph(
        "The Company pays for all nonproductive time in accordance with 20 CFR 655.731(c)(7) and "
        "does not place H-1B employees in unpaid status due to lack of assigned work. The required "
        "wage will be paid beginning no later than the employee's first day of employment, as "
        "required by regulation."
    )
    layout.skip(8)

    layout.write_signature_line("Signature")
    layout.write_paragraph(worker or "H-1B Worker Name (Print)")
    layout.write_paragraph("Date: ____________________")
    layout.skip(12)
    ctx.signatures.render_compact(layout, ctx.signatory, ctx.company, include_date=True)

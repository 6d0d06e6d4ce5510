"""Benefits summary: the uploaded plan document or the standard benefits list."""

from __future__ import annotations

from paf_builder.sections.base import SectionContext, SectionName

BENEFITS_ATTACHMENT_TITLE = "Benefits Documentation"

DEFAULT_BENEFITS: list[str] = [
    "Medical insurance for the employee and additional beneficiaries (at the employee's "
    "discretion).",
    "Dental insurance for the employee and additional beneficiaries (at the employee's "
    "discretion).",
    "Vision insurance for the employee and additional beneficiaries (at the employee's "
    "discretion).",
    "401(k) Retirement Plan with employer matching contributions.",
    "Paid Time Off (PTO) in accordance with company policy.",
    "Paid holidays as per company calendar.",
    "Life insurance coverage.",
    "Reimbursement of expenses incurred while performing duties that are tied to their job "
    "description and responsibilities.",
]

WAIVER = (
    "All employees also have the right to waive any type of insurance or reimbursement offers, "
    "and documentation of the same can be found in the employee's personal file (if the "
    "employee does indeed waive claims to insurance or reimbursement)."
)


async def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    docs = ctx.docs

    ctx.begin(SectionName.BENEFITS)
    layout.skip(6)
    layout.write_centered_title("SUMMARY OF BENEFITS OFFERED TO ALL EMPLOYEES", 14)
    layout.skip(8)
    layout.write_paragraph(
        f"All workers that are employed by {ctx.company} are entitled to the same benefits "
        "regardless of race, gender, nationality, immigration status, or any other factor."
    )
    layout.skip(4)

    if docs.benefits_file is not None:
        layout.write_paragraph("Benefits documentation attached below:", size=11, bold=True)
        await ctx.embedder.embed(layout, docs.benefits_file, BENEFITS_ATTACHMENT_TITLE)
    else:
        layout.write_paragraph("A summary of the offered benefits includes:", size=11, bold=True)
        layout.write_bullets(DEFAULT_BENEFITS)
        layout.skip(4)
        layout.write_paragraph(WAIVER)

        notes = docs.benefits_notes.strip()
        if notes:
            layout.skip(6)
            layout.write_subheading("Additional Benefits Information:")
            layout.write_paragraph(notes, size=9)

    layout.skip(12)
    ctx.signatures.render_compact(layout, ctx.signatory, ctx.company, include_date=False)

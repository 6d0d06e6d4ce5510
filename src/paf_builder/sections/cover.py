"""Cover page: identification block and table of contents."""

from __future__ import annotations

from paf_builder.compliance.wages import format_date
from paf_builder.layout.styles import GRAY, NAVY
from paf_builder.sections.base import SECTION_TITLES, SectionContext, SectionName, format_address

TABLE_OF_CONTENTS: list[str] = [
    "Copy of the Certified Labor Condition Application",
    "Actual Wage Standards (Company-Wide Policy)",
    "Actual Wage Determination (Position-Specific)",
    "Prevailing Wage Rate and its Source",
    "Memorandum to Confirm Compliance with Posting Requirement",
    "Benefits Summary and Benefits Materials",
    'If H-1B dependent company, list of "exempt" H-1B non-immigrants',
    "If H-1B dependent company and LCA is filed for a non-exempt H-1B employee, summary of "
    "the recruitment methods used and the time frames of recruitment of U.S. workers",
    "Sworn statement if there is a name change & List of employees affected with the name "
    "change and new EIN number if any",
    "If dependent company and LCA is filed for a non-exempt H-1B employee, Secondary "
    "Displacement Inquiry",
]


def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    layout.new_page()
    layout.mark_section(SectionName.COVER.value, SECTION_TITLES[SectionName.COVER])
    layout.skip(90)

    layout.write_centered_title("PUBLIC ACCESS FILE", 10, color=GRAY)
    layout.skip(12)
    layout.write_centered_title(ctx.company, 24, color=NAVY)
    layout.skip(10)
    layout.write_centered_title(f"Job Title: {ctx.job.title}", 14, color="#000000")
    layout.skip(4)
    layout.write_centered_title(
        f"Primary Worksite: {format_address(ctx.worksite)}", 11, color="#000000"
    )
    secondary = ctx.worksite.secondary
    if secondary is not None:
        layout.write_centered_title(
            f"Secondary Worksite: {format_address(secondary)}", 10, color="#000000"
        )
    layout.skip(4)
    layout.write_centered_title(
        f"LCA Validity: {format_date(ctx.job.begin_date)} until {format_date(ctx.job.end_date)}",
        11,
        color="#000000",
    )

    layout.skip(30)
    layout.write_section_banner("TABLE OF CONTENTS")
    layout.write_numbered(TABLE_OF_CONTENTS, indent=0)

    if ctx.case_number:
        layout.skip(10)
        layout.write_paragraph(f"LCA Case Number: {ctx.case_number}", bold=True)

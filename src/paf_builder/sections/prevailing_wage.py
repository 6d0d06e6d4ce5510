"""FLC wage results for the primary area and, when applicable, the secondary area."""

from __future__ import annotations

from typing import Optional

from paf_builder.compliance.wages import (
    applicable_secondary_wage,
    format_date,
    level_table,
    wage_source_date,
)
from paf_builder.layout.styles import GRAY
from paf_builder.models import WageLevelData, WageUnit
from paf_builder.sections.base import (
    PREVAILING_WAGE_SECONDARY,
    SectionContext,
    SectionName,
)

SELECTED_MARKER = " \u2190"
SECONDARY_TITLE = "Prevailing Wage Rate and Source - Secondary Worksite"


def level_rows(
    selected_level: str,
    prevailing_wage: float,
    unit: WageUnit,
    authoritative: Optional[WageLevelData],
) -> list[list[str]]:
    """Table rows for the four wage levels with the selected level marked."""
    rows = []
    for row in level_table(selected_level, prevailing_wage, unit, authoritative):
        marker = SELECTED_MARKER if row.level == selected_level else ""
        rows.append(
            [f"{row.level} Wage:", f"${row.hourly:,.2f} hour - ${row.annual:,.0f} year{marker}"]
        )
    return rows


def _write_report(
    ctx: SectionContext,
    *,
    area_code: str,
    area_title: str,
    source_date: str,
    selected_level: str,
    prevailing_wage: float,
    unit: WageUnit,
    authoritative: Optional[WageLevelData],
) -> None:
    layout = ctx.layout
    job = ctx.job
    layout.skip(6)
    layout.write_centered_title("FLC Wage Results", 14)
    layout.skip(8)
    layout.write_paragraph(
        f"You selected the All Industries database for {format_date(source_date)}."
    )
    layout.write_section_banner("Your search returned the following:")

    rows = [
        ["Area Code:", area_code or "N/A"],
        ["Area Title:", area_title],
        ["OEWS/SOC Code:", job.soc_code],
        ["OEWS/SOC Title:", job.soc_title],
    ]
    rows.extend(level_rows(selected_level, prevailing_wage, unit, authoritative))
    layout.write_table(rows, [0.32, 0.68], header=False, zebra=True)
    layout.skip(10)

    onet_code = job.onet_code or f"{job.soc_code}.00"
    onet_title = job.onet_title or job.soc_title
    layout.write_section_banner("This wage applies to the following O*NET occupations:")
    layout.write_paragraph(f"{onet_code} {onet_title}", size=11, bold=True)
    layout.write_paragraph(
        f"This occupation includes workers who perform duties related to {onet_title.lower()}. "
        "Workers in this occupation typically require specialized education and training in "
        "their field.",
        size=9,
    )
    layout.write_paragraph("Education & Training Code: 4-Bachelor's degree", size=9, bold=True)
    layout.skip(6)
    layout.write_paragraph(
        "For information on determining the proper occupation and wage level see the "
        "Prevailing Wage Guidance on the Skill Level page at OFLC.",
        size=8,
        italic=True,
        color=GRAY,
    )
    layout.write_paragraph(
        "The offered wage must be at, or above the federal or state or local minimum wage, "
        "whichever is higher.",
        size=8,
        italic=True,
        color=GRAY,
    )


def _fallback_source_date(ctx: SectionContext) -> str:
    return wage_source_date(ctx.job.begin_date, ctx.today)


def render(ctx: SectionContext) -> None:
    wage, worksite = ctx.wage, ctx.worksite

    ctx.begin(SectionName.PREVAILING_WAGE)
    _write_report(
        ctx,
        area_code=worksite.area_code,
        area_title=worksite.area_name or f"{worksite.city}, {worksite.state}",
        source_date=wage.wage_source_date or _fallback_source_date(ctx),
        selected_level=wage.wage_level,
        prevailing_wage=wage.prevailing_wage,
        unit=wage.prevailing_wage_unit,
        authoritative=wage.level_data,
    )

    secondary_wage = applicable_secondary_wage(wage, worksite)
    secondary_site = worksite.secondary
    if secondary_wage is None or secondary_site is None:
        return
    layout = ctx.layout
    layout.new_page(SECONDARY_TITLE)
    layout.mark_section(PREVAILING_WAGE_SECONDARY, SECONDARY_TITLE)
    layout.write_paragraph(
        f"Secondary worksite: {secondary_site.name or secondary_site.address1}, "
        f"{secondary_site.city}, {secondary_site.state}",
        bold=True,
    )
    _write_report(
        ctx,
        area_code="",
        area_title=(
            f"{secondary_site.county}, {secondary_site.state}"
            if secondary_site.county
            else f"{secondary_site.city}, {secondary_site.state}"
        ),
        source_date=(
            secondary_wage.wage_source_date
            or wage.wage_source_date
            or _fallback_source_date(ctx)
        ),
        selected_level=secondary_wage.wage_level,
        prevailing_wage=secondary_wage.prevailing_wage,
        unit=secondary_wage.prevailing_wage_unit,
        authoritative=secondary_wage.level_data,
    )


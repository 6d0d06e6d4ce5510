"""Certified LCA: key form fields followed by the embedded filing."""

from __future__ import annotations

from paf_builder.compliance.wages import format_currency, format_date
from paf_builder.layout.styles import GRAY
from paf_builder.models import Job, SecondaryWorksite, Worksite
from paf_builder.sections.base import SectionContext, SectionName

LCA_ATTACHMENT_TITLE = "Certified LCA (ETA Form 9035/9035E)"


def offered_wage_display(job: Job) -> str:
    if job.wage_rate_to:
        return (
            f"{format_currency(job.wage_rate_from, job.wage_unit)} to "
            f"{format_currency(job.wage_rate_to, job.wage_unit)}"
        )
    return format_currency(job.wage_rate_from, job.wage_unit)


def _write_place(ctx: SectionContext, site: Worksite | SecondaryWorksite) -> None:
    layout = ctx.layout
    layout.write_label_value("Worksite Name", site.name)
    address = site.address1 + (f", {site.address2}" if site.address2 else "")
    layout.write_label_value("Address", address)
    layout.write_label_value("City", site.city)
    layout.write_label_value("County", site.county)
    layout.write_label_value("State", site.state)
    layout.write_label_value("Postal Code", site.postal_code)


async def render(ctx: SectionContext) -> None:
    layout = ctx.layout
    job, employer, wage, worksite = ctx.job, ctx.employer, ctx.wage, ctx.worksite

    ctx.begin(SectionName.LCA)
    layout.draw_text(
        layout.page_width - layout.margin,
        layout.y - 6,
        "OMB Approval: 1205-0310",
        font=layout.italic_font,
        size=8,
        color=GRAY,
        align="right",
    )

    layout.write_section_banner("A. Employment-Based Nonimmigrant Visa Information")
    layout.write_label_value("Visa Classification", ctx.case.visa_type.value)
    layout.skip(5)

    layout.write_section_banner("B. Temporary Need Information")
    layout.write_label_value("Job Title", job.title)
    layout.write_label_value("SOC (ONET/OES) Code", job.soc_code)
    layout.write_label_value("SOC (ONET/OES) Occupation Title", job.soc_title)
    if job.onet_code:
        layout.write_label_value("O*NET Code", job.onet_code)
        layout.write_label_value("O*NET Title", job.onet_title)
    layout.write_label_value("Full-Time Position", job.is_full_time)
    layout.write_label_value("Begin Date", format_date(job.begin_date))
    layout.write_label_value("End Date", format_date(job.end_date))
    layout.write_label_value("Number of Workers", job.workers_needed)
    layout.skip(5)

    layout.write_section_banner("C. Employer Information")
    layout.write_label_value("Legal Business Name", employer.legal_name)
    layout.write_label_value("Trade Name/DBA", employer.trade_name)
    layout.write_label_value("Address 1", employer.address1)
    layout.write_label_value("Address 2", employer.address2)
    layout.write_label_value("City", employer.city)
    layout.write_label_value("State", employer.state)
    layout.write_label_value("Postal Code", employer.postal_code)
    layout.write_label_value("Country", employer.country)
    layout.write_label_value("Telephone", employer.telephone)
    layout.write_label_value("FEIN", employer.fein)
    layout.write_label_value("NAICS Code", employer.naics_code)
    layout.skip(5)

    offered = offered_wage_display(job)
    layout.write_section_banner("F. Employment and Wage Information")
    layout.write_subheading("Place of Employment Information - Primary Worksite")
    layout.write_label_value("Number of Workers", job.workers_needed)
    _write_place(ctx, worksite)
    layout.skip(5)
    layout.write_label_value("Wage Rate Paid", offered)
    layout.write_label_value(
        "Prevailing Wage", format_currency(wage.prevailing_wage, wage.prevailing_wage_unit)
    )
    layout.write_label_value("Wage Level", wage.wage_level)
    layout.write_label_value("Wage Source", wage.wage_source)
    layout.write_label_value("Source Year/Date", format_date(wage.wage_source_date))

    secondary = worksite.secondary
    if secondary is not None:
        layout.skip(10)
        layout.write_subheading("Place of Employment Information - Secondary Worksite")
        _write_place(ctx, secondary)
        layout.skip(5)
        # The offered wage is the same at both locations.
        source = wage.secondary_wage if wage.has_secondary_wage and wage.secondary_wage else wage
        layout.write_label_value("Wage Rate Paid", offered)
        layout.write_label_value(
            "Prevailing Wage",
            format_currency(source.prevailing_wage, source.prevailing_wage_unit),
        )
        layout.write_label_value("Wage Level", source.wage_level)
        layout.write_label_value("Wage Source", source.wage_source)
        layout.write_label_value("Source Year/Date", format_date(source.wage_source_date))

    layout.skip(5)
    layout.write_section_banner("H. Additional Employer Labor Condition Statements")
    layout.write_label_value("H-1B Dependent Employer", ctx.case.is_h1b_dependent)
    layout.write_label_value("Willful Violator", ctx.case.is_willful_violator)

    if ctx.case_number:
        layout.skip(10)
        layout.write_box(
            [
                f"Case Number: {ctx.case_number}",
                f"Status: {ctx.case.case_status.value}",
                f"Period: {format_date(job.begin_date)} to {format_date(job.end_date)}",
            ],
            bold=True,
        )

    if ctx.docs.lca_file is not None:
        await ctx.embedder.embed(layout, ctx.docs.lca_file, LCA_ATTACHMENT_TITLE)

"""Fixed section catalogue and its renderers."""

from __future__ import annotations

from paf_builder.sections import (
    benefits,
    cover,
    h1b_dependency,
    lca,
    posting_notice,
    prevailing_wage,
    recruitment,
    wage_determination,
    wage_standards,
    worker_receipt,
)
from paf_builder.sections.base import (
    PREVAILING_WAGE_SECONDARY,
    SECTION_ORDER,
    SECTION_TITLES,
    SectionContext,
    SectionName,
    SectionRenderer,
)
from paf_builder.sections.predicates import SECTION_PREDICATES, SectionToggles, plan_sections

SECTION_RENDERERS: dict[SectionName, SectionRenderer] = {
    SectionName.COVER: cover.render,
    SectionName.LCA: lca.render,
    SectionName.WAGE_STANDARDS: wage_standards.render,
    SectionName.WAGE_DETERMINATION: wage_determination.render,
    SectionName.PREVAILING_WAGE: prevailing_wage.render,
    SectionName.POSTING_NOTICE: posting_notice.render,
    SectionName.BENEFITS: benefits.render,
    SectionName.H1B_DEPENDENCY: h1b_dependency.render,
    SectionName.RECRUITMENT_SUMMARY: recruitment.render,
    SectionName.WORKER_RECEIPT: worker_receipt.render,
}

__all__ = [
    "PREVAILING_WAGE_SECONDARY",
    "SECTION_ORDER",
    "SECTION_PREDICATES",
    "SECTION_RENDERERS",
    "SECTION_TITLES",
    "SectionContext",
    "SectionName",
    "SectionToggles",
    "plan_sections",
]

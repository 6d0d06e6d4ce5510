"""Section catalogue, shared section context and formatting helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Awaitable, Callable, Optional, Protocol, Union

from paf_builder.compliance.wages import WageSummary, summarize_wages
from paf_builder.core.config import AppSettings
from paf_builder.embedding.embedder import AttachmentEmbedder
from paf_builder.exceptions import MissingRecordError
from paf_builder.layout.context import LayoutContext
from paf_builder.models import (
    CaseRecord,
    Employer,
    Job,
    SecondaryWorksite,
    SupportingDocs,
    WageInfo,
    Worksite,
)
from paf_builder.signatures.models import Signatory
from paf_builder.signatures.renderer import SignatureRenderer


class SectionName(str, Enum):
    """Catalogue of document sections, in their fixed output order."""

    COVER = "cover"
    LCA = "lca"
    WAGE_STANDARDS = "wage_standards"
    WAGE_DETERMINATION = "wage_determination"
    PREVAILING_WAGE = "prevailing_wage"
    POSTING_NOTICE = "posting_notice"
    BENEFITS = "benefits"
    H1B_DEPENDENCY = "h1b_dependency"
    RECRUITMENT_SUMMARY = "recruitment_summary"
    WORKER_RECEIPT = "worker_receipt"


SECTION_ORDER: list[SectionName] = list(SectionName)

# Sub-report keys recorded in the section index but not independently toggled.
PREVAILING_WAGE_SECONDARY = "prevailing_wage_secondary"
POSTING_NOTICE_PAGE = "posting_notice_page"

SECTION_TITLES: dict[SectionName, str] = {
    SectionName.COVER: "Public Access File",
    SectionName.LCA: "Labor Condition Application for Nonimmigrant Workers - Form ETA-9035 & 9035E",
    SectionName.WAGE_STANDARDS: "Actual Wage Standards",
    SectionName.WAGE_DETERMINATION: "Actual Wage Determination",
    SectionName.PREVAILING_WAGE: "Prevailing Wage Rate and Source",
    SectionName.POSTING_NOTICE: "LCA Posting Documentation",
    SectionName.BENEFITS: "Benefits Summary",
    SectionName.H1B_DEPENDENCY: "H-1B Dependency and Willful Violator Status",
    SectionName.RECRUITMENT_SUMMARY: "Recruitment Summary",
    SectionName.WORKER_RECEIPT: "Worker Receipt of LCA",
}


@dataclass
class SectionContext:
    """Everything a section needs, shared across one assembly run."""

    layout: LayoutContext
    case: CaseRecord
    docs: SupportingDocs
    signatory: Signatory
    embedder: AttachmentEmbedder
    signatures: SignatureRenderer
    settings: AppSettings
    today: date

    @property
    def employer(self) -> Employer:
        return _require(self.case.employer, "employer")

    @property
    def job(self) -> Job:
        return _require(self.case.job, "job")

    @property
    def worksite(self) -> Worksite:
        return _require(self.case.worksite, "worksite")

    @property
    def wage(self) -> WageInfo:
        return _require(self.case.wage, "wage")

    @property
    def company(self) -> str:
        return self.employer.legal_name

    @property
    def wages(self) -> WageSummary:
        return summarize_wages(self.job, self.wage, self.worksite)

    @property
    def worker_name(self) -> str:
        return self.employer.worker_name.strip() or "the H-1B worker"

    @property
    def case_number(self) -> str:
        return self.docs.lca_case_number or self.case.case_number

    def begin(self, section: SectionName) -> None:
        """Start the section on a fresh page and record it in the index."""
        title = SECTION_TITLES[section]
        self.layout.new_page(title)
        self.layout.mark_section(section.value, title)


class SectionRenderer(Protocol):
    def __call__(self, ctx: SectionContext) -> Union[None, Awaitable[None]]: ...


SectionPredicate = Callable[[CaseRecord, SupportingDocs], bool]


def _require(value, name: str):
    if value is None:
        raise MissingRecordError([name])
    return value


# ── Formatting helpers ───────────────────────────────────────────────


def format_address(site: Worksite | SecondaryWorksite | Employer) -> str:
    street = site.address1 + (f", {site.address2}" if site.address2 else "")
    locality = f"{site.city}, {site.state} {site.postal_code}".strip()
    return f"{street}, {locality}"


def area_label(worksite: Worksite) -> str:
    return worksite.area_name or f"{worksite.city}, {worksite.state}"


def split_platforms(raw: Optional[str]) -> list[str]:
    """Split a comma-separated platform list, dropping blanks."""
    return [item.strip() for item in (raw or "").split(",") if item.strip()]

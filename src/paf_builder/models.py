"""Input data model for Public Access File assembly.

Every model here is frozen: the engine reads case data but never mutates it.
Sub-records on :class:`CaseRecord` are optional so that an incomplete draft
can be represented and rejected with a clear structural error.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WageUnit(str, Enum):
    """Pay period a wage amount is quoted in."""

    HOUR = "Hour"
    WEEK = "Week"
    BI_WEEKLY = "Bi-Weekly"
    MONTH = "Month"
    YEAR = "Year"


class WageLevel(str, Enum):
    """OFLC prevailing wage tiers."""

    LEVEL_I = "Level I"
    LEVEL_II = "Level II"
    LEVEL_III = "Level III"
    LEVEL_IV = "Level IV"


class VisaType(str, Enum):
    H1B = "H-1B"
    H1B1_CHILE = "H-1B1 Chile"
    H1B1_SINGAPORE = "H-1B1 Singapore"
    E3_AUSTRALIA = "E-3 Australia"


class CaseStatus(str, Enum):
    CERTIFIED = "Certified"
    IN_PROCESS = "In Process"


ExemptionType = Literal["wage", "degree", "none"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Case sub-records ─────────────────────────────────────────────────


class Employer(_Frozen):
    """Petitioning employer as it appears on the LCA."""

    legal_name: str = Field(min_length=1)
    trade_name: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = "United States of America"
    telephone: str = ""
    fein: str = ""
    naics_code: str = ""
    worker_name: str = ""
    signatory_id: Optional[str] = None


class Job(_Frozen):
    """Position details from LCA sections B and F."""

    title: str
    soc_code: str
    soc_title: str
    onet_code: str = ""
    onet_title: str = ""
    is_full_time: bool = True
    begin_date: str
    end_date: str
    wage_rate_from: float = Field(ge=0)
    wage_rate_to: Optional[float] = None
    wage_unit: WageUnit = WageUnit.YEAR
    workers_needed: int = Field(default=1, ge=1)
    is_rd: Optional[bool] = None


class SecondaryWorksite(_Frozen):
    name: str = ""
    address1: str
    address2: str = ""
    city: str
    state: str
    postal_code: str = ""
    county: str = ""


class Worksite(_Frozen):
    """Primary place of employment plus an optional secondary location.

    The pairing of ``has_secondary_worksite`` and ``secondary_worksite`` is
    checked by the validation step, not here, so that invalid drafts can
    still be loaded and reported on.
    """

    name: str = ""
    address1: str
    address2: str = ""
    city: str
    state: str
    postal_code: str = ""
    county: str = ""
    area_code: str = ""
    area_name: str = ""
    has_secondary_worksite: bool = False
    secondary_worksite: Optional[SecondaryWorksite] = None

    @property
    def secondary(self) -> SecondaryWorksite | None:
        """Secondary worksite, only when both the flag and the data are present."""
        if self.has_secondary_worksite and self.secondary_worksite is not None:
            return self.secondary_worksite
        return None


class LevelFigure(_Frozen):
    """One wage level as hourly and annual amounts."""

    hourly: Optional[float] = None
    annual: Optional[float] = None


class WageLevelData(_Frozen):
    """Authoritative per-level wage figures from the OFLC lookup."""

    level_i: LevelFigure = LevelFigure()
    level_ii: LevelFigure = LevelFigure()
    level_iii: LevelFigure = LevelFigure()
    level_iv: LevelFigure = LevelFigure()

    def as_list(self) -> list[LevelFigure]:
        return [self.level_i, self.level_ii, self.level_iii, self.level_iv]


class SecondaryWageInfo(_Frozen):
    prevailing_wage: float = Field(ge=0)
    prevailing_wage_unit: WageUnit = WageUnit.YEAR
    wage_level: str = WageLevel.LEVEL_II.value
    wage_source: str = "OFLC Online Data Center"
    wage_source_date: str = ""
    level_data: Optional[WageLevelData] = None


class WageInfo(_Frozen):
    """Prevailing and actual wage figures for the position."""

    prevailing_wage: float = Field(ge=0)
    prevailing_wage_unit: WageUnit = WageUnit.YEAR
    wage_level: str = WageLevel.LEVEL_II.value
    wage_source: str = "OFLC Online Data Center"
    wage_source_date: str = ""
    actual_wage: float = Field(default=0.0, ge=0)
    actual_wage_unit: WageUnit = WageUnit.YEAR
    level_data: Optional[WageLevelData] = None
    has_secondary_wage: bool = False
    secondary_wage: Optional[SecondaryWageInfo] = None


class CaseRecord(_Frozen):
    """Root aggregate for one Labor Condition Application."""

    visa_type: VisaType = VisaType.H1B
    case_number: str = ""
    case_status: CaseStatus = CaseStatus.CERTIFIED
    is_h1b_dependent: bool = False
    is_willful_violator: bool = False
    employer: Optional[Employer] = None
    job: Optional[Job] = None
    worksite: Optional[Worksite] = None
    wage: Optional[WageInfo] = None

    def missing_records(self) -> list[str]:
        """Names of required sub-records that are absent."""
        return [
            name
            for name in ("employer", "job", "worksite", "wage")
            if getattr(self, name) is None
        ]


# ── Attachments and supporting documents ────────────────────────────


class Attachment(_Frozen):
    """An uploaded file, held in memory or referenced on disk."""

    filename: str
    content_type: str
    data: Optional[bytes] = None
    path: Optional[Path] = None

    @model_validator(mode="after")
    def _check_source(self) -> Attachment:
        if self.data is None and self.path is None:
            raise ValueError("Attachment needs either data or path")
        return self

    @classmethod
    def from_path(cls, path: Path, content_type: str | None = None) -> Attachment:
        """Build an attachment for *path*, guessing the MIME type from the suffix."""
        if content_type is None:
            content_type = _MIME_BY_SUFFIX.get(path.suffix.lower(), "application/octet-stream")
        return cls(filename=path.name, content_type=content_type, path=path)

    async def read(self) -> bytes:
        """Return the file contents, reading from disk off the event loop."""
        if self.data is not None:
            return self.data
        assert self.path is not None
        return await asyncio.to_thread(self.path.read_bytes)


_MIME_BY_SUFFIX: dict[str, str] = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".webp": "image/webp",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class ComparableWageState(str, Enum):
    """Which comparable-wage path the supporting docs have chosen."""

    RANGE = "range"
    NONE_COMPARABLE = "none_comparable"
    UNSET = "unset"
    CONFLICTING = "conflicting"


class SupportingDocs(_Frozen):
    """Compliance answers and uploaded files that accompany a case."""

    lca_case_number: str = ""
    lca_file: Optional[Attachment] = None
    actual_wage_memo: str = ""

    notice_posting_proof: Optional[Attachment] = None
    notice_posting_start_date: str = ""
    notice_posting_end_date: str = ""
    notice_posting_locations: list[str] = Field(default_factory=list, max_length=4)

    benefits_file: Optional[Attachment] = None
    benefits_notes: str = ""

    total_fte_count: Optional[int] = Field(default=None, ge=0)
    total_h1b_count: Optional[int] = Field(default=None, ge=0)
    dependency_calculation_date: str = ""

    exemption_type: Optional[ExemptionType] = None
    h1b_exemption_checked: Optional[bool] = None

    recruitment_start_date: str = ""
    recruitment_end_date: str = ""
    recruitment_platforms: str = ""
    us_applicants_count: Optional[int] = Field(default=None, ge=0)
    non_selection_reasons: str = ""

    comparable_workers_count: Optional[int] = Field(default=None, ge=0)
    comparable_wage_min: Optional[float] = None
    comparable_wage_max: Optional[float] = None
    no_comparable_workers: bool = False

    def comparable_wage_state(self) -> ComparableWageState:
        has_range = (
            self.comparable_workers_count is not None
            and self.comparable_wage_min is not None
            and self.comparable_wage_max is not None
        )
        if has_range and self.no_comparable_workers:
            return ComparableWageState.CONFLICTING
        if has_range:
            return ComparableWageState.RANGE
        if self.no_comparable_workers:
            return ComparableWageState.NONE_COMPARABLE
        return ComparableWageState.UNSET

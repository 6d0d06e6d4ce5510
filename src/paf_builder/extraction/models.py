"""Structured fields read off a certified LCA by a scanner."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


def scanner_key(field_name: str) -> str:
    """``h1b_exemption_checked`` -> ``h1bExemptionChecked``.

    Unlike pydantic's ``to_camel`` this leaves the letter after a digit
    lowercase, which is how scanners spell ``h1b`` keys.
    """
    head, *rest = field_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class LCAScanResult(BaseModel):
    """Everything a scan of ETA Form 9035 may report. Every field is optional.

    Accepts the camelCase keys scanners usually emit as well as field names.
    """

    model_config = ConfigDict(frozen=True, alias_generator=scanner_key, populate_by_name=True)

    case_number: Optional[str] = None
    case_status: Optional[str] = None
    visa_class: Optional[str] = None
    lca_received_date: Optional[str] = None

    employer_name: Optional[str] = None
    employer_address: Optional[str] = None
    employer_city: Optional[str] = None
    employer_state: Optional[str] = None
    employer_postal_code: Optional[str] = None
    employer_phone: Optional[str] = None
    employer_fein: Optional[str] = None
    naics_code: Optional[str] = None

    job_title: Optional[str] = None
    soc_code: Optional[str] = None
    soc_title: Optional[str] = None
    is_full_time: Optional[bool] = None
    total_workers: Optional[int] = None
    begin_date: Optional[str] = None
    end_date: Optional[str] = None

    wage_rate_from: Optional[float] = None
    wage_rate_to: Optional[float] = None
    wage_unit: Optional[str] = None
    prevailing_wage: Optional[float] = None
    prevailing_wage_unit: Optional[str] = None
    wage_level: Optional[str] = None

    worksite_address: Optional[str] = None
    worksite_city: Optional[str] = None
    worksite_state: Optional[str] = None
    worksite_postal_code: Optional[str] = None
    worksite_county: Optional[str] = None

    has_secondary_worksite: Optional[bool] = None
    secondary_worksite_address: Optional[str] = None
    secondary_worksite_city: Optional[str] = None
    secondary_worksite_state: Optional[str] = None
    secondary_worksite_postal_code: Optional[str] = None
    secondary_worksite_county: Optional[str] = None

    h1b_dependent: Optional[bool] = None
    willful_violator: Optional[bool] = None
    h1b_exemption_checked: Optional[bool] = None

    @property
    def is_certified(self) -> bool:
        return (self.case_status or "").strip().lower() == "certified"

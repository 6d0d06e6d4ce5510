"""Shared fixtures for paf-builder tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from paf_builder.core.config import AppSettings
from paf_builder.models import (
    CaseRecord,
    Employer,
    Job,
    SupportingDocs,
    WageInfo,
    WageUnit,
    Worksite,
)
from tests.fakes.documents import make_pdf, make_png

FIXED_NOW = datetime(2025, 9, 1, 10, 30, 0)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def employer() -> Employer:
    return Employer(
        legal_name="Acme Analytics, Inc.",
        address1="100 Market Street",
        city="San Francisco",
        state="California",
        postal_code="94105",
        telephone="+1 415 555 0100",
        fein="12-3456789",
        naics_code="541511",
        worker_name="Priya Raman",
    )


@pytest.fixture
def job() -> Job:
    return Job(
        title="Data Engineer",
        soc_code="15-1252",
        soc_title="Software Developers",
        begin_date="2025-10-01",
        end_date="2028-09-30",
        wage_rate_from=90000,
        wage_unit=WageUnit.YEAR,
    )


@pytest.fixture
def worksite() -> Worksite:
    return Worksite(
        address1="100 Market Street",
        city="San Francisco",
        state="California",
        postal_code="94105",
        county="San Francisco",
        area_code="41884",
        area_name="San Francisco-Oakland-Hayward, CA",
    )


@pytest.fixture
def wage() -> WageInfo:
    return WageInfo(
        prevailing_wage=85000,
        prevailing_wage_unit=WageUnit.YEAR,
        wage_level="Level II",
        wage_source_date="2024-07-01",
    )


@pytest.fixture
def case(employer: Employer, job: Job, worksite: Worksite, wage: WageInfo) -> CaseRecord:
    """Non-dependent single-worksite case paying $90,000 against an $85,000 prevailing wage."""
    return CaseRecord(
        case_number="I-200-25274-123456",
        employer=employer,
        job=job,
        worksite=worksite,
        wage=wage,
    )


@pytest.fixture
def docs() -> SupportingDocs:
    return SupportingDocs(
        comparable_workers_count=3,
        comparable_wage_min=88000,
        comparable_wage_max=98000,
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf(2)


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()

"""Integration test: validate, assemble, render and reopen a complete Public Access File."""

from __future__ import annotations

import json
from pathlib import Path

import pymupdf
import pytest

from paf_builder import assemble, create_rules_engine, save_to_file
from paf_builder.core.config import AppSettings, SignatoryConfig
from paf_builder.models import (
    Attachment,
    SecondaryWageInfo,
    SecondaryWorksite,
    SupportingDocs,
    WageUnit,
)
from paf_builder.signatures.directory import FileSignatoryDirectory
from tests.fakes.documents import make_png


@pytest.fixture
def full_case(case):
    """Dependent employer, two worksites, hourly secondary prevailing wage."""
    worksite = case.worksite.model_copy(
        update={
            "has_secondary_worksite": True,
            "secondary_worksite": SecondaryWorksite(
                address1="1 Harbor Way", city="Seattle", state="Washington", county="King"
            ),
        }
    )
    wage = case.wage.model_copy(
        update={
            "has_secondary_wage": True,
            "secondary_wage": SecondaryWageInfo(
                prevailing_wage=42.50, prevailing_wage_unit=WageUnit.HOUR
            ),
        }
    )
    employer = case.employer.model_copy(update={"signatory_id": "jane"})
    return case.model_copy(
        update={
            "is_h1b_dependent": True,
            "worksite": worksite,
            "wage": wage,
            "employer": employer,
        }
    )


@pytest.fixture
def full_docs(pdf_bytes: bytes) -> SupportingDocs:
    return SupportingDocs(
        lca_case_number="I-200-25274-123456",
        lca_file=Attachment(filename="lca.pdf", content_type="application/pdf", data=pdf_bytes),
        notice_posting_proof=Attachment(
            filename="posting.png", content_type="image/png", data=make_png(400, 300)
        ),
        notice_posting_start_date="2025-08-01",
        benefits_file=Attachment(
            filename="benefits.docx",
            content_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            data=b"PK\x03\x04 not really a docx",
        ),
        total_fte_count=40,
        total_h1b_count=20,
        exemption_type="none",
        recruitment_platforms="LinkedIn, Indeed, Dice",
        us_applicants_count=12,
        comparable_workers_count=3,
        comparable_wage_min=88000,
        comparable_wage_max=98000,
    )


@pytest.fixture
def directory(tmp_path: Path) -> FileSignatoryDirectory:
    (tmp_path / "jane.png").write_bytes(make_png(300, 80, color="darkblue"))
    path = tmp_path / "signatories.json"
    path.write_text(
        json.dumps(
            {
                "signatories": [
                    {
                        "id": "jane",
                        "name": "Jane Doe",
                        "title": "Director of HR",
                        "signature_image": "jane.png",
                    }
                ]
            }
        )
    )
    return FileSignatoryDirectory(path)


class TestAssemblyPipeline:
    @pytest.mark.asyncio
    async def test_full_document_round_trip(
        self, tmp_path: Path, full_case, full_docs, directory, clock
    ) -> None:
        engine = create_rules_engine(AppSettings())
        assert engine is not None
        report = engine.validate(full_case, full_docs)
        assert report.passed, report.issues

        document = await assemble(
            full_case,
            full_docs,
            directory=directory,
            settings=AppSettings(signatory=SignatoryConfig()),
            clock=clock,
        )

        assert document.has_section("recruitment_summary")
        assert document.has_section("prevailing_wage_secondary")
        assert document.section_keys.count("posting_notice_page") == 2
        assert "Jane Doe" in document.section_text("h1b_dependency")
        assert "Attached document: benefits.docx" in document.section_text("benefits")

        path = save_to_file(document, directory=tmp_path / "out")
        assert path.name == "PAF_Acme_Analytics__Inc__20250901.pdf"

        with pymupdf.open(str(path)) as pdf:
            assert pdf.page_count == document.page_count
            last = pdf[pdf.page_count - 1].get_text()
            first = pdf[0].get_text()
        assert f"Page {document.page_count} of {document.page_count}" in last
        assert "PUBLIC ACCESS FILE" in first

    @pytest.mark.asyncio
    async def test_secondary_hourly_wage_binds(self, full_case, full_docs, clock) -> None:
        document = await assemble(full_case, full_docs, clock=clock)
        text = document.section_text("wage_determination")
        # 42.50 x 2080 = 88,400 is below the 90,000 offered wage
        assert "COMPLIANCE WARNING:" not in text
        assert "$90,000" in text

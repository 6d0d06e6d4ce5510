"""Tests for the input data model."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from paf_builder.models import (
    Attachment,
    CaseRecord,
    ComparableWageState,
    Employer,
    SecondaryWorksite,
    SupportingDocs,
    Worksite,
)


class TestCaseRecord:
    def test_missing_records_lists_absent_sub_records(self, employer: Employer) -> None:
        case = CaseRecord(employer=employer)
        assert case.missing_records() == ["job", "worksite", "wage"]

    def test_complete_case_has_no_missing_records(self, case: CaseRecord) -> None:
        assert case.missing_records() == []

    def test_frozen(self, case: CaseRecord) -> None:
        with pytest.raises(ValidationError):
            case.case_number = "other"  # type: ignore[misc]

    def test_round_trips_through_json(self, case: CaseRecord) -> None:
        assert CaseRecord.model_validate_json(case.model_dump_json()) == case

    def test_employer_needs_legal_name(self) -> None:
        with pytest.raises(ValidationError):
            Employer(legal_name="")


class TestWorksiteSecondary:
    def test_secondary_requires_flag_and_data(self) -> None:
        data = SecondaryWorksite(address1="1 Main St", city="Austin", state="Texas")
        base = dict(address1="100 Market Street", city="San Francisco", state="California")
        assert Worksite(**base, has_secondary_worksite=True, secondary_worksite=data).secondary == data
        assert Worksite(**base, has_secondary_worksite=True).secondary is None
        assert Worksite(**base, secondary_worksite=data).secondary is None


class TestAttachment:
    def test_needs_data_or_path(self) -> None:
        with pytest.raises(ValidationError):
            Attachment(filename="x.pdf", content_type="application/pdf")

    def test_from_path_guesses_mime_type(self, tmp_path: Path) -> None:
        path = tmp_path / "Scan.JPG"
        path.write_bytes(b"\xff\xd8\xff")
        attachment = Attachment.from_path(path)
        assert attachment.content_type == "image/jpeg"
        assert attachment.filename == "Scan.JPG"

    def test_from_path_unknown_suffix(self, tmp_path: Path) -> None:
        attachment = Attachment.from_path(tmp_path / "notes.xyz")
        assert attachment.content_type == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_read_from_disk(self, tmp_path: Path) -> None:
        path = tmp_path / "lca.pdf"
        path.write_bytes(b"%PDF-1.7 test")
        assert await Attachment.from_path(path).read() == b"%PDF-1.7 test"

    @pytest.mark.asyncio
    async def test_read_in_memory(self) -> None:
        attachment = Attachment(filename="a.png", content_type="image/png", data=b"abc")
        assert await attachment.read() == b"abc"


class TestSupportingDocs:
    def test_comparable_wage_states(self) -> None:
        assert SupportingDocs().comparable_wage_state() is ComparableWageState.UNSET
        assert (
            SupportingDocs(no_comparable_workers=True).comparable_wage_state()
            is ComparableWageState.NONE_COMPARABLE
        )
        ranged = dict(comparable_workers_count=2, comparable_wage_min=1.0, comparable_wage_max=2.0)
        assert SupportingDocs(**ranged).comparable_wage_state() is ComparableWageState.RANGE
        assert (
            SupportingDocs(**ranged, no_comparable_workers=True).comparable_wage_state()
            is ComparableWageState.CONFLICTING
        )

    def test_partial_range_is_unset(self) -> None:
        docs = SupportingDocs(comparable_workers_count=2, comparable_wage_min=1.0)
        assert docs.comparable_wage_state() is ComparableWageState.UNSET

    def test_at_most_four_posting_locations(self) -> None:
        with pytest.raises(ValidationError):
            SupportingDocs(notice_posting_locations=["a", "b", "c", "d", "e"])

    def test_exemption_type_is_constrained(self) -> None:
        with pytest.raises(ValidationError):
            SupportingDocs(exemption_type="maybe")  # type: ignore[arg-type]

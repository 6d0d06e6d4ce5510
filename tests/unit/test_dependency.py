"""Tests for H-1B dependency thresholds and exemption evaluation."""

from __future__ import annotations

import pytest

from paf_builder.compliance.dependency import (
    THRESHOLD_DESCRIPTIONS,
    WAGE_EXEMPTION_THRESHOLD,
    assess_dependency,
    evaluate_exemption,
    meets_dependency_threshold,
    requires_recruitment_summary,
    threshold_band,
)


class TestDependencyThreshold:
    @pytest.mark.parametrize(
        ("fte", "h1b", "expected"),
        [
            (25, 8, True),
            (25, 7, False),
            (26, 13, True),
            (50, 12, False),
            (51, 8, True),
            (51, 7, False),
            (200, 30, True),
            (200, 29, False),
        ],
    )
    def test_boundaries(self, fte: int, h1b: int, expected: bool) -> None:
        assert meets_dependency_threshold(fte, h1b) is expected

    def test_bands(self) -> None:
        assert threshold_band(25) == THRESHOLD_DESCRIPTIONS[0]
        assert threshold_band(26) == THRESHOLD_DESCRIPTIONS[1]
        assert threshold_band(51) == THRESHOLD_DESCRIPTIONS[2]

    def test_band_descriptions_split_into_two_columns(self) -> None:
        for description in THRESHOLD_DESCRIPTIONS:
            assert len(description.split(": ", 1)) == 2


class TestAssessDependency:
    def test_percentage_and_flags(self) -> None:
        assessment = assess_dependency(40, 10, stated_dependent=False)
        assert assessment.percentage == pytest.approx(25.0)
        assert not assessment.meets_threshold
        assert not assessment.discrepancy

    def test_discrepancy_when_counts_disagree(self) -> None:
        assessment = assess_dependency(20, 10, stated_dependent=False)
        assert assessment.meets_threshold
        assert assessment.discrepancy

    def test_zero_fte_has_zero_percentage(self) -> None:
        assert assess_dependency(0, 0, stated_dependent=False).percentage == 0.0


class TestExemption:
    def test_wage_exempt_at_threshold(self) -> None:
        result = evaluate_exemption("wage", WAGE_EXEMPTION_THRESHOLD)
        assert result.is_exempt
        assert result.basis == "wage-based"

    def test_wage_claim_below_threshold_is_not_exempt(self) -> None:
        result = evaluate_exemption("wage", WAGE_EXEMPTION_THRESHOLD - 1)
        assert not result.is_exempt
        assert result.basis == ""

    def test_degree_exempt_regardless_of_wage(self) -> None:
        result = evaluate_exemption("degree", 10)
        assert result.is_exempt
        assert result.basis == "degree-based"

    def test_none_is_never_exempt(self) -> None:
        assert not evaluate_exemption("none", 500000).is_exempt


class TestRecruitmentRequirement:
    @pytest.mark.parametrize(
        ("dependent", "exemption", "expected"),
        [
            (True, "none", True),
            (True, "wage", False),
            (True, "degree", False),
            (True, None, False),
            (False, "none", False),
        ],
    )
    def test_truth_table(self, dependent: bool, exemption: str | None, expected: bool) -> None:
        assert requires_recruitment_summary(dependent, exemption) is expected

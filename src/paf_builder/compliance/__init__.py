"""Regulatory arithmetic: wage normalization and H-1B dependency."""

from __future__ import annotations

from paf_builder.compliance.dependency import (
    WAGE_EXEMPTION_THRESHOLD,
    DependencyAssessment,
    ExemptionResult,
    assess_dependency,
    evaluate_exemption,
    requires_recruitment_summary,
)
from paf_builder.compliance.wages import (
    WageSummary,
    annualize,
    binding_wage,
    level_table,
    summarize_wages,
    wage_source_date,
)

__all__ = [
    "WAGE_EXEMPTION_THRESHOLD",
    "DependencyAssessment",
    "ExemptionResult",
    "WageSummary",
    "annualize",
    "assess_dependency",
    "binding_wage",
    "evaluate_exemption",
    "level_table",
    "requires_recruitment_summary",
    "summarize_wages",
    "wage_source_date",
]

"""Worksite checks: the secondary worksite flag must agree with the data."""

from __future__ import annotations

from paf_builder.models import CaseRecord
from paf_builder.validation.models import Rule, RuleCategory, ValidationIssue


def check_worksite(case: CaseRecord, rules: list[Rule]) -> list[ValidationIssue]:
    """Flag secondary-worksite combinations that the document will silently drop."""
    issues: list[ValidationIssue] = []
    rules_by_id = {r.rule_id: r for r in rules if r.category == RuleCategory.WORKSITE}
    worksite = case.worksite
    if worksite is None:
        return issues

    if "WS-001" in rules_by_id and worksite.has_secondary_worksite and worksite.secondary_worksite is None:
        issues.append(
            ValidationIssue.from_rule(
                rules_by_id["WS-001"],
                "Secondary worksite is flagged but no secondary address was given; "
                "it will be left out of the document",
                field_path="worksite.secondary_worksite",
            )
        )
    if "WS-002" in rules_by_id and not worksite.has_secondary_worksite and worksite.secondary_worksite is not None:
        issues.append(
            ValidationIssue.from_rule(
                rules_by_id["WS-002"],
                "Secondary worksite address is present but the secondary worksite flag is off",
                field_path="worksite.has_secondary_worksite",
                actual_value="false",
            )
        )
    wage = case.wage
    if (
        "WS-003" in rules_by_id
        and wage is not None
        and wage.has_secondary_wage
        and worksite.secondary is None
    ):
        issues.append(
            ValidationIssue.from_rule(
                rules_by_id["WS-003"],
                "A secondary prevailing wage was recorded without a secondary worksite; "
                "it will not affect the required wage",
                field_path="wage.secondary_wage",
            )
        )

    return issues

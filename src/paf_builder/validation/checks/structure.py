"""Structure checks: the four case sub-records must be present."""

from __future__ import annotations

from paf_builder.models import CaseRecord
from paf_builder.validation.models import Rule, RuleCategory, ValidationIssue


def check_structure(case: CaseRecord, rules: list[Rule]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    rules_by_id = {r.rule_id: r for r in rules if r.category == RuleCategory.STRUCTURE}

    if "ST-001" in rules_by_id:
        rule = rules_by_id["ST-001"]
        for name in case.missing_records():
            issues.append(
                ValidationIssue.from_rule(
                    rule,
                    f"Case record has no {name} section",
                    field_path=name,
                    expected_hint="Employer, job, worksite and wage records are all required",
                )
            )

    return issues

"""Supporting document checks: comparable wages, exemption answer and worksheet."""

from __future__ import annotations

from paf_builder.compliance.dependency import assess_dependency
from paf_builder.models import CaseRecord, ComparableWageState, SupportingDocs
from paf_builder.validation.models import Rule, RuleCategory, ValidationIssue


def check_supporting_docs(
    case: CaseRecord, docs: SupportingDocs, rules: list[Rule]
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    rules_by_id = {r.rule_id: r for r in rules if r.category == RuleCategory.SUPPORTING_DOCS}

    if "SD-001" in rules_by_id:
        issues.extend(_check_comparable_wages(docs, rules_by_id["SD-001"]))
    if "SD-002" in rules_by_id and case.is_h1b_dependent and docs.exemption_type is None:
        issues.append(
            ValidationIssue.from_rule(
                rules_by_id["SD-002"],
                "Employer is H-1B dependent but no exemption type was chosen; "
                "the recruitment summary will be omitted",
                field_path="exemption_type",
                expected_hint="One of: wage, degree, none",
            )
        )
    if "SD-002" in rules_by_id:
        issues.extend(_check_exemption_checkbox(docs, rules_by_id["SD-002"]))
    if "SD-003" in rules_by_id:
        issues.extend(_check_dependency_worksheet(case, docs, rules_by_id["SD-003"]))

    return issues


def _check_comparable_wages(docs: SupportingDocs, rule: Rule) -> list[ValidationIssue]:
    state = docs.comparable_wage_state()
    if state == ComparableWageState.UNSET:
        message = "No comparable wage range was given and 'no comparable workers' is not checked"
    elif state == ComparableWageState.CONFLICTING:
        message = "Both a comparable wage range and 'no comparable workers' were given"
    else:
        return []
    return [
        ValidationIssue.from_rule(
            rule,
            message,
            field_path="comparable_wage_min",
            actual_value=state.value,
            expected_hint="Either a count with a min/max range, or no_comparable_workers",
        )
    ]


def _check_exemption_checkbox(docs: SupportingDocs, rule: Rule) -> list[ValidationIssue]:
    checked = docs.h1b_exemption_checked
    if checked is None or docs.exemption_type is None:
        return []
    claims_exemption = docs.exemption_type != "none"
    if checked == claims_exemption:
        return []
    box = "checked" if checked else "not checked"
    return [
        ValidationIssue.from_rule(
            rule,
            f"The LCA exemption box is {box}, but the exemption type is {docs.exemption_type!r}",
            field_path="exemption_type",
            actual_value=docs.exemption_type,
            expected_hint="wage or degree" if checked else "none",
        )
    ]


def _check_dependency_worksheet(
    case: CaseRecord, docs: SupportingDocs, rule: Rule
) -> list[ValidationIssue]:
    if docs.total_fte_count is None or docs.total_h1b_count is None:
        return []
    assessment = assess_dependency(docs.total_fte_count, docs.total_h1b_count, case.is_h1b_dependent)
    if not assessment.discrepancy:
        return []
    computed = "dependent" if assessment.meets_threshold else "not dependent"
    stated = "dependent" if case.is_h1b_dependent else "not dependent"
    return [
        ValidationIssue.from_rule(
            rule,
            f"Worksheet counts indicate the employer is {computed}, but the case states {stated}",
            field_path="is_h1b_dependent",
            actual_value=f"{docs.total_h1b_count} of {docs.total_fte_count}",
            expected_hint=assessment.band,
        )
    ]

"""Wage checks: employment period, level tables, offered wage and amounts."""

from __future__ import annotations

from paf_builder.compliance.wages import (
    format_currency,
    is_monotonic,
    level_table,
    parse_iso_date,
    summarize_wages,
)
from paf_builder.models import CaseRecord, WageUnit
from paf_builder.validation.models import Rule, RuleCategory, ValidationIssue


def check_wages(case: CaseRecord, rules: list[Rule]) -> list[ValidationIssue]:
    """Run all wage checks; checks needing an absent sub-record are skipped."""
    issues: list[ValidationIssue] = []
    rules_by_id = {r.rule_id: r for r in rules if r.category == RuleCategory.WAGES}

    if "WG-001" in rules_by_id and case.job is not None:
        issues.extend(_check_employment_period(case, rules_by_id["WG-001"]))
    if "WG-002" in rules_by_id and case.wage is not None:
        issues.extend(_check_level_order(case, rules_by_id["WG-002"]))
    if "WG-003" in rules_by_id and None not in (case.job, case.wage):
        issues.extend(_check_offered_wage(case, rules_by_id["WG-003"]))
    if "WG-004" in rules_by_id:
        issues.extend(_check_positive_amounts(case, rules_by_id["WG-004"]))

    return issues


def _check_employment_period(case: CaseRecord, rule: Rule) -> list[ValidationIssue]:
    job = case.job
    assert job is not None
    try:
        begin = parse_iso_date(job.begin_date)
        end = parse_iso_date(job.end_date)
    except ValueError:
        return [
            ValidationIssue.from_rule(
                rule,
                "Employment dates could not be read",
                field_path="job.begin_date",
                actual_value=f"{job.begin_date} / {job.end_date}",
                expected_hint="YYYY-MM-DD",
            )
        ]
    if end > begin:
        return []
    return [
        ValidationIssue.from_rule(
            rule,
            "Employment end date is not after the begin date",
            field_path="job.end_date",
            actual_value=job.end_date,
            expected_hint=f"After {job.begin_date}",
        )
    ]


def _check_level_order(case: CaseRecord, rule: Rule) -> list[ValidationIssue]:
    """Authoritative level figures must not decrease from Level I to Level IV."""
    wage = case.wage
    assert wage is not None
    issues: list[ValidationIssue] = []
    candidates = [("wage.level_data", wage)]
    if wage.secondary_wage is not None:
        candidates.append(("wage.secondary_wage.level_data", wage.secondary_wage))
    for path, source in candidates:
        if source.level_data is None:
            continue
        rows = level_table(
            source.wage_level, source.prevailing_wage, source.prevailing_wage_unit, source.level_data
        )
        if not is_monotonic(rows):
            issues.append(
                ValidationIssue.from_rule(
                    rule,
                    "Wage level figures decrease between levels",
                    field_path=path,
                    actual_value=", ".join(format_currency(r.annual) for r in rows),
                    expected_hint="Level I <= Level II <= Level III <= Level IV",
                )
            )
    return issues


def _check_offered_wage(case: CaseRecord, rule: Rule) -> list[ValidationIssue]:
    assert case.job is not None and case.wage is not None
    summary = summarize_wages(case.job, case.wage, case.worksite)
    required = max(summary.prevailing, summary.secondary_prevailing or 0.0)
    if summary.offered >= required:
        return []
    return [
        ValidationIssue.from_rule(
            rule,
            "Offered wage is below the prevailing wage",
            field_path="job.wage_rate_from",
            actual_value=format_currency(summary.offered, WageUnit.YEAR),
            expected_hint=f"At least {format_currency(required, WageUnit.YEAR)}",
        )
    ]


def _check_positive_amounts(case: CaseRecord, rule: Rule) -> list[ValidationIssue]:
    amounts: list[tuple[str, float]] = []
    if case.job is not None:
        amounts.append(("job.wage_rate_from", case.job.wage_rate_from))
    if case.wage is not None:
        amounts.append(("wage.prevailing_wage", case.wage.prevailing_wage))
        if case.wage.has_secondary_wage and case.wage.secondary_wage is not None:
            amounts.append(
                ("wage.secondary_wage.prevailing_wage", case.wage.secondary_wage.prevailing_wage)
            )
    return [
        ValidationIssue.from_rule(
            rule,
            f"{path} must be greater than zero",
            field_path=path,
            actual_value=str(amount),
        )
        for path, amount in amounts
        if amount <= 0
    ]

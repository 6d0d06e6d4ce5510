"""Validation data models: rules, issues, and the per-case report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class IssueSeverity(str, Enum):
    """How much a validation issue matters. Only errors block a build."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class _OpenStrEnum(str, Enum):
    """String enum that also admits values it does not declare.

    Rules files may name categories or targets a newer release will check;
    those load as ad-hoc members instead of failing the whole file.
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._value_ = value
        member._name_ = value.upper()
        return member


class RuleCategory(_OpenStrEnum):
    """Check module a rule belongs to."""

    STRUCTURE = "structure"
    WORKSITE = "worksite"
    WAGES = "wages"
    SUPPORTING_DOCS = "supporting_docs"


class RuleTarget(_OpenStrEnum):
    """Which part of the case a rule inspects."""

    CASE = "case"
    EMPLOYER = "employer"
    JOB = "job"
    WORKSITE = "worksite"
    WAGE = "wage"
    SUPPORTING_DOCS = "supporting_docs"


@dataclass(frozen=True)
class Rule:
    """One pre-assembly check, identified by a stable ``XX-NNN`` id."""

    rule_id: str
    name: str
    description: str
    category: RuleCategory
    target: RuleTarget
    severity: IssueSeverity = IssueSeverity.WARNING
    enabled: bool = True
    params: dict[str, Any] = field(default_factory=dict)
    version: int = 1


@dataclass
class ValidationIssue:
    """A problem found in a case, pointing at the offending field."""

    rule_id: str
    rule_name: str
    severity: IssueSeverity
    category: RuleCategory
    message: str
    field_path: str = ""
    actual_value: str = ""
    expected_hint: str = ""

    @classmethod
    def from_rule(cls, rule: Rule, message: str, **details: str) -> ValidationIssue:
        return cls(
            rule_id=rule.rule_id,
            rule_name=rule.name,
            severity=rule.severity,
            category=rule.category,
            message=message,
            **details,
        )


@dataclass
class ValidationReport:
    """Everything the rules engine found for one case.

    Counts are derived from ``issues``, so issues appended after the report
    is created are always reflected.
    """

    case_number: str
    issues: list[ValidationIssue] = field(default_factory=list)
    total_rules_evaluated: int = 0
    rules_version: int = 1
    validated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def severity_counts(self) -> Counter[IssueSeverity]:
        return Counter(issue.severity for issue in self.issues)

    @property
    def total_issues(self) -> int:
        return len(self.issues)

    @property
    def error_count(self) -> int:
        return self.severity_counts[IssueSeverity.ERROR]

    @property
    def warning_count(self) -> int:
        return self.severity_counts[IssueSeverity.WARNING]

    @property
    def info_count(self) -> int:
        return self.severity_counts[IssueSeverity.INFO]

    @property
    def passed(self) -> bool:
        """True when nothing blocks assembly; warnings and info are allowed."""
        return self.error_count == 0

    def has_errors(self) -> bool:
        return not self.passed

    def rule_ids(self) -> list[str]:
        return [issue.rule_id for issue in self.issues]

    def issues_by_category(self) -> dict[RuleCategory, list[ValidationIssue]]:
        grouped: dict[RuleCategory, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.category, []).append(issue)
        return grouped

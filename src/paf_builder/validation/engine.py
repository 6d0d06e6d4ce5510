"""Rules engine: loads rules from a backend and dispatches to check modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from paf_builder.models import CaseRecord, SupportingDocs
from paf_builder.validation.checks import (
    check_structure,
    check_supporting_docs,
    check_wages,
    check_worksite,
)
from paf_builder.validation.models import (
    Rule,
    RuleCategory,
    ValidationIssue,
    ValidationReport,
)

if TYPE_CHECKING:
    from paf_builder.validation.backends.protocol import IRulesBackend

log = logging.getLogger(__name__)

_Dispatcher = Callable[[CaseRecord, SupportingDocs, list[Rule]], list[ValidationIssue]]


class RulesEngine:
    """Validates a case and its supporting documents before assembly.

    Each category's check module runs independently; a failure in one
    category is logged and does not block the others.
    """

    def __init__(self, backend: IRulesBackend) -> None:
        self._backend = backend

    def validate(
        self,
        case: CaseRecord,
        docs: Optional[SupportingDocs] = None,
    ) -> ValidationReport:
        """Run all enabled rules against *case* and return a report."""
        docs = docs or SupportingDocs()
        all_rules = self._backend.list_rules(enabled_only=True)

        report = ValidationReport(
            case_number=docs.lca_case_number or case.case_number,
            total_rules_evaluated=len(all_rules),
            rules_version=self._backend.get_version(),
        )

        dispatchers: list[tuple[RuleCategory, _Dispatcher]] = [
            (RuleCategory.STRUCTURE, self._run_structure),
            (RuleCategory.WORKSITE, self._run_worksite),
            (RuleCategory.WAGES, self._run_wages),
            (RuleCategory.SUPPORTING_DOCS, check_supporting_docs),
        ]

        for category, dispatcher in dispatchers:
            category_rules = [r for r in all_rules if r.category == category]
            if not category_rules:
                continue
            try:
                report.issues.extend(dispatcher(case, docs, category_rules))
            except Exception:
                log.exception("Validation category %s failed", category.value)

        log.info(
            "Validated case %s: %d issue(s), %d error(s)",
            report.case_number or "(unnumbered)",
            report.total_issues,
            report.error_count,
        )
        return report

    # ── Category dispatchers ────────────────────────────────────────

    @staticmethod
    def _run_structure(case: CaseRecord, docs: SupportingDocs, rules: list[Rule]) -> list[ValidationIssue]:
        return check_structure(case, rules)

    @staticmethod
    def _run_worksite(case: CaseRecord, docs: SupportingDocs, rules: list[Rule]) -> list[ValidationIssue]:
        return check_worksite(case, rules)

    @staticmethod
    def _run_wages(case: CaseRecord, docs: SupportingDocs, rules: list[Rule]) -> list[ValidationIssue]:
        return check_wages(case, rules)

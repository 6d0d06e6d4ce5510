"""Tests for MemoryRulesBackend and the built-in ruleset."""

from __future__ import annotations

import pytest

from paf_builder.validation.backends.memory_backend import MemoryRulesBackend
from paf_builder.validation.backends.protocol import IRulesBackend
from paf_builder.validation.defaults import DEFAULT_RULES
from paf_builder.validation.models import IssueSeverity, Rule, RuleCategory, RuleTarget


def _rule(rule_id: str, category: RuleCategory, *, enabled: bool = True) -> Rule:
    return Rule(
        rule_id=rule_id,
        name=f"Rule {rule_id}",
        description="test",
        category=category,
        target=RuleTarget.CASE,
        severity=IssueSeverity.WARNING,
        enabled=enabled,
    )


class TestMemoryRulesBackend:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryRulesBackend(), IRulesBackend)

    def test_list_empty(self) -> None:
        assert MemoryRulesBackend().list_rules() == []

    def test_filter_by_category(self) -> None:
        backend = MemoryRulesBackend(
            [_rule("A", RuleCategory.WAGES), _rule("B", RuleCategory.WORKSITE)]
        )
        result = backend.list_rules(category=RuleCategory.WAGES)
        assert [r.rule_id for r in result] == ["A"]

    def test_filter_enabled_only(self) -> None:
        backend = MemoryRulesBackend(
            [_rule("A", RuleCategory.WAGES), _rule("B", RuleCategory.WAGES, enabled=False)]
        )
        assert len(backend.list_rules()) == 1
        assert len(backend.list_rules(enabled_only=False)) == 2

    def test_get_rule(self) -> None:
        backend = MemoryRulesBackend([_rule("A", RuleCategory.WAGES)])
        assert backend.get_rule("A").name == "Rule A"

    def test_get_rule_not_found(self) -> None:
        with pytest.raises(KeyError):
            MemoryRulesBackend().get_rule("missing")

    def test_version(self) -> None:
        assert MemoryRulesBackend(version=4).get_version() == 4


class TestDefaultRules:
    def test_unique_ids(self) -> None:
        ids = [r.rule_id for r in DEFAULT_RULES]
        assert len(ids) == len(set(ids)) == 11

    def test_error_rules(self) -> None:
        errors = {r.rule_id for r in DEFAULT_RULES if r.severity == IssueSeverity.ERROR}
        assert errors == {"ST-001", "WG-001", "WG-004"}

    def test_every_category_covered(self) -> None:
        assert {r.category for r in DEFAULT_RULES} == set(RuleCategory)

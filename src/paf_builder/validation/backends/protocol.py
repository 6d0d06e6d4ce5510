"""Contract shared by the rules stores, plus the filter they all apply."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from paf_builder.validation.models import Rule, RuleCategory


@runtime_checkable
class IRulesBackend(Protocol):
    """Somewhere the rules engine can read a versioned ruleset from."""

    def list_rules(
        self,
        *,
        category: RuleCategory | None = None,
        enabled_only: bool = True,
    ) -> list[Rule]: ...

    def get_rule(self, rule_id: str) -> Rule:
        """Look up one rule; unknown ids raise ``KeyError``."""
        ...

    def get_version(self) -> int: ...


def select_rules(
    rules: Iterable[Rule],
    category: RuleCategory | None,
    enabled_only: bool,
) -> list[Rule]:
    """Keep declaration order; drop disabled rules and other categories as asked."""
    selected = []
    for rule in rules:
        if enabled_only and not rule.enabled:
            continue
        if category is not None and rule.category != category:
            continue
        selected.append(rule)
    return selected

"""Dict-held ruleset: the built-in rules, parsed rule files, and tests."""

from __future__ import annotations

from typing import Iterable

from paf_builder.validation.backends.protocol import select_rules
from paf_builder.validation.models import Rule, RuleCategory


class MemoryRulesBackend:
    def __init__(self, rules: Iterable[Rule] = (), *, version: int = 1) -> None:
        self._version = version
        self._by_id: dict[str, Rule] = {}
        for rule in rules:
            # later definitions of an id win
            self._by_id[rule.rule_id] = rule

    def __len__(self) -> int:
        return len(self._by_id)

    def list_rules(
        self,
        *,
        category: RuleCategory | None = None,
        enabled_only: bool = True,
    ) -> list[Rule]:
        return select_rules(self._by_id.values(), category, enabled_only)

    def get_rule(self, rule_id: str) -> Rule:
        try:
            return self._by_id[rule_id]
        except KeyError:
            raise KeyError(f"No rule with id {rule_id!r}") from None

    def get_version(self) -> int:
        return self._version

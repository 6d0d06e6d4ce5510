"""Rules read from a JSON file on disk.

Expected shape::

    {"version": 3, "rules": [{"rule_id": "WG-003", "name": "...", "category": "wages", ...}]}

A rules file replaces the built-in ruleset outright; rules it leaves out are
not run at all.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from paf_builder.exceptions import ConfigurationError
from paf_builder.validation.backends.memory_backend import MemoryRulesBackend
from paf_builder.validation.models import (
    IssueSeverity,
    Rule,
    RuleCategory,
    RuleTarget,
)

log = logging.getLogger(__name__)


def rule_from_mapping(entry: Mapping[str, Any], default_version: int) -> Rule:
    """Build a Rule from one JSON entry. Missing keys raise ``KeyError``."""
    return Rule(
        rule_id=entry["rule_id"],
        name=entry["name"],
        description=entry.get("description", ""),
        category=RuleCategory(entry["category"]),
        target=RuleTarget(entry.get("target", RuleTarget.CASE.value)),
        severity=IssueSeverity(entry.get("severity", IssueSeverity.WARNING.value)),
        enabled=bool(entry.get("enabled", True)),
        params=dict(entry.get("params") or {}),
        version=entry.get("version", default_version),
    )


class FileRulesBackend:
    """Parses *path* on first use and serves rules from memory afterwards."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._loaded: MemoryRulesBackend | None = None

    def list_rules(
        self,
        *,
        category: RuleCategory | None = None,
        enabled_only: bool = True,
    ) -> list[Rule]:
        return self._store().list_rules(category=category, enabled_only=enabled_only)

    def get_rule(self, rule_id: str) -> Rule:
        try:
            return self._store().get_rule(rule_id)
        except KeyError:
            raise KeyError(f"Rule {rule_id!r} is not defined in {self._path}") from None

    def get_version(self) -> int:
        return self._store().get_version()

    def _store(self) -> MemoryRulesBackend:
        if self._loaded is None:
            self._loaded = self._load()
        return self._loaded

    def _load(self) -> MemoryRulesBackend:
        if not self._path.is_file():
            raise FileNotFoundError(f"Rules file not found: {self._path}")
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in rules file {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ConfigurationError(f"{self._path} must hold a JSON object")

        version = int(payload.get("version", 1))
        rules = []
        for index, entry in enumerate(payload.get("rules", [])):
            try:
                rules.append(rule_from_mapping(entry, version))
            except (KeyError, TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"Malformed rule #{index} in {self._path}: {exc}"
                ) from exc

        store = MemoryRulesBackend(rules, version=version)
        log.info("Loaded %d rule(s) from %s, version %d", len(store), self._path, version)
        return store

"""Validation module: rules engine, backends, and check modules.

Factory function::

    from paf_builder.validation import create_rules_engine
    engine = create_rules_engine(settings)
    if engine:
        report = engine.validate(case, supporting_docs)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from paf_builder.validation.backends import FileRulesBackend, MemoryRulesBackend
from paf_builder.validation.defaults import DEFAULT_RULES, DEFAULT_RULES_VERSION
from paf_builder.validation.engine import RulesEngine
from paf_builder.validation.models import (
    IssueSeverity,
    Rule,
    RuleCategory,
    RuleTarget,
    ValidationIssue,
    ValidationReport,
)

if TYPE_CHECKING:
    from paf_builder.core.config import AppSettings


def create_rules_engine(settings: Optional[AppSettings] = None) -> RulesEngine | None:
    """Create a RulesEngine from application settings, or None if disabled."""
    if settings is None:
        return RulesEngine(MemoryRulesBackend(DEFAULT_RULES, version=DEFAULT_RULES_VERSION))
    if not settings.validation.enabled:
        return None
    if settings.validation.rules_path is not None:
        return RulesEngine(FileRulesBackend(settings.validation.rules_path))
    return RulesEngine(MemoryRulesBackend(DEFAULT_RULES, version=DEFAULT_RULES_VERSION))


__all__ = [
    "DEFAULT_RULES",
    "IssueSeverity",
    "Rule",
    "RuleCategory",
    "RuleTarget",
    "RulesEngine",
    "ValidationIssue",
    "ValidationReport",
    "create_rules_engine",
]

"""Per-category check modules; each takes the case and its rules and returns issues."""

from __future__ import annotations

from paf_builder.validation.checks.structure import check_structure
from paf_builder.validation.checks.supporting_docs import check_supporting_docs
from paf_builder.validation.checks.wages import check_wages
from paf_builder.validation.checks.worksite import check_worksite

__all__ = ["check_structure", "check_supporting_docs", "check_wages", "check_worksite"]

"""Built-in ruleset used when no rules file is configured."""

from __future__ import annotations

from paf_builder.validation.models import IssueSeverity, Rule, RuleCategory, RuleTarget

DEFAULT_RULES_VERSION = 1

DEFAULT_RULES: list[Rule] = [
    Rule(
        rule_id="ST-001",
        name="Required sub-records",
        description="Employer, job, worksite and wage records must all be present.",
        category=RuleCategory.STRUCTURE,
        target=RuleTarget.CASE,
        severity=IssueSeverity.ERROR,
    ),
    Rule(
        rule_id="WS-001",
        name="Secondary worksite data",
        description="A flagged secondary worksite needs an address.",
        category=RuleCategory.WORKSITE,
        target=RuleTarget.WORKSITE,
    ),
    Rule(
        rule_id="WS-002",
        name="Secondary worksite flag",
        description="A secondary worksite address is ignored unless the flag is set.",
        category=RuleCategory.WORKSITE,
        target=RuleTarget.WORKSITE,
        severity=IssueSeverity.INFO,
    ),
    Rule(
        rule_id="WS-003",
        name="Secondary wage without worksite",
        description="A secondary prevailing wage only applies to a secondary worksite.",
        category=RuleCategory.WORKSITE,
        target=RuleTarget.WAGE,
    ),
    Rule(
        rule_id="WG-001",
        name="Employment period",
        description="The employment end date must fall after the begin date.",
        category=RuleCategory.WAGES,
        target=RuleTarget.JOB,
        severity=IssueSeverity.ERROR,
    ),
    Rule(
        rule_id="WG-002",
        name="Wage level order",
        description="Authoritative level figures must not decrease from Level I to Level IV.",
        category=RuleCategory.WAGES,
        target=RuleTarget.WAGE,
    ),
    Rule(
        rule_id="WG-003",
        name="Offered wage below prevailing",
        description="The offered wage should meet the prevailing wage for every worksite.",
        category=RuleCategory.WAGES,
        target=RuleTarget.JOB,
    ),
    Rule(
        rule_id="WG-004",
        name="Positive wage amounts",
        description="Offered and prevailing wage amounts must be greater than zero.",
        category=RuleCategory.WAGES,
        target=RuleTarget.WAGE,
        severity=IssueSeverity.ERROR,
    ),
    Rule(
        rule_id="SD-001",
        name="Comparable wage answer",
        description="Give either a comparable wage range or check 'no comparable workers'.",
        category=RuleCategory.SUPPORTING_DOCS,
        target=RuleTarget.SUPPORTING_DOCS,
    ),
    Rule(
        rule_id="SD-002",
        name="Dependent employer exemption",
        description=(
            "A dependent employer must say whether the worker is exempt, and the answer "
            "must agree with the exemption box on the LCA."
        ),
        category=RuleCategory.SUPPORTING_DOCS,
        target=RuleTarget.SUPPORTING_DOCS,
    ),
    Rule(
        rule_id="SD-003",
        name="Dependency worksheet",
        description="Worksheet headcounts should agree with the stated dependency status.",
        category=RuleCategory.SUPPORTING_DOCS,
        target=RuleTarget.SUPPORTING_DOCS,
    ),
]

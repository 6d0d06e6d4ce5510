"""Inclusion predicates and section planning."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from paf_builder.compliance.dependency import requires_recruitment_summary
from paf_builder.exceptions import AssemblyError
from paf_builder.models import CaseRecord, SupportingDocs
from paf_builder.sections.base import SECTION_ORDER, SectionName, SectionPredicate

log = logging.getLogger(__name__)

SectionToggles = Mapping[Union[SectionName, str], bool]

# The cover carries the table of contents and cannot be switched off.
MANDATORY_SECTIONS = frozenset({SectionName.COVER})


def _always(_case: CaseRecord, _docs: SupportingDocs) -> bool:
    return True


def _recruitment_required(case: CaseRecord, docs: SupportingDocs) -> bool:
    return requires_recruitment_summary(case.is_h1b_dependent, docs.exemption_type)


SECTION_PREDICATES: dict[SectionName, SectionPredicate] = {
    section: _always for section in SECTION_ORDER
}
SECTION_PREDICATES[SectionName.RECRUITMENT_SUMMARY] = _recruitment_required


def plan_sections(
    case: CaseRecord,
    docs: SupportingDocs,
    toggles: Optional[SectionToggles] = None,
) -> list[SectionName]:
    """Decide, once and up front, which sections will be rendered.

    Toggles can only switch a section off; a ``True`` toggle never forces in
    a section whose predicate fails, and order always follows the catalogue.
    Unknown toggle keys raise :class:`AssemblyError` (a ``ValueError``).
    """
    disabled: set[SectionName] = set()
    for key, enabled in (toggles or {}).items():
        try:
            section = SectionName(key)
        except ValueError as exc:
            raise AssemblyError(f"Unknown section toggle: {key!r}") from exc
        if enabled:
            continue
        if section in MANDATORY_SECTIONS:
            log.warning("Section %s cannot be disabled; ignoring toggle", section.value)
            continue
        disabled.add(section)

    planned = [
        section
        for section in SECTION_ORDER
        if section not in disabled and SECTION_PREDICATES[section](case, docs)
    ]
    log.debug("Planned sections: %s", [s.value for s in planned])
    return planned

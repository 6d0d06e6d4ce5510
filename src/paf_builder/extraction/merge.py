"""Fold scan results into case drafts and supporting documents.

Scans only ever fill gaps. A value the user already entered is never
overwritten, and the scanned dependency flag is never copied: the user
states dependency explicitly.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from paf_builder.extraction.models import LCAScanResult
from paf_builder.extraction.protocols import ILCAScanner
from paf_builder.models import Attachment, CaseStatus, SupportingDocs, VisaType, WageUnit

log = logging.getLogger(__name__)

# (scan field, path in the case draft)
FIELD_MAP: list[tuple[str, tuple[str, ...]]] = [
    ("case_number", ("case_number",)),
    ("willful_violator", ("is_willful_violator",)),
    ("employer_name", ("employer", "legal_name")),
    ("employer_address", ("employer", "address1")),
    ("employer_city", ("employer", "city")),
    ("employer_state", ("employer", "state")),
    ("employer_postal_code", ("employer", "postal_code")),
    ("employer_phone", ("employer", "telephone")),
    ("employer_fein", ("employer", "fein")),
    ("naics_code", ("employer", "naics_code")),
    ("job_title", ("job", "title")),
    ("soc_code", ("job", "soc_code")),
    ("soc_title", ("job", "soc_title")),
    ("is_full_time", ("job", "is_full_time")),
    ("total_workers", ("job", "workers_needed")),
    ("begin_date", ("job", "begin_date")),
    ("end_date", ("job", "end_date")),
    ("wage_rate_from", ("job", "wage_rate_from")),
    ("wage_rate_to", ("job", "wage_rate_to")),
    ("prevailing_wage", ("wage", "prevailing_wage")),
    ("wage_level", ("wage", "wage_level")),
    ("worksite_address", ("worksite", "address1")),
    ("worksite_city", ("worksite", "city")),
    ("worksite_state", ("worksite", "state")),
    ("worksite_postal_code", ("worksite", "postal_code")),
    ("worksite_county", ("worksite", "county")),
    ("has_secondary_worksite", ("worksite", "has_secondary_worksite")),
    ("secondary_worksite_address", ("worksite", "secondary_worksite", "address1")),
    ("secondary_worksite_city", ("worksite", "secondary_worksite", "city")),
    ("secondary_worksite_state", ("worksite", "secondary_worksite", "state")),
    ("secondary_worksite_postal_code", ("worksite", "secondary_worksite", "postal_code")),
    ("secondary_worksite_county", ("worksite", "secondary_worksite", "county")),
]

# Scan fields that only count when they name a known enum value.
ENUM_FIELD_MAP: list[tuple[str, tuple[str, ...], type]] = [
    ("case_status", ("case_status",), CaseStatus),
    ("visa_class", ("visa_type",), VisaType),
    ("wage_unit", ("job", "wage_unit"), WageUnit),
    ("prevailing_wage_unit", ("wage", "prevailing_wage_unit"), WageUnit),
]


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _normalize_enum(raw: str, enum_type: type) -> Optional[str]:
    for member in enum_type:
        if member.value.lower() == raw.strip().lower():
            return member.value
    return None


def _fill(draft: dict[str, Any], path: tuple[str, ...], value: Any) -> bool:
    node = draft
    for key in path[:-1]:
        child = node.get(key)
        if child is None:
            child = node[key] = {}
        node = child
    if not _is_empty(node.get(path[-1])):
        return False
    node[path[-1]] = value
    return True


def merge_scan_into_draft(draft: dict[str, Any], scan: LCAScanResult) -> dict[str, Any]:
    """Return a copy of *draft* with empty fields filled from *scan*.

    *draft* has the JSON shape of a :class:`~paf_builder.models.CaseRecord`.
    The input dict is not modified.
    """
    merged = copy.deepcopy(draft)
    filled: list[str] = []

    for field, path in FIELD_MAP:
        value = getattr(scan, field)
        if not _is_empty(value) and _fill(merged, path, value):
            filled.append(".".join(path))

    for field, path, enum_type in ENUM_FIELD_MAP:
        raw = getattr(scan, field)
        if _is_empty(raw):
            continue
        value = _normalize_enum(raw, enum_type)
        if value is None:
            log.warning("Ignoring scanned %s %r: not a recognized value", field, raw)
            continue
        if _fill(merged, path, value):
            filled.append(".".join(path))

    if scan.h1b_dependent is not None and scan.h1b_dependent != merged.get("is_h1b_dependent"):
        log.info("Scanned H-1B dependency flag (%s) left for the user to confirm", scan.h1b_dependent)

    log.debug("Scan filled %d draft field(s): %s", len(filled), filled)
    return merged


def apply_scan_to_supporting_docs(docs: SupportingDocs, scan: LCAScanResult) -> SupportingDocs:
    """Fill the LCA case number, exemption checkbox and dependency date when unset."""
    updates: dict[str, Any] = {}
    if not docs.lca_case_number and scan.case_number:
        updates["lca_case_number"] = scan.case_number
    if docs.h1b_exemption_checked is None and scan.h1b_exemption_checked is not None:
        updates["h1b_exemption_checked"] = scan.h1b_exemption_checked
    if not docs.dependency_calculation_date:
        calculation_date = scan.lca_received_date or scan.begin_date
        if calculation_date:
            updates["dependency_calculation_date"] = calculation_date
    if not updates:
        return docs
    return docs.model_copy(update=updates)


async def scan_attachment(scanner: ILCAScanner, attachment: Attachment) -> LCAScanResult:
    """Read *attachment* and pass its bytes to *scanner*."""
    data = await attachment.read()
    result = await scanner.scan(data)
    if result.case_status and not result.is_certified:
        log.warning("Scanned LCA %s has status %s", attachment.filename, result.case_status)
    return result

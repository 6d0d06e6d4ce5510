"""paf-builder: Public Access File assembly for H-1B labor condition applications.

Public API::

    from paf_builder import (
        AppSettings,
        CaseRecord, SupportingDocs, Attachment,
        assemble, create_rules_engine,
        to_blob, save_to_file, open_for_print,
    )

    document = await assemble(case, supporting_docs)
    save_to_file(document)
"""

from __future__ import annotations

from paf_builder.composer import assemble
from paf_builder.core.config import AppSettings
from paf_builder.exceptions import MissingRecordError, PAFError, StructuralError
from paf_builder.layout.document import AssembledDocument
from paf_builder.models import Attachment, CaseRecord, SupportingDocs
from paf_builder.output import open_for_print, save_to_file, to_blob
from paf_builder.sections import SectionName, plan_sections
from paf_builder.validation import create_rules_engine

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "AssembledDocument",
    "Attachment",
    "CaseRecord",
    "MissingRecordError",
    "PAFError",
    "SectionName",
    "StructuralError",
    "SupportingDocs",
    "assemble",
    "create_rules_engine",
    "open_for_print",
    "plan_sections",
    "save_to_file",
    "to_blob",
]

"""Section composer: turns a case record into an assembled Public Access File.

One call builds one document. The composer checks that the case is
structurally complete, resolves the signatory once, plans the sections once,
then runs each planned section in catalogue order against a single shared
:class:`LayoutContext`. Sections run strictly one after another; a section
that awaits (attachment reads, rasterization) suspends the whole assembly.
"""

from __future__ import annotations

import inspect
import logging
from datetime import datetime
from typing import Callable, Optional

from paf_builder.core.config import AppSettings
from paf_builder.embedding.embedder import AttachmentEmbedder
from paf_builder.exceptions import MissingRecordError, PAFError, SectionRenderError
from paf_builder.layout.context import LayoutContext
from paf_builder.layout.document import AssembledDocument
from paf_builder.models import CaseRecord, SupportingDocs
from paf_builder.sections import (
    SECTION_RENDERERS,
    SectionContext,
    SectionToggles,
    plan_sections,
)
from paf_builder.signatures.directory import ISignatoryDirectory
from paf_builder.signatures.renderer import SignatureRenderer
from paf_builder.signatures.resolution import resolve_signatory

log = logging.getLogger(__name__)


def check_structure(case: CaseRecord) -> None:
    """Raise :class:`MissingRecordError` naming every absent sub-record."""
    missing = case.missing_records()
    if missing:
        raise MissingRecordError(missing)


async def assemble(
    case: CaseRecord,
    supporting_docs: Optional[SupportingDocs] = None,
    section_toggles: Optional[SectionToggles] = None,
    *,
    directory: Optional[ISignatoryDirectory] = None,
    settings: Optional[AppSettings] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> AssembledDocument:
    """Assemble the Public Access File for *case*.

    Args:
        case: The LCA case record. All four sub-records must be present.
        supporting_docs: Compliance answers and attachments; defaults to empty.
        section_toggles: Per-section on/off switches. They can only disable.
        directory: Where to look up the authorized signatory.
        settings: Formatting, embedding and signatory configuration.
        clock: Source of "now" for dates printed in the document.

    Returns:
        A freshly built document with every page stamped "Page i of N".

    Raises:
        MissingRecordError: Before any page is written, if the case is incomplete.
        SectionRenderError: If a section fails part way; no partial document is returned.
    """
    check_structure(case)
    docs = supporting_docs or SupportingDocs()
    settings = settings or AppSettings()
    clock = clock or datetime.now
    today = clock().date()

    signatory = await resolve_signatory(
        directory,
        case.employer.signatory_id if case.employer else None,
        settings.signatory,
    )
    planned = plan_sections(case, docs, section_toggles)

    layout = LayoutContext(settings.pdf)
    ctx = SectionContext(
        layout=layout,
        case=case,
        docs=docs,
        signatory=signatory,
        embedder=AttachmentEmbedder(settings.embedding),
        signatures=SignatureRenderer(settings.pdf, clock=clock),
        settings=settings,
        today=today,
    )

    for section in planned:
        pages_before = len(layout.pages)
        try:
            result = SECTION_RENDERERS[section](ctx)
            if inspect.isawaitable(result):
                await result
        except PAFError:
            raise
        except Exception as exc:
            raise SectionRenderError(section.value, exc) from exc
        log.debug(
            "Rendered section %s (%d page(s))", section.value, len(layout.pages) - pages_before
        )

    layout.finalize()
    log.info(
        "Assembled PAF for %s: %d sections, %d pages",
        case.employer.legal_name if case.employer else "",
        len(planned),
        len(layout.pages),
    )
    return AssembledDocument(
        pages=layout.pages,
        sections=layout.sections,
        title=settings.pdf.title,
        employer_name=case.employer.legal_name if case.employer else "",
        generated_on=today,
    )

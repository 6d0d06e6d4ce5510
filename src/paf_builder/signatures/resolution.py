"""Resolve the one signatory a document is signed with."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from paf_builder.core.config import SignatoryConfig
from paf_builder.signatures.directory import ISignatoryDirectory
from paf_builder.signatures.models import Signatory, fallback_signatory

log = logging.getLogger(__name__)


async def resolve_signatory(
    directory: ISignatoryDirectory | None,
    signatory_id: str | None = None,
    config: SignatoryConfig | None = None,
) -> Signatory:
    """Pick a signatory: explicit id, then default, then any, then the fallback identity.

    The default tier tries the configured ``default_id`` before the
    directory's own default flag. A tier that raises is logged and skipped;
    this function always returns a signatory.
    """
    config = config or SignatoryConfig()
    if directory is not None:
        tiers: list[tuple[str, Callable[[], Awaitable[Optional[Signatory]]]]] = []
        if signatory_id:
            tiers.append((f"id={signatory_id}", lambda: directory.get_by_id(signatory_id)))
        if config.default_id:
            default_id = config.default_id
            tiers.append((f"configured default={default_id}", lambda: directory.get_by_id(default_id)))
        tiers.append(("directory default", directory.get_default))
        tiers.append(("any", directory.get_any))

        for label, lookup in tiers:
            try:
                found = await lookup()
            except Exception:
                log.warning("Signatory lookup (%s) failed", label, exc_info=True)
                continue
            if found is not None:
                log.debug("Resolved signatory %s via %s", found.id, label)
                return found

    log.info("No signatory resolved; using fallback identity")
    return fallback_signatory(config.fallback_name, config.fallback_title)

"""Signatory directory protocol and its memory/file backends."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pydantic import ValidationError

from paf_builder.exceptions import SignatoryLookupError
from paf_builder.signatures.models import (
    ImageSignatory,
    Signatory,
    SignatoryRecord,
    TextSignatory,
)

log = logging.getLogger(__name__)


@runtime_checkable
class ISignatoryDirectory(Protocol):
    """Lookup contract for authorized signatories.

    Resolution order across these calls is the caller's responsibility.
    """

    async def get_by_id(self, signatory_id: str) -> Optional[Signatory]:
        """Return the signatory with *signatory_id*, or None."""
        ...

    async def get_default(self) -> Optional[Signatory]:
        """Return the signatory flagged as default, or None."""
        ...

    async def get_any(self) -> Optional[Signatory]:
        """Return any available signatory, or None when the directory is empty."""
        ...


class MemorySignatoryDirectory:
    """List-backed directory for tests and embedded use."""

    def __init__(
        self,
        signatories: list[Signatory] | None = None,
        *,
        default_id: str | None = None,
    ) -> None:
        self._signatories = {s.id: s for s in (signatories or [])}
        self._default_id = default_id

    async def get_by_id(self, signatory_id: str) -> Optional[Signatory]:
        return self._signatories.get(signatory_id)

    async def get_default(self) -> Optional[Signatory]:
        if self._default_id is None:
            return None
        return self._signatories.get(self._default_id)

    async def get_any(self) -> Optional[Signatory]:
        return next(iter(self._signatories.values()), None)


class FileSignatoryDirectory:
    """Loads signatories from a JSON file on disk.

    The file holds either a list of records or ``{"signatories": [...]}``.
    Signature image paths are resolved relative to the JSON file. The file
    is lazy-loaded on first lookup.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._records: list[SignatoryRecord] | None = None
        self._cache: dict[str, Signatory] = {}

    async def get_by_id(self, signatory_id: str) -> Optional[Signatory]:
        records = await self._load()
        for record in records:
            if record.id == signatory_id:
                return await self._to_signatory(record)
        return None

    async def get_default(self) -> Optional[Signatory]:
        records = await self._load()
        for record in records:
            if record.is_default:
                return await self._to_signatory(record)
        return None

    async def get_any(self) -> Optional[Signatory]:
        records = await self._load()
        if not records:
            return None
        return await self._to_signatory(records[0])

    async def _load(self) -> list[SignatoryRecord]:
        if self._records is None:
            self._records = await asyncio.to_thread(self._read_records)
        return self._records

    def _read_records(self) -> list[SignatoryRecord]:
        if not self._path.is_file():
            raise SignatoryLookupError(f"Signatory file not found: {self._path}")
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SignatoryLookupError(f"Invalid JSON in {self._path}: {exc}") from exc

        items = raw.get("signatories", []) if isinstance(raw, dict) else raw
        if not isinstance(items, list):
            raise SignatoryLookupError(f"Expected a list of signatories in {self._path}")
        try:
            records = [SignatoryRecord.model_validate(item) for item in items]
        except ValidationError as exc:
            raise SignatoryLookupError(f"Malformed signatory record in {self._path}: {exc}") from exc
        log.debug("Loaded %d signatories from %s", len(records), self._path)
        return records

    async def _to_signatory(self, record: SignatoryRecord) -> Signatory:
        if record.id in self._cache:
            return self._cache[record.id]
        signatory: Signatory = TextSignatory(id=record.id, name=record.name, title=record.title)
        if record.signature_image:
            image_path = self._path.parent / record.signature_image
            try:
                image = await asyncio.to_thread(image_path.read_bytes)
            except OSError as exc:
                log.warning(
                    "Signature image for %s unreadable (%s); using text signature",
                    record.id,
                    exc,
                )
            else:
                signatory = ImageSignatory(
                    id=record.id, name=record.name, title=record.title, image=image
                )
        self._cache[record.id] = signatory
        return signatory

"""Protocol for LCA scanners."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from paf_builder.extraction.models import LCAScanResult


@runtime_checkable
class ILCAScanner(Protocol):
    """Reads structured fields off an uploaded LCA document."""

    async def scan(self, data: bytes) -> LCAScanResult: ...

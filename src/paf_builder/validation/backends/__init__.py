"""Rules storage backends."""

from __future__ import annotations

from paf_builder.validation.backends.file_backend import FileRulesBackend
from paf_builder.validation.backends.memory_backend import MemoryRulesBackend
from paf_builder.validation.backends.protocol import IRulesBackend

__all__ = ["FileRulesBackend", "IRulesBackend", "MemoryRulesBackend"]

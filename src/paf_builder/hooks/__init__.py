"""Logging setup."""

from __future__ import annotations

from paf_builder.hooks.logging_config import case_context, setup_logging

__all__ = ["case_context", "setup_logging"]

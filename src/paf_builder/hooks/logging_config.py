"""structlog setup for the ``paf`` commands.

Every ``logging.getLogger(__name__)`` call in the package keeps working; its
records are rendered by structlog, either as coloured console lines or as
one JSON object per line. A case number bound with :func:`case_context`
appears on every record emitted while it is active.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

import structlog

if TYPE_CHECKING:
    from paf_builder.core.config import ObservabilityConfig

# reportlab and Pillow log font and plugin discovery at DEBUG
_NOISY_LOGGERS = ("PIL", "reportlab", "fontTools")


def _pick_renderer(log_format: str) -> structlog.types.Processor:
    fmt = log_format.lower()
    if fmt == "auto":
        fmt = "console" if sys.stderr.isatty() else "json"
    if fmt == "console":
        return structlog.dev.ConsoleRenderer()
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    raise ValueError(f"Unknown log format {log_format!r}; use auto, console or json")


def setup_logging(config: ObservabilityConfig) -> None:
    """Install one stderr handler on the root logger, replacing any others."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _pick_renderer(config.log_format),
            ],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("paf_builder").setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


@contextmanager
def case_context(case_number: str) -> Iterator[None]:
    """Tag log records emitted inside the block with *case_number*."""
    with structlog.contextvars.bound_contextvars(case_number=case_number or "(unnumbered)"):
        yield

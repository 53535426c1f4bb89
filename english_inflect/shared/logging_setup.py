"""
english_inflect/shared/logging_setup.py
---------------------------------------

Central logging configuration for english_inflect.

- One place to configure structlog's renderer and level.
- One way to get a logger in any module:

      from english_inflect.shared.logging_setup import get_logger
      log = get_logger(__name__)

      log.debug("noun_override_defined", singular="cactus", plural="cactuses")

- Level and renderer come from Settings (INFLECT_LOG_LEVEL,
  INFLECT_LOG_FORMAT).

Implementation notes
====================

- `init_logging` is idempotent; calling it multiple times is safe.
- An application that already configured structlog keeps its configuration
  unless `force=True` is passed.
- The default level is WARNING, so library debug events stay quiet.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from english_inflect.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level: Optional[str]) -> int:
    """Map a level name to a logging level, falling back to WARNING."""
    name = (level or settings.LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def init_logging(
    level: Optional[str] = None,
    log_format: Optional[LogFormat] = None,
    *,
    force: bool = False,
) -> None:
    """
    Configure structlog for the library.

    Args:
        level:
            Level name (e.g. "DEBUG"). Defaults to settings.LOG_LEVEL.
        log_format:
            LogFormat.CONSOLE or LogFormat.JSON. Defaults to settings.LOG_FORMAT.
        force:
            Reconfigure even if logging was already set up (by us or by the
            host application).
    """
    global _INITIALIZED

    if not force and (_INITIALIZED or structlog.is_configured()):
        _INITIALIZED = True
        return

    fmt = log_format or settings.LOG_FORMAT
    renderer: Any
    if fmt == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str) -> Any:
    """
    Get a structlog logger bound to ``name``, initializing logging on first use.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(module=name)


__all__ = ["init_logging", "get_logger"]

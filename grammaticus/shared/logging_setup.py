"""
grammaticus/shared/logging_setup.py
-----------------------------------

Central structlog configuration.

Usage
=====

In a module:

    import logging

    import structlog

    logger = structlog.wrap_logger(logging.getLogger(__name__))
    logger.info("labels_merged", count=12)

In an embedding application (optional):

    from grammaticus.shared.logging_setup import configure_logging

    configure_logging()

Implementation notes
====================

- Library events go through the stdlib "grammaticus" logger, which carries
  only a NullHandler until configure_logging is called. An unconfigured
  library prints nothing.
- `configure_logging` is idempotent; pass force=True to reconfigure.
- Level and renderer come from settings (GRAMMATICUS_LOG_LEVEL,
  GRAMMATICUS_LOG_FORMAT) unless given explicitly.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from grammaticus.shared.config import LogFormat, settings

LOGGER_NAME = "grammaticus"

# Internal flag to avoid re-configuring logging multiple times
_CONFIGURED = False
_HANDLER: Optional[logging.Handler] = None


def _level_from_name(name: str) -> int:
    return getattr(logging, (name or "INFO").upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[LogFormat] = None,
    *,
    force: bool = False,
) -> None:
    """
    Configure structlog processors and the "grammaticus" stdlib logger.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        log_format: JSON or CONSOLE. Defaults to settings.LOG_FORMAT.
        force: Reconfigure even if already configured.
    """
    global _CONFIGURED, _HANDLER

    if _CONFIGURED and not force:
        return

    level_no = _level_from_name(level or settings.LOG_LEVEL)
    fmt = LogFormat(log_format or settings.LOG_FORMAT)

    if fmt == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        cache_logger_on_first_use=True,
    )

    # The structlog renderer already formatted the line.
    package_logger = logging.getLogger(LOGGER_NAME)
    if _HANDLER is not None:
        package_logger.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(_HANDLER)
    package_logger.setLevel(level_no)

    _CONFIGURED = True


__all__ = ["LOGGER_NAME", "configure_logging"]

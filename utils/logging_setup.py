"""
utils/logging_setup.py
----------------------

Central logging configuration for Plural Architect.

Goals:
- Provide a single place to configure logging format and level.
- Route `structlog` events through the standard library so that the
  event-style calls used across the code base,

      logger = structlog.get_logger()
      logger.warning("irregulars_unreadable", path=path)

  end up on the same handlers as plain `logging` records.
- Allow overrides via environment variables:
      LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      LOG_FORMAT  ("console" or "json")
      LOG_FILE    (path to a log file; if unset, log to stderr only)

Usage
=====

In your CLI script (optional):

    from utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()  # ensures consistent global config

Implementation notes
====================

- `init_logging` is idempotent; calling it multiple times is safe.
- The default level comes from `settings.LOG_LEVEL` (INFO).
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import structlog
from structlog.types import Processor

from app.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[int]) -> int:
    """
    Map an explicit level, or settings.LOG_LEVEL, to a logging level.
    Defaults to logging.INFO if the configured name is invalid.
    """
    if level is not None:
        return level
    level_name = str(settings.LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def _renderer(log_format: LogFormat) -> Processor:
    if log_format == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def init_logging(
    level: Optional[int] = None,
    log_to_file: bool = False,
    filename: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            settings.LOG_LEVEL.
        log_to_file:
            If True, also log to a file.
        filename:
            Path to the log file. If None and log_to_file is True, we
            default to "plural_architect.log" in the current directory.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    level = _resolve_level(level)

    log_file_env = os.getenv("LOG_FILE")
    if log_file_env:
        log_to_file = True
        filename = log_file_env

    shared_processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings.LOG_FORMAT),
        ],
    )

    handlers: List[logging.Handler] = []

    # Console handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_to_file:
        if not filename:
            filename = "plural_architect.log"
        file_handler = logging.FileHandler(filename, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,  # reset any previous basicConfig
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger with the given name, ensuring logging is initialized.

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]

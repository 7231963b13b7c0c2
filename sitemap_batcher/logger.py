# File: sitemap_batcher/logger.py
"""sitemap_batcher.logger: the ``SitemapBatcher`` logger tree.

Modules take a child logger via ``get_logger("crawler")``; the entry points
(CLI and serverless handler) call :func:`init_logging` once to attach the
handlers. Records go to stderr, and to a rotating file when one is given.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

__all__ = ["logger", "configure", "init_logging", "get_logger", "LOGGER_NAME"]

LOGGER_NAME: Final[str] = "SitemapBatcher"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the root ``SitemapBatcher`` logger and return it.

    ``level`` accepts anything :meth:`logging.Logger.setLevel` does and raises
    ValueError for unknown names. With ``replace_handlers=False`` the new
    handlers are added next to the existing ones.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if replace_handlers:
        for old in root.handlers:
            old.close()
        root.handlers.clear()

    # stdout carries the JSON result of the CLI
    root.addHandler(_formatted(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        rotating = RotatingFileHandler(
            str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
        )
        root.addHandler(_formatted(rotating, log_format))

    root.propagate = False
    return root


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def get_logger(suffix: str | None = None) -> logging.Logger:
    """``SitemapBatcher`` itself, or ``SitemapBatcher.<suffix>``."""
    return logging.getLogger(LOGGER_NAME if not suffix else f"{LOGGER_NAME}.{suffix}")


logger: logging.Logger = init_logging()

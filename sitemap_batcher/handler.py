# File: sitemap_batcher/handler.py
"""sitemap_batcher.handler: entry point for scheduled serverless invocations.

Configuration is read from the environment (see
:func:`sitemap_batcher.config.config_from_env`); the trigger event may
override ``keyword``, ``batch_size`` and ``logLevel``. Fatal errors propagate
to the runtime.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from sitemap_batcher.config import config_from_env
from sitemap_batcher.engine import Engine
from sitemap_batcher.logger import init_logging
from sitemap_batcher.storage import StorageSink

__all__ = ["handler"]

_DEFAULT_LEVEL = "INFO"


def _log_level(value: Any) -> Optional[str]:
    """Normalise a level name from the event; None if logging does not know it."""
    name = str(value).strip().upper()
    return name if name in logging.getLevelNamesMapping() else None


def handler(
    event: Optional[Mapping[str, Any]] = None,
    context: Any = None,
    *,
    storage: Optional[StorageSink] = None,
) -> Dict[str, Any]:
    """Run the pipeline once and return ``{"objectKey", "bucketName", "batchCount"}``."""
    event = event or {}
    requested = event.get("logLevel", _DEFAULT_LEVEL)
    level = _log_level(requested)
    log = init_logging(level=level or _DEFAULT_LEVEL)
    if level is None:
        log.warning("Unknown logLevel %r in event, using %s", requested, _DEFAULT_LEVEL)
    cfg = config_from_env(keyword=event.get("keyword"), batch_size=event.get("batchSize"))
    return Engine(cfg, storage=storage).run().to_dict()

# File: sitemap_batcher/exporter.py
"""
Export of the batch artifact for sitemap_batcher.

The batches are serialised once as ``{"batches": [[url, ...], ...]}`` and
written to the storage sink under ``batches_<YYYY-MM-DD_HH-MM-SS>.json``.
Keys use UTC so that runs on differently configured hosts sort together.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sitemap_batcher.errors import SerializationError
from sitemap_batcher.logger import get_logger
from sitemap_batcher.storage.base import StorageSink

__all__ = ["KEY_PREFIX", "KEY_TIME_FORMAT", "object_key", "serialize_batches", "Exporter"]

KEY_PREFIX = "batches_"
KEY_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"

log = get_logger("exporter")


def object_key(now: Optional[datetime] = None) -> str:
    """Storage key for an export made at ``now`` (current UTC time by default; naive values are taken as UTC)."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{KEY_PREFIX}{moment.strftime(KEY_TIME_FORMAT)}.json"


def serialize_batches(batches: Sequence[Sequence[str]]) -> bytes:
    """Encode the export artifact as UTF-8 JSON."""
    try:
        payload = {"batches": [list(batch) for batch in batches]}
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode batches: {exc}") from exc


class Exporter:
    """Hands the batches to a storage sink. One write per call, no retry."""

    def __init__(self, storage: StorageSink, bucket_name: str) -> None:
        self.storage = storage
        self.bucket_name = bucket_name

    def export(self, batches: List[List[str]], now: Optional[datetime] = None) -> str:
        """Serialise and store ``batches``; return the object key.

        SerializationError and StorageError propagate unchanged.
        """
        body = serialize_batches(batches)
        key = object_key(now)
        self.storage.put(self.bucket_name, key, body)
        log.info("Exported %d batches to %s/%s", len(batches), self.bucket_name, key)
        return key

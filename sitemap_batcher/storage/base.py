"""Interface every storage sink implements."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageSink(Protocol):
    """Durable blob store: one named object per call."""

    def put(self, bucket_name: str, object_key: str, body: bytes) -> None:
        """Store ``body`` under ``bucket_name/object_key``; raise StorageError on failure."""
        ...

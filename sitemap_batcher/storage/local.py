# File: sitemap_batcher/storage/local.py
"""sitemap_batcher.storage.local: filesystem sink for local runs."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from sitemap_batcher.errors import StorageError
from sitemap_batcher.logger import get_logger

__all__ = ["LocalStorage"]

log = get_logger("storage.local")


class LocalStorage:
    """Stores each object as ``<root>/<bucket_name>/<object_key>``."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).expanduser()

    def path_for(self, bucket_name: str, object_key: str) -> Path:
        return self.root / bucket_name / object_key

    def put(self, bucket_name: str, object_key: str, body: bytes) -> None:
        target = self.path_for(bucket_name, object_key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(body)
        except OSError as exc:
            raise StorageError(f"writing {target} failed: {exc}") from exc
        log.info("Saved %s (%d bytes)", target, len(body))

"""sitemap_batcher.storage: durable sinks for the exported batches."""

from __future__ import annotations

from sitemap_batcher.config import PipelineConfig

from .base import StorageSink
from .local import LocalStorage
from .s3 import S3Storage


def build_storage(config: PipelineConfig) -> StorageSink:
    """Create the sink selected by ``config.storage``."""
    if config.storage == "local":
        return LocalStorage(config.local_root)
    return S3Storage(region=config.region, endpoint_url=config.endpoint_url)


__all__ = ["StorageSink", "LocalStorage", "S3Storage", "build_storage"]

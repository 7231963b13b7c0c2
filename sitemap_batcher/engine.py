# File: sitemap_batcher/engine.py
"""sitemap_batcher.engine: orchestration layer running discovery, batching and export."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from sitemap_batcher.batcher import split_batches
from sitemap_batcher.config import PipelineConfig
from sitemap_batcher.crawler.crawler import SitemapCrawler
from sitemap_batcher.crawler.models import CrawlResult
from sitemap_batcher.exporter import Exporter
from sitemap_batcher.logger import logger
from sitemap_batcher.storage import StorageSink, build_storage

__all__ = ["Engine", "PipelineState", "PipelineResult"]


class PipelineState(str, Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    BATCHING = "batching"
    EXPORTING = "exporting"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineResult:
    """Summary reported to the caller after a successful run."""

    object_key: str
    bucket_name: str
    batch_count: int
    url_count: int = 0
    failed_sitemaps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Invocation result in its wire shape."""
        return {
            "objectKey": self.object_key,
            "bucketName": self.bucket_name,
            "batchCount": self.batch_count,
        }


class Engine:
    """Facade for the CLI, the serverless handler and tests: one pipeline run per call."""

    def __init__(self, config: PipelineConfig, storage: Optional[StorageSink] = None) -> None:
        self.config = config
        self.storage = storage if storage is not None else build_storage(config)
        self.state = PipelineState.IDLE

    def _enter(self, state: PipelineState) -> None:
        logger.debug("Pipeline state: %s -> %s", self.state.value, state.value)
        self.state = state

    async def discover(self) -> CrawlResult:
        async with SitemapCrawler(self.config) as crawler:
            return await crawler.crawl()

    async def run_async(self) -> PipelineResult:
        """Run Discovering → Batching → Exporting; any fatal error leaves the engine FAILED."""
        self._enter(PipelineState.DISCOVERING)
        try:
            crawled = await self.discover()

            self._enter(PipelineState.BATCHING)
            batches = split_batches(crawled.urls, self.config.batch_size)

            self._enter(PipelineState.EXPORTING)
            # boto3 is blocking; keep the event loop free
            key = await asyncio.to_thread(
                Exporter(self.storage, self.config.bucket_name).export, batches
            )
        except Exception as exc:
            self._enter(PipelineState.FAILED)
            logger.error("Pipeline failed: %s", exc)
            raise

        self._enter(PipelineState.DONE)
        result = PipelineResult(
            object_key=key,
            bucket_name=self.config.bucket_name,
            batch_count=len(batches),
            url_count=len(crawled.urls),
            failed_sitemaps=crawled.failed_sitemaps,
        )
        logger.info(
            "Pipeline done: %d URLs in %d batches -> %s/%s",
            result.url_count, result.batch_count, result.bucket_name, result.object_key,
        )
        return result

    def run(self) -> PipelineResult:
        """Synchronous entry point."""
        return asyncio.run(self.run_async())

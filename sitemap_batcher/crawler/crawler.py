# === FILE: sitemap_batcher/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from sitemap_batcher.config import PipelineConfig
from sitemap_batcher.crawler.fetcher import Fetcher
from sitemap_batcher.crawler.models import ChildFetchResult, CrawlResult
from sitemap_batcher.errors import DiscoveryRootError, FetchError
from sitemap_batcher.logger import get_logger
from sitemap_batcher.utils import filter_urls, remove_duplicates

__all__ = ("SitemapCrawler", "merge_results")


def merge_results(results: List[ChildFetchResult]) -> CrawlResult:
    """Concatenate successful child results in the given order and collect the failures."""
    merged = CrawlResult(sitemaps=[r.url for r in results])
    for result in results:
        if result.ok:
            merged.urls.extend(result.urls)
        else:
            merged.failures.append(result)
    return merged


class SitemapCrawler:
    """Two-stage sitemap crawler: root index first, then every relevant child sitemap at once."""

    def __init__(self, config: PipelineConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.fetcher = fetcher
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> SitemapCrawler:
        if self.fetcher is None:
            # limit=0: the connector must not cap the number of in-flight child fetches
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                connector=TCPConnector(limit=0),
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Crawler must be used as async context manager")
        root = str(self.config.sitemap_url)
        self.logger.info("Discovery started: %s", root)
        start = time.monotonic()

        try:
            children = await self.fetcher.fetch(root, self.config.index_pattern)
        except FetchError as exc:
            self.logger.error("Root sitemap index failed: %s", exc)
            raise DiscoveryRootError(root, exc) from exc

        sitemaps = filter_urls(children, self.config.keyword)
        self.logger.info(
            "Root index lists %d sitemaps, %d match %r", len(children), len(sitemaps), self.config.keyword
        )

        results = await asyncio.gather(*(self._fetch_child(url) for url in sitemaps))
        merged = merge_results(list(results))
        for failure in merged.failures:
            self.logger.warning("Skipping sitemap: %s", failure.error)
        if self.config.deduplicate:
            merged.urls = remove_duplicates(merged.urls)

        duration = time.monotonic() - start
        self.logger.info(
            "Discovery finished: %d URLs from %d/%d sitemaps in %.2f s",
            len(merged.urls), len(sitemaps) - len(merged.failures), len(sitemaps), duration,
        )
        return merged

    async def _fetch_child(self, url: str) -> ChildFetchResult:
        try:
            urls = await self.fetcher.fetch(url, self.config.url_pattern)
        except FetchError as exc:
            return ChildFetchResult.failure(url, exc)
        except Exception as exc:
            # a single child must never abort the join
            self.logger.exception("Unexpected error while fetching %s", url)
            return ChildFetchResult.failure(url, exc)
        self.logger.debug("Collected %d URLs from %s", len(urls), url)
        return ChildFetchResult.success(url, urls)

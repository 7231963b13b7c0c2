# File: sitemap_batcher/errors.py
"""sitemap_batcher.errors: exception hierarchy shared by every pipeline stage."""

from __future__ import annotations

__all__ = [
    "SitemapBatcherError",
    "FetchError",
    "DiscoveryError",
    "DiscoveryRootError",
    "ChildFetchError",
    "SerializationError",
    "StorageError",
]


class SitemapBatcherError(Exception):
    """Base class for all errors raised by sitemap_batcher."""


class FetchError(SitemapBatcherError):
    """A sitemap document could not be downloaded or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class DiscoveryError(SitemapBatcherError):
    """Sitemap discovery could not produce a result."""


class DiscoveryRootError(DiscoveryError):
    """The root sitemap index could not be fetched. Fatal for the run."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"root sitemap index {url} failed: {cause}")
        self.url = url


class ChildFetchError(SitemapBatcherError):
    """A single child sitemap failed. Kept inside the crawler, never raised to callers."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"child sitemap {url} failed: {cause}")
        self.url = url
        self.cause = cause


class SerializationError(SitemapBatcherError):
    """The batch artifact could not be encoded."""


class StorageError(SitemapBatcherError):
    """The storage sink rejected the write."""

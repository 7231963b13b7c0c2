"""
Data models for the sitemap crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from sitemap_batcher.errors import ChildFetchError


@dataclass(slots=True, frozen=True)
class ChildFetchResult:
    """Outcome of one child sitemap fetch: either ``urls`` or ``error`` is meaningful."""

    url: str
    urls: List[str] = field(default_factory=list)
    error: Optional[ChildFetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, urls: List[str]) -> ChildFetchResult:
        return cls(url=url, urls=list(urls))

    @classmethod
    def failure(cls, url: str, cause: BaseException) -> ChildFetchResult:
        return cls(url=url, error=ChildFetchError(url, cause))


@dataclass(slots=True)
class CrawlResult:
    """Discovered leaf URLs plus the bookkeeping of the fan-out."""

    urls: List[str] = field(default_factory=list)
    sitemaps: List[str] = field(default_factory=list)
    failures: List[ChildFetchResult] = field(default_factory=list)

    @property
    def failed_sitemaps(self) -> List[str]:
        return [f.url for f in self.failures]

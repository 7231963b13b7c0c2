# File: sitemap_batcher/utils.py
"""sitemap_batcher.utils: helpers for narrowing and cleaning lists of discovered URLs."""

from __future__ import annotations

from typing import Collection, Iterable, List, Sequence

from sitemap_batcher.logger import logger

__all__: Sequence[str] = (
    "filter_urls",
    "remove_duplicates",
)


def filter_urls(urls: Iterable[str], keyword: str) -> List[str]:
    """Keep the URLs that contain ``keyword`` as a substring, in their original order."""
    selected = [url for url in urls if keyword in url]
    logger.debug("Keyword %r selected %d URLs", keyword, len(selected))
    return selected


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Remove duplicate URLs, keeping the first occurrence of each."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique

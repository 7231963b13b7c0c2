# File: sitemap_batcher/batcher.py
"""sitemap_batcher.batcher: partitioning of discovered URLs into work batches."""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["DEFAULT_BATCH_SIZE", "split_batches"]

DEFAULT_BATCH_SIZE = 25


def split_batches(urls: Sequence[str], size: int = DEFAULT_BATCH_SIZE) -> List[List[str]]:
    """Split ``urls`` into contiguous chunks of ``size``; the last chunk holds the remainder.

    Concatenating the result gives back ``urls`` unchanged. An empty input
    produces no batches at all.

    >>> split_batches(["a", "b", "c"], size=2)
    [['a', 'b'], ['c']]
    """
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    return [list(urls[i:i + size]) for i in range(0, len(urls), size)]

# sitemap_batcher/crawler/fetcher.py
"""
Fetcher module: downloads one sitemap document and extracts the values selected by a pattern.
"""
from __future__ import annotations

import asyncio
import zlib
from typing import List

from aiohttp import ClientError, ClientSession
from lxml import etree

from sitemap_batcher.errors import FetchError
from sitemap_batcher.logger import get_logger
from sitemap_batcher.parser.sitemap_parser import parse_sitemap

log = get_logger("fetcher")


class Fetcher:
    """Resolves a URL into the text nodes matching a selection pattern."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str, pattern: str) -> List[str]:
        """
        Download ``url`` and return the text of every element matching ``pattern``.

        Raises FetchError on network errors, timeouts, non-2xx statuses and unparsable bodies.
        No retry is attempted.
        """
        log.debug("Visiting %s", url)
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}")
                body = await resp.read()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        try:
            values = parse_sitemap(body, pattern)
        except (etree.XMLSyntaxError, ValueError, OSError, EOFError, zlib.error) as exc:
            raise FetchError(url, f"unparsable sitemap: {exc}") from exc

        log.debug("Finished %s: %d values for %r", url, len(values), pattern)
        return values

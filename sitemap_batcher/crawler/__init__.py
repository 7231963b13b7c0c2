"""sitemap_batcher.crawler: sitemap discovery."""

from .crawler import SitemapCrawler, merge_results
from .fetcher import Fetcher
from .models import ChildFetchResult, CrawlResult

__all__ = ["SitemapCrawler", "merge_results", "Fetcher", "ChildFetchResult", "CrawlResult"]

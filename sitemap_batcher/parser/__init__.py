"""sitemap_batcher.parser: sitemap XML parsing."""

from .sitemap_parser import compile_pattern, parse_sitemap

__all__ = ["compile_pattern", "parse_sitemap"]

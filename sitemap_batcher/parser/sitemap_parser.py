# File: sitemap_batcher/parser/sitemap_parser.py
"""sitemap_batcher.parser.sitemap_parser: extracting values from sitemap XML by element path."""

from __future__ import annotations

import gzip
from typing import List, Union

from lxml import etree

__all__ = ["compile_pattern", "parse_sitemap", "maybe_decompress"]

_GZIP_MAGIC = b"\x1f\x8b"


def compile_pattern(pattern: str) -> str:
    """Turn a selection pattern such as ``//sitemap/loc`` into a namespace-agnostic ElementPath.

    Sitemaps live in the ``http://www.sitemaps.org/schemas/sitemap/0.9`` namespace,
    so every step is matched with the ``{*}`` wildcard:

    >>> compile_pattern("//sitemap/loc")
    './/{*}sitemap/{*}loc'
    """
    steps = [step for step in pattern.strip().split("/") if step]
    if not steps:
        raise ValueError(f"Empty selection pattern: {pattern!r}")
    return ".//" + "/".join(step if step.startswith("{") else "{*}" + step for step in steps)


def maybe_decompress(raw: bytes) -> bytes:
    """Return gunzipped bytes for ``.xml.gz`` payloads, the input otherwise."""
    if raw[:2] == _GZIP_MAGIC:
        return gzip.decompress(raw)
    return raw


def parse_sitemap(xml_content: Union[str, bytes], pattern: str = "url/loc") -> List[str]:
    """Parse sitemap XML and return the text of every element matching ``pattern``.

    Args:
        xml_content: sitemap document, text or raw bytes (gzip is accepted).
        pattern: slash-separated element path, e.g. ``"sitemap/loc"`` for an index.

    Returns:
        Stripped, non-empty text values in document order.

    Raises:
        etree.XMLSyntaxError, ValueError: when the document is not XML at all.

    Example:
    ```python
    from sitemap_batcher.parser.sitemap_parser import parse_sitemap

    with open("sitemap.xml", "rb") as f:
        children = parse_sitemap(f.read(), "sitemap/loc")
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    xml_content = maybe_decompress(xml_content)
    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False)
    root = etree.fromstring(xml_content, parser=parser)
    if root is None:
        raise ValueError("document has no root element")
    nodes = root.iterfind(compile_pattern(pattern))
    return [node.text.strip() for node in nodes if node.text and node.text.strip()]

# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Dict, List, Tuple, Union

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import unused_port

from sitemap_batcher.config import PipelineConfig
from sitemap_batcher.errors import StorageError

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_index(locs: List[str]) -> str:
    """Render a sitemap index listing ``locs``."""
    entries = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><sitemapindex xmlns="{SITEMAP_NS}">{entries}</sitemapindex>'


def urlset(locs: List[str]) -> str:
    """Render a leaf sitemap listing ``locs``."""
    entries = "".join(f"<url><loc>{loc}</loc><changefreq>daily</changefreq></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{SITEMAP_NS}">{entries}</urlset>'


class MemoryStorage:
    """In-memory storage sink recording every write."""

    def __init__(self) -> None:
        self.objects: Dict[Tuple[str, str], bytes] = {}
        self.calls = 0

    def put(self, bucket_name: str, object_key: str, body: bytes) -> None:
        self.calls += 1
        self.objects[(bucket_name, object_key)] = body


class FailingStorage(MemoryStorage):
    def put(self, bucket_name: str, object_key: str, body: bytes) -> None:
        self.calls += 1
        raise StorageError("bucket is read-only")


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def make_config() -> Callable[..., PipelineConfig]:
    """Factory for configs pointing at a test server."""

    def _make(base_url: str, **kwargs) -> PipelineConfig:
        params = {
            "sitemap_url": f"{base_url}/sitemap.xml",
            "bucket_name": "test-bucket",
            "timeout": 2.0,
            "user_agent": "TestAgent/1.0",
        }
        params.update(kwargs)
        return PipelineConfig(**params)

    return _make


# --------------------------------------------------------------------------- #
#                            Test-server fixtures                             #
# --------------------------------------------------------------------------- #

# path -> (status, body, delay in seconds); bytes bodies are served verbatim
Routes = Dict[str, Tuple[int, Union[str, bytes], float]]


class SitemapServer:
    """Serves fixed sitemap documents; ``{base}`` in a body becomes the server URL."""

    def __init__(self) -> None:
        self.hits: Dict[str, int] = {}
        self._runners: List[web.AppRunner] = []

    async def start(self, routes: Routes) -> str:
        port = unused_port()
        base = f"http://127.0.0.1:{port}"
        app = web.Application()
        for path, (status, body, delay) in routes.items():
            if isinstance(body, str):
                body = body.replace("{base}", base).encode("utf-8")
            app.router.add_get(path, self._handler(path, status, body, delay))

        runner = web.AppRunner(app)
        await runner.setup()
        await web.TCPSite(runner, "127.0.0.1", port).start()
        self._runners.append(runner)
        return base

    def _handler(self, path: str, status: int, body: bytes, delay: float):
        async def handle(_request: web.Request) -> web.Response:
            self.hits[path] = self.hits.get(path, 0) + 1
            if delay:
                await asyncio.sleep(delay)
            return web.Response(status=status, body=body, content_type="application/xml")

        return handle

    async def close(self) -> None:
        for runner in self._runners:
            await runner.cleanup()


@pytest_asyncio.fixture
async def sitemap_server() -> AsyncIterator[SitemapServer]:
    server = SitemapServer()
    try:
        yield server
    finally:
        await server.close()

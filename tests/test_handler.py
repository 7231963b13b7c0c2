import json
import logging

import pytest

import sitemap_batcher.handler as handler_module
from sitemap_batcher.crawler.models import CrawlResult
from sitemap_batcher.engine import Engine
from sitemap_batcher.errors import DiscoveryRootError
from sitemap_batcher.logger import LOGGER_NAME, init_logging


@pytest.fixture()
def env(monkeypatch):
    monkeypatch.setenv("SITEMAP_URL", "https://shop.example/sitemap.xml")
    monkeypatch.setenv("BUCKET_NAME", "mamarkt-bucket")
    monkeypatch.setenv("AWS_REGION", "eu-central-1")


def test_handler_returns_invocation_result(env, monkeypatch, memory_storage):
    seen = {}

    async def fake_discover(self):
        seen["keyword"] = self.config.keyword
        return CrawlResult(urls=[f"https://shop.example/p/{i}" for i in range(60)])

    monkeypatch.setattr(Engine, "discover", fake_discover)
    out = handler_module.handler({"keyword": "products-tr"}, None, storage=memory_storage)

    assert out["bucketName"] == "mamarkt-bucket"
    assert out["batchCount"] == 3
    assert out["objectKey"].startswith("batches_")
    assert seen["keyword"] == "products-tr"
    stored = json.loads(memory_storage.objects[("mamarkt-bucket", out["objectKey"])])
    assert [len(b) for b in stored["batches"]] == [25, 25, 10]


def test_handler_propagates_fatal_errors(env, monkeypatch, memory_storage):
    async def failing_discover(self):
        raise DiscoveryRootError("https://shop.example/sitemap.xml", RuntimeError("HTTP 500"))

    monkeypatch.setattr(Engine, "discover", failing_discover)
    with pytest.raises(DiscoveryRootError):
        handler_module.handler({}, None, storage=memory_storage)
    assert memory_storage.calls == 0


@pytest.mark.parametrize("level", ["verbose", "", 42])
def test_handler_unknown_log_level_falls_back_to_info(env, monkeypatch, memory_storage, level):
    async def fake_discover(self):
        return CrawlResult(urls=["https://shop.example/p/1"])

    monkeypatch.setattr(Engine, "discover", fake_discover)
    out = handler_module.handler({"logLevel": level}, None, storage=memory_storage)

    assert out["batchCount"] == 1
    assert logging.getLogger(LOGGER_NAME).level == logging.INFO


def test_handler_accepts_lowercase_log_level(env, monkeypatch, memory_storage):
    async def fake_discover(self):
        return CrawlResult(urls=[])

    monkeypatch.setattr(Engine, "discover", fake_discover)
    handler_module.handler({"logLevel": "debug"}, None, storage=memory_storage)

    assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
    init_logging()

# File: tests/test_batcher.py
import math

import pytest

from sitemap_batcher.batcher import DEFAULT_BATCH_SIZE, split_batches
from sitemap_batcher.utils import filter_urls, remove_duplicates


def make_urls(n: int) -> list[str]:
    return [f"https://shop.example/product/{i}" for i in range(n)]


@pytest.mark.parametrize("n,size", [(1, 25), (24, 25), (51, 25), (100, 25), (7, 3), (10, 1)])
def test_batch_shape(n, size):
    urls = make_urls(n)
    batches = split_batches(urls, size)

    assert len(batches) == math.ceil(n / size)
    assert all(len(b) == size for b in batches[:-1])
    assert len(batches[-1]) == (n % size or size)
    assert [u for b in batches for u in b] == urls


def test_empty_input_gives_no_batches():
    assert split_batches([]) == []


def test_exactly_one_full_batch():
    batches = split_batches(make_urls(25))
    assert len(batches) == 1
    assert len(batches[0]) == 25


def test_one_over_batch_size():
    batches = split_batches(make_urls(26))
    assert [len(b) for b in batches] == [25, 1]


def test_default_size_is_25():
    assert DEFAULT_BATCH_SIZE == 25


def test_duplicates_are_kept():
    urls = ["a", "a", "b"]
    assert split_batches(urls, 2) == [["a", "a"], ["b"]]


def test_invalid_size():
    with pytest.raises(ValueError):
        split_batches(["a"], 0)


def test_filter_urls_keyword():
    assert filter_urls(["a/product/x", "a/category/y"], "product") == ["a/product/x"]


def test_filter_urls_keeps_order_and_empty():
    urls = ["p3-product", "x", "p1-product", "p2-product"]
    assert filter_urls(urls, "product") == ["p3-product", "p1-product", "p2-product"]
    assert filter_urls([], "product") == []


def test_remove_duplicates_keeps_first():
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

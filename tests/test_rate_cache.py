from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.rate_cache import RateCache


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def test_entry_served_within_ttl():
    clock = FakeClock()
    cache = RateCache(ttl_sec=60, clock=clock)
    cache.set("finance", 25.0)
    clock.advance(59)
    assert cache.get("finance") == 25.0


def test_entry_expires_at_ttl():
    clock = FakeClock()
    cache = RateCache(ttl_sec=60, clock=clock)
    cache.set("finance", 25.0)
    clock.advance(60)
    assert cache.get("finance") is None
    assert len(cache) == 0


def test_set_refreshes_timestamp():
    clock = FakeClock()
    cache = RateCache(ttl_sec=60, clock=clock)
    cache.set("finance", 25.0)
    clock.advance(50)
    cache.set("finance", 26.0)
    clock.advance(50)
    assert cache.get("finance") == 26.0


def test_invalidate_and_clear():
    cache = RateCache(ttl_sec=60, clock=FakeClock())
    cache.set("finance", 25.0)
    cache.set("tech", 15.0)
    cache.invalidate("finance")
    assert "finance" not in cache
    assert "tech" in cache
    cache.clear()
    assert len(cache) == 0


def test_ttl_must_be_positive():
    with pytest.raises(ValueError):
        RateCache(ttl_sec=0)


def test_concurrent_get_and_set_across_categories():
    from concurrent.futures import ThreadPoolExecutor

    cache = RateCache(ttl_sec=60, clock=FakeClock())
    categories = [f"cat-{i}" for i in range(8)]

    def worker(category_id):
        for n in range(500):
            cache.set(category_id, float(n))
            value = cache.get(category_id)
            assert value is not None and 0 <= value <= n
        return cache.get(category_id)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(worker, categories))

    assert results == [499.0] * len(categories)
    assert len(cache) == len(categories)

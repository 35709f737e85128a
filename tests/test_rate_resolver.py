from pathlib import Path
import asyncio
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.config import RevenueSettings
from processor.rate_cache import RateCache
from processor.rate_resolver import RateResolver
from processor.rate_sources import BaseRateSource, RateSourceError


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FakeSource(BaseRateSource):
    def __init__(self, rates=None, error=None, delay=0.0):
        self.rates = rates or {}
        self.error = error
        self.delay = delay
        self.calls = []

    async def fetch_rate(self, category_id):
        self.calls.append(category_id)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        if category_id not in self.rates:
            raise RateSourceError(f"no rate for {category_id}")
        return self.rates[category_id]


def _resolver(source, clock=None, timeout=3.0):
    settings = RevenueSettings(rate_source_timeout_sec=timeout, rate_cache_ttl_minutes=30)
    cache = RateCache(settings.rate_cache_ttl_sec, clock=clock or FakeClock())
    return RateResolver(source=source, cache=cache, settings=settings)


@pytest.mark.asyncio
async def test_no_source_returns_static_table():
    resolver = RateResolver(source=None)
    assert await resolver.resolve_rate("finance") == 22.0
    assert await resolver.resolve_rate("fitness") == 10.0
    assert await resolver.resolve_rate("unheard-of") == 4.0
    assert len(resolver.cache) == 0


@pytest.mark.asyncio
async def test_live_rate_is_cached_within_ttl():
    clock = FakeClock()
    source = FakeSource({"finance": 25.0})
    resolver = _resolver(source, clock)

    assert await resolver.resolve_rate("finance") == 25.0
    clock.now += 29 * 60
    assert await resolver.resolve_rate("finance") == 25.0
    assert source.calls == ["finance"]


@pytest.mark.asyncio
async def test_expired_entry_triggers_refetch():
    clock = FakeClock()
    source = FakeSource({"finance": 25.0})
    resolver = _resolver(source, clock)

    await resolver.resolve_rate("finance")
    clock.now += 31 * 60
    source.rates["finance"] = 27.0
    assert await resolver.resolve_rate("finance") == 27.0
    assert source.calls == ["finance", "finance"]


@pytest.mark.asyncio
async def test_aliases_share_one_cache_entry():
    source = FakeSource({"health": 11.0})
    resolver = _resolver(source)

    assert await resolver.resolve_rate("fitness") == 11.0
    assert await resolver.resolve_rate("wellness") == 11.0
    assert await resolver.resolve_rate("health") == 11.0
    assert source.calls == ["health"]


@pytest.mark.asyncio
async def test_failure_falls_back_to_static_and_caches_it():
    source = FakeSource(error=RuntimeError("connection reset"))
    resolver = _resolver(source)

    assert await resolver.resolve_rate("finance") == 22.0
    assert await resolver.resolve_rate("finance") == 22.0
    assert source.calls == ["finance"]


@pytest.mark.asyncio
async def test_missing_category_falls_back_to_static():
    resolver = _resolver(FakeSource({}))
    assert await resolver.resolve_rate("tech") == 15.0


@pytest.mark.asyncio
async def test_invalid_live_value_falls_back_to_static():
    resolver = _resolver(FakeSource({"tech": -3.0}))
    assert await resolver.resolve_rate("tech") == 15.0


@pytest.mark.asyncio
async def test_timeout_falls_back_to_static():
    source = FakeSource({"finance": 25.0}, delay=1.0)
    resolver = _resolver(source, timeout=0.05)
    assert await resolver.resolve_rate("finance") == 22.0


@pytest.mark.asyncio
async def test_invalidate_forces_refetch():
    source = FakeSource({"finance": 25.0})
    resolver = _resolver(source)

    await resolver.resolve_rate("finance")
    resolver.invalidate("finance")
    await resolver.resolve_rate("finance")
    resolver.invalidate()
    await resolver.resolve_rate("finance")
    assert source.calls == ["finance", "finance", "finance"]

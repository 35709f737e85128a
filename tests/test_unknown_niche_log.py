from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import init_db
from database.models import NicheRpmRate
from processor.rate_sources import DatabaseRateSource
from processor.unknown_niche_log import pending_unknown_niches, record_unknown_niche
from seeds.seed_db import LIVE_RPM_SEED, seed


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.mark.asyncio
async def test_record_unknown_niche_upserts(session_factory):
    async with session_factory() as session:
        assert await record_unknown_niche(session, "Underwater Welding") == 1
        assert await record_unknown_niche(session, "underwater   welding!") == 2
        assert await record_unknown_niche(session, "Sourdough Pottery") == 1
        await session.commit()

    async with session_factory() as session:
        pending = await pending_unknown_niches(session)
    assert [p.normalized_query for p in pending] == ["underwater welding", "sourdough pottery"]
    assert pending[0].hit_count == 2


@pytest.mark.asyncio
async def test_record_unknown_niche_ignores_empty(session_factory):
    async with session_factory() as session:
        assert await record_unknown_niche(session, "  ?? ") is None
        assert await pending_unknown_niches(session) == []


@pytest.mark.asyncio
async def test_seed_loads_live_rates_once(engine, session_factory):
    assert await seed(session_factory, bind=engine) == len(LIVE_RPM_SEED)
    assert await seed(session_factory, bind=engine) == 0

    source = DatabaseRateSource(session_factory)
    assert await source.fetch_rate("finance") == 22.5
    assert await source.fetch_rate("automotive") == 9.5

    async with session_factory() as session:
        row = await session.get(NicheRpmRate, 1)
    assert row.niche == "finance"
    assert row.shorts_rpm_usd == 0.15

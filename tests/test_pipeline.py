"""분류 → 추정 → 검증 진입점 테스트."""

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import init_db
from database.models import UnknownNiche
from processor.pipeline import (
    classify_and_record,
    classify_niche,
    estimate_revenue,
    resolve_category_id,
    validate_against_benchmark,
)
from processor.rate_resolver import RateResolver
from processor.revenue_estimator import RevenueEstimator


@pytest.fixture
def estimator():
    return RevenueEstimator(RateResolver(source=None))


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def test_classify_niche():
    result = classify_niche("minecraft")
    assert result.niche_id == "minecraft"
    assert result.match_type == "exact"


def test_resolve_category_id_direct_and_classified():
    assert resolve_category_id("finance") == "finance"
    assert resolve_category_id("fitness") == "health"
    assert resolve_category_id("Minecraft") == "gaming"
    assert resolve_category_id("tesla") == "automotive"
    assert resolve_category_id("zzqxjv") == "general"


@pytest.mark.asyncio
async def test_estimate_revenue_by_category(estimator):
    result = await estimate_revenue(1_000_000, 5_000_000, "finance", estimator=estimator)
    assert result.total_revenue == pytest.approx(22_750.0)


@pytest.mark.asyncio
async def test_estimate_revenue_by_niche_query(estimator):
    result = await estimate_revenue(1_000_000, 0, "Minecraft", estimator=estimator)
    assert result.category_id == "gaming"
    assert result.total_revenue == pytest.approx(4_000.0)


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["vlog", "reviews", "art", "fitness", "Technology"])
async def test_estimate_revenue_prices_the_classified_category(estimator, query):
    shown = classify_niche(query).matched_category
    result = await estimate_revenue(1_000_000, 0, query, estimator=estimator)
    assert result.category_id == shown.category_id
    assert result.long_form_rpm == shown.long_form_rpm_usd


@pytest.mark.asyncio
async def test_estimate_and_validate(estimator):
    breakdown = await estimate_revenue(1_000_000, 5_000_000, "finance", estimator=estimator)
    comparison = validate_against_benchmark(breakdown)
    assert comparison.total_views == 6_000_000
    assert comparison.our_estimate == pytest.approx(22_750.0)
    assert comparison.is_within_range is True
    assert comparison.confidence == "low"


@pytest.mark.asyncio
async def test_classify_and_record_counts_unknown_hits(session_factory):
    first = await classify_and_record("Hairdresser", session_factory)
    await classify_and_record("  hairdresser ", session_factory)
    assert first.is_unknown is True

    async with session_factory() as session:
        row = (await session.execute(select(UnknownNiche))).scalar_one()
    assert row.normalized_query == "hairdresser"
    assert row.raw_query == "Hairdresser"
    assert row.hit_count == 2
    assert row.reviewed is False


@pytest.mark.asyncio
async def test_classify_and_record_skips_known_and_empty(session_factory):
    await classify_and_record("minecraft", session_factory)
    await classify_and_record("   ", session_factory)

    async with session_factory() as session:
        count = (await session.execute(select(func.count(UnknownNiche.id)))).scalar()
    assert count == 0


@pytest.mark.asyncio
async def test_classify_and_record_survives_db_failure():
    def broken_factory():
        raise RuntimeError("db unavailable")

    result = await classify_and_record("Hairdresser", broken_factory)
    assert result.match_type == "default"

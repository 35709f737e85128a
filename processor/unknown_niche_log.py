"""미분류 니치 검토 큐 — 분류 실패 질의를 DB에 누적 (hit_count 증가)."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from processor.niche_catalog import normalize_term


async def record_unknown_niche(session: AsyncSession, query: str) -> int | None:
    """질의를 검토 큐에 기록하고 누적 hit_count 반환.

    정규화 후 빈 문자열이면 기록하지 않고 None.
    커밋은 호출자 책임 (flush만 수행).
    """
    from database.models import UnknownNiche, _utcnow

    normalized = normalize_term(query)
    if not normalized:
        return None

    result = await session.execute(
        select(UnknownNiche).where(UnknownNiche.normalized_query == normalized)
    )
    existing = result.scalar_one_or_none()

    if existing:
        existing.hit_count = (existing.hit_count or 0) + 1
        existing.last_seen_at = _utcnow()
        hit_count = existing.hit_count
    else:
        session.add(UnknownNiche(normalized_query=normalized, raw_query=query.strip()[:500]))
        hit_count = 1

    await session.flush()
    logger.debug(f"[unknown_niche_log] {normalized!r} 기록 (누적 {hit_count}회)")
    return hit_count


async def pending_unknown_niches(session: AsyncSession, limit: int = 50) -> list:
    """미검토 항목을 hit_count 내림차순으로."""
    from database.models import UnknownNiche

    result = await session.execute(
        select(UnknownNiche)
        .where(UnknownNiche.reviewed.is_(False))
        .order_by(UnknownNiche.hit_count.desc(), UnknownNiche.id)
        .limit(limit)
    )
    return list(result.scalars().all())

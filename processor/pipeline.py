"""니치 분류 → RPM 해석 → 수익 추정 → 벤치마크 검증 진입점."""

from __future__ import annotations

from loguru import logger

from processor.benchmark_validator import ValidationComparison, validate
from processor.niche_classifier import ClassificationResult, get_classifier
from processor.rate_resolver import RateResolver
from processor.rate_table import is_canonical_category, normalize_category_id
from processor.revenue_estimator import RevenueBreakdown, RevenueEstimator
from processor.unknown_niche_log import record_unknown_niche

# ── 프로세스 공용 추정기 (설정 기반 라이브 소스 + 캐시) ──
_estimator: RevenueEstimator | None = None


def get_estimator() -> RevenueEstimator:
    global _estimator
    if _estimator is None:
        _estimator = RevenueEstimator(RateResolver.from_settings())
    return _estimator


def classify_niche(query: str | None) -> ClassificationResult:
    """자유 입력 니치 분류 (예외 없음)."""
    return get_classifier().classify(query)


def resolve_category_id(niche_query_or_category_id: str | None) -> str:
    """정규 카테고리 ID면 그대로, 그 외(별칭 포함)는 분류기 결과의 카테고리."""
    if is_canonical_category(niche_query_or_category_id):
        return normalize_category_id(niche_query_or_category_id)
    return classify_niche(niche_query_or_category_id).matched_category.category_id


async def estimate_revenue(
    long_form_views,
    short_form_views,
    niche_query_or_category_id: str | None,
    month: int | None = None,
    estimator: RevenueEstimator | None = None,
) -> RevenueBreakdown:
    category_id = resolve_category_id(niche_query_or_category_id)
    return await (estimator or get_estimator()).estimate(
        long_form_views, short_form_views, category_id, month=month
    )


def validate_against_benchmark(
    breakdown: RevenueBreakdown, total_views: int | None = None
) -> ValidationComparison:
    """total_views 미지정 시 롱폼+숏폼 조회수 합계 사용."""
    return validate(breakdown, total_views)


async def classify_and_record(query: str | None, session_factory=None) -> ClassificationResult:
    """분류 후 미분류(default)면 검토 큐에 기록. DB 실패는 로그만 남김."""
    result = classify_niche(query)
    if not result.is_unknown or not (query or "").strip():
        return result

    if session_factory is None:
        from database import async_session

        session_factory = async_session

    try:
        async with session_factory() as session:
            await record_unknown_niche(session, query)
            await session.commit()
    except Exception as e:
        logger.warning(f"[pipeline] 미분류 니치 기록 실패 ({query!r}): {e}")
    return result

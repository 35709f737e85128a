"""카테고리 RPM 해석기 — 캐시 → 라이브 소스 → 정적 테이블 폴백.

흐름:
  1. 별칭 정규화 (fitness/wellness → health, 모르는 값 → general)
  2. TTL 이내 캐시 → 반환
  3. 라이브 소스 조회 (asyncio.wait_for 타임아웃) → 캐시 후 반환
  4. 실패(타임아웃/없음/형식 오류/전송 오류) → 정적 단가를 캐시 후 반환
라이브 소스가 없으면 정적 테이블을 바로 반환한다.
"""

from __future__ import annotations

import asyncio

from loguru import logger

from processor.config import RevenueSettings, revenue_settings
from processor.rate_cache import RateCache
from processor.rate_sources import BaseRateSource, build_rate_source
from processor.rate_table import CATEGORY_RATES, CategoryRate, normalize_category_id


class RateResolver:
    def __init__(
        self,
        source: BaseRateSource | None = None,
        cache: RateCache | None = None,
        settings: RevenueSettings | None = None,
        rates: dict[str, CategoryRate] | None = None,
    ):
        self.settings = settings if settings is not None else revenue_settings
        self.source = source
        self.cache = cache if cache is not None else RateCache(self.settings.rate_cache_ttl_sec)
        self.rates = rates if rates is not None else CATEGORY_RATES
        self.timeout = self.settings.rate_source_timeout_sec

    @classmethod
    def from_settings(cls, settings: RevenueSettings | None = None) -> "RateResolver":
        settings = settings if settings is not None else revenue_settings
        return cls(source=build_rate_source(settings), settings=settings)

    async def resolve_rate(self, category_id: str | None) -> float:
        """롱폼 RPM (USD). 조회 실패로 예외를 던지지 않는다."""
        key = normalize_category_id(category_id, self.rates)
        static = self.rates[key].long_form_rpm_usd

        if self.source is None:
            return static

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            rate = await asyncio.wait_for(self.source.fetch_rate(key), timeout=self.timeout)
            rate = float(rate)
            if not 0 < rate < float("inf"):
                raise ValueError(f"non-positive or non-finite rate {rate}")
        except asyncio.TimeoutError:
            logger.warning(f"[rate_resolver] {key} 라이브 조회 타임아웃 ({self.timeout}s), 정적 단가 ${static:.2f} 사용")
            rate = static
        except Exception as e:
            logger.warning(f"[rate_resolver] {key} 라이브 조회 실패, 정적 단가 ${static:.2f} 사용: {e}")
            rate = static
        else:
            logger.debug(f"[rate_resolver] {key} 라이브 단가 ${rate:.2f}")

        self.cache.set(key, rate)
        return rate

    def invalidate(self, category_id: str | None = None) -> None:
        """캐시 항목 하나(또는 전체) 제거."""
        if category_id is None:
            self.cache.clear()
        else:
            self.cache.invalidate(normalize_category_id(category_id, self.rates))

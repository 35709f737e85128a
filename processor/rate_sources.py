"""Live RPM rate sources -- pluggable fetchers behind the rate resolver."""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import AliasChoices, BaseModel, Field, ValidationError
from sqlalchemy import select

from processor.config import RevenueSettings


class RateSourceError(Exception):
    """Live source could not produce a usable rate for a category."""


class BaseRateSource:
    """Base class for live RPM sources."""

    name = "base"

    async def fetch_rate(self, category_id: str) -> float:
        """Return the current long-form RPM (USD) for a normalized category id.

        Raises RateSourceError when the source has no usable value.
        """
        raise NotImplementedError

    async def close(self):
        pass


class RatePayload(BaseModel):
    """JSON body returned by the rate endpoint."""

    long_form_rpm_usd: float = Field(
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("long_form_rpm_usd", "average_rpm_usd", "rpm"),
    )


class HttpRateSource(BaseRateSource):
    """GET {url}/{category_id} (or a url containing '{category_id}')."""

    name = "http"

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout: float = 3.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _url_for(self, category_id: str) -> str:
        if "{category_id}" in self.url:
            return self.url.replace("{category_id}", category_id)
        return f"{self.url.rstrip('/')}/{category_id}"

    async def fetch_rate(self, category_id: str) -> float:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self._url_for(category_id), headers=headers)
        except httpx.HTTPError as e:
            raise RateSourceError(f"request failed for {category_id}: {e}") from e

        if resp.status_code == 404:
            raise RateSourceError(f"no live rate for {category_id}")
        if resp.status_code != 200:
            raise RateSourceError(f"rate endpoint returned {resp.status_code} for {category_id}")

        try:
            payload = RatePayload.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RateSourceError(f"malformed rate payload for {category_id}: {e}") from e

        return payload.long_form_rpm_usd


class DatabaseRateSource(BaseRateSource):
    """Reads niche_rpm_rates.average_rpm_usd."""

    name = "database"

    def __init__(self, session_factory=None):
        if session_factory is None:
            from database import async_session

            session_factory = async_session
        self._session_factory = session_factory

    async def fetch_rate(self, category_id: str) -> float:
        from database.models import NicheRpmRate

        async with self._session_factory() as session:
            result = await session.execute(
                select(NicheRpmRate.average_rpm_usd).where(NicheRpmRate.niche == category_id)
            )
            rate = result.scalar_one_or_none()

        if rate is None:
            raise RateSourceError(f"no live rate row for {category_id}")
        if not rate > 0 or rate == float("inf"):
            raise RateSourceError(f"invalid stored rate for {category_id}: {rate}")
        return float(rate)


def build_rate_source(settings: RevenueSettings) -> BaseRateSource | None:
    """설정 기반 소스 선택: HTTP 엔드포인트 > DB > 없음(정적 테이블)."""
    if settings.rate_source_url:
        logger.info(f"[rate_sources] HTTP 소스 사용: {settings.rate_source_url}")
        return HttpRateSource(
            settings.rate_source_url,
            api_key=settings.rate_source_api_key,
            timeout=settings.rate_source_timeout_sec,
        )
    if settings.rate_source_use_database:
        logger.info("[rate_sources] DB 소스 사용 (niche_rpm_rates)")
        return DatabaseRateSource()
    return None

"""Channel revenue estimation -- long-form + short-form views x RPM.

  revenue = views / 1,000 x RPM   (float arithmetic, no integer overflow)

  long-form RPM:  per category, resolved through RateResolver
                  (live source -> cache -> static table)
  short-form RPM: platform-wide $0.15 for every category

Optional extras:
  month=1..12  applies the Q4-weighted seasonal multiplier to long-form RPM
  estimate_range() gives conservative / realistic / optimistic totals from
  the category's min / resolved / max RPM.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from processor.rate_resolver import RateResolver
from processor.rate_table import (
    SEASONAL_MULTIPLIERS,
    SHORT_FORM_RPM_USD,
    apply_seasonal_adjustment,
    normalize_category_id,
)


class InvalidViewCountError(ValueError):
    """View count is negative or not a whole number."""


@dataclass(frozen=True)
class RevenueBreakdown:
    long_form_views: int
    short_form_views: int
    long_form_rpm: float
    short_form_rpm: float
    long_form_revenue: float
    short_form_revenue: float
    total_revenue: float
    methodology: str
    category_id: str = "general"


@dataclass(frozen=True)
class RevenueRange:
    category_id: str
    conservative: float
    realistic: float
    optimistic: float
    methodology: str


def _check_views(value, label: str) -> int:
    if isinstance(value, bool):
        raise InvalidViewCountError(f"{label} views must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidViewCountError(f"{label} views must be a whole number, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise InvalidViewCountError(f"{label} views must be an integer, got {value!r}")
    if value < 0:
        raise InvalidViewCountError(f"{label} views must be >= 0, got {value}")
    return value


def _revenue(views: int, rpm: float) -> float:
    return views / 1000 * rpm


def _line(label: str, views: int, rpm: float, revenue: float) -> str:
    return f"{label}: {views:,} views / 1,000 × ${rpm:,.2f} RPM = ${revenue:,.2f}."


class RevenueEstimator:
    """Turns view counts + category into a RevenueBreakdown."""

    def __init__(self, resolver: RateResolver | None = None):
        self.resolver = resolver or RateResolver()

    async def estimate(
        self,
        long_form_views,
        short_form_views,
        category_id: str | None,
        month: int | None = None,
    ) -> RevenueBreakdown:
        long_views = _check_views(long_form_views, "long-form")
        short_views = _check_views(short_form_views, "short-form")

        key = normalize_category_id(category_id, self.resolver.rates)
        base_rpm = await self.resolver.resolve_rate(key)
        long_rpm = base_rpm
        notes: list[str] = []
        if month is not None:
            long_rpm = apply_seasonal_adjustment(base_rpm, month)
            notes.append(
                f"Seasonal adjustment (month {month}): ×{SEASONAL_MULTIPLIERS[month - 1]:.2f} "
                f"applied to base long-form RPM ${base_rpm:,.2f}."
            )

        short_rpm = SHORT_FORM_RPM_USD
        long_revenue = _revenue(long_views, long_rpm)
        short_revenue = _revenue(short_views, short_rpm)
        total = long_revenue + short_revenue

        methodology = " ".join(
            notes
            + [
                _line("Long-form", long_views, long_rpm, long_revenue),
                _line("Short-form", short_views, short_rpm, short_revenue),
                f"Total: ${total:,.2f}.",
            ]
        )

        logger.debug(f"[revenue_estimator] {key}: long={long_views} short={short_views} total=${total:,.2f}")
        return RevenueBreakdown(
            long_form_views=long_views,
            short_form_views=short_views,
            long_form_rpm=long_rpm,
            short_form_rpm=short_rpm,
            long_form_revenue=long_revenue,
            short_form_revenue=short_revenue,
            total_revenue=total,
            methodology=methodology,
            category_id=key,
        )

    async def estimate_range(self, long_form_views, short_form_views, category_id: str | None) -> RevenueRange:
        """min / resolved / max RPM 기준 세 가지 총수익."""
        long_views = _check_views(long_form_views, "long-form")
        short_views = _check_views(short_form_views, "short-form")

        key = normalize_category_id(category_id, self.resolver.rates)
        rate = self.resolver.rates[key]
        realistic_rpm = await self.resolver.resolve_rate(key)
        short_revenue = _revenue(short_views, SHORT_FORM_RPM_USD)

        conservative = _revenue(long_views, rate.min_rpm_usd) + short_revenue
        realistic = _revenue(long_views, realistic_rpm) + short_revenue
        optimistic = _revenue(long_views, rate.max_rpm_usd) + short_revenue

        methodology = (
            f"Long-form RPM range for {rate.display_name}: "
            f"${rate.min_rpm_usd:,.2f} / ${realistic_rpm:,.2f} / ${rate.max_rpm_usd:,.2f}. "
            f"Short-form fixed at ${SHORT_FORM_RPM_USD:,.2f} RPM (${short_revenue:,.2f}). "
            f"Totals: ${conservative:,.2f} / ${realistic:,.2f} / ${optimistic:,.2f}."
        )
        return RevenueRange(
            category_id=key,
            conservative=conservative,
            realistic=realistic,
            optimistic=optimistic,
            methodology=methodology,
        )

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.rate_resolver import RateResolver
from processor.revenue_estimator import InvalidViewCountError, RevenueEstimator


@pytest.fixture
def estimator():
    return RevenueEstimator(RateResolver(source=None))


@pytest.mark.asyncio
async def test_finance_reference_estimate(estimator):
    result = await estimator.estimate(1_000_000, 5_000_000, "finance")
    assert result.long_form_rpm == 22.0
    assert result.short_form_rpm == 0.15
    assert result.long_form_revenue == pytest.approx(22_000.00)
    assert result.short_form_revenue == pytest.approx(750.00)
    assert result.total_revenue == pytest.approx(22_750.00)
    assert result.category_id == "finance"
    assert "1,000,000 views" in result.methodology
    assert "$22,000.00" in result.methodology
    assert "$750.00" in result.methodology
    assert "$22,750.00" in result.methodology


@pytest.mark.asyncio
async def test_short_form_rate_is_category_independent(estimator):
    gaming = await estimator.estimate(0, 1_000_000, "gaming")
    finance = await estimator.estimate(0, 1_000_000, "finance")
    assert gaming.short_form_revenue == finance.short_form_revenue == pytest.approx(150.0)


@pytest.mark.asyncio
async def test_zero_views(estimator):
    result = await estimator.estimate(0, 0, "tech")
    assert result.total_revenue == 0
    assert "Total: $0.00." in result.methodology


@pytest.mark.asyncio
async def test_total_is_sum_of_parts(estimator):
    result = await estimator.estimate(123_456, 7_890_123, "education")
    assert result.total_revenue == pytest.approx(result.long_form_revenue + result.short_form_revenue)
    assert result.total_revenue >= 0


@pytest.mark.asyncio
async def test_huge_view_counts_do_not_overflow(estimator):
    result = await estimator.estimate(5_000_000_000, 0, "finance")
    assert result.long_form_revenue == pytest.approx(110_000_000.0)


@pytest.mark.asyncio
async def test_alias_and_unknown_categories(estimator):
    assert (await estimator.estimate(1000, 0, "fitness")).long_form_rpm == 10.0
    assert (await estimator.estimate(1000, 0, "mystery")).category_id == "general"


@pytest.mark.asyncio
@pytest.mark.parametrize("views", [-1, 1.5, "1000", True, None])
async def test_invalid_views_rejected(estimator, views):
    with pytest.raises(InvalidViewCountError):
        await estimator.estimate(views, 0, "finance")
    with pytest.raises(ValueError):
        await estimator.estimate(0, views, "finance")


@pytest.mark.asyncio
async def test_whole_float_views_accepted(estimator):
    result = await estimator.estimate(1000.0, 0, "finance")
    assert result.long_form_views == 1000


@pytest.mark.asyncio
async def test_seasonal_adjustment_in_december(estimator):
    result = await estimator.estimate(1_000_000, 0, "finance", month=12)
    assert result.long_form_rpm == pytest.approx(27.5)
    assert result.total_revenue == pytest.approx(27_500.0)
    assert "month 12" in result.methodology


@pytest.mark.asyncio
async def test_estimate_range(estimator):
    result = await estimator.estimate_range(1_000_000, 1_000_000, "finance")
    assert result.conservative == pytest.approx(15_150.0)
    assert result.realistic == pytest.approx(22_150.0)
    assert result.optimistic == pytest.approx(30_150.0)
    assert result.conservative <= result.realistic <= result.optimistic

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.benchmark_validator import (
    benchmark_ranges,
    build_transparency_report,
    check_creator_benchmark,
    validate,
)
from processor.rate_resolver import RateResolver
from processor.revenue_estimator import RevenueBreakdown


def _breakdown(total, long_views=1_000_000, short_views=0):
    return RevenueBreakdown(
        long_form_views=long_views,
        short_form_views=short_views,
        long_form_rpm=4.0,
        short_form_rpm=0.15,
        long_form_revenue=total,
        short_form_revenue=0.0,
        total_revenue=total,
        methodology="test methodology",
    )


def test_benchmark_ranges_for_one_million_views():
    raw, realistic = benchmark_ranges(1_000_000)
    assert raw.low == pytest.approx(250.0)
    assert raw.high == pytest.approx(4_000.0)
    assert realistic.conservative == pytest.approx(55.0)
    assert realistic.realistic == pytest.approx(701.25)
    assert realistic.optimistic == pytest.approx(1_760.0)


def test_high_agreement():
    result = validate(_breakdown(750.0))
    assert result.difference_pct == pytest.approx(6.95, abs=0.01)
    assert result.confidence == "high"
    assert result.is_within_range is True


def test_medium_agreement():
    result = validate(_breakdown(1_000.0))
    assert result.confidence == "medium"


def test_low_agreement_but_inside_raw_range():
    result = validate(_breakdown(4_000.0))
    assert result.confidence == "low"
    assert result.is_within_range is True


def test_outside_both_ranges():
    result = validate(_breakdown(10.0))
    assert result.is_within_range is False
    assert result.confidence == "low"


def test_total_views_defaults_to_long_plus_short():
    result = validate(_breakdown(750.0, long_views=600_000, short_views=400_000))
    assert result.total_views == 1_000_000


def test_zero_views_zero_estimate_is_full_agreement():
    result = validate(_breakdown(0.0, long_views=0), total_views=0)
    assert result.difference_pct == 0.0
    assert result.confidence == "high"
    assert result.is_within_range is True


def test_zero_views_nonzero_estimate_is_low():
    result = validate(_breakdown(5.0, long_views=0), total_views=0)
    assert result.difference_pct == float("inf")
    assert result.confidence == "low"


def test_validate_does_not_mutate_breakdown():
    breakdown = _breakdown(750.0)
    validate(breakdown)
    assert breakdown.total_revenue == 750.0


def test_transparency_report_sections():
    report = build_transparency_report(validate(_breakdown(750.0)))
    assert report.startswith("# Revenue Estimate Transparency Report")
    assert "## Our Estimate" in report
    assert "## Benchmark Comparison" in report
    assert "## Methodology" in report
    assert "test methodology" in report
    assert "Agreement: high" in report


def test_transparency_report_handles_infinite_difference():
    report = build_transparency_report(validate(_breakdown(5.0, long_views=0), total_views=0))
    assert "Difference: n/a" in report


@pytest.mark.asyncio
async def test_creator_benchmark_finance_underestimates():
    results = await check_creator_benchmark("finance", RateResolver(source=None))
    assert len(results) == 1
    assert results[0].status == "underestimate"
    assert results[0].accuracy_pct == pytest.approx(75.09, abs=0.01)


@pytest.mark.asyncio
async def test_creator_benchmark_gaming_accurate():
    results = await check_creator_benchmark("games", RateResolver(source=None))
    assert results[0].status == "accurate"
    assert results[0].our_rpm_usd == 4.0


@pytest.mark.asyncio
async def test_creator_benchmark_without_reference():
    assert await check_creator_benchmark("food", RateResolver(source=None)) == []

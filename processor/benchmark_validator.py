"""추정치 벤치마크 검증 — 업계 CPM 기준 비교 + 크리에이터 공개 수익 대조.

원시 기준: total_views / 1000 × CPM [$0.25, $4.00]
현실 기준 (크리에이터 몫 55%, 수익화 조회 비율 적용):
  conservative  0.25  × 0.40 × 0.55
  realistic     2.125 × 0.60 × 0.55   (CPM 중간값)
  optimistic    4.00  × 0.80 × 0.55
difference_pct = |ours - realistic| / realistic × 100
  <= 20 → high, <= 50 → medium, 그 외 low
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from processor.rate_resolver import RateResolver
from processor.rate_table import normalize_category_id
from processor.revenue_estimator import RevenueBreakdown

MIN_CPM = 0.25
MAX_CPM = 4.00
MID_CPM = (MIN_CPM + MAX_CPM) / 2
CREATOR_SHARE = 0.55

MONETIZED_SHARE = {
    "conservative": 0.40,
    "realistic": 0.60,
    "optimistic": 0.80,
}

HIGH_AGREEMENT_PCT = 20.0
MEDIUM_AGREEMENT_PCT = 50.0
CREATOR_ACCURACY_THRESHOLD = 80.0

BENCHMARK_SOURCE = "Industry CPM benchmark (raw $0.25-$4.00 per 1,000 views)"


@dataclass(frozen=True)
class BenchmarkRange:
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class RealisticRange:
    conservative: float
    realistic: float
    optimistic: float

    def contains(self, value: float) -> bool:
        return self.conservative <= value <= self.optimistic


@dataclass(frozen=True)
class ValidationComparison:
    our_estimate: float
    total_views: int
    benchmark_raw: BenchmarkRange
    benchmark_realistic: RealisticRange
    difference_pct: float
    confidence: str  # high | medium | low
    is_within_range: bool
    methodology: str = ""
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CreatorBenchmark:
    creator: str
    category_id: str
    reported_rpm_usd: float
    reported_earnings_usd: float
    monthly_views: int
    confidence: str
    source: str


@dataclass(frozen=True)
class CreatorComparison:
    benchmark: CreatorBenchmark
    our_rpm_usd: float
    accuracy_pct: float
    status: str  # accurate | overestimate | underestimate


CREATOR_BENCHMARKS: list[CreatorBenchmark] = [
    CreatorBenchmark(
        creator="Joshua Mayo (Finance)",
        category_id="finance",
        reported_rpm_usd=29.30,
        reported_earnings_usd=613_960,
        monthly_views=1_750_000,
        confidence="high",
        source="Creator earnings disclosure 2024",
    ),
    CreatorBenchmark(
        creator="MrBeast Gaming",
        category_id="gaming",
        reported_rpm_usd=4.50,
        reported_earnings_usd=2_000_000,
        monthly_views=444_444_444,
        confidence="medium",
        source="Public interview estimates 2024",
    ),
]

OUR_ADVANTAGES = [
    "Category-specific long-form RPM instead of one flat CPM",
    "Separate short-form rate",
    "Every figure restated in the methodology",
]
OUR_LIMITATIONS = [
    "Static rates lag live market movement unless a live source is configured",
    "Channel-level factors (audience geography, watch time) are not modeled",
]
BENCHMARK_ADVANTAGES = [
    "Wide industry CPM range covers most channel types",
]
BENCHMARK_LIMITATIONS = [
    "Single range for every niche",
    "Monetized-view share and creator split are assumptions",
]


def benchmark_ranges(total_views: int) -> tuple[BenchmarkRange, RealisticRange]:
    """원시 CPM 범위와 현실 보정 범위."""
    per_mille = total_views / 1000
    raw = BenchmarkRange(low=per_mille * MIN_CPM, high=per_mille * MAX_CPM)
    realistic = RealisticRange(
        conservative=per_mille * MIN_CPM * MONETIZED_SHARE["conservative"] * CREATOR_SHARE,
        realistic=per_mille * MID_CPM * MONETIZED_SHARE["realistic"] * CREATOR_SHARE,
        optimistic=per_mille * MAX_CPM * MONETIZED_SHARE["optimistic"] * CREATOR_SHARE,
    )
    return raw, realistic


def _agreement(difference_pct: float) -> str:
    if difference_pct <= HIGH_AGREEMENT_PCT:
        return "high"
    if difference_pct <= MEDIUM_AGREEMENT_PCT:
        return "medium"
    return "low"


def validate(breakdown: RevenueBreakdown, total_views: int | None = None) -> ValidationComparison:
    """추정치를 벤치마크 범위와 비교 (읽기 전용)."""
    if total_views is None:
        total_views = breakdown.long_form_views + breakdown.short_form_views
    if total_views < 0:
        raise ValueError(f"total_views must be >= 0, got {total_views}")

    ours = breakdown.total_revenue
    raw, realistic = benchmark_ranges(total_views)

    if realistic.realistic > 0:
        difference_pct = abs(ours - realistic.realistic) / realistic.realistic * 100
    else:
        # 조회수 0: 추정치도 0이면 완전 일치, 아니면 비교 불가
        difference_pct = 0.0 if ours == 0 else float("inf")

    comparison = ValidationComparison(
        our_estimate=ours,
        total_views=total_views,
        benchmark_raw=raw,
        benchmark_realistic=realistic,
        difference_pct=difference_pct,
        confidence=_agreement(difference_pct),
        is_within_range=raw.contains(ours) or realistic.contains(ours),
        methodology=breakdown.methodology,
        notes=_notes(ours, realistic),
    )
    logger.debug(
        f"[benchmark_validator] ours=${ours:,.2f} realistic=${realistic.realistic:,.2f} "
        f"diff={difference_pct:.1f}% ({comparison.confidence})"
    )
    return comparison


def _notes(ours: float, realistic: RealisticRange) -> list[str]:
    if ours > realistic.optimistic:
        return ["Estimate is above the optimistic benchmark; typical for high-RPM niches such as finance and business."]
    if ours < realistic.conservative:
        return ["Estimate is below the conservative benchmark; typical for low-RPM niches or short-form heavy channels."]
    return ["Estimate falls inside the realistic benchmark range."]


def build_transparency_report(comparison: ValidationComparison) -> str:
    """비교 결과를 마크다운 리포트로."""
    diff = "n/a" if comparison.difference_pct == float("inf") else f"{comparison.difference_pct:.1f}%"
    lines = [
        "# Revenue Estimate Transparency Report",
        "",
        "## Our Estimate",
        f"- Total: ${comparison.our_estimate:,.2f}",
        f"- Views: {comparison.total_views:,}",
        "",
        "## Benchmark Comparison",
        f"- Source: {BENCHMARK_SOURCE}",
        f"- Raw range: ${comparison.benchmark_raw.low:,.2f} - ${comparison.benchmark_raw.high:,.2f}",
        (
            f"- Realistic range: ${comparison.benchmark_realistic.conservative:,.2f} / "
            f"${comparison.benchmark_realistic.realistic:,.2f} / "
            f"${comparison.benchmark_realistic.optimistic:,.2f}"
        ),
        f"- Difference: {diff}",
        f"- Agreement: {comparison.confidence}",
        f"- Within range: {'yes' if comparison.is_within_range else 'no'}",
        "",
        "## Methodology",
        comparison.methodology or "-",
        "",
        "### Our approach",
        *[f"- (+) {item}" for item in OUR_ADVANTAGES],
        *[f"- (-) {item}" for item in OUR_LIMITATIONS],
        "",
        "### Benchmark approach",
        *[f"- (+) {item}" for item in BENCHMARK_ADVANTAGES],
        *[f"- (-) {item}" for item in BENCHMARK_LIMITATIONS],
    ]
    if comparison.notes:
        lines += ["", "## Notes", *[f"- {note}" for note in comparison.notes]]
    return "\n".join(lines) + "\n"


async def check_creator_benchmark(category_id: str, resolver: RateResolver) -> list[CreatorComparison]:
    """해석된 RPM을 크리에이터 공개 수익과 대조."""
    key = normalize_category_id(category_id, resolver.rates)
    our_rpm = await resolver.resolve_rate(key)

    results: list[CreatorComparison] = []
    for bench in CREATOR_BENCHMARKS:
        if bench.category_id != key:
            continue
        accuracy = 100 - abs(our_rpm - bench.reported_rpm_usd) / bench.reported_rpm_usd * 100
        if accuracy >= CREATOR_ACCURACY_THRESHOLD:
            status = "accurate"
        elif our_rpm > bench.reported_rpm_usd:
            status = "overestimate"
        else:
            status = "underestimate"
        results.append(CreatorComparison(bench, our_rpm, round(accuracy, 2), status))
        logger.debug(f"[benchmark_validator] {bench.creator}: ours ${our_rpm:.2f} vs ${bench.reported_rpm_usd:.2f} → {status}")
    return results

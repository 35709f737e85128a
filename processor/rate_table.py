"""카테고리별 RPM 단가 테이블 (USD, 1,000뷰 기준).

롱폼 RPM은 카테고리별로 다르고, 숏폼 RPM은 전 카테고리 공통 $0.15.
min/max 범위로 보수적~공격적 추정 모두 지원.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

RATE_TABLE_VERSION = "2024-2025"

# 숏폼은 플랫폼 공통 단가 (카테고리 무관)
SHORT_FORM_RPM_USD = 0.15

DEFAULT_CATEGORY_ID = "general"


class CatalogError(ValueError):
    """Static rate table or niche catalog failed validation at load time."""


@dataclass(frozen=True)
class CategoryRate:
    category_id: str
    display_name: str
    long_form_rpm_usd: float
    short_form_rpm_usd: float
    description: str
    min_rpm_usd: float
    max_rpm_usd: float


# ──────────────────────────────────────────────
# 카테고리 단가 (롱폼 RPM 내림차순)
# ──────────────────────────────────────────────
_CATEGORY_ROWS = [
    # (id, 표시명, 롱폼 RPM, min, max, 설명)
    ("finance", "Finance & Investment", 22.0, 15.0, 30.0,
     "Personal finance, investing, crypto, wealth building"),
    ("business", "Business & Entrepreneurship", 18.0, 15.0, 25.0,
     "Make money online, dropshipping, digital marketing, startups"),
    ("tech", "Technology & Software", 15.0, 8.0, 25.0,
     "Programming, AI, software reviews, tech tutorials"),
    ("education", "Education & Learning", 12.0, 5.0, 15.0,
     "Online courses, tutorials, skill development"),
    ("health", "Health & Wellness", 10.0, 4.0, 12.0,
     "Fitness, nutrition, mental health, medical advice"),
    ("science", "Science & Research", 9.0, 5.0, 13.0,
     "Scientific content, research, experiments"),
    ("automotive", "Automotive & Transportation", 8.0, 4.0, 15.0,
     "Car reviews, automotive repair, transportation"),
    ("travel", "Travel & Adventure", 7.0, 3.0, 10.0,
     "Travel vlogs, destinations, adventure content"),
    ("lifestyle", "Lifestyle & Personal", 6.0, 2.0, 9.0,
     "Personal development, relationships, daily life"),
    ("sports", "Sports & Fitness", 5.5, 3.0, 8.0,
     "Sports content, athletics, fitness routines"),
    ("creative", "Creative & Arts", 5.0, 2.0, 8.0,
     "Art, design, music production, photography"),
    ("gaming", "Gaming & Esports", 4.0, 2.0, 6.0,
     "Video games, streaming, esports, game reviews"),
    ("entertainment", "Entertainment & Comedy", 3.5, 1.5, 5.0,
     "Movies, TV, comedy, celebrities, pop culture"),
    ("food", "Food & Cooking", 3.0, 2.0, 8.0,
     "Recipes, cooking tutorials, food reviews"),
    ("general", "General Content", 4.0, 2.0, 6.0,
     "Mixed content, vlogging, general topics"),
]


# ──────────────────────────────────────────────
# 카테고리 별칭 → 정규 ID (수집/조회 공통)
# ──────────────────────────────────────────────
CATEGORY_ALIASES: dict[str, str] = {
    "financial": "finance",
    "investing": "finance",
    "investment": "finance",
    "money": "finance",
    "real estate": "finance",
    "realestate": "finance",
    "real_estate": "finance",
    "property": "finance",
    "technology": "tech",
    "reviews": "tech",
    "gadgets": "tech",
    "software": "tech",
    "educational": "education",
    "tutorial": "education",
    "learning": "education",
    "entrepreneur": "business",
    "startup": "business",
    "marketing": "business",
    "digital_marketing": "business",
    "fitness": "health",
    "wellness": "health",
    "workout": "health",
    "health_fitness": "health",
    "vlog": "lifestyle",
    "daily": "lifestyle",
    "beauty": "lifestyle",
    "fashion": "lifestyle",
    "makeup": "lifestyle",
    "style": "lifestyle",
    "beauty_fashion": "lifestyle",
    "games": "gaming",
    "esports": "gaming",
    "cooking": "food",
    "recipe": "food",
    "food_cooking": "food",
    "adventure": "travel",
    "comedy": "entertainment",
    "funny": "entertainment",
    "music": "creative",
    "songs": "creative",
    "artist": "creative",
    "art": "creative",
    "cars": "automotive",
    "auto": "automotive",
    "research": "science",
    "athletics": "sports",
}

# ──────────────────────────────────────────────
# 월별 계절 가중치 (4분기 연말 광고 수요 반영)
# ──────────────────────────────────────────────
SEASONAL_MULTIPLIERS = (
    0.95,  # 1월
    0.95,  # 2월
    1.00,  # 3월
    1.00,  # 4월
    1.00,  # 5월
    1.00,  # 6월
    1.00,  # 7월
    1.00,  # 8월
    1.05,  # 9월
    1.15,  # 10월
    1.20,  # 11월
    1.25,  # 12월
)


def build_rate_table(rows=None) -> dict[str, CategoryRate]:
    """행 목록을 검증해 category_id → CategoryRate 딕셔너리로 변환."""
    table: dict[str, CategoryRate] = {}
    for category_id, name, rpm, min_rpm, max_rpm, description in rows or _CATEGORY_ROWS:
        if category_id in table:
            raise CatalogError(f"duplicate category id: {category_id!r}")
        if not (0 < min_rpm <= rpm <= max_rpm):
            raise CatalogError(
                f"category {category_id!r}: RPM {rpm} outside range {min_rpm}-{max_rpm}"
            )
        table[category_id] = CategoryRate(
            category_id=category_id,
            display_name=name,
            long_form_rpm_usd=float(rpm),
            short_form_rpm_usd=SHORT_FORM_RPM_USD,
            description=description,
            min_rpm_usd=float(min_rpm),
            max_rpm_usd=float(max_rpm),
        )
    if DEFAULT_CATEGORY_ID not in table:
        raise CatalogError(f"rate table is missing the {DEFAULT_CATEGORY_ID!r} category")
    return table


CATEGORY_RATES: dict[str, CategoryRate] = build_rate_table()


# ──────────────────────────────────────────────
# 유틸리티
# ──────────────────────────────────────────────

_SPACES_RE = re.compile(r"\s+")


def normalize_category_id(raw: str | None, rates: dict[str, CategoryRate] | None = None) -> str:
    """카테고리명/별칭을 정규 ID로 변환. 모르는 값은 general."""
    rates = rates if rates is not None else CATEGORY_RATES
    key = _SPACES_RE.sub(" ", (raw or "").strip().lower())
    if key in rates:
        return key
    alias = CATEGORY_ALIASES.get(key) or CATEGORY_ALIASES.get(key.replace("-", " "))
    if alias and alias in rates:
        return alias
    return DEFAULT_CATEGORY_ID


def is_canonical_category(raw: str | None) -> bool:
    """정규 카테고리 ID면 True (별칭은 False)."""
    key = _SPACES_RE.sub(" ", (raw or "").strip().lower())
    return key in CATEGORY_RATES


def get_category_rate(category_id: str | None) -> CategoryRate:
    """카테고리 ID(별칭 허용)로 단가 정보 반환."""
    return CATEGORY_RATES[normalize_category_id(category_id)]


def get_static_rpm(category_id: str | None) -> float:
    """정적 테이블 기준 롱폼 RPM."""
    return get_category_rate(category_id).long_form_rpm_usd


def apply_seasonal_adjustment(base_rpm: float, month: int) -> float:
    """월(1~12) 계절 가중치를 RPM에 적용."""
    if not 1 <= int(month) <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return base_rpm * SEASONAL_MULTIPLIERS[int(month) - 1]

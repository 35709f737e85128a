"""니치 카탈로그 — 세부 니치 → 상위 카테고리 매핑 + 매칭용 인덱스.

로드 시점에 전체 데이터를 검증하고(중복 ID, 미등록 카테고리, 빈 키워드),
검색용 보조 인덱스를 한 번만 구축한다. 모든 인덱스는 카탈로그 선언 순서를
유지하므로 "먼저 선언된 니치 우선" 규칙이 그대로 보존된다.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from loguru import logger

from processor.niche_data import NICHE_ROWS
from processor.rate_table import (
    CATEGORY_RATES,
    DEFAULT_CATEGORY_ID,
    CatalogError,
    CategoryRate,
)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_SPACES_RE = re.compile(r"\s+")


def normalize_term(text: str | None) -> str:
    """매칭용 정규화: 악센트 제거 + 소문자 + 영숫자/공백만 유지 + 공백 축약."""
    if not text:
        return ""
    folded = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    cleaned = _NON_ALNUM_RE.sub("", folded.lower())
    return _SPACES_RE.sub(" ", cleaned).strip()


@dataclass(frozen=True)
class NicheEntry:
    niche_id: str
    display_name: str
    parent_category: str
    keywords: tuple[str, ...]
    aliases: tuple[str, ...]
    long_form_rpm_usd: float
    description: str


class NicheCatalog:
    """검증된 니치 목록과 매칭 인덱스."""

    def __init__(self, niches: list[NicheEntry], rates: dict[str, CategoryRate]):
        self._rates = rates
        self._niches: tuple[NicheEntry, ...] = tuple(niches)
        self._by_id: dict[str, NicheEntry] = {}

        # 정규화된 용어 → 첫 번째 니치 (정확 매칭)
        self._exact_index: dict[str, NicheEntry] = {}
        # 니치별 (키워드 + 별칭 + 표시명) 정규화 용어 (부분 매칭)
        self._partial_terms: list[tuple[NicheEntry, tuple[str, ...]]] = []
        # (정규화 용어, 니치): 키워드/별칭만 (퍼지 매칭)
        self._fuzzy_terms: list[tuple[str, NicheEntry]] = []

        for niche in self._niches:
            self._validate(niche)
            self._by_id[niche.niche_id] = niche

            keyword_terms = [normalize_term(k) for k in niche.keywords]
            alias_terms = [normalize_term(a) for a in niche.aliases]
            name_term = normalize_term(niche.display_name)

            terms = keyword_terms + alias_terms + ([name_term] if name_term else [])
            for term in terms:
                self._exact_index.setdefault(term, niche)
            self._partial_terms.append((niche, tuple(terms)))
            for term in keyword_terms + alias_terms:
                self._fuzzy_terms.append((term, niche))

        if DEFAULT_CATEGORY_ID not in self._by_id:
            raise CatalogError(f"catalog is missing the reserved {DEFAULT_CATEGORY_ID!r} niche")

        logger.debug(
            f"[niche_catalog] {len(self._niches)}개 니치 로드, "
            f"정확 매칭 용어 {len(self._exact_index)}개"
        )

    def _validate(self, niche: NicheEntry) -> None:
        if not niche.niche_id:
            raise CatalogError("niche with empty id")
        if niche.niche_id in self._by_id:
            raise CatalogError(f"duplicate niche id: {niche.niche_id!r}")
        if niche.parent_category not in self._rates:
            raise CatalogError(
                f"niche {niche.niche_id!r} references unknown category {niche.parent_category!r}"
            )
        if not niche.keywords:
            raise CatalogError(f"niche {niche.niche_id!r} has no keywords")
        for term in niche.keywords + niche.aliases:
            if not normalize_term(term):
                raise CatalogError(
                    f"niche {niche.niche_id!r} has a keyword/alias that is empty after normalization: {term!r}"
                )
        if niche.long_form_rpm_usd <= 0:
            raise CatalogError(f"niche {niche.niche_id!r} has non-positive RPM")

    # ── 조회 ──

    def __len__(self) -> int:
        return len(self._niches)

    def __iter__(self):
        return iter(self._niches)

    @property
    def rates(self) -> dict[str, CategoryRate]:
        return self._rates

    def get(self, niche_id: str) -> NicheEntry | None:
        return self._by_id.get(niche_id)

    def category_for(self, niche: NicheEntry) -> CategoryRate:
        return self._rates[niche.parent_category]

    @property
    def default_niche(self) -> NicheEntry:
        return self._by_id[DEFAULT_CATEGORY_ID]

    @property
    def default_category(self) -> CategoryRate:
        return self._rates[DEFAULT_CATEGORY_ID]

    def niches_by_category(self, category_id: str) -> list[NicheEntry]:
        """상위 카테고리에 속한 니치 목록 (선언 순서)."""
        return [n for n in self._niches if n.parent_category == category_id]

    # ── 매칭 인덱스 ──

    def find_exact(self, normalized: str) -> tuple[NicheEntry, str] | None:
        niche = self._exact_index.get(normalized)
        if niche is None:
            return None
        return niche, normalized

    def find_partial(self, normalized: str) -> tuple[NicheEntry, str] | None:
        """카탈로그 순서로 첫 번째 부분 일치 니치.

        질의가 용어의 부분 문자열이거나, 용어가 질의 안에 단어 단위로 포함되면 일치.
        길이 기반 순위는 두지 않는다.
        """
        padded_query = f" {normalized} "
        for niche, terms in self._partial_terms:
            for term in terms:
                if normalized in term or f" {term} " in padded_query:
                    return niche, term
        return None

    def fuzzy_candidates(self) -> list[tuple[str, NicheEntry]]:
        return self._fuzzy_terms

    def suggestions(self, term: str, limit: int = 5) -> list[NicheEntry]:
        """부분 검색어 기반 추천 — 포함 비율이 높은 순."""
        normalized = normalize_term(term)
        if len(normalized) < 2:
            return []

        scored: list[tuple[float, NicheEntry]] = []
        for niche, terms in self._partial_terms:
            best = 0.0
            for candidate in terms:
                if normalized in candidate:
                    best = max(best, len(normalized) / len(candidate))
            if best > 0:
                scored.append((best, niche))

        scored.sort(key=lambda item: item[0], reverse=True)
        return [niche for _, niche in scored[:limit]]


def load_catalog(rows: list[dict] | None = None, rates: dict[str, CategoryRate] | None = None) -> NicheCatalog:
    """원시 행(dict) 목록으로 카탈로그 생성. 잘못된 데이터면 CatalogError."""
    rates = rates if rates is not None else CATEGORY_RATES
    niches: list[NicheEntry] = []
    for row in rows if rows is not None else NICHE_ROWS:
        try:
            niches.append(
                NicheEntry(
                    niche_id=row["id"],
                    display_name=row["name"],
                    parent_category=row["category"],
                    keywords=tuple(row["keywords"]),
                    aliases=tuple(row.get("aliases") or ()),
                    long_form_rpm_usd=float(row["rpm"]),
                    description=row.get("description", ""),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"malformed niche row {row.get('id', '?')!r}: {e}") from e
    return NicheCatalog(niches, rates)


NICHE_CATALOG = load_catalog()

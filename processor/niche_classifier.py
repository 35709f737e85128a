"""니치 분류기 — 자유 입력 니치 → 카탈로그 니치/카테고리.

단계 (먼저 성공한 단계가 결과):
  1. 정규화 (빈 입력이면 바로 default)
  2. exact  : 키워드/별칭/표시명 완전 일치
  3. partial: 부분 문자열 또는 단어 단위 포함 (카탈로그 순서 우선)
  4. fuzzy  : Levenshtein 거리 <= min(3, floor(0.3 * len))
  5. semantic: CategoryMapper 신뢰도 > 0.3
  6. default: general, is_unknown=True, on_unknown 훅 호출

classify()는 어떤 입력에도 예외를 던지지 않는다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from loguru import logger
from rapidfuzz.distance import Levenshtein

from processor.category_mapper import CategoryMapper
from processor.niche_catalog import NICHE_CATALOG, NicheCatalog, NicheEntry, normalize_term
from processor.rate_table import CategoryRate

SEMANTIC_MIN_CONFIDENCE = 0.3
FUZZY_MAX_DISTANCE = 3
FUZZY_LENGTH_RATIO = 0.3


@dataclass(frozen=True)
class ClassificationResult:
    query: str
    match_type: str  # exact | partial | fuzzy | semantic | default
    matched_category: CategoryRate
    matched_niche: NicheEntry | None = None
    matched_term: str | None = None
    confidence: float | None = None
    reasoning: str = ""
    suggestions: list[str] = field(default_factory=list)
    is_unknown: bool = False

    @property
    def niche_id(self) -> str:
        if self.matched_niche is not None:
            return self.matched_niche.niche_id
        return f"intelligent-{self.matched_category.category_id}"

    @property
    def display_name(self) -> str:
        if self.matched_niche is not None:
            return self.matched_niche.display_name
        return self.matched_category.display_name

    @property
    def long_form_rpm_usd(self) -> float:
        if self.matched_niche is not None:
            return self.matched_niche.long_form_rpm_usd
        return self.matched_category.long_form_rpm_usd


def _log_unknown(query: str) -> None:
    logger.info(f"[niche_classifier] 미분류 니치 검토 대기: {query!r}")


def fuzzy_threshold(normalized: str) -> int:
    """질의 길이에 따른 허용 편집 거리."""
    return min(FUZZY_MAX_DISTANCE, int(FUZZY_LENGTH_RATIO * len(normalized)))


class NicheClassifier:
    """카탈로그 기반 니치 분류기."""

    def __init__(
        self,
        catalog: NicheCatalog | None = None,
        mapper: CategoryMapper | None = None,
        on_unknown: Callable[[str], None] | None = None,
        use_semantic: bool = True,
    ):
        self.catalog = catalog if catalog is not None else NICHE_CATALOG
        if mapper is None and use_semantic:
            mapper = CategoryMapper(rates=self.catalog.rates)
        self.mapper = mapper
        self.on_unknown = on_unknown or _log_unknown

    def classify(self, query: str | None) -> ClassificationResult:
        raw = query or ""
        normalized = normalize_term(raw)
        if not normalized:
            return self._default(raw, reason="No search term provided.", notify=False)

        # 1) 정확 매칭
        hit = self.catalog.find_exact(normalized)
        if hit:
            niche, term = hit
            return self._niche_result(raw, "exact", niche, term)

        # 2) 부분 매칭
        hit = self.catalog.find_partial(normalized)
        if hit:
            niche, term = hit
            return self._niche_result(raw, "partial", niche, term)

        # 3) 퍼지 매칭
        hit = self._fuzzy(normalized)
        if hit:
            niche, term, distance = hit
            logger.debug(f"[niche_classifier] fuzzy {normalized!r} ~ {term!r} (거리 {distance})")
            return self._niche_result(raw, "fuzzy", niche, term)

        # 4) 의미 기반 카테고리 추정
        semantic = self._semantic(raw)
        if semantic:
            return semantic

        # 5) 기본값
        return self._default(raw)

    # ── 단계별 구현 ──

    def _niche_result(self, raw: str, match_type: str, niche: NicheEntry, term: str) -> ClassificationResult:
        category = self.catalog.category_for(niche)
        logger.debug(f"[niche_classifier] {match_type} {raw!r} -> {niche.niche_id} ({category.category_id})")
        return ClassificationResult(
            query=raw,
            match_type=match_type,
            matched_category=category,
            matched_niche=niche,
            matched_term=term,
            reasoning=f'"{raw}" matched {niche.display_name} via {match_type} match on "{term}".',
        )

    def _fuzzy(self, normalized: str) -> tuple[NicheEntry, str, int] | None:
        max_distance = fuzzy_threshold(normalized)
        if max_distance < 1:
            return None

        best: tuple[NicheEntry, str, int] | None = None
        for term, niche in self.catalog.fuzzy_candidates():
            distance = Levenshtein.distance(normalized, term, score_cutoff=max_distance)
            if distance > max_distance:
                continue
            # 동일 거리면 카탈로그 순서 우선 (strict <)
            if best is None or distance < best[2]:
                best = (niche, term, distance)
        return best

    def _semantic(self, raw: str) -> ClassificationResult | None:
        if self.mapper is None:
            return None
        try:
            suggestion = self.mapper.suggest_category(raw)
        except Exception as e:
            logger.warning(f"[niche_classifier] semantic 매핑 실패 ({raw!r}): {e}")
            return None

        if suggestion.confidence <= SEMANTIC_MIN_CONFIDENCE:
            return None

        logger.debug(
            f"[niche_classifier] semantic {raw!r} -> {suggestion.category.category_id} "
            f"(신뢰도 {suggestion.confidence:.2f})"
        )
        return ClassificationResult(
            query=raw,
            match_type="semantic",
            matched_category=suggestion.category,
            confidence=suggestion.confidence,
            reasoning=suggestion.reasoning,
            suggestions=list(suggestion.suggestions),
        )

    def _default(self, raw: str, reason: str | None = None, notify: bool = True) -> ClassificationResult:
        category = self.catalog.default_category
        if reason is None:
            reason = (
                f'No relevant category found for "{raw}". Using general content category '
                f"(${category.long_form_rpm_usd:g}/1K RPM). Queued for catalog review."
            )
        if notify:
            try:
                self.on_unknown(raw)
            except Exception as e:
                logger.warning(f"[niche_classifier] on_unknown 훅 실패: {e}")

        return ClassificationResult(
            query=raw,
            match_type="default",
            matched_category=category,
            matched_niche=self.catalog.default_niche,
            reasoning=reason,
            is_unknown=True,
        )


_default_classifier: NicheClassifier | None = None


def get_classifier() -> NicheClassifier:
    """모듈 공용 분류기 (기본 카탈로그 + 기본 매퍼)."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = NicheClassifier()
    return _default_classifier

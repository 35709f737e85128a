from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.category_mapper import GENERAL_SUGGESTIONS, CategoryMapper


@pytest.fixture
def mapper():
    return CategoryMapper()


def test_single_keyword_hit_is_capped(mapper):
    result = mapper.suggest_category("tesla")
    assert result.category.category_id == "automotive"
    assert result.confidence == pytest.approx(0.95)
    assert '"tesla"' in result.reasoning
    assert len(result.suggestions) == 5


def test_craft_keyword_maps_to_creative(mapper):
    assert mapper.suggest_category("knitting").category.category_id == "creative"
    assert mapper.suggest_category("woodworking").category.category_id == "creative"


def test_concept_phrase_counts_every_token(mapper):
    result = mapper.suggest_category("personal finance")
    assert result.category.category_id == "finance"
    assert result.confidence == pytest.approx(0.95)


def test_partial_token_coverage_lowers_confidence(mapper):
    result = mapper.suggest_category("tesla gardening")
    assert result.category.category_id == "automotive"
    assert result.confidence == pytest.approx(0.5)


def test_unrelated_query_returns_general(mapper):
    result = mapper.suggest_category("zzqxjv")
    assert result.category.category_id == "general"
    assert result.confidence == 0.0
    assert result.suggestions == GENERAL_SUGGESTIONS


def test_empty_query_returns_general(mapper):
    result = mapper.suggest_category("  ")
    assert result.category.category_id == "general"
    assert result.confidence == 0.0


def test_category_suggestions_ranked(mapper):
    results = mapper.category_suggestions("car")
    assert results
    assert len(results) <= 3
    assert results[0].category.category_id == "automotive"
    assert "car" in results[0].suggestions


def test_category_suggestions_too_short(mapper):
    assert mapper.category_suggestions("c") == []

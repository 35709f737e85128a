from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from processor.niche_catalog import NICHE_CATALOG, load_catalog, normalize_term
from processor.rate_table import CatalogError


def _row(niche_id, category="tech", keywords=("python",), aliases=()):
    return {
        "id": niche_id,
        "name": niche_id.title(),
        "category": category,
        "rpm": 5.0,
        "keywords": list(keywords),
        "aliases": list(aliases),
    }


GENERAL_ROW = _row("general", category="general", keywords=("general",))


def test_normalize_term():
    assert normalize_term("  Pokémon  GO! ") == "pokemon go"
    assert normalize_term("C++ / C#") == "c c"
    assert normalize_term("   ") == ""
    assert normalize_term(None) == ""


def test_default_catalog_loads_and_has_general():
    assert len(NICHE_CATALOG) > 50
    assert NICHE_CATALOG.default_niche.niche_id == "general"
    assert NICHE_CATALOG.default_category.category_id == "general"


def test_every_niche_points_at_a_known_category():
    for niche in NICHE_CATALOG:
        assert NICHE_CATALOG.category_for(niche).category_id == niche.parent_category


def test_duplicate_niche_id_rejected():
    with pytest.raises(CatalogError):
        load_catalog([_row("web"), _row("web"), GENERAL_ROW])


def test_unknown_parent_category_rejected():
    with pytest.raises(CatalogError):
        load_catalog([_row("web", category="underwater"), GENERAL_ROW])


def test_keyword_empty_after_normalization_rejected():
    with pytest.raises(CatalogError):
        load_catalog([_row("web", keywords=("!!!",)), GENERAL_ROW])


def test_missing_keywords_rejected():
    with pytest.raises(CatalogError):
        load_catalog([_row("web", keywords=()), GENERAL_ROW])


def test_missing_general_niche_rejected():
    with pytest.raises(CatalogError):
        load_catalog([_row("web")])


def test_malformed_row_rejected():
    with pytest.raises(CatalogError):
        load_catalog([{"id": "web", "category": "tech"}, GENERAL_ROW])


def test_exact_index_keeps_first_niche_in_catalog_order():
    niche, term = NICHE_CATALOG.find_exact("building")
    assert niche.niche_id == "minecraft"
    assert term == "building"


def test_partial_match_is_first_in_catalog_order():
    niche, term = NICHE_CATALOG.find_partial("build")
    assert niche.niche_id == "minecraft"
    assert term == "building"


def test_partial_match_does_not_hit_inside_words():
    catalog = load_catalog([_row("ai", keywords=("ai",)), GENERAL_ROW])
    assert catalog.find_partial("hairdresser") is None
    niche, _ = catalog.find_partial("ai art")
    assert niche.niche_id == "ai"


def test_niches_by_category_keeps_order():
    gaming = NICHE_CATALOG.niches_by_category("gaming")
    assert gaming[0].niche_id == "minecraft"
    assert all(n.parent_category == "gaming" for n in gaming)


def test_suggestions_rank_by_coverage():
    results = NICHE_CATALOG.suggestions("minecraf")
    assert results[0].niche_id == "minecraft"
    assert NICHE_CATALOG.suggestions("m") == []


def test_get_by_id():
    assert NICHE_CATALOG.get("pokemon").parent_category == "gaming"
    assert NICHE_CATALOG.get("nope") is None

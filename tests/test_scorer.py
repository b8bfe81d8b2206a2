import pytest

from cheers.brand.brand_models import BrandRecord, Category
from cheers.brand.scorer import FuzzyIndex, best_window_distance, field_norm, fuzzy_score


def test_one_missing_letter():
    assert fuzzy_score("Budwiser", "Budweiser") == 0.125


def test_substring_is_perfect_regardless_of_position():
    assert fuzzy_score("bud", "Budweiser") == 0.0
    assert fuzzy_score("artois", "Stella Artois") == 0.0


def test_multi_word_names_are_field_normed():
    assert field_norm("Corona") == 1.0
    assert field_norm("Stella Artois") == 0.707
    assert fuzzy_score("stela", "Stella Artois") == pytest.approx(0.2 ** 0.707)


def test_min_match_char_length():
    assert fuzzy_score("o", "Corona") is None
    assert fuzzy_score("co", "Corona") == 0.0


def test_threshold_rejects_far_names():
    assert fuzzy_score("xyz", "Corona") is None
    assert fuzzy_score("Xyzzyxx123", "Stella Artois") is None
    assert fuzzy_score("", "Corona") is None


def test_best_window_distance():
    assert best_window_distance("eisen", "budweiser", 1, 2) == 1
    assert best_window_distance("zzz", "budweiser", 1, 2) is None


def test_search_is_sorted_and_capped():
    records = [BrandRecord(name=f"Beer {i}", category=Category.OWNED) for i in range(7)]
    records.insert(0, BrandRecord(name="Bier", category=Category.COMPETITOR))
    idx = FuzzyIndex(records, limit=5)
    hits = idx.search("beer")
    assert len(hits) == 5
    scores = [h.score for h in hits]
    assert scores == sorted(scores)
    # à score égal, l'ordre de l'index est conservé
    assert [h.name for h in hits] == ["Beer 0", "Beer 1", "Beer 2", "Beer 3", "Beer 4"]


def test_search_blank_query(index):
    assert index.search("") == []
    assert index.search("   ") == []


def test_search_scores_non_decreasing(index):
    for q in ["bud", "stela", "Amstar", "Lagunita", "go", "mo"]:
        scores = [c.score for c in index.search(q)]
        assert scores == sorted(scores)
        assert all(0.0 <= s <= 1.0 for s in scores)

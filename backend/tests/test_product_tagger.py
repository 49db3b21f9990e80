import pytest

from cookmind.services.product_tagger import (
    extract_candidates,
    find_best_match,
    levenshtein_distance,
    map_categories_to_ingredient,
    normalize_name,
    remove_brand_names,
    similarity,
    suggest_ingredient_tag,
)
from cookmind.utils.constants import ALL_INGREDIENTS


def test_normalize_strips_case_accents_and_whitespace():
    assert normalize_name(" Maïs ") == "mais"
    assert normalize_name("CRÈME fraîche") == "creme fraiche"


@pytest.mark.parametrize(
    "product, expected",
    [
        ("AH Biologisch Rode Paprika", "rode paprika"),
        ("Albert Heijn Kipfilet", "kipfilet"),
        ("Jumbo Verse Spinazie", "verse spinazie"),
        # brand names only count as whole words
        ("Biologische Bloemkool", "biologische bloemkool"),
        ("Ahornsiroop", "ahornsiroop"),
    ],
)
def test_remove_brand_names(product, expected):
    assert remove_brand_names(product) == expected


@pytest.mark.parametrize(
    "product, expected",
    [
        ("Spinazie", ["spinazie"]),
        ("Rode Paprika", ["paprika"]),
        ("Verse Rode Paprika", ["paprika", "rode paprika"]),
        ("Jumbo verse rode punt paprika", ["paprika", "punt paprika", "rode punt paprika"]),
        ("AH ui", []),
        ("", []),
    ],
)
def test_extract_candidates(product, expected):
    assert extract_candidates(product) == expected


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("paprika", "paprika") == 0


def test_similarity():
    assert similarity("Maïs", "mais") == 1.0
    assert similarity("paprika", "rode paprika") == 0.8
    assert similarity("banaan", "bananen") == pytest.approx(5 / 7)
    assert similarity("kip", "zalm") == 0.0


def test_all_ingredients_has_no_duplicates():
    assert len(ALL_INGREDIENTS) == len(set(ALL_INGREDIENTS))
    assert "zalm" in ALL_INGREDIENTS
    assert ALL_INGREDIENTS[0] == "paprika"


def test_exact_match_returns_accented_tag():
    assert find_best_match(["mais"]) == "maïs"


def test_containment_match():
    assert find_best_match(["zalmfilet"]) == "zalm"


def test_fuzzy_match_above_threshold():
    assert find_best_match(["bananen"]) == "banaan"
    assert find_best_match(["bananen"], threshold=0.9) is None


def test_no_candidates_no_match():
    assert find_best_match([]) is None


def test_category_group_first_tag():
    assert map_categories_to_ingredient(["en:vegetables"]) == "paprika"


def test_category_specific_part():
    assert map_categories_to_ingredient(["en:fish, zalm"]) == "zalm"


def test_unknown_categories():
    assert map_categories_to_ingredient(["en:snacks"]) is None
    assert map_categories_to_ingredient([]) is None


@pytest.mark.parametrize(
    "product, categories, expected",
    [
        ("AH Biologisch Rode Paprika", None, "paprika"),
        ("Jumbo Verse Spinazie", None, "spinazie"),
        ("Gerookte Zalmfilet", None, "zalm"),
        ("Onbekend product", ["en:vegetables"], "paprika"),
        ("Verse Spinazie", ["en:snacks"], "spinazie"),
        ("AH ui", None, None),
        ("", ["en:vegetables"], None),
    ],
)
def test_suggest_ingredient_tag(product, categories, expected):
    assert suggest_ingredient_tag(product, categories) == expected

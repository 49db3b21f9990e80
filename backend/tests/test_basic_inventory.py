import pytest

from cookmind.services.basic_inventory import (
    basic_inventory_items,
    check_variant,
    find_covered_variants,
    get_basic_inventory_variants,
    is_basic_inventory_item,
)


def test_basic_items_in_display_order():
    items = basic_inventory_items()
    assert [item.name for item in items] == ["Zout", "Peper", "Boter", "Olijfolie"]
    boter = items[2]
    assert boter.category == "Zuivel"
    assert boter.quantity == 250
    assert boter.unit == "g"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Zout", True),
        ("  olijfolie ", True),
        ("BOTER", True),
        ("Zeezout", False),
        ("olijf", False),
        ("", False),
    ],
)
def test_is_basic_inventory_item(name, expected):
    assert is_basic_inventory_item(name) is expected


def test_variants_lookup_any_case():
    assert get_basic_inventory_variants("boter") == ["Margarine", "Roomboter", "Geklaarde boter"]
    assert get_basic_inventory_variants(" OLIJFOLIE ") == [
        "Zonnebloemolie", "Arachideolie", "Koolzaadolie", "Plantaardige olie",
    ]
    assert get_basic_inventory_variants("saffraan") == []


def test_variants_list_is_a_copy():
    variants = get_basic_inventory_variants("Peper")
    variants.append("Cayennepeper")
    assert "Cayennepeper" not in get_basic_inventory_variants("Peper")


def test_sunflower_oil_is_a_variant_of_olive_oil():
    result = check_variant("Zonnebloemolie", ["pasta", "Olijfolie"])
    assert result.is_variant
    assert result.basic_item == "Olijfolie"
    assert result.variant == "Zonnebloemolie"


def test_basic_item_owned_through_containment():
    # "roomboter" in stock counts as having "Boter"
    result = check_variant("margarine", ["Ongezouten roomboter"])
    assert result.is_variant
    assert result.basic_item == "Boter"
    assert result.variant == "margarine"


def test_variant_keeps_ingredient_as_given():
    result = check_variant("  Arachideolie ", ["olijfolie "])
    assert result.is_variant
    assert result.variant == "  Arachideolie "


def test_not_a_variant_without_the_basic_item():
    assert not check_variant("Zonnebloemolie", ["Boter", "Zout"]).is_variant
    assert not check_variant("Zonnebloemolie", []).is_variant


def test_direct_match_is_not_a_variant():
    result = check_variant("Olijfolie extra vierge", ["Olijfolie"])
    assert not result.is_variant
    assert result.basic_item is None
    assert result.variant is None

    # every salt variant contains "zout" itself, so it matches directly
    assert not check_variant("Zeezout", ["Zout"]).is_variant


def test_unrelated_ingredient_is_not_a_variant():
    assert not check_variant("saffraan", ["Zout", "Peper", "Boter", "Olijfolie"]).is_variant


def test_later_basic_items_are_checked():
    result = check_variant("Koolzaadolie", ["Zout", "Olijfolie"])
    assert result.is_variant
    assert result.basic_item == "Olijfolie"


def test_find_covered_variants():
    covered = find_covered_variants(
        ["Zonnebloemolie", "saffraan", "Margarine"],
        ["Olijfolie", "boter"],
    )
    assert covered == {"Zonnebloemolie": "Olijfolie", "Margarine": "Boter"}
    assert find_covered_variants([], ["Olijfolie"]) == {}

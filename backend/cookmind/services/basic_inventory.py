"""
Basic inventory items and their variants.

Every user starts with a few pantry staples (salt, pepper, butter, olive
oil). A recipe asking for a close variant of a staple, such as
"Zonnebloemolie" when the user has "Olijfolie", can be cooked with the
staple instead. This module detects that case.

Names are compared the way match scoring compares them (case-insensitive
containment either way), except that surrounding whitespace is trimmed
first.
"""

import logging
from typing import Dict, List, Optional, Sequence

from cookmind.models.inventory import BasicInventoryItem, VariantCheckResult
from cookmind.utils.constants import BASIC_INVENTORY_ITEMS, VARIANT_MAPPINGS
from cookmind.utils.helpers import ingredients_match

# Configure logging
logger = logging.getLogger(__name__)


def basic_inventory_items() -> List[BasicInventoryItem]:
    """The pantry staples seeded into a new inventory, in display order."""
    return [
        BasicInventoryItem(name=name, category=category, quantity=quantity, unit=unit)
        for name, category, quantity, unit in BASIC_INVENTORY_ITEMS
    ]


def _find_basic_item(name: str) -> Optional[str]:
    normalized = name.strip().lower()
    for basic_name, _, _, _ in BASIC_INVENTORY_ITEMS:
        if basic_name.lower() == normalized:
            return basic_name
    return None


def is_basic_inventory_item(name: str) -> bool:
    """
    Check whether a name is one of the basic items (exact, any case).

    Example:
        >>> is_basic_inventory_item(" olijfolie ")
        True
        >>> is_basic_inventory_item("Zonnebloemolie")
        False
    """
    return _find_basic_item(name) is not None


def get_basic_inventory_variants(basic_item: str) -> List[str]:
    """
    Variants of a basic item, or an empty list if it is not a basic item.

    Args:
        basic_item: Basic item name (any case)

    Returns:
        List[str]: Variant names, a fresh list
    """
    basic_name = _find_basic_item(basic_item)
    if basic_name is None:
        return []
    return list(VARIANT_MAPPINGS.get(basic_name, []))


def check_variant(recipe_ingredient: str, inventory: Sequence[str]) -> VariantCheckResult:
    """
    Check whether a recipe ingredient is a variant of a basic item in stock.

    Basic items are tried in order. Items the user does not have are
    skipped. If the ingredient matches an owned basic item itself, it is
    not a variant and the check stops there.

    Args:
        recipe_ingredient: Ingredient name from the recipe
        inventory: Ingredient names the user has

    Returns:
        VariantCheckResult: is_variant with the basic item and the ingredient,
        or is_variant=False

    Example:
        >>> check_variant("Zonnebloemolie", ["Olijfolie"]).basic_item
        'Olijfolie'
    """
    ingredient = recipe_ingredient.strip()
    owned = [entry.strip() for entry in inventory]

    for basic_name, _, _, _ in BASIC_INVENTORY_ITEMS:
        if not any(ingredients_match(entry, basic_name) for entry in owned):
            continue

        if ingredients_match(ingredient, basic_name):
            return VariantCheckResult(is_variant=False)

        for variant in VARIANT_MAPPINGS.get(basic_name, []):
            if ingredients_match(ingredient, variant):
                logger.debug(f"'{recipe_ingredient}' is a variant of '{basic_name}'")
                return VariantCheckResult(
                    is_variant=True,
                    basic_item=basic_name,
                    variant=recipe_ingredient,
                )

    return VariantCheckResult(is_variant=False)


def find_covered_variants(
    missing_ingredients: Sequence[str],
    inventory: Sequence[str]
) -> Dict[str, str]:
    """
    Map each missing ingredient that a basic item in stock covers to that item.

    Args:
        missing_ingredients: Recipe ingredients not found in the inventory
        inventory: Ingredient names the user has

    Returns:
        Dict[str, str]: Missing ingredient -> basic item name, in input order
    """
    covered: Dict[str, str] = {}
    for ingredient in missing_ingredients:
        result = check_variant(ingredient, inventory)
        if result.is_variant:
            covered[ingredient] = result.basic_item
    return covered

"""
Recipe-to-inventory match scoring.

This module computes how much of a recipe a user can cook from what they
have. An ingredient counts as available when some inventory entry contains
it, or is contained in it, after lower-casing both names:

- "kipfilet" is available from "verse kipfilet borst"
- "verse kipfilet borst" is available from "kipfilet"
- "kip" is NOT available from "chickenfilet" (no shared substring)

The score is the rounded percentage of recipe ingredients that are
available. A recipe without ingredients scores 0.

Substring containment is a crude similarity heuristic. There is no
stemming, edit distance or synonym handling, and whitespace is compared
as-is.
"""

import logging
from typing import List, Sequence, Tuple

from cookmind.models.match import MatchLevel, MatchResult
from cookmind.utils.constants import FULL_MATCH_SCORE, HIGH_MATCH_THRESHOLD
from cookmind.utils.helpers import find_matching_entry, safe_percentage

# Configure logging
logger = logging.getLogger(__name__)


def _partition(
    recipe_ingredients: Sequence[str],
    inventory: Sequence[str]
) -> Tuple[List[str], List[str]]:
    """Split recipe ingredients into (matched, missing), preserving order."""
    matched: List[str] = []
    missing: List[str] = []

    for ingredient in recipe_ingredients:
        if find_matching_entry(ingredient, inventory) is not None:
            matched.append(ingredient)
        else:
            missing.append(ingredient)

    return matched, missing


def score(recipe_ingredients: Sequence[str], inventory: Sequence[str]) -> int:
    """
    Compute the match percentage of a recipe against an inventory.

    Args:
        recipe_ingredients: Ingredient names required by the recipe
        inventory: Ingredient names the user has (duplicates allowed)

    Returns:
        int: Match percentage (0-100); 0 when the recipe lists no ingredients

    Example:
        >>> score(["kipfilet", "room"], ["verse kipfilet borst"])
        50
    """
    matched, _ = _partition(recipe_ingredients, inventory)
    return safe_percentage(len(matched), len(recipe_ingredients))


def find_missing_ingredients(
    recipe_ingredients: Sequence[str],
    inventory: Sequence[str]
) -> List[str]:
    """
    List the recipe ingredients that have no match in the inventory.

    Args:
        recipe_ingredients: Ingredient names required by the recipe
        inventory: Ingredient names the user has

    Returns:
        List[str]: Missing ingredients in recipe order, original spelling
    """
    _, missing = _partition(recipe_ingredients, inventory)
    return missing


def classify_match(
    match_score: int,
    high_threshold: int = HIGH_MATCH_THRESHOLD
) -> MatchLevel:
    """
    Bucket a match score for display.

    Args:
        match_score: Score between 0 and 100
        high_threshold: Lowest score that still counts as a high match

    Returns:
        MatchLevel: FULL at 100, HIGH from the threshold up, LOW below it
    """
    if match_score >= FULL_MATCH_SCORE:
        return MatchLevel.FULL
    if match_score >= high_threshold:
        return MatchLevel.HIGH
    return MatchLevel.LOW


def analyze_match(
    recipe_ingredients: Sequence[str],
    inventory: Sequence[str],
    high_threshold: int = HIGH_MATCH_THRESHOLD
) -> MatchResult:
    """
    Score a recipe and report which ingredients are present and missing.

    Args:
        recipe_ingredients: Ingredient names required by the recipe
        inventory: Ingredient names the user has
        high_threshold: Lowest score that counts as a high match

    Returns:
        MatchResult: Score, level, matched and missing ingredients
    """
    matched, missing = _partition(recipe_ingredients, inventory)
    match_score = safe_percentage(len(matched), len(recipe_ingredients))

    logger.debug(
        f"Matched {len(matched)}/{len(recipe_ingredients)} ingredients "
        f"against {len(inventory)} inventory item(s): {match_score}%"
    )

    return MatchResult(
        score=match_score,
        level=classify_match(match_score, high_threshold),
        matched=matched,
        missing=missing,
    )

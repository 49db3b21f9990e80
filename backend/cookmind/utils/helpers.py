"""
Common utility helper functions.

This module provides the small comparison and arithmetic helpers shared by
the match scorer, the substitution resolver and the recipe ranker.
"""

import math
import logging
from typing import Iterable, Optional

# Configure logging
logger = logging.getLogger(__name__)


def ingredients_match(first: str, second: str) -> bool:
    """
    Check whether two ingredient names refer to the same thing.

    Two names match when, after lower-casing both, either one contains the
    other. No trimming, stemming or edit distance is applied, so
    "kip" matches "kipfilet" but "kip" does not match "chickenfilet".

    Args:
        first: Ingredient name
        second: Ingredient name

    Returns:
        bool: True if either lower-cased name is a substring of the other

    Example:
        >>> ingredients_match("Tomaatjes", "tomaat")
        True
        >>> ingredients_match("kipfilet", "verse kipfilet borst")
        True
    """
    first_lower = first.lower()
    second_lower = second.lower()
    return first_lower in second_lower or second_lower in first_lower


def find_matching_entry(ingredient: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Return the first candidate that matches the ingredient, if any.

    Args:
        ingredient: Ingredient name to look for
        candidates: Names to compare against, in order

    Returns:
        Optional[str]: The first matching candidate or None
    """
    for candidate in candidates:
        if ingredients_match(ingredient, candidate):
            return candidate
    return None


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded up.

    Python's built-in round() uses banker's rounding (12.5 -> 12); match
    percentages are rounded the way the mobile client shows them (12.5 -> 13).

    Args:
        value: Value to round

    Returns:
        int: Rounded value
    """
    return int(math.floor(value + 0.5))


def safe_percentage(part: int, whole: int, default: int = 0) -> int:
    """
    Whole-number percentage of part over whole, default if whole is zero.

    Args:
        part: Numerator count
        whole: Denominator count
        default: Value returned when whole is zero (default: 0)

    Returns:
        int: Rounded percentage
    """
    if whole == 0:
        return default
    return round_half_up(part * 100 / whole)

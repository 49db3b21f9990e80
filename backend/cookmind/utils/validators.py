"""
Input validation utilities.

This module provides validation functions for user-supplied ingredient
data and substitution tables before they reach the engine.
"""

import re
import logging
from typing import List, Mapping, Sequence

# Configure logging
logger = logging.getLogger(__name__)

_DANGEROUS_PATTERNS = [
    r'<script',  # Script tags
    r'javascript:',  # JavaScript protocol
    r'\bon\w+\s*=',  # Event handlers (onclick, onload, etc)
]


def validate_ingredient_name(name: str, field: str = "Ingredient") -> bool:
    """
    Validate a single ingredient name.

    Empty names are allowed: the engine treats them as well-formed misses.

    Args:
        name: Ingredient name
        field: Label used in error messages

    Returns:
        bool: True if valid

    Raises:
        ValueError: If the name is not a string, too long, or unsafe
    """
    if not isinstance(name, str):
        raise ValueError(
            f"{field} must be a string, got {type(name).__name__}"
        )

    if len(name) > 200:
        raise ValueError(f"{field} cannot exceed 200 characters")

    for pattern in _DANGEROUS_PATTERNS:
        if re.search(pattern, name, re.IGNORECASE):
            raise ValueError(f"{field} contains invalid characters")

    return True


def validate_ingredient_list(ingredients: Sequence[str], max_items: int = 500) -> bool:
    """
    Validate an inventory or recipe ingredient list.

    Empty lists are valid: scoring defines a result for them.

    Args:
        ingredients: List of ingredient names
        max_items: Maximum number of entries (default: 500)

    Returns:
        bool: True if valid

    Raises:
        ValueError: If validation fails with specific error message
    """
    if len(ingredients) > max_items:
        raise ValueError(
            "Ingredient list cannot exceed {} items "
            "(got {})".format(max_items, len(ingredients))
        )

    for i, ingredient in enumerate(ingredients):
        validate_ingredient_name(ingredient, field=f"Ingredient at index {i}")

    logger.debug(f"Ingredient list validated: {len(ingredients)} ingredients")
    return True


def validate_substitution_mapping(mapping: Mapping[str, Sequence[str]]) -> bool:
    """
    Validate a raw substitution mapping before building a table from it.

    Ensures that:
    - Keys are non-empty strings
    - Every entry lists at least one substitute
    - Every substitute is a non-empty string

    Args:
        mapping: Ingredient name to substitute names

    Returns:
        bool: True if valid

    Raises:
        ValueError: If validation fails with specific error message
    """
    if not isinstance(mapping, Mapping):
        raise ValueError(
            f"Substitution table must be a mapping, got {type(mapping).__name__}"
        )

    for ingredient, substitutes in mapping.items():
        if not isinstance(ingredient, str) or not ingredient.strip():
            raise ValueError(f"Invalid ingredient key in substitution table: {ingredient!r}")

        if isinstance(substitutes, str) or not isinstance(substitutes, Sequence):
            raise ValueError(
                f"Substitutes for '{ingredient}' must be a list of names"
            )

        if len(substitutes) == 0:
            raise ValueError(f"Substitutes for '{ingredient}' cannot be empty")

        invalid: List[str] = [
            repr(s) for s in substitutes if not isinstance(s, str) or not s.strip()
        ]
        if invalid:
            raise ValueError(
                f"Invalid substitute(s) for '{ingredient}': {', '.join(invalid)}"
            )

    return True
